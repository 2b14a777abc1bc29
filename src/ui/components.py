"""
Coach Running IA - UI Components
再利用可能なUIコンポーネント
"""
from datetime import datetime, timezone

import pandas as pd
import streamlit as st
from loguru import logger

from ..config import (
    APP_NAME,
    APP_VERSION,
    ICS_MIME_TYPE,
    MD_MIME_TYPE,
    TCX_MIME_TYPE,
    TCX_TARGETS,
)
from ..export import (
    calendar_filename,
    create_md_download,
    generate_calendar_document,
    generate_markdown,
    generate_session_tcx,
    generate_tcx,
    list_calendar_events,
    list_plan_sessions,
    markdown_filename,
    session_label,
    session_tcx_filename,
    tcx_filename,
)
from ..plan import TrainingPlan


def render_header() -> None:
    """アプリヘッダーを表示"""
    st.markdown(f'<h1 class="main-header">🏃 {APP_NAME}</h1>', unsafe_allow_html=True)
    st.markdown(f'<p class="version-tag">Version {APP_VERSION}</p>', unsafe_allow_html=True)
    st.markdown(
        '<p class="sub-header">Exportez votre plan dans votre agenda et calculez vos allures</p>',
        unsafe_allow_html=True
    )


def render_footer() -> None:
    st.markdown("---")
    st.markdown(
        f'<p style="text-align: center; color: #888; font-size: 0.85rem; margin-top: 1rem;">'
        f'{APP_NAME} v{APP_VERSION}</p>',
        unsafe_allow_html=True
    )


def render_verification_log(verification_log: dict) -> None:
    """プラン読み込み結果のエラー・警告を表示"""
    for error in verification_log.get("errors", []):
        st.error(error)
    for warning in verification_log.get("warnings", []):
        st.warning(warning)


def render_plan_summary(plan: TrainingPlan) -> None:
    """プラン概要とイベント一覧のプレビュー"""
    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Semaines", plan.total_weeks)
    with col2:
        st.metric("Séances", plan.session_count)
    with col3:
        st.metric("Course", plan.race_date.strftime("%d/%m/%Y") if plan.race_date else "—")

    events = list_calendar_events(plan)
    if events:
        st.dataframe(pd.DataFrame(events), use_container_width=True, hide_index=True)
    else:
        st.info("Aucune séance dans ce plan.")


def export_calendar(plan: TrainingPlan) -> None:
    """カレンダー (ICS) のダウンロードボタン

    生成は generate_calendar_document に任せ、ここでは保存操作のみ扱う。
    """
    content = generate_calendar_document(plan, now=datetime.now(timezone.utc))
    clicked = st.download_button(
        label="📅 Ajouter à mon agenda (.ics)",
        data=content.encode("utf-8"),
        file_name=calendar_filename(plan),
        mime=ICS_MIME_TYPE,
        use_container_width=True
    )
    if clicked:
        logger.info(f"Calendar downloaded for plan {plan.id!r}")


def render_export_buttons(plan: TrainingPlan) -> None:
    """ICS・TCX・Markdownのダウンロードボタンを並べて表示"""
    col1, col2, col3 = st.columns(3)

    with col1:
        export_calendar(plan)

    with col2:
        target = st.selectbox("Montre", TCX_TARGETS, format_func=str.capitalize)
        st.download_button(
            label="⌚ Exporter vers la montre (.tcx)",
            data=generate_tcx(plan).encode("utf-8"),
            file_name=tcx_filename(plan, target),
            mime=TCX_MIME_TYPE,
            use_container_width=True
        )

    with col3:
        st.download_button(
            label="📥 Télécharger le plan (.md)",
            data=create_md_download(generate_markdown(plan)),
            file_name=markdown_filename(plan),
            mime=MD_MIME_TYPE,
            use_container_width=True
        )

    render_session_tcx_download(plan)


def render_session_tcx_download(plan: TrainingPlan) -> None:
    """1セッションだけをTCXでダウンロード"""
    sessions = list_plan_sessions(plan)
    if not sessions:
        return

    index = st.selectbox(
        "Séance à envoyer sur la montre",
        list(range(len(sessions))),
        format_func=lambda i: session_label(*sessions[i]),
    )
    week_number, session = sessions[index]
    clicked = st.download_button(
        label="⌚ Exporter cette séance (.tcx)",
        data=generate_session_tcx(session, week_number).encode("utf-8"),
        file_name=session_tcx_filename(session, week_number),
        mime=TCX_MIME_TYPE,
    )
    if clicked:
        logger.info(f"Session TCX downloaded: {session.id!r} (week {week_number})")


def render_result_box(title: str, value: str) -> None:
    """計算結果のハイライト表示"""
    st.markdown(f"""
<div class="result-box">
    <div style="font-size: 0.9rem;">{title}</div>
    <div style="font-size: 2rem; font-weight: bold;">{value}</div>
</div>
    """, unsafe_allow_html=True)
