"""
Coach Running IA - Streamlit App
トレーニングプランのカレンダー出力とランニング計算ツール
"""

import streamlit as st
from loguru import logger

from src.config import (
    APP_NAME,
    APP_VERSION,
    LOG_FILE,
    LOG_LEVEL,
    REFERENCE_DISTANCES,
)
from src.data_loader import load_plan_json
from src.logger import setup_logger
from src.performance import (
    estimate_vma,
    marathon_pace_to_time,
    marathon_time_to_pace,
    pace_conversion_table,
    pace_to_speed,
    predictions_dataframe,
    speed_to_pace,
    zones_dataframe,
)
from src.ui.components import (
    render_export_buttons,
    render_footer,
    render_header,
    render_plan_summary,
    render_result_box,
    render_verification_log,
)

# =============================================
# ページ設定
# =============================================
st.set_page_config(
    page_title=f"{APP_NAME} v{APP_VERSION}",
    page_icon="🏃",
    layout="wide",
    initial_sidebar_state="collapsed"
)

st.markdown("""
<style>
    .main-header {
        font-size: 2.5rem;
        color: #F97316;
        text-align: center;
        margin-bottom: 0.5rem;
    }
    .version-tag {
        font-size: 0.9rem;
        color: #888;
        text-align: center;
        margin-bottom: 0.5rem;
    }
    .sub-header {
        font-size: 1.2rem;
        color: #666;
        text-align: center;
        margin-bottom: 2rem;
    }
    .result-box {
        background: linear-gradient(135deg, #F97316 0%, #EA580C 100%);
        color: white;
        padding: 1.5rem;
        border-radius: 12px;
        margin: 1rem 0;
        text-align: center;
    }
</style>
""", unsafe_allow_html=True)


@st.cache_resource
def init_logging() -> None:
    setup_logger(level=LOG_LEVEL, log_file=LOG_FILE)


def init_session_state():
    """セッション状態の初期化"""
    if "plan" not in st.session_state:
        st.session_state.plan = None
    if "plan_log" not in st.session_state:
        st.session_state.plan_log = None
    if "vma" not in st.session_state:
        st.session_state.vma = None


# =============================================
# タブ: プラン出力
# =============================================
def render_plan_tab():
    st.markdown("### 📅 Exporter mon plan")
    uploaded = st.file_uploader("Plan d'entraînement (JSON)", type=["json"])

    if uploaded is not None:
        content = uploaded.getvalue().decode("utf-8", errors="replace")
        plan, verification_log = load_plan_json(content)
        if plan is None:
            logger.warning(f"Rejected plan upload {uploaded.name!r}: {verification_log['errors']}")
        st.session_state.plan = plan
        st.session_state.plan_log = verification_log

    if st.session_state.plan_log:
        render_verification_log(st.session_state.plan_log)

    plan = st.session_state.plan
    if plan is None:
        st.info("Importez un plan pour l'ajouter à votre agenda.")
        return

    st.markdown(f"#### {plan.name}")
    render_plan_summary(plan)
    st.markdown("---")
    render_export_buttons(plan)


# =============================================
# タブ: ペース換算
# =============================================
def render_pace_tab():
    st.markdown("### ⏱ Convertisseur allure ↔ vitesse")
    mode = st.radio("Mode", ["Allure → Vitesse", "Vitesse → Allure"], horizontal=True)

    if mode == "Allure → Vitesse":
        col1, col2 = st.columns(2)
        with col1:
            pace_min = st.number_input("Minutes", min_value=0, max_value=15, value=5)
        with col2:
            pace_sec = st.number_input("Secondes", min_value=0, max_value=59, value=30)
        render_result_box("Vitesse", f"{pace_to_speed(pace_min, pace_sec)} km/h")
    else:
        speed = st.number_input("Vitesse (km/h)", min_value=0.0, max_value=25.0, value=10.9, step=0.1)
        minutes, seconds = speed_to_pace(speed)
        render_result_box("Allure", f"{minutes}:{seconds:02d} min/km")

    with st.expander("📋 Table de conversion"):
        st.dataframe(pace_conversion_table(), use_container_width=True, hide_index=True)


# =============================================
# タブ: VMA
# =============================================
def render_vma_tab():
    st.markdown("### 🫁 Calculateur VMA")
    test_labels = {
        "cooper": "Test Cooper (12 min)",
        "demicooper": "Demi-Cooper (6 min)",
        "vameval": "VAMEVAL (palier)",
        "time": "Temps de course",
    }
    test_type = st.selectbox("Méthode de calcul", list(test_labels), format_func=test_labels.get)

    time_str = None
    if test_type == "cooper":
        distance = st.text_input("Distance parcourue en 12 minutes (mètres)", placeholder="Ex: 2800")
    elif test_type == "demicooper":
        distance = st.text_input("Distance parcourue en 6 minutes (mètres)", placeholder="Ex: 1500")
    elif test_type == "vameval":
        distance = st.text_input("Dernier palier atteint (km/h)", placeholder="Ex: 14.5")
    else:
        distance = st.selectbox("Distance de la course", ["1500", "3000", "5000", "10000"])
        time_str = st.text_input("Temps réalisé (mm:ss)", placeholder="Ex: 25:30")

    if st.button("Calculer ma VMA", type="primary"):
        st.session_state.vma = estimate_vma(test_type, distance, time_str)
        if st.session_state.vma is None:
            st.error("Valeurs invalides : vérifiez la distance et le temps.")

    if st.session_state.vma:
        render_result_box("Votre VMA estimée", f"{st.session_state.vma} km/h")
        st.markdown("#### Vos zones d'entraînement")
        st.dataframe(zones_dataframe(st.session_state.vma), use_container_width=True, hide_index=True)


# =============================================
# タブ: タイム予測
# =============================================
def render_predictor_tab():
    st.markdown("### 🏁 Prédicteur de temps")
    labels = dict(REFERENCE_DISTANCES)
    col1, col2 = st.columns(2)
    with col1:
        ref_distance = st.selectbox("Distance de référence", list(labels), index=3, format_func=labels.get)
    with col2:
        ref_time = st.text_input("Votre temps sur cette distance", placeholder="Ex: 50:30 ou 1:45:00")

    if st.button("Calculer mes prédictions", type="primary"):
        df = predictions_dataframe(ref_distance, ref_time)
        if df.empty:
            st.error("Temps invalide (format mm:ss ou h:mm:ss).")
        else:
            st.dataframe(df, use_container_width=True, hide_index=True)


# =============================================
# タブ: マラソンペース
# =============================================
def render_marathon_tab():
    st.markdown("### 🎯 Allure marathon")
    mode = st.radio("Mode", ["Temps → Allure", "Allure → Temps"], horizontal=True, key="marathon_mode")

    if mode == "Temps → Allure":
        target = st.text_input("Objectif temps marathon (hh:mm:ss ou hh:mm)", placeholder="Ex: 3:45:00")
        result = marathon_time_to_pace(target) if target else None
        if result:
            render_result_box("Allure cible", result["pace"])
    else:
        target = st.text_input("Allure cible (mm:ss par km)", placeholder="Ex: 5:20")
        result = marathon_pace_to_time(target) if target else None
        if result:
            render_result_box("Temps final", result["time"])

    if target and result is None:
        st.error("Format invalide.")
    if result:
        st.dataframe(
            [{"Km": s["km"], "Passage": s["time"]} for s in result["splits"]],
            use_container_width=True,
            hide_index=True
        )


# =============================================
# メイン UI
# =============================================
def main():
    init_logging()
    init_session_state()
    render_header()

    tabs = st.tabs(["📅 Plan", "⏱ Allure", "🫁 VMA", "🏁 Prédicteur", "🎯 Marathon"])
    with tabs[0]:
        render_plan_tab()
    with tabs[1]:
        render_pace_tab()
    with tabs[2]:
        render_vma_tab()
    with tabs[3]:
        render_predictor_tab()
    with tabs[4]:
        render_marathon_tab()

    render_footer()


if __name__ == "__main__":
    main()
