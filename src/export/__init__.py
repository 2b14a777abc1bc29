"""
Coach Running IA - Export Package
カレンダー (ICS)・TCX・Markdown へのエクスポート
"""
from .calendar import (
    day_offset,
    snap_to_monday,
    compute_anchor_monday,
    session_date,
    generate_calendar_document,
    calendar_filename,
    list_calendar_events,
)
from .tcx import (
    generate_tcx,
    generate_session_tcx,
    tcx_filename,
    session_tcx_filename,
    list_plan_sessions,
    session_label,
)
from .markdown import generate_markdown, create_md_download, markdown_filename
from .utils import sanitize_filename
