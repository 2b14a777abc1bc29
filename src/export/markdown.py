"""
Coach Running IA - Markdown Export
印刷・共有用のMarkdown版プラン
"""
from typing import Optional

from ..config import APP_NAME, MD_FILE_EXTENSION
from ..plan import TrainingPlan
from .utils import sanitize_filename


def generate_markdown(plan: TrainingPlan, paces: Optional[dict] = None) -> str:
    """プランをMarkdownに変換

    Args:
        plan: トレーニングプラン
        paces: 任意の目安ペース {"Endurance (EF)": "6'10\\"/km", ...}

    Returns:
        Markdown文字列
    """
    lines = [f"# 🏃 {plan.name}", ""]
    if plan.race_date:
        lines.append(f"**Date de course :** {plan.race_date.strftime('%d/%m/%Y')}")
    lines.append(f"**Durée :** {plan.total_weeks} semaines")
    lines.append("")

    if paces:
        lines.append("## 📊 Mes allures")
        lines.append("")
        for label, value in paces.items():
            lines.append(f"- **{label} :** {value}")
        lines.append("")

    for week in plan.weeks or ():
        title = f"## Semaine {week.week_number}"
        if week.theme:
            title += f" - {week.theme}"
        lines.append(title)
        lines.append("")
        for session in week.sessions:
            lines.append(f"### {session.day} - {session.title}")
            lines.append("")
            lines.append(f"**Type :** {session.type} | **Durée :** {session.duration}")
            lines.append("")
            if session.warmup:
                lines.append(f"- **Échauffement :** {session.warmup}")
            lines.append(f"- **Séance :** {session.main_set}")
            if session.cooldown:
                lines.append(f"- **Retour au calme :** {session.cooldown}")
            if session.advice:
                lines.append(f"- *💡 {session.advice}*")
            lines.append("")

    lines.append("---")
    lines.append(f"Généré par {APP_NAME}")
    return "\n".join(lines) + "\n"


def create_md_download(content: str) -> bytes:
    """Markdown文字列をダウンロード用バイト列に"""
    return content.encode("utf-8")


def markdown_filename(plan: TrainingPlan) -> str:
    return f"{sanitize_filename(plan.name)}{MD_FILE_EXTENSION}"
