"""
Coach Running IA - Export Utilities
ファイル名の整形など、エクスポート共通処理
"""
import re


def sanitize_filename(name: str, fallback: str = "plan") -> str:
    """ファイル名に使えない文字を除去し、空白をアンダースコアに置換

    Args:
        name: 元の名前（プラン名・セッション名）
        fallback: 整形後に空になった場合の名前

    Returns:
        整形済みの名前（例: "Marathon de Paris 2025" → "Marathon_de_Paris_2025"）
    """
    cleaned = re.sub(r"[^\w\s-]", "", name or "").strip()
    cleaned = re.sub(r"\s+", "_", cleaned)
    return cleaned or fallback
