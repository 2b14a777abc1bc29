"""
Coach Running IA - Data Loader
保存済みプラン（JSON）の読み込みと検証
"""
import json
from typing import Optional, Tuple

from loguru import logger

from .config import WEEKDAY_OFFSETS
from .plan import TrainingPlan


def load_plan_json(content: str) -> Tuple[Optional[TrainingPlan], dict]:
    """JSON文字列からプランを読み込み、検証ログを生成

    Args:
        content: プランのJSON（アプリ保存形式、camelCaseキー）

    Returns:
        Tuple[plan, verification_log]
    """
    verification_log = {
        "success": False,
        "errors": [],
        "warnings": []
    }

    if not content or not str(content).strip():
        verification_log["errors"].append("Fichier de plan vide")
        return None, verification_log

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        logger.warning(f"Invalid plan JSON: {e}")
        verification_log["errors"].append(f"JSON invalide: {e.msg} (ligne {e.lineno})")
        return None, verification_log

    # {"plan": {...}} 形式のエクスポートにも対応
    if isinstance(data, dict) and isinstance(data.get("plan"), dict):
        data = data["plan"]

    if not isinstance(data, dict):
        verification_log["errors"].append("Le plan doit être un objet JSON")
        return None, verification_log

    raw_weeks = data.get("weeks")
    if raw_weeks is None:
        verification_log["warnings"].append("Aucune semaine dans le plan (calendrier vide)")
    elif not isinstance(raw_weeks, list):
        verification_log["warnings"].append(
            f"Format des semaines invalide ({type(raw_weeks).__name__}) : plan importé sans séance"
        )
    else:
        bad_weeks = [
            i + 1 for i, w in enumerate(raw_weeks)
            if not isinstance(w, dict)
            or (w.get("sessions") is not None and not isinstance(w["sessions"], list))
        ]
        if bad_weeks:
            verification_log["warnings"].append(f"Semaines ignorées ou sans séance (format invalide): {bad_weeks}")

    try:
        plan = TrainingPlan.from_dict(data)
    except (TypeError, ValueError) as e:
        logger.warning(f"Unreadable plan structure: {e}")
        verification_log["errors"].append(f"Structure de plan illisible: {e}")
        return None, verification_log

    if data.get("raceDate") and plan.race_date is None:
        verification_log["warnings"].append(f"Date de course illisible: {data.get('raceDate')}")
    if plan.race_date is None and plan.created_at is None:
        verification_log["warnings"].append("Ni date de course ni date de création : ancrage sur la semaine courante")

    # 週番号は1始まりの連番
    expected = list(range(1, plan.total_weeks + 1))
    actual = [week.week_number for week in plan.weeks]
    if actual != expected:
        verification_log["warnings"].append(f"Numéros de semaine non séquentiels: {actual}")

    unknown_days = sorted({
        session.day
        for week in plan.weeks
        for session in week.sessions
        if session.day not in WEEKDAY_OFFSETS
    })
    if unknown_days:
        verification_log["warnings"].append(
            f"Jours inconnus (placés le lundi): {', '.join(repr(d) for d in unknown_days)}"
        )

    logger.info(f"Loaded plan '{plan.name}': {plan.total_weeks} weeks, {plan.session_count} sessions")
    verification_log["success"] = True
    return plan, verification_log

