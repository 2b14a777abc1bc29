"""
Coach Running IA - TCX Export
Garmin / Coros 向けのワークアウト (TrainingCenterDatabase XML) を生成
"""
import re
from typing import List, Tuple
from xml.sax.saxutils import escape

from loguru import logger

from ..config import (
    TCX_CREATOR_NAME,
    TCX_DEFAULT_DURATION_SECONDS,
    TCX_FILE_EXTENSION,
)
from ..plan import Session, TrainingPlan
from .utils import sanitize_filename

_DURATION_PATTERN = re.compile(r"(\d+)\s*(min|h|mn)", re.IGNORECASE)

# 強度 "Resting" として扱うセッション
_EASY_INTENSITY = "Facile"
_RECOVERY_TYPE = "Récupération"


def _xml(text: str) -> str:
    return escape(text or "", {'"': "&quot;"})


def parse_duration_seconds(duration: str, default: int = TCX_DEFAULT_DURATION_SECONDS) -> int:
    """自由記述の時間 (例: "45 min", "1h30") を秒に変換

    最初に見つかった「数値+単位」のみ使用。見つからなければ default。
    """
    match = _DURATION_PATTERN.search(duration or "")
    if not match:
        return default
    value = int(match.group(1))
    if match.group(2).lower() == "h":
        return value * 3600
    return value * 60


def session_intensity(session: Session) -> str:
    if session.intensity == _EASY_INTENSITY or session.type == _RECOVERY_TYPE:
        return "Resting"
    return "Active"


def _workout_xml(session: Session, week_number: int, intensity: str) -> str:
    notes = " | ".join(_xml(part) for part in (session.warmup, session.main_set, session.cooldown))
    return f"""    <Workout Sport="Running">
      <Name>S{week_number} - {_xml(session.title)}</Name>
      <Step xsi:type="Step_t">
        <StepId>1</StepId>
        <Name>{_xml(session.type)}</Name>
        <Duration xsi:type="Time_t">
          <Seconds>{parse_duration_seconds(session.duration)}</Seconds>
        </Duration>
        <Intensity>{intensity}</Intensity>
        <Target xsi:type="None_t"/>
      </Step>
      <Notes>{notes}</Notes>
      <Creator xsi:type="Device_t">
        <Name>{_xml(TCX_CREATOR_NAME)}</Name>
      </Creator>
    </Workout>"""


def _document(workouts: list) -> str:
    body = "\n".join(workouts)
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<TrainingCenterDatabase xmlns="http://www.garmin.com/xmlschemas/TrainingCenterDatabase/v2" '
        'xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance">\n'
        "  <Workouts>\n"
        f"{body}{chr(10) if body else ''}"
        "  </Workouts>\n"
        "</TrainingCenterDatabase>\n"
    )


def generate_tcx(plan: TrainingPlan) -> str:
    """プラン全体をTCXに変換（1セッション = 1ワークアウト）"""
    workouts = [
        _workout_xml(session, week.week_number, session_intensity(session))
        for week in plan.weeks or ()
        for session in week.sessions
    ]
    logger.debug(f"Generated TCX for plan {plan.id!r}: {len(workouts)} workouts")
    return _document(workouts)


def generate_session_tcx(session: Session, week_number: int) -> str:
    """単一セッションのTCX（強度は常にActive）"""
    return _document([_workout_xml(session, week_number, "Active")])


def tcx_filename(plan: TrainingPlan, target: str = "garmin") -> str:
    return f"{sanitize_filename(plan.name)}_{target}{TCX_FILE_EXTENSION}"


def session_tcx_filename(session: Session, week_number: int) -> str:
    return f"S{week_number}_{sanitize_filename(session.title, fallback='seance')}{TCX_FILE_EXTENSION}"


def list_plan_sessions(plan: TrainingPlan) -> List[Tuple[int, Session]]:
    """セッション単位のTCX出力用に (週番号, セッション) をプラン順で返す"""
    return [(week.week_number, session) for week in plan.weeks or () for session in week.sessions]


def session_label(week_number: int, session: Session) -> str:
    """セッション選択用の表示名 (例: "S1 · Mardi · Footing")"""
    return f"S{week_number} · {session.day} · {session.title or session.type}"
