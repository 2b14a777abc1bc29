"""
Coach Running IA - Calendar Export
トレーニングプランをiCalendar (ICS) 形式に変換

プランの各セッションを終日イベントとして出力する。
日付は「第1週の月曜日（アンカー）」を基準に、週番号と曜日から算出する。
"""
from datetime import date, datetime, timedelta, timezone
from typing import Iterator, List, Optional, Tuple

from loguru import logger

from ..config import (
    DAYS_PER_WEEK,
    DEFAULT_WEEKDAY_OFFSET,
    ICS_CALSCALE,
    ICS_EVENT_STATUS,
    ICS_FILE_EXTENSION,
    ICS_FILE_PREFIX,
    ICS_LINE_BREAK,
    ICS_MAX_LINE_OCTETS,
    ICS_METHOD,
    ICS_PRODID,
    ICS_SUMMARY_ICON,
    ICS_UID_DOMAIN,
    ICS_VERSION,
    WEEKDAY_OFFSETS,
)
from ..plan import Session, TrainingPlan, Week
from .utils import sanitize_filename


def day_offset(day: str, weekday_offsets: dict = WEEKDAY_OFFSETS,
               default: int = DEFAULT_WEEKDAY_OFFSET) -> int:
    """曜日名を週内オフセットに変換（月曜=0 … 日曜=6）

    不明な曜日名はエラーにせず default（月曜）を返す。

    Args:
        day: 曜日名 (例: "Mardi")
        weekday_offsets: 曜日名 → オフセットの対応表
        default: 不明な曜日名の場合のオフセット

    Returns:
        0〜6のオフセット
    """
    offset = weekday_offsets.get(day)
    if offset is None:
        logger.warning(f"Unknown weekday {day!r}, defaulting to offset {default}")
        return default
    return offset


def snap_to_monday(d: date) -> date:
    """その週の月曜日に戻す（日曜は6日前の月曜）"""
    return d - timedelta(days=d.weekday())


def compute_anchor_monday(plan: TrainingPlan, today: Optional[date] = None) -> date:
    """プラン第1週の月曜日（アンカー）を算出

    レース日がある場合は、レースが最終週の最終日にあたるとみなして
    (週数×7−1)日さかのぼり、その週の月曜日に合わせる。
    レース日がない場合は作成日の週の月曜日。

    Args:
        plan: トレーニングプラン
        today: 作成日も無い場合の基準日（デフォルトは今日）

    Returns:
        アンカーとなる月曜日
    """
    if plan.race_date:
        days_to_subtract = len(plan.weeks or ()) * DAYS_PER_WEEK - 1
        candidate = plan.race_date - timedelta(days=days_to_subtract)
    elif plan.created_at:
        candidate = plan.created_at.date()
    else:
        candidate = today or date.today()
    return snap_to_monday(candidate)


def session_date(anchor: date, week_number: int, day: str,
                 weekday_offsets: dict = WEEKDAY_OFFSETS) -> date:
    """セッションの実施日 = アンカー + (週番号−1)×7 + 曜日オフセット"""
    offset = (week_number - 1) * DAYS_PER_WEEK + day_offset(day, weekday_offsets)
    return anchor + timedelta(days=offset)


def iter_session_dates(plan: TrainingPlan,
                       today: Optional[date] = None) -> Iterator[Tuple[Week, Session, date]]:
    """プラン順（週の昇順 → 週内の並び順）に (週, セッション, 日付) を返す

    日付での並べ替えや重複除去は行わない。
    """
    anchor = compute_anchor_monday(plan, today)
    for week in plan.weeks or ():
        for session in week.sessions:
            yield week, session, session_date(anchor, week.week_number, session.day)


def escape_text(value: str) -> str:
    """ICSのTEXT値をエスケープ（\\ ; , 改行）"""
    return (
        (value or "")
        .replace("\\", "\\\\")
        .replace(";", "\\;")
        .replace(",", "\\,")
        .replace("\r\n", "\\n")
        .replace("\n", "\\n")
    )


def fold_line(line: str, limit: int = ICS_MAX_LINE_OCTETS) -> str:
    """長い行をUTF-8のオクテット数で折り返す（継続行は空白で始まる）

    マルチバイト文字の途中では分割しない。
    """
    if len(line.encode("utf-8")) <= limit:
        return line

    chunks = []
    current = ""
    size = 0
    for char in line:
        char_size = len(char.encode("utf-8"))
        # 継続行は先頭の空白1オクテット分短い
        max_size = limit if not chunks else limit - 1
        if size + char_size > max_size:
            chunks.append(current)
            current = ""
            size = 0
        current += char
        size += char_size
    chunks.append(current)
    return (ICS_LINE_BREAK + " ").join(chunks)


def build_event_summary(session: Session) -> str:
    return escape_text(f"{ICS_SUMMARY_ICON} {session.title} ({session.type})")


def build_event_description(session: Session) -> str:
    """イベント説明文（種別・時間・ウォームアップ・メイン・クールダウン・アドバイス）"""
    return (
        f"Type: {escape_text(session.type)}\\n"
        f"Durée: {escape_text(session.duration)}\\n\\n"
        f"Échauffement: {escape_text(session.warmup)}\\n"
        f"Corps: {escape_text(session.main_set)}\\n"
        f"Retour au calme: {escape_text(session.cooldown)}\\n\\n"
        f"Conseil: {escape_text(session.advice)}"
    )


def format_event(session: Session, event_date: date, dtstamp: str) -> List[str]:
    return [
        "BEGIN:VEVENT",
        f"UID:{session.id}@{ICS_UID_DOMAIN}",
        f"DTSTAMP:{dtstamp}",
        f"DTSTART;VALUE=DATE:{event_date.strftime('%Y%m%d')}",
        f"SUMMARY:{build_event_summary(session)}",
        f"DESCRIPTION:{build_event_description(session)}",
        f"STATUS:{ICS_EVENT_STATUS}",
        "END:VEVENT",
    ]


def format_dtstamp(now: Optional[datetime] = None) -> str:
    """作成日時をUTCの YYYYMMDDTHHMMSSZ 形式に"""
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return now.strftime("%Y%m%dT%H%M%SZ")


def generate_calendar_document(plan: TrainingPlan, now: Optional[datetime] = None,
                               today: Optional[date] = None) -> str:
    """プランからICSドキュメントを生成（副作用なし）

    Args:
        plan: トレーニングプラン
        now: DTSTAMPに使う作成日時（naiveならUTCとみなす。デフォルトは現在時刻）
        today: レース日・作成日が無い場合のアンカー基準日

    Returns:
        ICS文字列（各行CRLF区切り、75オクテット超の行は折り返し）
    """
    dtstamp = format_dtstamp(now)
    lines = [
        "BEGIN:VCALENDAR",
        f"VERSION:{ICS_VERSION}",
        f"PRODID:{ICS_PRODID}",
        f"CALSCALE:{ICS_CALSCALE}",
        f"METHOD:{ICS_METHOD}",
    ]

    event_count = 0
    for _, session, event_date in iter_session_dates(plan, today):
        lines.extend(format_event(session, event_date, dtstamp))
        event_count += 1

    lines.append("END:VCALENDAR")
    logger.debug(f"Generated calendar for plan {plan.id!r}: {event_count} events")
    return ICS_LINE_BREAK.join(fold_line(line) for line in lines) + ICS_LINE_BREAK


def calendar_filename(plan: TrainingPlan) -> str:
    """ダウンロード用ファイル名 (例: "Programme_-_Semi_de_Lyon.ics")"""
    return f"{ICS_FILE_PREFIX}{sanitize_filename(plan.name)}{ICS_FILE_EXTENSION}"


def list_calendar_events(plan: TrainingPlan, today: Optional[date] = None) -> List[dict]:
    """プレビュー用にイベント一覧をdictのリストで返す"""
    return [
        {
            "date": event_date,
            "week": week.week_number,
            "day": session.day,
            "title": session.title,
            "type": session.type,
            "duration": session.duration,
        }
        for week, session, event_date in iter_session_dates(plan, today)
    ]
