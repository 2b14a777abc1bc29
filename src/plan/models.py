"""
Coach Running IA - Plan Models
トレーニングプラン（週・セッション）のデータ構造
"""
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Optional, Tuple

import pandas as pd


def _text(value: Any) -> str:
    """欠損値を空文字にして文字列化"""
    if value is None:
        return ""
    return str(value)


def parse_datetime(value: Any) -> Optional[datetime]:
    """日時をdatetimeに変換

    ISO文字列・エポックミリ秒（数値/数字文字列）・date/datetimeを受け付ける。
    タイムゾーン付きの値はUTCに揃えてnaiveにする。

    Args:
        value: 変換対象

    Returns:
        datetime（変換できない場合はNone）
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, bool):
        return None

    try:
        if isinstance(value, (int, float)):
            ts = pd.to_datetime(value, unit="ms", utc=True)
        elif isinstance(value, str) and value.strip().isdigit():
            ts = pd.to_datetime(int(value.strip()), unit="ms", utc=True)
        else:
            ts = pd.to_datetime(str(value).strip())
    except (ValueError, TypeError, OverflowError):
        return None

    if pd.isna(ts):
        return None
    if ts.tzinfo is not None:
        ts = ts.tz_convert("UTC").tz_localize(None)
    return ts.to_pydatetime()


def parse_date(value: Any) -> Optional[date]:
    """日付部分のみを取り出す"""
    parsed = parse_datetime(value)
    return parsed.date() if parsed else None


@dataclass(frozen=True)
class Session:
    """1回のトレーニングセッション"""
    id: str
    day: str
    type: str = ""
    duration: str = ""
    intensity: str = ""
    title: str = ""
    warmup: str = ""
    main_set: str = ""
    cooldown: str = ""
    advice: str = ""
    distance: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "Session":
        return cls(
            id=_text(data.get("id")),
            day=_text(data.get("day")),
            type=_text(data.get("type")),
            duration=_text(data.get("duration")),
            intensity=_text(data.get("intensity")),
            title=_text(data.get("title")),
            warmup=_text(data.get("warmup")),
            main_set=_text(data.get("mainSet")),
            cooldown=_text(data.get("cooldown")),
            advice=_text(data.get("advice")),
            distance=_text(data.get("distance")),
        )


@dataclass(frozen=True)
class Week:
    """プランの1週間分"""
    week_number: int
    theme: str = ""
    sessions: Tuple[Session, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: dict, position: int = 1) -> "Week":
        """週データを変換

        Args:
            data: 週のdict（camelCaseキー）
            position: プラン内の位置（1始まり）。weekNumberが無い・不正な場合に使用
        """
        try:
            week_number = int(data.get("weekNumber"))
        except (TypeError, ValueError):
            week_number = position

        raw_sessions = data.get("sessions")
        if not isinstance(raw_sessions, list):
            raw_sessions = []
        sessions = tuple(Session.from_dict(s) for s in raw_sessions if isinstance(s, dict))
        return cls(week_number=week_number, theme=_text(data.get("theme")), sessions=sessions)


@dataclass(frozen=True)
class TrainingPlan:
    """トレーニングプラン（カレンダー出力・各種エクスポートの入力）"""
    id: str
    name: str
    created_at: Optional[datetime] = None
    start_date: Optional[date] = None
    race_date: Optional[date] = None
    weeks: Tuple[Week, ...] = field(default_factory=tuple)

    @property
    def total_weeks(self) -> int:
        return len(self.weeks)

    @property
    def session_count(self) -> int:
        return sum(len(week.sessions) for week in self.weeks)

    @classmethod
    def from_dict(cls, data: dict) -> "TrainingPlan":
        """保存形式（camelCaseのJSON）からプランを生成

        weeksが無い・リストでない場合は空のプランとして扱う。
        """
        raw_weeks = data.get("weeks")
        if not isinstance(raw_weeks, list):
            raw_weeks = []
        weeks = tuple(
            Week.from_dict(w, position=i + 1)
            for i, w in enumerate(raw_weeks)
            if isinstance(w, dict)
        )
        return cls(
            id=_text(data.get("id")),
            name=_text(data.get("name")),
            created_at=parse_datetime(data.get("createdAt")),
            start_date=parse_date(data.get("startDate")),
            race_date=parse_date(data.get("raceDate")),
            weeks=weeks,
        )
