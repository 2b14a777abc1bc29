"""
Coach Running IA - Time Calculator
タイム文字列の変換・表示形式・丸め処理
"""
import math
from typing import Optional

import pandas as pd


def round_half_up(value: float, digits: int = 0) -> float:
    """四捨五入（0.5は切り上げ）

    組み込みのround()は偶数丸めのため、表示値がずれないようにこちらを使う。
    """
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def time_to_seconds(time_str: str, hours_minutes: bool = False) -> Optional[int]:
    """時間文字列を秒に変換

    Args:
        time_str: 時間文字列 (例: "1:45:00", "50:30")
        hours_minutes: Trueなら2要素の入力を H:MM とみなす（例: "3:45" → 3時間45分）

    Returns:
        秒数（変換できない場合はNone）
    """
    # 文字列・数値以外（リスト等）は変換しない
    if not isinstance(time_str, str):
        if not pd.api.types.is_number(time_str) or pd.isna(time_str):
            return None

    time_str = str(time_str).strip()
    if not time_str:
        return None

    try:
        parts = [int(p) for p in time_str.replace("：", ":").split(":")]
    except ValueError:
        return None

    if any(p < 0 for p in parts):
        return None

    if len(parts) == 3:
        # H:MM:SS
        return parts[0] * 3600 + parts[1] * 60 + parts[2]
    elif len(parts) == 2:
        if hours_minutes:
            return parts[0] * 3600 + parts[1] * 60
        # M:SS or MM:SS
        return parts[0] * 60 + parts[1]
    return None


def seconds_to_time(seconds: float, include_hours: bool = False) -> str:
    """秒を時間文字列に変換

    Args:
        seconds: 秒数
        include_hours: 時間を含めるかどうか

    Returns:
        時間文字列 (例: "1:50:19" or "5:30")
    """
    if seconds is None:
        return "N/A"

    total = int(round_half_up(seconds))
    hours = total // 3600
    minutes = (total % 3600) // 60
    secs = total % 60

    if include_hours or hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    else:
        return f"{minutes}:{secs:02d}"


def format_race_time(seconds: float, include_hours: bool = False) -> str:
    """レースタイムの表示 (例: 1h50'19", 24'30")

    秒は四捨五入したうえで繰り上げる（60"にはならない）。
    """
    if seconds is None:
        return "N/A"

    total = int(round_half_up(seconds))
    hours = total // 3600
    minutes = (total % 3600) // 60
    secs = total % 60

    if include_hours or hours > 0:
        return f"{hours}h{minutes:02d}'{secs:02d}\""
    return f"{minutes}'{secs:02d}\""


def format_pace(seconds_per_km: float) -> str:
    """1kmあたりの秒数をペース表示に (例: 5'14"/km)"""
    if seconds_per_km is None:
        return "N/A"

    total = int(round_half_up(seconds_per_km))
    return f"{total // 60}'{total % 60:02d}\"/km"
