"""
Coach Running IA - Marathon Pace
目標タイム ⇄ マラソンペースと5kmごとの通過タイム
"""
from typing import List, Optional

from ..config import LAST_SPLIT_KM, MARATHON_DISTANCE_KM, SPLIT_INTERVAL_KM
from .calculator import format_pace, format_race_time, time_to_seconds


def marathon_splits(pace_seconds: float, total_seconds: float) -> List[dict]:
    """5kmごと（40kmまで）とゴールの通過タイム"""
    splits = [
        {
            "km": km,
            "seconds": pace_seconds * km,
            "time": format_race_time(pace_seconds * km, include_hours=True),
        }
        for km in range(SPLIT_INTERVAL_KM, LAST_SPLIT_KM + 1, SPLIT_INTERVAL_KM)
    ]
    splits.append({
        "km": MARATHON_DISTANCE_KM,
        "seconds": total_seconds,
        "time": format_race_time(total_seconds, include_hours=True),
    })
    return splits


def marathon_time_to_pace(target_time: str) -> Optional[dict]:
    """目標タイムからマラソンペースを算出

    Args:
        target_time: "3:45:00" または "3:45"（時:分）

    Returns:
        {"pace_seconds", "pace", "splits"}（入力が不正な場合はNone）
    """
    total_seconds = time_to_seconds(target_time, hours_minutes=True)
    if not total_seconds:
        return None

    pace_seconds = total_seconds / MARATHON_DISTANCE_KM
    return {
        "pace_seconds": pace_seconds,
        "pace": format_pace(pace_seconds),
        "splits": marathon_splits(pace_seconds, total_seconds),
    }


def marathon_pace_to_time(target_pace: str) -> Optional[dict]:
    """ペース（"5:20" 分:秒/km）からマラソンのゴールタイムを算出

    Returns:
        {"time_seconds", "time", "splits"}（入力が不正な場合はNone）
    """
    pace_seconds = time_to_seconds(target_pace)
    if not pace_seconds:
        return None

    total_seconds = pace_seconds * MARATHON_DISTANCE_KM
    return {
        "time_seconds": total_seconds,
        "time": format_race_time(total_seconds, include_hours=True),
        "splits": marathon_splits(pace_seconds, total_seconds),
    }
