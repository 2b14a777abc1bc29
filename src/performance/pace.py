"""
Coach Running IA - Pace Converter
ペース（分/km）と速度（km/h）の相互変換
"""
import math
from typing import Tuple

import pandas as pd

from ..config import (
    PACE_TABLE_END_MIN,
    PACE_TABLE_START_MIN,
    PACE_TABLE_STEP_MIN,
    SPEED_LEVELS,
)
from .calculator import round_half_up


def pace_to_speed(minutes, seconds=0) -> float:
    """ペースを速度に変換

    Args:
        minutes: 分
        seconds: 秒

    Returns:
        速度km/h（小数1桁）。ペースが0・不正な場合は0
    """
    try:
        total_minutes = float(minutes) + float(seconds or 0) / 60
    except (TypeError, ValueError):
        return 0.0

    if not math.isfinite(total_minutes) or total_minutes <= 0:
        return 0.0
    return round_half_up(60 / total_minutes, 1)


def speed_to_pace(speed_kmh, carry_minute: bool = False) -> Tuple[int, int]:
    """速度をペース (分, 秒) に変換

    秒の四捨五入で60になった場合、既定では秒を0にするだけで分は繰り上げない
    （既存の表示との互換のため）。carry_minute=Trueで分を繰り上げる。

    Args:
        speed_kmh: 速度km/h
        carry_minute: 60秒を1分に繰り上げるかどうか

    Returns:
        (分, 秒)。速度が0以下・不正な場合は (0, 0)
    """
    try:
        speed = float(speed_kmh)
    except (TypeError, ValueError):
        return 0, 0

    if not math.isfinite(speed) or speed <= 0:
        return 0, 0

    total_minutes = 60 / speed
    minutes = math.floor(total_minutes)
    seconds = int(round_half_up((total_minutes - minutes) * 60))
    if seconds == 60:
        seconds = 0
        if carry_minute:
            minutes += 1
    return int(minutes), seconds


def format_min_sec(minutes: int, seconds: int) -> str:
    return f"{minutes}:{seconds:02d}"


def speed_level(speed_kmh: float) -> str:
    """速度からランナーのレベルを判定"""
    for threshold, level in SPEED_LEVELS:
        if speed_kmh >= threshold:
            return level
    return SPEED_LEVELS[-1][1]


def pace_conversion_table(start: float = PACE_TABLE_START_MIN, end: float = PACE_TABLE_END_MIN,
                          step: float = PACE_TABLE_STEP_MIN) -> pd.DataFrame:
    """ペース換算表（4:00〜8:00/km、30秒刻み）"""
    rows = []
    count = int(round((end - start) / step)) + 1
    for i in range(count):
        pace = start + i * step
        minutes = math.floor(pace)
        seconds = int(round_half_up((pace - minutes) * 60))
        speed = pace_to_speed(minutes, seconds)
        rows.append({
            "Allure (min/km)": format_min_sec(minutes, seconds),
            "Vitesse (km/h)": speed,
            "Niveau": speed_level(speed),
        })
    return pd.DataFrame(rows)
