"""
Coach Running IA - Race Predictor
Riegelの式によるレースタイム予測
"""
import math
from typing import List, Optional

import pandas as pd

from ..config import REFERENCE_DISTANCES, RIEGEL_EXPONENT
from .calculator import format_pace, format_race_time, seconds_to_time, time_to_seconds


def _positive(value) -> Optional[float]:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number) or number <= 0:
        return None
    return number


def predict_race_time(ref_distance_m, ref_time_s, target_distance_m,
                      exponent: float = RIEGEL_EXPONENT) -> Optional[float]:
    """Riegelの式: T2 = T1 × (D2 / D1) ^ 1.06

    Args:
        ref_distance_m: 基準レースの距離（m）
        ref_time_s: 基準レースのタイム（秒）
        target_distance_m: 予測する距離（m）
        exponent: 指数

    Returns:
        予測タイム（秒、丸めなし）。入力が0以下・不正な場合はNone
    """
    ref_distance = _positive(ref_distance_m)
    ref_time = _positive(ref_time_s)
    target_distance = _positive(target_distance_m)
    if ref_distance is None or ref_time is None or target_distance is None:
        return None
    return ref_time * math.pow(target_distance / ref_distance, exponent)


def predict_pace_per_km(predicted_time_s, target_distance_m) -> Optional[float]:
    """予測タイムから1kmあたりの秒数"""
    predicted_time = _positive(predicted_time_s)
    target_distance = _positive(target_distance_m)
    if predicted_time is None or target_distance is None:
        return None
    return predicted_time / (target_distance / 1000)


def predict_all(ref_distance_m, ref_time, distances=REFERENCE_DISTANCES,
                exponent: float = RIEGEL_EXPONENT) -> List[dict]:
    """各距離の予測タイムとペースを算出

    Args:
        ref_distance_m: 基準レースの距離（m）
        ref_time: 基準タイム（"50:30" / "1:45:00" 形式の文字列、または秒数）
        distances: (距離m, ラベル) のリスト

    Returns:
        [{"distance_m", "label", "seconds", "time", "clock", "pace_seconds", "pace"}, ...]
        入力が不正な場合は空リスト
    """
    ref_time_s = time_to_seconds(ref_time) if isinstance(ref_time, str) else ref_time
    if not _positive(ref_distance_m) or not _positive(ref_time_s):
        return []

    results = []
    for distance_m, label in distances:
        predicted = predict_race_time(ref_distance_m, ref_time_s, distance_m, exponent)
        pace = predict_pace_per_km(predicted, distance_m)
        results.append({
            "distance_m": distance_m,
            "label": label,
            "seconds": predicted,
            "time": format_race_time(predicted),
            "clock": seconds_to_time(predicted),
            "pace_seconds": pace,
            "pace": format_pace(pace),
        })
    return results


def predictions_dataframe(ref_distance_m, ref_time, distances=REFERENCE_DISTANCES) -> pd.DataFrame:
    """表示用の予測表"""
    rows = predict_all(ref_distance_m, ref_time, distances)
    return pd.DataFrame(
        [{"Distance": r["label"], "Temps prédit": r["time"], "Allure": r["pace"]} for r in rows],
        columns=["Distance", "Temps prédit", "Allure"],
    )
