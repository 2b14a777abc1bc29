"""
Coach Running IA - VMA Calculator
フィールドテストからのVMA（最大有酸素速度）推定とトレーニングゾーン
"""
import math
from typing import List, Optional

import pandas as pd
from loguru import logger

from ..config import VMA_DEFAULT_FACTOR, VMA_DISTANCE_FACTORS, VMA_ZONES
from .calculator import round_half_up
from .pace import format_min_sec, speed_to_pace


def _to_float(value) -> Optional[float]:
    """数値入力を変換（"14,5" のような小数点カンマも可）"""
    if value is None:
        return None
    try:
        number = float(str(value).strip().replace(",", "."))
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def _finalize(vma: Optional[float]) -> Optional[float]:
    """小数1桁に丸める。0以下・計算不能はNone"""
    if vma is None or not math.isfinite(vma) or vma <= 0:
        return None
    return round_half_up(vma, 1)


def _parse_minutes(time_str) -> Optional[float]:
    """"mm:ss"（または "h:mm:ss"）を分に変換"""
    if time_str is None:
        return None
    parts = str(time_str).strip().replace("：", ":").split(":")
    try:
        values = [float(p) if p else 0.0 for p in parts]
    except ValueError:
        return None

    if len(values) == 1:
        return values[0]
    elif len(values) == 2:
        return values[0] + values[1] / 60
    elif len(values) == 3:
        return values[0] * 60 + values[1] + values[2] / 60
    return None


def vma_from_cooper(distance_m) -> Optional[float]:
    """クーパーテスト（12分走）: VMA = 距離(m) / 100"""
    distance = _to_float(distance_m)
    return _finalize(distance / 100 if distance is not None else None)


def vma_from_demi_cooper(distance_m) -> Optional[float]:
    """ハーフクーパー（6分走）: クーパーテストと同じ式を使用"""
    distance = _to_float(distance_m)
    return _finalize(distance / 100 if distance is not None else None)


def vma_from_vameval(last_stage_kmh) -> Optional[float]:
    """VAMEVAL: 最後に完了した段階の速度がそのままVMA"""
    return _finalize(_to_float(last_stage_kmh))


def vma_factor(distance_m: float, bands=VMA_DISTANCE_FACTORS, default: float = VMA_DEFAULT_FACTOR) -> float:
    """距離帯ごとの維持可能な%VMA（1500m以下1.00 … 10000m以下0.85）"""
    for upper, factor in bands:
        if distance_m <= upper:
            return factor
    return default


def vma_from_race_time(distance_m, time_str) -> Optional[float]:
    """レース・タイムトライアルの結果からVMAを推定

    平均速度を距離帯の係数で割り戻す。

    Args:
        distance_m: 距離（m）
        time_str: タイム（"mm:ss"）

    Returns:
        VMA km/h（小数1桁）。入力が不正な場合はNone
    """
    distance = _to_float(distance_m)
    total_minutes = _parse_minutes(time_str)
    if not distance or distance <= 0 or not total_minutes or total_minutes <= 0:
        return None

    speed = (distance / 1000) / (total_minutes / 60)
    return _finalize(speed / vma_factor(distance))


def estimate_vma(test_type: str, distance=None, time_str=None) -> Optional[float]:
    """テスト種別に応じてVMAを算出

    Args:
        test_type: "cooper" / "demicooper" / "vameval" / "time"
        distance: 距離（m）。vamevalの場合は最終段階の速度
        time_str: "time" の場合のタイム

    Returns:
        VMA km/h（算出できない場合はNone）
    """
    if test_type == "cooper":
        return vma_from_cooper(distance)
    elif test_type == "demicooper":
        return vma_from_demi_cooper(distance)
    elif test_type == "vameval":
        return vma_from_vameval(distance)
    elif test_type == "time":
        return vma_from_race_time(distance, time_str)

    logger.warning(f"Unknown VMA test type: {test_type!r}")
    return None


def training_zones(vma, zones=VMA_ZONES) -> List[dict]:
    """VMAから5つのトレーニングゾーンの速度帯を算出

    Returns:
        [{"name", "percent", "low", "high", "speed", "pace", "description"}, ...]
        VMAが不正な場合は空リスト
    """
    vma_value = _to_float(vma)
    if vma_value is None or vma_value <= 0:
        return []

    result = []
    for name, low_pct, high_pct, description in zones:
        low = vma_value * low_pct
        high = vma_value * high_pct
        # 速いほうのペースが先
        fast_min, fast_sec = speed_to_pace(high)
        slow_min, slow_sec = speed_to_pace(low)
        result.append({
            "name": name,
            "percent": f"{round(low_pct * 100)}-{round(high_pct * 100)}%",
            "low": round_half_up(low, 1),
            "high": round_half_up(high, 1),
            "speed": f"{round_half_up(low, 1):.1f} - {round_half_up(high, 1):.1f} km/h",
            "pace": f"{format_min_sec(fast_min, fast_sec)} - {format_min_sec(slow_min, slow_sec)} /km",
            "description": description,
        })
    return result


def zones_dataframe(vma, zones=VMA_ZONES) -> pd.DataFrame:
    """表示用のゾーン表"""
    rows = training_zones(vma, zones)
    return pd.DataFrame(
        [
            {
                "Zone": z["name"],
                "% VMA": z["percent"],
                "Vitesse": z["speed"],
                "Allure": z["pace"],
                "Utilisation": z["description"],
            }
            for z in rows
        ],
        columns=["Zone", "% VMA", "Vitesse", "Allure", "Utilisation"],
    )
