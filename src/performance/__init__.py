"""
Coach Running IA - Performance Package
ペース・VMA・タイム予測の計算
"""
from .calculator import (
    round_half_up,
    time_to_seconds,
    seconds_to_time,
    format_race_time,
    format_pace,
)
from .pace import (
    pace_to_speed,
    speed_to_pace,
    speed_level,
    pace_conversion_table,
)
from .vma import (
    vma_from_cooper,
    vma_from_demi_cooper,
    vma_from_vameval,
    vma_from_race_time,
    estimate_vma,
    training_zones,
    zones_dataframe,
)
from .prediction import (
    predict_race_time,
    predict_pace_per_km,
    predict_all,
    predictions_dataframe,
)
from .marathon import marathon_time_to_pace, marathon_pace_to_time
