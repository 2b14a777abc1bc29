"""
Coach Running IA - Plan Package
トレーニングプランのデータモデル
"""
from .models import (
    Session,
    Week,
    TrainingPlan,
    parse_datetime,
    parse_date,
)
