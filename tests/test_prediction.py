"""
Coach Running IA - Race Predictor / Marathon Pace Tests
"""
import pytest
import sys
import os

# srcディレクトリをパスに追加
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.performance.marathon import marathon_pace_to_time, marathon_time_to_pace
from src.performance.prediction import (
    predict_all,
    predict_pace_per_km,
    predict_race_time,
    predictions_dataframe,
)


class TestPredictRaceTime:
    """Riegelの式のテスト"""

    def test_half_marathon_from_10k(self):
        """10km 50:00 → ハーフ"""
        predicted = predict_race_time(10000, 3000, 21097)

        assert predicted == pytest.approx(3000 * (21097 / 10000) ** 1.06)
        assert 6600 < predicted < 6650

    def test_same_distance(self):
        assert predict_race_time(5000, 1500, 5000) == pytest.approx(1500)

    def test_shorter_distance(self):
        assert predict_race_time(10000, 3000, 5000) < 1500

    def test_custom_exponent(self):
        assert predict_race_time(5000, 1200, 10000, exponent=1.0) == pytest.approx(2400)

    def test_invalid_input(self):
        assert predict_race_time(0, 3000, 21097) is None
        assert predict_race_time(10000, 0, 21097) is None
        assert predict_race_time(10000, 3000, -1) is None
        assert predict_race_time("abc", 3000, 21097) is None

    def test_pace_per_km(self):
        assert predict_pace_per_km(3000, 10000) == pytest.approx(300)
        assert predict_pace_per_km(None, 10000) is None


class TestPredictAll:
    """predict_all関数のテスト"""

    def test_all_distances(self):
        results = predict_all(10000, "50:00")

        assert [r["label"] for r in results] == [
            "1500m", "3000m", "5km", "10km", "Semi-marathon", "Marathon"
        ]

    def test_reference_distance_row(self):
        row = predict_all(10000, "50:00")[3]

        assert row["seconds"] == pytest.approx(3000)
        assert row["time"] == "50'00\""
        assert row["pace"] == "5'00\"/km"

    def test_half_marathon_row(self):
        row = predict_all(10000, "50:00")[4]

        assert row["seconds"] == pytest.approx(3000 * (21097 / 10000) ** 1.06)
        assert row["time"].startswith("1h50'")

    def test_seconds_input(self):
        assert predict_all(10000, 3000)[3]["time"] == "50'00\""

    def test_hms_reference(self):
        results = predict_all(21097, "1:45:00")
        assert results[4]["seconds"] == pytest.approx(6300)
        assert results[5]["time"].startswith("3h")

    def test_invalid_input(self):
        assert predict_all(10000, "") == []
        assert predict_all(10000, "abc") == []
        assert predict_all(10000, "50") == []
        assert predict_all(0, "50:00") == []

    def test_dataframe(self):
        df = predictions_dataframe(5000, "25:00")
        assert len(df) == 6
        assert list(df.columns) == ["Distance", "Temps prédit", "Allure"]
        assert df.iloc[2]["Temps prédit"] == "25'00\""

    def test_dataframe_invalid(self):
        assert predictions_dataframe(5000, "").empty


class TestMarathonPace:
    """マラソンペース計算のテスト"""

    def test_time_to_pace(self):
        result = marathon_time_to_pace("3:00:00")

        assert result["pace"] == "4'16\"/km"
        assert result["pace_seconds"] == pytest.approx(10800 / 42.195)

    def test_time_hours_minutes(self):
        """"3:00" は3時間として扱う"""
        assert marathon_time_to_pace("3:00")["pace"] == "4'16\"/km"

    def test_splits(self):
        splits = marathon_time_to_pace("3:00:00")["splits"]

        assert [s["km"] for s in splits] == [5, 10, 15, 20, 25, 30, 35, 40, 42.195]
        assert splits[0]["time"] == "0h21'20\""
        assert splits[-1]["time"] == "3h00'00\""

    def test_pace_to_time(self):
        result = marathon_pace_to_time("5:00")

        assert result["time_seconds"] == pytest.approx(12658.5)
        assert result["time"].startswith("3h30'")
        assert result["splits"][1]["time"] == "0h50'00\""

    def test_invalid_input(self):
        assert marathon_time_to_pace("") is None
        assert marathon_time_to_pace("abc") is None
        assert marathon_pace_to_time("5") is None
        assert marathon_pace_to_time("0:00") is None
