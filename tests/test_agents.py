"""Unit Tests for the record models and MetricsAgent.

Run with: pytest tests/ -v
"""
from dataclasses import FrozenInstanceError
from datetime import date

import pytest

from agents.metrics_agent import MetricsAgent
from core.errors import InvalidInputError
from models.records import (
    Bloating,
    DailyBowelRecord,
    Difficulty,
    DurationBand,
    StoolAmount,
    StoolColor,
    UserProfile,
    WeightRecord,
)


class TestRecordModels:
    """Parsing stored documents into records."""

    def test_from_dict_camel_case(self):
        record = DailyBowelRecord.from_dict({
            "date": "2024-06-01",
            "hasBowelMovement": True,
            "bloating": "sometimes",
            "bristolType": 4,
            "color": "brown",
            "duration": "1-3",
            "difficulty": "easy",
            "residualFeeling": "none",
            "amount": "littleMore",
        })
        assert record.date == date(2024, 6, 1)
        assert record.has_movement is True
        assert record.bloating == Bloating.SOMETIMES
        assert record.stool_form == 4
        assert record.color == StoolColor.BROWN
        assert record.duration == DurationBand.SHORT
        assert record.difficulty == Difficulty.EASY
        assert record.amount == StoolAmount.LITTLE_MORE

    def test_from_dict_no_movement_drops_details(self):
        record = DailyBowelRecord.from_dict({
            "date": "2024-06-02",
            "has_movement": False,
            "bloating": "yes",
            "color": "brown",
        })
        assert record.has_movement is False
        assert record.bloating == Bloating.YES
        assert record.color is None

    def test_from_dict_unknown_values_become_none(self):
        record = DailyBowelRecord.from_dict({
            "date": "2024-06-03",
            "hasMovement": True,
            "bloating": "maybe",
            "color": "purple",
            "durationBand": "ages",
            "stoolForm": "soft",
        })
        assert record.bloating == Bloating.NONE
        assert record.color is None
        assert record.duration is None
        assert record.stool_form is None

    def test_records_are_immutable(self):
        record = DailyBowelRecord(date(2024, 6, 1), False)
        with pytest.raises(FrozenInstanceError):
            record.has_movement = True

    @pytest.mark.parametrize("flag,expected", [
        (True, True),
        (False, False),
        ("true", True),
        ("True", True),
        ("false", False),
        ("no", False),
        (1, True),
        (0, False),
        (None, False),
    ])
    def test_movement_flag_parsing(self, flag, expected):
        record = DailyBowelRecord.from_dict({"date": "2024-06-01", "hasMovement": flag})
        assert record.has_movement is expected

    @pytest.mark.parametrize("raw,expected", [
        (4, 4),
        (4.0, 4),
        ("5", 5),
        (4.7, None),
        ("3.5", None),
        (True, None),
    ])
    def test_stool_form_must_be_whole(self, raw, expected):
        record = DailyBowelRecord.from_dict({"date": "2024-06-01", "hasMovement": True, "stoolForm": raw})
        assert record.stool_form == expected

    def test_bad_date_raises_invalid_input(self):
        with pytest.raises(InvalidInputError):
            DailyBowelRecord.from_dict({"date": "not-a-date", "hasMovement": True})
        with pytest.raises(InvalidInputError):
            DailyBowelRecord.from_dict({"hasMovement": False})

    def test_weight_without_value_raises_invalid_input(self):
        with pytest.raises(InvalidInputError):
            WeightRecord.from_dict({"date": "2024-06-01"})
        with pytest.raises(InvalidInputError):
            WeightRecord.from_dict({"date": "2024-06-01", "weight": "heavy"})

    def test_bad_height_raises_invalid_input(self):
        with pytest.raises(InvalidInputError):
            UserProfile.from_dict({"height": "tall"})

    def test_profile_from_dict(self):
        profile = UserProfile.from_dict({"birthDate": "1985-09-12", "gender": "male", "height": 180})
        assert profile.birth_date == date(1985, 9, 12)
        assert profile.sex == "male"
        assert profile.height_cm == 180.0

    def test_weight_from_dict(self):
        assert WeightRecord.from_dict({"date": "2024-06-01", "weight": 72}).weight_kg == 72.0


class TestMetricsAgent:
    """Snapshot building through the agent facade."""

    def test_snapshot_with_complete_data(self):
        context = {
            "profile": {"birth_date": "1990-01-15", "sex": "male", "height_cm": 175},
            "weights": [
                {"date": "2024-06-01", "weight": 72},
                {"date": "2024-06-20", "weight": 70},
            ],
            "bowel_records": [
                {"date": "2024-06-01", "hasMovement": True, "bloating": "none", "stoolForm": 4,
                 "duration": "1-3min", "difficulty": "easy", "residualFeeling": "none", "color": "brown"},
                {"date": "2024-06-02", "hasMovement": False, "bloating": "none"},
            ],
            "as_of": date(2024, 6, 30),
        }
        result = MetricsAgent().run(context)
        metrics = result["metrics"]

        assert metrics["bmi"] == 22.9
        assert metrics["bmi_category"]["category"] == "normal"
        assert metrics["age"] == 34
        assert metrics["weight_kg"] == 70
        assert metrics["bowel_score"] == 8.5
        assert metrics["bowel_tier"] == "green"
        assert metrics["bowel_breakdown"]["movement_count"] == 1
        assert "MetricsAgent" in result["debug"][-1]

    def test_snapshot_with_partial_data(self):
        """Missing data gives None values and the empty-period score."""
        result = MetricsAgent().run({})
        metrics = result["metrics"]

        assert metrics["bmi"] is None
        assert metrics["age"] is None
        assert metrics["bowel_score"] == 10.0

    def test_accepts_model_instances(self):
        context = {
            "profile": UserProfile(height_cm=180),
            "weights": [WeightRecord(date(2024, 6, 1), 81)],
            "bowel_records": [DailyBowelRecord(date(2024, 6, 1), True)],
        }
        metrics = MetricsAgent().run(context)["metrics"]
        assert metrics["bmi"] == 25.0
        assert metrics["bowel_score"] == 3.0

    def test_invalid_body_input_keeps_bowel_score(self):
        """Zero height blanks the body fields but the bowel score is still reported."""
        context = {
            "profile": {"height_cm": 0},
            "weights": [{"date": "2024-06-01", "weight": 70}],
            "bowel_records": [{"date": "2024-06-01", "hasMovement": True, "stoolForm": 4}],
        }
        result = MetricsAgent().run(context)
        metrics = result["metrics"]

        assert metrics["bmi"] is None
        assert metrics["age"] is None
        assert "height_cm" in metrics["error"]
        assert metrics["bowel_score"] == 5.2
        assert metrics["bowel_breakdown"]["movement_count"] == 1
        assert any("body metrics skipped" in line for line in result["debug"])

    def test_malformed_weight_document_uses_body_fallback(self):
        result = MetricsAgent().run({"weights": [{"date": "2024-06-01"}]})
        metrics = result["metrics"]

        assert metrics["weight_kg"] is None
        assert "Invalid weight" in metrics["error"]
        assert metrics["bowel_score"] == 10.0

    def test_malformed_bowel_record_uses_full_fallback(self):
        context = {"bowel_records": [{"date": "not-a-date", "hasMovement": True}]}
        result = MetricsAgent().run(context)
        metrics = result["metrics"]

        assert metrics["bowel_score"] is None
        assert metrics["bmi"] is None
        assert "Invalid date" in metrics["error"]
        assert "Fallback" in result["debug"][-1]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
