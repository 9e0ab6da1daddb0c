"""Data Models.

This module contains immutable dataclasses for the records the engine reads.

Models:
    DailyBowelRecord: One bowel event (or recorded absence) on a day.
    WeightRecord: A weigh-in.
    SymptomRecord: A symptom occurrence with intensity.
    UserProfile: Birth date, sex and height.
"""
from models.records import (
    Bloating,
    StoolColor,
    DurationBand,
    Difficulty,
    ResidualFeeling,
    StoolAmount,
    RiskTier,
    ScoreTier,
    DailyBowelRecord,
    WeightRecord,
    SymptomRecord,
    UserProfile,
    parse_date,
)

__all__ = [
    "Bloating",
    "StoolColor",
    "DurationBand",
    "Difficulty",
    "ResidualFeeling",
    "StoolAmount",
    "RiskTier",
    "ScoreTier",
    "DailyBowelRecord",
    "WeightRecord",
    "SymptomRecord",
    "UserProfile",
    "parse_date",
]
