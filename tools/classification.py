"""Static reference tables for stool form, stool colour, BMI and symptom intensity.

Every table is a fixed mapping keyed by the discrete value it describes, so a
lookup either hits an entry or falls into an explicit fallback. Nothing here
holds state.
"""
from bisect import bisect_right
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from core.errors import InvalidInputError
from models.records import (
    Bloating,
    Difficulty,
    DurationBand,
    ResidualFeeling,
    RiskTier,
    StoolAmount,
    StoolColor,
)


@dataclass(frozen=True)
class StoolFormInfo:
    form: int
    label: str
    description: str
    risk: RiskTier


@dataclass(frozen=True)
class BMICategory:
    category: str
    color_hex: str
    description: str


@dataclass(frozen=True)
class IntensityLevel:
    level: int
    label: str
    description: str
    color_hex: str


# ============================================================================
# BRISTOL STOOL SCALE
# ============================================================================

BRISTOL_TYPES: Dict[int, StoolFormInfo] = {
    1: StoolFormInfo(1, "Type 1", "Separate hard lumps, like nuts", RiskTier.HIGH),
    2: StoolFormInfo(2, "Type 2", "Sausage-shaped but lumpy", RiskTier.MEDIUM),
    3: StoolFormInfo(3, "Type 3", "Sausage-shaped with cracks on the surface", RiskTier.LOW),
    4: StoolFormInfo(4, "Type 4", "Smooth and soft, like a sausage or snake", RiskTier.NONE),
    5: StoolFormInfo(5, "Type 5", "Soft blobs with clear-cut edges", RiskTier.LOW),
    6: StoolFormInfo(6, "Type 6", "Mushy pieces with ragged edges", RiskTier.MEDIUM),
    7: StoolFormInfo(7, "Type 7", "Entirely liquid, no solid pieces", RiskTier.HIGH),
}


def stool_form_info(form: int) -> StoolFormInfo:
    """Look up the Bristol scale entry for a stool form (1-7)."""
    info = BRISTOL_TYPES.get(form)
    if info is None:
        raise InvalidInputError(f"Bristol stool form must be 1-7, got {form!r}")
    return info


# ============================================================================
# STOOL COLOUR
# ============================================================================

COLOR_RISK: Dict[StoolColor, RiskTier] = {
    StoolColor.YELLOW: RiskTier.LOW,
    StoolColor.BROWN: RiskTier.NONE,
    StoolColor.GREEN: RiskTier.LOW,
    StoolColor.BLACK: RiskTier.HIGH,
    StoolColor.RED: RiskTier.HIGH,
    StoolColor.WHITE: RiskTier.HIGH,
}


def color_risk(color: Any) -> RiskTier:
    """Risk tier of a stool colour; accepts a StoolColor or its string value."""
    risk = COLOR_RISK.get(color)
    if risk is None:
        raise InvalidInputError(f"Unknown stool color: {color!r}")
    return risk


# ============================================================================
# BMI (Asia-Pacific cut-offs: 23 / 25 / 30)
# ============================================================================

# Upper bounds (exclusive) of every band but the last
BMI_BOUNDS: Tuple[float, ...] = (18.5, 23.0, 25.0, 30.0)

BMI_CATEGORIES: Tuple[BMICategory, ...] = (
    BMICategory(
        "underweight",
        "#3B82F6",
        "Weight is below the normal range. A balanced diet and exercise can help you gain healthily.",
    ),
    BMICategory(
        "normal",
        "#10B981",
        "You are maintaining a healthy weight. Keep up your current habits.",
    ),
    BMICategory(
        "overweight",
        "#F59E0B",
        "Weight is slightly above the normal range. Diet adjustments and regular exercise are recommended.",
    ),
    BMICategory(
        "obese",
        "#F97316",
        "Weight loss is advised for your health. Consider talking to a professional.",
    ),
    BMICategory(
        "severely obese",
        "#EF4444",
        "Health risks are high. Please consult a medical professional.",
    ),
)


def bmi_category(bmi: float) -> BMICategory:
    """
    Classify a BMI value.

    Bands are half-open on the lower bound: 18.5 is normal, 23.0 is
    overweight, 30.0 is severely obese. Every real value maps to a band;
    rejecting non-physical weight/height is the caller's job.
    """
    return BMI_CATEGORIES[bisect_right(BMI_BOUNDS, bmi)]


# ============================================================================
# SYMPTOM INTENSITY (1-10)
# ============================================================================

INTENSITY_LEVELS: Dict[int, IntensityLevel] = {
    1: IntensityLevel(1, "Level 1", "Barely noticeable", "#10B981"),
    2: IntensityLevel(2, "Level 2", "Very mild", "#34D399"),
    3: IntensityLevel(3, "Level 3", "Slightly uncomfortable", "#6EE7B7"),
    4: IntensityLevel(4, "Level 4", "Uncomfortable but bearable", "#FCD34D"),
    5: IntensityLevel(5, "Level 5", "Moderate discomfort", "#FBBF24"),
    6: IntensityLevel(6, "Level 6", "Quite uncomfortable", "#F59E0B"),
    7: IntensityLevel(7, "Level 7", "Severe discomfort", "#F97316"),
    8: IntensityLevel(8, "Level 8", "Very severe discomfort", "#EF4444"),
    9: IntensityLevel(9, "Level 9", "Extreme pain", "#DC2626"),
    10: IntensityLevel(10, "Level 10", "Unbearable pain", "#B91C1C"),
}

DEFAULT_INTENSITY_LEVEL = 5


def intensity_info(level: int) -> IntensityLevel:
    """Intensity entry for a level; unknown levels fall back to the midpoint."""
    return INTENSITY_LEVELS.get(level, INTENSITY_LEVELS[DEFAULT_INTENSITY_LEVEL])


def intensity_color(level: int) -> str:
    return intensity_info(level).color_hex


# ============================================================================
# FORM OPTION LABELS (display only)
# ============================================================================

COLOR_LABELS = {
    StoolColor.YELLOW: "Yellow",
    StoolColor.BROWN: "Brown",
    StoolColor.GREEN: "Green",
    StoolColor.BLACK: "Black",
    StoolColor.RED: "Red",
    StoolColor.WHITE: "White / grey",
}

AMOUNT_LABELS = {
    StoolAmount.SMALL: "Small",
    StoolAmount.LITTLE_MORE: "A little more",
    StoolAmount.NORMAL: "Normal",
    StoolAmount.MUCH: "A lot",
    StoolAmount.VERY_MUCH: "Very much",
}

DURATION_LABELS = {
    DurationBand.SHORT: "1-3 minutes",
    DurationBand.MEDIUM: "3-5 minutes",
    DurationBand.LONG: "5+ minutes",
}

DIFFICULTY_LABELS = {
    Difficulty.EASY: "Almost no straining",
    Difficulty.LITTLE: "Some straining",
    Difficulty.HARD: "Heavy straining",
    Difficulty.VERY_HARD: "Took over 5 minutes",
}

RESIDUAL_FEELING_LABELS = {
    ResidualFeeling.NONE: "None",
    ResidualFeeling.LITTLE: "Slight",
    ResidualFeeling.MUCH: "Strong",
}

BLOATING_LABELS = {
    Bloating.NONE: "None",
    Bloating.SOMETIMES: "Sometimes",
    Bloating.YES: "Yes",
}

_OPTION_TABLES = {
    StoolColor: COLOR_LABELS,
    StoolAmount: AMOUNT_LABELS,
    DurationBand: DURATION_LABELS,
    Difficulty: DIFFICULTY_LABELS,
    ResidualFeeling: RESIDUAL_FEELING_LABELS,
    Bloating: BLOATING_LABELS,
}


def option_label(value: Any) -> Optional[str]:
    """Human-readable label for a record option, or None if it has none."""
    table = _OPTION_TABLES.get(type(value))
    if table is None:
        return None
    return table.get(value)
