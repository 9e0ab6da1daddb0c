"""Bowel score evaluation: a 0-10 wellness score for a period of records.

The score has two independent parts:

- Frequency (0-3): how many records in the period had a movement, with a
  one-point penalty once three or more records report none.
- Quality: the average per-movement sub-score (at most 6.0) divided by a
  6.5-point normalizer and scaled onto a 7-point budget, so a flawless
  record contributes about 6.46.

Rounding happens once, on the final value.
"""
import logging
import math
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Sequence, Tuple

from models.records import (
    Bloating,
    DailyBowelRecord,
    Difficulty,
    DurationBand,
    ResidualFeeling,
    ScoreTier,
    StoolColor,
)

logger = logging.getLogger(__name__)

MAX_SCORE = 10.0
EMPTY_PERIOD_SCORE = 10.0

# (minimum movement ratio, frequency points), checked in order
FREQUENCY_THRESHOLDS: Tuple[Tuple[float, int], ...] = (
    (0.7, 3),
    (0.5, 2),
    (0.3, 1),
)
NO_MOVEMENT_PENALTY_COUNT = 3
NO_MOVEMENT_PENALTY = 1

# Per-record points top out at 6.0 but are still normalized by 6.5
RECORD_SCORE_NORMALIZER = 6.5
QUALITY_BUDGET = 7.0

# Per-record weights; anything not listed scores zero
STOOL_FORM_POINTS: Dict[int, float] = {3: 2, 4: 2, 2: 1, 5: 1}
DURATION_POINTS: Dict[DurationBand, float] = {
    DurationBand.SHORT: 1,
    DurationBand.MEDIUM: 0.5,
}
DIFFICULTY_POINTS: Dict[Difficulty, float] = {
    Difficulty.EASY: 1,
    Difficulty.LITTLE: 0.5,
}
RESIDUAL_FEELING_POINTS: Dict[ResidualFeeling, float] = {
    ResidualFeeling.NONE: 1,
    ResidualFeeling.LITTLE: 0.5,
}
COLOR_POINTS: Dict[StoolColor, float] = {
    StoolColor.BROWN: 1,
    StoolColor.YELLOW: 0.5,
    StoolColor.GREEN: 0.5,
}
BLOATING_PENALTY: Dict[Bloating, float] = {
    Bloating.YES: 0.5,
    Bloating.SOMETIMES: 0.25,
}


@dataclass(frozen=True)
class BowelScoreBreakdown:
    """Intermediate values of one evaluation, kept for display and debugging."""
    record_count: int
    movement_count: int
    no_movement_count: int
    bowel_ratio: Optional[float]
    frequency_score: int
    avg_record_score: Optional[float]
    normalized_quality: Optional[float]
    score: float


@dataclass(frozen=True)
class ScoreClassification:
    tier: ScoreTier
    color_hex: str
    description: str


# (minimum score, classification), checked in order; the last entry catches the rest
SCORE_CLASSIFICATIONS: Tuple[Tuple[float, ScoreClassification], ...] = (
    (8, ScoreClassification(ScoreTier.GREEN, "#10B981", "Bowel health looks good.")),
    (6, ScoreClassification(ScoreTier.AMBER, "#F59E0B", "Mostly fine, but there is room to improve.")),
    (4, ScoreClassification(ScoreTier.ORANGE, "#F97316", "Bowel health needs attention.")),
    (-math.inf, ScoreClassification(
        ScoreTier.RED, "#EF4444",
        "High constipation risk. Lifestyle changes are recommended.",
    )),
)


def _round1(value: float) -> float:
    """Round half up to one decimal place."""
    return math.floor(value * 10 + 0.5) / 10


def _lookup(table: Dict, value) -> float:
    try:
        return table.get(value, 0)
    except TypeError:
        # unhashable junk from partially populated data
        return 0


def frequency_score(records: Sequence[DailyBowelRecord]) -> int:
    """
    Stage A score for a non-empty period, before flooring at zero.

    The no-movement penalty counts no-movement records anywhere in the
    period; they do not have to be consecutive.
    """
    movements = sum(1 for r in records if r.has_movement)
    no_movements = len(records) - movements
    ratio = movements / len(records)

    score = 0
    for min_ratio, points in FREQUENCY_THRESHOLDS:
        if ratio >= min_ratio:
            score = points
            break

    if no_movements >= NO_MOVEMENT_PENALTY_COUNT:
        score -= NO_MOVEMENT_PENALTY
    return score


def record_quality_score(record: DailyBowelRecord) -> float:
    """Stage B sub-score of a single movement record, in [-0.5, 6.0]."""
    score = 0.0
    score += _lookup(STOOL_FORM_POINTS, record.stool_form)
    score += _lookup(DURATION_POINTS, record.duration)
    score += _lookup(DIFFICULTY_POINTS, record.difficulty)
    score += _lookup(RESIDUAL_FEELING_POINTS, record.residual_feeling)
    score += _lookup(COLOR_POINTS, record.color)
    score -= _lookup(BLOATING_PENALTY, record.bloating)
    return score


def score_breakdown(records: Iterable[DailyBowelRecord]) -> BowelScoreBreakdown:
    """Evaluate a period and return every intermediate value."""
    records = list(records)
    if not records:
        return BowelScoreBreakdown(
            record_count=0,
            movement_count=0,
            no_movement_count=0,
            bowel_ratio=None,
            frequency_score=0,
            avg_record_score=None,
            normalized_quality=None,
            score=EMPTY_PERIOD_SCORE,
        )

    movement_records = [r for r in records if r.has_movement]
    movement_count = len(movement_records)
    freq = frequency_score(records)

    avg = None
    normalized = None
    if movement_count == 0:
        score = float(max(0, freq))
    else:
        total = sum(record_quality_score(r) for r in movement_records)
        avg = total / movement_count
        normalized = (avg / RECORD_SCORE_NORMALIZER) * QUALITY_BUDGET
        # Unclamped frequency may drag the total below zero before the final clamp
        score = _round1(min(MAX_SCORE, max(0.0, freq + normalized)))

    breakdown = BowelScoreBreakdown(
        record_count=len(records),
        movement_count=movement_count,
        no_movement_count=len(records) - movement_count,
        bowel_ratio=movement_count / len(records),
        frequency_score=freq,
        avg_record_score=avg,
        normalized_quality=normalized,
        score=score,
    )
    logger.debug(f"Bowel score breakdown: {breakdown}")
    return breakdown


def evaluate_bowel_score(records: Iterable[DailyBowelRecord]) -> float:
    """
    Score a period of bowel records on a 0-10 scale (one decimal).

    An empty period scores 10.0. Record order does not matter.
    """
    return score_breakdown(records).score


def classify_score(score: float) -> ScoreClassification:
    """Colour tier and one-line description for a bowel score."""
    for min_score, classification in SCORE_CLASSIFICATIONS:
        if score >= min_score:
            return classification
    return SCORE_CLASSIFICATIONS[-1][1]
