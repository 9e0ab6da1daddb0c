"""Deterministic health calculation tools.

Tools:
    evaluate_bowel_score: Score a period of bowel records on a 0-10 scale.
    score_breakdown: Same evaluation, with every intermediate value.
    classify_score: Colour tier and description for a bowel score.
    stool_form_info: Bristol scale entry for a stool form.
    color_risk: Risk tier of a stool colour.
    bmi_category: BMI band with colour and description.
    intensity_info: Symptom intensity entry (1-10).
    calc_bmi: Calculate Body Mass Index.
    age_years: Whole years since a birth date.
    build_body_snapshot: BMI, BMI band and age from profile + latest weight.
"""
from tools.bowel_score import (
    evaluate_bowel_score,
    score_breakdown,
    classify_score,
    frequency_score,
    record_quality_score,
    BowelScoreBreakdown,
    ScoreClassification,
)
from tools.classification import (
    stool_form_info,
    color_risk,
    bmi_category,
    intensity_info,
    intensity_color,
    option_label,
)
from tools.health_metrics import (
    calc_bmi,
    age_years,
    build_body_snapshot,
)

__all__ = [
    "evaluate_bowel_score",
    "score_breakdown",
    "classify_score",
    "frequency_score",
    "record_quality_score",
    "BowelScoreBreakdown",
    "ScoreClassification",
    "stool_form_info",
    "color_risk",
    "bmi_category",
    "intensity_info",
    "intensity_color",
    "option_label",
    "calc_bmi",
    "age_years",
    "build_body_snapshot",
]
