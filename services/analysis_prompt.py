"""Symptom statistics and the analysis prompt sent to a text-generation service.

Only the prompt text is built here. Sending it and interpreting the reply
belong to the caller.
"""
import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence

from core.errors import InvalidInputError
from models.records import SymptomRecord, UserProfile
from tools.health_metrics import age_years

logger = logging.getLogger(__name__)

SEX_LABELS = {"male": "Male", "female": "Female"}

ANALYSIS_REQUESTS = (
    (
        "Severity",
        "Assess overall severity from the recorded intensities, considering the trend and the average.",
    ),
    (
        "Possible triggers",
        "Estimate the pattern of onset and likely causes. Note whether symptoms cluster at certain times or situations.",
    ),
    (
        "Patterns",
        "Describe patterns by time of day, frequency and intensity change. Point out any periodicity or unusual patterns.",
    ),
    (
        "Hospital visit",
        "Judge whether a hospital visit is needed now and, if so, which department to visit.",
    ),
    (
        "Notes for the doctor",
        "Summarise in five lines or fewer what the patient should tell the doctor.",
    ),
)

DISCLAIMER = (
    "Note: this analysis is for reference only. "
    "Always consult a medical professional for an accurate diagnosis."
)


@dataclass(frozen=True)
class SymptomStats:
    avg: float
    max: int
    min: int
    count: int
    medication_rate: float   # percent of records where medication was taken


def summarize_symptoms(symptoms: Sequence[SymptomRecord]) -> SymptomStats:
    """Average/max/min intensity, count and medication rate for a set of symptoms."""
    if not symptoms:
        raise InvalidInputError("No symptom records to summarise")

    intensities = [s.intensity for s in symptoms]
    took = sum(1 for s in symptoms if s.took_medication)
    return SymptomStats(
        avg=sum(intensities) / len(intensities),
        max=max(intensities),
        min=min(intensities),
        count=len(symptoms),
        medication_rate=took / len(symptoms) * 100,
    )


def format_symptom_line(symptom: SymptomRecord) -> str:
    """One bullet line per symptom, e.g. '- 2024-06-01 14:00: intensity 6/10, medication taken'."""
    when = f"{symptom.date.isoformat()} {symptom.occurred_at}" if symptom.occurred_at else symptom.date.isoformat()
    medication = "medication taken" if symptom.took_medication else "no medication"
    line = f"- {when}: intensity {symptom.intensity}/10, {medication}"
    if symptom.description:
        line += f", details: {symptom.description}"
    return line


def build_analysis_prompt(
    disease_name: str,
    medication: Optional[str],
    symptoms: Sequence[SymptomRecord],
    profile: UserProfile,
    period_days: int,
    as_of: Any = None,
) -> str:
    """
    Build the structured analysis prompt for a condition's symptom history.

    Raises:
        InvalidInputError: if there are no symptoms, or the profile has no
        birth date.
    """
    if not symptoms:
        raise InvalidInputError("No symptom records to analyse")
    if profile.birth_date is None:
        raise InvalidInputError("Profile has no birth date")

    age = age_years(profile.birth_date, as_of)
    sex = SEX_LABELS.get((profile.sex or "").lower(), "Unknown")
    symptom_lines = "\n".join(format_symptom_line(s) for s in symptoms)

    requests: List[str] = []
    for i, (title, instruction) in enumerate(ANALYSIS_REQUESTS, start=1):
        requests.append(f"{i}. **{title}**: {instruction}")
    requests_text = "\n\n".join(requests)
    medication_text = medication or "None"

    prompt = f"""You are a medical AI assistant that analyses personal health data. Analyse the patient information and symptom records below.

## Patient
- Sex: {sex}
- Age: {age}
- Condition: {disease_name}
- Medication: {medication_text}

## Symptom records (last {period_days} days)
{symptom_lines}

## Requested analysis
Cover the following {len(ANALYSIS_REQUESTS)} items. Give each a clear heading and use language the patient can understand.

{requests_text}

{DISCLAIMER}"""

    logger.debug(f"Built analysis prompt for {disease_name} with {len(symptoms)} symptoms")
    return prompt
