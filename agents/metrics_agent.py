"""MetricsAgent - Bowel and Body Metrics

This agent computes a health snapshot using the deterministic tools in
tools/. It scores the period's bowel records, classifies the score, and
adds BMI and age from the profile and the latest weigh-in.

Design Decision:
    MetricsAgent does not use an LLM. Scores must be reproducible: the same
    records always produce the same snapshot.
"""
from typing import Dict, Any, List
import logging

from core.errors import InvalidInputError
from core.observability import trace_agent, log_context
from models.records import DailyBowelRecord, UserProfile, WeightRecord
from services.record_store import latest_weight
from tools.bowel_score import classify_score, score_breakdown
from tools.health_metrics import build_body_snapshot

logger = logging.getLogger(__name__)

EMPTY_BODY_METRICS = {
    "bmi": None,
    "bmi_category": None,
    "age": None,
    "sex": None,
    "height_cm": None,
    "weight_kg": None,
}


def _as_records(items, model) -> List:
    return [item if isinstance(item, model) else model.from_dict(item) for item in items or []]


class MetricsAgent:
    """
    MetricsAgent - Deterministic Health Calculations

    Reads from the context:
    - "profile": UserProfile or dict (birth_date, sex, height_cm)
    - "weights": WeightRecord objects or dicts
    - "bowel_records": DailyBowelRecord objects or dicts for the period
    - "as_of": optional reference date for the age calculation

    Writes the snapshot to context["metrics"]. Invalid body inputs (e.g. zero
    height) blank only the body fields and set "error"; the bowel score is
    still reported. Malformed bowel records produce a full fallback snapshot.
    """

    @trace_agent
    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        """Run metrics calculation, falling back on invalid input."""
        try:
            return self._run_internal(context)
        except InvalidInputError as e:
            return self._fallback(context, str(e))

    def _run_internal(self, context: Dict[str, Any]) -> Dict[str, Any]:
        bowel_records = _as_records(context.get("bowel_records"), DailyBowelRecord)

        try:
            snapshot = self._body_snapshot(context)
        except InvalidInputError as e:
            logger.warning(f"MetricsAgent body metrics unavailable: {e}")
            snapshot = dict(EMPTY_BODY_METRICS)
            snapshot["error"] = str(e)
            context.setdefault("debug", []).append(f"MetricsAgent: body metrics skipped ({e})")

        snapshot.update(self._bowel_metrics(bowel_records))

        context["metrics"] = snapshot
        log_context(context, "MetricsAgent:done")

        debug_log = context.setdefault("debug", [])
        debug_log.append("MetricsAgent: snapshot computed.")

        return context

    def _body_snapshot(self, context: Dict[str, Any]) -> Dict[str, Any]:
        profile = context.get("profile") or UserProfile()
        if not isinstance(profile, UserProfile):
            profile = UserProfile.from_dict(profile)

        latest = latest_weight(_as_records(context.get("weights"), WeightRecord))
        return build_body_snapshot(
            profile,
            latest.weight_kg if latest else None,
            context.get("as_of"),
        )

    def _bowel_metrics(self, bowel_records: List[DailyBowelRecord]) -> Dict[str, Any]:
        breakdown = score_breakdown(bowel_records)
        classification = classify_score(breakdown.score)
        return {
            "bowel_score": breakdown.score,
            "bowel_tier": classification.tier.value,
            "bowel_color": classification.color_hex,
            "bowel_description": classification.description,
            "bowel_breakdown": {
                "record_count": breakdown.record_count,
                "movement_count": breakdown.movement_count,
                "no_movement_count": breakdown.no_movement_count,
                "bowel_ratio": breakdown.bowel_ratio,
                "frequency_score": breakdown.frequency_score,
                "avg_record_score": breakdown.avg_record_score,
                "normalized_quality": breakdown.normalized_quality,
            },
        }

    def _fallback(self, context: Dict[str, Any], error: str = "") -> Dict[str, Any]:
        """Provide empty metrics when calculation fails."""
        logger.warning(f"MetricsAgent using fallback: {error}")

        context["metrics"] = {
            **EMPTY_BODY_METRICS,
            "bowel_score": None,
            "bowel_tier": None,
            "bowel_color": None,
            "bowel_description": None,
            "bowel_breakdown": None,
            "error": error,
        }

        debug_log = context.setdefault("debug", [])
        debug_log.append(f"MetricsAgent: Fallback used ({error})")

        return context
