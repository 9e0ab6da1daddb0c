"""Services Module.

Services:
    record_store: Period helpers, the RecordStore interface and monthly reports.
    analysis_prompt: Symptom statistics and analysis prompt building.
"""
from services.record_store import (
    RecordStore,
    InMemoryRecordStore,
    month_window,
    records_in_range,
    records_in_month,
    records_for_day,
    latest_weight,
    monthly_bowel_report,
)
from services.analysis_prompt import (
    SymptomStats,
    summarize_symptoms,
    build_analysis_prompt,
)

__all__ = [
    "RecordStore",
    "InMemoryRecordStore",
    "month_window",
    "records_in_range",
    "records_in_month",
    "records_for_day",
    "latest_weight",
    "monthly_bowel_report",
    "SymptomStats",
    "summarize_symptoms",
    "build_analysis_prompt",
]
