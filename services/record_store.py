"""Record Store Module

This module provides:
1. Calendar-period helpers (month window, day and range filters)
2. The RecordStore interface the scoring layer reads from
3. An in-memory store implementation
4. Monthly bowel report assembly
"""
import calendar
import logging
from collections import defaultdict
from datetime import date
from typing import Any, Dict, Iterable, List, Optional, Tuple

from models.records import DailyBowelRecord, WeightRecord, parse_date
from tools.bowel_score import classify_score, score_breakdown

logger = logging.getLogger(__name__)


# === Period Helpers ===

def month_window(anchor: Any) -> Tuple[date, date]:
    """First and last day of the calendar month containing anchor."""
    day = parse_date(anchor)
    last = calendar.monthrange(day.year, day.month)[1]
    return day.replace(day=1), day.replace(day=last)


def records_in_range(records: Iterable, start: Any, end: Any) -> List:
    """Records whose date falls within [start, end], inclusive."""
    start, end = parse_date(start), parse_date(end)
    return [r for r in records if start <= r.date <= end]


def records_in_month(records: Iterable, anchor: Any) -> List:
    start, end = month_window(anchor)
    return records_in_range(records, start, end)


def records_for_day(records: Iterable, day: Any) -> List:
    day = parse_date(day)
    return [r for r in records if r.date == day]


def latest_weight(records: Iterable[WeightRecord]) -> Optional[WeightRecord]:
    """Most recent weigh-in, or None when there are none."""
    return max(records, key=lambda r: r.date, default=None)


# === Store Interface ===

class RecordStore:
    """Read interface over a user's stored records."""

    def get_bowel_records(self, user_id: str, start: date, end: date) -> List[DailyBowelRecord]:
        raise NotImplementedError

    def get_weight_records(self, user_id: str, start: date, end: date) -> List[WeightRecord]:
        raise NotImplementedError


class InMemoryRecordStore(RecordStore):
    """
    In-memory record store.

    Features:
    - Add bowel and weight records per user
    - Date-range reads, inclusive on both ends
    """

    def __init__(self):
        self._bowel: Dict[str, List[DailyBowelRecord]] = defaultdict(list)
        self._weights: Dict[str, Dict[date, WeightRecord]] = defaultdict(dict)

    def add_bowel_record(self, user_id: str, record: DailyBowelRecord) -> DailyBowelRecord:
        """Store a bowel record; a day may hold several."""
        self._bowel[user_id].append(record)
        logger.debug(f"Stored bowel record for {user_id} on {record.date}")
        return record

    def add_weight_record(self, user_id: str, record: WeightRecord) -> WeightRecord:
        """Store a weigh-in; a later weigh-in on the same day replaces the earlier one."""
        self._weights[user_id][record.date] = record
        logger.debug(f"Stored weight record for {user_id} on {record.date}")
        return record

    def get_bowel_records(self, user_id: str, start: date, end: date) -> List[DailyBowelRecord]:
        return records_in_range(self._bowel.get(user_id, []), start, end)

    def get_weight_records(self, user_id: str, start: date, end: date) -> List[WeightRecord]:
        weights = sorted(self._weights.get(user_id, {}).values(), key=lambda r: r.date)
        return records_in_range(weights, start, end)


# === Reports ===

def monthly_bowel_report(store: RecordStore, user_id: str, anchor: Any) -> Dict:
    """
    Score the calendar month containing anchor for one user.

    Returns a dict with the period bounds, the score, its classification
    and the evaluation breakdown.
    """
    start, end = month_window(anchor)
    records = store.get_bowel_records(user_id, start, end)
    breakdown = score_breakdown(records)
    classification = classify_score(breakdown.score)

    logger.info(
        f"Monthly bowel score for {user_id} ({start:%Y-%m}): "
        f"{breakdown.score} from {breakdown.record_count} records"
    )

    return {
        "period_start": start,
        "period_end": end,
        "score": breakdown.score,
        "tier": classification.tier,
        "color": classification.color_hex,
        "description": classification.description,
        "breakdown": breakdown,
    }
