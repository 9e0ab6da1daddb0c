from typing import Any, Dict, Optional
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum

from core.errors import InvalidInputError


class Bloating(str, Enum):
    NONE = "none"
    SOMETIMES = "sometimes"
    YES = "yes"


class StoolColor(str, Enum):
    YELLOW = "yellow"
    BROWN = "brown"
    GREEN = "green"
    BLACK = "black"
    RED = "red"
    WHITE = "white"


class DurationBand(str, Enum):
    SHORT = "1-3min"
    MEDIUM = "3-5min"
    LONG = "5+min"


class Difficulty(str, Enum):
    EASY = "easy"
    LITTLE = "little"
    HARD = "hard"
    VERY_HARD = "veryHard"


class ResidualFeeling(str, Enum):
    NONE = "none"
    LITTLE = "little"
    MUCH = "much"


class StoolAmount(str, Enum):
    SMALL = "small"
    LITTLE_MORE = "littleMore"
    NORMAL = "normal"
    MUCH = "much"
    VERY_MUCH = "veryMuch"


class RiskTier(str, Enum):
    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ScoreTier(str, Enum):
    GREEN = "green"
    AMBER = "amber"
    ORANGE = "orange"
    RED = "red"


# Older entries stored durations without the unit suffix
DURATION_ALIASES = {
    "1-3": DurationBand.SHORT,
    "3-5": DurationBand.MEDIUM,
    "5+": DurationBand.LONG,
}


def parse_date(value: Any) -> date:
    """Coerce a date, datetime or ISO 'YYYY-MM-DD' string to a date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError as e:
        raise InvalidInputError(f"Invalid date: {value!r}") from e


def _parse_enum(enum_cls, value: Any):
    """Return the enum member for value, or None when missing/unknown."""
    if value is None or value == "":
        return None
    try:
        return enum_cls(value)
    except ValueError:
        return None


def _parse_flag(value: Any) -> bool:
    """Strict boolean parsing; only True, 1 or "true" count as set."""
    if isinstance(value, str):
        return value.strip().lower() == "true"
    if isinstance(value, bool):
        return value
    return value == 1


def _parse_stool_form(value: Any) -> Optional[int]:
    """Whole-number Bristol form, or None for missing or non-integral values."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (ValueError, TypeError):
        return None
    if not number.is_integer():
        return None
    return int(number)


def _pick(data: Dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    return None


@dataclass(frozen=True)
class DailyBowelRecord:
    """One recorded bowel event (or recorded absence of one) on a day.

    Stool details are only meaningful when has_movement is True. Every
    optional field may be None independently; missing values score zero.
    """
    date: date
    has_movement: bool
    bloating: Bloating = Bloating.NONE
    stool_form: Optional[int] = None            # Bristol scale 1-7
    color: Optional[StoolColor] = None
    duration: Optional[DurationBand] = None
    difficulty: Optional[Difficulty] = None
    residual_feeling: Optional[ResidualFeeling] = None
    amount: Optional[StoolAmount] = None        # descriptive only

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DailyBowelRecord":
        """Build a record from a stored document (camelCase or snake_case keys)."""
        has_movement = _parse_flag(_pick(data, "has_movement", "hasMovement", "hasBowelMovement"))
        bloating = _parse_enum(Bloating, data.get("bloating")) or Bloating.NONE
        record_date = parse_date(data.get("date"))

        if not has_movement:
            return cls(date=record_date, has_movement=False, bloating=bloating)

        stool_form = _parse_stool_form(_pick(data, "stool_form", "stoolForm", "bristolType"))

        raw_duration = _pick(data, "duration", "durationBand")
        duration = DURATION_ALIASES.get(raw_duration) or _parse_enum(DurationBand, raw_duration)

        return cls(
            date=record_date,
            has_movement=True,
            bloating=bloating,
            stool_form=stool_form,
            color=_parse_enum(StoolColor, data.get("color")),
            duration=duration,
            difficulty=_parse_enum(Difficulty, data.get("difficulty")),
            residual_feeling=_parse_enum(
                ResidualFeeling, _pick(data, "residual_feeling", "residualFeeling")
            ),
            amount=_parse_enum(StoolAmount, data.get("amount")),
        )


@dataclass(frozen=True)
class WeightRecord:
    """A single weigh-in."""
    date: date
    weight_kg: float

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WeightRecord":
        weight = _pick(data, "weight_kg", "weight")
        try:
            weight_kg = float(weight)
        except (ValueError, TypeError) as e:
            raise InvalidInputError(f"Invalid weight: {weight!r}") from e
        return cls(date=parse_date(data.get("date")), weight_kg=weight_kg)


@dataclass(frozen=True)
class SymptomRecord:
    """A symptom occurrence for a tracked condition (intensity 1-10)."""
    date: date
    disease_name: str
    intensity: int
    took_medication: bool = False
    occurred_at: Optional[str] = None   # e.g. "14:30"
    description: Optional[str] = None


def _parse_height(value: Any) -> Optional[float]:
    if value is None:
        return None
    try:
        return float(value)
    except (ValueError, TypeError) as e:
        raise InvalidInputError(f"Invalid height: {value!r}") from e


@dataclass(frozen=True)
class UserProfile:
    """Long-lived facts about the user."""
    birth_date: Optional[date] = None
    sex: Optional[str] = None           # "male" | "female"
    height_cm: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UserProfile":
        birth = _pick(data, "birth_date", "birthDate")
        height = _pick(data, "height_cm", "height")
        return cls(
            birth_date=parse_date(birth) if birth else None,
            sex=_pick(data, "sex", "gender"),
            height_cm=_parse_height(height),
        )
