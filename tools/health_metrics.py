import math
from datetime import date
from typing import Any, Dict, Optional

from core.errors import InvalidInputError
from models.records import UserProfile, parse_date
from tools.classification import bmi_category


def calc_bmi(weight_kg: float, height_cm: float) -> float:
    """
    Calculate Body Mass Index (BMI).

    Returns:
        BMI as float (kg/m^2), unrounded. Rounding is left to display code.

    Raises:
        InvalidInputError: if either input is non-numeric, non-finite,
        zero or negative.
    """
    try:
        weight_kg = float(weight_kg)
        height_cm = float(height_cm)
    except (ValueError, TypeError):
        raise InvalidInputError(
            f"weight and height must be numbers, got {weight_kg!r} and {height_cm!r}"
        )

    if not math.isfinite(weight_kg) or weight_kg <= 0:
        raise InvalidInputError(f"weight_kg must be positive, got {weight_kg}")
    if not math.isfinite(height_cm) or height_cm <= 0:
        raise InvalidInputError(f"height_cm must be positive, got {height_cm}")

    height_m = height_cm / 100.0
    return weight_kg / (height_m ** 2)


def _birthday_in(year: int, birth: date) -> date:
    # Feb 29 birthdays fall on Feb 28 in non-leap years
    try:
        return birth.replace(year=year)
    except ValueError:
        return date(year, 2, 28)


def age_years(birth_date: Any, as_of: Any = None) -> int:
    """
    Whole years between birth_date and as_of (default: today).

    The year difference is reduced by one until the birthday has occurred in
    as_of's year. Someone born on Feb 29 turns a year older on Feb 28 in
    non-leap years.

    Raises:
        InvalidInputError: if birth_date is after as_of.
    """
    birth = parse_date(birth_date)
    ref = parse_date(as_of) if as_of is not None else date.today()

    if birth > ref:
        raise InvalidInputError(f"birth date {birth} is after {ref}")

    age = ref.year - birth.year
    if ref < _birthday_in(ref.year, birth):
        age -= 1
    return age


def build_body_snapshot(
    profile: UserProfile,
    latest_weight_kg: Optional[float],
    as_of: Any = None,
) -> Dict:
    """
    Build the body part of a health snapshot from the profile and latest weight.

    Missing inputs produce None values instead of errors; non-physical
    inputs still raise InvalidInputError.
    """
    bmi = None
    category = None
    if latest_weight_kg is not None and profile.height_cm is not None:
        bmi_value = calc_bmi(latest_weight_kg, profile.height_cm)
        bmi = round(bmi_value, 1)
        info = bmi_category(bmi_value)
        category = {
            "category": info.category,
            "color": info.color_hex,
            "description": info.description,
        }

    age = None
    if profile.birth_date is not None:
        age = age_years(profile.birth_date, as_of)

    return {
        "bmi": bmi,
        "bmi_category": category,
        "age": age,
        "sex": profile.sex,
        "height_cm": profile.height_cm,
        "weight_kg": latest_weight_kg,
    }
