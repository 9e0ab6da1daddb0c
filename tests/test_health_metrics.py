"""Unit Tests for the BMI and age calculators."""
from datetime import date, datetime

import pytest

from core.errors import InvalidInputError
from models.records import UserProfile
from tools.health_metrics import age_years, build_body_snapshot, calc_bmi


class TestCalcBMI:

    def test_bmi_calculation(self):
        """70 kg at 175 cm is 22.857..., unrounded."""
        bmi = calc_bmi(weight_kg=70, height_cm=175)
        assert bmi == pytest.approx(22.857142857)
        assert round(bmi, 1) == 22.9

    def test_numeric_strings_accepted(self):
        assert calc_bmi("80", "200") == pytest.approx(20.0)

    @pytest.mark.parametrize("weight,height", [
        (70, 0),
        (70, -170),
        (0, 175),
        (-1, 175),
        (None, 175),
        (70, "tall"),
        (float("nan"), 175),
        (70, float("inf")),
    ])
    def test_non_physical_inputs_raise(self, weight, height):
        with pytest.raises(InvalidInputError):
            calc_bmi(weight, height)


class TestAgeYears:

    def test_same_day_is_zero(self):
        assert age_years(date(2024, 3, 1), date(2024, 3, 1)) == 0

    def test_day_before_birthday(self):
        assert age_years("2000-06-15", "2024-06-14") == 23

    def test_on_birthday(self):
        assert age_years("2000-06-15", "2024-06-15") == 24

    def test_earlier_month(self):
        assert age_years(date(2000, 6, 15), date(2024, 5, 30)) == 23

    def test_accepts_datetimes(self):
        assert age_years(datetime(1990, 1, 1, 8, 0), datetime(2020, 1, 1, 7, 0)) == 30

    def test_leap_day_birthday_in_non_leap_year(self):
        """Feb 29 birthdays are celebrated on Feb 28 in non-leap years."""
        assert age_years("2000-02-29", "2023-02-27") == 22
        assert age_years("2000-02-29", "2023-02-28") == 23
        assert age_years("2000-02-29", "2023-03-01") == 23

    def test_leap_day_birthday_in_leap_year(self):
        assert age_years("2000-02-29", "2024-02-28") == 23
        assert age_years("2000-02-29", "2024-02-29") == 24

    def test_defaults_to_today(self):
        birth = date(date.today().year - 30, 1, 1)
        assert age_years(birth) == 30

    def test_future_birth_date_raises(self):
        with pytest.raises(InvalidInputError):
            age_years("2025-01-02", "2025-01-01")


class TestBodySnapshot:

    def test_complete_snapshot(self):
        profile = UserProfile(birth_date=date(1990, 5, 20), sex="female", height_cm=160)
        snapshot = build_body_snapshot(profile, 70, as_of=date(2024, 5, 19))

        assert snapshot["bmi"] == 27.3
        assert snapshot["bmi_category"]["category"] == "obese"
        assert snapshot["age"] == 33
        assert snapshot["weight_kg"] == 70

    def test_partial_snapshot(self):
        """Missing weight or birth date gives None fields, not errors."""
        snapshot = build_body_snapshot(UserProfile(height_cm=170), None)
        assert snapshot["bmi"] is None
        assert snapshot["bmi_category"] is None
        assert snapshot["age"] is None

    def test_zero_height_raises(self):
        with pytest.raises(InvalidInputError):
            build_body_snapshot(UserProfile(height_cm=0), 70)
