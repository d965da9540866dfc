from __future__ import annotations

from decimal import Decimal

import pytest

from src.nursery_system.nursery_system.billing.calculator.standard_calculator import StandardBillingCalculator


@pytest.mark.parametrize(
    "minutes, expected",
    [
        (0, Decimal("0")),
        (60, Decimal("15")),
        (90, Decimal("22.5")),
        (450, Decimal("112.5")),
        (480, Decimal("100")),
        (600, Decimal("100")),
    ],
)
def test_default_rates(minutes, expected):
    assert StandardBillingCalculator().attendance_cost(minutes) == expected


def test_negative_or_missing_duration_costs_nothing():
    calc = StandardBillingCalculator()
    assert calc.attendance_cost(-30) == 0
    assert calc.attendance_cost(None) == 0


def test_custom_rates():
    calc = StandardBillingCalculator(hourly_rate=Decimal("12"), full_day_hours=6, full_day_rate=Decimal("70"))
    assert calc.attendance_cost(300) == Decimal("60")
    assert calc.attendance_cost(360) == Decimal("70")
