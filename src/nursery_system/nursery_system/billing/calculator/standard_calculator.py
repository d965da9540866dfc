from __future__ import annotations

from decimal import Decimal

from ...core.constants import FULL_DAY_HOURS, FULL_DAY_RATE, HOURLY_RATE
from .base import BillingCalculator


class StandardBillingCalculator(BillingCalculator):
    """Standard rule: flat rate from a full day on, hourly rate below it."""

    def __init__(
        self,
        *,
        hourly_rate: Decimal = HOURLY_RATE,
        full_day_hours: int = FULL_DAY_HOURS,
        full_day_rate: Decimal = FULL_DAY_RATE,
    ):
        self._hourly_rate = Decimal(hourly_rate)
        self._full_day_hours = Decimal(full_day_hours)
        self._full_day_rate = Decimal(full_day_rate)

    def attendance_cost(self, duration_minutes: int) -> Decimal:
        hours = Decimal(max(int(duration_minutes or 0), 0)) / Decimal(60)
        if hours >= self._full_day_hours:
            return self._full_day_rate
        return hours * self._hourly_rate
