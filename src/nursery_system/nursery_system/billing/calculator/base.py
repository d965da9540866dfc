from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal


class BillingCalculator(ABC):
    """Calculator interface (Strategy Pattern for attendance pricing)."""

    @abstractmethod
    def attendance_cost(self, duration_minutes: int) -> Decimal:
        raise NotImplementedError
