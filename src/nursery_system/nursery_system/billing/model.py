from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class PresenceRow:
    """One day a child was present; duration may be missing for open records."""

    child_id: int
    work_date: date
    duration_minutes: Optional[int]


@dataclass(frozen=True)
class InvoiceLine:
    description: str
    work_date: date
    hours: Decimal
    amount: Decimal
    quantity: int = 1


@dataclass(frozen=True)
class Invoice:
    child_id: int
    period_start: date
    period_end: date
    subtotal: Decimal
    tax_amount: Decimal
    total_amount: Decimal
    lines: list[InvoiceLine] = field(default_factory=list)
    status: str = "pending"

    def to_dict(self) -> dict:
        return {
            "child_id": self.child_id,
            "period": {
                "start_date": self.period_start.isoformat(),
                "end_date": self.period_end.isoformat(),
                "month": self.period_start.month,
                "year": self.period_start.year,
            },
            "amount": str(self.subtotal),
            "tax_amount": str(self.tax_amount),
            "total_amount": str(self.total_amount),
            "status": self.status,
            "breakdown": [
                {
                    "description": line.description,
                    "date": line.work_date.isoformat(),
                    "hours": str(line.hours),
                    "amount": str(line.amount),
                    "quantity": line.quantity,
                }
                for line in self.lines
            ],
        }


@dataclass(frozen=True)
class PresenceSummary:
    total_minutes: int
    total_hours: Decimal
    total_days: int
    average_daily_minutes: int
