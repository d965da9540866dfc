from __future__ import annotations

from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Optional, Union

from ..access.model import ChildOwnership
from ..core.constants import TAX_RATE
from ..core.enums import DiscountType, enum_value
from ..core.exceptions import NotFoundError, ValidationError
from ..core.logger import get_logger
from ..notifications import factory
from ..notifications.service import NotificationService
from .calculator.base import BillingCalculator
from .calculator.standard_calculator import StandardBillingCalculator
from .model import Invoice, InvoiceLine, PresenceSummary
from .repository import PresenceRepository

log = get_logger(__name__)

CENTS = Decimal("0.01")

Number = Union[Decimal, int, float, str]


def to_cents(value: Number) -> Decimal:
    return Decimal(str(value)).quantize(CENTS, rounding=ROUND_HALF_UP)


def apply_discount(amount: Number, discount_type: Any, discount_value: Number) -> Decimal:
    """Amount after a percentage or fixed discount, never below zero.

    Unknown discount types leave the amount unchanged.
    """
    amount = Decimal(str(amount))
    value = Decimal(str(discount_value))
    try:
        kind = DiscountType(enum_value(discount_type))
    except ValueError:
        kind = None

    discount = Decimal(0)
    if kind is DiscountType.PERCENTAGE:
        discount = amount * value / Decimal(100)
    elif kind is DiscountType.FIXED:
        discount = value

    return to_cents(max(Decimal(0), amount - discount))


class BillingService:
    def __init__(
        self,
        presence: PresenceRepository,
        *,
        calculator: Optional[BillingCalculator] = None,
        tax_rate: Number = TAX_RATE,
        notifications: Optional[NotificationService] = None,
    ):
        self._presence = presence
        self._calculator = calculator or StandardBillingCalculator()
        self._tax_rate = Decimal(str(tax_rate))
        self._notifications = notifications

    @staticmethod
    def _check_period(start: date, end: date) -> None:
        if end < start:
            raise ValidationError("Billing period end must not be before its start")

    def build_invoice(self, *, child_id: int, start: date, end: date) -> Optional[Invoice]:
        """Invoice for one child's present days; None when nothing is billable."""
        self._check_period(start, end)
        rows = self._presence.get_presence_rows(child_id=child_id, start_date=start, end_date=end)

        lines: list[InvoiceLine] = []
        for r in rows:
            if not r.duration_minutes:
                continue
            hours = Decimal(r.duration_minutes) / Decimal(60)
            lines.append(
                InvoiceLine(
                    description=f"Attendance on {r.work_date.isoformat()}",
                    work_date=r.work_date,
                    hours=to_cents(hours),
                    amount=to_cents(self._calculator.attendance_cost(r.duration_minutes)),
                )
            )

        if not lines:
            return None

        subtotal = sum((line.amount for line in lines), Decimal(0))
        tax_amount = to_cents(subtotal * self._tax_rate)
        invoice = Invoice(
            child_id=child_id,
            period_start=start,
            period_end=end,
            subtotal=to_cents(subtotal),
            tax_amount=tax_amount,
            total_amount=to_cents(subtotal + tax_amount),
            lines=lines,
        )
        log.info("Built invoice for child %s: %d days, total %s", child_id, len(lines), invoice.total_amount)
        return invoice

    def notify_parent(self, invoice: Invoice) -> Optional[int]:
        """Tell the child's parent an invoice is pending."""
        if self._notifications is None:
            return None
        ownership = self._presence.get_child_ownership(invoice.child_id)
        if ownership is None:
            raise NotFoundError(f"Child {invoice.child_id} not found")
        return self._notifications.notify_user(ownership.parent_id, factory.payment(invoice.total_amount, invoice.status))

    def child_ownership(self, child_id: int) -> Optional[ChildOwnership]:
        return self._presence.get_child_ownership(child_id)

    def presence_summary(self, *, child_id: int, start: date, end: date) -> PresenceSummary:
        self._check_period(start, end)
        rows = self._presence.get_presence_rows(child_id=child_id, start_date=start, end_date=end)

        total_minutes = 0
        total_days = 0
        for r in rows:
            if r.duration_minutes:
                total_minutes += r.duration_minutes
                total_days += 1

        average = Decimal(total_minutes) / Decimal(total_days) if total_days else Decimal(0)
        return PresenceSummary(
            total_minutes=total_minutes,
            total_hours=to_cents(Decimal(total_minutes) / Decimal(60)),
            total_days=total_days,
            average_daily_minutes=int(average.quantize(Decimal(1), rounding=ROUND_HALF_UP)),
        )
