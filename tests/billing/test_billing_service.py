from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from src.nursery_system.nursery_system.access.model import ChildOwnership
from src.nursery_system.nursery_system.billing.model import PresenceRow
from src.nursery_system.nursery_system.billing.service import BillingService, apply_discount, to_cents
from src.nursery_system.nursery_system.core.exceptions import NotFoundError, ValidationError


class FakePresence:
    def __init__(self, rows, parents=None):
        self._rows = rows
        self._parents = parents or {}

    def get_presence_rows(self, *, child_id, start_date, end_date):
        return [r for r in self._rows if r.child_id == child_id and start_date <= r.work_date <= end_date]

    def get_child_ownership(self, child_id):
        parent_id = self._parents.get(child_id)
        return ChildOwnership(child_id, parent_id) if parent_id is not None else None


class RecordingNotifications:
    def __init__(self):
        self.sent = []

    def notify_user(self, user_id, draft, *, preferences=None):
        self.sent.append((user_id, draft))
        return len(self.sent)


def _rows():
    return [
        PresenceRow(1, date(2026, 2, 2), 480),
        PresenceRow(1, date(2026, 2, 3), 90),
        PresenceRow(1, date(2026, 2, 4), None),
        PresenceRow(1, date(2026, 3, 1), 300),
        PresenceRow(2, date(2026, 2, 2), 60),
    ]


FEB = dict(start=date(2026, 2, 1), end=date(2026, 2, 28))


def test_invoice_totals_include_tax():
    invoice = BillingService(FakePresence(_rows())).build_invoice(child_id=1, **FEB)

    assert [line.amount for line in invoice.lines] == [Decimal("100.00"), Decimal("22.50")]
    assert [line.hours for line in invoice.lines] == [Decimal("8.00"), Decimal("1.50")]
    assert invoice.subtotal == Decimal("122.50")
    assert invoice.tax_amount == Decimal("12.25")
    assert invoice.total_amount == Decimal("134.75")

    data = invoice.to_dict()
    assert data["total_amount"] == "134.75"
    assert data["period"] == {"start_date": "2026-02-01", "end_date": "2026-02-28", "month": 2, "year": 2026}
    assert data["breakdown"][0]["description"] == "Attendance on 2026-02-02"


def test_no_attendance_gives_no_invoice():
    svc = BillingService(FakePresence(_rows()))
    assert svc.build_invoice(child_id=3, **FEB) is None
    assert svc.build_invoice(child_id=1, start=date(2026, 2, 4), end=date(2026, 2, 4)) is None


def test_reversed_period_is_rejected():
    with pytest.raises(ValidationError):
        BillingService(FakePresence([])).build_invoice(child_id=1, start=date(2026, 2, 5), end=date(2026, 2, 1))


def test_custom_tax_rate():
    invoice = BillingService(FakePresence(_rows()), tax_rate="0").build_invoice(child_id=2, **FEB)
    assert invoice.total_amount == Decimal("15.00")


def test_presence_summary_skips_open_records():
    summary = BillingService(FakePresence(_rows())).presence_summary(child_id=1, **FEB)

    assert summary.total_minutes == 570
    assert summary.total_days == 2
    assert summary.total_hours == Decimal("9.50")
    assert summary.average_daily_minutes == 285


def test_presence_summary_without_rows():
    summary = BillingService(FakePresence([])).presence_summary(child_id=1, **FEB)
    assert (summary.total_minutes, summary.total_days, summary.average_daily_minutes) == (0, 0, 0)


def test_notify_parent_sends_payment_notification():
    notifications = RecordingNotifications()
    svc = BillingService(FakePresence(_rows(), parents={1: 42}), notifications=notifications)
    invoice = svc.build_invoice(child_id=1, **FEB)

    assert svc.notify_parent(invoice) == 1
    user_id, draft = notifications.sent[0]
    assert user_id == 42
    assert draft.type == "payment"
    assert draft.message == "Payment of $134.75 is pending"


def test_notify_parent_for_unknown_child():
    svc = BillingService(FakePresence(_rows()), notifications=RecordingNotifications())
    invoice = svc.build_invoice(child_id=1, **FEB)
    with pytest.raises(NotFoundError):
        svc.notify_parent(invoice)


@pytest.mark.parametrize(
    "amount, kind, value, expected",
    [
        (100, "percentage", 10, Decimal("90.00")),
        ("80.50", "fixed", "20.25", Decimal("60.25")),
        (30, "fixed", 50, Decimal("0.00")),
        (100, "coupon", 10, Decimal("100.00")),
    ],
)
def test_apply_discount(amount, kind, value, expected):
    assert apply_discount(amount, kind, value) == expected


def test_to_cents_rounds_half_up():
    assert to_cents("2.345") == Decimal("2.35")
    assert to_cents(1) == Decimal("1.00")
