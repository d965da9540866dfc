"""Builders for the notification drafts the application sends."""

from __future__ import annotations

from decimal import Decimal
from typing import Union

from ..core.enums import NotificationPriority as Priority
from ..core.enums import NotificationType as Type
from .model import NotificationDraft


def success(title: str, message: str) -> NotificationDraft:
    return NotificationDraft(title, message, Type.SUCCESS, Priority.MEDIUM)


def error(title: str, message: str) -> NotificationDraft:
    return NotificationDraft(title, message, Type.ERROR, Priority.HIGH)


def warning(title: str, message: str) -> NotificationDraft:
    return NotificationDraft(title, message, Type.WARNING, Priority.MEDIUM)


def info(title: str, message: str) -> NotificationDraft:
    return NotificationDraft(title, message, Type.INFO, Priority.LOW)


def attendance(child_name: str, action: str) -> NotificationDraft:
    """e.g. attendance("Mia", "checked in")."""
    return NotificationDraft("Attendance Update", f"{child_name} has been {action}", Type.ATTENDANCE, Priority.MEDIUM)


def activity(child_name: str, activity_name: str) -> NotificationDraft:
    return NotificationDraft(
        "New Activity", f"{child_name} participated in {activity_name}", Type.ACTIVITY, Priority.LOW
    )


def payment(amount: Union[Decimal, float, int], status: str) -> NotificationDraft:
    priority = Priority.HIGH if status == "failed" else Priority.MEDIUM
    return NotificationDraft("Payment Update", f"Payment of ${amount} is {status}", Type.PAYMENT, priority)


def medical_alert(child_name: str, condition: str) -> NotificationDraft:
    return NotificationDraft("Medical Alert", f"{child_name}: {condition}", Type.MEDICAL, Priority.HIGH)
