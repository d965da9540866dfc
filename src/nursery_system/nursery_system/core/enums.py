from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class Role(str, Enum):
    """Role of an authenticated user (exactly one per user)."""

    PARENT = "parent"
    EMPLOYEE = "employee"
    ADMIN = "admin"


class Permission(str, Enum):
    """Closed set of capability flags granted per role."""

    VIEW_CHILDREN = "canViewChildren"
    REGISTER_CHILDREN = "canRegisterChildren"
    VIEW_ATTENDANCE = "canViewAttendance"
    VIEW_ACTIVITIES = "canViewActivities"
    MAKE_PAYMENTS = "canMakePayments"
    VIEW_REPORTS = "canViewReports"
    MANAGE_USERS = "canManageUsers"
    MANAGE_SYSTEM = "canManageSystem"
    MANAGE_CLASSES = "canManageClasses"
    RECORD_ACTIVITIES = "canRecordActivities"
    CHECK_IN_OUT = "canCheckInOut"
    VIEW_ALL_CHILDREN = "canViewAllChildren"
    GENERATE_REPORTS = "canGenerateReports"


class Feature(str, Enum):
    """UI/functional areas gated by role membership."""

    DASHBOARD = "dashboard"
    CHILD_MANAGEMENT = "child_management"
    ATTENDANCE_TRACKING = "attendance_tracking"
    ACTIVITY_VIEWING = "activity_viewing"
    PAYMENT_PROCESSING = "payment_processing"
    MESSAGING = "messaging"
    NOTIFICATIONS = "notifications"
    ATTENDANCE_MANAGEMENT = "attendance_management"
    ACTIVITY_RECORDING = "activity_recording"
    CHILD_NOTES = "child_notes"
    MEDICAL_ALERTS = "medical_alerts"
    CLASSROOM_VIEW = "classroom_view"
    REPORTS_VIEW = "reports_view"
    USER_MANAGEMENT = "user_management"
    ACTIVITY_MANAGEMENT = "activity_management"
    PAYMENT_MANAGEMENT = "payment_management"
    CLASS_MANAGEMENT = "class_management"
    REPORT_GENERATION = "report_generation"
    SYSTEM_SETTINGS = "system_settings"
    BILLING_MANAGEMENT = "billing_management"


class NotificationType(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    ATTENDANCE = "attendance"
    ACTIVITY = "activity"
    PAYMENT = "payment"
    MEDICAL = "medical"
    SYSTEM = "system"


class NotificationPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class DiscountType(str, Enum):
    PERCENTAGE = "percentage"
    FIXED = "fixed"


def enum_value(value: Any) -> Any:
    """Plain value of an enum member, anything else unchanged.

    str-based enum members hash by name, so lookups in tables keyed by plain
    strings must go through this first.
    """
    return value.value if isinstance(value, Enum) else value


def parse_role(value: Any) -> Optional[Role]:
    """Role for a raw value, or None when it is not a known role."""
    if isinstance(value, Role):
        return value
    try:
        return Role(value)
    except (TypeError, ValueError):
        return None
