"""Static role-based access tables.

Built once at import time and exposed read-only (``MappingProxyType`` and
tuples). Nothing in the application mutates them.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from ..core.enums import Feature, Permission, Role
from .model import MenuItem, QuickAction

P = Permission
F = Feature


def _grants(*granted: Permission) -> Mapping[str, bool]:
    # Every known permission key is present; missing grants are explicit False.
    allowed = set(granted)
    return MappingProxyType({p.value: p in allowed for p in Permission})


ROLE_PERMISSIONS: Mapping[Role, Mapping[str, bool]] = MappingProxyType(
    {
        Role.PARENT: _grants(
            P.VIEW_CHILDREN,
            P.REGISTER_CHILDREN,
            P.VIEW_ATTENDANCE,
            P.VIEW_ACTIVITIES,
            P.MAKE_PAYMENTS,
        ),
        Role.EMPLOYEE: _grants(
            P.VIEW_CHILDREN,
            P.VIEW_ATTENDANCE,
            P.VIEW_ACTIVITIES,
            P.VIEW_REPORTS,
            P.RECORD_ACTIVITIES,
            P.CHECK_IN_OUT,
            P.VIEW_ALL_CHILDREN,
            P.GENERATE_REPORTS,
        ),
        Role.ADMIN: _grants(*Permission),
    }
)

ROLE_FEATURES: Mapping[Role, tuple[Feature, ...]] = MappingProxyType(
    {
        Role.PARENT: (
            F.DASHBOARD,
            F.CHILD_MANAGEMENT,
            F.ATTENDANCE_TRACKING,
            F.ACTIVITY_VIEWING,
            F.PAYMENT_PROCESSING,
            F.MESSAGING,
            F.NOTIFICATIONS,
        ),
        Role.EMPLOYEE: (
            F.DASHBOARD,
            F.ATTENDANCE_MANAGEMENT,
            F.ACTIVITY_RECORDING,
            F.CHILD_NOTES,
            F.MEDICAL_ALERTS,
            F.CLASSROOM_VIEW,
            F.REPORTS_VIEW,
        ),
        Role.ADMIN: (
            F.DASHBOARD,
            F.USER_MANAGEMENT,
            F.CHILD_MANAGEMENT,
            F.ATTENDANCE_MANAGEMENT,
            F.ACTIVITY_MANAGEMENT,
            F.PAYMENT_MANAGEMENT,
            F.CLASS_MANAGEMENT,
            F.REPORT_GENERATION,
            F.SYSTEM_SETTINGS,
            F.BILLING_MANAGEMENT,
        ),
    }
)

# A route is reachable only when every listed permission holds.
ROUTE_PERMISSIONS: Mapping[str, tuple[Permission, ...]] = MappingProxyType(
    {
        "/parent/dashboard": (P.VIEW_CHILDREN,),
        "/parent/track-child": (P.VIEW_ATTENDANCE,),
        "/parent/register-child": (P.REGISTER_CHILDREN,),
        "/parent/payments": (P.MAKE_PAYMENTS,),
        "/employee/dashboard": (P.VIEW_CHILDREN,),
        "/employee/attendance": (P.CHECK_IN_OUT,),
        "/employee/activities": (P.RECORD_ACTIVITIES,),
        "/admin/dashboard": (P.VIEW_REPORTS,),
        "/admin/manage-parents": (P.MANAGE_USERS,),
        "/admin/manage-children": (P.MANAGE_USERS,),
        "/admin/manage-employees": (P.MANAGE_USERS,),
        "/admin/manage-classes": (P.MANAGE_CLASSES,),
        "/admin/reports": (P.GENERATE_REPORTS,),
    }
)


def _actions(view: Permission, create: Permission, edit: Permission, delete: Permission) -> Mapping[str, Permission]:
    return MappingProxyType({"view": view, "create": create, "edit": edit, "delete": delete})


RESOURCE_ACTIONS: Mapping[str, Mapping[str, Permission]] = MappingProxyType(
    {
        "child": _actions(P.VIEW_CHILDREN, P.REGISTER_CHILDREN, P.MANAGE_USERS, P.MANAGE_USERS),
        "attendance": _actions(P.VIEW_ATTENDANCE, P.CHECK_IN_OUT, P.CHECK_IN_OUT, P.MANAGE_SYSTEM),
        "activity": _actions(P.VIEW_ACTIVITIES, P.RECORD_ACTIVITIES, P.RECORD_ACTIVITIES, P.MANAGE_SYSTEM),
        "payment": _actions(P.MAKE_PAYMENTS, P.MAKE_PAYMENTS, P.MANAGE_SYSTEM, P.MANAGE_SYSTEM),
        "user": _actions(P.VIEW_CHILDREN, P.MANAGE_USERS, P.MANAGE_USERS, P.MANAGE_USERS),
    }
)

MENU_ITEMS: Mapping[Role, tuple[MenuItem, ...]] = MappingProxyType(
    {
        Role.PARENT: (
            MenuItem("/parent/dashboard", "Dashboard", "📊", P.VIEW_CHILDREN),
            MenuItem("/parent/track-child", "Track Child", "👶", P.VIEW_ATTENDANCE),
            MenuItem("/parent/register-child", "Register Child", "➕", P.REGISTER_CHILDREN),
            MenuItem("/parent/payments", "Payments", "💳", P.MAKE_PAYMENTS),
            MenuItem("/parent/messages", "Messages", "💬", P.VIEW_CHILDREN),
        ),
        Role.EMPLOYEE: (
            MenuItem("/employee/dashboard", "Dashboard", "📊", P.VIEW_CHILDREN),
            MenuItem("/employee/attendance", "Attendance", "✅", P.CHECK_IN_OUT),
            MenuItem("/employee/activities", "Activities", "🎨", P.RECORD_ACTIVITIES),
            MenuItem("/employee/child-notes", "Child Notes", "📝", P.RECORD_ACTIVITIES),
            MenuItem("/employee/medical-alerts", "Medical Alerts", "🏥", P.RECORD_ACTIVITIES),
        ),
        Role.ADMIN: (
            MenuItem("/admin/dashboard", "Dashboard", "📊", P.VIEW_REPORTS),
            MenuItem("/admin/manage-parents", "Manage Parents", "👨‍👩‍👧‍👦", P.MANAGE_USERS),
            MenuItem("/admin/manage-children", "Manage Children", "👶", P.MANAGE_USERS),
            MenuItem("/admin/manage-employees", "Manage Employees", "👨‍💼", P.MANAGE_USERS),
            MenuItem("/admin/manage-classes", "Manage Classes", "🏫", P.MANAGE_CLASSES),
            MenuItem("/admin/manage-payments", "Manage Payments", "💳", P.MAKE_PAYMENTS),
            MenuItem("/admin/reports", "Reports", "📈", P.GENERATE_REPORTS),
            MenuItem("/admin/capacity", "Capacity", "📊", P.MANAGE_SYSTEM),
        ),
    }
)

QUICK_ACTIONS: Mapping[Role, tuple[QuickAction, ...]] = MappingProxyType(
    {
        Role.PARENT: (
            QuickAction("registerChild", "Register New Child", "👶", P.REGISTER_CHILDREN),
            QuickAction("makePayment", "Make Payment", "💳", P.MAKE_PAYMENTS),
            QuickAction("viewAttendance", "View Attendance", "📊", P.VIEW_ATTENDANCE),
        ),
        Role.EMPLOYEE: (
            QuickAction("checkIn", "Check In Child", "✅", P.CHECK_IN_OUT),
            QuickAction("recordActivity", "Record Activity", "🎨", P.RECORD_ACTIVITIES),
            QuickAction("addNote", "Add Child Note", "📝", P.RECORD_ACTIVITIES),
        ),
        Role.ADMIN: (
            QuickAction("generateReport", "Generate Report", "📈", P.GENERATE_REPORTS),
            QuickAction("manageUsers", "Manage Users", "👥", P.MANAGE_USERS),
            QuickAction("systemSettings", "System Settings", "⚙️", P.MANAGE_SYSTEM),
        ),
    }
)

ROLE_DISPLAY_NAMES: Mapping[Role, str] = MappingProxyType(
    {
        Role.PARENT: "Parent",
        Role.EMPLOYEE: "Employee",
        Role.ADMIN: "Administrator",
    }
)

ROLE_COLORS: Mapping[Role, str] = MappingProxyType(
    {
        Role.PARENT: "text-green-600 bg-green-100",
        Role.EMPLOYEE: "text-blue-600 bg-blue-100",
        Role.ADMIN: "text-purple-600 bg-purple-100",
    }
)
