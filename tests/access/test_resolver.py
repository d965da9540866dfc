from __future__ import annotations

import pytest

from src.nursery_system.nursery_system.access.model import ChildOwnership
from src.nursery_system.nursery_system.access.resolver import AccessControlResolver
from src.nursery_system.nursery_system.access.tables import (
    MENU_ITEMS,
    RESOURCE_ACTIONS,
    ROLE_FEATURES,
    ROLE_PERMISSIONS,
    ROUTE_PERMISSIONS,
)
from src.nursery_system.nursery_system.core.enums import Feature, Permission, Role
from src.nursery_system.nursery_system.users.model import SessionUser


def _user(role, *, authenticated: bool = True) -> SessionUser:
    return SessionUser(user_id=7, full_name="A", role=role, is_authenticated=authenticated)


@pytest.mark.parametrize("role", list(Role))
def test_every_permission_matches_role_table(role):
    access = AccessControlResolver(role)
    for permission in Permission:
        assert access.has_permission(permission) is ROLE_PERMISSIONS[role][permission.value]
        assert access.has_permission(permission.value) is ROLE_PERMISSIONS[role][permission.value]


@pytest.mark.parametrize("role", list(Role))
def test_every_role_has_every_permission_key(role):
    assert set(ROLE_PERMISSIONS[role]) == {p.value for p in Permission}


def test_employee_permissions_and_routes():
    access = AccessControlResolver(Role.EMPLOYEE)

    assert access.has_permission("canMakePayments") is False
    assert access.has_permission("canCheckInOut") is True
    assert access.can_access_route("/employee/attendance") is True
    # configured route whose permission the employee lacks
    assert access.can_access_route("/admin/manage-parents") is False


@pytest.mark.parametrize("role", [None, *Role])
def test_empty_permission_lists(role):
    access = AccessControlResolver(role)
    assert access.has_all_permissions([]) is True
    assert access.has_any_permission([]) is False


def test_any_and_all_permissions():
    parent = AccessControlResolver(Role.PARENT)
    assert parent.has_any_permission([Permission.MANAGE_USERS, Permission.MAKE_PAYMENTS]) is True
    assert parent.has_all_permissions([Permission.MANAGE_USERS, Permission.MAKE_PAYMENTS]) is False
    assert parent.has_all_permissions(["canViewChildren", "canMakePayments"]) is True


@pytest.mark.parametrize("role", [None, *Role])
def test_unknown_permission_is_false(role):
    assert AccessControlResolver(role).has_permission("canLaunchRockets") is False


@pytest.mark.parametrize("role", [None, *Role])
def test_unconfigured_route_is_open(role):
    path = "/some/unlisted/page"
    assert path not in ROUTE_PERMISSIONS
    assert AccessControlResolver(role).can_access_route(path) is True


@pytest.mark.parametrize("role", [None, *Role])
@pytest.mark.parametrize(
    "resource, action",
    [("child", "archive"), ("classroom", "view"), ("", ""), ("payment", "refund")],
)
def test_unmapped_action_is_denied(role, resource, action):
    assert AccessControlResolver(role).can_perform_action(resource, action) is False


def test_mapped_actions_follow_permissions():
    parent = AccessControlResolver(Role.PARENT)
    employee = AccessControlResolver(Role.EMPLOYEE)
    admin = AccessControlResolver(Role.ADMIN)

    assert parent.can_perform_action("child", "create") is True
    assert parent.can_perform_action("child", "delete") is False
    assert employee.can_perform_action("attendance", "create") is True
    assert employee.can_perform_action("payment", "view") is False
    for resource, actions in RESOURCE_ACTIONS.items():
        for action in actions:
            assert admin.can_perform_action(resource, action) is True


@pytest.mark.parametrize("role", list(Role))
def test_menu_items_only_include_granted_entries(role):
    access = AccessControlResolver(role)
    items = access.get_menu_items()

    assert items
    assert all(access.has_permission(i.required_permission) for i in items)
    expected = [i for i in MENU_ITEMS[role] if ROLE_PERMISSIONS[role][i.required_permission.value]]
    assert items == expected


def test_menu_items_follow_the_new_role():
    parent_paths = [i.path for i in AccessControlResolver(Role.PARENT).get_menu_items()]
    employee_paths = [i.path for i in AccessControlResolver(Role.EMPLOYEE).get_menu_items()]

    assert parent_paths[0] == "/parent/dashboard"
    assert all(p.startswith("/employee/") for p in employee_paths)


def test_quick_actions_are_filtered_per_role():
    actions = [a.action for a in AccessControlResolver(Role.EMPLOYEE).get_quick_actions()]
    assert actions == ["checkIn", "recordActivity", "addNote"]
    assert AccessControlResolver().get_quick_actions() == []


def test_features():
    employee = AccessControlResolver(Role.EMPLOYEE)
    assert employee.has_feature(Feature.MEDICAL_ALERTS) is True
    assert employee.has_feature("payment_processing") is False
    assert employee.get_available_features() == ROLE_FEATURES[Role.EMPLOYEE]


def test_unknown_role_fails_closed():
    access = AccessControlResolver("superuser")

    assert access.current_role is None
    assert dict(access.permissions) == {}
    assert access.features == ()
    assert access.get_menu_items() == []
    assert access.has_permission(Permission.VIEW_CHILDREN) is False
    assert access.get_role_display_name() == "User"
    assert access.get_role_color() == "text-gray-600 bg-gray-100"


def test_display_helpers():
    assert AccessControlResolver(Role.ADMIN).get_role_display_name() == "Administrator"
    assert AccessControlResolver("parent").get_role_display_name() == "Parent"
    assert AccessControlResolver(Role.EMPLOYEE).get_role_color() == "text-blue-600 bg-blue-100"


def test_for_user_requires_authentication():
    assert AccessControlResolver.for_user(None).current_role is None
    assert AccessControlResolver.for_user(_user(Role.ADMIN, authenticated=False)).current_role is None
    assert AccessControlResolver.for_user(_user(Role.ADMIN)).is_admin is True


def test_to_dict_snapshot():
    data = AccessControlResolver(Role.PARENT).to_dict()

    assert data["current_role"] == "parent"
    assert data["role_display_name"] == "Parent"
    assert data["permissions"]["canMakePayments"] is True
    assert data["permissions"]["canManageUsers"] is False
    assert "payment_processing" in data["features"]
    assert data["menu_items"][0]["required_permission"] == "canViewChildren"
    assert data["is_parent"] is True and data["is_admin"] is False


@pytest.mark.parametrize("role", [None, *Role])
@pytest.mark.parametrize("bad", [["canViewChildren"], {"canViewChildren": True}, {"x"}])
def test_unhashable_arguments_are_denied(role, bad):
    access = AccessControlResolver(role)

    assert access.has_permission(bad) is False
    assert access.has_feature(bad) is False
    assert access.can_access_route(bad) is True
    assert access.can_perform_action(bad, "view") is False
    assert access.can_perform_action("child", bad) is False
    assert AccessControlResolver(bad).current_role is None


def test_child_access_by_role():
    child = ChildOwnership(child_id=1, parent_id=42, teacher_id=3)
    no_classroom = ChildOwnership(child_id=2, parent_id=42)

    assert AccessControlResolver(Role.ADMIN).can_access_child(1, child) is True
    assert AccessControlResolver(Role.PARENT).can_access_child(42, child) is True
    assert AccessControlResolver(Role.PARENT).can_access_child(99, child) is False
    assert AccessControlResolver(Role.EMPLOYEE).can_access_child(3, child) is True
    assert AccessControlResolver(Role.EMPLOYEE).can_access_child(4, child) is False
    assert AccessControlResolver(Role.EMPLOYEE).can_access_child(3, no_classroom) is False
    assert AccessControlResolver().can_access_child(42, child) is False
