from __future__ import annotations

from src.nursery_system.nursery_system.access.store import AccessStore
from src.nursery_system.nursery_system.core.enums import Role
from src.nursery_system.nursery_system.users.model import SessionUser


def _user(role) -> SessionUser:
    return SessionUser(user_id=1, full_name="A", role=role)


def test_store_starts_empty():
    store = AccessStore()
    assert store.current.current_role is None
    assert dict(store.current.permissions) == {}
    assert store.current.features == ()


def test_login_then_logout_resets_everything():
    store = AccessStore()
    store.update(_user(Role.ADMIN))
    assert store.current.has_permission("canManageSystem") is True

    store.clear()
    assert store.current.has_permission("canManageSystem") is False
    assert store.current.features == ()


def test_role_change_does_not_carry_over_grants():
    store = AccessStore(_user(Role.EMPLOYEE))
    store.update(_user(Role.PARENT))

    assert store.current.has_permission("canCheckInOut") is False
    assert store.current.has_permission("canMakePayments") is True
    assert all(i.path.startswith("/parent/") for i in store.current.get_menu_items())


def test_admin_parent_admin_round_trip_is_identical():
    store = AccessStore(_user(Role.ADMIN))
    original_permissions = dict(store.current.permissions)
    original_features = store.current.features

    store.update(_user(Role.PARENT))
    store.update(_user(Role.ADMIN))

    assert dict(store.current.permissions) == original_permissions
    assert store.current.features == original_features


def test_listeners_see_consistent_snapshots():
    store = AccessStore()
    seen = []

    def listener(access):
        seen.append((access.current_role, access.has_permission("canCheckInOut"), access.has_feature("medical_alerts")))

    unsubscribe = store.subscribe(listener)
    store.update(_user(Role.EMPLOYEE))
    store.update(_user(Role.PARENT))
    unsubscribe()
    store.update(_user(Role.ADMIN))

    assert seen == [
        (Role.EMPLOYEE, True, True),
        (Role.PARENT, False, False),
    ]
