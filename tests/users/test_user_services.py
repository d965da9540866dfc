from __future__ import annotations

import pytest
from werkzeug.security import generate_password_hash

from src.nursery_system.nursery_system.access.resolver import AccessControlResolver
from src.nursery_system.nursery_system.core.enums import Role
from src.nursery_system.nursery_system.core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ValidationError,
)
from src.nursery_system.nursery_system.users.model import User
from src.nursery_system.nursery_system.users.service import AuthService, UserService


class InMemoryUsers:
    def __init__(self, users=()):
        self.by_id = {u.user_id: u for u in users}
        self.touched = []

    def get_by_id(self, user_id):
        return self.by_id.get(user_id)

    def get_by_email(self, email):
        return next((u for u in self.by_id.values() if u.email == email), None)

    def create_user(self, *, first_name, last_name, email, password_hash, role, phone=None):
        user_id = max(self.by_id, default=0) + 1
        self.by_id[user_id] = User(user_id, first_name, last_name, email, password_hash, role, phone)
        return user_id

    def list_active_ids_by_role(self, role):
        return [u.user_id for u in self.by_id.values() if u.role is role and u.is_active]

    def touch_last_login(self, user_id):
        self.touched.append(user_id)


@pytest.fixture
def users():
    return InMemoryUsers(
        [
            User(1, "Ada", "Admin", "admin@nursery.local", generate_password_hash("secret1"), Role.ADMIN),
            User(2, "Pat", "Parent", "parent@nursery.local", generate_password_hash("secret2"), Role.PARENT),
            User(3, "Old", "Staff", "old@nursery.local", generate_password_hash("secret3"), Role.EMPLOYEE, is_active=False),
            User(4, "No", "Hash", "nohash@nursery.local", "CHANGE_ME", Role.PARENT),
        ]
    )


def test_authenticate_success(users):
    s_user = AuthService(users).authenticate(" Parent@Nursery.local ", "secret2")

    assert s_user.user_id == 2
    assert s_user.role is Role.PARENT
    assert s_user.full_name == "Pat Parent"
    assert users.touched == [2]


@pytest.mark.parametrize(
    "email, password",
    [
        ("parent@nursery.local", "wrong"),
        ("old@nursery.local", "secret3"),
        ("nobody@nursery.local", "x"),
        ("nohash@nursery.local", "CHANGE_ME"),
    ],
)
def test_authenticate_rejects(users, email, password):
    with pytest.raises(AuthenticationError):
        AuthService(users).authenticate(email, password)
    assert users.touched == []


def _new_account(**overrides):
    data = dict(
        first_name="Eve",
        last_name="Carer",
        email="eve@nursery.local",
        password="longenough",
        role=Role.EMPLOYEE,
    )
    data.update(overrides)
    return data


def test_admin_creates_account(users):
    svc = UserService(users)
    user_id = svc.create_account(access=AccessControlResolver(Role.ADMIN), **_new_account(email="EVE@nursery.local"))

    created = users.get_by_id(user_id)
    assert created.email == "eve@nursery.local"
    assert created.password_hash != "longenough"
    assert svc.list_active_ids_by_role(Role.EMPLOYEE) == [user_id]


@pytest.mark.parametrize("role", [Role.PARENT, Role.EMPLOYEE, None])
def test_only_admins_create_accounts(users, role):
    with pytest.raises(AuthorizationError):
        UserService(users).create_account(access=AccessControlResolver(role), **_new_account())


@pytest.mark.parametrize(
    "overrides",
    [
        {"email": "admin@nursery.local"},
        {"email": "not-an-email"},
        {"password": "123"},
        {"first_name": "  "},
        {"phone": "12"},
    ],
)
def test_invalid_accounts_are_rejected(users, overrides):
    with pytest.raises(ValidationError):
        UserService(users).create_account(access=AccessControlResolver(Role.ADMIN), **_new_account(**overrides))
