from __future__ import annotations

from typing import Optional, Sequence

from werkzeug.security import check_password_hash, generate_password_hash

from ..access.resolver import AccessControlResolver
from ..common.validators import (
    require_email,
    require_max_length,
    require_min_length,
    require_non_empty,
    require_phone,
)
from ..core.enums import Permission, Role
from ..core.exceptions import AuthenticationError, AuthorizationError, ValidationError
from ..core.logger import get_logger
from .model import SessionUser
from .repository import UserRepository

log = get_logger(__name__)


class AuthService:
    """Use case: authenticate user (login)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def authenticate(self, email: str, password: str) -> SessionUser:
        if not isinstance(email, str) or not isinstance(password, str):
            raise AuthenticationError("Invalid email or password")
        user = self._users.get_by_email((email or "").strip().lower())
        if not user or not user.is_active:
            log.info("Login rejected for %r: unknown or inactive account", email)
            raise AuthenticationError("Invalid email or password")

        try:
            ok = check_password_hash(user.password_hash, password or "")
        except ValueError:
            # placeholder hashes such as 'CHANGE_ME'
            ok = False

        if not ok:
            log.info("Login rejected for user %s: wrong password", user.user_id)
            raise AuthenticationError("Invalid email or password")

        self._users.touch_last_login(user.user_id)
        return SessionUser(user_id=user.user_id, full_name=user.full_name, role=user.role)


class UserService:
    """Use case: manage user accounts (admin)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def create_account(
        self,
        *,
        access: AccessControlResolver,
        first_name: str,
        last_name: str,
        email: str,
        password: str,
        role: Role,
        phone: Optional[str] = None,
    ) -> int:
        if not access.has_permission(Permission.MANAGE_USERS):
            raise AuthorizationError("Only administrators can manage users")

        first_name = require_max_length(require_non_empty(first_name, "First name"), "First name", 50)
        last_name = require_max_length(require_non_empty(last_name, "Last name"), "Last name", 50)
        email = require_email(email)
        require_min_length(password, "Password", 6)
        if phone:
            phone = require_phone(phone)

        if self._users.get_by_email(email):
            raise ValidationError("Email is already registered")

        user_id = self._users.create_user(
            first_name=first_name,
            last_name=last_name,
            email=email,
            password_hash=generate_password_hash(password),
            role=role,
            phone=phone or None,
        )
        log.info("Created %s account %s", role.value, user_id)
        return user_id

    def list_active_ids_by_role(self, role: Role) -> Sequence[int]:
        return self._users.list_active_ids_by_role(role)
