from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: User.

    Plain data object; no DB access code lives here.
    """

    user_id: int
    first_name: str
    last_name: str
    email: str
    password_hash: str
    role: Role
    phone: Optional[str] = None
    is_active: bool = True
    last_login: Optional[datetime] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


@dataclass(frozen=True)
class SessionUser:
    """What the session knows about the current user.

    ``role`` stays None when the stored value is not a known role.
    """

    user_id: int
    full_name: str
    role: Optional[Role]
    is_authenticated: bool = True
