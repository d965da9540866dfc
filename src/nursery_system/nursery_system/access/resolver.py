"""Role-based access resolution.

``AccessControlResolver`` is an immutable value derived from a single role.
All operations are total: unknown permissions, features, resource/action
pairs and roles degrade to a denial or to a neutral display value instead of
raising.

Defaults differ on purpose between the two lookup tables:

* ``can_access_route`` treats a path missing from ``ROUTE_PERMISSIONS`` as
  having no requirements, so any caller (even one without a role) may reach
  it (fail-open).
* ``can_perform_action`` denies any resource/action pair missing from
  ``RESOURCE_ACTIONS`` (fail-closed).
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional

from ..core.constants import DEFAULT_ROLE_COLOR, DEFAULT_ROLE_DISPLAY_NAME
from ..core.enums import Feature, Role, enum_value, parse_role
from .model import ChildOwnership, MenuItem, QuickAction
from .tables import (
    MENU_ITEMS,
    QUICK_ACTIONS,
    RESOURCE_ACTIONS,
    ROLE_COLORS,
    ROLE_DISPLAY_NAMES,
    ROLE_FEATURES,
    ROLE_PERMISSIONS,
    ROUTE_PERMISSIONS,
)

_NO_PERMISSIONS: Mapping[str, bool] = MappingProxyType({})


def _lookup(table: Mapping, key: Any, default: Any) -> Any:
    try:
        return table.get(key, default)
    except TypeError:
        # unhashable key
        return default


class AccessControlResolver:
    """Permissions, features, menus and route/action checks for one role."""

    __slots__ = ("_role", "_permissions", "_features")

    def __init__(self, role: Any = None):
        self._role: Optional[Role] = parse_role(role) if role is not None else None
        if self._role is None:
            self._permissions = _NO_PERMISSIONS
            self._features: tuple[Feature, ...] = ()
        else:
            self._permissions = ROLE_PERMISSIONS.get(self._role, _NO_PERMISSIONS)
            self._features = ROLE_FEATURES.get(self._role, ())

    @classmethod
    def for_user(cls, user) -> "AccessControlResolver":
        """Resolver for a session user; anonymous or missing users get nothing."""
        if user is None or not getattr(user, "is_authenticated", False):
            return cls()
        return cls(getattr(user, "role", None))

    @classmethod
    def anonymous(cls) -> "AccessControlResolver":
        return cls()

    # -- state -------------------------------------------------------------

    @property
    def current_role(self) -> Optional[Role]:
        return self._role

    @property
    def permissions(self) -> Mapping[str, bool]:
        return self._permissions

    @property
    def features(self) -> tuple[Feature, ...]:
        return self._features

    @property
    def is_parent(self) -> bool:
        return self._role is Role.PARENT

    @property
    def is_employee(self) -> bool:
        return self._role is Role.EMPLOYEE

    @property
    def is_admin(self) -> bool:
        return self._role is Role.ADMIN

    # -- permission checks -------------------------------------------------

    def has_permission(self, name: Any) -> bool:
        return bool(_lookup(self._permissions, enum_value(name), False))

    def has_any_permission(self, names: Iterable[Any]) -> bool:
        return any(self.has_permission(n) for n in names)

    def has_all_permissions(self, names: Iterable[Any]) -> bool:
        return all(self.has_permission(n) for n in names)

    # -- features ----------------------------------------------------------

    def has_feature(self, name: Any) -> bool:
        value = enum_value(name)
        return any(f.value == value for f in self._features)

    def get_available_features(self) -> tuple[Feature, ...]:
        return self._features

    # -- routes and actions ------------------------------------------------

    def can_access_route(self, path: str) -> bool:
        return self.has_all_permissions(_lookup(ROUTE_PERMISSIONS, path, ()))

    def can_perform_action(self, resource: str, action: str) -> bool:
        permission = _lookup(_lookup(RESOURCE_ACTIONS, resource, {}), action, None)
        if permission is None:
            return False
        return self.has_permission(permission)

    def can_access_child(self, user_id: int, ownership: ChildOwnership) -> bool:
        """Admins see every child; anyone else must be its parent or its classroom teacher."""
        if self._role is Role.ADMIN:
            return True
        if self._role is Role.PARENT:
            return ownership.parent_id == user_id
        if self._role is Role.EMPLOYEE:
            return ownership.teacher_id is not None and ownership.teacher_id == user_id
        return False

    # -- navigation --------------------------------------------------------

    def get_menu_items(self) -> list[MenuItem]:
        items = MENU_ITEMS.get(self._role, ()) if self._role else ()
        return [item for item in items if self.has_permission(item.required_permission)]

    def get_quick_actions(self) -> list[QuickAction]:
        actions = QUICK_ACTIONS.get(self._role, ()) if self._role else ()
        return [a for a in actions if self.has_permission(a.required_permission)]

    # -- display -----------------------------------------------------------

    def get_role_display_name(self) -> str:
        if self._role is None:
            return DEFAULT_ROLE_DISPLAY_NAME
        return ROLE_DISPLAY_NAMES.get(self._role, DEFAULT_ROLE_DISPLAY_NAME)

    def get_role_color(self) -> str:
        if self._role is None:
            return DEFAULT_ROLE_COLOR
        return ROLE_COLORS.get(self._role, DEFAULT_ROLE_COLOR)

    def to_dict(self) -> dict:
        return {
            "current_role": self._role.value if self._role else None,
            "role_display_name": self.get_role_display_name(),
            "role_color": self.get_role_color(),
            "permissions": dict(self._permissions),
            "features": [f.value for f in self._features],
            "menu_items": [m.to_dict() for m in self.get_menu_items()],
            "quick_actions": [a.to_dict() for a in self.get_quick_actions()],
            "is_parent": self.is_parent,
            "is_employee": self.is_employee,
            "is_admin": self.is_admin,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AccessControlResolver):
            return NotImplemented
        return self._role is other._role

    def __hash__(self) -> int:
        return hash(self._role)

    def __repr__(self) -> str:
        return f"AccessControlResolver(role={self._role.value if self._role else None!r})"


def resolve_access(user) -> AccessControlResolver:
    return AccessControlResolver.for_user(user)
