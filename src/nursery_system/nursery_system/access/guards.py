"""Flask view guards built on the access resolver.

The session (``user_id``, ``name``, ``role``) is the only source of the
current user; every request derives its resolver from it afresh.
"""

from __future__ import annotations

from functools import wraps
from typing import Callable, Optional

from flask import g, jsonify, session

from ..core.enums import Permission, Role, enum_value, parse_role
from ..core.logger import get_logger
from ..users.model import SessionUser
from .model import ChildOwnership
from .resolver import AccessControlResolver

log = get_logger(__name__)


def current_session_user() -> Optional[SessionUser]:
    user_id = session.get("user_id")
    if user_id is None:
        return None
    return SessionUser(
        user_id=int(user_id),
        full_name=session.get("name") or "",
        role=parse_role(session.get("role")),
    )


def current_access() -> AccessControlResolver:
    access = g.get("access")
    if access is None:
        access = AccessControlResolver.for_user(current_session_user())
        g.access = access
    return access


def _deny(status: int, message: str):
    return jsonify({"error": message}), status


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if current_session_user() is None:
            return _deny(401, "Not authorized to access this route")
        return view(*args, **kwargs)

    return wrapper


def roles_required(*roles: Role):
    """Allow only the given roles.

    Parents are further limited to their own data: a ``parent_id`` view
    argument must match the session user.
    """

    allowed = {enum_value(r) for r in roles}

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            user = current_session_user()
            if user is None:
                return _deny(401, "Not authorized to access this route")

            if user.role is None:
                log.info("Rejected user %s with unknown role", user.user_id)
                return _deny(403, "Invalid user role")

            if user.role.value not in allowed:
                log.info("Role %s denied for %s", user.role.value, view.__name__)
                return _deny(
                    403,
                    f"User role '{user.role.value}' is not authorized to access this route. "
                    f"Allowed roles: {', '.join(sorted(allowed))}",
                )

            parent_id = kwargs.get("parent_id")
            if user.role is Role.PARENT and parent_id is not None and int(parent_id) != user.user_id:
                return _deny(403, "Not authorized to access this parent data")

            return view(*args, **kwargs)

        return wrapper

    return decorator


def permission_required(*permissions: Permission):
    """Require every listed permission (logical AND)."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if current_session_user() is None:
                return _deny(401, "Not authorized to access this route")
            if not current_access().has_all_permissions(permissions):
                log.info("Permission check failed for %s", view.__name__)
                return _deny(403, "You do not have permission to perform this action")
            return view(*args, **kwargs)

        return wrapper

    return decorator


def action_required(resource: str, action: str):
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if current_session_user() is None:
                return _deny(401, "Not authorized to access this route")
            if not current_access().can_perform_action(resource, action):
                log.info("Action %s/%s denied for %s", resource, action, view.__name__)
                return _deny(403, f"Not authorized to {action} {resource}")
            return view(*args, **kwargs)

        return wrapper

    return decorator


def child_access_required(lookup: Callable[[int], Optional[ChildOwnership]]):
    """Limit a ``child_id`` view to users allowed to see that child.

    ``lookup`` returns the child's ownership, or None when the child does not
    exist (404).
    """

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            user = current_session_user()
            if user is None:
                return _deny(401, "Not authorized to access this route")

            child_id = int(kwargs["child_id"])
            ownership = lookup(child_id)
            if ownership is None:
                return _deny(404, "Child not found")

            access = current_access()
            if not access.can_access_child(user.user_id, ownership):
                log.info("User %s denied access to child %s", user.user_id, child_id)
                if access.is_employee:
                    return _deny(403, "Child not in your classroom")
                return _deny(403, "Not authorized to access this child")
            return view(*args, **kwargs)

        return wrapper

    return decorator
