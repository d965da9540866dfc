from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union

from ..core.enums import NotificationPriority, NotificationType
from ..core.exceptions import ValidationError
from ..core.logger import get_logger
from .model import NotificationDraft

log = get_logger(__name__)

_PREFERENCE_TYPES = (
    NotificationType.ATTENDANCE,
    NotificationType.ACTIVITY,
    NotificationType.PAYMENT,
    NotificationType.MEDICAL,
    NotificationType.SYSTEM,
)
_FLAGS = ("sound", "desktop", "email", "push")
_TOGGLE_GROUPS = ("types", "priorities")


def _all_types() -> dict[str, bool]:
    return {t.value: True for t in _PREFERENCE_TYPES}


def _all_priorities() -> dict[str, bool]:
    return {p.value: True for p in NotificationPriority}


@dataclass(frozen=True)
class NotificationPreferences:
    sound: bool = True
    desktop: bool = True
    email: bool = False
    push: bool = True
    types: dict[str, bool] = field(default_factory=_all_types)
    priorities: dict[str, bool] = field(default_factory=_all_priorities)

    def allows(self, draft: NotificationDraft) -> bool:
        """Types and priorities not listed are allowed."""
        return self.types.get(draft.type, True) and self.priorities.get(draft.priority, True)

    def to_dict(self) -> dict:
        return {
            "sound": self.sound,
            "desktop": self.desktop,
            "email": self.email,
            "push": self.push,
            "types": dict(self.types),
            "priorities": dict(self.priorities),
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), sort_keys=True)


DEFAULT_PREFERENCES = NotificationPreferences()


def _from_dict(data: Mapping[str, Any]) -> NotificationPreferences:
    return NotificationPreferences(
        **{k: bool(data[k]) for k in _FLAGS},
        **{k: {str(t): bool(v) for t, v in data[k].items()} for k in _TOGGLE_GROUPS},
    )


def load_preferences(stored: Optional[Union[str, Mapping[str, Any]]]) -> NotificationPreferences:
    """Defaults overlaid with stored values (top-level keys only).

    A stored ``types`` or ``priorities`` entry replaces the default mapping
    wholesale. Unreadable JSON falls back to the defaults, and so does a
    stored group that is not an object.
    """
    if not stored:
        return DEFAULT_PREFERENCES

    if isinstance(stored, str):
        try:
            stored = json.loads(stored)
        except ValueError:
            log.warning("Ignoring unreadable notification preferences")
            return DEFAULT_PREFERENCES
    if not isinstance(stored, Mapping):
        return DEFAULT_PREFERENCES

    merged = DEFAULT_PREFERENCES.to_dict()
    for key, value in stored.items():
        if key in _TOGGLE_GROUPS and not isinstance(value, Mapping):
            continue
        if key in merged:
            merged[key] = value
    return _from_dict(merged)


def update_preferences(current: NotificationPreferences, changes: Any) -> NotificationPreferences:
    """Apply a client update; unlike stored documents, bad input is rejected."""
    if not isinstance(changes, Mapping):
        raise ValidationError("Preferences must be a JSON object")

    merged = current.to_dict()
    for key, value in changes.items():
        if key in _FLAGS:
            if not isinstance(value, bool):
                raise ValidationError(f"'{key}' must be true or false")
            merged[key] = value
        elif key in _TOGGLE_GROUPS:
            if not isinstance(value, Mapping) or not all(isinstance(v, bool) for v in value.values()):
                raise ValidationError(f"'{key}' must map names to true or false")
            merged[key] = {**merged[key], **value}
        else:
            raise ValidationError(f"Unknown preference '{key}'")
    return _from_dict(merged)
