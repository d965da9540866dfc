from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Optional

from ..core.enums import Permission


@dataclass(frozen=True)
class MenuItem:
    path: str
    label: str
    icon: str
    required_permission: Permission

    def to_dict(self) -> dict:
        data = asdict(self)
        data["required_permission"] = self.required_permission.value
        return data


@dataclass(frozen=True)
class QuickAction:
    action: str
    label: str
    icon: str
    required_permission: Permission

    def to_dict(self) -> dict:
        data = asdict(self)
        data["required_permission"] = self.required_permission.value
        return data


@dataclass(frozen=True)
class ChildOwnership:
    """Who may see a child: the parent, and the teacher of its classroom."""

    child_id: int
    parent_id: int
    teacher_id: Optional[int] = None
