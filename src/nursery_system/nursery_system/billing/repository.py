from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..access.model import ChildOwnership
from .model import PresenceRow


class PresenceRepository(Protocol):
    def get_presence_rows(self, *, child_id: int, start_date: date, end_date: date) -> Sequence[PresenceRow]:
        """Days with status 'present' in [start_date, end_date], oldest first."""
        raise NotImplementedError

    def get_child_ownership(self, child_id: int) -> Optional[ChildOwnership]:
        """Parent and classroom teacher of a child; None for an unknown child."""
        raise NotImplementedError
