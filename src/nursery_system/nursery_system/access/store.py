from __future__ import annotations

from typing import Callable, List

from ..core.logger import get_logger
from .resolver import AccessControlResolver

log = get_logger(__name__)

Listener = Callable[[AccessControlResolver], None]


class AccessStore:
    """Single-writer holder of the current resolver.

    Every session change builds a brand new resolver and swaps it in with one
    assignment, so readers always see permissions and features that belong to
    the same role. Listeners are called after the swap.
    """

    def __init__(self, user=None):
        self._current = AccessControlResolver.for_user(user)
        self._listeners: List[Listener] = []

    @property
    def current(self) -> AccessControlResolver:
        return self._current

    def update(self, user) -> AccessControlResolver:
        """Re-derive access for ``user`` (None or unauthenticated clears it)."""
        previous = self._current
        resolved = AccessControlResolver.for_user(user)
        self._current = resolved
        if resolved.current_role is not previous.current_role:
            log.debug(
                "Access role changed: %s -> %s",
                previous.current_role.value if previous.current_role else None,
                resolved.current_role.value if resolved.current_role else None,
            )
        self._notify(resolved)
        return resolved

    def clear(self) -> AccessControlResolver:
        return self.update(None)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, resolved: AccessControlResolver) -> None:
        for listener in list(self._listeners):
            listener(resolved)
