"""Three-state lazy slot for values resolved at most once.

A slot is ``UNRESOLVED`` until its resolver runs, then ``PRESENT`` (holding a
value) or ``ABSENT`` (resolver found nothing). ``None`` is never used as the
"not yet resolved" marker, so a cached absence is not re-resolved.

Slots are not synchronized. Concurrent first access to the same slot must be
serialized by the caller.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class SlotState(str, Enum):
    """Resolution state of a LazySlot."""

    UNRESOLVED = "unresolved"
    PRESENT = "present"
    ABSENT = "absent"


class LazySlot(Generic[T]):
    """Cache cell that transitions at most once out of UNRESOLVED."""

    __slots__ = ("_state", "_value")

    def __init__(self) -> None:
        self._state = SlotState.UNRESOLVED
        self._value: T | None = None

    @property
    def state(self) -> SlotState:
        return self._state

    @property
    def is_resolved(self) -> bool:
        return self._state is not SlotState.UNRESOLVED

    @property
    def value(self) -> T | None:
        """Cached value, or None when absent or unresolved."""
        return self._value

    def get_or_resolve(
        self,
        resolver: Callable[[], T | None],
        *,
        cache_absent: bool = True,
    ) -> T | None:
        """Return the cached value, running ``resolver`` only while unresolved.

        Args:
            resolver: Produces the value, or None if there is none.
            cache_absent: If False, a None result leaves the slot unresolved
                so that the next call tries again.
        """
        if self._state is SlotState.PRESENT:
            return self._value
        if self._state is SlotState.ABSENT:
            return None

        value = resolver()
        if value is not None:
            self._value = value
            self._state = SlotState.PRESENT
        elif cache_absent:
            self._state = SlotState.ABSENT
        return value

    def __repr__(self) -> str:
        if self._state is SlotState.PRESENT:
            return f"LazySlot(present={self._value!r})"
        return f"LazySlot({self._state.value})"
