"""Ordered, filterable lists of metadata entities."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from itertools import chain
from typing import Any, Generic, Protocol, TypeVar


class HasName(Protocol):
    @property
    def name(self) -> str: ...


T = TypeVar("T")
N = TypeVar("N", bound=HasName)


class InfoList(list[T], Generic[T]):
    """Insertion-ordered list of entities; duplicates are kept.

    Can be built empty, from a size hint, or from an iterable::

        InfoList()
        InfoList(64)
        InfoList(class_infos)

    The size hint only exists for symmetry with callers that know the
    expected size; it does not preallocate.
    """

    def __init__(self, items: Iterable[T] | int | None = None) -> None:
        if items is None or isinstance(items, int):
            super().__init__()
        else:
            super().__init__(items)

    def filter(self, predicate: Callable[[T], bool]) -> InfoList[T]:
        """Return a new list of the same class with the items ``predicate`` accepts.

        Order is preserved and this list is not modified. Exceptions raised by
        ``predicate`` propagate to the caller.
        """
        return type(self)(item for item in self if predicate(item))

    # -------------------------------------------------------------------------
    # Set operations
    #
    # These treat the lists as ordered sets: the result holds each distinct
    # item once, at the position of its first occurrence.
    # -------------------------------------------------------------------------

    def union(self, *others: Iterable[T]) -> InfoList[T]:
        """Items of this list followed by the new items of each of ``others``."""
        return type(self)(dict.fromkeys(chain(self, *others)))

    def intersect(self, *others: Iterable[T]) -> InfoList[T]:
        """Items of this list that occur in every one of ``others``, in this list's order."""
        kept = dict.fromkeys(self)
        for other in others:
            present = set(other)
            kept = {item: None for item in kept if item in present}
        return type(self)(kept)

    def exclude(self, other: Iterable[T]) -> InfoList[T]:
        """Items of this list that do not occur in ``other``."""
        removed = set(other)
        return type(self)(dict.fromkeys(item for item in self if item not in removed))

    @property
    def names(self) -> list[str]:
        """Names of the items; None entries are skipped."""
        return [item.name for item in self if item is not None]  # type: ignore[attr-defined]

    def as_strings(self) -> list[str]:
        return ["None" if item is None else str(item) for item in self]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list.__repr__(self)})"


class MappableInfoList(InfoList[N]):
    """InfoList whose entities can be looked up by name. None entries are skipped."""

    def load_classes(self, ignore_failures: bool = False) -> list[Any]:
        """Load the runtime handle of every entity, in order.

        Each entity must provide ``load_class(ignore_failures)``. With
        ignore_failures=True, entities that fail to load are left out, so the
        result may be shorter than this list.

        Raises:
            TypeLoadError: if any load fails and ignore_failures is False.
        """
        handles = []
        for item in self:
            if item is None:
                continue
            handle = item.load_class(ignore_failures)  # type: ignore[attr-defined]
            if handle is not None:
                handles.append(handle)
        return handles

    def as_map(self) -> dict[str, N]:
        """Map of name to entity; later duplicates win."""
        return {item.name: item for item in self if item is not None}

    def contains_name(self, name: str) -> bool:
        return any(item is not None and item.name == name for item in self)

    def get(self, name: str) -> N | None:
        """First entity with this name, or None."""
        for item in self:
            if item is not None and item.name == name:
                return item
        return None
