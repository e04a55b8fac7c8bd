"""Runtime type handles that are not plain Python objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# Python stand-ins for primitive types. Several primitives share one handle.
BASE_TYPE_HANDLES: dict[str, type] = {
    "byte": int,
    "char": str,
    "double": float,
    "float": float,
    "int": int,
    "long": int,
    "short": int,
    "boolean": bool,
    "void": type(None),
}


@dataclass(frozen=True, slots=True)
class ArrayHandle:
    """Handle for a concrete array type: element handle plus dimensions."""

    element: Any
    num_dimensions: int

    @property
    def name(self) -> str:
        element_name = getattr(self.element, "__qualname__", None) or str(self.element)
        return element_name + "[]" * self.num_dimensions

    def __str__(self) -> str:
        return self.name
