"""Runtime type loading.

A TypeLoader turns a dotted type name into a runtime handle. The default
ImportlibTypeLoader resolves names against Python modules: the longest
importable module prefix is imported, and the remaining parts are looked up
as attributes. ``$`` (nested class separator) is treated like ``.``.
"""

from __future__ import annotations

import builtins
import importlib
import sys
from types import ModuleType
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from typegraph.config.models import LoadingConfig


@runtime_checkable
class TypeLoader(Protocol):
    """Protocol for loading runtime type handles by name.

    Implementations raise on failure; the caller decides whether the failure
    is reported or ignored.
    """

    def load_type(self, name: str) -> Any:
        """Return the runtime handle for ``name``."""
        ...


class ImportlibTypeLoader:
    """Loads types from Python modules via importlib."""

    def __init__(self, *, allow_import: bool = True) -> None:
        self._allow_import = allow_import

    @property
    def allow_import(self) -> bool:
        return self._allow_import

    def load_type(self, name: str) -> Any:
        parts = name.replace("$", ".").split(".")
        if not all(parts):
            raise ValueError(f"Malformed type name: {name!r}")

        if len(parts) == 1 and isinstance(getattr(builtins, name, None), type):
            return getattr(builtins, name)

        for split in range(len(parts) - 1, 0, -1):
            module = self._find_module(".".join(parts[:split]))
            if module is None:
                continue
            obj: Any = module
            for attr in parts[split:]:
                obj = getattr(obj, attr)
            if not isinstance(obj, type):
                raise TypeError(f"{name} resolves to {type(obj).__name__}, not a type")
            return obj

        raise ModuleNotFoundError(f"No module found for type {name}", name=name)

    def _find_module(self, module_name: str) -> ModuleType | None:
        module = sys.modules.get(module_name)
        if module is not None or not self._allow_import:
            return module
        try:
            return importlib.import_module(module_name)
        except ModuleNotFoundError as e:
            # Missing module itself (or a parent): try a shorter prefix.
            # Anything else is a broken dependency of an existing module.
            if e.name is None or module_name == e.name or module_name.startswith(e.name + "."):
                return None
            raise

    def __repr__(self) -> str:
        return f"ImportlibTypeLoader(allow_import={self._allow_import})"


def create_type_loader(config: LoadingConfig | None = None) -> TypeLoader:
    """Build the default loader from loading config."""
    if config is None:
        return ImportlibTypeLoader()
    return ImportlibTypeLoader(allow_import=config.allow_import)
