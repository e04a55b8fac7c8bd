"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages, and
provides shared fakes for the type loading layer.
"""

import sys
from pathlib import Path
from typing import Any

import pytest

# Insert local src directory at the beginning of sys.path
# This ensures that the local typegraph package is used, not any installed one
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

# Force reimport of typegraph modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("typegraph"):
        del sys.modules[module_name]


class CountingLoader:
    """TypeLoader fake backed by a dict; records every requested name."""

    def __init__(self, types: dict[str, Any] | None = None) -> None:
        self.types: dict[str, Any] = dict(types or {})
        self.calls: list[str] = []

    def load_type(self, name: str) -> Any:
        self.calls.append(name)
        try:
            return self.types[name]
        except KeyError:
            raise ModuleNotFoundError(f"No type {name}", name=name) from None


class Widget:
    """Stand-in runtime type for a scanned class."""


@pytest.fixture
def counting_loader() -> CountingLoader:
    return CountingLoader({"com.example.Widget": Widget})
