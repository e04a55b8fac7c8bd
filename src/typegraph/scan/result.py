"""ScanResult: registry of discovered ClassInfo entries.

The discovery pipeline registers ordinary classes with add_class_info() and
array classes with get_or_create_array_class_info(), which guarantees one
array ClassInfo per distinct array class name. Signatures and ClassInfo
entries reach back to the ScanResult to look up other classes and to load
runtime handles.
"""

from __future__ import annotations

from typing import Any

import structlog

from typegraph.config.models import TypegraphConfig
from typegraph.core.errors import TypeLoadError
from typegraph.model.class_info import ClassInfo
from typegraph.model.info_list import MappableInfoList
from typegraph.model.signatures import ArrayTypeSignature
from typegraph.scan.loader import TypeLoader, create_type_loader

log = structlog.get_logger(__name__)


class ScanResult:
    """Class metadata discovered by one scan.

    Usage::

        scan_result = ScanResult()
        scan_result.add_class_info(ClassInfo("com.example.Widget", is_scanned_class=True))
        signature = parse_array_type_signature("[[Lcom/example/Widget;")
        widgets = scan_result.get_or_create_array_class_info(signature)
        widgets.get_element_class_info()  # the Widget ClassInfo
    """

    def __init__(
        self,
        loader: TypeLoader | None = None,
        *,
        config: TypegraphConfig | None = None,
    ) -> None:
        self._config = config or TypegraphConfig()
        self._loader = loader if loader is not None else create_type_loader(self._config.loading)
        self._class_name_to_class_info: dict[str, ClassInfo] = {}

    @property
    def loader(self) -> TypeLoader:
        return self._loader

    @property
    def config(self) -> TypegraphConfig:
        return self._config

    # -------------------------------------------------------------------------
    # Registry
    # -------------------------------------------------------------------------

    def add_class_info(self, class_info: ClassInfo) -> ClassInfo:
        """Register ``class_info`` and attach it to this scan result.

        If a ClassInfo with the same name is already registered, that one is
        kept and returned. Classes registered without a loader get this scan
        result's loader.
        """
        existing = self._class_name_to_class_info.get(class_info.name)
        if existing is not None:
            return existing
        class_info.scan_result = self
        if class_info.class_loader is None:
            class_info.class_loader = self._loader
        self._class_name_to_class_info[class_info.name] = class_info
        return class_info

    def get_class_info(self, name: str) -> ClassInfo | None:
        return self._class_name_to_class_info.get(name)

    def get_or_create_array_class_info(self, signature: ArrayTypeSignature) -> ClassInfo:
        """Return the array ClassInfo for ``signature``, creating it on first use."""
        signature.set_scan_result(self)
        existing = self._class_name_to_class_info.get(signature.class_name)
        if existing is not None:
            return existing
        class_info = ClassInfo.for_array(signature, scan_result=self)
        self._class_name_to_class_info[class_info.name] = class_info
        log.debug(
            "scan_result.array_class_created",
            name=class_info.name,
            element_found=class_info.get_element_class_info() is not None,
        )
        return class_info

    def get_all_classes(self) -> MappableInfoList[ClassInfo]:
        """All registered classes, sorted by name."""
        return MappableInfoList(sorted(self._class_name_to_class_info.values()))

    def get_array_classes(self) -> MappableInfoList[ClassInfo]:
        return self.get_all_classes().filter(lambda ci: ci.is_array_class)  # type: ignore[return-value]

    # -------------------------------------------------------------------------
    # Class loading
    # -------------------------------------------------------------------------

    def load_class(self, name: str, ignore_failures: bool = False) -> Any:
        """Load the runtime handle for the type called ``name``.

        Args:
            name: Dotted type name.
            ignore_failures: Return None instead of raising when loading fails.

        Raises:
            TypeLoadError: if ``name`` is empty, or if loading fails and
                ignore_failures is False.
        """
        if not name:
            raise TypeLoadError.empty_name()
        try:
            return self._loader.load_type(name)
        except Exception as e:
            if ignore_failures:
                log.debug("scan_result.load_failed_ignored", name=name, error=str(e))
                return None
            raise TypeLoadError.load_failed(name, f"{type(e).__name__}: {e}") from e
