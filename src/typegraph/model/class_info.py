"""ClassInfo: metadata for a discovered type.

ClassInfo is a tagged variant. ``kind`` selects between an ordinary class and
an array class; array classes carry an ``ArrayPayload`` with the array type
signature and the lazily resolved element ClassInfo.

Array classes have no class file of their own. When their element ClassInfo
is resolved, the array adopts the element's provenance (classpath element,
resource, loader, scanned/external flags, module, package) once, so that it
looks like any other scanned class to code that filters by origin.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

import structlog

from typegraph.core.errors import ClassInfoError, InternalError, TypeLoadError
from typegraph.model.lazy import LazySlot
from typegraph.model.provenance import (
    PROVENANCE_FIELDS,
    ClasspathElement,
    ModuleInfo,
    PackageInfo,
    Resource,
)

if TYPE_CHECKING:
    from typegraph.model.signatures import ArrayTypeSignature, TypeSignature
    from typegraph.scan.loader import TypeLoader
    from typegraph.scan.result import ScanResult

log = structlog.get_logger(__name__)


class ClassKind(str, Enum):
    """Discriminant for ClassInfo variants."""

    ORDINARY = "ordinary"
    ARRAY = "array"


@dataclass(slots=True)
class ArrayPayload:
    """Array-only state of a ClassInfo."""

    signature: ArrayTypeSignature
    element_class_info: LazySlot[ClassInfo] = field(default_factory=LazySlot)


@dataclass(eq=False, slots=True)
class ClassInfo:
    """Metadata for one type, identified by name."""

    name: str
    modifiers: int = 0
    kind: ClassKind = ClassKind.ORDINARY

    # Provenance (see PROVENANCE_FIELDS)
    classpath_element: ClasspathElement | None = None
    resource: Resource | None = None
    class_loader: TypeLoader | None = field(default=None, repr=False)
    is_scanned_class: bool = False
    is_external_class: bool = False
    module_info: ModuleInfo | None = None
    package_info: PackageInfo | None = None

    # Ordinary classes only
    class_signature: Any = field(default=None, repr=False)
    class_signature_str: str | None = None

    # Array classes only
    array: ArrayPayload | None = field(default=None, repr=False)

    scan_result: ScanResult | None = field(default=None, repr=False)
    _class_ref: LazySlot[Any] = field(default_factory=LazySlot, init=False, repr=False)

    def __post_init__(self) -> None:
        if (self.kind is ClassKind.ARRAY) != (self.array is not None):
            raise InternalError.unexpected(
                "array payload must be set exactly for array classes",
                name=self.name,
                kind=self.kind.value,
            )
        if self.kind is ClassKind.ARRAY:
            # Adopt element provenance before this instance is indexed anywhere
            self.get_element_class_info()

    @classmethod
    def for_array(
        cls,
        signature: ArrayTypeSignature,
        *,
        scan_result: ScanResult | None = None,
    ) -> ClassInfo:
        """Create the array ClassInfo for ``signature``."""
        if scan_result is None:
            scan_result = signature.scan_result
        return cls(
            name=signature.class_name,
            kind=ClassKind.ARRAY,
            array=ArrayPayload(signature),
            scan_result=scan_result,
        )

    # -------------------------------------------------------------------------
    # Signatures
    # -------------------------------------------------------------------------

    @property
    def is_array_class(self) -> bool:
        return self.kind is ClassKind.ARRAY

    @property
    def type_signature_str(self) -> str | None:
        """Raw type signature; ``[[I`` for ``int[][]``."""
        if self.kind is ClassKind.ARRAY:
            return self._require_array().signature.type_signature_str
        return self.class_signature_str

    @property
    def type_signature(self) -> Any:
        """Class type signature. Always None for array classes."""
        if self.kind is ClassKind.ARRAY:
            return None
        return self.class_signature

    @property
    def array_type_signature(self) -> ArrayTypeSignature:
        return self._require_array().signature

    @property
    def element_type_signature(self) -> TypeSignature:
        return self._require_array().signature.element_type_signature

    @property
    def num_dimensions(self) -> int:
        return self._require_array().signature.num_dimensions

    @property
    def package_name(self) -> str:
        if self.kind is ClassKind.ARRAY:
            return self.package_info.name if self.package_info is not None else ""
        dot = self.name.rfind(".")
        return self.name[:dot] if dot > 0 else ""

    def _require_array(self) -> ArrayPayload:
        if self.array is None:
            raise ClassInfoError.not_an_array(self.name)
        return self.array

    # -------------------------------------------------------------------------
    # Element resolution and provenance
    # -------------------------------------------------------------------------

    def get_element_class_info(self) -> ClassInfo | None:
        """ClassInfo of the array element type.

        Returns None for ordinary classes, for primitive element types, and
        when the element type was not found during the scan. The result is
        computed once and cached, including the None case.
        """
        if self.array is None:
            return None
        return self.array.element_class_info.get_or_resolve(self._resolve_element_class_info)

    def _resolve_element_class_info(self) -> ClassInfo | None:
        element_signature = self._require_array().signature.element_type_signature
        if element_signature.is_base_type:
            return None
        element = element_signature.get_class_info()
        if element is None:
            log.debug("class_info.element_absent", name=self.name, element=str(element_signature))
            return None
        self.adopt_provenance_from(element)
        log.debug("class_info.element_resolved", name=self.name, element=element.name)
        return element

    def adopt_provenance_from(self, source: ClassInfo) -> None:
        """Copy every field in PROVENANCE_FIELDS from ``source``."""
        for field_name in PROVENANCE_FIELDS:
            setattr(self, field_name, getattr(source, field_name))

    # -------------------------------------------------------------------------
    # Runtime handles
    # -------------------------------------------------------------------------

    def load_element_type_handle(self, ignore_failures: bool = False) -> Any:
        """Load the runtime handle of the array element type.

        Works for primitive element types, unlike get_element_class_info().

        Raises:
            TypeLoadError: if loading fails and ignore_failures is False.
            ClassInfoError: if this is not an array class.
        """
        return self._require_array().signature.load_element_class(ignore_failures)

    def load_class(self, ignore_failures: bool = False) -> Any:
        """Load the runtime handle for this class.

        For array classes this is the array type itself, not the element.
        The handle is cached after the first successful load; a failed load
        with ignore_failures=True returns None and is retried next time.

        Raises:
            TypeLoadError: if loading fails and ignore_failures is False.
        """
        return self._class_ref.get_or_resolve(
            lambda: self._load_class_uncached(ignore_failures),
            cache_absent=False,
        )

    def _load_class_uncached(self, ignore_failures: bool) -> Any:
        if self.kind is ClassKind.ARRAY:
            return self._require_array().signature.load_class(ignore_failures)
        if self.scan_result is None:
            if ignore_failures:
                return None
            raise TypeLoadError.load_failed(self.name, "class is not attached to a scan result")
        return self.scan_result.load_class(self.name, ignore_failures=ignore_failures)

    # -------------------------------------------------------------------------
    # Identity
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, ClassInfo):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ClassInfo):
            return NotImplemented
        return self.name < other.name

    def __str__(self) -> str:
        if self.kind is ClassKind.ARRAY:
            return str(self._require_array().signature)
        return self.name
