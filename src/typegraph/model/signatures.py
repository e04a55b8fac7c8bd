"""Type signatures parsed from JVM-style type descriptors.

Three concrete kinds are supported:

- BaseTypeSignature: primitive types (``I`` -> ``int``).
- ClassRefTypeSignature: named reference types (``Ljava/lang/String;``).
- ArrayTypeSignature: an innermost element plus a dimension count
  (``[[I`` -> ``int[][]``).

Signatures are attached to a ScanResult after parsing so that they can look up
ClassInfo entries and load runtime handles by name.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from typegraph.core.errors import SignatureError, TypeLoadError
from typegraph.model.handles import BASE_TYPE_HANDLES, ArrayHandle

if TYPE_CHECKING:
    from typegraph.model.class_info import ClassInfo
    from typegraph.scan.result import ScanResult

_BASE_TYPE_CHARS: dict[str, str] = {
    "B": "byte",
    "C": "char",
    "D": "double",
    "F": "float",
    "I": "int",
    "J": "long",
    "S": "short",
    "Z": "boolean",
    "V": "void",
}
_BASE_TYPE_DESCRIPTORS: dict[str, str] = {v: k for k, v in _BASE_TYPE_CHARS.items()}


class TypeSignature(ABC):
    """A parsed type."""

    def __init__(self) -> None:
        self._scan_result: ScanResult | None = None

    @property
    @abstractmethod
    def descriptor(self) -> str:
        """Internal descriptor text, e.g. ``I`` or ``Ljava/lang/String;``."""

    @property
    def is_base_type(self) -> bool:
        return False

    @property
    def scan_result(self) -> ScanResult | None:
        return self._scan_result

    def set_scan_result(self, scan_result: ScanResult | None) -> None:
        self._scan_result = scan_result

    def get_class_info(self) -> ClassInfo | None:
        """ClassInfo for this type, or None if there is none."""
        return None

    @abstractmethod
    def load_class(self, ignore_failures: bool = False) -> Any:
        """Load the runtime handle for this type.

        Raises:
            TypeLoadError: if loading fails and ignore_failures is False.
        """

    def find_referenced_class_names(self, out: set[str]) -> None:
        """Add names of classes referenced by this signature to ``out``."""

    def equals_ignoring_type_params(self, other: TypeSignature) -> bool:
        return self == other


class BaseTypeSignature(TypeSignature):
    """A primitive type such as ``int`` or ``boolean``."""

    def __init__(self, base_type: str) -> None:
        super().__init__()
        if base_type not in _BASE_TYPE_DESCRIPTORS:
            raise SignatureError.parse_error(base_type, 0, "unknown base type")
        self._base_type = base_type

    @classmethod
    def from_descriptor_char(cls, char: str) -> BaseTypeSignature | None:
        base_type = _BASE_TYPE_CHARS.get(char)
        return cls(base_type) if base_type else None

    @property
    def type_str(self) -> str:
        return self._base_type

    @property
    def descriptor(self) -> str:
        return _BASE_TYPE_DESCRIPTORS[self._base_type]

    @property
    def is_base_type(self) -> bool:
        return True

    def load_class(self, ignore_failures: bool = False) -> Any:  # noqa: ARG002
        return BASE_TYPE_HANDLES[self._base_type]

    def __eq__(self, other: object) -> bool:
        return isinstance(other, BaseTypeSignature) and other._base_type == self._base_type

    def __hash__(self) -> int:
        return hash(self._base_type)

    def __str__(self) -> str:
        return self._base_type

    def __repr__(self) -> str:
        return f"BaseTypeSignature({self._base_type!r})"


class ClassRefTypeSignature(TypeSignature):
    """A reference to a named class, e.g. ``java.lang.String``."""

    def __init__(self, class_name: str) -> None:
        super().__init__()
        self._class_name = class_name

    @property
    def class_name(self) -> str:
        """Fully qualified dotted name; nested classes keep ``$``."""
        return self._class_name

    @property
    def descriptor(self) -> str:
        return "L" + self._class_name.replace(".", "/") + ";"

    def get_class_info(self) -> ClassInfo | None:
        if self._scan_result is None:
            return None
        return self._scan_result.get_class_info(self._class_name)

    def load_class(self, ignore_failures: bool = False) -> Any:
        if self._scan_result is None:
            if ignore_failures:
                return None
            raise TypeLoadError.load_failed(self._class_name, "signature is not attached to a scan result")
        return self._scan_result.load_class(self._class_name, ignore_failures=ignore_failures)

    def find_referenced_class_names(self, out: set[str]) -> None:
        out.add(self._class_name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ClassRefTypeSignature) and other._class_name == self._class_name

    def __hash__(self) -> int:
        return hash(self._class_name)

    def __str__(self) -> str:
        return self._class_name

    def __repr__(self) -> str:
        return f"ClassRefTypeSignature({self._class_name!r})"


class ArrayTypeSignature(TypeSignature):
    """An array type: innermost element signature and number of dimensions."""

    def __init__(self, element_type_signature: TypeSignature, num_dimensions: int) -> None:
        super().__init__()
        if num_dimensions < 1:
            raise SignatureError.invalid_dimensions(num_dimensions)
        if isinstance(element_type_signature, ArrayTypeSignature):
            raise SignatureError.nested_array_element(str(element_type_signature))
        self._element_type_signature = element_type_signature
        self._num_dimensions = num_dimensions

    @property
    def element_type_signature(self) -> TypeSignature:
        return self._element_type_signature

    @property
    def num_dimensions(self) -> int:
        return self._num_dimensions

    @property
    def type_signature_str(self) -> str:
        """Raw signature, e.g. ``[[I`` for ``int[][]``."""
        return "[" * self._num_dimensions + self._element_type_signature.descriptor

    @property
    def descriptor(self) -> str:
        return self.type_signature_str

    @property
    def class_name(self) -> str:
        """Runtime class name, e.g. ``[[I`` or ``[Ljava.lang.String;``."""
        element = self._element_type_signature
        if isinstance(element, ClassRefTypeSignature):
            return "[" * self._num_dimensions + "L" + element.class_name + ";"
        return self.type_signature_str

    @property
    def nested_type(self) -> TypeSignature:
        """Signature after one dereference: ``int[]`` for ``int[][]``."""
        if self._num_dimensions == 1:
            return self._element_type_signature
        nested = ArrayTypeSignature(self._element_type_signature, self._num_dimensions - 1)
        nested._scan_result = self._scan_result
        return nested

    def set_scan_result(self, scan_result: ScanResult | None) -> None:
        super().set_scan_result(scan_result)
        self._element_type_signature.set_scan_result(scan_result)

    def get_class_info(self) -> ClassInfo | None:
        """The array's own ClassInfo, if the scan result has registered one."""
        if self._scan_result is None:
            return None
        return self._scan_result.get_class_info(self.class_name)

    def load_element_class(self, ignore_failures: bool = False) -> Any:
        """Load the element handle. Works for primitive elements too."""
        return self._element_type_signature.load_class(ignore_failures)

    def load_class(self, ignore_failures: bool = False) -> Any:
        element_handle = self.load_element_class(ignore_failures)
        if element_handle is None:
            return None
        return ArrayHandle(element_handle, self._num_dimensions)

    def find_referenced_class_names(self, out: set[str]) -> None:
        self._element_type_signature.find_referenced_class_names(out)

    def equals_ignoring_type_params(self, other: TypeSignature) -> bool:
        return (
            isinstance(other, ArrayTypeSignature)
            and other._num_dimensions == self._num_dimensions
            and other._element_type_signature.equals_ignoring_type_params(self._element_type_signature)
        )

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, ArrayTypeSignature)
            and other._element_type_signature == self._element_type_signature
            and other._num_dimensions == self._num_dimensions
        )

    def __hash__(self) -> int:
        return hash(self._element_type_signature) + self._num_dimensions * 15

    def __str__(self) -> str:
        return str(self._element_type_signature) + "[]" * self._num_dimensions

    def __repr__(self) -> str:
        return f"ArrayTypeSignature({self._element_type_signature!r}, {self._num_dimensions})"


# =============================================================================
# Descriptor parsing
# =============================================================================


class _DescriptorParser:
    __slots__ = ("text", "pos")

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def advance(self) -> str:
        char = self.peek()
        self.pos += 1
        return char

    def has_more(self) -> bool:
        return self.pos < len(self.text)

    def fail(self, reason: str) -> SignatureError:
        return SignatureError.parse_error(self.text, self.pos, reason)


def _parse_type(parser: _DescriptorParser) -> TypeSignature:
    char = parser.peek()
    if char == "[":
        num_dimensions = 0
        while parser.peek() == "[":
            num_dimensions += 1
            parser.advance()
        if parser.peek() == "V":
            raise parser.fail("void is not a valid array element type")
        return ArrayTypeSignature(_parse_type(parser), num_dimensions)
    if char == "L":
        parser.advance()
        end = parser.text.find(";", parser.pos)
        if end < 0:
            raise parser.fail("unterminated class reference")
        internal_name = parser.text[parser.pos : end]
        if not internal_name:
            raise parser.fail("empty class name")
        if "<" in internal_name:
            raise parser.fail("type arguments are not supported in descriptors")
        parser.pos = end + 1
        return ClassRefTypeSignature(internal_name.replace("/", "."))
    base = BaseTypeSignature.from_descriptor_char(char)
    if base is None:
        raise parser.fail("expected a type descriptor" if char else "unexpected end of descriptor")
    parser.advance()
    return base


def parse_type_descriptor(descriptor: str) -> TypeSignature:
    """Parse a complete type descriptor.

    Accepts internal (``[Ljava/lang/String;``) and runtime
    (``[Ljava.lang.String;``) class reference forms.

    Raises:
        SignatureError: on malformed input or trailing characters.
    """
    parser = _DescriptorParser(descriptor)
    signature = _parse_type(parser)
    if parser.has_more():
        raise parser.fail("extra characters at end of descriptor")
    return signature


def parse_array_type_signature(descriptor: str) -> ArrayTypeSignature:
    """Parse a descriptor that must denote an array type."""
    signature = parse_type_descriptor(descriptor)
    if not isinstance(signature, ArrayTypeSignature):
        raise SignatureError.parse_error(descriptor, 0, "not an array type descriptor")
    return signature
