"""Tests for type signatures and descriptor parsing."""

from __future__ import annotations

import pytest

from typegraph.core.errors import ErrorCode, SignatureError, TypeLoadError
from typegraph.model.handles import ArrayHandle
from typegraph.model.signatures import (
    ArrayTypeSignature,
    BaseTypeSignature,
    ClassRefTypeSignature,
    parse_array_type_signature,
    parse_type_descriptor,
)
from typegraph.scan.result import ScanResult


class TestBaseTypeSignature:
    @pytest.mark.parametrize(
        ("char", "type_str"),
        [
            ("B", "byte"),
            ("C", "char"),
            ("D", "double"),
            ("F", "float"),
            ("I", "int"),
            ("J", "long"),
            ("S", "short"),
            ("Z", "boolean"),
            ("V", "void"),
        ],
    )
    def test_descriptor_chars_round_trip(self, char: str, type_str: str) -> None:
        signature = parse_type_descriptor(char)

        assert isinstance(signature, BaseTypeSignature)
        assert signature.type_str == type_str
        assert signature.descriptor == char
        assert signature.is_base_type

    def test_unknown_base_type_rejected(self) -> None:
        with pytest.raises(SignatureError):
            BaseTypeSignature("integer")

    @pytest.mark.parametrize(
        ("type_str", "handle"),
        [("int", int), ("long", int), ("char", str), ("boolean", bool), ("double", float), ("void", type(None))],
    )
    def test_load_class_returns_python_stand_in(self, type_str: str, handle: type) -> None:
        assert BaseTypeSignature(type_str).load_class() is handle

    def test_has_no_class_info(self) -> None:
        assert BaseTypeSignature("int").get_class_info() is None


class TestClassRefTypeSignature:
    def test_internal_and_runtime_forms_parse_to_same_name(self) -> None:
        internal = parse_type_descriptor("Ljava/lang/String;")
        runtime = parse_type_descriptor("Ljava.lang.String;")

        assert internal == runtime
        assert isinstance(internal, ClassRefTypeSignature)
        assert internal.class_name == "java.lang.String"
        assert internal.descriptor == "Ljava/lang/String;"

    def test_nested_class_keeps_dollar(self) -> None:
        signature = parse_type_descriptor("Lcom/example/Outer$Inner;")

        assert str(signature) == "com.example.Outer$Inner"

    def test_detached_signature_has_no_class_info(self) -> None:
        assert ClassRefTypeSignature("com.example.Widget").get_class_info() is None

    def test_detached_signature_load_failure_policy(self) -> None:
        signature = ClassRefTypeSignature("com.example.Widget")

        assert signature.load_class(ignore_failures=True) is None
        with pytest.raises(TypeLoadError) as exc_info:
            signature.load_class()
        assert exc_info.value.details["type_name"] == "com.example.Widget"

    def test_referenced_class_names(self) -> None:
        names: set[str] = set()

        parse_type_descriptor("[[Lcom/example/Widget;").find_referenced_class_names(names)

        assert names == {"com.example.Widget"}


class TestArrayTypeSignature:
    @pytest.mark.parametrize("num_dimensions", [1, 2, 3, 5])
    @pytest.mark.parametrize(
        ("element", "element_descriptor"),
        [
            (BaseTypeSignature("int"), "I"),
            (BaseTypeSignature("boolean"), "Z"),
            (ClassRefTypeSignature("java.lang.String"), "Ljava/lang/String;"),
        ],
    )
    def test_signature_string_is_canonical(
        self, element: BaseTypeSignature | ClassRefTypeSignature, element_descriptor: str, num_dimensions: int
    ) -> None:
        """d nestings of E render as d '[' followed by E's descriptor."""
        # Given
        signature = ArrayTypeSignature(element, num_dimensions)

        # When
        rendered = signature.type_signature_str

        # Then
        assert rendered == "[" * num_dimensions + element_descriptor

    def test_int_two_dimensions(self) -> None:
        signature = ArrayTypeSignature(BaseTypeSignature("int"), 2)

        assert signature.type_signature_str == "[[I"
        assert signature.class_name == "[[I"
        assert str(signature) == "int[][]"

    def test_reference_class_name_uses_dots(self) -> None:
        signature = parse_array_type_signature("[Ljava/lang/String;")

        assert signature.type_signature_str == "[Ljava/lang/String;"
        assert signature.class_name == "[Ljava.lang.String;"
        assert str(signature) == "java.lang.String[]"

    def test_parse_reads_dimensions_and_element(self) -> None:
        signature = parse_array_type_signature("[[[J")

        assert signature.num_dimensions == 3
        assert signature.element_type_signature == BaseTypeSignature("long")

    @pytest.mark.parametrize("num_dimensions", [0, -1])
    def test_dimensions_below_one_rejected(self, num_dimensions: int) -> None:
        with pytest.raises(SignatureError) as exc_info:
            ArrayTypeSignature(BaseTypeSignature("int"), num_dimensions)
        assert exc_info.value.code == ErrorCode.SIGNATURE_INVALID

    def test_array_element_rejected(self) -> None:
        inner = ArrayTypeSignature(BaseTypeSignature("int"), 1)

        with pytest.raises(SignatureError):
            ArrayTypeSignature(inner, 1)

    def test_nested_type_dereferences_one_level(self) -> None:
        signature = parse_array_type_signature("[[I")

        nested = signature.nested_type

        assert nested == parse_array_type_signature("[I")
        assert nested.nested_type == BaseTypeSignature("int")  # type: ignore[attr-defined]

    def test_equality_and_hash(self) -> None:
        a = parse_array_type_signature("[[Ljava/lang/String;")
        b = ArrayTypeSignature(ClassRefTypeSignature("java.lang.String"), 2)
        c = ArrayTypeSignature(ClassRefTypeSignature("java.lang.String"), 1)

        assert a == b
        assert hash(a) == hash(b)
        assert a != c
        assert a.equals_ignoring_type_params(b)

    def test_set_scan_result_reaches_element(self) -> None:
        signature = parse_array_type_signature("[Lcom/example/Widget;")
        scan_result = ScanResult()

        signature.set_scan_result(scan_result)

        assert signature.scan_result is scan_result
        assert signature.element_type_signature.scan_result is scan_result

    def test_load_class_wraps_element_handle(self) -> None:
        signature = parse_array_type_signature("[[I")

        handle = signature.load_class()

        assert handle == ArrayHandle(int, 2)
        assert handle.name == "int[][]"

    def test_load_class_ignored_failure_returns_none(self) -> None:
        signature = parse_array_type_signature("[Lcom/example/Missing;")

        assert signature.load_class(ignore_failures=True) is None
        assert signature.load_element_class(ignore_failures=True) is None


class TestParseErrors:
    @pytest.mark.parametrize(
        "descriptor",
        [
            "",
            "[",
            "Q",
            "[[Q",
            "Ljava/lang/String",
            "L;",
            "II",
            "[I;",
            "Ljava/util/List<Ljava/lang/String;>;",
        ],
    )
    def test_malformed_descriptor_rejected(self, descriptor: str) -> None:
        with pytest.raises(SignatureError) as exc_info:
            parse_type_descriptor(descriptor)
        assert exc_info.value.code == ErrorCode.SIGNATURE_PARSE_ERROR

    @pytest.mark.parametrize("descriptor", ["[V", "[[V"])
    def test_void_array_rejected(self, descriptor: str) -> None:
        with pytest.raises(SignatureError) as exc_info:
            parse_array_type_signature(descriptor)
        assert exc_info.value.code == ErrorCode.SIGNATURE_PARSE_ERROR

    def test_void_alone_still_parses(self) -> None:
        assert parse_type_descriptor("V") == BaseTypeSignature("void")

    def test_non_array_rejected_by_array_parser(self) -> None:
        with pytest.raises(SignatureError):
            parse_array_type_signature("Ljava/lang/String;")
