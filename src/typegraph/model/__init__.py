"""Metadata model: signatures, class metadata and entity lists."""

from typegraph.model.class_info import ArrayPayload, ClassInfo, ClassKind
from typegraph.model.handles import ArrayHandle
from typegraph.model.info_list import HasName, InfoList, MappableInfoList
from typegraph.model.lazy import LazySlot, SlotState
from typegraph.model.provenance import (
    PROVENANCE_FIELDS,
    ClasspathElement,
    ModuleInfo,
    PackageInfo,
    Resource,
)
from typegraph.model.signatures import (
    ArrayTypeSignature,
    BaseTypeSignature,
    ClassRefTypeSignature,
    TypeSignature,
    parse_array_type_signature,
    parse_type_descriptor,
)

__all__ = [
    # Class metadata
    "ArrayPayload",
    "ClassInfo",
    "ClassKind",
    # Lists
    "HasName",
    "InfoList",
    "MappableInfoList",
    # Lazy resolution
    "LazySlot",
    "SlotState",
    # Provenance
    "PROVENANCE_FIELDS",
    "ClasspathElement",
    "ModuleInfo",
    "PackageInfo",
    "Resource",
    # Signatures
    "ArrayHandle",
    "ArrayTypeSignature",
    "BaseTypeSignature",
    "ClassRefTypeSignature",
    "TypeSignature",
    "parse_array_type_signature",
    "parse_type_descriptor",
]
