"""Typegraph error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Type resolution (signatures, class loading, class metadata)
- 9xxx: Internal
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002
    CONFIG_MISSING_REQUIRED = 2003
    CONFIG_FILE_NOT_FOUND = 2004

    # Type resolution (3xxx)
    SIGNATURE_PARSE_ERROR = 3001
    SIGNATURE_INVALID = 3002
    TYPE_LOAD_FAILED = 3101
    TYPE_NAME_EMPTY = 3102
    CLASS_NOT_ARRAY = 3201

    # Internal (9xxx)
    INTERNAL_ERROR = 9001


@dataclass(frozen=True, slots=True)
class TypegraphError(Exception):
    """Base error with structured context for reporting."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'TYPE_LOAD_FAILED')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(TypegraphError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )

    @classmethod
    def missing_required(cls, field: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_MISSING_REQUIRED,
            message=f"Missing required config field: {field}",
            details={"field": field},
        )

    @classmethod
    def file_not_found(cls, path: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_FILE_NOT_FOUND,
            message=f"Config file not found: {path}",
            details={"path": path},
        )


class SignatureError(TypegraphError):
    """Malformed type descriptors or inconsistent signature construction."""

    @classmethod
    def parse_error(cls, descriptor: str, position: int, reason: str) -> "SignatureError":
        return cls(
            code=ErrorCode.SIGNATURE_PARSE_ERROR,
            message=f"Cannot parse type descriptor {descriptor!r} at position {position}: {reason}",
            details={"descriptor": descriptor, "position": position, "reason": reason},
        )

    @classmethod
    def invalid_dimensions(cls, num_dimensions: int) -> "SignatureError":
        return cls(
            code=ErrorCode.SIGNATURE_INVALID,
            message=f"Array signature needs at least one dimension, got {num_dimensions}",
            details={"num_dimensions": num_dimensions},
        )

    @classmethod
    def nested_array_element(cls, element: str) -> "SignatureError":
        return cls(
            code=ErrorCode.SIGNATURE_INVALID,
            message=f"Array element signature must not itself be an array: {element}",
            details={"element": element},
        )


class TypeLoadError(TypegraphError):
    """A runtime type handle could not be obtained."""

    @classmethod
    def load_failed(cls, type_name: str, reason: str) -> "TypeLoadError":
        return cls(
            code=ErrorCode.TYPE_LOAD_FAILED,
            message=f"Could not load type {type_name}: {reason}",
            details={"type_name": type_name, "reason": reason},
        )

    @classmethod
    def empty_name(cls) -> "TypeLoadError":
        return cls(
            code=ErrorCode.TYPE_NAME_EMPTY,
            message="Type name cannot be empty",
        )


class ClassInfoError(TypegraphError):
    """Operation not valid for this kind of class metadata."""

    @classmethod
    def not_an_array(cls, name: str) -> "ClassInfoError":
        return cls(
            code=ErrorCode.CLASS_NOT_ARRAY,
            message=f"{name} is not an array class",
            details={"name": name},
        )


class InternalError(TypegraphError):
    """Internal/unexpected errors."""

    @classmethod
    def unexpected(cls, reason: str, **details: Any) -> "InternalError":
        return cls(
            code=ErrorCode.INTERNAL_ERROR,
            message=f"Internal error: {reason}",
            details=details,
        )
