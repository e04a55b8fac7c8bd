"""Core module exports."""

from typegraph.core.errors import (
    ClassInfoError,
    ConfigError,
    ErrorCode,
    InternalError,
    SignatureError,
    TypegraphError,
    TypeLoadError,
)
from typegraph.core.logging import (
    clear_scan_id,
    configure_logging,
    get_logger,
    get_scan_id,
    set_scan_id,
)

__all__ = [
    # Errors
    "ClassInfoError",
    "ConfigError",
    "ErrorCode",
    "InternalError",
    "SignatureError",
    "TypeLoadError",
    "TypegraphError",
    # Logging
    "clear_scan_id",
    "configure_logging",
    "get_logger",
    "get_scan_id",
    "set_scan_id",
]
