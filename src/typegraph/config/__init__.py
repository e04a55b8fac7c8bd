"""Config module exports."""

from typegraph.config.loader import load_config
from typegraph.config.models import (
    LoadingConfig,
    LoggingConfig,
    LogOutputConfig,
    TypegraphConfig,
)

__all__ = [
    "load_config",
    "LoadingConfig",
    "LoggingConfig",
    "LogOutputConfig",
    "TypegraphConfig",
]
