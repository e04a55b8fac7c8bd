"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (TYPEGRAPH__SECTION__KEY)
3. Project YAML (.typegraph/config.yaml)
4. Global YAML (~/.config/typegraph/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    TYPEGRAPH__<SECTION>__<KEY>=<VALUE>

Examples:
    TYPEGRAPH__LOGGING__LEVEL=DEBUG
    TYPEGRAPH__LOADING__ALLOW_IMPORT=false
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        TYPEGRAPH__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG logs every lazy resolution.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class LoadingConfig(BaseModel):
    """Runtime type loading configuration.

    Env vars:
        TYPEGRAPH__LOADING__ALLOW_IMPORT: Import modules to resolve type handles
    """

    allow_import: bool = Field(
        default=True,
        description="Import modules on demand when loading type handles. "
        "When false, only modules already in sys.modules are consulted. "
        "RISK: importing runs module-level code of the scanned universe.",
    )


class TypegraphConfig(BaseModel):
    """Root configuration for typegraph.

    All settings can be configured via:
    1. Environment variables: TYPEGRAPH__SECTION__KEY
    2. YAML config files (project or global)
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    loading: LoadingConfig = Field(default_factory=LoadingConfig)
