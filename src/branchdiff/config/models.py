"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (BRANCHDIFF__SECTION__KEY)
3. Repo YAML (<repo>/.branchdiff/config.yaml)
4. Global YAML (~/.config/branchdiff/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    BRANCHDIFF__<SECTION>__<KEY>=<VALUE>

Examples:
    BRANCHDIFF__LOGGING__LEVEL=DEBUG
    BRANCHDIFF__DIFF__ENCODING=latin-1
    BRANCHDIFF__DIFF__DETECT_RENAMES=true
"""

import codecs
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
DecodeErrors = Literal["strict", "replace", "ignore", "backslashreplace"]


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
        BRANCHDIFF__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG logs every tree walk.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class DiffConfig(BaseModel):
    """Branch diff behavior.

    Env vars:
        BRANCHDIFF__DIFF__ENCODING: Codec used to decode blob content
        BRANCHDIFF__DIFF__DECODE_ERRORS: Codec error handler
        BRANCHDIFF__DIFF__DETECT_RENAMES: Run libgit2 similarity detection
        BRANCHDIFF__DIFF__SKIP_BINARY: Report binary files with no regions
    """

    encoding: str = Field(
        default="utf-8",
        description="Codec used to decode blob content before splitting lines.",
    )
    decode_errors: DecodeErrors = Field(
        default="replace",
        description="How undecodable bytes are handled. "
        "'strict' fails the whole diff on the first bad byte.",
    )
    detect_renames: bool = Field(
        default=False,
        description="Let libgit2 pair deletes with adds as RENAME/COPY entries.",
    )
    skip_binary: bool = Field(
        default=False,
        description="Binary files yield no regions instead of failing the diff.",
    )

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {v}") from e
        return v


class BranchDiffConfig(BaseModel):
    """Root configuration for branchdiff.

    All settings can be configured via:
    1. Environment variables: BRANCHDIFF__SECTION__KEY
    2. YAML config files (repo or global)
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    diff: DiffConfig = Field(default_factory=DiffConfig)
