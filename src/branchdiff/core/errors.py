"""Machine-readable error payloads.

Every failure the CLI reports maps to an ErrorCode. Codes are grouped by
range:
- 2xxx: configuration
- 3xxx: branch diff
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Stable numeric codes, safe to match on from scripts."""

    # Configuration (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002
    CONFIG_FILE_NOT_FOUND = 2003

    # Branch diff (3xxx)
    DIFF_FAILED = 3000
    DIFF_RESOLUTION = 3001
    DIFF_PATCH = 3002
    DIFF_LINE_RANGE = 3003
    DIFF_OBJECT_READ = 3004
    DIFF_TREE_WALK = 3005
    DIFF_INVALID_ARGUMENT = 3006
    DIFF_NOT_A_REPOSITORY = 3007


@dataclass(frozen=True, slots=True)
class StructuredError(Exception):
    """A reportable failure: code, human message and JSON-safe context."""

    code: ErrorCode
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": int(self.code),
            "error": self.error_name,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"{self.error_name} ({int(self.code)}): {self.message}"


class ConfigError(StructuredError):
    """Configuration could not be loaded."""

    @classmethod
    def parse_failed(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            ErrorCode.CONFIG_PARSE_ERROR,
            f"Cannot parse config file {path}: {reason}",
            {"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, setting: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            ErrorCode.CONFIG_INVALID_VALUE,
            f"Invalid value for {setting}: {reason}",
            {"setting": setting, "value": str(value), "reason": reason},
        )

    @classmethod
    def missing_file(cls, path: str) -> "ConfigError":
        return cls(
            ErrorCode.CONFIG_FILE_NOT_FOUND,
            f"Config file does not exist: {path}",
            {"path": path},
        )
