"""Core module exports."""

from branchdiff.core.errors import ConfigError, ErrorCode, StructuredError
from branchdiff.core.logging import (
    configure_logging,
    current_request_id,
    get_logger,
    request_scope,
)

__all__ = [
    # Errors
    "ConfigError",
    "ErrorCode",
    "StructuredError",
    # Logging
    "configure_logging",
    "current_request_id",
    "get_logger",
    "request_scope",
]
