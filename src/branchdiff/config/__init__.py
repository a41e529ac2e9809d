"""Config module exports."""

from branchdiff.config.loader import load_config
from branchdiff.config.models import (
    BranchDiffConfig,
    DiffConfig,
    LoggingConfig,
    LogOutputConfig,
)

__all__ = [
    "load_config",
    "BranchDiffConfig",
    "DiffConfig",
    "LoggingConfig",
    "LogOutputConfig",
]
