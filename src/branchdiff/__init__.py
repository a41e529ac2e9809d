"""branchdiff - line-level diff records between two git branches."""

from branchdiff.git import (
    ABSENT,
    BranchDiff,
    BranchDiffError,
    FileDiff,
    diff_branches,
    open_repository,
)

__version__ = "0.1.0"

__all__ = [
    "ABSENT",
    "BranchDiff",
    "BranchDiffError",
    "FileDiff",
    "diff_branches",
    "open_repository",
    "__version__",
]
