"""Branch diff operations module."""

from branchdiff.git._internal import RepoAccess, open_repository
from branchdiff.git.enumerator import TreeChangeEnumerator, enumerate_changes
from branchdiff.git.errors import (
    BranchDiffError,
    DiffComputationError,
    InvalidArgumentError,
    LineRangeError,
    NotARepositoryError,
    ObjectReadError,
    PatchFormattingError,
    ResolutionError,
)
from branchdiff.git.lines import LineExtractor, extract_lines
from branchdiff.git.models import (
    ABSENT,
    Absent,
    ChangedEntry,
    ChangeKind,
    EditKind,
    EditRegion,
    FileDiff,
    ObjectRef,
    Present,
    object_ref,
)
from branchdiff.git.ops import BranchDiff, diff_branches
from branchdiff.git.regions import EditRegionResolver, resolve_regions

__all__ = [
    # Entry points
    "BranchDiff",
    "diff_branches",
    "open_repository",
    "RepoAccess",
    # Components
    "TreeChangeEnumerator",
    "enumerate_changes",
    "EditRegionResolver",
    "resolve_regions",
    "LineExtractor",
    "extract_lines",
    # Models
    "ABSENT",
    "Absent",
    "Present",
    "ObjectRef",
    "object_ref",
    "ChangeKind",
    "EditKind",
    "ChangedEntry",
    "EditRegion",
    "FileDiff",
    # Errors
    "BranchDiffError",
    "InvalidArgumentError",
    "NotARepositoryError",
    "ResolutionError",
    "DiffComputationError",
    "PatchFormattingError",
    "ObjectReadError",
    "LineRangeError",
]
