"""Internal components for branch diffs - not part of public API."""

from branchdiff.git._internal.access import RepoAccess, open_repository
from branchdiff.git._internal.errors import ErrorMapper, git_operation
from branchdiff.git._internal.parsing import hunk_range, split_lines

__all__ = [
    "ErrorMapper",
    "RepoAccess",
    "git_operation",
    "hunk_range",
    "open_repository",
    "split_lines",
]
