"""Branch diff error types.

Each error carries an ErrorCode and its context as ``details`` so the CLI
can report it as a structured payload.
"""

from typing import Any

from branchdiff.core.errors import ErrorCode, StructuredError


class BranchDiffError(Exception):
    """Base error for branch diff operations."""

    code: ErrorCode = ErrorCode.DIFF_FAILED

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(message)
        self.details = details

    def to_structured(self) -> StructuredError:
        return StructuredError(self.code, str(self), dict(self.details))


class InvalidArgumentError(BranchDiffError, ValueError):
    """Malformed input, rejected before any repository access."""

    code = ErrorCode.DIFF_INVALID_ARGUMENT

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"Invalid argument {name!r}: {reason}", name=name, reason=reason)
        self.name = name
        self.reason = reason


class NotARepositoryError(BranchDiffError):
    """Path is not a git repository."""

    code = ErrorCode.DIFF_NOT_A_REPOSITORY

    def __init__(self, path: str) -> None:
        super().__init__(f"Not a git repository: {path}", path=path)
        self.path = path


class ResolutionError(BranchDiffError):
    """Branch does not resolve to a tree."""

    code = ErrorCode.DIFF_RESOLUTION

    def __init__(self, branch: str, reason: str | None = None) -> None:
        reason_part = f" ({reason})" if reason else ""
        super().__init__(
            f"Cannot resolve branch to a tree: {branch}{reason_part}",
            branch=branch,
            reason=reason,
        )
        self.branch = branch
        self.reason = reason


class DiffComputationError(BranchDiffError):
    """Enumerating changed entries between two trees failed."""

    code = ErrorCode.DIFF_TREE_WALK


class PatchFormattingError(BranchDiffError):
    """Edit regions for a file pair could not be derived."""

    code = ErrorCode.DIFF_PATCH

    def __init__(self, path: str | None, reason: str) -> None:
        super().__init__(
            f"Cannot format patch for {path or '<unknown>'}: {reason}", path=path, reason=reason
        )
        self.path = path
        self.reason = reason


class ObjectReadError(BranchDiffError):
    """Object could not be read from the object store."""

    code = ErrorCode.DIFF_OBJECT_READ

    def __init__(self, sha: str, reason: str) -> None:
        super().__init__(f"Cannot read object {sha}: {reason}", sha=sha, reason=reason)
        self.sha = sha
        self.reason = reason


class LineRangeError(BranchDiffError, IndexError):
    """Requested line range lies outside the object's content."""

    code = ErrorCode.DIFF_LINE_RANGE

    def __init__(self, sha: str, start: int, end: int, line_count: int) -> None:
        super().__init__(
            f"Line range [{start}, {end}) out of bounds for object {sha} "
            f"with {line_count} lines",
            sha=sha,
            start=start,
            end=end,
            line_count=line_count,
        )
        self.sha = sha
        self.start = start
        self.end = end
        self.line_count = line_count
