"""Repository access layer - owns pygit2.Repository and exposes computed facts."""

from __future__ import annotations

from pathlib import Path

import pygit2

from branchdiff.git._internal.constants import (
    DIFF_FLAGS,
    PATCH_CONTEXT_LINES,
    PATCH_FLAGS,
    PATCH_INTERHUNK_LINES,
    SIMILARITY_FLAGS,
)
from branchdiff.git._internal.errors import git_operation
from branchdiff.git.errors import (
    NotARepositoryError,
    ObjectReadError,
    ResolutionError,
)
from branchdiff.git.models import Absent, ObjectRef


def open_repository(repo_path: Path | str) -> pygit2.Repository:
    """Open a repository (bare or not), raising NotARepositoryError."""
    try:
        return pygit2.Repository(str(repo_path))
    except (KeyError, pygit2.GitError) as e:
        raise NotARepositoryError(str(repo_path)) from e


class RepoAccess:
    """Owns pygit2.Repository and provides normalized, read-only access to it."""

    def __init__(self, repo: pygit2.Repository | Path | str) -> None:
        if isinstance(repo, pygit2.Repository):
            self._repo = repo
        else:
            self._repo = open_repository(repo)

    @property
    def repo(self) -> pygit2.Repository:
        return self._repo

    # =========================================================================
    # Resolution Helpers
    # =========================================================================

    def resolve_tree(self, branch: str) -> pygit2.Tree:
        """Resolve a branch name to its tree.

        Local branches win; otherwise any revision expression libgit2
        understands (full ref, remote branch, tag, sha) is accepted.
        """
        try:
            local = self._repo.branches.local.get(branch)
            if local is not None:
                return local.peel(pygit2.Tree)
            return self._repo.revparse_single(branch).peel(pygit2.Tree)
        except (KeyError, ValueError, pygit2.GitError) as e:
            raise ResolutionError(branch, str(e) or type(e).__name__) from e

    # =========================================================================
    # Object Store
    # =========================================================================

    def get_blob(self, ref: ObjectRef) -> pygit2.Blob | None:
        """Look up the blob behind a reference; ABSENT maps to None."""
        if isinstance(ref, Absent):
            return None
        try:
            obj = self._repo.get(ref.sha)
        except (ValueError, pygit2.GitError) as e:
            raise ObjectReadError(ref.sha, str(e)) from e
        if obj is None:
            raise ObjectReadError(ref.sha, "object not found")
        if not isinstance(obj, pygit2.Blob):
            raise ObjectReadError(ref.sha, f"expected blob, got {obj.type_str}")
        return obj

    def read_blob(self, ref: ObjectRef) -> bytes:
        """Read raw blob content; ABSENT reads as empty."""
        blob = self.get_blob(ref)
        if blob is None:
            return b""
        return bytes(blob.data)

    # =========================================================================
    # Low-level pygit2 Operations (all pygit2 quirks live here)
    # =========================================================================

    def diff_trees(
        self, old_tree: pygit2.Tree, new_tree: pygit2.Tree, *, find_similar: bool = False
    ) -> list[pygit2.DiffDelta]:
        """Deltas between two trees, in libgit2 path order.

        Errors from the diff call or from walking its deltas raise
        DiffComputationError.
        """
        with git_operation("tree diff"):
            diff = self._repo.diff(old_tree, new_tree, flags=DIFF_FLAGS)
            if find_similar:
                diff.find_similar(flags=SIMILARITY_FLAGS)
            return list(diff.deltas)

    def blob_patch(
        self,
        old_blob: pygit2.Blob | None,
        new_blob: pygit2.Blob | None,
        old_path: str | None = None,
        new_path: str | None = None,
    ) -> pygit2.Patch:
        """Patch between two blobs with zero context; None stands for no blob."""
        return pygit2.Patch.create_from(
            old_blob,
            new_blob,
            old_as_path=old_path,
            new_as_path=new_path,
            flag=PATCH_FLAGS,
            context_lines=PATCH_CONTEXT_LINES,
            interhunk_lines=PATCH_INTERHUNK_LINES,
        )
