"""Changed-entry enumeration between two trees, delegated to libgit2."""

from __future__ import annotations

import pygit2
import structlog

from branchdiff.git._internal.access import RepoAccess
from branchdiff.git._internal.constants import DELTA_CHANGE_KINDS
from branchdiff.git.errors import DiffComputationError
from branchdiff.git.models import ChangedEntry, ChangeKind, object_ref

log = structlog.get_logger(__name__)


class TreeChangeEnumerator:
    """Lists the paths that differ between two trees.

    Change kinds and path assignment come from libgit2 as-is. Rename and
    copy kinds only appear when similarity detection is switched on.
    """

    def __init__(self, access: RepoAccess, *, detect_renames: bool = False) -> None:
        self._access = access
        self._detect_renames = detect_renames

    def enumerate(self, old_tree: pygit2.Tree, new_tree: pygit2.Tree) -> list[ChangedEntry]:
        deltas = self._access.diff_trees(old_tree, new_tree, find_similar=self._detect_renames)
        entries = [_entry_from_delta(delta) for delta in deltas]
        log.debug(
            "tree_changes_enumerated",
            old_tree=str(old_tree.id),
            new_tree=str(new_tree.id),
            count=len(entries),
        )
        return entries


def _entry_from_delta(delta: pygit2.DiffDelta) -> ChangedEntry:
    kind = DELTA_CHANGE_KINDS.get(delta.status)
    if kind is None:
        raise DiffComputationError(
            f"Unexpected delta status {delta.status!r} for {delta.new_file.path}"
        )
    # libgit2 fills both paths for adds/deletes; the missing side has no path
    old_path = None if kind == ChangeKind.ADD else delta.old_file.path
    new_path = None if kind == ChangeKind.DELETE else delta.new_file.path
    return ChangedEntry(
        old_path=old_path,
        new_path=new_path,
        old_object=object_ref(delta.old_file.id),
        new_object=object_ref(delta.new_file.id),
        change_kind=kind,
    )


def enumerate_changes(
    access: RepoAccess,
    old_tree: pygit2.Tree,
    new_tree: pygit2.Tree,
    *,
    detect_renames: bool = False,
) -> list[ChangedEntry]:
    """Functional form of TreeChangeEnumerator.enumerate."""
    return TreeChangeEnumerator(access, detect_renames=detect_renames).enumerate(
        old_tree, new_tree
    )
