"""Internal pygit2 constants - keeps trivia out of public modules."""

from __future__ import annotations

from pygit2.enums import DeltaStatus, DiffFind, DiffOption

from branchdiff.git.models import ChangeKind

# Tree diff delta status -> change kind. Anything else is not a tree-to-tree outcome.
DELTA_CHANGE_KINDS: dict[int, ChangeKind] = {
    DeltaStatus.ADDED: ChangeKind.ADD,
    DeltaStatus.DELETED: ChangeKind.DELETE,
    DeltaStatus.MODIFIED: ChangeKind.MODIFY,
    DeltaStatus.RENAMED: ChangeKind.RENAME,
    DeltaStatus.COPIED: ChangeKind.COPY,
    DeltaStatus.TYPECHANGE: ChangeKind.MODIFY,
}

# Tree diff: a blob replaced by a symlink or gitlink at the same path stays one delta
DIFF_FLAGS = DiffOption.INCLUDE_TYPECHANGE

# Similarity detection when renames are requested
SIMILARITY_FLAGS = DiffFind.FIND_RENAMES | DiffFind.FIND_COPIES

# Patch generation: one hunk per contiguous edit
PATCH_FLAGS = DiffOption.NORMAL
PATCH_CONTEXT_LINES = 0
PATCH_INTERHUNK_LINES = 0
