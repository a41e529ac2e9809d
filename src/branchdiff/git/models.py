"""Serializable data models for branch diffs."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

import pygit2


class ChangeKind(str, Enum):
    """How a path changed between two trees."""

    ADD = "ADD"
    MODIFY = "MODIFY"
    DELETE = "DELETE"
    RENAME = "RENAME"
    COPY = "COPY"


class EditKind(str, Enum):
    """Shape of a single edit region."""

    INSERT = "INSERT"
    DELETE = "DELETE"
    REPLACE = "REPLACE"


# =============================================================================
# Object References
# =============================================================================


@dataclass(frozen=True, slots=True)
class Present:
    """An object that exists in the object store."""

    sha: str

    def __str__(self) -> str:
        return self.sha


@dataclass(frozen=True, slots=True)
class Absent:
    """No object: the file does not exist on this side of the diff."""

    def __str__(self) -> str:
        return "absent"


ABSENT = Absent()

ObjectRef = Present | Absent


def object_ref(oid: pygit2.Oid) -> ObjectRef:
    """Wrap an Oid, mapping the all-zero id to ABSENT."""
    if not any(oid.raw):
        return ABSENT
    return Present(str(oid))


# =============================================================================
# Diff Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class ChangedEntry:
    """One path that differs between two trees."""

    old_path: str | None
    new_path: str | None
    old_object: ObjectRef
    new_object: ObjectRef
    change_kind: ChangeKind


@dataclass(frozen=True, slots=True)
class EditRegion:
    """Contiguous edit within one file, as zero-based half-open line ranges."""

    kind: EditKind
    start_old: int
    end_old: int
    start_new: int
    end_new: int

    def __post_init__(self) -> None:
        if min(self.start_old, self.end_old, self.start_new, self.end_new) < 0:
            raise ValueError(f"Negative bound in edit region: {self}")
        if self.start_old > self.end_old or self.start_new > self.end_new:
            raise ValueError(f"Inverted range in edit region: {self}")
        if self.start_old == self.end_old and self.start_new == self.end_new:
            raise ValueError(f"Empty edit region: {self}")

    @classmethod
    def from_ranges(cls, start_old: int, end_old: int, start_new: int, end_new: int) -> EditRegion:
        if start_old == end_old:
            kind = EditKind.INSERT
        elif start_new == end_new:
            kind = EditKind.DELETE
        else:
            kind = EditKind.REPLACE
        return cls(kind, start_old, end_old, start_new, end_new)


@dataclass(frozen=True, slots=True)
class FileDiff:
    """One edit region of one changed file, with the affected lines."""

    path_old: str | None
    path_new: str | None
    start_old: int
    end_old: int
    start_new: int
    end_new: int
    change_type: str
    lines_old: tuple[str, ...]
    lines_new: tuple[str, ...]
    old_object: ObjectRef = ABSENT
    new_object: ObjectRef = ABSENT

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "path_old": self.path_old,
            "path_new": self.path_new,
            "start_old": self.start_old,
            "end_old": self.end_old,
            "start_new": self.start_new,
            "end_new": self.end_new,
            "change_type": self.change_type,
            "lines_old": list(self.lines_old),
            "lines_new": list(self.lines_new),
            "old_object": None if isinstance(self.old_object, Absent) else self.old_object.sha,
            "new_object": None if isinstance(self.new_object, Absent) else self.new_object.sha,
        }
