"""Edit region derivation for one changed file."""

from __future__ import annotations

from functools import partial

import structlog

from branchdiff.git._internal.access import RepoAccess
from branchdiff.git._internal.errors import git_operation
from branchdiff.git._internal.parsing import hunk_range
from branchdiff.git.errors import PatchFormattingError
from branchdiff.git.models import ChangedEntry, EditRegion, ObjectRef

log = structlog.get_logger(__name__)


class EditRegionResolver:
    """Turns a blob pair into ordered edit regions.

    The patch is generated by libgit2 with zero context lines, so every
    hunk is exactly one contiguous edit. Hunk order is kept as reported.
    """

    def __init__(self, access: RepoAccess, *, skip_binary: bool = False) -> None:
        self._access = access
        self._skip_binary = skip_binary

    def resolve(
        self,
        old_object: ObjectRef,
        new_object: ObjectRef,
        *,
        old_path: str | None = None,
        new_path: str | None = None,
    ) -> list[EditRegion]:
        path = new_path or old_path
        if old_object == new_object:
            return []
        old_blob = self._access.get_blob(old_object)
        new_blob = self._access.get_blob(new_object)

        with git_operation("patch", factory=partial(PatchFormattingError, path)):
            patch = self._access.blob_patch(old_blob, new_blob, old_path, new_path)

        if patch.delta.is_binary:
            if self._skip_binary:
                log.info("binary_patch_skipped", path=path)
                return []
            raise PatchFormattingError(path, "binary content has no line regions")

        regions: list[EditRegion] = []
        for hunk in patch.hunks:
            start_old, end_old = hunk_range(hunk.old_start, hunk.old_lines)
            start_new, end_new = hunk_range(hunk.new_start, hunk.new_lines)
            try:
                regions.append(EditRegion.from_ranges(start_old, end_old, start_new, end_new))
            except ValueError as e:
                raise PatchFormattingError(path, f"malformed hunk {hunk.header!r}") from e
        return regions

    def resolve_entry(self, entry: ChangedEntry) -> list[EditRegion]:
        return self.resolve(
            entry.old_object,
            entry.new_object,
            old_path=entry.old_path,
            new_path=entry.new_path,
        )


def resolve_regions(
    access: RepoAccess,
    old_object: ObjectRef,
    new_object: ObjectRef,
    *,
    skip_binary: bool = False,
) -> list[EditRegion]:
    """Functional form of EditRegionResolver.resolve."""
    return EditRegionResolver(access, skip_binary=skip_binary).resolve(old_object, new_object)

