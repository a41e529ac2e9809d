"""Branch-to-branch line diff via pygit2 - returns serializable data models."""

from __future__ import annotations

import pygit2
import structlog

from branchdiff.config.models import DiffConfig
from branchdiff.git._internal.access import RepoAccess
from branchdiff.git.enumerator import TreeChangeEnumerator
from branchdiff.git.errors import InvalidArgumentError
from branchdiff.git.lines import LineExtractor
from branchdiff.git.models import ChangedEntry, EditRegion, FileDiff
from branchdiff.git.regions import EditRegionResolver

log = structlog.get_logger(__name__)


def _require_branch(name: str, value: object) -> str:
    if not isinstance(value, str) or not value:
        raise InvalidArgumentError(name, "branch name must be a non-empty string")
    return value


class BranchDiff:
    """Diff of two branches as one record per edit region.

    ``branch_a`` is the old side and ``branch_b`` the new side. Any failure
    aborts the whole diff; an empty list only ever means "no differences".
    """

    def __init__(
        self,
        repository: pygit2.Repository | RepoAccess,
        branch_a: str,
        branch_b: str,
        *,
        config: DiffConfig | None = None,
    ) -> None:
        if repository is None:
            raise InvalidArgumentError("repository", "must not be None")
        self._branch_a = _require_branch("branch_a", branch_a)
        self._branch_b = _require_branch("branch_b", branch_b)
        self._access = (
            repository if isinstance(repository, RepoAccess) else RepoAccess(repository)
        )
        self._config = config or DiffConfig()
        self._enumerator = TreeChangeEnumerator(
            self._access, detect_renames=self._config.detect_renames
        )
        self._resolver = EditRegionResolver(self._access, skip_binary=self._config.skip_binary)
        self._extractor = LineExtractor(
            self._access,
            encoding=self._config.encoding,
            errors=self._config.decode_errors,
        )

    @property
    def branch_a(self) -> str:
        return self._branch_a

    @property
    def branch_b(self) -> str:
        return self._branch_b

    def execute(self) -> list[FileDiff]:
        """Run the diff. Raises a BranchDiffError subclass on any failure."""
        log.debug("branch_diff_started", branch_a=self._branch_a, branch_b=self._branch_b)
        old_tree = self._access.resolve_tree(self._branch_a)
        new_tree = self._access.resolve_tree(self._branch_b)

        entries = self._enumerator.enumerate(old_tree, new_tree)
        diffs: list[FileDiff] = []
        for entry in entries:
            for region in self._resolver.resolve_entry(entry):
                diffs.append(self._file_diff(entry, region))

        log.debug(
            "branch_diff_completed",
            branch_a=self._branch_a,
            branch_b=self._branch_b,
            entries=len(entries),
            records=len(diffs),
        )
        return diffs

    def _file_diff(self, entry: ChangedEntry, region: EditRegion) -> FileDiff:
        return FileDiff(
            path_old=entry.old_path,
            path_new=entry.new_path,
            start_old=region.start_old,
            end_old=region.end_old,
            start_new=region.start_new,
            end_new=region.end_new,
            change_type=entry.change_kind.value,
            lines_old=self._extractor.extract(entry.old_object, region.start_old, region.end_old),
            lines_new=self._extractor.extract(entry.new_object, region.start_new, region.end_new),
            old_object=entry.old_object,
            new_object=entry.new_object,
        )


def diff_branches(
    repository: pygit2.Repository | RepoAccess,
    branch_a: str,
    branch_b: str,
    *,
    config: DiffConfig | None = None,
) -> list[FileDiff]:
    """Line-level diff records for every edit between ``branch_a`` and ``branch_b``."""
    return BranchDiff(repository, branch_a, branch_b, config=config).execute()
