"""Line extraction from blobs for a single edit region."""

from __future__ import annotations

import structlog

from branchdiff.git._internal.access import RepoAccess
from branchdiff.git._internal.parsing import split_lines
from branchdiff.git.errors import LineRangeError, ObjectReadError
from branchdiff.git.models import Absent, ObjectRef

log = structlog.get_logger(__name__)


class LineExtractor:
    """Reads the lines of one side of an edit region.

    Every call reads the blob afresh; nothing is cached between regions.
    """

    def __init__(
        self, access: RepoAccess, *, encoding: str = "utf-8", errors: str = "replace"
    ) -> None:
        self._access = access
        self._encoding = encoding
        self._errors = errors

    def extract(self, obj: ObjectRef, start_line: int, end_line: int) -> tuple[str, ...]:
        """Return lines ``[start_line, end_line)`` of ``obj``.

        An absent object has no content on this side of the diff, so the
        result is empty whatever the range. Out-of-bounds ranges raise
        LineRangeError instead of being clamped.
        """
        if isinstance(obj, Absent):
            return ()

        data = self._access.read_blob(obj)
        try:
            text = data.decode(self._encoding, errors=self._errors)
        except UnicodeDecodeError as e:
            raise ObjectReadError(obj.sha, f"cannot decode as {self._encoding}: {e}") from e
        lines = split_lines(text)
        if start_line < 0 or end_line < start_line or end_line > len(lines):
            log.warning(
                "line_range_out_of_bounds",
                sha=obj.sha,
                start=start_line,
                end=end_line,
                line_count=len(lines),
            )
            raise LineRangeError(obj.sha, start_line, end_line, len(lines))
        return tuple(lines[start_line:end_line])


def extract_lines(
    access: RepoAccess,
    obj: ObjectRef,
    start_line: int,
    end_line: int,
    *,
    encoding: str = "utf-8",
    errors: str = "replace",
) -> tuple[str, ...]:
    """Functional form of LineExtractor.extract."""
    return LineExtractor(access, encoding=encoding, errors=errors).extract(
        obj, start_line, end_line
    )
