"""String parsing helpers for blob content and hunk headers."""

from __future__ import annotations


def split_lines(text: str) -> list[str]:
    """Split on line feeds, counting lines the way git does.

    A final newline terminates the last line rather than starting an empty
    one. Carriage returns are kept.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def hunk_range(start: int, count: int) -> tuple[int, int]:
    """Convert a 1-based hunk (start, count) to a zero-based half-open range.

    For an empty side git reports the line *after which* the edit happens,
    which is already the zero-based insertion point.
    """
    begin = start - 1 if count > 0 else start
    return begin, begin + count
