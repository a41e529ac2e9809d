"""Centralized error mapping for pygit2 exceptions."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import AbstractContextManager, contextmanager

import pygit2

from branchdiff.git.errors import BranchDiffError, DiffComputationError


class ErrorMapper:
    """Maps pygit2 exceptions to domain errors."""

    @staticmethod
    @contextmanager
    def guard(
        operation: str,
        *,
        factory: Callable[[str], BranchDiffError] | None = None,
    ) -> Iterator[None]:
        """Context manager for consistent exception translation.

        ``factory`` builds the domain error from the failure message; by
        default failures surface as DiffComputationError.
        """
        try:
            yield
        except pygit2.GitError as e:
            message = f"{operation} failed: {e}"
            if factory is not None:
                raise factory(message) from e
            raise DiffComputationError(message) from e


def git_operation(
    operation: str,
    *,
    factory: Callable[[str], BranchDiffError] | None = None,
) -> AbstractContextManager[None]:
    """Shorthand for ErrorMapper.guard."""
    return ErrorMapper.guard(operation, factory=factory)
