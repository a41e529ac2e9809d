"""Test fixtures for git module."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pygit2
import pytest
from pygit2.enums import FileMode

from branchdiff.git import RepoAccess

if TYPE_CHECKING:
    from collections.abc import Generator

FileSpec = str | bytes | tuple[str | bytes, FileMode]


def _write_tree(repo: pygit2.Repository, files: dict[str, FileSpec]) -> pygit2.Oid:
    """Write nested trees for a flat {path: content} mapping."""
    builder = repo.TreeBuilder()
    subdirs: dict[str, dict[str, FileSpec]] = {}
    for path, spec in files.items():
        head, _, rest = path.partition("/")
        if rest:
            subdirs.setdefault(head, {})[rest] = spec
            continue
        content, mode = spec if isinstance(spec, tuple) else (spec, FileMode.BLOB)
        data = content.encode() if isinstance(content, str) else content
        builder.insert(head, repo.create_blob(data), mode)
    for name, sub in subdirs.items():
        builder.insert(name, _write_tree(repo, sub), FileMode.TREE)
    return builder.write()


class RepoBuilder:
    """Commits whole file sets onto branches of a bare repository."""

    def __init__(self, repo: pygit2.Repository) -> None:
        self.repo = repo
        self.sig = pygit2.Signature("Test User", "test@example.com")

    def commit(
        self,
        branch: str,
        files: dict[str, FileSpec],
        message: str | None = None,
    ) -> pygit2.Oid:
        ref = f"refs/heads/{branch}"
        parents = [self.repo.references[ref].target] if ref in self.repo.references else []
        tree = _write_tree(self.repo, files)
        return self.repo.create_commit(
            ref, self.sig, self.sig, message or f"Commit on {branch}", tree, parents
        )


@pytest.fixture
def bare_repo(tmp_path: Path) -> Generator[pygit2.Repository, None, None]:
    """Create an empty bare repository."""
    yield pygit2.init_repository(str(tmp_path / "store.git"), bare=True)


@pytest.fixture
def builder(bare_repo: pygit2.Repository) -> RepoBuilder:
    return RepoBuilder(bare_repo)


@pytest.fixture
def access(bare_repo: pygit2.Repository) -> RepoAccess:
    return RepoAccess(bare_repo)


@pytest.fixture
def repo_modified(builder: RepoBuilder) -> pygit2.Repository:
    """Branch a has x.txt = a,b,c; branch b has x.txt = a,x,c."""
    builder.commit("a", {"x.txt": "a\nb\nc\n"})
    builder.commit("b", {"x.txt": "a\nx\nc\n"})
    return builder.repo


@pytest.fixture
def repo_added(builder: RepoBuilder) -> pygit2.Repository:
    """y.txt exists only on branch b."""
    builder.commit("a", {"x.txt": "a\nb\nc\n"})
    builder.commit("b", {"x.txt": "a\nb\nc\n", "y.txt": "first\nsecond\n"})
    return builder.repo


@pytest.fixture
def repo_identical(builder: RepoBuilder) -> pygit2.Repository:
    """Two branches pointing at identical trees via different commits."""
    files = {"x.txt": "a\nb\nc\n", "dir/nested.txt": "nested\n"}
    builder.commit("a", files, "first")
    builder.commit("b", files, "second")
    return builder.repo


@pytest.fixture
def repo_mixed(builder: RepoBuilder) -> pygit2.Repository:
    """Several files across add/modify/delete with multiple regions."""
    base = "\n".join(f"line{i}" for i in range(10)) + "\n"
    edited = base.replace("line2\n", "LINE2\n").replace("line8\n", "LINE8a\nLINE8b\n")
    builder.commit(
        "a",
        {
            "a.txt": base,
            "b/c.txt": "keep\ndrop\n",
            "d.txt": "gone\n",
        },
    )
    builder.commit(
        "b",
        {
            "a.txt": edited,
            "b/c.txt": "keep\n",
            "e.txt": "new\n",
        },
    )
    return builder.repo


@pytest.fixture
def workdir_repo(tmp_path: Path) -> Generator[pygit2.Repository, None, None]:
    """Non-bare repository with main and feature branches committed via the index."""
    repo_path = tmp_path / "repo"
    repo_path.mkdir()
    repo = pygit2.init_repository(str(repo_path), initial_head="main")
    repo.config["user.name"] = "Test User"
    repo.config["user.email"] = "test@example.com"
    sig = pygit2.Signature("Test User", "test@example.com")

    (repo_path / "README.md").write_text("# Test Repo\n")
    repo.index.add("README.md")
    repo.index.write()
    tree = repo.index.write_tree()
    repo.create_commit("refs/heads/main", sig, sig, "Initial commit", tree, [])
    repo.set_head("refs/heads/main")

    repo.branches.local.create("feature", repo.head.peel(pygit2.Commit))
    feature = repo.branches.local["feature"]
    repo.checkout(feature)
    (repo_path / "README.md").write_text("# Test Repo\n\nFeature notes\n")
    repo.index.add("README.md")
    repo.index.write()
    tree = repo.index.write_tree()
    repo.create_commit("HEAD", sig, sig, "Feature commit", tree, [repo.head.target])
    repo.checkout(repo.branches.local["main"])

    yield repo
