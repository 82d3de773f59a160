"""Shared fixtures: a scripted in-memory repository client."""

from __future__ import annotations

from pathlib import Path

import pytest

from pages_publisher.git.domain.exceptions import BranchNotFoundError
from pages_publisher.git.domain.value_objects import CommitMetadata
from pages_publisher.git.repositories.interfaces import RepositoryClient


class FakeRepositoryClient(RepositoryClient):
    """Records every call and answers from scripted state.

    ``failures`` maps an operation name to the exception it raises, or to a
    callable taking the call arguments and returning an exception or None.
    """

    def __init__(
        self,
        repo_path: Path,
        branch: str = "main",
        branches: tuple[str, ...] = ("main", "gh-pages"),
        last_commit: CommitMetadata | None = None,
        changes: bool = True,
    ) -> None:
        self._repo_path = repo_path
        self.branch = branch
        self.branches = set(branches)
        self.last_commit = last_commit or CommitMetadata(
            author="Ada Lovelace", email="ada@example.com", message="docs: update"
        )
        self.changes = changes
        self.calls: list[tuple] = []
        self.failures: dict[str, object] = {}

    @property
    def repo_path(self) -> Path:
        return self._repo_path

    def _record(self, name: str, *args) -> None:
        self.calls.append((name, *args))
        failure = self.failures.get(name)
        if callable(failure):
            failure = failure(*args)
        if failure is not None:
            raise failure

    def call_names(self) -> list[str]:
        return [call[0] for call in self.calls]

    def active_branch(self) -> str:
        self._record("active_branch")
        return self.branch

    def get_last_commit(self) -> CommitMetadata:
        self._record("get_last_commit", self.branch)
        return self.last_commit

    def switch_branch(self, branch: str) -> None:
        self._record("switch_branch", branch)
        if branch not in self.branches:
            raise BranchNotFoundError(branch, args=("git", "checkout", branch), returncode=1)
        self.branch = branch

    def changes_exist(self) -> bool:
        self._record("changes_exist")
        return self.changes

    def add(self, pathspec: str) -> None:
        self._record("add", pathspec)

    def commit(self, metadata: CommitMetadata) -> None:
        self._record("commit", metadata)
        self.changes = False

    def push_branch(self, branch: str, metadata: CommitMetadata) -> None:
        self._record("push_branch", branch, metadata)


@pytest.fixture
def repo_root(tmp_path: Path) -> Path:
    root = tmp_path / "repo"
    root.mkdir()
    return root


@pytest.fixture
def docs_dir(tmp_path: Path) -> Path:
    docs = tmp_path / "site"
    docs.mkdir()
    return docs


@pytest.fixture
def fake_client(repo_root: Path) -> FakeRepositoryClient:
    return FakeRepositoryClient(repo_root)
