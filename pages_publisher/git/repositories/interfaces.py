"""Repository interfaces for Git operations."""

from abc import ABC, abstractmethod
from pathlib import Path

from pages_publisher.git.domain.value_objects import CommitMetadata


class RepositoryClient(ABC):
    """Interface for the Git operations needed to publish a branch.

    Every operation maps to exactly one invocation of the version-control
    binary and raises VcsCommandError when that invocation fails.
    """

    @property
    @abstractmethod
    def repo_path(self) -> Path:
        """Root directory of the working tree the client operates on."""
        ...

    @abstractmethod
    def active_branch(self) -> str:
        """
        Get the name of the currently checked-out branch.

        Returns:
            Branch name as reported by `rev-parse --abbrev-ref HEAD`
            (`HEAD` when detached)
        """
        ...

    @abstractmethod
    def get_last_commit(self) -> CommitMetadata:
        """
        Get author, email and subject of the HEAD commit.

        Returns:
            CommitMetadata of the HEAD commit
        """
        ...

    @abstractmethod
    def switch_branch(self, branch: str) -> None:
        """
        Check out an existing local branch.

        Args:
            branch: Name of the branch

        Raises:
            BranchNotFoundError: If the branch does not exist
        """
        ...

    @abstractmethod
    def changes_exist(self) -> bool:
        """
        Check whether the working tree has uncommitted changes.

        Returns:
            True if anything is modified, added, deleted or untracked
        """
        ...

    @abstractmethod
    def add(self, pathspec: str) -> None:
        """
        Stage paths matching a pathspec.

        Args:
            pathspec: Git pathspec, e.g. "."
        """
        ...

    @abstractmethod
    def commit(self, metadata: CommitMetadata) -> None:
        """
        Commit staged changes attributed to the given commit's author.

        Args:
            metadata: Commit whose message and identity are reused
        """
        ...

    @abstractmethod
    def push_branch(self, branch: str, metadata: CommitMetadata) -> None:
        """
        Push a branch to origin under the given commit's identity.

        Args:
            branch: Name of the branch to push
            metadata: Commit whose identity is used for the push
        """
        ...
