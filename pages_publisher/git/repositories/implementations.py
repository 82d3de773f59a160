"""Concrete implementation of Git repository operations."""

import subprocess
from collections.abc import Sequence
from pathlib import Path

from pages_publisher.git.domain.exceptions import BranchNotFoundError, VcsCommandError
from pages_publisher.git.domain.value_objects import LAST_COMMIT_FORMAT, CommitMetadata
from pages_publisher.git.repositories.interfaces import RepositoryClient
from pages_publisher.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_REMOTE = "origin"

# Messages git prints when `checkout` is given an unknown branch
_UNKNOWN_BRANCH_MARKERS = (
    "did not match any file(s) known to git",
    "invalid reference",
)


class GitRepositoryClient(RepositoryClient):
    """Repository client that shells out to the git binary."""

    def __init__(self, git_binary: Path | str, repo_path: Path) -> None:
        """
        Initialize GitRepositoryClient.

        Args:
            git_binary: Path to the git executable
            repo_path: Path to the git repository; every command runs there
        """
        self._git_binary = str(git_binary)
        self._repo_path = Path(repo_path)

    @property
    def repo_path(self) -> Path:
        return self._repo_path

    def active_branch(self) -> str:
        return self._run("rev-parse", "--abbrev-ref", "HEAD").strip()

    def get_last_commit(self) -> CommitMetadata:
        output = self._run("log", "-n", "1", f"--pretty=format:{LAST_COMMIT_FORMAT}")
        return CommitMetadata.from_log_line(output)

    def switch_branch(self, branch: str) -> None:
        try:
            self._run("checkout", branch)
        except VcsCommandError as e:
            if any(marker in e.stderr for marker in _UNKNOWN_BRANCH_MARKERS):
                raise BranchNotFoundError(
                    branch, args=e.command, returncode=e.returncode, stderr=e.stderr
                ) from e
            raise

    def changes_exist(self) -> bool:
        return bool(self._run("status", "--short").strip())

    def add(self, pathspec: str) -> None:
        self._run("add", pathspec)

    def commit(self, metadata: CommitMetadata) -> None:
        self._run(
            *self._identity_options(metadata),
            "commit",
            "-m",
            metadata.message,
            "--author",
            metadata.author_string,
        )

    def push_branch(self, branch: str, metadata: CommitMetadata) -> None:
        self._run(*self._identity_options(metadata), "push", DEFAULT_REMOTE, branch)

    @staticmethod
    def _identity_options(metadata: CommitMetadata) -> tuple[str, ...]:
        """Config overrides so the committer matches the original author."""
        return (
            "-c",
            f"user.name={metadata.author}",
            "-c",
            f"user.email={metadata.email}",
        )

    def _run(self, *args: str) -> str:
        """
        Run git with the given arguments inside the repository.

        Args:
            *args: Arguments passed to the git binary

        Returns:
            Captured standard output

        Raises:
            VcsCommandError: If git cannot be started or exits non-zero
        """
        command = [self._git_binary, *args]
        logger.debug("Running %s", " ".join(command))
        try:
            result = subprocess.run(
                command,
                cwd=self._repo_path,
                capture_output=True,
                text=True,
                check=True,
            )
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or "").strip()
            raise VcsCommandError(
                f"git {_subcommand(args)} failed with exit code {e.returncode}"
                + (f": {stderr}" if stderr else ""),
                args=command,
                returncode=e.returncode,
                stderr=stderr,
            ) from e
        except OSError as e:
            raise VcsCommandError(
                f"Failed to run {self._git_binary}: {e}", args=command
            ) from e

        return result.stdout


def _subcommand(args: Sequence[str]) -> str:
    """First argument that is not part of a leading `-c key=value` pair."""
    index = 0
    while index < len(args) and args[index] == "-c":
        index += 2
    return args[index] if index < len(args) else ""
