"""Factory for creating repository client instances."""

import shutil
from pathlib import Path

from pages_publisher.git.domain.exceptions import ToolingUnavailableError
from pages_publisher.git.repositories.implementations import GitRepositoryClient
from pages_publisher.git.repositories.interfaces import RepositoryClient

GIT_EXECUTABLE = "git"

GIT_NOT_FOUND_MESSAGE = (
    "Could not find 'git' binary.\n"
    "Please ensure 'git' is available in your PATH or provide it via --git-binary"
)


def resolve_git_binary(git_binary: Path | None = None) -> Path:
    """
    Locate the git executable.

    An explicit path is returned as given without validation; otherwise the
    search path is consulted.

    Args:
        git_binary: Optional explicit path to the git executable

    Returns:
        Path to the git executable

    Raises:
        ToolingUnavailableError: If no path was given and git is not on PATH
    """
    if git_binary is not None:
        return git_binary

    found = shutil.which(GIT_EXECUTABLE)
    if found is None:
        raise ToolingUnavailableError(GIT_NOT_FOUND_MESSAGE)
    return Path(found)


def create_repository_client(
    repo_path: Path, git_binary: Path | None = None
) -> RepositoryClient:
    """
    Create a repository client bound to a working tree.

    Args:
        repo_path: Base directory of the repository to publish to
        git_binary: Optional explicit path to the git executable

    Returns:
        Repository client running git inside repo_path

    Raises:
        ToolingUnavailableError: If git cannot be located
    """
    return GitRepositoryClient(
        git_binary=resolve_git_binary(git_binary),
        repo_path=repo_path.resolve(),
    )
