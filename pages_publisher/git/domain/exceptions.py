"""Errors raised while publishing documentation."""

from collections.abc import Sequence


class PagesPublisherError(Exception):
    """Base class for every error the publisher reports to the user."""


class ToolingUnavailableError(PagesPublisherError):
    """The git executable could not be located."""


class VcsCommandError(PagesPublisherError):
    """A git invocation exited non-zero or could not be started."""

    def __init__(
        self,
        message: str,
        args: Sequence[str] = (),
        returncode: int | None = None,
        stderr: str = "",
    ) -> None:
        super().__init__(message)
        self.command = tuple(args)
        self.returncode = returncode
        self.stderr = stderr


class BranchNotFoundError(VcsCommandError):
    """The branch to check out does not exist locally."""

    def __init__(
        self,
        branch: str,
        args: Sequence[str] = (),
        returncode: int | None = None,
        stderr: str = "",
    ) -> None:
        super().__init__(
            f"Branch '{branch}' does not exist in the repository",
            args=args,
            returncode=returncode,
            stderr=stderr,
        )
        self.branch = branch


class FilesystemError(PagesPublisherError):
    """Moving the built documentation into the repository failed."""


class MetadataParseError(PagesPublisherError):
    """The last commit could not be parsed into author, email and message."""
