"""Value objects for Git domain."""

from dataclasses import dataclass

from pages_publisher.git.domain.exceptions import MetadataParseError

# Field separator used in the `git log --pretty=format:` string
LOG_FIELD_SEPARATOR = ":"
LAST_COMMIT_FORMAT = LOG_FIELD_SEPARATOR.join(("%an", "%ae", "%s"))


@dataclass(frozen=True)
class CommitMetadata:
    """Authorship and message of the commit that triggered a publish."""

    author: str
    email: str
    message: str

    @classmethod
    def from_log_line(cls, line: str) -> "CommitMetadata":
        """
        Parse a line produced with LAST_COMMIT_FORMAT.

        Only the first two separators are significant; the message keeps any
        colons it contains.

        Args:
            line: Output of `git log -n 1 --pretty=format:%an:%ae:%s`

        Returns:
            CommitMetadata for the line

        Raises:
            MetadataParseError: If the line does not contain three fields
        """
        parts = line.rstrip("\r\n").split(LOG_FIELD_SEPARATOR, 2)
        if len(parts) != 3:
            raise MetadataParseError(f"Invalid commit format: {line!r}")

        author, email, message = parts
        return cls(author=author, email=email, message=message)

    @property
    def author_string(self) -> str:
        """Identity in the `Name <email>` form git expects for --author."""
        return f"{self.author} <{self.email}>"


@dataclass(frozen=True)
class PublishResult:
    """Outcome of a publish run."""

    target_branch: str
    original_branch: str
    commit: CommitMetadata | None
    published: bool
