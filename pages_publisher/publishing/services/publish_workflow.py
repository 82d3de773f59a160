"""Publish workflow: switch to the pages branch, commit the docs, switch back."""

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from pages_publisher.git.domain.value_objects import CommitMetadata, PublishResult
from pages_publisher.git.repositories.interfaces import RepositoryClient
from pages_publisher.publishing.services.overlay_service import DocsOverlayService
from pages_publisher.utils.logger import get_logger

logger = get_logger(__name__)


class PublishWorkflow:
    """Service for publishing a documentation tree to a dedicated branch."""

    def __init__(
        self,
        repository_client: RepositoryClient,
        overlay_service: DocsOverlayService | None = None,
    ) -> None:
        """
        Initialize PublishWorkflow.

        Args:
            repository_client: Client for the repository to publish to
            overlay_service: Service moving docs into the working tree
        """
        self._repository_client = repository_client
        self._overlay_service = overlay_service or DocsOverlayService()

    def run(self, target_branch: str, docs_dir: Path) -> PublishResult:
        """
        Publish docs_dir to target_branch and return to the original branch.

        The original branch is checked out again whether publishing succeeds
        or fails. If that checkout fails, its error is raised in place of the
        publishing error, which stays available as ``__context__``.

        Args:
            target_branch: Branch the documentation is committed to
            docs_dir: Directory containing the built documentation

        Returns:
            PublishResult describing what was published

        Raises:
            PagesPublisherError: If any step fails
        """
        with self._restoring_branch() as original_branch:
            commit, published = self.publish_branch(target_branch, docs_dir)

        return PublishResult(
            target_branch=target_branch,
            original_branch=original_branch,
            commit=commit,
            published=published,
        )

    def publish_branch(
        self, target_branch: str, docs_dir: Path
    ) -> tuple[CommitMetadata, bool]:
        """
        Commit and push docs_dir on target_branch, leaving it checked out.

        Args:
            target_branch: Branch the documentation is committed to
            docs_dir: Directory containing the built documentation

        Returns:
            Tuple of (metadata of the source commit, whether a commit was pushed)
        """
        # Must be read before checkout so it describes the source branch
        last_commit = self._repository_client.get_last_commit()
        logger.info(
            "Publishing for commit by %s: %s", last_commit.author_string, last_commit.message
        )

        self._repository_client.switch_branch(target_branch)
        logger.info("Switched to %s", target_branch)

        moved = self._overlay_service.overlay(docs_dir, self._repository_client.repo_path)
        logger.info("Moved %d entries from %s", len(moved), docs_dir)

        if not self._repository_client.changes_exist():
            logger.info("No changes to publish on %s", target_branch)
            return last_commit, False

        self._repository_client.add(".")
        self._repository_client.commit(last_commit)
        logger.info("Committed documentation as %s", last_commit.author_string)

        self._repository_client.push_branch(target_branch, last_commit)
        logger.info("Pushed %s", target_branch)

        return last_commit, True

    @contextmanager
    def _restoring_branch(self) -> Iterator[str]:
        """Yield the active branch and check it out again on exit."""
        original_branch = self._repository_client.active_branch()
        try:
            yield original_branch
        finally:
            self._repository_client.switch_branch(original_branch)
            logger.info("Restored branch %s", original_branch)
