"""Service for moving built documentation into a repository checkout."""

import shutil
from pathlib import Path

from pages_publisher.git.domain.exceptions import FilesystemError
from pages_publisher.utils.logger import get_logger

logger = get_logger(__name__)


class DocsOverlayService:
    """Replace top-level entries of a repository root with built docs."""

    def overlay(self, docs_dir: Path, repo_root: Path) -> tuple[Path, ...]:
        """
        Move every top-level entry of docs_dir into repo_root.

        An existing entry with the same name is removed first, recursively for
        directories, so colliding directories are replaced and never merged.
        Entries of repo_root that have no counterpart in docs_dir are kept.

        Args:
            docs_dir: Directory containing the built documentation
            repo_root: Root of the working tree of the publish branch

        Returns:
            Destination paths of the moved entries

        Raises:
            FilesystemError: If reading, removing or renaming fails
        """
        try:
            target = repo_root.resolve(strict=True)
            entries = sorted(docs_dir.iterdir())
        except OSError as e:
            raise FilesystemError(f"Failed to read {docs_dir}: {e}") from e

        moved: list[Path] = []
        for entry in entries:
            destination = target / entry.name
            try:
                self._remove(destination)
                entry.rename(destination)
            except OSError as e:
                raise FilesystemError(
                    f"Failed to move {entry} to {destination}: {e}"
                ) from e
            logger.debug("Moved %s -> %s", entry, destination)
            moved.append(destination)

        return tuple(moved)

    @staticmethod
    def _remove(path: Path) -> None:
        """Delete a file, symlink or directory tree if it exists."""
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        elif path.exists() or path.is_symlink():
            path.unlink()
