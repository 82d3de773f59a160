"""Settings read from the environment and an optional .env file."""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

DEFAULT_TARGET_BRANCH = "gh-pages"
DEFAULT_REPO_BASE = Path(".")

_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class PublishSettings:
    """Defaults for the command line options."""

    target_branch: str = DEFAULT_TARGET_BRANCH
    docs_dir: Path | None = None
    git_binary: Path | None = None
    repo_base: Path = DEFAULT_REPO_BASE
    verbose: bool = False


def _load_env_file() -> None:
    """Load environment variables from .env file."""
    # Try to find .env file in project root (parent of pages_publisher package)
    project_root = Path(__file__).parent.parent
    env_file = project_root / ".env"
    if env_file.exists():
        load_dotenv(env_file)
    else:
        # Fallback: try current directory
        load_dotenv(find_dotenv(usecwd=True))


def _optional_path(value: str | None) -> Path | None:
    return Path(value) if value else None


def load_settings(environ: Mapping[str, str] | None = None) -> PublishSettings:
    """
    Build settings from environment variables.

    Args:
        environ: Mapping to read from. When omitted, the .env file is loaded
                 and os.environ is used.

    Returns:
        PublishSettings with unset variables left at their defaults
    """
    if environ is None:
        _load_env_file()
        environ = os.environ

    return PublishSettings(
        target_branch=environ.get("PAGES_TARGET_BRANCH") or DEFAULT_TARGET_BRANCH,
        docs_dir=_optional_path(environ.get("PAGES_DOCS_DIR")),
        git_binary=_optional_path(environ.get("PAGES_GIT_BINARY")),
        repo_base=_optional_path(environ.get("PAGES_REPO_BASE")) or DEFAULT_REPO_BASE,
        verbose=environ.get("PAGES_VERBOSE", "").strip().lower() in _TRUTHY,
    )
