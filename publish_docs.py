#!/usr/bin/env python3
"""
Publish a built documentation directory to a pages branch:
- Records the current branch and the author/message of its last commit
- Checks out the target branch (default: gh-pages)
- Replaces the top-level entries of the working tree with the built docs
- Commits and pushes as the original author when anything changed
- Checks out the original branch again, whatever happened
"""

import argparse
import sys
from collections.abc import Sequence
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from pages_publisher.config import load_settings
from pages_publisher.git.domain.exceptions import PagesPublisherError
from pages_publisher.git.repositories.factory import create_repository_client
from pages_publisher.publishing.services.publish_workflow import PublishWorkflow
from pages_publisher.utils.logger import setup_logging

DISTRIBUTION_NAME = "pages-publisher"


def _package_version() -> str:
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return "unknown"


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser, taking defaults from the environment."""
    settings = load_settings()

    parser = argparse.ArgumentParser(
        prog="publish-docs",
        description="Publish documentation to github pages.",
    )
    parser.add_argument(
        "--target-branch",
        type=str,
        default=settings.target_branch,
        help=f"Branch to publish to (default: {settings.target_branch})",
    )
    parser.add_argument(
        "--docs-dir",
        type=Path,
        default=settings.docs_dir,
        required=settings.docs_dir is None,
        help="Directory containing built documentation (relative to --repo-base)",
    )
    parser.add_argument(
        "--git-binary",
        type=Path,
        default=settings.git_binary,
        help="Location of git binary (default: looked up on PATH)",
    )
    parser.add_argument(
        "--repo-base",
        type=Path,
        default=settings.repo_base,
        help="Location of base of repository to publish to (default: current directory)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action=argparse.BooleanOptionalAction,
        default=settings.verbose,
        help="Log each step and git command",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_package_version()}",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """Main function to parse arguments and publish the documentation."""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        # Fails before the repository is touched when git cannot be found
        repository_client = create_repository_client(
            repo_path=args.repo_base, git_binary=args.git_binary
        )
        workflow = PublishWorkflow(repository_client)
        # A relative docs dir is read from inside the repository base
        docs_dir = (args.repo_base / args.docs_dir).resolve()
        result = workflow.run(args.target_branch, docs_dir)
    except PagesPublisherError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    if result.published and result.commit is not None:
        print(f"✓ Published {args.docs_dir} to {result.target_branch}")
        print(f"  Commit: {result.commit.message}")
        print(f"  Author: {result.commit.author_string}")
    else:
        print(f"✓ No changes to publish on {result.target_branch}")
    print(f"  Restored branch: {result.original_branch}")
    sys.exit(0)


if __name__ == "__main__":
    main()
