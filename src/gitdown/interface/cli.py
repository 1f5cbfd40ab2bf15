"""Command-line interface — a thin controller that delegates to the use case."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Callable, Sequence
from contextlib import AbstractAsyncContextManager
from pathlib import Path

from gitdown.domain.exceptions import GitdownError, format_error
from gitdown.domain.value_objects import DEFAULT_REF, RepositoryRef
from gitdown.infrastructure.config import Settings
from gitdown.interface.dependencies import build_use_case
from gitdown.services.download_repo import DownloadRepoUseCase

logger = logging.getLogger(__name__)

UseCaseFactory = Callable[[Settings, Path], AbstractAsyncContextManager[DownloadRepoUseCase]]

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gitdown",
        description="Download specific files from a GitHub repository.",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="log debug output")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="only log warnings and errors")

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    repo = subparsers.add_parser("repo", help="Repository downloading from")
    repo.add_argument("repo", metavar="REPO", nargs="?", help="The repo to download from (owner/name)")
    repo.add_argument("-r", "--ref", default=DEFAULT_REF, help="branch, tag or commit (default: %(default)s)")
    repo.add_argument(
        "-o",
        "--output-dir",
        type=Path,
        default=Path("."),
        help="directory to write files into (default: current directory)",
    )
    return parser


def log_level(args: argparse.Namespace, settings: Settings) -> str:
    if args.verbose:
        return "DEBUG"
    if args.quiet:
        return "WARNING"
    return settings.log_level.upper()


def run(
    args: argparse.Namespace,
    settings: Settings,
    use_case_factory: UseCaseFactory = build_use_case,
) -> int:
    """Execute the parsed command and return the process exit status."""
    try:
        repo = RepositoryRef.from_string(args.repo, ref=args.ref)
        asyncio.run(_download(repo, args.output_dir, settings, use_case_factory))
    except GitdownError as exc:
        logger.debug("Aborting", exc_info=True)
        print(format_error(exc), file=sys.stderr)
        return EXIT_FAILURE
    except KeyboardInterrupt:
        print("Interrupted", file=sys.stderr)
        return EXIT_INTERRUPTED
    return EXIT_OK


async def _download(
    repo: RepositoryRef,
    output_dir: Path,
    settings: Settings,
    use_case_factory: UseCaseFactory,
) -> None:
    async with use_case_factory(settings, output_dir) as use_case:
        await use_case.execute(repo)
