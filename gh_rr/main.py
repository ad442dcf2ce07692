"""gh-rr entry point.

Requests reviews on a pull request from a group of reviewers configured in
gh-rr.yml. Usage: gh rr [flags] [<number> | <url> | <branch>].
"""

import argparse
import logging
import sys
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from typing import TextIO

from gh_rr import __version__
from gh_rr.config import DEFAULT_GROUP, AppSettings, load_config, resolve_config_dir
from gh_rr.errors import (
    ConfigNotFoundError,
    ExternalCommandFailedError,
    GhRrError,
    GroupNotConfiguredError,
    RepositoryNotConfiguredError,
)
from gh_rr.logging import setup_logging
from gh_rr.reviewers import GLOBAL_REPOSITORY, resolve_reviewers
from gh_rr.services.gh import (
    add_reviewers,
    build_pull_request_url,
    current_branch,
    current_repository,
    validate_repository,
)

log = logging.getLogger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with 1 on usage errors (argparse uses 2)."""

    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI flags and the optional pull request target."""
    argv = argv if argv is not None else sys.argv[1:]
    parser = _ArgumentParser(
        prog="gh rr",
        description="Request pull request reviews from a configured group of reviewers",
    )
    parser.add_argument(
        "target",
        nargs="?",
        default="",
        help="Pull request number, URL or branch (default: PR of the current branch)",
    )
    parser.add_argument(
        "--repo",
        "-R",
        default=None,
        help="Repository in <owner>/<repository> format (default: current repository)",
    )
    parser.add_argument(
        "--from",
        "-f",
        dest="group",
        default=DEFAULT_GROUP,
        help="Group of users to request review from",
    )
    parser.add_argument(
        "--global",
        "-g",
        dest="global_group",
        action="store_true",
        help=f"Use a group of the global {GLOBAL_REPOSITORY!r} repository",
    )
    parser.add_argument(
        "--config-dir",
        type=Path,
        default=None,
        help="Directory to search for gh-rr.yml (default: user home directory)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show the reviewers that would be added without calling gh",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def _describe_target(repository: str, target: str) -> str:
    """Human-readable pull request reference for output."""
    if not target:
        return f"the pull request for the current branch in {repository}"
    if target.isdigit():
        return build_pull_request_url(repository, target)
    return target


def _print_reviewers(reviewers: list[str], out: TextIO) -> None:
    for reviewer in reviewers:
        print(f"  - {reviewer}", file=out)


def run(argv: list[str] | None = None, stdout: TextIO | None = None, stderr: TextIO | None = None) -> int:
    """Run gh-rr and return the process exit code (0 success, 1 failure)."""
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    try:
        with redirect_stdout(stdout), redirect_stderr(stderr):
            args = parse_args(argv)
    except SystemExit as e:
        return 0 if e.code in (0, None) else 1

    settings = AppSettings()
    setup_logging(settings.logging, stream=stderr)

    # Home dir lookup failure is fatal and intentionally not handled.
    config_dir = resolve_config_dir(args.config_dir, settings)

    try:
        repository = args.repo if args.repo is not None else current_repository(log=log)
        validate_repository(repository)
    except GhRrError as e:
        print(e, file=stderr)
        return 1

    try:
        config = load_config(config_dir)
    except ConfigNotFoundError as e:
        print(f"please create {e.path} to configure your repositories", file=stderr)
        return 1
    except GhRrError as e:
        print(e, file=stderr)
        return 1

    lookup = GLOBAL_REPOSITORY if args.global_group else repository
    label = f"the global repository ({GLOBAL_REPOSITORY})" if args.global_group else repository
    try:
        reviewers = resolve_reviewers(config, lookup, args.group)
    except RepositoryNotConfiguredError:
        print(f"no reviewers are configured for {label}", file=stderr)
        return 1
    except GroupNotConfiguredError:
        print(f"{label} does not have a group named {args.group}", file=stderr)
        return 1

    if args.dry_run:
        print(f"would add the following as reviewers to {_describe_target(repository, args.target)}", file=stdout)
        _print_reviewers(reviewers, stdout)
        return 0

    try:
        target = args.target or current_branch(log=log)
    except GhRrError as e:
        print(e, file=stderr)
        return 1

    try:
        output = add_reviewers(repository, target, reviewers, log=log)
    except ExternalCommandFailedError as e:
        print(f"could not add reviewers: {e}", file=stderr)
        return 1

    if output:
        print(output, file=stdout)
    print("added the following as reviewers:", file=stdout)
    _print_reviewers(reviewers, stdout)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Console entry point."""
    return run(argv)


if __name__ == "__main__":
    sys.exit(main())
