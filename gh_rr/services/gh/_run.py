"""Internal helpers: run gh and git commands."""

import logging
import shlex
import subprocess

from gh_rr.errors import ExternalCommandFailedError


def run_gh(args: list[str], log: logging.Logger | None = None) -> tuple[str, str]:
    """Run gh with args and return (stdout, stderr).

    Blocks until gh exits; there is no timeout. The exit status is not
    checked here: callers treat non-empty stderr as failure.
    """
    cmd = ["gh"] + args
    if log:
        log.debug("Running %s", shlex.join(cmd))
    try:
        result = subprocess.run(cmd, check=False, capture_output=True, text=True)
    except FileNotFoundError as e:
        raise ExternalCommandFailedError("gh not found; install it from https://cli.github.com") from e
    return result.stdout or "", result.stderr or ""


def run_git(args: list[str], log: logging.Logger | None = None) -> str:
    """Run git with args and return stripped stdout; raise ExternalCommandFailedError on non-zero exit."""
    cmd = ["git"] + args
    if log:
        log.debug("Running %s", shlex.join(cmd))
    try:
        result = subprocess.run(cmd, check=True, capture_output=True, text=True)
    except subprocess.CalledProcessError as e:
        err = (e.stderr or e.stdout or "").strip()
        raise ExternalCommandFailedError(f"git {' '.join(args)}: {err}") from e
    except FileNotFoundError as e:
        raise ExternalCommandFailedError("git not found") from e
    return (result.stdout or "").strip()
