"""Pull request editing: add reviewers via gh pr edit."""

import logging

from gh_rr.errors import ExternalCommandFailedError
from gh_rr.services.gh._run import run_gh


def build_pull_request_url(repository: str, number: str) -> str:
    """Web URL of pull request ``number`` in ``repository``."""
    return f"https://github.com/{repository}/pull/{number}"


def build_add_reviewers_args(repository: str, target: str, reviewers: list[str]) -> list[str]:
    """Build gh arguments that add reviewers to a pull request.

    target is a PR number, branch or URL and is passed through untouched.
    """
    args = ["pr", "edit", target, "--repo", repository]
    for reviewer in reviewers:
        args += ["--add-reviewer", reviewer]
    return args


def add_reviewers(
    repository: str,
    target: str,
    reviewers: list[str],
    log: logging.Logger | None = None,
) -> str:
    """Request reviews on the pull request and return gh's output (PR URL).

    Raises ExternalCommandFailedError when gh writes anything to stderr.
    """
    stdout, stderr = run_gh(build_add_reviewers_args(repository, target, reviewers), log=log)
    err = stderr.strip()
    if err:
        if log:
            log.warning("gh pr edit failed: %s", err)
        raise ExternalCommandFailedError(err)
    if log:
        log.info("Requested reviews from %s on %s", ", ".join(reviewers), target)
    return stdout.strip()
