"""gh CLI operations: pull request reviewers, repository lookup."""

from gh_rr.services.gh._run import run_gh, run_git
from gh_rr.services.gh.pull_requests import (
    add_reviewers,
    build_add_reviewers_args,
    build_pull_request_url,
)
from gh_rr.services.gh.repository import (
    current_branch,
    current_repository,
    is_valid_repository,
    validate_repository,
)

__all__ = [
    "add_reviewers",
    "build_add_reviewers_args",
    "build_pull_request_url",
    "current_branch",
    "current_repository",
    "is_valid_repository",
    "run_gh",
    "run_git",
    "validate_repository",
]
