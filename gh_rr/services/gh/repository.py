"""Repository names and branches: validation and inference from the working directory."""

import logging
import os
import re

from gh_rr.errors import (
    ExternalCommandFailedError,
    InvalidRepositoryFormatError,
    PullRequestInferenceFailedError,
    RepositoryInferenceFailedError,
)
from gh_rr.services.gh._run import run_gh, run_git

# Same override gh itself honours: [HOST/]OWNER/REPO
GH_REPO_ENV = "GH_REPO"

_URL_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*:")


def is_valid_repository(repository: str) -> bool:
    """True for <owner>/<repository>: one slash, both parts set, not a URL."""
    if not repository or _URL_SCHEME.match(repository):
        return False
    owner, sep, name = repository.partition("/")
    return bool(sep and owner and name and "/" not in name)


def validate_repository(repository: str) -> str:
    """Return repository unchanged or raise InvalidRepositoryFormatError."""
    if not is_valid_repository(repository):
        raise InvalidRepositoryFormatError("repository should be in the format of <owner>/<repository>")
    return repository


def _strip_host(repository: str) -> str:
    """Drop the HOST/ prefix from HOST/OWNER/REPO."""
    parts = repository.strip().split("/")
    if len(parts) == 3:
        return "/".join(parts[1:])
    return repository.strip()


def current_repository(log: logging.Logger | None = None) -> str:
    """Determine the repository for the current directory.

    Uses GH_REPO when set, otherwise asks gh (which reads the git remotes).
    Raises RepositoryInferenceFailedError when neither yields a repository.
    """
    from_env = os.environ.get(GH_REPO_ENV, "").strip()
    if from_env:
        return _strip_host(from_env)

    try:
        stdout, stderr = run_gh(["repo", "view", "--json", "nameWithOwner", "--jq", ".nameWithOwner"], log=log)
    except ExternalCommandFailedError as e:
        raise RepositoryInferenceFailedError(f"could not determine current repository: {e}") from e

    repository = stdout.strip()
    if stderr.strip() or not repository:
        reason = stderr.strip() or "gh returned no repository"
        if log:
            log.warning("Repository inference failed: %s", reason)
        raise RepositoryInferenceFailedError(f"could not determine current repository: {reason}")
    return repository


def current_branch(log: logging.Logger | None = None) -> str:
    """Name of the checked-out branch, used as the PR target when none is given.

    Raises PullRequestInferenceFailedError outside a git work tree or on a
    detached HEAD.
    """
    try:
        branch = run_git(["branch", "--show-current"], log=log)
    except ExternalCommandFailedError as e:
        raise PullRequestInferenceFailedError(f"could not determine pull request for current branch: {e}") from e
    if not branch:
        raise PullRequestInferenceFailedError(
            "could not determine pull request: not on a branch; pass a pull request number, URL or branch"
        )
    return branch
