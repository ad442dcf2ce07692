"""Look up the reviewers of a repository's group."""

import logging

from gh_rr.config import ReviewerConfig
from gh_rr.errors import GroupNotConfiguredError, RepositoryNotConfiguredError

log = logging.getLogger(__name__)

# Repository key holding groups that any repository can use with --global.
GLOBAL_REPOSITORY = "*"


def resolve_reviewers(config: ReviewerConfig, repository: str, group: str) -> list[str]:
    """Return the reviewers of ``group`` for ``repository``.

    Repository names match case-insensitively, group names exactly. The
    list is returned as declared (order and duplicates kept); an empty list
    is a valid result. For global groups pass GLOBAL_REPOSITORY: only the
    ``*`` entry is consulted then, never the concrete repository.

    Raises RepositoryNotConfiguredError or GroupNotConfiguredError.
    """
    groups = config.repositories.get(repository.lower())
    if groups is None:
        raise RepositoryNotConfiguredError(repository)

    reviewers = groups.get(group)
    if reviewers is None:
        raise GroupNotConfiguredError(repository, group)

    log.debug("Resolved %s/%s to %s", repository, group, reviewers)
    return list(reviewers)
