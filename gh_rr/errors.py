"""Errors raised while loading config, resolving reviewers and calling gh.

Every GhRrError is handled by the CLI and turned into a message on stderr
plus exit code 1. UnrecoverableEnvironmentError is deliberately outside that
hierarchy so it is never caught.
"""

from pathlib import Path


class GhRrError(Exception):
    """Base class for handled gh-rr failures."""

    pass


class ConfigNotFoundError(GhRrError):
    """Raised when the config file does not exist."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"config file not found: {path}")


class MalformedConfigError(GhRrError):
    """Raised when the config file cannot be decoded."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        if path is not None:
            message = f"{path}: {message}"
        super().__init__(message)


class RepositoryNotConfiguredError(GhRrError):
    """Raised when no reviewer groups exist for a repository."""

    def __init__(self, repository: str) -> None:
        self.repository = repository
        super().__init__(f"no reviewers are configured for {repository}")


class GroupNotConfiguredError(GhRrError):
    """Raised when a configured repository has no group with the given name."""

    def __init__(self, repository: str, group: str) -> None:
        self.repository = repository
        self.group = group
        super().__init__(f"{repository} does not have a group named {group}")


class InvalidRepositoryFormatError(GhRrError):
    """Raised when a repository is not in <owner>/<repository> form."""

    pass


class ExternalCommandFailedError(GhRrError):
    """Raised when the gh command reports an error."""

    pass


class RepositoryInferenceFailedError(GhRrError):
    """Raised when the current repository cannot be determined."""

    pass


class UnrecoverableEnvironmentError(Exception):
    """Raised when the user home directory cannot be determined."""

    pass


class PullRequestInferenceFailedError(GhRrError):
    """Raised when no pull request target is given and none can be inferred."""

    pass
