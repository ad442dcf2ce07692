"""Configuration loading from YAML and environment.

Reviewer groups live in ``<config dir>/gh-rr.yml``::

    repositories:
      octocat/hello-world:
        - octocat
      octocat/hello-sunshine:
        default: [octodog]
        infra: [octopus, octocat]
      "*":
        security: [hubot]

A repository maps either to a list of usernames (the implicit ``default``
group) or to a mapping of group name to usernames. Application settings
(config dir override, logging) come from the environment.
"""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gh_rr.errors import ConfigNotFoundError, MalformedConfigError, UnrecoverableEnvironmentError

log = logging.getLogger(__name__)

CONFIG_FILENAME = "gh-rr.yml"
DEFAULT_GROUP = "default"

# Implicit tags kept when reading gh-rr.yml; every other plain scalar stays a string.
_IMPLICIT_TAGS = {"tag:yaml.org,2002:null", "tag:yaml.org,2002:merge"}


class _ConfigLoader(yaml.SafeLoader):
    """SafeLoader that reads plain scalars as strings.

    Usernames like ``1234`` or group names like ``on`` and ``1.0`` stay as
    written instead of becoming ints, bools or floats.
    """


_ConfigLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag in _IMPLICIT_TAGS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


class LoggingConfig(BaseSettings):
    """Logging settings."""

    model_config = SettingsConfigDict(env_prefix="LOGGING_", extra="ignore")

    level: str = Field(default="WARNING", description="Log level")
    format: str = Field(
        default="%(levelname)s %(name)s: %(message)s",
        description="Log format",
    )


class AppSettings(BaseSettings):
    """Settings taken from the environment (GH_RR_*, LOGGING_*)."""

    model_config = SettingsConfigDict(env_prefix="GH_RR_", extra="ignore")

    config_dir: Path | None = Field(
        default=None,
        description="Directory holding gh-rr.yml; the user home directory when unset",
    )
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def _normalize_groups(repository: str, value: Any) -> dict[str, Any]:
    """Turn a repository value into a mapping of group name to usernames.

    A bare list becomes the ``default`` group. Lists are copied so that
    repositories sharing an anchored list do not share the list object.
    """
    if value is None:
        return {}
    if isinstance(value, list):
        return {DEFAULT_GROUP: list(value)}
    if isinstance(value, dict):
        groups: dict[str, Any] = {}
        for group, reviewers in value.items():
            if not isinstance(reviewers, list):
                raise ValueError(f"group {group!r} of {repository!r} must be a list of usernames")
            groups[group] = list(reviewers)
        return groups
    raise ValueError(f"{repository!r} must be a list of usernames or a mapping of groups")


class ReviewerConfig(BaseModel):
    """Repositories and their reviewer groups, as read from gh-rr.yml."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    repositories: dict[str, dict[StrictStr, list[StrictStr]]] = Field(
        default_factory=dict,
        description="Lower-cased repository name -> group name -> usernames",
    )
    path: Path | None = Field(default=None, description="File the config was read from")

    @field_validator("repositories", mode="before")
    @classmethod
    def _normalize_repositories(cls, value: Any) -> Any:
        if value is None:
            return {}
        if not isinstance(value, dict):
            raise ValueError("repositories must be a mapping")
        normalized: dict[str, Any] = {}
        for repository, groups in value.items():
            if not isinstance(repository, str):
                raise ValueError(f"repository name {repository!r} must be a string")
            key = repository.lower()
            if key in normalized:
                raise ValueError(f"repository {repository!r} is declared more than once")
            normalized[key] = _normalize_groups(repository, groups)
        return normalized


def _format_validation_error(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        loc = ".".join(str(p) for p in err["loc"])
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(parts)


def decode_config(text: str, path: Path | None = None) -> ReviewerConfig:
    """Decode YAML text into a ReviewerConfig.

    Empty text gives a config with no repositories. Raises
    MalformedConfigError for invalid YAML or an unsupported shape.
    """
    try:
        raw = yaml.load(text, Loader=_ConfigLoader)
    except yaml.YAMLError as e:
        raise MalformedConfigError(f"invalid YAML: {e}", path=path) from e

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise MalformedConfigError("top-level document must be a mapping", path=path)

    try:
        return ReviewerConfig(repositories=raw.get("repositories"), path=path)
    except ValidationError as e:
        raise MalformedConfigError(_format_validation_error(e), path=path) from e


def config_file_path(config_dir: Path) -> Path:
    """Path to gh-rr.yml inside config_dir."""
    return Path(config_dir) / CONFIG_FILENAME


def load_config(config_dir: Path) -> ReviewerConfig:
    """Load gh-rr.yml from config_dir.

    Raises ConfigNotFoundError when the file does not exist (an empty file is
    fine) and MalformedConfigError when it cannot be read or decoded.
    """
    path = config_file_path(config_dir)
    if not path.is_file():
        raise ConfigNotFoundError(path)

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MalformedConfigError(f"could not be read: {e}", path=path) from e

    config = decode_config(text, path=path)
    log.debug("Loaded %d repositories from %s", len(config.repositories), path)
    return config


def user_home_dir() -> Path:
    """Return the user home directory; fail hard when it is unknown."""
    try:
        return Path.home()
    except (RuntimeError, KeyError) as e:
        raise UnrecoverableEnvironmentError(f"failed to get user home dir: {e}") from e


def resolve_config_dir(explicit: Path | None, settings: AppSettings | None = None) -> Path:
    """Pick the config dir: explicit flag, then GH_RR_CONFIG_DIR, then home."""
    if explicit is not None:
        return explicit
    if settings is not None and settings.config_dir is not None:
        return settings.config_dir
    return user_home_dir()
