"""Configuration loading for repofetch.

The config file is YAML, e.g.::

    github_token: ghp_...
    labels:
      help_wanted: "help wanted"
      good_first_issue: "good first issue"
    emojis:
      star: "⭐"
"""

import logging
import os
from pathlib import Path
from typing import Optional

import click
import yaml
from pydantic import BaseModel, Field, ValidationError

from repofetch.exceptions import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "repofetch.yml"


def default_config_path() -> Path:
    return Path(click.get_app_dir("repofetch")) / CONFIG_FILENAME


class Emojis(BaseModel):
    """One icon per stat category."""

    url: str = "🌐"
    star: str = "⭐"
    subscriber: str = "👀"
    fork: str = "🔱"
    issue: str = "❗"
    pull_request: str = "🔀"
    created: str = "🐣"
    updated: str = "📤"
    size: str = "💽"
    original: str = "🥄"
    help_wanted: str = "🙋"
    good_first_issue: str = "🔰"
    hacktoberfest: str = "🎃"


class Labels(BaseModel):
    """Label names as they appear on GitHub."""

    help_wanted: str = "help wanted"
    good_first_issue: str = "good first issue"


class RepofetchConfig(BaseModel):
    """Validated contents of ``repofetch.yml``."""

    emojis: Emojis = Field(default_factory=Emojis)
    labels: Labels = Field(default_factory=Labels)
    github_token: Optional[str] = None

    @property
    def token(self) -> Optional[str]:
        """The configured token, falling back to ``GITHUB_TOKEN``/``GH_TOKEN``."""
        return (
            self.github_token
            or os.environ.get("GITHUB_TOKEN")
            or os.environ.get("GH_TOKEN")
            or None
        )

    @classmethod
    def from_yaml(cls, text: str) -> "RepofetchConfig":
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Couldn't parse config file: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError("Config file must contain a mapping")
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid config file: {e}") from e

    @classmethod
    def load(cls, path: Path) -> "RepofetchConfig":
        """Load ``path`` strictly, raising ``ConfigError`` on any problem."""
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Couldn't open config file {path}: {e}") from e
        return cls.from_yaml(text)


def load_config(path: Optional[Path] = None) -> RepofetchConfig:
    """Load the config, using defaults when the file is missing or broken."""
    path = path or default_config_path()
    if not path.exists():
        logger.debug("No config file at %s, using defaults", path)
        return RepofetchConfig()
    try:
        return RepofetchConfig.load(path)
    except ConfigError as e:
        logger.warning("There was an issue with the config file: %s. Using default config.", e)
        return RepofetchConfig()
