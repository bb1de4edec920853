"""Configuration loading service.

Reads the config document (YAML or JSON) once at startup, migrates the flat
``projects`` layout into groups and validates it. Any problem is fatal:
the server refuses to start rather than run with a partial config.
"""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from git_monitor.models.config import AppConfig

logger = logging.getLogger(__name__)

# Title of the group holding projects listed at the top level
DEFAULT_GROUP_TITLE = "Projects"

KNOWN_FIELDS = set(AppConfig.model_fields) | {"projects"}


class ConfigError(Exception):
    """Raised when the configuration cannot be used."""


class ConfigService:
    """Service for loading the application configuration.

    Handles:
    - Reading YAML (or JSON) from disk
    - Migrating a flat project list into a group
    - Validating against the Pydantic schema
    """

    def __init__(self, config_path: str | Path):
        """Initialize the config service.

        Args:
            config_path: Path to the config file.
        """
        self.config_path = Path(config_path)
        self._config: AppConfig | None = None

    def load(self) -> AppConfig:
        """Load and validate configuration.

        Returns:
            Validated AppConfig instance.

        Raises:
            ConfigError: If the file is missing, unreadable or invalid.
        """
        try:
            with open(self.config_path, encoding="utf-8") as f:
                raw_config = yaml.safe_load(f)
        except FileNotFoundError:
            raise ConfigError(f"Config file not found: {self.config_path}") from None
        except OSError as e:
            raise ConfigError(f"Could not read config file {self.config_path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Could not parse config file {self.config_path}: {e}") from e

        if not isinstance(raw_config, dict):
            raise ConfigError("Config must be a mapping with 'groups' or 'projects'")

        migrated = self._migrate_config(raw_config)

        try:
            self._config = AppConfig(**migrated)
        except ValidationError as e:
            raise ConfigError(_format_validation_error(e)) from e

        logger.info(
            f"Config read okay: {len(self._config.groups)} groups, "
            f"{len(self._config.projects)} projects"
        )
        return self._config

    def get_config(self) -> AppConfig:
        """Get the current configuration.

        Loads from disk if not already loaded.
        """
        if self._config is None:
            return self.load()
        return self._config

    def _migrate_config(self, raw: dict[str, Any]) -> dict[str, Any]:
        """Normalise the raw document to the AppConfig schema.

        A top-level ``projects`` list becomes a group appended after any
        declared ``groups``.

        Args:
            raw: Raw config dictionary.

        Returns:
            Migrated config dictionary.
        """
        migrated = {key: value for key, value in raw.items() if key != "projects"}

        groups = raw.get("groups") or []
        if not isinstance(groups, list):
            raise ConfigError("'groups' must be a list")
        groups = list(groups)

        if "projects" in raw:
            projects = raw["projects"]
            if not isinstance(projects, list):
                raise ConfigError("'projects' must be a list")
            if projects:
                groups.append({"title": DEFAULT_GROUP_TITLE, "projects": projects})

        migrated["groups"] = groups

        for field in sorted(set(raw) - KNOWN_FIELDS):
            logger.info(f"Ignoring unknown config field: {field}")

        return migrated


def _format_validation_error(error: ValidationError) -> str:
    """Render a pydantic error as one line per problem."""
    lines = ["Invalid config:"]
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "(root)"
        lines.append(f"  {location}: {item['msg']}")
    return "\n".join(lines)
