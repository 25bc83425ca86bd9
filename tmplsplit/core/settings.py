"""Process-wide defaults loaded from a YAML settings file and the environment."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigError
from .models import UnitSettings

logger = logging.getLogger(__name__)

ALL_TEMPLATES = "ALL"

# Keys accepted in the settings file, in addition to the field names.
_FILE_KEYS = {
    "OutputDir": "output_dir",
    "OutputExtension": "output_extension",
    "TemplateFile": "template_file",
    "DataFile": "data_file",
    "DefaultPrefix": "default_prefix",
}


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TMPLSPLIT_", case_sensitive=False, frozen=True
    )

    output_dir: Path = Path("output")
    output_extension: str = ""
    template_file: str = "template.j2"
    data_file: str = "data.yaml"
    default_prefix: str = "file"

    @field_validator("output_extension")
    @classmethod
    def _strip_dot(cls, value: str) -> str:
        return value.strip().removeprefix(".")

    def unit_defaults(self, separate: bool, prefix: str | None = None) -> UnitSettings:
        """Build the per-unit settings a config directive may override."""
        return UnitSettings(
            extension=self.output_extension,
            separate=separate,
            prefix=prefix or self.default_prefix,
        )


def _read_settings_file(config_path: Path) -> dict[str, Any]:
    if not config_path.exists():
        logger.debug(f"Settings file {config_path} not found, using defaults")
        return {}

    try:
        parsed = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to read settings file {config_path}: {e}") from e

    if not isinstance(parsed, dict):
        raise ConfigError(f"Settings file {config_path} must contain a mapping")

    data: dict[str, Any] = {}
    for key, value in parsed.items():
        field = _FILE_KEYS.get(key, key)
        if field not in Settings.model_fields:
            logger.debug(f"Ignoring unknown settings key: {key}")
            continue
        # Empty values keep the defaults.
        if value is None or value == "":
            continue
        data[field] = value
    return data


def load_settings(config_path: Path | None = None, **overrides: Any) -> Settings:
    """Load settings from an optional YAML file plus explicit overrides.

    Args:
        config_path: Settings file; a missing file is not an error
        **overrides: Values that win over the file (``None`` is skipped)

    Returns:
        Frozen settings snapshot
    """
    data = _read_settings_file(config_path) if config_path else {}
    data.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return Settings(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings: {e}") from e
