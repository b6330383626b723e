"""User configuration for herocombiner.

Settings live in a YAML file, by default ~/.config/herocombiner/config.yaml.
Set HEROCOMBINER_CONFIG to use a different file.

    combine:
      max_size: 3
      output_dir: ./out
    archive:
      name: combinations.zip
      compression: deflated
    logging:
      level: INFO
"""

import logging
import os
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .core.exceptions import ConfigError


logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "HEROCOMBINER_CONFIG"
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "herocombiner" / "config.yaml"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class CombineConfig(BaseModel):
    max_size: int = Field(default=2, ge=2, description="Largest group size to generate")
    output_dir: str = Field(default=".", description="Where archives are written")


class ArchiveConfig(BaseModel):
    name: str = Field(default="combinations.zip", min_length=1)
    compression: Literal["deflated", "stored"] = "deflated"


class LoggingConfig(BaseModel):
    level: str = "WARNING"

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"must be one of {', '.join(LOG_LEVELS)}")
        return value


class HeroCombinerConfig(BaseModel):
    """All user-tunable settings, grouped by section."""

    combine: CombineConfig = Field(default_factory=CombineConfig)
    archive: ArchiveConfig = Field(default_factory=ArchiveConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def archive_path(self) -> Path:
        return Path(self.combine.output_dir) / self.archive.name


def get_config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override) if override else DEFAULT_CONFIG_PATH


def get_config() -> HeroCombinerConfig:
    """Load config from disk, falling back to defaults if there is none.

    Raises:
        ConfigError: If the file exists but can't be parsed
    """
    path = get_config_path()
    if not path.exists():
        return HeroCombinerConfig()

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        return HeroCombinerConfig.model_validate(data)
    except (yaml.YAMLError, ValidationError) as e:
        raise ConfigError(f"Invalid config file {path}: {e}") from e


def save_config(config: HeroCombinerConfig) -> Path:
    path = get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(config.model_dump(mode="json"), f, sort_keys=False)
    logger.debug(f"[Config] Saved {path}")
    return path


def reset_config() -> Path:
    return save_config(HeroCombinerConfig())


def config_keys() -> list[str]:
    """Every settable key in dotted form, e.g. 'combine.max_size'."""
    keys = []
    for section_name, section_field in HeroCombinerConfig.model_fields.items():
        for key in section_field.annotation.model_fields:
            keys.append(f"{section_name}.{key}")
    return keys


def set_config_value(key: str, raw_value: str) -> HeroCombinerConfig:
    """Set one dotted key from its string form and persist the result.

    Args:
        key: Dotted key, e.g. 'combine.max_size'
        raw_value: Value as typed on the command line

    Returns:
        The updated config

    Raises:
        ConfigError: Unknown key, or a value the field rejects
    """
    if key not in config_keys():
        raise ConfigError(f"Unknown key: {key}. Valid keys: {', '.join(config_keys())}")

    section_name, field_name = key.split(".", 1)
    config = get_config()
    section = getattr(config, section_name)

    value: str | int = raw_value
    if type(section).model_fields[field_name].annotation is int:
        try:
            value = int(raw_value)
        except ValueError:
            raise ConfigError(f"Invalid integer for {key}: {raw_value}")

    try:
        updated_section = type(section).model_validate(
            {**section.model_dump(), field_name: value}
        )
    except ValidationError as e:
        raise ConfigError(f"Invalid value for {key}: {e.errors()[0]['msg']}") from e

    config = config.model_copy(update={section_name: updated_section})
    save_config(config)
    return config
