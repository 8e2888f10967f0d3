"""Configuration management for the TypeTune typography system."""

import logging
from pathlib import Path

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import (
    ConfigFileNotFoundError,
    ConfigLoadError,
    ConfigurationError,
    EmptyConfigFileError,
    InvalidGridStepError,
    InvalidYamlError,
)
from .models import BgMode, ContextOverride, ExportFormat

logger = logging.getLogger(__name__)

VALID_GRID_STEPS: tuple[int, ...] = (1, 2, 4, 8)


class PluginSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TYPETUNE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )
    """User-adjustable calculation settings."""

    grid_step: int = Field(4, description="Line-height grid step in px")
    bg_mode: BgMode = Field("auto", description="Background detection (auto, light, dark)")
    context_override: ContextOverride = Field(
        "auto", description="Force display/body/caption context"
    )
    auto_apply: bool = Field(False, description="Apply results as soon as they are calculated")
    update_styles: bool = Field(False, description="Write to shared text styles")

    @field_validator("grid_step")
    @classmethod
    def validate_grid_step(cls, v):
        if v not in VALID_GRID_STEPS:
            raise InvalidGridStepError(VALID_GRID_STEPS)
        return v


class AppConfig(BaseSettings):
    """Main application configuration that loads from multiple sources."""

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field("INFO", description="Application log level")
    settings_path: Path = Field(
        default_factory=lambda: Path.home() / ".typetune" / "settings.yaml",
        description="File the settings store persists to",
    )
    default_export_format: ExportFormat = Field("css", description="Default code export format")

    settings: PluginSettings = Field(default_factory=PluginSettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @classmethod
    def load_from_env(cls, env_file: str | Path | None = ".env") -> "AppConfig":
        """Load configuration from environment variables and .env file."""
        if env_file:
            env_file = Path(env_file)
            if env_file.exists():
                return cls(_env_file=env_file)
        return cls()


def load_config_from_yaml(config_path: str | Path, config_class: type) -> BaseSettings:
    """
    Load a settings class from a YAML mapping.

    Values in the file win over environment variables and ``.env`` is not
    read. Keys the class does not declare are logged and ignored.

    Raises:
        ConfigFileNotFoundError: If the file does not exist
        EmptyConfigFileError: If the file holds no YAML document
        InvalidYamlError: If the file cannot be parsed
        ConfigLoadError: If the values fail validation
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigFileNotFoundError(str(config_path))

    try:
        with config_path.open() as f:
            config_data = yaml.safe_load(f)

        if config_data is None:
            raise EmptyConfigFileError(str(config_path))

        if isinstance(config_data, dict):
            unknown = sorted(set(config_data) - set(config_class.model_fields))
            if unknown:
                logger.warning(f"Ignoring unknown settings in {config_path}: {unknown}")

        if issubclass(config_class, BaseSettings):

            class FileConfig(config_class):
                model_config = SettingsConfigDict(
                    env_file=None,
                    case_sensitive=False,
                    extra="ignore",
                    validate_assignment=True,
                )

            config = FileConfig(**config_data)
        else:
            config = config_class(**config_data)

    except ConfigurationError:
        raise
    except yaml.YAMLError as e:
        raise InvalidYamlError(str(config_path), str(e)) from e
    except Exception as e:
        raise ConfigLoadError(str(e)) from e

    logger.debug(f"Loaded {config_class.__name__} from {config_path}")
    return config


def _add_yaml_methods():
    """Attach ``from_yaml`` and ``from_env_and_yaml`` to the settings classes."""

    @classmethod
    def from_yaml(cls, config_path: str | Path):
        """Load settings from a YAML file."""
        return load_config_from_yaml(config_path, cls)

    @classmethod
    def from_env_and_yaml(cls, yaml_path: str | Path | None = None, env_file: str = ".env"):
        """Load from the YAML file when it exists, otherwise from the environment."""
        if yaml_path and Path(yaml_path).exists():
            return cls.from_yaml(yaml_path)
        return cls(_env_file=env_file if Path(env_file).exists() else None)

    for config_class in [PluginSettings, AppConfig]:
        config_class.from_yaml = from_yaml
        config_class.from_env_and_yaml = from_env_and_yaml


_add_yaml_methods()
