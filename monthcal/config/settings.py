"""Settings management using Pydantic for type validation and configuration."""

import logging
import os
from pathlib import Path
from typing import Any, Optional, cast

import yaml
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PREFIX = "MONTHCAL_"

# Project-level config checked before the user config directory
PROJECT_CONFIG_FILE = Path(__file__).parent.parent.parent / "config" / "config.yaml"


class LoggingSettings(BaseModel):
    """Logging configuration settings."""

    model_config = ConfigDict(validate_assignment=True)

    # Console Logging
    console_enabled: bool = Field(default=True, description="Enable console logging (stderr)")
    console_level: str = Field(
        default="WARNING",
        description="Console log level: DEBUG, VERBOSE, INFO, WARNING, ERROR, CRITICAL",
    )
    console_colors: bool = Field(
        default=True, description="Enable colored console output (auto-detected)"
    )

    # File Logging
    file_enabled: bool = Field(default=False, description="Enable file logging")
    file_level: str = Field(
        default="DEBUG",
        description="File log level: DEBUG, VERBOSE, INFO, WARNING, ERROR, CRITICAL",
    )
    file_directory: Optional[str] = Field(
        default=None, description="Custom log directory (defaults to data_dir/logs)"
    )
    file_prefix: str = Field(default="monthcal", description="Log file prefix")
    max_log_files: int = Field(default=5, description="Maximum number of log files to keep")
    include_function_names: bool = Field(
        default=True, description="Include function names and line numbers in file logs"
    )


class MonthCalSettings(BaseSettings):
    """Application settings with environment variable and YAML support."""

    # Private attributes
    _explicit_args: set = PrivateAttr(default_factory=set)
    _env_vars_set: set = PrivateAttr(default_factory=set)

    # Rendering
    highlight_today: bool = Field(
        default=True, description="Mark today's date as [DD] in the calendar grid"
    )

    # File Paths
    config_dir: Path = Field(default_factory=lambda: Path.home() / ".config" / "monthcal")
    data_dir: Path = Field(default_factory=lambda: Path.home() / ".local" / "share" / "monthcal")

    # Logging Configuration
    logging: LoggingSettings = Field(
        default_factory=LoggingSettings, description="Logging settings"
    )

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        validate_assignment=True,
    )

    def __init__(self, **kwargs: Any) -> None:
        # Track which environment variables are set before calling parent
        env_vars_set = {
            key[len(ENV_PREFIX) :].lower()
            for key in os.environ
            if key.upper().startswith(ENV_PREFIX)
        }

        super().__init__(**kwargs)

        self._explicit_args = set(kwargs.keys())
        self._env_vars_set = env_vars_set

        # Load YAML configuration after basic initialization
        self._load_yaml_config()

    def _find_config_file(self) -> Optional[Path]:
        """Find config file, checking project directory first, then user config dir."""
        if PROJECT_CONFIG_FILE.exists():
            return PROJECT_CONFIG_FILE

        user_config = self.config_dir / "config.yaml"
        if user_config.exists():
            return user_config

        return None

    def _is_overridden(self, name: str) -> bool:
        return name in self._explicit_args or name in self._env_vars_set

    def _load_basic_settings(self, config_data: dict) -> None:
        """Load top-level application settings from YAML data."""
        for setting in ["highlight_today"]:
            if setting in config_data and not self._is_overridden(setting):
                setattr(self, setting, config_data[setting])

    def _logging_config_from_yaml(self, config_data: dict) -> Optional[LoggingSettings]:
        """Validate the YAML logging block merged over the current logging settings."""
        logging_config = config_data.get("logging")
        if not isinstance(logging_config, dict) or self._is_overridden("logging"):
            return None

        updates = {
            setting: logging_config[setting]
            for setting in LoggingSettings.model_fields
            if setting in logging_config and f"logging__{setting}" not in self._env_vars_set
        }
        return LoggingSettings.model_validate({**self.logging.model_dump(), **updates})

    def _load_yaml_config(self) -> None:
        """Load configuration from YAML file if it exists."""
        config_file = self._find_config_file()
        if not config_file:
            return

        try:
            with config_file.open(encoding="utf-8") as f:
                config_data = yaml.safe_load(f)

            if not config_data:
                return
            if not isinstance(config_data, dict):
                raise ValueError("top-level YAML value must be a mapping")

            # Validate the logging block before applying anything
            logging_settings = self._logging_config_from_yaml(config_data)
            self._load_basic_settings(config_data)
            if logging_settings is not None:
                self.logging = logging_settings

        except (OSError, ValueError, ValidationError, yaml.YAMLError) as e:
            # Don't fail if YAML loading fails, just continue with defaults/env vars
            logging.getLogger(__name__).warning(
                f"Could not load YAML config from {config_file}: {e}"
            )

    @property
    def config_file(self) -> Path:
        """Path to the user YAML configuration file."""
        return self.config_dir / "config.yaml"

    @property
    def log_dir(self) -> Path:
        """Directory for log files."""
        if self.logging.file_directory:
            return Path(self.logging.file_directory)
        return self.data_dir / "logs"


# Global settings management
_settings_instance: Optional[MonthCalSettings] = None


def get_settings() -> MonthCalSettings:
    """Get the global settings instance, creating it lazily if needed."""
    if globals()["_settings_instance"] is None:
        globals()["_settings_instance"] = MonthCalSettings()
    return cast(MonthCalSettings, globals()["_settings_instance"])


def reset_settings() -> None:
    """Reset the global settings instance (primarily for testing)."""
    globals()["_settings_instance"] = None
