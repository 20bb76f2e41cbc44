"""
Version Checker - Configuration Manager

Handles loading and saving version checker configuration from/to a JSON
file, and turns it into an immutable VersionCheckerConfig.

Author: Version Checker Project
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from ..exceptions import ConfigError
from ..models import VersionCheckerConfig

# Configure logging
logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = "version_checker.json"

# Keys that can be stored in the JSON file (version_source is code, not data)
FILE_KEYS = (
    "api_url",
    "timeout_seconds",
    "enable_caching",
    "cache_duration_minutes",
    "locale",
    "custom_headers",
    "include_build_number",
    "user_agent",
    "cache_namespace"
)


class ConfigManager:
    """
    Manages version checker configuration files.

    Responsibilities:
    - Load config JSON (default: version_checker.json in the working directory)
    - Merge caller overrides on top of file values
    - Validate into a VersionCheckerConfig
    - Save a configuration back to JSON
    """

    def __init__(self, config_file: Optional[Union[str, Path]] = None):
        """
        Initialize configuration manager.

        Args:
            config_file: Path of the JSON config file
        """
        self.config_file = Path(config_file) if config_file else Path.cwd() / DEFAULT_CONFIG_FILENAME

    def read_file(self) -> Dict[str, Any]:
        """
        Read raw configuration values from the config file.

        Returns:
            Dict of configuration values (empty if the file does not exist)

        Raises:
            ConfigError: If the file cannot be read or is not a JSON object
        """
        if not self.config_file.exists():
            logger.debug(f"Configuration file not found at {self.config_file}, using defaults")
            return {}

        logger.debug(f"Loading configuration from {self.config_file}")
        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigError(f"Failed to read configuration file {self.config_file}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Configuration file {self.config_file} must contain a JSON object")

        unknown = set(data) - set(FILE_KEYS)
        if unknown:
            logger.warning(f"Ignoring unknown configuration keys: {', '.join(sorted(unknown))}")

        return {key: value for key, value in data.items() if key in FILE_KEYS}

    def load_config(self, **overrides: Any) -> VersionCheckerConfig:
        """
        Load configuration from file and apply overrides.

        Overrides whose value is None are ignored, so unset command line
        options do not mask file values.

        Args:
            **overrides: Field values taking precedence over the file

        Returns:
            Validated VersionCheckerConfig

        Raises:
            ConfigError: If the merged configuration is invalid
        """
        values = self.read_file()
        values.update({key: value for key, value in overrides.items() if value is not None})

        try:
            config = VersionCheckerConfig(**values)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e

        logger.info("Configuration loaded successfully")
        return config

    def save_config(self, config: VersionCheckerConfig):
        """
        Save a configuration to the config file.

        Args:
            config: Configuration to save (version_source is not saved)

        Raises:
            ConfigError: If the file cannot be written
        """
        logger.debug(f"Saving configuration to {self.config_file}")
        data = config.model_dump(include=set(FILE_KEYS))
        try:
            with open(self.config_file, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            raise ConfigError(f"Failed to write configuration file {self.config_file}: {e}") from e
        logger.debug("Configuration saved successfully")
