"""
Configuration loader for SDK defaults.

This module handles loading the YAML file that tunes the defaults used when
paths are compressed for transmission and whether event debug logging is on.

Expected layout::

    lob_sdk:
      simplify_epsilon: 0.5
      path_decimals: 2
      debug_events: false
"""
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

import yaml

from .errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config/lob_sdk.yaml"

# Relative config paths are looked up from the repository root, not the cwd
PROJECT_ROOT = Path(__file__).resolve().parent.parent


@dataclass(frozen=True)
class SdkConfig:
    """Tunable defaults shared by the SDK components."""

    # Tolerance handed to douglas_peucker by the path codec
    simplify_epsilon: float = 0.5

    # Decimal places kept when path points are encoded as arrays
    path_decimals: int = 2

    # Enables EventEmitter debug messages for emitters built from config
    debug_events: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.simplify_epsilon, bool) or not isinstance(self.simplify_epsilon, (int, float)):
            raise ConfigError(f"simplify_epsilon must be a number, got {self.simplify_epsilon!r}")
        if self.simplify_epsilon < 0:
            raise ConfigError("simplify_epsilon must be non-negative")
        if isinstance(self.path_decimals, bool) or not isinstance(self.path_decimals, int):
            raise ConfigError(f"path_decimals must be an integer, got {self.path_decimals!r}")
        if self.path_decimals < 0:
            raise ConfigError("path_decimals must be non-negative")
        if not isinstance(self.debug_events, bool):
            raise ConfigError(f"debug_events must be a boolean, got {self.debug_events!r}")


class ConfigLoader:
    """Loads SdkConfig values from a YAML file."""

    SECTION = "lob_sdk"

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = config_path or DEFAULT_CONFIG_PATH
        self._raw: dict[str, Any] = {}

    def load(self) -> SdkConfig:
        """
        Load configuration from the YAML file.

        Relative paths are resolved against the project root. A missing file
        falls back to the defaults. Unknown keys are ignored with a warning.

        Returns:
            SdkConfig: the loaded configuration

        Raises:
            ConfigError: if the file is not valid YAML or holds bad values
        """
        config_file = Path(self.config_path)
        if not config_file.is_absolute():
            config_file = PROJECT_ROOT / config_file

        if not config_file.exists():
            logger.warning("SDK config file not found: %s, using defaults", config_file)
            return SdkConfig()

        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                self._raw = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_file}: {e}") from e

        section = self._raw.get(self.SECTION, {}) if isinstance(self._raw, dict) else None
        if not isinstance(section, dict):
            raise ConfigError(f"'{self.SECTION}' section in {config_file} must be a mapping")

        known = {f.name for f in fields(SdkConfig)}
        for key in section:
            if key not in known:
                logger.warning("Unknown key '%s' in %s", key, config_file)

        return SdkConfig(**{key: value for key, value in section.items() if key in known})


def load_config(config_path: Optional[str] = None) -> SdkConfig:
    """Load the SDK configuration, see ConfigLoader."""
    return ConfigLoader(config_path).load()
