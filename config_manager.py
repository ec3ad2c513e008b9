"""
Configuration management for the ditherpack CLI.
Handles loading, validating and saving pack/unpack defaults.
"""

import copy
import json
import logging
import os
from typing import Any, Dict, List, Optional

from compression import MAX_COMPRESSION_LEVEL, MIN_COMPRESSION_LEVEL
from dithering_lib import MAX_BAYER_POWER, DitherMethod

__all__ = [
    'ConfigManager',
    'ConfigValidationError',
]

logger = logging.getLogger(__name__)


class ConfigValidationError(Exception):
    """Raised when config loading or validation fails."""
    pass


class ConfigManager:
    """Manages ditherpack configuration stored as JSON."""

    DEFAULT_CONFIG = {
        # Pack settings
        "pack": {
            "method": "bayer",
            "bayer_power": 3,
            "compression_level": 19,
            "workers": 1,
            "extension": ".ditherpack"
        },

        # Unpack settings
        "unpack": {
            "max_output_size": 0,  # 0 means no ceiling
            "extension": ".png"
        }
    }

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize config manager.

        Args:
            config_file: Path to config file, or None for built-in defaults
        """
        self.config_file = config_file
        self.config = self._load_config()

    def _load_config(self) -> Dict:
        """Load config from file merged over the defaults."""
        defaults = copy.deepcopy(self.DEFAULT_CONFIG)
        if not self.config_file or not os.path.exists(self.config_file):
            return defaults
        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                loaded = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigValidationError(
                f"Invalid JSON in config file:\n  Line {e.lineno}: {e.msg}") from e
        except OSError as e:
            raise ConfigValidationError(f"Failed to load config file: {e}") from e
        if not isinstance(loaded, dict):
            raise ConfigValidationError("Config file must contain a JSON object")
        logger.debug("Loaded config from %s", self.config_file)
        return self._merge_configs(defaults, loaded)

    def _merge_configs(self, default: Dict, loaded: Dict) -> Dict:
        """
        Recursively merge loaded config with defaults.
        Ensures all default keys exist even if not in loaded config.
        """
        for key, value in default.items():
            if key in loaded:
                if isinstance(value, dict):
                    if not isinstance(loaded[key], dict):
                        raise ConfigValidationError(
                            f"Config section '{key}' must be a JSON object, "
                            f"got {type(loaded[key]).__name__}")
                    default[key] = self._merge_configs(value, loaded[key])
                else:
                    default[key] = loaded[key]
        return default

    def save(self, config_file: Optional[str] = None):
        """Save current config to file."""
        path = config_file or self.config_file
        if not path:
            raise ConfigValidationError("No config file path to save to")
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(self.config, f, indent=4)
        self.config_file = path

    def get(self, *keys: str, default: Any = None) -> Any:
        """
        Get config value by nested keys.

        Example:
            config.get("pack", "method")  # Returns "bayer"
        """
        value = self.config
        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default
        return value

    def set(self, *keys: str, value: Any):
        """
        Set config value by nested keys.

        Example:
            config.set("pack", "workers", value=4)
        """
        if len(keys) == 0:
            return

        current = self.config
        for key in keys[:-1]:
            if key not in current:
                current[key] = {}
            current = current[key]
            if not isinstance(current, dict):
                raise ConfigValidationError(
                    f"Cannot set '{'.'.join(keys)}': '{key}' is not a section")

        current[keys[-1]] = value

    def validate(self) -> "ConfigManager":
        """
        Check every setting and raise one ConfigValidationError listing all
        problems found.
        """
        errors: List[str] = []

        method = self.get("pack", "method")
        valid_methods = [m.value for m in DitherMethod]
        if method not in valid_methods:
            errors.append(f"Invalid pack method: '{method}'. Must be one of: {valid_methods}")

        self._check_int(errors, ("pack", "bayer_power"), 1, MAX_BAYER_POWER)
        self._check_int(errors, ("pack", "compression_level"),
                        MIN_COMPRESSION_LEVEL, MAX_COMPRESSION_LEVEL)
        self._check_int(errors, ("pack", "workers"), 1, None)
        self._check_int(errors, ("unpack", "max_output_size"), 0, None)

        for section in ("pack", "unpack"):
            ext = self.get(section, "extension")
            if not isinstance(ext, str) or not ext.startswith('.') or len(ext) < 2:
                errors.append(f"'{section}.extension' must look like '.ext', got {ext!r}")

        if errors:
            error_msg = "Configuration validation failed:\n" + "\n".join(f"  • {e}" for e in errors)
            raise ConfigValidationError(error_msg)
        return self

    def _check_int(self, errors: List[str], keys, lo: int, hi: Optional[int]):
        name = ".".join(keys)
        value = self.get(*keys)
        if isinstance(value, bool) or not isinstance(value, int):
            errors.append(f"'{name}' must be an integer")
            return
        if value < lo or (hi is not None and value > hi):
            bound = f"between {lo} and {hi}" if hi is not None else f">= {lo}"
            errors.append(f"'{name}' must be {bound}, got {value}")
