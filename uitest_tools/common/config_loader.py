"""
================================================================================
Configuration Loader
================================================================================

Settings for the UI suite, read from `config/config.yaml`.

Every dotted key can be overridden from the environment: `ui.base_url` is
read from `UI_BASE_URL`, `ui.timeouts.toast` from `UI_TIMEOUTS_TOAST`.
Overrides are looked up on every access, so options copied into the
environment by the root conftest apply even after the file was loaded.

Override values are strings; they are converted to the type of the YAML
value (or of the caller's default when the key is absent from the file).
A value that cannot be converted is a configuration error, not a silent
fallback to the raw string.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import copy
import os
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml
from loguru import logger


# Repository-level configuration file
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "config.yaml"

TRUE_VALUES = ("true", "1", "yes", "on")
FALSE_VALUES = ("false", "0", "no", "off")

_MISSING = object()


class ConfigurationError(Exception):
    """Raised when the configuration file or an override is invalid."""
    pass


def env_key(key: str) -> str:
    """Environment variable that overrides a dotted key."""
    return key.upper().replace(".", "_")


def convert_override(name: str, raw: str, reference: Any) -> Any:
    """
    Convert an environment override to the type of `reference`.

    Raises:
        ConfigurationError: `raw` is not a valid value of that type
    """
    if reference is None or isinstance(reference, str):
        return raw

    text = raw.strip()
    if isinstance(reference, bool):
        if text.lower() in TRUE_VALUES:
            return True
        if text.lower() in FALSE_VALUES:
            return False
        raise ConfigurationError(
            f"{name}={raw!r} is not a boolean "
            f"(use one of {', '.join(TRUE_VALUES + FALSE_VALUES)})"
        )

    for kind in (int, float):
        if isinstance(reference, kind):
            try:
                return kind(text)
            except ValueError as e:
                raise ConfigurationError(
                    f"{name}={raw!r} is not a valid {kind.__name__}"
                ) from e

    raise ConfigurationError(
        f"{name} cannot override a {type(reference).__name__} value"
    )


class ConfigLoader:
    """
    Process-wide configuration singleton.

    Usage:
        >>> config = ConfigLoader()
        >>> config.get("ui.timeouts.toast", 3000)
        3000
        >>> config.get_section("ui")["viewport"]
        {'width': 1920, 'height': 1080}
    """

    _instance: Optional["ConfigLoader"] = None

    def __new__(cls, config_path: Optional[Path] = None) -> "ConfigLoader":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Optional[Path] = None) -> None:
        if getattr(self, "_initialized", False):
            return

        self._config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self._config: Dict[str, Any] = {}
        self._load_config()
        self._initialized = True

    @property
    def config_path(self) -> Path:
        return self._config_path

    def _load_config(self) -> None:
        if not self._config_path.exists():
            logger.warning(
                f"Configuration file not found: {self._config_path}; "
                f"using defaults and environment overrides"
            )
            self._config = {}
            return

        try:
            loaded = yaml.safe_load(self._config_path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {self._config_path}: {e}") from e

        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ConfigurationError(
                f"Configuration root must be a mapping: {self._config_path}"
            )
        self._config = loaded
        logger.debug(f"Loaded configuration from: {self._config_path}")

    def _lookup(self, key: str) -> Tuple[bool, Any]:
        value: Any = self._config
        for part in key.split("."):
            if not isinstance(value, dict) or part not in value:
                return False, None
            value = value[part]
        return value is not None, value

    def get(self, key: str, default: Any = None) -> Any:
        """
        Value at a dotted path: environment override, then file, then `default`.

        Raises:
            ConfigurationError: The override does not parse as the expected type
        """
        found, value = self._lookup(key)
        name = env_key(key)
        raw = os.environ.get(name)
        if raw is not None:
            return convert_override(name, raw, value if found else default)
        return value if found else default

    def get_section(self, section: str) -> Dict[str, Any]:
        """
        A copy of a top-level section with environment overrides applied
        to every leaf, so it agrees with `get` on each key.
        """
        found, value = self._lookup(section)
        if not found or not isinstance(value, dict):
            return {}
        return self._overlay(section, copy.deepcopy(value))

    def _overlay(self, prefix: str, node: Dict[str, Any]) -> Dict[str, Any]:
        for name, value in node.items():
            path = f"{prefix}.{name}"
            if isinstance(value, dict):
                node[name] = self._overlay(path, value)
            else:
                node[name] = self.get(path, value)
        return node

    def get_timeout(self, name: str, default: int) -> int:
        """
        A `ui.timeouts.<name>` value in milliseconds.

        Raises:
            ConfigurationError: The value is not a non-negative whole number
        """
        value = self.get(f"ui.timeouts.{name}", default)
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ConfigurationError(
                f"ui.timeouts.{name} must be a non-negative integer (ms), got {value!r}"
            )
        return value

    def reload(self) -> None:
        """Re-read the file; environment overrides need no reload."""
        self._load_config()
        logger.info(f"Configuration reloaded from: {self._config_path}")

    @classmethod
    def reset(cls) -> None:
        """Drop the singleton so the next ConfigLoader() reads a new file."""
        cls._instance = None


__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "DEFAULT_CONFIG_PATH",
    "convert_override",
    "env_key",
]
