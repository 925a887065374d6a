"""
Settings for a run: the packaged config.yaml, with logging overridable from the environment.
"""

import os
import yaml
from pathlib import Path
from typing import Dict, Any

DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.yaml"

# env var -> nested key; endpoint settings are deliberately absent
ENV_OVERRIDES = {
    'HOBBYFETCH_LOG_LEVEL': ('logging', 'level'),
}


class Config:
    """Read-only view over config.yaml after environment overrides."""

    def __init__(self, config_path: str = None):
        self.config_path = Path(config_path or DEFAULT_CONFIG_PATH)
        self._config = self._load()

    def _load(self) -> Dict[str, Any]:
        try:
            with open(self.config_path, 'r') as f:
                settings = yaml.safe_load(f) or {}
        except FileNotFoundError:
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in configuration file: {e}")

        for env_var, (section, key) in ENV_OVERRIDES.items():
            value = os.getenv(env_var)
            if value is not None:
                # kept as the raw string, setup_logging resolves names and numbers
                settings.setdefault(section, {})[key] = value
        return settings

    def get(self, *keys, default=None):
        """Walk nested sections, e.g. get('endpoint', 'url'); default if any key is missing."""
        current = self._config
        for key in keys:
            if not isinstance(current, dict) or key not in current:
                return default
            current = current[key]
        return current

    @property
    def endpoint(self) -> Dict[str, Any]:
        return self.get('endpoint', default={})

    @property
    def logging(self) -> Dict[str, Any]:
        return self.get('logging', default={})
