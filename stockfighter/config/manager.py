# stockfighter/config/manager.py
import os
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml
from dotenv import load_dotenv

from stockfighter.logger import logger
from .constants import CONFIG_SPECS
from .settings import ENV_PREFIX, CONFIG_PATH_ENV, DEFAULT_CONFIG_PATH

CONFIG_SECTION = "stockfighter"


def load_config_file(path: Path) -> dict:
    """Read the `stockfighter:` section of a YAML config file."""
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        return {}

    section = data.get(CONFIG_SECTION, {}) if isinstance(data, dict) else {}
    if not isinstance(section, dict):
        logger.warning(f"Ignoring malformed '{CONFIG_SECTION}' section in {path}")
        return {}
    return section


class ConfigManager:
    """
    Resolves client settings from the environment, then an optional YAML
    file, then the ConfigSpec default.

    Environment variables are named STOCKFIGHTER_<KEY> (e.g.
    STOCKFIGHTER_API_KEY); a spec may list extra aliases.
    """

    def __init__(
        self,
        env: Optional[Mapping[str, str]] = None,
        config_path: Optional[Path] = None,
        load_env_file: bool = True
    ):
        if env is None:
            if load_env_file:
                load_dotenv()
            env = os.environ
        self.env = env

        if config_path is None:
            config_path = Path(env.get(CONFIG_PATH_ENV) or DEFAULT_CONFIG_PATH)
        self.config_path = Path(config_path)
        self._file_values = load_config_file(self.config_path)

        self._specs = CONFIG_SPECS
        self._cache = {}

    def _raw_value(self, key: str) -> Optional[Any]:
        spec = self._specs[key]
        for name in (f"{ENV_PREFIX}{key.upper()}",) + spec.aliases:
            value = self.env.get(name)
            if value not in (None, ""):
                return value
        return self._file_values.get(key)

    def get(self, key: str) -> Any:
        """Get validated config value"""
        if key not in self._specs:
            logger.error(f"Attempted to access unknown config key: {key}")
            raise KeyError(f"Unknown config key: {key}")

        if key in self._cache:
            return self._cache[key]

        self._cache[key] = self._specs[key].validate(self._raw_value(key))
        return self._cache[key]

    def require(self, key: str) -> Any:
        """Like get() but an empty value is an error"""
        value = self.get(key)
        if value in (None, ""):
            raise ValueError(
                f"Config '{key}' is not set (env {ENV_PREFIX}{key.upper()} "
                f"or '{key}' in {self.config_path})"
            )
        return value

    def get_all(self) -> dict:
        """Get all validated config values"""
        return {key: self.get(key) for key in self._specs.keys()}
