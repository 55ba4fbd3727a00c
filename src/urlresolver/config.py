"""
Configuration module for the URL resolution system.

Configuration is read from a YAML file (``config.yaml`` by default) and merged
over built-in defaults, so a partial file only needs the keys it changes.
"""
import copy
import logging
import os
import sys
from typing import Dict, Any, Optional

import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "URLRESOLVER_CONFIG_PATH"

DEFAULT_CONFIG: Dict[str, Any] = {
    "asset_root": "assets",
    "url_resolver": {
        "type": "IndexedFileUrlResolver",
        "strategies": {
            "IndexedFileUrlResolver": {
                "config_file": "configurations/IndexedFileUrlResolverConfig.json"
            }
        }
    }
}


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge ``override`` into a copy of ``base``."""
    result = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = _merge(result[key], value)
        else:
            result[key] = value
    return result


class Config:
    """Configuration for URL resolvers."""

    def __init__(self, config_path: Optional[str] = None, overrides: Optional[Dict[str, Any]] = None):
        """
        Load configuration.

        Args:
            config_path: Path to a YAML configuration file. Defaults are used
                when it is not given or does not exist.
            overrides: Extra configuration merged over the file contents

        Raises:
            ValueError: If the file does not contain a YAML mapping
        """
        self.config_path = config_path
        self.config = copy.deepcopy(DEFAULT_CONFIG)

        if config_path and os.path.exists(config_path):
            logger.debug(f"Loading configuration from {config_path}")
            with open(config_path, 'r', encoding='utf-8') as f:
                loaded = yaml.safe_load(f) or {}
            if not isinstance(loaded, dict):
                raise ValueError(f"Configuration file {config_path} must contain a mapping")
            self.config = _merge(self.config, loaded)
        elif config_path:
            logger.warning(f"Config file not found: {config_path}, using defaults")

        if overrides:
            self.config = _merge(self.config, overrides)

        # Relative asset roots are resolved against the config file location
        asset_root = self.config.get("asset_root", "assets")
        if config_path and not os.path.isabs(asset_root):
            asset_root = os.path.join(os.path.dirname(os.path.abspath(config_path)), asset_root)
        self.asset_root = asset_root

    @classmethod
    def from_env(cls) -> "Config":
        """
        Load configuration from the path named by ``URLRESOLVER_CONFIG_PATH``.

        A ``.env`` file in the working directory is loaded first.
        """
        load_dotenv()
        return cls(os.environ.get(CONFIG_PATH_ENV, 'config.yaml'))

    def get(self, key: str, default: Any = None) -> Any:
        """
        Look up a configuration value by dotted path.

        Args:
            key: Dotted key, e.g. ``"url_resolver.type"``
            default: Value returned when the key is missing

        Returns:
            Configuration value or default
        """
        value: Any = self.config
        for part in key.split("."):
            if not isinstance(value, dict) or part not in value:
                return default
            value = value[part]
        return value

    def get_strategy_name(self) -> str:
        """Get the configured URL resolver strategy name."""
        return self.get("url_resolver.type", "IndexedFileUrlResolver")

    def get_strategy_config(self, strategy_name: str) -> Dict[str, Any]:
        """Get the configuration section of one strategy."""
        return self.get(f"url_resolver.strategies.{strategy_name}", {}) or {}


def configure_logging(log_level: str = "INFO") -> logging.Logger:
    """
    Configure logging for applications using the resolver.

    Args:
        log_level: Logging level name

    Returns:
        Package logger
    """
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )
    return logging.getLogger("urlresolver")
