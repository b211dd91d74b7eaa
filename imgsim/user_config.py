"""
User configuration management for Image Similarity.

Supports configuration from multiple sources (in order of priority):
1. Command-line options (highest priority)
2. Environment variables
3. User config file (~/.imgsim/config.json)
4. Default values from config.py (lowest priority)

Example config.json:
{
    "default_workers": 4,
    "default_extensions": ["png", "jpg", "jpeg"],
    "max_image_pixels": 500000000
}
"""

import json
import os
from pathlib import Path
from typing import Any, Optional
import logging

from .config import DEFAULT_WORKERS, DEFAULT_EXTENSIONS, MAX_IMAGE_PIXELS

logger = logging.getLogger(__name__)


class UserConfig:
    """
    Manages user configuration from file and environment variables.

    The config file is read lazily and cached until reload() is called.
    """

    _instance: Optional['UserConfig'] = None
    _config_data: Optional[dict] = None

    def __new__(cls):
        """Singleton pattern to ensure one config instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def config_dir(self) -> Path:
        """Get the configuration directory path."""
        env_dir = os.getenv('IMGSIM_CONFIG_DIR')
        if env_dir:
            return Path(env_dir)

        return Path.home() / '.imgsim'

    @property
    def config_file_path(self) -> Path:
        """Get the configuration file path."""
        return self.config_dir / 'config.json'

    def _load_config_file(self) -> dict:
        """Load configuration from JSON file."""
        if not self.config_file_path.exists():
            return {}

        try:
            with open(self.config_file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
                logger.debug(f"Loaded configuration from {self.config_file_path}")
                return data
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Failed to load config file {self.config_file_path}: {e}")
            return {}

    def _get_config_data(self) -> dict:
        """Get cached config data (lazy loading)."""
        if self._config_data is None:
            self._config_data = self._load_config_file()
        return self._config_data

    def reload(self):
        """Reload configuration from file."""
        self._config_data = None

    def get(self, key: str, default: Any = None, env_var: Optional[str] = None) -> Any:
        """
        Get a configuration value with priority:
        1. Environment variable (if env_var specified)
        2. Config file
        3. Default value

        Environment values are parsed as JSON when possible, so
        IMGSIM_WORKERS=8 yields the integer 8.
        """
        if env_var:
            env_value = os.getenv(env_var)
            if env_value is not None:
                try:
                    return json.loads(env_value)
                except (json.JSONDecodeError, TypeError):
                    return env_value

        config_data = self._get_config_data()
        if key in config_data:
            return config_data[key]

        return default

    @property
    def default_workers(self):
        """
        Number of parallel workers for fingerprinting.

        Returned as configured; values that are not integers are left for
        the caller's validation to reject.
        """
        value = self.get(
            'default_workers',
            default=DEFAULT_WORKERS,
            env_var='IMGSIM_WORKERS'
        )
        try:
            return int(value)
        except (ValueError, TypeError):
            return value

    @property
    def default_extensions(self) -> frozenset:
        """Extensions accepted in directory scans when -e is not given."""
        value = self.get(
            'default_extensions',
            default=DEFAULT_EXTENSIONS,
            env_var='IMGSIM_EXTENSIONS'
        )
        if isinstance(value, str):
            value = value.split(',')
        extensions = frozenset(ext for ext in value if ext)
        return extensions or DEFAULT_EXTENSIONS

    @property
    def max_image_pixels(self) -> int:
        """Maximum image size in pixels (decompression bomb limit)."""
        return int(self.get(
            'max_image_pixels',
            default=MAX_IMAGE_PIXELS,
            env_var='IMGSIM_MAX_PIXELS'
        ))

    def create_example_config(self) -> bool:
        """Create an example configuration file."""
        example_config = {
            "_comment": "Image Similarity User Configuration",
            "default_workers": DEFAULT_WORKERS,
            "default_extensions": sorted(DEFAULT_EXTENSIONS),
            "max_image_pixels": MAX_IMAGE_PIXELS,
        }

        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            with open(self.config_file_path, 'w', encoding='utf-8') as f:
                json.dump(example_config, f, indent=2)
            logger.info(f"Created example config file at {self.config_file_path}")
            return True
        except OSError as e:
            logger.error(f"Failed to create example config: {e}")
            return False


# Global instance
_user_config = UserConfig()


def get_user_config() -> UserConfig:
    """Get the global UserConfig instance."""
    return _user_config
