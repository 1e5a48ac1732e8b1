"""
Configuration management for dice-algebra.

Provides centralized configuration loading from environment variables
with sensible defaults for all settings.
"""

import os
from pathlib import Path
from typing import Optional
import logging

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ('true', '1', 'yes')


class Config:
    """
    Centralized configuration management for dice-algebra.

    Loads configuration from environment variables with fallback defaults.
    Supports .env files via python-dotenv.

    Example:
        config = Config()
        print(config.log_level)  # WARNING
        print(config.seed)       # None unless DICE_SEED is set
    """

    def __init__(self, env_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            env_file: Optional path to .env file. If None, loads .env from the
                     current working directory when one exists.
        """
        if env_file:
            load_dotenv(env_file)
            logger.info(f"Loaded configuration from {env_file}")
        else:
            env_path = Path.cwd() / '.env'
            if env_path.exists():
                load_dotenv(env_path)
                logger.info(f"Loaded configuration from {env_path}")
            else:
                logger.debug("No .env file found, using environment variables and defaults")

        # === Logging ===
        self.log_level = os.getenv('DICE_LOG_LEVEL', 'WARNING').upper()
        self.log_colors = _env_flag('DICE_LOG_COLORS', 'True')

        # === Rolling ===
        seed = os.getenv('DICE_SEED', '').strip()
        try:
            self.seed: Optional[int] = int(seed) if seed else None
        except ValueError:
            raise ValueError(f"DICE_SEED must be an integer, got {seed!r}") from None
        self.verbose = _env_flag('DICE_VERBOSE', 'False')

    def validate(self) -> bool:
        """
        Validate configuration and log errors for bad values.

        Returns:
            True if config is valid, False otherwise
        """
        valid = True

        if self.log_level not in LOG_LEVELS:
            logger.error(f"Invalid DICE_LOG_LEVEL: {self.log_level}. Must be one of {', '.join(LOG_LEVELS)}")
            valid = False

        return valid

    def __repr__(self) -> str:
        return (
            f"Config("
            f"log_level={self.log_level}, "
            f"log_colors={self.log_colors}, "
            f"seed={self.seed}, "
            f"verbose={self.verbose})"
        )


# Global config instance (lazy-loaded)
_config: Optional[Config] = None


def get_config() -> Config:
    """
    Get the global config instance (singleton pattern).

    Returns:
        Global Config instance

    Example:
        from dicealgebra.core.config import get_config
        config = get_config()
        print(config.seed)
    """
    global _config
    if _config is None:
        _config = Config()
        _config.validate()
    return _config


__all__ = ['Config', 'get_config']
