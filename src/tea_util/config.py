"""
Configuration management for tea-util.
"""

import logging
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="TEA_UTIL_")

    debug: bool = False
    log_level: str = "INFO"

    core_version: str = "0.01"
    tea_dsl_version: str = "1"

    def setup_logging(self) -> None:
        """Configure logging for the package."""
        level_name = "DEBUG" if self.debug else self.log_level.upper()
        level = getattr(logging, level_name, logging.INFO)

        logger = logging.getLogger("tea_util")
        logger.setLevel(level)

        if not logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            )
            handler.setFormatter(formatter)
            logger.addHandler(handler)


@lru_cache
def get_settings() -> Settings:
    return Settings()


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name."""
    return logging.getLogger(f"tea_util.{name}")
