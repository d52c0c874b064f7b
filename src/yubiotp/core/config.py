"""Application configuration using pydantic-settings."""

import logging
import sys

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings can be overridden via environment variables
    prefixed with YUBIOTP_ (e.g., YUBIOTP_LOG_LEVEL).
    """

    log_level: str = "INFO"
    key: str | None = None
    public_id_length: int = 6

    model_config = SettingsConfigDict(env_prefix="YUBIOTP_")

    @property
    def key_bytes(self) -> bytes | None:
        """Secret key decoded from hex, or None if unset."""
        if self.key is None:
            return None
        return bytes.fromhex(self.key)


def setup_logging(level: str = "INFO") -> None:
    """Configure application logging.

    Args:
        level: Log level string (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )
