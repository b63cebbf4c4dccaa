"""Application settings loaded from environment variables."""

import logging

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application configuration from environment variables."""

    default_resident_eligible: bool = True
    log_level: str = "INFO"

    @property
    def log_level_number(self) -> int:
        """Return the numeric logging level, falling back to INFO for unknown names."""
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.INFO

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
