"""Application configuration using Pydantic Settings."""

from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fairdice.constants import MIN_KEY_BYTES


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False
    )

    # Game Configuration
    min_dice_sets: int = 3
    reveal_key_bytes: int = 32  # HMAC key length, 256 bits minimum

    # Application
    app_env: str = "dev"
    app_version: str = "1.0.0"
    max_active_sessions: int = 1000

    # CORS
    cors_origins: str = "http://localhost:3000,http://127.0.0.1:3000"

    @field_validator("reveal_key_bytes")
    @classmethod
    def _key_long_enough(cls, v: int) -> int:
        if v < MIN_KEY_BYTES:
            raise ValueError(f"reveal_key_bytes must be at least {MIN_KEY_BYTES}")
        return v

    @field_validator("min_dice_sets", "max_active_sessions")
    @classmethod
    def _positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("must be at least 1")
        return v

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",")]


# Global settings instance
settings = Settings()
