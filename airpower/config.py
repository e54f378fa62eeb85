"""Engine configuration with validation."""
from typing import Optional, Literal
from functools import lru_cache
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings read from the environment or a ``.env`` file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "Air-Power Mastery Engine"
    APP_VERSION: str = "1.0.0"
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "json"

    # Fleet composition
    MAX_FLEET_SIZE: int = Field(default=12, ge=1, le=24)

    # Aircraft defaults
    DEFAULT_PROFICIENCY: int = Field(default=7, ge=0, le=7)

    # Which layer applies the high-altitude revision when a fleet is scored
    HIGH_ALTITUDE_LAYER: Literal["fleet", "ship", "both"] = "fleet"

    # Template configuration files
    AIRCRAFT_TEMPLATES_PATH: Optional[str] = None
    SHIP_TEMPLATES_PATH: Optional[str] = None

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            return v.upper()
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
