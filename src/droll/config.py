"""Settings loader for droll."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from droll.rules.types import DEFAULT_MAX_DICE


class Settings(BaseSettings):
    # --- Rolling ---
    max_dice: int | None = Field(
        default=DEFAULT_MAX_DICE,
        description="Most dice one command may roll across all terms; None disables the cap.",
    )

    # --- Logging ---
    # Per-handler level: INFO|DEBUG|WARNING|ERROR|CRITICAL|NONE.
    # Falls back to logging_level when unset.
    logging_level: str = "WARNING"
    logging_console: str | None = None

    model_config = SettingsConfigDict(
        env_prefix="DROLL_",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("max_dice")
    @classmethod
    def _positive_ceiling(cls, v: int | None) -> int | None:
        if v is not None and v < 1:
            raise ValueError("max_dice must be at least 1")
        return v

    @field_validator("logging_level", "logging_console")
    @classmethod
    def _upper_level(cls, v: str | None) -> str | None:
        return v.upper() if isinstance(v, str) else v


def load_settings(**overrides) -> Settings:
    return Settings(**overrides)
