from __future__ import annotations

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from olc_codec.core.constants import (
    CODE_PRECISION_NORMAL,
    MAX_DIGIT_COUNT,
    PAIR_CODE_LENGTH,
)


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="OLC_",
        case_sensitive=False,
    )

    # Length used by encode() when the caller does not pass one.
    default_code_length: int = CODE_PRECISION_NORMAL

    @field_validator("default_code_length")
    @classmethod
    def _check_code_length(cls, value: int) -> int:
        if value < 2 or value > MAX_DIGIT_COUNT:
            raise ValueError(f"code length must be between 2 and {MAX_DIGIT_COUNT}")
        if value < PAIR_CODE_LENGTH and value % 2 == 1:
            raise ValueError("code lengths below 10 must be even")
        return value


@lru_cache
def get_settings() -> Settings:
    return Settings()
