"""Library settings loaded from environment."""

from collections.abc import Sequence
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

U32_MAX = 2**32 - 1
U64_MAX = 2**64 - 1

PAGE_SIZE_CHOICES: Sequence[int] = (5, 10, 15, 20, 50)
FALLBACK_PAGE_SIZE = 20

# Upper bound applied when a caller passes no max page size of its own.
DEFAULT_MAX_PAGE_SIZE = 100


class Settings(BaseSettings):
    """Deployment-wide paging settings."""

    model_config = SettingsConfigDict(
        env_prefix="PAGING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    default_page_size: int = FALLBACK_PAGE_SIZE

    @field_validator("default_page_size", mode="before")
    @classmethod
    def normalize_default_page_size(cls, value: object) -> object:
        """Accept padded env strings and unset values."""
        if value is None:
            return FALLBACK_PAGE_SIZE
        if isinstance(value, str):
            value = value.strip()
            return int(value) if value else FALLBACK_PAGE_SIZE
        return value

    @field_validator("default_page_size")
    @classmethod
    def validate_default_page_size(cls, value: int) -> int:
        """Only one of the supported page sizes may be selected."""
        if value not in PAGE_SIZE_CHOICES:
            choices = ", ".join(str(choice) for choice in PAGE_SIZE_CHOICES)
            raise ValueError(f"PAGING_DEFAULT_PAGE_SIZE must be one of: {choices}")
        return value


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
