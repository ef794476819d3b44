from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from dtk.mapping.errors import InvalidReferenceKindError
from dtk.mapping.models import ReferenceKind


class Settings(BaseSettings):
    """Project-wide settings sourced from .env and DTK_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DTK_",
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # used by map files that leave the kinds out
    default_source_kind: ReferenceKind = ReferenceKind.ARRAY
    default_destination_kind: ReferenceKind = ReferenceKind.ARRAY

    log_level: str = "WARNING"

    @field_validator("default_source_kind", "default_destination_kind", mode="before")
    @classmethod
    def _coerce_kind(cls, value):
        try:
            return ReferenceKind.coerce(value)
        except InvalidReferenceKindError as exc:
            raise ValueError(exc.message) from exc

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings()
