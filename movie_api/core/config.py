"""Application configuration loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    tmdb_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("TMDB_API_KEY", "API_key"),
    )
    tmdb_base_url: str = Field(default="https://api.themoviedb.org/3", alias="TMDB_BASE_URL")
    tmdb_language: str = Field(default="es-ES", alias="TMDB_LANGUAGE")
    tmdb_image_base: str = Field(default="https://image.tmdb.org/t/p/w500", alias="TMDB_IMAGE_BASE")
    tmdb_timeout: float = Field(default=10.0, alias="TMDB_TIMEOUT")
    poster_placeholder_url: str = Field(
        default="https://via.placeholder.com/500x750?text=No+Image",
        alias="POSTER_PLACEHOLDER_URL",
    )
    listing_target: int = Field(default=50, ge=1, alias="LISTING_TARGET")
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=3000, alias="PORT")
    cors_origins: Annotated[list[str], NoDecode] = Field(default=["*"], alias="CORS_ORIGINS")
    static_dir: str = Field(default="public", alias="STATIC_DIR")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        populate_by_name=True,
        extra="ignore",
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _split_origins(cls, value):
        # CORS_ORIGINS=https://a.example,https://b.example
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()
