"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    app_timezone: str = Field(
        default="UTC",
        description="Timezone naive database timestamps are expressed in",
    )
    activity_item_max: int = Field(
        default=25,
        description="Default number of rows fetched from each activity source",
        gt=0,
    )
    activity_language: str = Field(
        default="en",
        description="Language used to compose activity summaries",
        min_length=2,
    )
    site_url: str | None = Field(
        default=None,
        description="Base URL of the wiki; when set summaries contain HTML links",
    )
    article_path: str = Field(
        default="/wiki/{title}",
        description="Path appended to SITE_URL to reach a page, must contain {title}",
    )

    @model_validator(mode="after")
    def _validate_article_path(self) -> "Settings":
        if "{title}" not in self.article_path:
            raise ValueError("ARTICLE_PATH must contain the {title} placeholder")
        if self.site_url is not None and not self.site_url.strip():
            self.site_url = None
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
