from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="SIMPLE_TAGS_",
        extra="ignore",
        case_sensitive=False,
    )

    log_level: str = "INFO"

    # Tag field and its delimited string view
    tag_field: str = "tags"
    tag_delimiter: str = ","
    tag_separator: str = ", "

    # Store reads
    page_size: int = 1000

    # Supabase
    supabase_url: str | None = None
    supabase_key: str | None = None


settings = Settings()
