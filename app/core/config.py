"""Application configuration via pydantic-settings.

Loads all settings from environment variables with sensible defaults.
A global `settings` singleton is available for import throughout the app.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Alert headers are emitted as X-<APP_NAME>-alert / -params / -error
    APP_NAME: str = "candidatApp"

    # Persistence: "memory" or "supabase"
    STORE_BACKEND: str = "memory"

    # Supabase
    SUPABASE_URL: str = ""
    SUPABASE_KEY: str = ""
    CANDIDAT_TABLE: str = "candidats"

    # CORS
    ALLOWED_ORIGINS: str = "*"

    # Logging
    LOG_LEVEL: str = "INFO"


settings = Settings()
