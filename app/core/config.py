from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # -------------------------
    # App
    # -------------------------
    app_name: str = "Event Status Service"
    api_prefix: str = "/api"
    cors_allow_origins: str = "*"

    # -------------------------
    # Logging
    # -------------------------
    log_level: str = "INFO"
    log_json: bool = True

    # -------------------------
    # Event lookup
    # -------------------------
    # memory | supabase
    event_repository: str = "memory"
    events_seed_path: str | None = None

    # -------------------------
    # Supabase (event_repository=supabase)
    # -------------------------
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    supabase_events_table: str = "events"

    # -------------------------
    # Pydantic v2 config
    # -------------------------
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
