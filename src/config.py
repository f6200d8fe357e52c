from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "MetaSnap"
    debug: bool = False
    log_level: str = "INFO"

    # CORS (the browser client's dev server by default)
    cors_origins: list[str] = ["http://localhost:5173"]

    # Fetching
    http_timeout: int = 10
    user_agent: str = "Mozilla/5.0 (compatible; MetaSnapBot/1.0)"


settings = Settings()
