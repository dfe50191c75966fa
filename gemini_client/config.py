from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Credentials
    gemini_api_key: str = ""

    # API endpoint
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"

    # Timeouts (seconds)
    request_timeout: float = 300.0


settings = Settings()
