from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    AVAILABILITY_BASE_URL: str | None = None
    AVAILABILITY_API_KEY: str | None = None
    AVAILABILITY_TIMEOUT_SECONDS: float = 10.0

    BOOKING_WINDOW_MONTHS: int = 3

    DOT_COLOR_PRIMARY: str = "#2196F3"
    DOT_COLOR_WARNING: str = "#FFC107"


settings = Settings()
