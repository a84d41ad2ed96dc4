"""Application configuration via environment variables."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings loaded from .env or environment."""

    SUPABASE_URL: str = ""
    SUPABASE_SERVICE_ROLE_KEY: str = ""
    RSVP_ADMIN_TOKEN: str = ""
    APP_ENV: str = "development"
    STORE_TIMEOUT_SECONDS: float = 10.0
    EVENT_TIMEZONE: str = "America/New_York"

    COUPLE_NAMES: str = "Ashley & Brandon"
    EVENT_DATE_LABEL: str = "Saturday, September 26, 2026"
    EVENT_TIME_LABEL: str = "3:00 PM – 8:00 PM"
    VENUE_NAME: str = "Tewksbury Lodge"
    VENUE_ADDRESS: str = "249 Ohio St, Buffalo, NY 14204"
    GALLERY_PHOTO_COUNT: int = 14

    CORS_ORIGINS: str = "http://localhost:3000"
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

    @property
    def store_configured(self) -> bool:
        return bool(self.SUPABASE_URL and self.SUPABASE_SERVICE_ROLE_KEY)

    @property
    def is_production(self) -> bool:
        return self.APP_ENV.strip().lower() == "production"


settings = Settings()
