from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    BUSINESS_NAME: str = "Clinix Booking"
    BUSINESS_TAGLINE: str = "Schedule your appointment in just a few clicks"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    ADMIN_USERNAME: str = "admin@example.com"
    ADMIN_PASSWORD: str = "admin123"
    ADMIN_NAME: str = "Admin User"
    ADMIN_ROLE: str = "admin"
    AUTH_TOKEN_VALUE: str = "mock-jwt-token"
    LOGIN_DELAY_MS: int = 800

    STORAGE_PROVIDER: str = "memory"  # "memory" | "json"
    STORAGE_DIR: str = "./data/storage"

    OPENING_HOUR: int = 9
    CLOSING_HOUR: int = 17
    SLOT_INTERVAL_MINUTES: int = 60
    BOOKING_DAYS_AHEAD: int = 7
    BOOKING_SESSION_TTL_MINUTES: int = 60
    BOOKING_SESSION_LIMIT: int = 1000
    SEED_MOCK_DATA: bool = True


settings = Settings()
