from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    SQUARE_ACCESS_TOKEN: str | None = None
    SQUARE_LOCATION_ID: str | None = None
    # "production" or "sandbox"; detected from the token when unset
    SQUARE_ENVIRONMENT: str | None = None
    SQUARE_API_VERSION: str = "2024-10-17"
    SQUARE_CATALOG_DEBUG: bool = False
    SQUARE_MAX_PAGES: int = 100

    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    MONGO_URI: str = "mongodb://localhost:27017"
    MONGO_DB: str = "cafe"

    ADMIN_API_KEY: str | None = None

    class Config:
        env_file = ".env"

settings = Settings()


def is_square_configured() -> bool:
    return bool(settings.SQUARE_ACCESS_TOKEN and settings.SQUARE_LOCATION_ID)
