import os
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application settings."""
    # Base settings
    DEBUG: bool = False

    # Database settings
    DB_HOST: str = os.getenv("DB_HOST", "localhost")
    DB_PORT: str = os.getenv("DB_PORT", "5432")
    DB_USER: str = os.getenv("DB_USER", "postgres")
    DB_PASSWORD: str = os.getenv("DB_PASSWORD", "postgres")
    DB_NAME: str = os.getenv("DB_NAME", "matchmaking")
    DATABASE_URL: str = os.getenv(
        "DATABASE_URL",
        f"postgresql://{DB_USER}:{DB_PASSWORD}@{DB_HOST}:{DB_PORT}/{DB_NAME}"
    )

    # Matching settings
    MATCH_BATCH_SIZE: int = int(os.getenv("MATCH_BATCH_SIZE", "20"))  # Matches created per onboarding run
    DEFAULT_TIMEZONE: str = os.getenv("DEFAULT_TIMEZONE", "UTC")  # Used to derive "today" for ages

    # Location / geocoding settings
    DISTANCE_UNIT: str = os.getenv("DISTANCE_UNIT", "miles")  # miles | km
    LOCATION_FALLBACK_DISTANCE: float = float(os.getenv("LOCATION_FALLBACK_DISTANCE", "50"))
    GEOCODER_USER_AGENT: str = os.getenv("GEOCODER_USER_AGENT", "match-engine")
    GEOCODER_TIMEOUT: int = int(os.getenv("GEOCODER_TIMEOUT", "30"))
    GEOCODER_CACHE_SIZE: int = int(os.getenv("GEOCODER_CACHE_SIZE", "1024"))  # Localities kept per distance provider

    class Config:
        env_file = ".env"
        case_sensitive = True

# Create settings instance
settings = Settings()
