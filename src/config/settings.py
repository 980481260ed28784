from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    # Application
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # FastAPI
    PORT: int = 8000
    # Comma separated, e.g. "http://localhost:3000,https://example.org"
    CORS_ALLOW_ORIGINS: str = "*"

    # Waitlist
    WAITLIST_STORE: str = "postgres"  # postgres | memory
    WAITLIST_ERROR_REASONS: bool = False
    STORE_TIMEOUT_SECONDS: float = 5.0

    # Database settings
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = ""
    POSTGRES_DB: str = "waitlist"
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "allow"

    @property
    def cors_allow_origins(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ALLOW_ORIGINS.split(",") if origin.strip()]


settings = Settings()
