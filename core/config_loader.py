from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    DATABASE_URL: str = "postgresql+psycopg://localhost/openings"
    SECRET_KEY: str = "dev-secret-key-change-me-in-production"
    JWT_ALGORITHM: str = "HS256"
    # None means tokens never expire
    ACCESS_TOKEN_EXPIRE_MINUTES: Optional[int] = None
    BACKEND_CORS_ORIGINS: List[str] = []
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
