# backend/northwind/core/config.py

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_NAME: str = "Northwind API"
    APP_ENV: str = "dev"

    DATABASE_URL: str = "sqlite:///./northwind.db"
    AUTO_CREATE_SCHEMA: bool = True

    # ---------- JWT ----------
    JWT_SECRET_KEY: str = "dev-secret-change-me"
    JWT_ALGORITHM: str = "HS256"
    # refresh tokens live twice as long
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    JWT_AUDIENCE: str = "northwind-api"
    JWT_ISSUER: str = "northwind-api"

    # ---------- CORS ----------
    # Example: CORS_ORIGINS="https://northwind.example.com,http://localhost:3000"
    CORS_ORIGINS: str = ""
    FRONTEND_URL: str = "http://localhost:3000"

    # ---------- Logging ----------
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    # ---------- Bootstrap admin ----------
    ADMIN_USERNAME: str = "admin"
    ADMIN_PASSWORD: Optional[str] = None

    def allowed_origins(self) -> list[str]:
        cors_env = self.CORS_ORIGINS.strip()
        if cors_env:
            return [o.strip() for o in cors_env.split(",") if o.strip()]
        return list({self.FRONTEND_URL.strip(), "http://localhost:3000"})


@lru_cache
def get_settings() -> Settings:
    """Cached settings loader (once per process)."""
    return Settings()
