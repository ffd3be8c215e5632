# config.py
"""
Application configuration.

Settings are read once from the environment (and a local .env file) and
injected where needed through ``get_settings``.

Usage:
     from config import get_settings

     settings = get_settings()
     settings.database_url
"""
from functools import lru_cache
from typing import Optional
from urllib.parse import quote_plus

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
     """Process-wide settings loaded from environment variables."""

     model_config = SettingsConfigDict(env_file=".env", extra="ignore")

     APP_NAME: str = "API: LM Alugueis"

     # JWT
     JWT_SECRET: str = Field(default="dev-secret-change-me")
     JWT_ALGORITHM: str = "HS256"
     JWT_EXPIRE_MINUTES: int = 60

     # Database
     DATABASE_URL: Optional[str] = None
     DB_SERVER: Optional[str] = None
     DB_PORT: str = "1433"
     DB_USER: Optional[str] = None
     DB_PASS: Optional[str] = None
     DB_NAME: Optional[str] = None
     SQL_ECHO: bool = False

     # Security
     BCRYPT_ROUNDS: int = 12
     EXPOSE_ERROR_DETAILS: bool = False

     # Runtime
     LOG_LEVEL: str = "INFO"
     PORT: int = 3000
     FEATURED_LIMIT: int = 6

     @property
     def database_url(self) -> str:
          """
          Resolve the SQLAlchemy URL.

          DATABASE_URL wins; otherwise an MS SQL Server URL is built from the
          DB_* variables; otherwise a local SQLite file is used.
          """
          if self.DATABASE_URL:
               return self.DATABASE_URL
          if self.DB_SERVER:
               safe_user = quote_plus(self.DB_USER or "")
               safe_pass = quote_plus(self.DB_PASS or "")
               return (
                    f"mssql+pymssql://{safe_user}:{safe_pass}"
                    f"@{self.DB_SERVER}:{self.DB_PORT}/{self.DB_NAME}"
               )
          return "sqlite:///./lm_alugueis.db"


@lru_cache
def get_settings() -> Settings:
     """Build the settings once per process."""
     return Settings()
