from __future__ import annotations

"""backend/app/config/settings.py

Application configuration using environment-driven settings.

This module centralizes:
- CORS configuration
- default locale for user-facing error messages
- logging level and performance report logging
- whether raw technical error details are exposed to clients
- Statsig server secret for backend metrics events
"""
from functools import lru_cache
from typing import List

from pydantic import AnyHttpUrl
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
  app_name: str = "scriptgen-backend"
  environment: str = "development"

  # CORS
  allowed_origins: List[AnyHttpUrl] = [
      "http://localhost:3000",
      "http://127.0.0.1:3000",
      "http://localhost:5173",
      "http://127.0.0.1:5173",
  ]

  # Locale used when a request does not carry one
  default_locale: str = "en"

  # Logging
  log_level: str = "INFO"
  log_performance_reports: bool = True

  # None means "only in development"
  expose_technical_errors: bool | None = None

  # Metrics
  statsig_server_secret: str | None = None

  model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

  @property
  def show_technical_errors(self) -> bool:
    if self.expose_technical_errors is not None:
      return self.expose_technical_errors
    return self.environment == "development"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
  """Return a cached Settings instance."""
  return Settings()
