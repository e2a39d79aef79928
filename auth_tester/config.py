from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Remote auth API
    API_BASE_URL: str = "http://localhost:5000/api"
    REQUEST_TIMEOUT: Optional[float] = None  # None blocks until the server answers

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_FILE: Optional[str] = None

    @field_validator("API_BASE_URL")
    @classmethod
    def strip_trailing_slash(cls, v):
        return v.rstrip("/")

    @field_validator("REQUEST_TIMEOUT", mode="before")
    @classmethod
    def empty_timeout_is_none(cls, v):
        # Remove comments and whitespace
        if isinstance(v, str):
            v = v.split('#')[0].strip()
            if not v:
                return None
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, v):
        return v.strip().upper()


settings = Settings()
