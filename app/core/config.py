"""
Configuration module - loads all env vars using pydantic-settings.
This is the SINGLE SOURCE OF TRUTH for all config values.
"""

import os
from functools import lru_cache
from typing import List

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # MongoDB
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_db: str = "portfolio"

    # JWT Auth
    jwt_secret: str = "change-this-secret"
    jwt_algorithm: str = "HS256"
    jwt_expire_minutes: int = 60 * 24

    # App
    environment: str = "development"
    port: int = 5000
    client_url: str = "http://localhost:3000"
    trust_proxy: bool = True
    rate_limit_enabled: bool = True
    log_level: str = "INFO"

    # Uploaded files live under <public_dir>/images and <public_dir>/cv
    public_dir: str = os.path.join(
        os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))),
        "public",
    )

    # Optional SMTP notifications for contact messages and feedback
    email_host: str = "smtp.gmail.com"
    email_port: int = 587
    email_user: str = ""
    email_pass: str = ""
    email_from: str = ""

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"

    @property
    def allowed_origins(self) -> List[str]:
        """CLIENT_URL split on commas"""
        return [url.strip() for url in self.client_url.split(",") if url.strip()]

    @property
    def images_dir(self) -> str:
        return os.path.join(self.public_dir, "images")

    @property
    def cv_dir(self) -> str:
        return os.path.join(self.public_dir, "cv")

    @property
    def email_configured(self) -> bool:
        return bool(self.email_user and self.email_pass)

    @model_validator(mode="after")
    def check_production_secrets(self):
        if self.is_production:
            if not self.mongodb_uri:
                raise ValueError("MONGODB_URI must be set in production")
            if len(self.jwt_secret) < 32:
                raise ValueError("JWT_SECRET must be at least 32 characters long in production")
        return self

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
