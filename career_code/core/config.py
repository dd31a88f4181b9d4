"""
Configuration module - loads all env vars using pydantic-settings.
This is the SINGLE SOURCE OF TRUTH for all config values.
"""

from functools import lru_cache
from typing import List, Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # MongoDB
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_db: str = "career-code"

    # Atlas credentials (optional, override mongodb_uri when all are set)
    db_user: Optional[str] = None
    db_pass: Optional[str] = None
    db_cluster_host: Optional[str] = None

    # Session JWT
    jwt_access_secret: str = "change-this-secret"
    jwt_algorithm: str = "HS256"
    jwt_expire_minutes: int = 120

    # Which gate protects the data endpoints: "session" or "firebase"
    auth_strategy: Literal["session", "firebase"] = "session"
    firebase_credentials_path: str = "firebase-admin-key.json"

    # Session cookie
    cookie_name: str = "token"
    cookie_secure: bool = False
    cookie_samesite: Literal["lax", "strict", "none"] = "lax"

    # App
    cors_origins: List[str] = ["http://localhost:5173"]
    use_in_memory_store: bool = False
    log_level: str = "INFO"
    port: int = 3000

    @property
    def mongo_url(self) -> str:
        """Atlas SRV URL when credentials are supplied, plain URI otherwise"""
        if self.db_user and self.db_pass and self.db_cluster_host:
            return (
                f"mongodb+srv://{self.db_user}:{self.db_pass}@{self.db_cluster_host}"
                "/?retryWrites=true&w=majority"
            )
        return self.mongodb_uri

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
