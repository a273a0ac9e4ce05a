"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = "sqlite:///./eligibility.db"

    # External Services
    credit_bureau_base: str = "http://localhost:8001"

    # Service
    service_name: str = "eligibility-gateway"
    log_level: str = "INFO"

    # HTTP Client
    http_timeout_seconds: float = 5.0

    # Business rules
    minimum_age: int = 18
    minimum_credit_score: int = 500  # Scores must be strictly above this


settings = Settings()
