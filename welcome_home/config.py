"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "welcome-home"
    log_level: str = "INFO"

    # Form defaults
    default_lease_months: int = 6
    fee_id_prefix: str = "fee_"


settings = Settings()
