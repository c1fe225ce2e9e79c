"""
Application configuration settings
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from SALES_ANALYTICS_* environment variables"""

    model_config = SettingsConfigDict(env_prefix="SALES_ANALYTICS_", env_file=".env", extra="ignore")

    LOG_LEVEL: str = "INFO"

    # Report shape
    TOP_PRODUCTS_LIMIT: int = Field(10, ge=1, le=10)

    # Demo data
    SEED_ON_STARTUP: bool = True
    DATASET_PATH: str = ""


settings = Settings()
