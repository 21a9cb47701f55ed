"""
Global Configuration for the Server Time service
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Global Base settings for the Server Time API
    """
    # App Configuration
    APP_ENV: str = "development"
    APP_HOST: str = "0.0.0.0"
    APP_PORT: int = 80

    # Logging
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

settings = Settings()
