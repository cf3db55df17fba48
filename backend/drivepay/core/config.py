"""
Application configuration and environment settings.
"""
from pydantic_settings import BaseSettings
from pydantic import field_validator
from typing import List, Union


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    # Application
    APP_NAME: str = "DrivePay"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    
    # Remote store. Leave empty to run from the local fallback store.
    DATABASE_URL: str = ""
    DB_ECHO: bool = False
    
    # Local fallback store (JSON file of string keys)
    LOCAL_STORE_PATH: str = "drivepay_local.json"
    
    # Display
    CURRENCY_SYMBOL: str = "₹"
    
    # CORS
    CORS_ORIGINS: Union[List[str], str] = ["http://localhost:3000", "http://localhost:5173"]
    
    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS_ORIGINS from comma-separated string or list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v
    
    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        return v.upper() if isinstance(v, str) else v
    
    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
