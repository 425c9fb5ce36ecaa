"""
Application Configuration
"""
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings"""

    # Application
    app_name: str = "HRD Management API"
    app_version: str = "1.0.0"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    # Authentication
    secret_key: str
    access_token_expire_minutes: int = 60
    algorithm: str = "HS256"

    # Database
    # MySQL: mysql+mysqlconnector://root:@localhost:3306/hrd
    database_url: str = "sqlite:///./data/hrd.db"
    seed_dummy_data: bool = False

    class Config:
        env_file = ".env"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
