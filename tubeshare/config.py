# ============================================================================
# FILE: tubeshare/config.py
# ============================================================================
from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    """Application configuration using Pydantic BaseSettings"""
    
    # App settings
    APP_NAME: str = "TubeShare"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    PORT: int = 4000
    
    # Database
    DATABASE_URL: str = "sqlite:///./tubeshare.db"  # Change to PostgreSQL in production
    
    # Security
    SECRET_KEY: str = "your-secret-key-change-this-in-production"
    ALGORITHM: str = "HS256"
    PASSWORD_HASH_ROUNDS: int = 8
    
    # Uploaded videos are written here and served under /public
    UPLOAD_DIR: str = "public"
    
    # CORS
    CORS_ORIGINS: List[str] = ["*"]
    
    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
