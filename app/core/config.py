"""
Configuration settings for the application
"""

import os
from typing import Dict, List
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application settings"""
    
    # Database
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./attendance_registry.db")
    
    # Registry
    DEPLOYER_PRINCIPAL: str = os.getenv("DEPLOYER_PRINCIPAL", "deployer")
    DEFAULT_BASE_URI: str = "https://attendance.example.com/metadata/"
    MAX_EVENT_NAME_LENGTH: int = 100
    MAX_BASE_URI_LENGTH: int = 256
    
    # Security: bearer token -> principal
    ACCESS_TOKENS: Dict[str, str] = {
        "deployer_token_123": "deployer",
    }
    
    # CORS
    ALLOW_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:5000",
        "http://localhost:8000",
    ]
    
    # Rate limiting
    RATE_LIMIT_PER_MINUTE: int = 30
    
    class Config:
        env_file = ".env"

settings = Settings()
