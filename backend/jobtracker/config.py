from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False
    )
    
    # Database
    database_url: str = "sqlite+aiosqlite:///./jobtracker.db"
    
    # Session check (unset = dev mode, every request passes)
    access_token: Optional[str] = None
    
    # Bullet generation
    gemini_api_key: Optional[str] = None
    gemini_model: str = "gemini-2.5-flash"
    gemini_timeout_seconds: int = 30
    
    # App
    debug: bool = False
    allowed_origins: str = ""


settings = Settings()
