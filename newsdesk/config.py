from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "Newsdesk CMS"
    VERSION: str = "0.1.0"

    HOST: str = "0.0.0.0"
    PORT: int = 4000
    LOG_LEVEL: str = "INFO"

    # Storage paths
    DATA_FILE: str = "data.json"
    UPLOAD_DIR: str = "uploads"

    CORS_ORIGINS: List[str] = [
        "https://www.timesnowindia24.live",
        "https://timesnowindiaadmin-main.vercel.app",
    ]

    # Media host
    CLOUDINARY_CLOUD_NAME: str = ""
    CLOUDINARY_API_KEY: str = ""
    CLOUDINARY_API_SECRET: str = ""
    CLOUDINARY_API_URL: str = "https://api.cloudinary.com/v1_1"
    UPLOAD_TIMEOUT_SECONDS: float = 60.0

    # Activity feed
    ACTIVITY_LOG_LIMIT: int = 50
    ACTIVITY_ACTOR: str = "Admin User"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
