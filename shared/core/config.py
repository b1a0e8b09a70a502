import os
from typing import List, Optional

from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# Always load .env from root
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(__file__)))
load_dotenv(os.path.join(BASE_DIR, ".env"))


class Settings(BaseSettings):
    PROJECT_NAME: str = "Estate Back Office API"

    # Full URL wins over the individual parts below
    DATABASE_URL: Optional[str] = None

    DB_USER: str = "postgres"
    DB_PASS: str = "postgres"
    DB_HOST: str = "localhost"
    DB_PORT: str = "5432"
    DB_NAME: str = "estate"
    DB_SSLMODE: Optional[str] = None

    LOG_LEVEL: str = "INFO"
    ALLOWED_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    # Dashboard widgets
    RECENT_LIMIT: int = 5
    EXPIRY_LOOKAHEAD_LIMIT: int = 5

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


settings = Settings()


def build_database_url(cfg: Settings = settings) -> str:
    if cfg.DATABASE_URL:
        return cfg.DATABASE_URL

    url = (
        f"postgresql+psycopg2://{cfg.DB_USER}:{cfg.DB_PASS}@{cfg.DB_HOST}:{cfg.DB_PORT}/{cfg.DB_NAME}"
    )
    if cfg.DB_SSLMODE:
        url += f"?sslmode={cfg.DB_SSLMODE}"
    return url


ESTATE_DATABASE_URL = build_database_url()
