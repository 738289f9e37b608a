# backend/config.py
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve absolute path to the .env file for reliable loading
env_path = Path(__file__).parent.parent / ".env"


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./database_store.db"

    # Every router is mounted under this prefix
    API_PREFIX: str = "/api"
    PORT: int = 5000

    # Insert the sample catalogue and customers into empty tables at startup
    SEED_SAMPLE_DATA: bool = True
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=str(env_path), extra="ignore")


settings = Settings()
