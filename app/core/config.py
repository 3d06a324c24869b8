from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List

class Settings(BaseSettings):
    PROJECT_NAME: str = "Page Text Analyzer"
    VERSION: str = "1.0.0"
    API_PREFIX: str = "/api"

    # CORS
    CORS_ORIGINS: List[str] = ["*"]

    # Page fetching
    FETCH_USER_AGENT: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
    )
    FETCH_TIMEOUT: float = 15.0

    # Compressor input cap (characters)
    MAX_TEXT_LENGTH: int = 100_000

    # Logging
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
