"""
Chat Learning Service Configuration
"""

from pathlib import Path
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # ===== Service =====
    SERVICE_NAME: str = Field(default="chatlearn")
    SERVICE_VERSION: str = Field(default="1.0.0")
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=8000)
    LOG_LEVEL: str = Field(default="info")
    DEBUG: bool = Field(default=False)

    # ===== CORS =====
    CORS_ORIGINS: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:8080"]
    )

    # ===== Storage =====
    # File names match the documents the original bot wrote
    DATA_DIR: str = Field(default="./data")
    MESSAGES_FILE: str = Field(default="data.json")
    CONVERSATIONS_FILE: str = Field(default="conversations.json")
    RATINGS_FILE: str = Field(default="ratingsData.json")
    MARKOV_FILE: str = Field(default="markovData.json")

    # ===== Generation =====
    PREFIX_TOKENS: int = Field(default=3, ge=0)
    MAX_OUTPUT_TOKENS: int = Field(default=50, ge=1)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def data_path(self) -> Path:
        return Path(self.DATA_DIR)


settings = Settings()
