from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Loads all environment variables into a single, accessible object."""
    model_config = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8', extra='ignore')

    GEMINI_API_KEY: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("GEMINI_API_KEY", "API_KEY"),
    )
    GEMINI_MODEL: str = "gemini-3-pro-preview"
    GEMINI_BASE_URL: str = "https://generativelanguage.googleapis.com"

    HISTORY_DIR: str = ".veritas"
    LOG_LEVEL: str = "INFO"

    @property
    def GEMINI_ENDPOINT(self) -> str:
        return f"{self.GEMINI_BASE_URL}/v1beta/models/{self.GEMINI_MODEL}:generateContent"
