from functools import lru_cache
from typing import Annotated, Literal

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

DEFAULT_OLLAMA_API_URL = "http://localhost:11434"
DEFAULT_OLLAMA_MODEL = "llava"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        extra="ignore",
        validate_by_name=True,
        populate_by_name=True,
    )

    ollama_api_url: str = Field(
        default=DEFAULT_OLLAMA_API_URL,
        validation_alias=AliasChoices("OLLAMA_API_URL", "OLLAMA_URL"),
    )
    ollama_model: str = DEFAULT_OLLAMA_MODEL
    ollama_timeout_seconds: float = 60.0

    ai_alttext_provider: Literal["ollama", "mock"] = "ollama"
    ai_temperature: float = 0.7
    ai_max_tokens: int = 200
    ai_debug_log_raw: bool = False

    log_level: str = "INFO"
    expose_error_details: bool = False
    docs_enabled: bool = True

    host: str = "127.0.0.1"
    port: int = 8000

    cors_allow_origins: Annotated[list[str], NoDecode] = Field(default_factory=list)

    @field_validator("cors_allow_origins", mode="before")
    @classmethod
    def _split_csv(cls, value):
        if value is None:
            return []
        if isinstance(value, str):
            if value.strip() == "":
                return []
            return [item.strip() for item in value.split(",") if item.strip()]
        return value

    @field_validator("ollama_api_url", mode="after")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.strip().rstrip("/") or DEFAULT_OLLAMA_API_URL

    @field_validator("ai_alttext_provider", mode="before")
    @classmethod
    def _normalize_provider(cls, value):
        if isinstance(value, str):
            return value.lower().strip()
        return value


@lru_cache
def get_settings() -> Settings:
    return Settings()
