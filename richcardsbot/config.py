from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Bot Framework registration (empty values disable channel authentication)
    MICROSOFT_APP_ID: str = Field(default="")
    MICROSOFT_APP_PASSWORD: str = Field(default="")

    # HTTP host
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=3978)

    # Conversation behavior
    INTERACTIVE_PROMPT: bool = Field(default=False)
    WELCOME_TEXT: str = Field(default="Bienvenido al bot Catastr!")
    PROMPT_TEXT: str = Field(default="Please select a card:")
    RETRY_PROMPT_TEXT: str = Field(
        default="That was not a valid choice, please select a card or number from 1 to 8."
    )

    # Logging
    LOG_JSON: bool = Field(default=False)
    LOG_LEVEL: str = Field(default="INFO")

    @field_validator("PORT")
    @classmethod
    def _validate_port(cls, v: int) -> int:
        if not 0 < v < 65536:
            raise ValueError("PORT must be between 1 and 65535")
        return v

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _validate_level(cls, v):  # type: ignore[override]
        name = str(v).strip().upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"Unknown log level: {v!r}")
        return name


def load_settings() -> Settings:
    return Settings()
