# File: storefront/core/config.py

import os
from functools import lru_cache
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Values in a local .env never override variables already set in the process.
load_dotenv()


def _env(name: str, default: str):
    return lambda: os.getenv(name, default)


class Settings(BaseModel):
    # Basic app info
    PROJECT_NAME: str = "Storefront API"
    VERSION: str = "1.0.0"

    # Server
    host: str = Field(default_factory=_env("HOST", "0.0.0.0"))
    port: int = Field(
        default_factory=_env("PORT", "3000"),
        validate_default=True,
        ge=1,
        le=65535,
    )
    debug: bool = Field(default_factory=_env("DEBUG", "false"), validate_default=True)
    log_level: str = Field(default_factory=_env("LOG_LEVEL", "INFO"))

    # CORS
    cors_origins: List[str] = Field(
        default_factory=_env("CORS_ORIGINS", "*"),
        validate_default=True,
    )

    # Database
    database_url: str = Field(
        default_factory=_env("DATABASE_URL", "sqlite:///./storefront.db")
    )

    # Security
    bcrypt_rounds: int = Field(
        default_factory=_env("BCRYPT_ROUNDS", "12"),
        validate_default=True,
        ge=4,
        le=31,
    )

    @field_validator("port", mode="before")
    @classmethod
    def parse_port(cls, v):
        # Only plain digits, so "3000.5" or "80abc" are rejected.
        if isinstance(v, str):
            v = v.strip()
            if not v.isdigit():
                raise ValueError(f"PORT must be a number, got {v!r}")
        return v

    @field_validator("cors_origins", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v):
        if isinstance(v, str):
            return [i.strip() for i in v.split(",") if i.strip()]
        if isinstance(v, list):
            return v
        return []


@lru_cache
def get_settings() -> Settings:
    return Settings()
