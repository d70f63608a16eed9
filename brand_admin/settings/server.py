"""
Server configuration settings.

This module contains all server-related configuration including
uvicorn host/port settings and the CORS headers attached by proxy routes.
"""

from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class ServerConfig(BaseSettings):
    """
    Server configuration for the FastAPI application.

    Contains settings for host, port, workers and the permissive CORS
    headers returned by every proxy route.
    """

    # Server settings
    HOST: str = Field(
        default="0.0.0.0",
        description="Server host address",
    )
    PORT: int = Field(
        default=8000,
        description="Server port",
    )
    WORKERS: int = Field(
        default=1,
        description="Number of worker processes",
    )
    RELOAD: bool = Field(
        default=False,
        description="Enable auto-reload on code changes",
    )
    # CORS settings
    CORS_ALLOW_ORIGIN: str = Field(
        default="*",
        description="Value of the Access-Control-Allow-Origin header",
    )
    CORS_ALLOW_HEADERS: Annotated[list[str], NoDecode] = Field(
        default=["Content-Type", "Authorization"],
        description="Headers listed in Access-Control-Allow-Headers",
    )

    # Request settings
    SLOW_REQUEST_THRESHOLD_MS: float = Field(
        default=1000.0,
        description="Requests slower than this are logged as warnings",
    )

    model_config = SettingsConfigDict(case_sensitive=False, extra="forbid")

    @field_validator("PORT")
    @classmethod
    def validate_port(cls, v: int) -> int:
        """Validate port number is in valid range."""
        if not 1 <= v <= 65535:
            raise ValueError("Port must be between 1 and 65535")
        return v

    @field_validator("WORKERS")
    @classmethod
    def validate_workers(cls, v: int) -> int:
        """Validate number of workers is positive."""
        if v < 1:
            raise ValueError("Workers must be at least 1")
        return v

    @field_validator("CORS_ALLOW_HEADERS", mode="before")
    @classmethod
    def parse_cors_headers(cls, v):
        """Parse CORS headers from string or list."""
        if isinstance(v, str):
            return [header.strip() for header in v.split(",")]
        return v
