"""
Upstream backend configuration.

The brand backend is reached through one base origin shared by every
proxy route.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class UpstreamConfig(BaseSettings):
    BASE_URL: str = Field(
        default="http://localhost:5000",
        description="Base origin of the brand backend, without trailing slash",
    )
    TIMEOUT: float = Field(
        default=30.0,
        description="Timeout for upstream requests in seconds",
    )
    INCLUDE_ERROR_DETAILS: bool = Field(
        default=True,
        description="Attach the underlying error message as 'details' in proxy error bodies",
    )
    model_config = SettingsConfigDict(case_sensitive=False, extra="forbid")

    @field_validator("BASE_URL")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalise the base origin so paths can be appended directly."""
        return v.rstrip("/")

    @field_validator("TIMEOUT")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("Upstream timeout must be positive")
        return v
