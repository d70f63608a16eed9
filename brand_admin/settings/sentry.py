from pydantic import BaseModel, Field


class SentryConfig(BaseModel):
    DSN: str = Field(default="", description="Sentry DSN, empty disables reporting")
    TRACES_SAMPLE_RATE: float = Field(
        default=1.0, description="Fraction of transactions sent to Sentry"
    )
    SEND_DEFAULT_PII: bool = Field(
        default=False, description="Attach request headers and IP to events"
    )
