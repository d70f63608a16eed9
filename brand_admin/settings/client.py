from pydantic import BaseModel, Field


class ClientConfig(BaseModel):
    """Settings for the client API wrapper used by the admin pages."""

    BASE_URL: str = Field(
        default="http://localhost:8000/api",
        description="Base URL of the proxy routes the client API calls",
    )
    TIMEOUT: float = Field(
        default=30.0,
        description="Timeout for client API requests in seconds",
    )
    PAGE_SIZE: int = Field(
        default=10,
        description="Number of brands shown per page on the list view",
    )
