"""12-factor configuration adapter using environment variables."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """HTTP transport configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_prefix="MVG_API_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    request_timeout_seconds: float = Field(
        default=10, description="Total timeout for a single MVG API request in seconds"
    )
    user_agent: str = Field(
        default="Mozilla/5.0", description="User-Agent header sent to the MVG API"
    )
    verify_ssl: bool = Field(default=True, description="Verify the MVG API TLS certificate")
    log_requests: bool = Field(
        default=False, description="Log every outgoing API request at INFO level"
    )

    @field_validator("request_timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Validate the timeout is positive."""
        if v <= 0:
            raise ValueError("request_timeout_seconds must be positive")
        return v
