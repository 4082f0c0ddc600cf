"""Pydantic models for action configuration.

``ActionConfig`` is assembled once at the CLI boundary from the action inputs
and passed explicitly into the core, which never reads the environment.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from render_status.config.defaults import (
    DEFAULT_ENVIRONMENT,
    DEFAULT_GITHUB_API_URL,
    DEFAULT_INTERVAL_MS,
    DEFAULT_LOOKBACK_HOURS,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_RENDER_API_BASE_URL,
    DEFAULT_REQUEST_TIMEOUT,
)
from render_status.models.status import ReporterMode


class ActionConfig(BaseModel):
    """Validated action inputs.

    Attributes:
        render_api_key: Bearer token for the Render API
        github_token: Token for the GitHub REST API
        render_api_base_url: Render API base URL
        github_api_url: GitHub REST API base URL
        max_attempts: Poll budget before forcing a failure
        interval: Wait between polls in milliseconds
        status_mode: Record progress as commit statuses or deployment statuses
        environment: GitHub deployment environment name
        lookback_hours: Only consider deploys created within this window
        request_timeout: Per-request HTTP timeout in seconds
    """

    model_config = ConfigDict(extra="forbid")

    render_api_key: str = Field(..., description="Render API key")
    github_token: str = Field(..., description="GitHub token")
    render_api_base_url: str = Field(
        default=DEFAULT_RENDER_API_BASE_URL, description="Render API base URL"
    )
    github_api_url: str = Field(
        default=DEFAULT_GITHUB_API_URL, description="GitHub REST API base URL"
    )
    max_attempts: int = Field(
        default=DEFAULT_MAX_ATTEMPTS, ge=1, description="Maximum number of attempts"
    )
    interval: int = Field(
        default=DEFAULT_INTERVAL_MS,
        ge=0,
        description="Interval between attempts (in milliseconds)",
    )
    status_mode: ReporterMode = Field(
        default=ReporterMode.DEPLOYMENT, description="How progress is reported"
    )
    environment: str = Field(
        default=DEFAULT_ENVIRONMENT, description="GitHub deployment environment"
    )
    lookback_hours: int = Field(
        default=DEFAULT_LOOKBACK_HOURS,
        ge=1,
        description="Only consider deploys created within this many hours",
    )
    request_timeout: float = Field(
        default=DEFAULT_REQUEST_TIMEOUT,
        gt=0,
        description="Per-request HTTP timeout in seconds",
    )

    @field_validator("render_api_key", "github_token", "environment")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject empty or whitespace-only values."""
        if not v.strip():
            raise ValueError("must not be empty")
        return v.strip()

    @field_validator("render_api_base_url", "github_api_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Require an http(s) URL and drop any trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Invalid URL: {v}. Must start with http:// or https://")
        return v.rstrip("/")
