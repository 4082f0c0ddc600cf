"""Models for the status records mirrored onto GitHub."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Outcome(str, Enum):
    """Outcome of watching a Render deploy."""

    PENDING = "pending"
    SUCCESS = "success"
    FAILURE = "failure"
    INACTIVE = "inactive"

    @property
    def is_terminal(self) -> bool:
        """Whether polling stops once this outcome is reached."""
        return self is not Outcome.PENDING


class ReporterMode(str, Enum):
    """How deploy progress is recorded on GitHub."""

    COMMIT_STATUS = "commit-status"
    DEPLOYMENT = "deployment"


class StatusReport(BaseModel):
    """A status record written to GitHub.

    Attributes:
        outcome: Outcome the record represents
        target_url: Link shown on the record (server URL on success,
            dashboard URL otherwise)
        environment_url: Live environment URL, only set on success
        description: Human description, only set for fixed messages
        context: Stable label that groups repeated updates
        record_id: Identifier GitHub returned for the record
    """

    model_config = ConfigDict(extra="forbid")

    outcome: Outcome = Field(..., description="Outcome the record represents")
    target_url: str = Field(..., description="Link shown on the record")
    environment_url: str | None = Field(
        default=None, description="Live environment URL, set on success only"
    )
    description: str | None = Field(default=None, description="Human description")
    context: str = Field(..., description="Stable label for the record lineage")
    record_id: str | None = Field(
        default=None, description="Identifier returned by GitHub"
    )
