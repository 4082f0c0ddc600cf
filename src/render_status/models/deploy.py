"""Pydantic models for Render deploy API responses.

These map the JSON returned by ``/services/{serviceId}/deploys``. Render uses
camelCase keys, so fields carry aliases and accept either spelling.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class DeployStatus(str, Enum):
    """Deploy states reported by Render."""

    CREATED = "created"
    BUILD_IN_PROGRESS = "build_in_progress"
    UPDATE_IN_PROGRESS = "update_in_progress"
    PRE_DEPLOY_IN_PROGRESS = "pre_deploy_in_progress"
    LIVE = "live"
    DEACTIVATED = "deactivated"
    BUILD_FAILED = "build_failed"


class DeployCommit(BaseModel):
    """Git commit a deploy was built from."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str = Field(..., description="Commit SHA")
    message: str | None = Field(default=None, description="Commit message")
    created_at: datetime | None = Field(
        default=None, alias="createdAt", description="Commit timestamp"
    )


class Deploy(BaseModel):
    """A single Render build and release of a service.

    Attributes:
        id: Render deploy identifier (e.g. dep-abc123)
        commit: Commit the deploy was built from, if any
        status: Raw Render status string
        created_at: When the deploy was created
        updated_at: When the deploy last changed
        finished_at: When the deploy reached its final state
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str = Field(..., description="Render deploy identifier")
    commit: DeployCommit | None = Field(
        default=None, description="Commit the deploy was built from"
    )
    # Plain string: unknown in-progress states must not fail validation
    status: str = Field(..., description="Raw Render deploy status")
    created_at: datetime = Field(
        ..., alias="createdAt", description="Deploy creation timestamp"
    )
    updated_at: datetime | None = Field(
        default=None, alias="updatedAt", description="Last update timestamp"
    )
    finished_at: datetime | None = Field(
        default=None, alias="finishedAt", description="Completion timestamp"
    )

    @property
    def commit_id(self) -> str | None:
        """Return the commit SHA of the deploy, if Render reported one."""
        return self.commit.id if self.commit else None


class DeployListEntry(BaseModel):
    """One entry of the paginated deploy listing."""

    model_config = ConfigDict(extra="ignore")

    deploy: Deploy
    cursor: str | None = Field(default=None, description="Pagination cursor")
