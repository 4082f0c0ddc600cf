"""Model of the workflow event that triggered the action."""

from pydantic import BaseModel, ConfigDict, Field


class TriggerEvent(BaseModel):
    """The parts of the triggering event the action needs.

    Attributes:
        comment_body: Text of the comment that triggered the run, if any
        owner: Repository owner
        repo: Repository name
        sha: Commit SHA for the run (PR head when known)
    """

    model_config = ConfigDict(extra="forbid")

    comment_body: str | None = Field(
        default=None, description="Text of the triggering comment"
    )
    owner: str = Field(..., description="Repository owner")
    repo: str = Field(..., description="Repository name")
    sha: str = Field(..., description="Commit SHA for the run")
