"""Report deploy progress as a GitHub commit status."""

from __future__ import annotations

from render_status.deploy.reporters.base import BaseReporter
from render_status.lib.logging_config import get_logger
from render_status.models.deploy import Deploy
from render_status.models.service import ServiceIdentity
from render_status.models.status import Outcome, StatusReport
from render_status.services.github_client import GitHubClient

logger = get_logger(__name__)

# Commit statuses have no "inactive" state
COMMIT_STATES: dict[Outcome, str] = {
    Outcome.PENDING: "pending",
    Outcome.SUCCESS: "success",
    Outcome.FAILURE: "failure",
    Outcome.INACTIVE: "error",
}


class CommitStatusReporter(BaseReporter):
    """Mirror deploy progress onto one commit status context."""

    output_key = "status-id"

    def __init__(self, client: GitHubClient, sha: str) -> None:
        """Initialize the reporter.

        Args:
            client: GitHub client bound to the repository
            sha: Fallback commit SHA when Render reports no commit
        """
        super().__init__()
        self._client = client
        self._fallback_sha = sha
        self._sha = sha
        self._status_id: str | None = None

    @property
    def record_id(self) -> str | None:
        """Identifier of the most recent commit status."""
        return self._status_id

    def prepare(self, identity: ServiceIdentity, deploy: Deploy) -> None:
        super().prepare(identity, deploy)
        self._sha = deploy.commit_id or self._fallback_sha
        logger.debug(f"Reporting commit status '{self.context}' on {self._sha}")

    def _write(self, status_report: StatusReport) -> StatusReport:
        response = self._client.create_commit_status(
            sha=self._sha,
            state=COMMIT_STATES[status_report.outcome],
            context=status_report.context,
            target_url=status_report.target_url,
            description=status_report.description,
        )
        if response.get("id") is not None:
            self._status_id = str(response["id"])
        return status_report.model_copy(update={"record_id": self._status_id})
