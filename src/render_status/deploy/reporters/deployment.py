"""Report deploy progress as a GitHub deployment with deployment statuses."""

from __future__ import annotations

from render_status.deploy.reporters.base import PROVIDER_LABEL, BaseReporter
from render_status.lib.errors import GitHubAPIError
from render_status.lib.logging_config import get_logger
from render_status.models.deploy import Deploy
from render_status.models.service import ServiceIdentity
from render_status.models.status import Outcome, StatusReport
from render_status.services.github_client import GitHubClient

logger = get_logger(__name__)

DEPLOYMENT_STATES: dict[Outcome, str] = {
    Outcome.PENDING: "pending",
    Outcome.SUCCESS: "success",
    Outcome.FAILURE: "failure",
    Outcome.INACTIVE: "inactive",
}


class DeploymentReporter(BaseReporter):
    """Create one GitHub deployment and append a status per report."""

    output_key = "deployment-id"

    def __init__(self, client: GitHubClient, sha: str, environment: str) -> None:
        """Initialize the reporter.

        Args:
            client: GitHub client bound to the repository
            sha: Fallback ref when Render reports no commit for the deploy
            environment: GitHub environment name for the deployment
        """
        super().__init__()
        self._client = client
        self._sha = sha
        self._environment = environment
        self._deployment_id: str | None = None

    @property
    def record_id(self) -> str | None:
        """Identifier of the GitHub deployment."""
        return self._deployment_id

    def prepare(self, identity: ServiceIdentity, deploy: Deploy) -> None:
        """Bind to the deploy and create the GitHub deployment.

        Raises:
            GitHubAPIError: If GitHub does not return a deployment id (for
                example when it answers 202 with a merge message)
        """
        super().prepare(identity, deploy)
        ref = deploy.commit_id or self._sha

        logger.debug(f"Creating GitHub deployment for {deploy.id}")
        response = self._client.create_deployment(
            ref=ref,
            environment=self._environment,
            description=f"Preview deployment for {self._sha} on {PROVIDER_LABEL}",
            transient_environment=True,
            auto_merge=False,
        )
        if response.get("id") is None:
            raise GitHubAPIError(
                f"{self._client.repo_url}/deployments",
                202,
                response.get("message") or "No deployment ID found",
            )
        self._deployment_id = str(response["id"])
        logger.debug(f"Created GitHub deployment {self._deployment_id}")

    def _write(self, status_report: StatusReport) -> StatusReport:
        if self._deployment_id is None:
            raise RuntimeError("Reporter used before prepare() was called")
        self._client.create_deployment_status(
            deployment_id=self._deployment_id,
            state=DEPLOYMENT_STATES[status_report.outcome],
            log_url=status_report.target_url,
            environment_url=status_report.environment_url,
            description=status_report.description,
        )
        return status_report.model_copy(update={"record_id": self._deployment_id})
