"""GitHub status reporters for Render deploys."""

from __future__ import annotations

from render_status.deploy.reporters.base import BaseReporter
from render_status.deploy.reporters.commit_status import CommitStatusReporter
from render_status.deploy.reporters.deployment import DeploymentReporter
from render_status.lib.errors import ConfigError
from render_status.models.status import ReporterMode
from render_status.services.github_client import GitHubClient


def create_reporter(
    mode: ReporterMode,
    client: GitHubClient,
    sha: str,
    environment: str,
) -> BaseReporter:
    """Create a reporter for the configured status mode."""
    if mode == ReporterMode.COMMIT_STATUS:
        return CommitStatusReporter(client, sha)

    if mode == ReporterMode.DEPLOYMENT:
        return DeploymentReporter(client, sha, environment)

    raise ConfigError(field="status-mode", message=f"Unsupported status mode: {mode}")


__all__ = [
    "BaseReporter",
    "CommitStatusReporter",
    "DeploymentReporter",
    "create_reporter",
]
