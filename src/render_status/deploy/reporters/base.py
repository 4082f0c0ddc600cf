"""Base interface for deploy status reporters."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from render_status.models.deploy import Deploy
from render_status.models.service import ServiceIdentity
from render_status.models.status import Outcome, StatusReport

PROVIDER_LABEL = "Render"


def build_context(identity: ServiceIdentity, deploy: Deploy) -> str:
    """Return the stable label that groups every update of one deploy."""
    return f"{PROVIDER_LABEL} – {identity.service_name} – {deploy.id}"


def resolve_target_url(outcome: Outcome, identity: ServiceIdentity) -> str:
    """Link to the live server on success, to the dashboard otherwise."""
    if outcome is Outcome.SUCCESS:
        return identity.server_url
    return identity.dashboard_url


class BaseReporter(ABC):
    """Abstract base class for GitHub status reporters.

    A reporter is bound to one deploy through ``prepare`` and then writes
    every poll result into the same GitHub record lineage.
    """

    #: Action output that carries the record identifier
    output_key: ClassVar[str]

    def __init__(self) -> None:
        self._identity: ServiceIdentity | None = None
        self._deploy: Deploy | None = None
        self.reports: list[StatusReport] = []

    @property
    def context(self) -> str:
        """Stable label of the record lineage."""
        identity, deploy = self._require_prepared()
        return build_context(identity, deploy)

    @property
    @abstractmethod
    def record_id(self) -> str | None:
        """Identifier of the GitHub record, once one exists."""

    def prepare(self, identity: ServiceIdentity, deploy: Deploy) -> None:
        """Bind the reporter to the deploy under observation.

        Args:
            identity: Service identity parsed from the comment
            deploy: Deploy that will be polled
        """
        self._identity = identity
        self._deploy = deploy

    def report(self, outcome: Outcome, description: str | None = None) -> StatusReport:
        """Write one status record to GitHub.

        Args:
            outcome: Current outcome of the deploy
            description: Optional human description

        Returns:
            The StatusReport that was written

        Raises:
            GitHubAPIError: If GitHub rejects the update
            GitHubConnectionError: If GitHub is unreachable
        """
        identity, _ = self._require_prepared()
        status_report = StatusReport(
            outcome=outcome,
            target_url=resolve_target_url(outcome, identity),
            environment_url=identity.server_url if outcome is Outcome.SUCCESS else None,
            description=description,
            context=self.context,
        )
        status_report = self._write(status_report)
        self.reports.append(status_report)
        return status_report

    @abstractmethod
    def _write(self, status_report: StatusReport) -> StatusReport:
        """Send a report to GitHub and return it with its record id."""

    def _require_prepared(self) -> tuple[ServiceIdentity, Deploy]:
        if self._identity is None or self._deploy is None:
            raise RuntimeError("Reporter used before prepare() was called")
        return self._identity, self._deploy
