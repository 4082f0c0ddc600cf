"""Poll a Render deploy until it reaches a terminal state.

Each iteration fetches the deploy, maps the Render status to an ``Outcome``
and reports it to GitHub. Polling stops on ``live``, ``build_failed`` or
``deactivated``, or when the attempt budget runs out.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import datetime

from render_status.config.defaults import DEFAULT_INTERVAL_MS, DEFAULT_MAX_ATTEMPTS
from render_status.deploy.reporters.base import BaseReporter
from render_status.lib.errors import DeployNotFoundError
from render_status.lib.logging_config import get_logger
from render_status.models.deploy import Deploy, DeployListEntry, DeployStatus
from render_status.models.service import ServiceIdentity
from render_status.models.status import Outcome
from render_status.services.render_client import RenderClient

logger = get_logger(__name__)

STATUS_OUTCOMES: dict[str, Outcome] = {
    DeployStatus.LIVE.value: Outcome.SUCCESS,
    DeployStatus.BUILD_FAILED.value: Outcome.FAILURE,
    DeployStatus.DEACTIVATED.value: Outcome.INACTIVE,
}

OUTCOME_DESCRIPTIONS: dict[Outcome, str] = {
    Outcome.SUCCESS: "Deploy succeeded",
    Outcome.FAILURE: "Build failed",
    Outcome.INACTIVE: "Deploy deactivated",
}

EXCEEDED_MAX_ATTEMPTS = "Exceeded max number of attempts"


def map_deploy_status(status: str) -> Outcome:
    """Map a Render deploy status to an outcome.

    Anything other than the three terminal statuses is still in progress.
    """
    return STATUS_OUTCOMES.get(status, Outcome.PENDING)


def select_latest_deploy(entries: Iterable[DeployListEntry]) -> Deploy:
    """Return the most recently created deploy of a listing.

    Raises:
        ValueError: If the listing is empty
    """
    deploys = [entry.deploy for entry in entries]
    if not deploys:
        raise ValueError("Cannot select a deploy from an empty listing")
    return max(deploys, key=lambda deploy: deploy.created_at)


@dataclass
class PollState:
    """Working state of one poll run."""

    deploy: Deploy
    attempts: int = 0
    outcome: Outcome = Outcome.PENDING


@dataclass(frozen=True)
class PollResult:
    """Terminal result of a poll run.

    Attributes:
        outcome: Terminal outcome
        attempts: Number of non-terminal polls made
        deploy: Last deploy snapshot fetched from Render
        description: Description of the final report
        exhausted: True when the attempt budget ran out
    """

    outcome: Outcome
    attempts: int
    deploy: Deploy
    description: str
    exhausted: bool = False


class DeployStatusPoller:
    """Poll a Render deploy and mirror each state through a reporter.

    Example:
        >>> poller = DeployStatusPoller(render, reporter, max_attempts=30)
        >>> result = poller.poll(identity.service_id, deploy, identity)
        >>> result.outcome
        <Outcome.SUCCESS: 'success'>
    """

    def __init__(
        self,
        client: RenderClient,
        reporter: BaseReporter,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        interval: int = DEFAULT_INTERVAL_MS,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Initialize the poller.

        Args:
            client: Render API client
            reporter: Reporter already prepared for the deploy
            max_attempts: Number of in-progress polls allowed before failing
            interval: Wait between polls in milliseconds
            sleep: Blocking sleep function taking seconds
        """
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if interval < 0:
            raise ValueError("interval must not be negative")
        self._client = client
        self._reporter = reporter
        self._max_attempts = max_attempts
        self._interval = interval
        self._sleep = sleep

    def poll(
        self, service_id: str, deploy: Deploy, identity: ServiceIdentity
    ) -> PollResult:
        """Poll until the deploy is terminal or the budget is spent.

        Args:
            service_id: Render service identifier
            deploy: Deploy to observe
            identity: Service identity, used for logging

        Returns:
            PollResult with the terminal outcome

        Raises:
            RenderAPIError: If Render rejects a status request
            RenderConnectionError: If Render is unreachable
            GitHubAPIError: If GitHub rejects a report
            GitHubConnectionError: If GitHub is unreachable
        """
        state = PollState(deploy=deploy)
        logger.info(
            f"Watching deploy {deploy.id} of {identity.service_name} ({service_id})"
        )

        while not state.outcome.is_terminal:
            if state.attempts >= self._max_attempts:
                logger.warning(
                    f"Exceeded max number of attempts ({self._max_attempts})"
                )
                state.outcome = Outcome.FAILURE
                self._reporter.report(state.outcome, EXCEEDED_MAX_ATTEMPTS)
                return PollResult(
                    outcome=state.outcome,
                    attempts=state.attempts,
                    deploy=state.deploy,
                    description=EXCEEDED_MAX_ATTEMPTS,
                    exhausted=True,
                )

            logger.debug(f"Getting deploy status for {state.deploy.id}")
            state.deploy = self._client.get_deploy(service_id, state.deploy.id)
            state.outcome = map_deploy_status(state.deploy.status)
            logger.debug(f"Got deploy status: {state.deploy.status}")

            if not state.outcome.is_terminal:
                self._reporter.report(state.outcome)
                state.attempts += 1
                logger.info(
                    f"Deploy {state.deploy.id} is {state.deploy.status}, "
                    f"checking again in {self._interval / 1000:g}s "
                    f"(attempt {state.attempts}/{self._max_attempts})"
                )
                self._sleep(self._interval / 1000)

        description = OUTCOME_DESCRIPTIONS[state.outcome]
        self._reporter.report(state.outcome, description)
        logger.info(f"{description} ({state.deploy.id})")
        return PollResult(
            outcome=state.outcome,
            attempts=state.attempts,
            deploy=state.deploy,
            description=description,
        )


def resolve_latest_deploy(
    client: RenderClient,
    service_id: str,
    created_after: datetime | None = None,
) -> Deploy:
    """List recent deploys of a service and return the newest one.

    Raises:
        DeployNotFoundError: If Render lists no deploys
    """
    entries = client.list_deploys(service_id, created_after=created_after)
    if not entries:
        raise DeployNotFoundError(service_id)
    deploy = select_latest_deploy(entries)
    logger.debug(f"Using deploy {deploy.id} created at {deploy.created_at}")
    return deploy
