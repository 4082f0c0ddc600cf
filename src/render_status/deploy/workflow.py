"""End-to-end action run: comment → deploy → polled status → outputs."""

from __future__ import annotations

import time
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

from render_status.deploy.poller import (
    DeployStatusPoller,
    PollResult,
    resolve_latest_deploy,
)
from render_status.deploy.reporters import create_reporter
from render_status.lib.actions import ActionOutputs
from render_status.lib.errors import EventError
from render_status.lib.logging_config import get_logger
from render_status.models.config import ActionConfig
from render_status.models.event import TriggerEvent
from render_status.parser.comment import parse_comment
from render_status.services.github_client import GitHubClient
from render_status.services.render_client import RenderClient

logger = get_logger(__name__)


def run_action(
    config: ActionConfig,
    event: TriggerEvent,
    outputs: ActionOutputs,
    render_client: RenderClient | None = None,
    github_client: GitHubClient | None = None,
    sleep: Callable[[float], None] = time.sleep,
    now: datetime | None = None,
) -> PollResult | None:
    """Run the action for one triggering event.

    Args:
        config: Validated action configuration
        event: Triggering event
        outputs: Sink for step outputs
        render_client: Render client (built from config when omitted)
        github_client: GitHub client (built from config when omitted)
        sleep: Blocking sleep function used between polls
        now: Current time, used for the deploy lookback window

    Returns:
        PollResult for a Render comment, None when the comment was skipped

    Raises:
        EventError: If the event has no comment body
        CommentParseError: If a Render comment is missing a field
        DeployNotFoundError: If the service has no recent deploys
        RenderStatusError: For any Render or GitHub API failure
    """
    if not event.comment_body:
        raise EventError("No comment body found")
    logger.debug(f"Using comment body: {event.comment_body}")

    identity = parse_comment(event.comment_body)
    if identity is None:
        logger.info("Comment is not from Render, skipping")
        return None

    logger.info(
        f"Found Render service {identity.service_name} ({identity.service_id}) "
        f"at {identity.server_url}"
    )
    outputs.set("server-url", identity.server_url)
    outputs.set("service-name", identity.service_name)
    outputs.set("service-id", identity.service_id)
    outputs.set("dashboard-url", identity.dashboard_url)

    render = render_client or RenderClient(
        api_key=config.render_api_key,
        base_url=config.render_api_base_url,
        timeout=config.request_timeout,
    )
    github = github_client or GitHubClient(
        token=config.github_token,
        owner=event.owner,
        repo=event.repo,
        base_url=config.github_api_url,
        timeout=config.request_timeout,
    )

    created_after = (now or datetime.now(timezone.utc)) - timedelta(
        hours=config.lookback_hours
    )
    logger.debug(
        f"Getting deploys for service {identity.service_id} "
        f"created after {created_after.isoformat()}"
    )
    deploy = resolve_latest_deploy(render, identity.service_id, created_after)

    reporter = create_reporter(
        config.status_mode, github, sha=event.sha, environment=config.environment
    )
    reporter.prepare(identity, deploy)
    if reporter.record_id:
        outputs.set(reporter.output_key, reporter.record_id)

    poller = DeployStatusPoller(
        render,
        reporter,
        max_attempts=config.max_attempts,
        interval=config.interval,
        sleep=sleep,
    )
    result = poller.poll(identity.service_id, deploy, identity)

    record_id = reporter.record_id
    if record_id and outputs.values.get(reporter.output_key) != record_id:
        outputs.set(reporter.output_key, record_id)
    outputs.set(result.outcome.value, result.outcome.value)
    return result
