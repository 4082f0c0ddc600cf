"""CLI command that runs the action.

Implements 'render-deploy-status watch', the entry point a workflow step
calls after Render comments on a pull request.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Generator
from contextlib import contextmanager

import click

from render_status.config.loader import load_action_config, load_env_file, load_event
from render_status.deploy.workflow import run_action
from render_status.lib.actions import ActionOutputs, add_mask, set_failed
from render_status.lib.errors import RenderStatusError
from render_status.lib.logging_config import get_logger, setup_logging
from render_status.models.status import Outcome

logger = get_logger(__name__)


@contextmanager
def handle_action_errors() -> Generator[None, None, None]:
    """Turn any fatal error into a single failed-step signal.

    Exit codes:
        1: Any configuration, event, parse, or API error
    """
    try:
        yield
    except RenderStatusError as e:
        logger.debug(f"Action failed: {e!r}")
        set_failed(str(e))
        sys.exit(1)
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        set_failed(str(e))
        sys.exit(1)


@click.command()
@click.option(
    "--event-path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Event payload JSON (defaults to $GITHUB_EVENT_PATH)",
)
@click.option(
    "--env-file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Load INPUT_* and GITHUB_* variables from a .env file",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose debug logging",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    help="Only print the final outcome",
)
def watch(
    event_path: str | None,
    env_file: str | None,
    verbose: bool,
    quiet: bool,
) -> None:
    """Watch the Render preview deploy announced by a PR comment.

    Reads action inputs from INPUT_* variables and the event from
    GITHUB_EVENT_PATH, polls the deploy until it finishes, and records its
    progress on GitHub.

    Example:

        render-deploy-status watch

        render-deploy-status watch --env-file .env --event-path event.json -v
    """
    github_actions = os.environ.get("GITHUB_ACTIONS") == "true"
    setup_logging(verbose=verbose, quiet=quiet, github_actions=github_actions)

    with handle_action_errors():
        if env_file:
            load_env_file(env_file)
        env = dict(os.environ)

        config = load_action_config(env)
        if github_actions:
            add_mask(config.render_api_key)
            add_mask(config.github_token)

        event = load_event(env, event_path)
        outputs = ActionOutputs(env.get("GITHUB_OUTPUT") or None)

        result = run_action(config, event, outputs)

        if result is None:
            if not quiet:
                click.echo("Comment is not from Render, nothing to do.")
            return

        if quiet:
            click.echo(result.outcome.value)
            return

        color = "green" if result.outcome is Outcome.SUCCESS else "red"
        click.echo()
        click.secho(f"Deploy {result.outcome.value}: {result.description}", fg=color)
        click.echo(f"  Service:   {outputs.values.get('service-name')}")
        click.echo(f"  Deploy:    {result.deploy.id}")
        click.echo(f"  Status:    {result.deploy.status}")
        click.echo(f"  Attempts:  {result.attempts}")
        if result.outcome is Outcome.SUCCESS:
            click.echo(f"  URL:       {outputs.values.get('server-url')}")
        click.echo(f"  Dashboard: {outputs.values.get('dashboard-url')}")
        click.echo()
