"""Configuration loader for render-deploy-status.

Builds an ``ActionConfig`` from the ``INPUT_*`` variables the Actions runner
sets for each action input, and a ``TriggerEvent`` from the event payload the
runner writes to ``GITHUB_EVENT_PATH``. Both functions take the environment
as an explicit mapping.
"""

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import ValidationError as PydanticValidationError

from render_status.config.defaults import INPUT_ENV_FALLBACKS, INPUT_FIELD_MAP
from render_status.config.validator import flatten_pydantic_errors
from render_status.lib.errors import ConfigError, EventError
from render_status.lib.logging_config import get_logger
from render_status.models.config import ActionConfig
from render_status.models.event import TriggerEvent

logger = get_logger(__name__)

REQUIRED_INPUTS = ("render-api-key", "github-token")


def input_env_name(name: str) -> str:
    """Return the environment variable the runner uses for an input."""
    return f"INPUT_{name.replace(' ', '_').upper()}"


def get_input(env: Mapping[str, str], name: str) -> str:
    """Read an action input, falling back to its environment variable.

    Args:
        env: Environment mapping to read from
        name: Action input name (e.g. "render-api-key")

    Returns:
        Stripped input value, or an empty string when unset
    """
    value = env.get(input_env_name(name), "").strip()
    if value:
        return value

    fallback = INPUT_ENV_FALLBACKS.get(name)
    if fallback:
        return env.get(fallback, "").strip()
    return ""


def load_action_config(env: Mapping[str, str]) -> ActionConfig:
    """Assemble and validate the action configuration.

    Args:
        env: Environment mapping holding INPUT_* and runner variables

    Returns:
        Validated ActionConfig

    Raises:
        ConfigError: If a required input is missing or a value is invalid
    """
    for name in REQUIRED_INPUTS:
        if not get_input(env, name):
            raise ConfigError(
                field=name,
                message=f"Input required and not supplied: {name}",
            )

    data: dict[str, Any] = {}
    for name, field in INPUT_FIELD_MAP.items():
        value = get_input(env, name)
        if value:
            data[field] = value

    github_api_url = env.get("GITHUB_API_URL", "").strip()
    if github_api_url:
        data["github_api_url"] = github_api_url

    try:
        config = ActionConfig(**data)
    except PydanticValidationError as exc:
        messages = flatten_pydantic_errors(exc)
        raise ConfigError(field="inputs", message="\n".join(messages)) from exc

    logger.debug(
        f"Loaded configuration: mode={config.status_mode.value}, "
        f"max_attempts={config.max_attempts}, interval={config.interval}ms"
    )
    return config


def load_env_file(path: str | Path) -> bool:
    """Load variables from a .env file without overriding the environment.

    Args:
        path: Path to the .env file

    Returns:
        True if any variables were loaded

    Raises:
        ConfigError: If the file does not exist
    """
    env_path = Path(path)
    if not env_path.is_file():
        raise ConfigError(field="env_file", message=f"File not found: {env_path}")
    return bool(load_dotenv(env_path, override=False))


def _read_event_payload(event_path: str | Path) -> dict[str, Any]:
    path = Path(event_path)
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise EventError(f"Failed to read event payload at {path}: {exc}") from exc

    try:
        payload = json.loads(content)
    except json.JSONDecodeError as exc:
        raise EventError(f"Invalid event payload in {path}: {exc}") from exc

    if not isinstance(payload, dict):
        raise EventError(f"Invalid event payload in {path}: expected a JSON object")
    return payload


def load_event(
    env: Mapping[str, str], event_path: str | Path | None = None
) -> TriggerEvent:
    """Read the triggering event.

    The comment body comes from ``comment.body``. The SHA is the pull
    request head when the payload has one, otherwise ``GITHUB_SHA``.

    Args:
        env: Environment mapping holding GITHUB_* runner variables
        event_path: Event payload path, overriding GITHUB_EVENT_PATH

    Returns:
        TriggerEvent for this run

    Raises:
        EventError: If the payload is unreadable or the repository or SHA
            cannot be determined
    """
    path = event_path or env.get("GITHUB_EVENT_PATH")
    payload: dict[str, Any] = _read_event_payload(path) if path else {}

    comment = payload.get("comment") or {}
    comment_body = comment.get("body") if isinstance(comment, dict) else None

    repository = env.get("GITHUB_REPOSITORY", "").strip()
    if not repository:
        repository = str((payload.get("repository") or {}).get("full_name") or "")
    owner, _, repo = repository.partition("/")
    if not owner or not repo:
        raise EventError("Unable to determine the repository (owner/repo)")

    pull_request = payload.get("pull_request") or {}
    sha = (pull_request.get("head") or {}).get("sha") or env.get("GITHUB_SHA", "")
    if not sha:
        raise EventError("Unable to determine the commit SHA for this run")

    return TriggerEvent(comment_body=comment_body, owner=owner, repo=repo, sha=sha)
