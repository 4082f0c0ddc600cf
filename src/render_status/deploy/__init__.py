"""Render deploy tracking.

This package resolves the Render deploy behind a preview comment, polls it
until it finishes, and mirrors its progress onto GitHub.
"""

from render_status.deploy.poller import (
    DeployStatusPoller,
    PollResult,
    map_deploy_status,
    resolve_latest_deploy,
    select_latest_deploy,
)
from render_status.deploy.workflow import run_action

__all__ = [
    "DeployStatusPoller",
    "PollResult",
    "map_deploy_status",
    "resolve_latest_deploy",
    "run_action",
    "select_latest_deploy",
]
