"""Logging setup for render-deploy-status.

Inside a GitHub Actions job, log records are written as workflow commands so
debug lines only show when step debugging is on, and warnings and errors
become annotations. Outside Actions a plain timestamped format is used.
"""

from __future__ import annotations

import logging
import sys

PACKAGE_LOGGER = "render_status"

PLAIN_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
PLAIN_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def escape_data(value: str) -> str:
    """Escape a workflow command message the way the Actions runner expects."""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class ActionsFormatter(logging.Formatter):
    """Format log records as GitHub Actions workflow commands."""

    def format(self, record: logging.LogRecord) -> str:
        message = escape_data(super().format(record))
        if record.levelno >= logging.ERROR:
            return f"::error::{message}"
        if record.levelno >= logging.WARNING:
            return f"::warning::{message}"
        if record.levelno <= logging.DEBUG:
            return f"::debug::{message}"
        return message


def get_logger(name: str) -> logging.Logger:
    """Return a logger, nested under the package logger when needed."""
    if name == PACKAGE_LOGGER or name.startswith(f"{PACKAGE_LOGGER}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")


def setup_logging(
    verbose: bool = False,
    quiet: bool = False,
    github_actions: bool = False,
) -> None:
    """Configure the package logger.

    Args:
        verbose: Enable DEBUG level output
        quiet: Only emit warnings and errors
        github_actions: Emit workflow commands instead of plain lines
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    # Workflow commands are filtered by the runner, so pass debug through.
    if github_actions and not quiet:
        level = logging.DEBUG

    handler = logging.StreamHandler(sys.stdout)
    if github_actions:
        handler.setFormatter(ActionsFormatter("%(message)s"))
    else:
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT, PLAIN_DATE_FORMAT))

    logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False

    # Keep urllib3 connection chatter out of step logs
    logging.getLogger("urllib3").setLevel(logging.WARNING)
