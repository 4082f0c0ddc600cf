"""GitHub Actions runtime helpers.

Outputs go to the file named by ``GITHUB_OUTPUT``. Failure and masking use
workflow commands on stdout.
"""

from __future__ import annotations

import sys
import uuid
from pathlib import Path
from typing import TextIO

from render_status.lib.logging_config import escape_data, get_logger

logger = get_logger(__name__)


class ActionOutputs:
    """Collect step outputs and persist them for the Actions runner.

    Values are always kept in memory. When an output file is configured they
    are also appended to it, one heredoc block per value, so later steps can
    read them through ``steps.<id>.outputs``.

    Example:
        >>> outputs = ActionOutputs()
        >>> outputs.set("service-id", "srv-123")
        >>> outputs.values["service-id"]
        'srv-123'
    """

    def __init__(self, output_path: str | Path | None = None) -> None:
        """Create an output sink.

        Args:
            output_path: Path of the ``GITHUB_OUTPUT`` file, or None to keep
                outputs in memory only
        """
        self.output_path = Path(output_path) if output_path else None
        self.values: dict[str, str] = {}

    def set(self, name: str, value: object) -> None:
        """Set a step output."""
        text = str(value)
        self.values[name] = text
        logger.debug(f"Setting output {name}={text}")
        if self.output_path is None:
            return

        delimiter = f"ghadelimiter_{uuid.uuid4()}"
        with self.output_path.open("a", encoding="utf-8") as handle:
            handle.write(f"{name}<<{delimiter}\n{text}\n{delimiter}\n")


def add_mask(value: str, stream: TextIO | None = None) -> None:
    """Register a secret so the runner redacts it from the job log."""
    if not value:
        return
    out = stream or sys.stdout
    out.write(f"::add-mask::{escape_data(value)}\n")
    out.flush()


def set_failed(message: str, stream: TextIO | None = None) -> None:
    """Emit an error annotation for the failing step."""
    out = stream or sys.stdout
    out.write(f"::error::{escape_data(message)}\n")
    out.flush()
