"""Pytest configuration and shared fixtures for render-deploy-status tests."""

import json
import os
from collections.abc import Callable, Generator
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import pytest

from render_status.models.deploy import Deploy
from render_status.models.service import ServiceIdentity

RENDER_COMMENT = (
    "Your Render PR Server URL is https://api-pr-324-ovto.onrender.com.\n\n"
    "Follow its progress at "
    "https://dashboard.render.com/web/srv-ci9bopliuie2p3pd7a3g."
)


@pytest.fixture
def fixture_dir() -> Path:
    """Get path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def isolated_env() -> Generator[dict[str, str]]:
    """Provide isolated environment variables for testing.

    Saves current environment and restores after test.
    """
    original_env = os.environ.copy()
    yield original_env
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def render_comment() -> str:
    """Comment body as Render posts it on a pull request."""
    return RENDER_COMMENT


@pytest.fixture
def identity() -> ServiceIdentity:
    """Identity parsed from the standard Render comment."""
    return ServiceIdentity(
        server_url="https://api-pr-324-ovto.onrender.com",
        service_name="web",
        service_id="srv-ci9bopliuie2p3pd7a3g",
        dashboard_url="https://dashboard.render.com/web/srv-ci9bopliuie2p3pd7a3g",
    )


@pytest.fixture
def make_deploy() -> Callable[..., Deploy]:
    """Factory for Deploy models with sensible defaults."""

    def _make(
        status: str = "build_in_progress",
        deploy_id: str = "dep-abc123",
        created_at: datetime | None = None,
        commit_id: str | None = "3333333333333333333333333333333333333333",
    ) -> Deploy:
        data: dict[str, Any] = {
            "id": deploy_id,
            "status": status,
            "createdAt": (
                created_at or datetime(2026, 10, 16, 12, 0, tzinfo=timezone.utc)
            ).isoformat(),
        }
        if commit_id:
            data["commit"] = {"id": commit_id, "message": "Fix preview config"}
        return Deploy.model_validate(data)

    return _make


@pytest.fixture
def deploys_payload(fixture_dir: Path) -> list[dict[str, Any]]:
    """Deploy listing as returned by the Render API (unsorted)."""
    path = fixture_dir / "render" / "deploys_list.json"
    data: list[dict[str, Any]] = json.loads(path.read_text(encoding="utf-8"))
    return data


# Configure pytest
def pytest_configure(config: Any) -> None:
    """Configure pytest with marker options."""
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests",
    )
    config.addinivalue_line(
        "markers",
        "unit: marks tests as unit tests",
    )
