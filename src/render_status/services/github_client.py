"""GitHub REST API client for commit and deployment statuses."""

import contextlib
from typing import Any

import requests
from requests.exceptions import ConnectionError as RequestsConnectionError
from requests.exceptions import Timeout

from render_status.config.defaults import (
    DEFAULT_GITHUB_API_URL,
    DEFAULT_REQUEST_TIMEOUT,
)
from render_status.lib.errors import GitHubAPIError, GitHubConnectionError
from render_status.lib.logging_config import get_logger

logger = get_logger(__name__)


class GitHubClient:
    """Write-only client for the GitHub status endpoints this action uses."""

    API_VERSION = "2022-11-28"

    def __init__(
        self,
        token: str,
        owner: str,
        repo: str,
        base_url: str = DEFAULT_GITHUB_API_URL,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
    ) -> None:
        """Initialize client for one repository.

        Args:
            token: GitHub token, sent as a bearer token
            owner: Repository owner
            repo: Repository name
            base_url: GitHub REST API base URL (differs on GitHub Enterprise)
            timeout: Request timeout in seconds
        """
        self.owner = owner
        self.repo = repo
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = requests.Session()
        self._session.headers.update(
            {
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": self.API_VERSION,
            }
        )

    @property
    def repo_url(self) -> str:
        """Base URL for repository endpoints."""
        return f"{self.base_url}/repos/{self.owner}/{self.repo}"

    def create_commit_status(
        self,
        sha: str,
        state: str,
        context: str,
        target_url: str | None = None,
        description: str | None = None,
    ) -> dict[str, Any]:
        """Create or update the commit status for one context.

        GitHub keeps the latest status per context, so repeated calls with
        the same context update one record.
        """
        payload = _drop_none(
            {
                "state": state,
                "context": context,
                "target_url": target_url,
                "description": description,
            }
        )
        return self._request("POST", f"{self.repo_url}/statuses/{sha}", payload)

    def create_deployment(
        self,
        ref: str,
        environment: str,
        description: str | None = None,
        transient_environment: bool = True,
        auto_merge: bool = False,
    ) -> dict[str, Any]:
        """Create a deployment for a ref."""
        payload = _drop_none(
            {
                "ref": ref,
                "environment": environment,
                "description": description,
                "transient_environment": transient_environment,
                "auto_merge": auto_merge,
                # Skip the commit status checks GitHub runs before deploying
                "required_contexts": [],
            }
        )
        return self._request("POST", f"{self.repo_url}/deployments", payload)

    def create_deployment_status(
        self,
        deployment_id: int | str,
        state: str,
        log_url: str | None = None,
        environment_url: str | None = None,
        description: str | None = None,
    ) -> dict[str, Any]:
        """Add a status to an existing deployment."""
        payload = _drop_none(
            {
                "state": state,
                "log_url": log_url,
                "environment_url": environment_url,
                "description": description,
            }
        )
        url = f"{self.repo_url}/deployments/{deployment_id}/statuses"
        return self._request("POST", url, payload)

    def _request(
        self, method: str, url: str, payload: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """Execute HTTP request with error handling.

        Raises:
            GitHubConnectionError: Connection/timeout issues
            GitHubAPIError: Non-2xx status code
        """
        try:
            response = self._session.request(
                method=method,
                url=url,
                json=payload,
                timeout=self.timeout,
            )
        except (Timeout, RequestsConnectionError) as e:
            raise GitHubConnectionError(self.base_url, original_error=e) from e

        if not response.ok:
            detail = None
            with contextlib.suppress(Exception):
                detail = response.json().get("message")
            raise GitHubAPIError(url, response.status_code, detail)

        logger.debug(f"GitHub API {method} {url} returned {response.status_code}")
        if not response.content:
            return {}
        data: dict[str, Any] = response.json()
        return data


def _drop_none(payload: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in payload.items() if value is not None}
