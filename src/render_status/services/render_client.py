"""Render API client.

This module provides the RenderClient for reading deploys of a Render
service through the REST API at https://api.render.com/v1.
"""

import contextlib
from datetime import datetime
from typing import Any
from urllib.parse import quote

import requests
from requests.exceptions import ConnectionError as RequestsConnectionError
from requests.exceptions import Timeout

from render_status.config.defaults import (
    DEFAULT_RENDER_API_BASE_URL,
    DEFAULT_REQUEST_TIMEOUT,
    DEPLOY_LIST_LIMIT,
)
from render_status.lib.errors import RenderAPIError, RenderConnectionError
from render_status.lib.logging_config import get_logger
from render_status.models.deploy import Deploy, DeployListEntry

logger = get_logger(__name__)


class RenderClient:
    """Client for the Render deploys API.

    Example:
        >>> client = RenderClient(api_key="rnd_xxx")
        >>> entries = client.list_deploys("srv-abc123")
        >>> deploy = client.get_deploy("srv-abc123", entries[0].deploy.id)
        >>> print(deploy.status)
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_RENDER_API_BASE_URL,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
    ) -> None:
        """Initialize client with credentials, base URL and timeout.

        Args:
            api_key: Render API key, sent as a bearer token
            base_url: Render API base URL
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = requests.Session()
        self._session.headers.update(
            {
                "Authorization": f"Bearer {api_key}",
                "Accept": "application/json",
            }
        )

    def list_deploys(
        self,
        service_id: str,
        created_after: datetime | None = None,
        limit: int = DEPLOY_LIST_LIMIT,
    ) -> list[DeployListEntry]:
        """List recent deploys of a service.

        Render returns the listing newest first, but callers should not rely
        on that order.

        Args:
            service_id: Render service identifier
            created_after: Only return deploys created after this time
            limit: Maximum number of deploys to return

        Returns:
            Deploy entries with their pagination cursors

        Raises:
            RenderConnectionError: Network/timeout issues
            RenderAPIError: API returned error status
        """
        url = f"{self.base_url}/services/{quote(service_id, safe='')}/deploys"
        params: dict[str, str | int] = {"limit": limit}
        if created_after is not None:
            params["createdAfter"] = created_after.isoformat()

        response = self._request("GET", url, params=params)
        data = response.json()
        if not isinstance(data, list):
            raise RenderAPIError(
                url, response.status_code, "Expected a list of deploys"
            )

        entries = [DeployListEntry.model_validate(item) for item in data]
        logger.debug(f"Got {len(entries)} deploys for service {service_id}")
        return entries

    def get_deploy(self, service_id: str, deploy_id: str) -> Deploy:
        """Get a single deploy.

        Args:
            service_id: Render service identifier
            deploy_id: Render deploy identifier

        Returns:
            Deploy with its current status

        Raises:
            RenderConnectionError: Network/timeout issues
            RenderAPIError: API returned error status
        """
        url = (
            f"{self.base_url}/services/{quote(service_id, safe='')}"
            f"/deploys/{quote(deploy_id, safe='')}"
        )
        response = self._request("GET", url)
        data: dict[str, Any] = response.json()
        # Some API versions wrap single deploys the same way as the listing
        if isinstance(data.get("deploy"), dict):
            data = data["deploy"]
        return Deploy.model_validate(data)

    def _request(
        self,
        method: str,
        url: str,
        params: dict[str, str | int] | None = None,
    ) -> requests.Response:
        """Execute HTTP request with error handling.

        Args:
            method: HTTP method
            url: Request URL
            params: Query parameters

        Returns:
            Response object

        Raises:
            RenderConnectionError: Connection/timeout issues
            RenderAPIError: Non-2xx status code
        """
        try:
            response = self._session.request(
                method=method,
                url=url,
                params=params,
                timeout=self.timeout,
            )
        except (Timeout, RequestsConnectionError) as e:
            raise RenderConnectionError(self.base_url, original_error=e) from e

        if not response.ok:
            detail = None
            with contextlib.suppress(Exception):
                detail = response.json().get("message")
            raise RenderAPIError(url, response.status_code, detail)

        return response
