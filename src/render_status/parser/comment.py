"""Parser for the comment Render posts on pull requests.

Render announces a PR preview with a comment like::

    Your Render PR Server URL is https://api-pr-324-ovto.onrender.com.
    Follow its progress at https://dashboard.render.com/web/srv-ci9bopliuie2p3pd7a3g.

The literal phrasing and URL shapes live in the constants below, so a change
in Render's template only needs an edit here.
"""

import re

from render_status.lib.errors import CommentParseError
from render_status.models.service import ServiceIdentity

MARKER_PHRASE = "Your Render PR Server URL is"
DASHBOARD_BASE_URL = "https://dashboard.render.com"

SERVER_URL_PATTERN = re.compile(
    re.escape(MARKER_PHRASE)
    + r"\s+(?P<server_url>https://[a-z0-9-]+-pr-[a-z0-9-]+\.onrender\.com)",
    re.IGNORECASE,
)
# Both groups are optional so partial links can tell a missing name from a
# missing id. Only a match with both groups yields an identity.
DASHBOARD_URL_PATTERN = re.compile(
    re.escape(DASHBOARD_BASE_URL)
    + r"/(?P<name>[a-z0-9-]+)?(?:/(?P<id>[a-z0-9-]+))?",
    re.IGNORECASE,
)


def is_render_comment(text: str) -> bool:
    """Return True if the text carries Render's preview marker phrase."""
    return MARKER_PHRASE.lower() in text.lower()


def build_dashboard_url(service_name: str, service_id: str) -> str:
    """Build the dashboard URL for a service."""
    return f"{DASHBOARD_BASE_URL}/{service_name}/{service_id}"


def parse_comment(text: str) -> ServiceIdentity | None:
    """Extract the preview service identity from a Render comment.

    Args:
        text: Raw comment body

    Returns:
        ServiceIdentity for a Render preview comment, or None when the text
        is not a Render comment and should be skipped

    Raises:
        CommentParseError: If the comment is from Render but the server URL,
            service name, or service ID cannot be found
    """
    if not is_render_comment(text):
        return None

    server_match = SERVER_URL_PATTERN.search(text)
    if not server_match:
        raise CommentParseError("server_url", "No server URL found")
    server_url = server_match.group("server_url")

    dashboard_matches = list(DASHBOARD_URL_PATTERN.finditer(text))
    complete = next(
        (m for m in dashboard_matches if m.group("name") and m.group("id")), None
    )
    if complete is None:
        # Partial links only decide which field is reported missing
        if any(m.group("name") for m in dashboard_matches):
            raise CommentParseError("service_id", "No service ID found")
        raise CommentParseError("service_name", "No service name found")
    service_name = complete.group("name")
    service_id = complete.group("id")

    return ServiceIdentity(
        server_url=server_url,
        service_name=service_name,
        service_id=service_id,
        dashboard_url=build_dashboard_url(service_name, service_id),
    )
