"""HTTP clients for the Render and GitHub APIs."""

from render_status.services.github_client import GitHubClient
from render_status.services.render_client import RenderClient

__all__ = ["GitHubClient", "RenderClient"]
