"""render-deploy-status - Mirror Render PR preview deploys onto GitHub.

Watches for the comment Render posts on a pull request, finds the preview
deploy it announces, and polls it until it goes live, fails, or is
deactivated. Progress is recorded on GitHub as a commit status or as a
deployment with deployment statuses.
"""

from render_status.lib.errors import CommentParseError, ConfigError, RenderStatusError
from render_status.parser.comment import parse_comment

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "CommentParseError",
    "ConfigError",
    "RenderStatusError",
    "parse_comment",
]
