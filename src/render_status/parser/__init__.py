"""Parsing of Render pull request comments."""

from render_status.parser.comment import (
    MARKER_PHRASE,
    build_dashboard_url,
    is_render_comment,
    parse_comment,
)

__all__ = [
    "MARKER_PHRASE",
    "build_dashboard_url",
    "is_render_comment",
    "parse_comment",
]
