"""Unit tests for the Render comment parser."""

from __future__ import annotations

from pathlib import Path

import pytest

from render_status.lib.errors import CommentParseError
from render_status.models.service import ServiceIdentity
from render_status.parser.comment import (
    MARKER_PHRASE,
    build_dashboard_url,
    is_render_comment,
    parse_comment,
)


class TestSkip:
    """Comments without the Render marker are skipped, never rejected."""

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "LGTM, ship it",
            "See https://dashboard.render.com/web/srv-abc123 for logs",
            "https://api-pr-1-abcd.onrender.com is up",
            "Your Render server is https://api-pr-1-abcd.onrender.com",
        ],
    )
    def test_non_render_comment_returns_none(self, text: str) -> None:
        """Text without the marker phrase yields None."""
        assert parse_comment(text) is None

    def test_marker_detection_is_case_insensitive(self) -> None:
        """The marker phrase matches regardless of case."""
        assert is_render_comment(MARKER_PHRASE.upper())
        assert not is_render_comment("Your Render PR preview is ready")


class TestParseSuccess:
    """Tests for well-formed Render comments."""

    def test_parses_standard_comment(
        self, render_comment: str, identity: ServiceIdentity
    ) -> None:
        """All four identity fields are extracted."""
        assert parse_comment(render_comment) == identity

    def test_parse_is_deterministic(self, render_comment: str) -> None:
        """Parsing the same text twice gives equal identities."""
        assert parse_comment(render_comment) == parse_comment(render_comment)

    def test_parses_fixture_file(self, fixture_dir: Path) -> None:
        """The comment fixture parses like an inline comment."""
        text = (fixture_dir / "render" / "comment.md").read_text(encoding="utf-8")
        result = parse_comment(text)

        assert result is not None
        assert result.service_id == "srv-ci9bopliuie2p3pd7a3g"

    def test_trailing_punctuation_is_not_captured(self, render_comment: str) -> None:
        """Sentence periods after the URLs are not part of the captures."""
        result = parse_comment(render_comment)

        assert result is not None
        assert result.server_url == "https://api-pr-324-ovto.onrender.com"
        assert not result.service_id.endswith(".")

    def test_dashboard_url_is_rebuilt(self) -> None:
        """The dashboard URL is rebuilt from the captured tokens."""
        text = (
            "Your Render PR Server URL is https://api-pr-7-zzzz.onrender.com.\n"
            "Follow its progress at (https://dashboard.render.com/web/srv-xyz789)."
        )
        result = parse_comment(text)

        assert result is not None
        assert result.dashboard_url == "https://dashboard.render.com/web/srv-xyz789"
        assert result.dashboard_url == build_dashboard_url("web", "srv-xyz789")

    def test_literal_parts_match_case_insensitively(self) -> None:
        """Upper-case literals still match and tokens keep their case."""
        text = (
            "YOUR RENDER PR SERVER URL IS https://API-PR-5-AbCd.ONRENDER.COM.\n"
            "Follow its progress at https://DASHBOARD.RENDER.COM/Web/srv-ABC."
        )
        result = parse_comment(text)

        assert result is not None
        assert result.server_url == "https://API-PR-5-AbCd.ONRENDER.COM"
        assert result.service_name == "Web"
        assert result.service_id == "srv-ABC"

    def test_accepts_other_service_prefixes(self) -> None:
        """Any service slug before -pr- is accepted."""
        text = (
            "Your Render PR Server URL is https://my-frontend-pr-42.onrender.com.\n"
            "Follow its progress at https://dashboard.render.com/static/srv-f00."
        )
        result = parse_comment(text)

        assert result is not None
        assert result.server_url == "https://my-frontend-pr-42.onrender.com"
        assert result.service_name == "static"

    @pytest.mark.parametrize(
        "earlier_link",
        [
            "https://dashboard.render.com/",
            "https://dashboard.render.com/blueprints",
        ],
    )
    def test_skips_partial_dashboard_link_before_full_one(
        self, earlier_link: str
    ) -> None:
        """An incomplete dashboard link does not hide a later full one."""
        text = (
            "Your Render PR Server URL is https://api-pr-324-ovto.onrender.com.\n"
            f"Manage previews from {earlier_link} or follow this one at\n"
            "https://dashboard.render.com/web/srv-ci9bopliuie2p3pd7a3g."
        )
        result = parse_comment(text)

        assert result is not None
        assert result.service_name == "web"
        assert result.service_id == "srv-ci9bopliuie2p3pd7a3g"


class TestParseFailure:
    """Render comments with missing fields raise distinct errors."""

    def test_missing_server_url(self) -> None:
        """Marker without a preview URL reports the server URL."""
        text = (
            "Your Render PR Server URL is pending.\n"
            "Follow its progress at https://dashboard.render.com/web/srv-abc."
        )
        with pytest.raises(CommentParseError, match="No server URL found") as exc:
            parse_comment(text)
        assert exc.value.field == "server_url"

    def test_server_url_on_wrong_domain(self) -> None:
        """A URL outside onrender.com is not a preview server URL."""
        text = (
            "Your Render PR Server URL is https://api-pr-1-abcd.example.com.\n"
            "Follow its progress at https://dashboard.render.com/web/srv-abc."
        )
        with pytest.raises(CommentParseError, match="No server URL found"):
            parse_comment(text)

    def test_missing_dashboard_url(self) -> None:
        """No dashboard URL at all reports the service name."""
        text = "Your Render PR Server URL is https://api-pr-1-abcd.onrender.com."
        with pytest.raises(CommentParseError, match="No service name found") as exc:
            parse_comment(text)
        assert exc.value.field == "service_name"

    def test_missing_service_id(self) -> None:
        """Dashboard URL without an id reports the service ID."""
        text = (
            "Your Render PR Server URL is https://api-pr-1-abcd.onrender.com.\n"
            "Follow its progress at https://dashboard.render.com/web."
        )
        with pytest.raises(CommentParseError, match="No service ID found") as exc:
            parse_comment(text)
        assert exc.value.field == "service_id"
