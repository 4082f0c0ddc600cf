"""Unit tests for GitHub status reporters."""

from __future__ import annotations

from collections.abc import Callable
from unittest.mock import MagicMock

import pytest

from render_status.deploy.reporters import (
    CommitStatusReporter,
    DeploymentReporter,
    create_reporter,
)
from render_status.deploy.reporters.base import build_context, resolve_target_url
from render_status.lib.errors import GitHubAPIError
from render_status.models.deploy import Deploy
from render_status.models.service import ServiceIdentity
from render_status.models.status import Outcome, ReporterMode

TRIGGER_SHA = "abcdefabcdefabcdefabcdefabcdefabcdefabcd"


@pytest.fixture
def github() -> MagicMock:
    """Mocked GitHubClient."""
    client = MagicMock()
    client.repo_url = "https://api.github.com/repos/octo/app"
    client.create_commit_status.side_effect = [{"id": 101}, {"id": 102}, {"id": 103}]
    client.create_deployment.return_value = {"id": 555}
    client.create_deployment_status.return_value = {"id": 1}
    return client


class TestHelpers:
    """Tests for shared reporter helpers."""

    def test_context_label(
        self, identity: ServiceIdentity, make_deploy: Callable[..., Deploy]
    ) -> None:
        """The label names the provider, service and deploy."""
        deploy = make_deploy(deploy_id="dep-1")

        assert build_context(identity, deploy) == "Render – web – dep-1"

    @pytest.mark.parametrize(
        ("outcome", "expect_server"),
        [
            (Outcome.SUCCESS, True),
            (Outcome.PENDING, False),
            (Outcome.FAILURE, False),
            (Outcome.INACTIVE, False),
        ],
    )
    def test_target_url(
        self, identity: ServiceIdentity, outcome: Outcome, expect_server: bool
    ) -> None:
        """Only success links to the live server."""
        expected = identity.server_url if expect_server else identity.dashboard_url

        assert resolve_target_url(outcome, identity) == expected

    def test_report_before_prepare_raises(self, github: MagicMock) -> None:
        """Reporting without a bound deploy is a programming error."""
        reporter = CommitStatusReporter(github, TRIGGER_SHA)

        with pytest.raises(RuntimeError):
            reporter.report(Outcome.PENDING)


class TestCommitStatusReporter:
    """Tests for commit status reporting."""

    def test_reuses_context_and_uses_deploy_commit(
        self,
        github: MagicMock,
        identity: ServiceIdentity,
        make_deploy: Callable[..., Deploy],
    ) -> None:
        """Every update targets the deploy commit with one context."""
        deploy = make_deploy(deploy_id="dep-1", commit_id="c0ffee")
        reporter = CommitStatusReporter(github, TRIGGER_SHA)
        reporter.prepare(identity, deploy)

        reporter.report(Outcome.PENDING)
        reporter.report(Outcome.SUCCESS, "Deploy succeeded")

        calls = github.create_commit_status.call_args_list
        assert len(calls) == 2
        assert {c.kwargs["context"] for c in calls} == {"Render – web – dep-1"}
        assert {c.kwargs["sha"] for c in calls} == {"c0ffee"}
        assert calls[0].kwargs["state"] == "pending"
        assert calls[0].kwargs["target_url"] == identity.dashboard_url
        assert calls[0].kwargs["description"] is None
        assert calls[1].kwargs["state"] == "success"
        assert calls[1].kwargs["target_url"] == identity.server_url
        assert calls[1].kwargs["description"] == "Deploy succeeded"
        assert reporter.record_id == "102"

    def test_falls_back_to_trigger_sha(
        self,
        github: MagicMock,
        identity: ServiceIdentity,
        make_deploy: Callable[..., Deploy],
    ) -> None:
        """Deploys without commit info use the trigger SHA."""
        reporter = CommitStatusReporter(github, TRIGGER_SHA)
        reporter.prepare(identity, make_deploy(commit_id=None))

        reporter.report(Outcome.PENDING)

        assert github.create_commit_status.call_args.kwargs["sha"] == TRIGGER_SHA

    def test_inactive_maps_to_error(
        self,
        github: MagicMock,
        identity: ServiceIdentity,
        make_deploy: Callable[..., Deploy],
    ) -> None:
        """Commit statuses have no inactive state."""
        reporter = CommitStatusReporter(github, TRIGGER_SHA)
        reporter.prepare(identity, make_deploy())

        report = reporter.report(Outcome.INACTIVE, "Deploy deactivated")

        assert github.create_commit_status.call_args.kwargs["state"] == "error"
        assert report.record_id == "101"

    def test_prepare_does_not_call_github(
        self,
        github: MagicMock,
        identity: ServiceIdentity,
        make_deploy: Callable[..., Deploy],
    ) -> None:
        """No record exists until the first report."""
        reporter = CommitStatusReporter(github, TRIGGER_SHA)
        reporter.prepare(identity, make_deploy())

        github.create_commit_status.assert_not_called()
        assert reporter.record_id is None


class TestDeploymentReporter:
    """Tests for deployment status reporting."""

    def test_prepare_creates_one_deployment(
        self,
        github: MagicMock,
        identity: ServiceIdentity,
        make_deploy: Callable[..., Deploy],
    ) -> None:
        """A transient deployment is created for the deploy commit."""
        reporter = DeploymentReporter(github, TRIGGER_SHA, "preview")
        reporter.prepare(identity, make_deploy(commit_id="c0ffee"))

        github.create_deployment.assert_called_once_with(
            ref="c0ffee",
            environment="preview",
            description=f"Preview deployment for {TRIGGER_SHA} on Render",
            transient_environment=True,
            auto_merge=False,
        )
        assert reporter.record_id == "555"

    def test_reports_reuse_deployment_id(
        self,
        github: MagicMock,
        identity: ServiceIdentity,
        make_deploy: Callable[..., Deploy],
    ) -> None:
        """Statuses are appended to the same deployment."""
        reporter = DeploymentReporter(github, TRIGGER_SHA, "preview")
        reporter.prepare(identity, make_deploy())

        reporter.report(Outcome.PENDING)
        reporter.report(Outcome.FAILURE, "Build failed")

        calls = github.create_deployment_status.call_args_list
        assert {c.kwargs["deployment_id"] for c in calls} == {"555"}
        assert calls[1].kwargs["state"] == "failure"
        assert calls[1].kwargs["log_url"] == identity.dashboard_url
        assert calls[1].kwargs["environment_url"] is None
        assert calls[1].kwargs["description"] == "Build failed"
        github.create_deployment.assert_called_once()

    def test_success_sets_environment_url(
        self,
        github: MagicMock,
        identity: ServiceIdentity,
        make_deploy: Callable[..., Deploy],
    ) -> None:
        """Success links both log and environment to the server."""
        reporter = DeploymentReporter(github, TRIGGER_SHA, "preview")
        reporter.prepare(identity, make_deploy())

        reporter.report(Outcome.SUCCESS, "Deploy succeeded")

        kwargs = github.create_deployment_status.call_args.kwargs
        assert kwargs["state"] == "success"
        assert kwargs["environment_url"] == identity.server_url
        assert kwargs["log_url"] == identity.server_url

    def test_inactive_state_passes_through(
        self,
        github: MagicMock,
        identity: ServiceIdentity,
        make_deploy: Callable[..., Deploy],
    ) -> None:
        """Deployment statuses support inactive directly."""
        reporter = DeploymentReporter(github, TRIGGER_SHA, "preview")
        reporter.prepare(identity, make_deploy())

        reporter.report(Outcome.INACTIVE)

        assert github.create_deployment_status.call_args.kwargs["state"] == "inactive"

    def test_missing_deployment_id_raises(
        self,
        github: MagicMock,
        identity: ServiceIdentity,
        make_deploy: Callable[..., Deploy],
    ) -> None:
        """A 202 merge response without an id is an error."""
        github.create_deployment.return_value = {"message": "Auto-merged main"}
        reporter = DeploymentReporter(github, TRIGGER_SHA, "preview")

        with pytest.raises(GitHubAPIError, match="Auto-merged main"):
            reporter.prepare(identity, make_deploy())


class TestCreateReporter:
    """Tests for the reporter factory."""

    def test_commit_status_mode(self, github: MagicMock) -> None:
        reporter = create_reporter(
            ReporterMode.COMMIT_STATUS, github, sha=TRIGGER_SHA, environment="preview"
        )
        assert isinstance(reporter, CommitStatusReporter)
        assert reporter.output_key == "status-id"

    def test_deployment_mode(self, github: MagicMock) -> None:
        reporter = create_reporter(
            ReporterMode.DEPLOYMENT, github, sha=TRIGGER_SHA, environment="preview"
        )
        assert isinstance(reporter, DeploymentReporter)
        assert reporter.output_key == "deployment-id"
