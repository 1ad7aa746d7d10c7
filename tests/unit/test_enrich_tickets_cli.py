"""Unit tests for the enrich_tickets command-line front end.

build_container is patched to return orchestrators over in-memory
collaborators, so the commands run end to end without Jira.
"""

from __future__ import annotations

import json
from datetime import UTC, datetime
from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

import pytest

from jira_ai_fields.services.enrichment import BatchAnalysisOrchestrator, BatchUpdateOrchestrator
from jira_ai_fields.services.jira import JiraAPIError
from jira_ai_fields.services.scoring import RuleBasedScorer
from scripts.enrich_tickets import load_updates, main
from tests.helpers.mock_factories import FakeFetcher, RecordingUpdater, make_issue

NOW = datetime(2025, 6, 1, 12, 0, tzinfo=UTC)


def _services(fetcher: FakeFetcher, updater: RecordingUpdater) -> SimpleNamespace:
    return SimpleNamespace(
        analysis=BatchAnalysisOrchestrator(
            fetcher, RuleBasedScorer(clock=lambda: NOW), clock=lambda: NOW
        ),
        update=BatchUpdateOrchestrator(updater),
        aclose=AsyncMock(),
    )


@pytest.fixture
def cli_services():
    fetcher = FakeFetcher([make_issue("WD-1"), make_issue("WD-2"), make_issue("WD-3")])
    updater = RecordingUpdater()
    services = _services(fetcher, updater)
    with (
        patch("jira_ai_fields.services.container.build_container", return_value=services),
        patch("jira_ai_fields.main.setup_logging"),
    ):
        yield SimpleNamespace(fetcher=fetcher, updater=updater, services=services)


class TestLoadUpdates:
    def test_plain_list(self, tmp_path):
        path = tmp_path / "updates.json"
        path.write_text(json.dumps([{"issue_id": "WD-1", "fields": {"ai_impact_score": 3}}]))

        assert load_updates(path) == [{"issue_id": "WD-1", "fields": {"ai_impact_score": 3}}]

    def test_analyze_report_skips_failed_items(self, tmp_path):
        path = tmp_path / "report.json"
        path.write_text(
            json.dumps(
                {
                    "project_key": "WD",
                    "issues": [
                        {"id": "WD-1", "ai_fields": {"ai_impact_score": 6}},
                        {"id": "WD-2", "error": "model timeout"},
                    ],
                }
            )
        )

        assert load_updates(path) == [{"issue_id": "WD-1", "fields": {"ai_impact_score": 6}}]

    def test_other_shapes_rejected(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text('{"issue_id": "WD-1"}')

        with pytest.raises(ValueError):
            load_updates(path)


class TestAnalyzeCommand:
    def test_prints_report(self, cli_services, capsys):
        exit_code = main(["analyze", "--project", "WD", "--limit", "2"])

        assert exit_code == 0
        report = json.loads(capsys.readouterr().out)
        assert report["total_issues"] == 3
        assert report["limit"] == 2
        assert [issue["id"] for issue in report["issues"]] == ["WD-1", "WD-2"]
        assert report["issues"][0]["ai_fields"]["ai_theme_category"] == "その他"
        cli_services.services.aclose.assert_awaited_once()

    def test_status_defaults_to_configured_filter(self, cli_services, capsys):
        from jira_ai_fields.config import settings

        exit_code = main(["analyze", "--project", "WD"])

        assert exit_code == 0
        assert cli_services.fetcher.queries[0].status_filter == settings.default_status_filter
        assert json.loads(capsys.readouterr().out)["limit"] is None

    def test_requires_project_or_jql(self, cli_services):
        assert main(["analyze"]) == 1

    def test_jira_failure_exit_code(self, cli_services):
        cli_services.fetcher.error = JiraAPIError("Invalid Jira credentials", 401)

        assert main(["analyze", "--project", "WD"]) == 1
        cli_services.services.aclose.assert_awaited_once()


class TestUpdateCommand:
    def test_dry_run(self, cli_services, tmp_path, capsys):
        path = tmp_path / "updates.json"
        path.write_text(json.dumps([{"issue_id": "WD-1", "fields": {"ai_impact_score": 3}}]))

        exit_code = main(["update", "--file", str(path), "--dry-run"])

        assert exit_code == 0
        report = json.loads(capsys.readouterr().out)
        assert report["dry_run"] is True
        assert report["updated_count"] == 0
        assert cli_services.updater.calls == []

    def test_writes_fields(self, cli_services, tmp_path, capsys):
        path = tmp_path / "updates.json"
        path.write_text(
            json.dumps(
                [
                    {"issue_id": "WD-1", "fields": {"ai_impact_score": 3}},
                    {"issue_id": "WD-2", "fields": {"note": "x"}},
                ]
            )
        )

        exit_code = main(["update", "--file", str(path)])

        assert exit_code == 0
        report = json.loads(capsys.readouterr().out)
        assert report["updated_count"] == 1
        assert report["logs"][1]["skipped"] is True
        assert cli_services.updater.calls == [("WD-1", {"ai_impact_score": 3})]
