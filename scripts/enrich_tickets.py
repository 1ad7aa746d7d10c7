"""Command-line front end for AI field analysis and write-back.

Usage:
    python -m scripts.enrich_tickets analyze --project WD [--status 未着手] [--limit 20]
    python -m scripts.enrich_tickets update --file updates.json [--dry-run]
    python -m scripts.enrich_tickets serve [--port 3000]

`analyze` prints the analysis report as JSON. `update` reads a JSON list of
{"issue_id": ..., "fields": {...}} objects (an `analyze` output with its
`issues` list works too) and prints the update report.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Analyze and update Jira AI fields.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze = subparsers.add_parser("analyze", help="Score issues and print the report.")
    analyze.add_argument("--project", help="Jira project key, e.g. WD.")
    analyze.add_argument("--status", help="Status filter. Defaults to DEFAULT_STATUS_FILTER.")
    analyze.add_argument("--jql", help="Explicit JQL; overrides --project/--status.")
    analyze.add_argument("--limit", default=None, help="Maximum issues to score, or 'unlimited'.")

    update = subparsers.add_parser("update", help="Write ai_* fields back to Jira.")
    update.add_argument("--file", type=Path, required=True, help="JSON file with updates.")
    update.add_argument("--dry-run", action="store_true", help="Sanitize and report only.")

    serve = subparsers.add_parser("serve", help="Run the HTTP API with uvicorn.")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=3000)

    return parser


def load_updates(path: Path) -> list[dict[str, Any]]:
    """Read update items; accepts a bare list or an analyze report."""
    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, dict) and isinstance(data.get("issues"), list):
        return [
            {"issue_id": item.get("id"), "fields": item.get("ai_fields")}
            for item in data["issues"]
            if "error" not in item
        ]
    if isinstance(data, list):
        return data
    raise ValueError(f"{path} must contain a JSON list or an analyze report")


async def run_analyze(args: argparse.Namespace) -> dict[str, Any]:
    from jira_ai_fields.config import settings
    from jira_ai_fields.schemas.tickets import AnalyzeTicketsResponse, parse_limit
    from jira_ai_fields.services.container import build_container
    from jira_ai_fields.services.jira import IssueQuery

    if not args.project and not args.jql:
        raise ValueError("--project or --jql is required")

    query = IssueQuery(
        project_key=args.project,
        status_filter=args.status or settings.default_status_filter,
        jql=args.jql,
    )
    services = build_container(settings)
    try:
        report = await services.analysis.run(query, limit=parse_limit(args.limit))
    finally:
        await services.aclose()
    return AnalyzeTicketsResponse.from_report(report).model_dump()


async def run_update(args: argparse.Namespace) -> dict[str, Any]:
    from jira_ai_fields.config import settings
    from jira_ai_fields.schemas.tickets import UpdateFieldsResponse
    from jira_ai_fields.services.container import build_container
    from jira_ai_fields.services.enrichment import FieldUpdate

    updates = [
        FieldUpdate(issue_id=item.get("issue_id"), fields=item.get("fields"))
        for item in load_updates(args.file)
    ]
    services = build_container(settings)
    try:
        report = await services.update.run(updates, dry_run=args.dry_run)
    finally:
        await services.aclose()
    return UpdateFieldsResponse.from_report(report).model_dump(exclude_none=True)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    from jira_ai_fields.core.exceptions import EnrichmentError
    from jira_ai_fields.main import setup_logging
    from jira_ai_fields.services.jira import JiraAPIError

    if args.command == "serve":
        import uvicorn

        uvicorn.run("jira_ai_fields.main:app", host=args.host, port=args.port)
        return 0

    # stdout carries the JSON report
    setup_logging(stream=sys.stderr)

    try:
        if args.command == "analyze":
            result = asyncio.run(run_analyze(args))
        else:
            result = asyncio.run(run_update(args))
    except (EnrichmentError, JiraAPIError, ValueError) as e:
        logger.error(str(e))
        return 1

    print(json.dumps(result, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
