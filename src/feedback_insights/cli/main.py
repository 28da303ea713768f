"""Main CLI entry point."""

import argparse
import json
import logging
import os
import sys
import uuid
from datetime import datetime
from pathlib import Path

DEFAULT_DB = Path(os.environ.get("FEEDBACK_INSIGHTS_DB", "feedback_insights.db"))


def main(argv: list[str] | None = None) -> None:
    """Parse args and dispatch to subcommands."""
    parser = argparse.ArgumentParser(
        prog="feedback-insights",
        description="Consumer feedback submissions and business insights",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # pull
    pull_parser = subparsers.add_parser("pull", help="Pull submissions from a source into the store")
    pull_parser.add_argument(
        "--source",
        default="supabase",
        choices=["supabase", "jsonfile"],
        help="Source to pull from",
    )
    pull_parser.add_argument(
        "--path",
        type=Path,
        default=None,
        help="Export file for --source jsonfile",
    )
    pull_parser.add_argument(
        "--since",
        type=str,
        default=None,
        help="Only pull submissions created on/after this date (YYYY-MM-DD)",
    )
    pull_parser.add_argument("--db", type=Path, default=DEFAULT_DB, help="Path to SQLite database")

    # submit
    submit_parser = subparsers.add_parser("submit", help="Insert one submission from an answers JSON file")
    submit_parser.add_argument(
        "--input",
        type=Path,
        required=True,
        help="JSON object mapping question id -> answer",
    )
    submit_parser.add_argument(
        "--form",
        type=Path,
        default=None,
        help="Form definition YAML (default: built-in Product Feedback form)",
    )
    submit_parser.add_argument(
        "--completed-pages",
        type=int,
        default=None,
        help="Pages the respondent actually completed (overrides derivation from answers)",
    )
    submit_parser.add_argument(
        "--source",
        default=None,
        choices=["supabase", "jsonfile"],
        help="Also insert into this source",
    )
    submit_parser.add_argument("--path", type=Path, default=None, help="Export file for --source jsonfile")
    submit_parser.add_argument("--db", type=Path, default=DEFAULT_DB, help="Path to SQLite database")

    # store
    store_parser = subparsers.add_parser("store", help="Query the submission store")
    store_parser.add_argument("--db", type=Path, default=DEFAULT_DB, help="Path to SQLite database")
    store_parser.add_argument(
        "action",
        choices=["list", "count"],
        help="List submissions or show count",
    )
    store_parser.add_argument(
        "--status",
        type=str,
        default=None,
        choices=["completed", "partial", "abandoned"],
        help="Filter by status",
    )

    # analyze
    analyze_parser = subparsers.add_parser("analyze", help="Generate business insights from submissions")
    analyze_parser.add_argument("--db", type=Path, default=DEFAULT_DB, help="Read submissions from store")
    analyze_parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help="Read submissions from a JSON export (alternative to --db)",
    )
    analyze_parser.add_argument(
        "--status",
        type=str,
        default=None,
        choices=["completed", "partial", "abandoned"],
        help="Only analyze submissions with this status",
    )
    analyze_parser.add_argument(
        "--section",
        default="all",
        choices=["all", "insights", "products", "opportunities"],
        help="Which part of the report to print",
    )
    analyze_parser.add_argument("--output", type=Path, default=None, help="Write results to file")

    # summary
    summary_parser = subparsers.add_parser("summary", help="Completion rate and per-question counts")
    summary_parser.add_argument("--db", type=Path, default=DEFAULT_DB, help="Read submissions from store")
    summary_parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help="Read submissions from a JSON export (alternative to --db)",
    )
    summary_parser.add_argument("--output", type=Path, default=None, help="Write results to file")

    # luckydraw
    draw_parser = subparsers.add_parser("luckydraw", help="List lucky draw entries or draw a winner")
    draw_parser.add_argument("--db", type=Path, default=DEFAULT_DB, help="Read submissions from store")
    draw_parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help="Read submissions from a JSON export (alternative to --db)",
    )
    draw_parser.add_argument("--draw", action="store_true", help="Draw one winner instead of listing entries")
    draw_parser.add_argument("--seed", type=int, default=None, help="Random seed for a reproducible draw")
    draw_parser.add_argument("--output", type=Path, default=None, help="Write results to file")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "pull":
        _run_pull(args)
    elif args.command == "submit":
        _run_submit(args)
    elif args.command == "store":
        _run_store(args)
    elif args.command == "analyze":
        _run_analyze(args)
    elif args.command == "summary":
        _run_summary(args)
    elif args.command == "luckydraw":
        _run_luckydraw(args)
    else:
        parser.print_help()


def _connector_kwargs(args: argparse.Namespace) -> dict:
    if args.source == "jsonfile":
        if args.path is None:
            raise SystemExit("--source jsonfile requires --path")
        return {"path": args.path}
    return {}


def _get_connector(args: argparse.Namespace):
    from feedback_insights.connectors.registry import ConnectorRegistry

    try:
        return ConnectorRegistry.get(args.source, **_connector_kwargs(args))
    except RuntimeError as e:
        raise SystemExit(str(e))


def _load_submissions(args: argparse.Namespace, status: str | None = None) -> list:
    """Submissions from --input (JSON export) or the store."""
    from feedback_insights.connectors.jsonfile import JsonFileConnector
    from feedback_insights.pipeline import load_submissions

    if args.input:
        if not args.input.exists():
            raise SystemExit(f"Input file not found: {args.input}")
        submissions = JsonFileConnector(args.input).fetch_all()
        if status:
            submissions = [s for s in submissions if s.status == status]
        return submissions
    return load_submissions(args.db, status)


def _emit(data, output: Path | None, message: str) -> None:
    text = json.dumps(data, indent=2, default=str)
    if output:
        output.write_text(text, encoding="utf-8")
        print(message.format(output=output))
    else:
        print(text)


def _run_pull(args: argparse.Namespace) -> None:
    """Run pull command."""
    from feedback_insights.pipeline import sync_submissions
    from feedback_insights.store import SubmissionStore

    since_dt = None
    if args.since:
        try:
            since_dt = datetime.strptime(args.since, "%Y-%m-%d")
        except ValueError:
            raise SystemExit("Invalid --since format. Use YYYY-MM-DD.")

    connector = _get_connector(args)
    store = SubmissionStore(args.db)
    fetched, new = sync_submissions(connector, store, since=since_dt)
    print(f"Store: {fetched} fetched, {new} new")


def _run_submit(args: argparse.Namespace) -> None:
    """Run submit command."""
    from feedback_insights.models.form import FormDefinition
    from feedback_insights.store import SubmissionStore

    try:
        responses = json.loads(args.input.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise SystemExit(f"Could not read answers from {args.input}: {e}")
    if not isinstance(responses, dict):
        raise SystemExit("Answers file must be a JSON object of question id -> answer")

    form = FormDefinition.from_yaml(args.form) if args.form else FormDefinition.default()
    submission = form.build_submission(responses, completed_pages=args.completed_pages)

    if args.source:
        submission = _get_connector(args).insert(submission)
    if not submission.id:
        # identical answers from different respondents are separate submissions
        submission = submission.model_copy(update={"id": str(uuid.uuid4())})

    store = SubmissionStore(args.db)
    store.upsert(submission)
    print(
        f"Stored {submission.status} submission "
        f"({submission.completed_pages}/{submission.total_pages} pages)"
    )


def _run_store(args: argparse.Namespace) -> None:
    """Run store command."""
    from feedback_insights.store import SubmissionStore

    store = SubmissionStore(args.db)
    if args.action == "list":
        subs = store.get_by_status(args.status) if args.status else store.get_all()
        print(json.dumps([s.model_dump(mode="json") for s in subs], indent=2, default=str))
    elif args.action == "count":
        print(store.count(args.status))


def _run_analyze(args: argparse.Namespace) -> None:
    """Run analyze command."""
    from feedback_insights.analytics import InsightEngine

    submissions = _load_submissions(args, args.status)
    if not submissions:
        print(
            "No submissions to analyze. Pull first:\n"
            "  feedback-insights pull --source supabase --db feedback_insights.db",
            file=sys.stderr,
        )
        raise SystemExit(1)

    report = InsightEngine().analyze(submissions)
    data = report.model_dump(mode="json", by_alias=True)
    sections = {
        "insights": "businessInsights",
        "products": "productInsights",
        "opportunities": "salesOpportunities",
    }
    if args.section != "all":
        data = data[sections[args.section]]

    _emit(
        data,
        args.output,
        f"Analyzed {len(submissions)} submissions: "
        f"{len(report.business_insights)} insights, "
        f"{len(report.product_insights)} products, "
        f"{len(report.sales_opportunities)} opportunities (wrote to {{output}})",
    )


def _run_summary(args: argparse.Namespace) -> None:
    """Run summary command."""
    from feedback_insights.analytics import summarize_submissions

    submissions = _load_submissions(args)
    summary = summarize_submissions(submissions)
    _emit(
        summary.model_dump(mode="json", by_alias=True),
        args.output,
        f"Summarized {summary.total_submissions} submissions (wrote to {{output}})",
    )


def _run_luckydraw(args: argparse.Namespace) -> None:
    """Run luckydraw command."""
    import random

    from feedback_insights.luckydraw import draw_winner, valid_entries

    entries = valid_entries(_load_submissions(args))
    if not args.draw:
        _emit(
            [e.model_dump(mode="json", by_alias=True) for e in entries],
            args.output,
            f"Found {len(entries)} lucky draw entries (wrote to {{output}})",
        )
        return

    try:
        winner = draw_winner(entries, random.Random(args.seed))
    except ValueError as e:
        raise SystemExit(str(e))
    _emit(
        winner.model_dump(mode="json", by_alias=True),
        args.output,
        f"Drew a winner from {len(entries)} entries (wrote to {{output}})",
    )


if __name__ == "__main__":
    main()
