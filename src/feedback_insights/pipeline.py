"""Pipeline orchestration: pull submissions -> store -> analyze."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from feedback_insights.analytics import InsightEngine, summarize_submissions
from feedback_insights.connectors.base import BaseConnector
from feedback_insights.models.insights import AnalysisReport
from feedback_insights.models.submission import Submission
from feedback_insights.models.summary import SubmissionSummary
from feedback_insights.store import SubmissionStore

logger = logging.getLogger(__name__)


def sync_submissions(
    connector: BaseConnector,
    store: SubmissionStore,
    *,
    since: Optional[datetime] = None,
) -> tuple[int, int]:
    """
    Pull submissions from a source into the store.
    Returns (fetched, new). The sync is recorded as failed if fetching raises.
    """
    sync = store.start_sync(connector.source_id)
    try:
        submissions = connector.fetch_since(since) if since else connector.fetch_all()
    except Exception:
        store.finish_sync(sync.id, items_fetched=0, items_new=0, status="failed")
        raise

    items_new = 0
    for submission in submissions:
        if store.upsert(submission):
            items_new += 1
    store.finish_sync(sync.id, items_fetched=len(submissions), items_new=items_new)
    logger.info(
        "Synced %s: %d fetched, %d new", connector.source_id, len(submissions), items_new
    )
    return len(submissions), items_new


def load_submissions(db_path: Path, status: Optional[str] = None) -> list[Submission]:
    """Submissions from the store, optionally for one status."""
    store = SubmissionStore(db_path)
    return store.get_by_status(status) if status else store.get_all()


def run_analysis(db_path: Path, *, status: Optional[str] = None) -> AnalysisReport:
    """Load submissions from the store and run the insight engine."""
    submissions = load_submissions(db_path, status)
    if not submissions:
        logger.warning("No submissions in %s; analysis will be empty", db_path)
    return InsightEngine().analyze(submissions)


def run_summary(db_path: Path, *, now: Optional[datetime] = None) -> SubmissionSummary:
    """Load every stored submission and summarize it."""
    return summarize_submissions(load_submissions(db_path), now=now)
