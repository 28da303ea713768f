"""JSON export connector: a file holding an array of quiz_submissions rows."""

import json
import logging
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from feedback_insights.connectors.base import BaseConnector
from feedback_insights.connectors.supabase.parsers import row_from_submission, submission_from_row
from feedback_insights.models.submission import Submission

logger = logging.getLogger(__name__)


class JsonFileConnector(BaseConnector):
    """Reads and appends rows in the same shape the hosted table exports."""

    source_id = "jsonfile"

    def __init__(self, path: Optional[str | Path] = None):
        if path is None:
            raise ValueError("jsonfile connector requires a path")
        self._path = Path(path)

    def _read_rows(self) -> list[dict]:
        if not self._path.exists():
            return []
        data = json.loads(self._path.read_text(encoding="utf-8") or "[]")
        if not isinstance(data, list):
            raise ValueError(f"{self._path} must contain a JSON array of submissions")
        return data

    def fetch_all(self) -> list[Submission]:
        """All rows, newest first (rows without created_at last)."""
        submissions: list[Submission] = []
        for row in self._read_rows():
            try:
                submissions.append(submission_from_row(row))
            except (ValidationError, KeyError, TypeError) as e:
                logger.warning("Skipping malformed row in %s: %s", self._path, e)

        dated = [s for s in submissions if s.created_at is not None]
        undated = [s for s in submissions if s.created_at is None]
        dated.sort(key=lambda s: _as_utc(s.created_at), reverse=True)
        return dated + undated

    def insert(self, submission: Submission) -> Submission:
        """Append a row, assigning id and created_at when missing."""
        now = datetime.now(timezone.utc)
        stored = submission.model_copy(
            update={
                "id": submission.id or str(uuid.uuid4()),
                "created_at": submission.created_at or now,
                "updated_at": now,
            }
        )
        rows = self._read_rows()
        row = row_from_submission(stored)
        row["updated_at"] = now.isoformat()
        rows.append(row)
        self._path.write_text(json.dumps(rows, indent=2, default=str), encoding="utf-8")
        return stored


def _as_utc(value: datetime) -> datetime:
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
