"""SQLite-backed submission store with sync-run tracking."""

import hashlib
import json
import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from feedback_insights.models.submission import Submission

VALID_STATUSES = ("completed", "partial", "abandoned")


class SyncRecord:
    """Record of one pull from a submission source."""

    def __init__(
        self,
        id: int,
        source: str,
        started_at: datetime,
        finished_at: Optional[datetime],
        status: str,
        items_fetched: int,
        items_new: int,
    ):
        self.id = id
        self.source = source
        self.started_at = started_at
        self.finished_at = finished_at
        self.status = status
        self.items_fetched = items_fetched
        self.items_new = items_new


def submission_content_hash(submission: Submission) -> str:
    """Stable hash of the answers and status; used as id when the source gives none."""
    payload = json.dumps(
        {
            "quiz_title": submission.quiz_title,
            "responses": submission.raw_responses(),
            "status": submission.status,
            "created_at": submission.created_at.isoformat() if submission.created_at else None,
        },
        sort_keys=True,
        default=str,
    )
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


def _utc_iso(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat()


class SubmissionStore:
    """
    SQLite store for submissions.
    Submissions are keyed by their source id (or content hash when missing);
    re-storing the same id replaces the stored data.
    """

    def __init__(self, db_path: str | Path = "feedback_insights.db"):
        self._db_path = Path(db_path)
        self._ensure_schema()

    def _connection(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self._db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _ensure_schema(self) -> None:
        schema_path = Path(__file__).parent / "schema.sql"
        with self._connection() as conn:
            conn.executescript(schema_path.read_text())

    def _serialize(self, submission: Submission) -> str:
        return json.dumps(submission.model_dump(mode="json"), default=str)

    def _deserialize(self, row: sqlite3.Row) -> Submission:
        return Submission.model_validate(json.loads(row["data"]))

    def upsert(self, submission: Submission) -> bool:
        """Insert or replace a submission. Returns True when it was new."""
        content_hash = submission_content_hash(submission)
        sub = submission if submission.id else submission.model_copy(update={"id": content_hash})
        now = datetime.now(timezone.utc).isoformat()
        # UTC so that ORDER BY created_at on the text column is chronological
        created = _utc_iso(sub.created_at) if sub.created_at else None

        with self._connection() as conn:
            existing = conn.execute(
                "SELECT id FROM submissions WHERE id = ?", (sub.id,)
            ).fetchone()
            if existing:
                conn.execute(
                    """
                    UPDATE submissions SET
                        quiz_title = ?, status = ?, content_hash = ?, data = ?, created_at = ?
                    WHERE id = ?
                    """,
                    (sub.quiz_title, sub.status, content_hash, self._serialize(sub), created, sub.id),
                )
            else:
                conn.execute(
                    """
                    INSERT INTO submissions (id, quiz_title, status, content_hash, data, created_at, stored_at)
                    VALUES (?, ?, ?, ?, ?, ?, ?)
                    """,
                    (sub.id, sub.quiz_title, sub.status, content_hash, self._serialize(sub), created, now),
                )
            conn.commit()

        return existing is None

    def get_all(self) -> list[Submission]:
        """Return all submissions, newest first."""
        with self._connection() as conn:
            rows = conn.execute(
                "SELECT * FROM submissions ORDER BY created_at DESC, stored_at DESC"
            ).fetchall()
        return [self._deserialize(r) for r in rows]

    def get_by_status(self, status: str) -> list[Submission]:
        """Return submissions with the given status, newest first."""
        if status not in VALID_STATUSES:
            raise ValueError(f"Unknown status: {status}. Expected one of {list(VALID_STATUSES)}")
        with self._connection() as conn:
            rows = conn.execute(
                "SELECT * FROM submissions WHERE status = ? ORDER BY created_at DESC, stored_at DESC",
                (status,),
            ).fetchall()
        return [self._deserialize(r) for r in rows]

    def get(self, submission_id: str) -> Optional[Submission]:
        """Get single submission by id."""
        with self._connection() as conn:
            row = conn.execute("SELECT * FROM submissions WHERE id = ?", (submission_id,)).fetchone()
        return self._deserialize(row) if row else None

    def count(self, status: Optional[str] = None) -> int:
        """Number of stored submissions, optionally for one status."""
        with self._connection() as conn:
            if status:
                row = conn.execute(
                    "SELECT COUNT(*) AS n FROM submissions WHERE status = ?", (status,)
                ).fetchone()
            else:
                row = conn.execute("SELECT COUNT(*) AS n FROM submissions").fetchone()
        return int(row["n"])

    def start_sync(self, source: str) -> SyncRecord:
        """Record start of a sync. Returns SyncRecord with id."""
        now = datetime.now(timezone.utc).isoformat()
        with self._connection() as conn:
            cursor = conn.execute(
                "INSERT INTO syncs (source, started_at, status, items_fetched, items_new) VALUES (?, ?, 'running', 0, 0)",
                (source, now),
            )
            conn.commit()
            sync_id = cursor.lastrowid
        return SyncRecord(
            id=sync_id or 0,
            source=source,
            started_at=datetime.fromisoformat(now),
            finished_at=None,
            status="running",
            items_fetched=0,
            items_new=0,
        )

    def finish_sync(
        self,
        sync_id: int,
        items_fetched: int,
        items_new: int,
        status: str = "completed",
    ) -> None:
        """Record completion of a sync."""
        now = datetime.now(timezone.utc).isoformat()
        with self._connection() as conn:
            conn.execute(
                "UPDATE syncs SET finished_at = ?, status = ?, items_fetched = ?, items_new = ? WHERE id = ?",
                (now, status, items_fetched, items_new, sync_id),
            )
            conn.commit()

    def last_sync(self, source: str) -> Optional[SyncRecord]:
        """Most recent completed sync for a source."""
        with self._connection() as conn:
            row = conn.execute(
                "SELECT * FROM syncs WHERE source = ? AND status = 'completed' ORDER BY id DESC LIMIT 1",
                (source,),
            ).fetchone()
        if row is None:
            return None
        return SyncRecord(
            id=row["id"],
            source=row["source"],
            started_at=datetime.fromisoformat(row["started_at"]),
            finished_at=datetime.fromisoformat(row["finished_at"]) if row["finished_at"] else None,
            status=row["status"],
            items_fetched=row["items_fetched"],
            items_new=row["items_new"],
        )
