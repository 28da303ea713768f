"""Row mapping for the quiz_submissions table."""

from typing import Any

from feedback_insights.models.submission import Submission


def submission_from_row(row: dict[str, Any]) -> Submission:
    """Build a Submission from a quiz_submissions row (PostgREST JSON)."""
    return Submission.model_validate(
        {
            "id": str(row["id"]) if row.get("id") is not None else None,
            "quiz_title": row.get("quiz_title") or "",
            "responses": row.get("user_responses") or {},
            "total_pages": row.get("total_pages") or 0,
            "completed_pages": row.get("completed_pages") or 0,
            "status": row.get("submission_status") or "completed",
            "created_at": row.get("created_at"),
            "updated_at": row.get("updated_at"),
            "metadata": row.get("metadata") or {},
        }
    )


def row_from_submission(submission: Submission) -> dict[str, Any]:
    """
    Insert payload for a submission. id and timestamps are left to the
    database so they are omitted when unset.
    """
    row: dict[str, Any] = {
        "quiz_title": submission.quiz_title,
        "user_responses": submission.raw_responses(),
        "total_pages": submission.total_pages,
        "completed_pages": submission.completed_pages,
        "submission_status": submission.status,
        "metadata": submission.metadata,
    }
    if submission.id:
        row["id"] = submission.id
    if submission.created_at:
        row["created_at"] = submission.created_at.isoformat()
    return row
