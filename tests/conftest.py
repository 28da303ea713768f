"""Pytest fixtures for feedback-insights tests."""

import json
import tempfile
from pathlib import Path
from typing import Any

import pytest

from feedback_insights.models.submission import Submission


def make_submission(*answers: Any, **kwargs) -> Submission:
    """Submission whose responses are q1..qN for the given answers."""
    responses = {f"q{i}": a for i, a in enumerate(answers, start=1)}
    return Submission(responses=responses, **kwargs)


def submissions_for_tokens(tokens: list[str]) -> list[Submission]:
    """One single-answer submission per token."""
    return [make_submission(t) for t in tokens]


@pytest.fixture
def sample_rows() -> list[dict[str, Any]]:
    """Rows as the hosted quiz_submissions table returns them."""
    return [
        {
            "id": "a1",
            "quiz_title": "Product Feedback",
            "user_responses": {
                "question1": ["Chunky Choco Walnut Cookie", "Gluten Free Brownie"],
                "question2": "3",
                "question9": "Love the cookie, great quality. A bit expensive though.",
                "question10": ["Add more flavors"],
            },
            "total_pages": 9,
            "completed_pages": 9,
            "submission_status": "completed",
            "created_at": "2026-10-18T10:15:00+00:00",
            "metadata": {"timestamp": "2026-10-18T10:15:00+00:00"},
        },
        {
            "id": "b2",
            "quiz_title": "Product Feedback",
            "user_responses": {
                "question1": ["Whole Wheat Coffee Walnut Biscotti"],
                "question7": 4,
                "question9": "The coffee biscotti was slow to arrive and overpriced.",
            },
            "total_pages": 9,
            "completed_pages": 5,
            "submission_status": "partial",
            "created_at": "2026-10-17T08:00:00+00:00",
            "metadata": {},
        },
        {
            "id": "c3",
            "quiz_title": "Product Feedback",
            "user_responses": {
                "question9": "Fresh bread, better than other brands. Excellent value.",
            },
            "total_pages": 9,
            "completed_pages": 9,
            "submission_status": "completed",
            "created_at": "2026-10-19T12:30:00+00:00",
            "metadata": {},
        },
    ]


@pytest.fixture
def sample_submissions(sample_rows: list[dict[str, Any]]) -> list[Submission]:
    from feedback_insights.connectors.supabase.parsers import submission_from_row

    return [submission_from_row(r) for r in sample_rows]


@pytest.fixture
def temp_db() -> Path:
    """Temporary database path for isolated tests."""
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        path = Path(f.name)
    yield path
    path.unlink(missing_ok=True)


@pytest.fixture
def export_file(tmp_path: Path, sample_rows: list[dict[str, Any]]) -> Path:
    """JSON export holding the sample rows."""
    path = tmp_path / "submissions.json"
    path.write_text(json.dumps(sample_rows), encoding="utf-8")
    return path
