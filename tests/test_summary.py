"""Tests for submission summary statistics."""

from datetime import datetime, timezone

import pytest

from feedback_insights.analytics.summary import (
    analyze_questions,
    completion_rate,
    response_trends,
    summarize_submissions,
    top_responses,
)
from feedback_insights.models.summary import QuestionAnalysis
from tests.conftest import make_submission

NOW = datetime(2026, 10, 19, 23, 0, tzinfo=timezone.utc)


class TestCompletionRate:
    def test_mixed(self, sample_submissions) -> None:
        assert completion_rate(sample_submissions) == pytest.approx(200 / 3)

    def test_empty(self) -> None:
        assert completion_rate([]) == 0.0


class TestAnalyzeQuestions:
    """Tests for analyze_questions."""

    def test_first_seen_question_order(self, sample_submissions) -> None:
        analysis = analyze_questions(sample_submissions)
        assert list(analysis) == ["question1", "question2", "question9", "question10", "question7"]

    def test_checkbox_counts_each_choice(self, sample_submissions) -> None:
        qa = analyze_questions(sample_submissions)["question1"]
        assert qa.type == "checkbox"
        assert qa.total == 2
        assert qa.responses == {
            "Chunky Choco Walnut Cookie": 1,
            "Gluten Free Brownie": 1,
            "Whole Wheat Coffee Walnut Biscotti": 1,
        }

    def test_numeric_answer_counts_total_only(self, sample_submissions) -> None:
        qa = analyze_questions(sample_submissions)["question7"]
        assert qa.total == 1
        assert qa.responses == {}

    def test_text_answers_counted_verbatim(self) -> None:
        subs = [make_submission("Yes"), make_submission("Yes"), make_submission("No")]
        qa = analyze_questions(subs)["q1"]
        assert qa.type == "text"
        assert qa.total == 3
        assert qa.responses == {"Yes": 2, "No": 1}

    def test_blank_text_counts_total_only(self) -> None:
        subs = [make_submission("Yes"), make_submission("   ")]
        qa = analyze_questions(subs)["q1"]
        assert qa.total == 2
        assert qa.responses == {"Yes": 1}


class TestTopResponses:
    def test_top_five_with_percentages(self) -> None:
        qa = QuestionAnalysis(
            total=10,
            responses={"a": 1, "b": 3, "c": 1, "d": 2, "e": 1, "f": 2},
        )
        top = top_responses(qa)
        assert [t.response for t in top] == ["b", "d", "f", "a", "c"]
        assert top[0].count == 3
        assert top[0].percentage == 30.0

    def test_percentage_one_decimal(self) -> None:
        qa = QuestionAnalysis(total=3, responses={"x": 1})
        assert top_responses(qa)[0].percentage == 33.3

    def test_no_responses(self) -> None:
        assert top_responses(QuestionAnalysis()) == []


class TestResponseTrends:
    def test_seven_day_window_oldest_first(self, sample_submissions) -> None:
        trends = response_trends(sample_submissions, now=NOW)
        assert [t.date for t in trends] == [
            "2026-10-13",
            "2026-10-14",
            "2026-10-15",
            "2026-10-16",
            "2026-10-17",
            "2026-10-18",
            "2026-10-19",
        ]
        assert [t.count for t in trends] == [0, 0, 0, 0, 1, 1, 1]

    def test_undated_and_old_submissions_ignored(self) -> None:
        subs = [
            make_submission("x"),
            make_submission("y", created_at=datetime(2026, 1, 1, tzinfo=timezone.utc)),
        ]
        assert sum(t.count for t in response_trends(subs, now=NOW, days=3)) == 0


class TestSummarizeSubmissions:
    def test_summary(self, sample_submissions) -> None:
        summary = summarize_submissions(sample_submissions, now=NOW)
        assert summary.total_submissions == 3
        assert summary.top_responses["question9"][0].count == 1
        assert len(summary.response_trends) == 7

    def test_camel_case_dump(self, sample_submissions) -> None:
        data = summarize_submissions(sample_submissions, now=NOW).model_dump(by_alias=True)
        assert "totalSubmissions" in data
        assert "completionRate" in data
        assert "questionAnalysis" in data
        assert "responseTrends" in data

    def test_empty(self) -> None:
        summary = summarize_submissions([], now=NOW, trend_days=2)
        assert summary.total_submissions == 0
        assert summary.completion_rate == 0.0
        assert summary.question_analysis == {}
        assert [t.count for t in summary.response_trends] == [0, 0]
