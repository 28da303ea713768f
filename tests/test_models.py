"""Unit tests for submission and output models."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from feedback_insights.models import (
    AnalysisReport,
    Answer,
    AnswerKind,
    BusinessInsight,
    ProductInsight,
    SalesOpportunity,
    Submission,
)


class TestAnswerFromRaw:
    """Tests for Answer.from_raw classification."""

    def test_string_is_text(self) -> None:
        answer = Answer.from_raw("Loved it")
        assert answer.kind == AnswerKind.TEXT
        assert answer.text == "Loved it"

    def test_numeric_string_stays_text(self) -> None:
        """Ratings posted as strings are text, not numbers."""
        assert Answer.from_raw("3").kind == AnswerKind.TEXT

    def test_list_is_choices(self) -> None:
        answer = Answer.from_raw(["Tea", "Coffee"])
        assert answer.kind == AnswerKind.CHOICES
        assert answer.choices == ["Tea", "Coffee"]

    def test_list_drops_non_strings(self) -> None:
        answer = Answer.from_raw(["Tea", 4, None])
        assert answer.choices == ["Tea"]

    def test_number(self) -> None:
        answer = Answer.from_raw(4)
        assert answer.kind == AnswerKind.NUMBER
        assert answer.number == 4.0

    def test_bool_and_none_unsupported(self) -> None:
        assert Answer.from_raw(True).kind == AnswerKind.UNSUPPORTED
        assert Answer.from_raw(None).kind == AnswerKind.UNSUPPORTED
        assert Answer.from_raw({"nested": "x"}).kind == AnswerKind.UNSUPPORTED

    def test_to_raw_round_trips_values(self) -> None:
        assert Answer.from_raw("x").to_raw() == "x"
        assert Answer.from_raw(["a", "b"]).to_raw() == ["a", "b"]
        assert Answer.from_raw(4).to_raw() == 4
        assert Answer.from_raw(4.5).to_raw() == 4.5

    def test_is_blank(self) -> None:
        assert Answer.from_raw("   ").is_blank is True
        assert Answer.from_raw([" "]).is_blank is True
        assert Answer.from_raw(None).is_blank is True
        assert Answer.from_raw(0).is_blank is False


class TestSubmission:
    """Tests for Submission."""

    def test_responses_are_classified(self) -> None:
        sub = Submission(responses={"q1": "text", "q2": ["a"], "q3": 5})
        kinds = [a.kind for a in sub.responses.values()]
        assert kinds == [AnswerKind.TEXT, AnswerKind.CHOICES, AnswerKind.NUMBER]

    def test_response_order_preserved(self) -> None:
        sub = Submission(responses={"z": "1", "a": "2", "m": "3"})
        assert list(sub.responses) == ["z", "a", "m"]

    def test_dump_returns_raw_values(self) -> None:
        raw = {"q1": "Great", "q2": ["Tea"], "q3": 3}
        sub = Submission(responses=raw)
        assert sub.model_dump(mode="json")["responses"] == raw
        assert sub.raw_responses() == raw

    def test_dump_and_validate_is_stable(self) -> None:
        sub = Submission(
            id="x",
            responses={"q1": ["Tea", "Coffee"]},
            status="partial",
            created_at=datetime(2026, 10, 1, tzinfo=timezone.utc),
        )
        again = Submission.model_validate(sub.model_dump(mode="json"))
        assert again == sub

    def test_invalid_status_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Submission(status="deleted")


class TestOutputModels:
    """Tests for insight/opportunity models."""

    def test_business_insight_camel_case_dump(self) -> None:
        insight = BusinessInsight(
            category="Pain Points",
            insight="x",
            impact="high",
            recommendation="y",
            confidence=80,
            data_points=12,
        )
        data = insight.model_dump(by_alias=True)
        assert data["dataPoints"] == 12
        assert "data_points" not in data

    def test_confidence_bounded(self) -> None:
        with pytest.raises(ValidationError):
            BusinessInsight(
                category="c", insight="i", impact="low", recommendation="r",
                confidence=101, data_points=1,
            )

    def test_product_insight_satisfaction_bounded(self) -> None:
        with pytest.raises(ValidationError):
            ProductInsight(product_name="cake", sentiment="neutral", satisfaction=6)

    def test_sales_opportunity_aliases(self) -> None:
        opp = SalesOpportunity(
            type="cross-sell",
            description="d",
            potential_revenue="medium",
            effort="low",
            timeframe="immediate",
            target_segment="Bakery Customers",
        )
        data = opp.model_dump(by_alias=True)
        assert data["potentialRevenue"] == "medium"
        assert data["targetSegment"] == "Bakery Customers"

    def test_outputs_are_frozen(self) -> None:
        report = AnalysisReport()
        with pytest.raises(ValidationError):
            report.token_count = 5
