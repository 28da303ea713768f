"""Tests for per-product insights."""

import pytest

from feedback_insights.analytics.products import (
    build_product_insight,
    identify_products,
    product_insights_from_tokens,
    product_satisfaction,
    product_sentiment,
)


class TestIdentifyProducts:
    """Tests for identify_products."""

    def test_catalog_order_not_mention_order(self) -> None:
        assert identify_products(["pizza and coffee"]) == ["coffee", "pizza"]

    def test_each_product_once(self) -> None:
        assert identify_products(["cake", "more cake", "cake again"]) == ["cake"]

    def test_no_products(self) -> None:
        assert identify_products(["love it"]) == []
        assert identify_products([]) == []


class TestSentimentAndSatisfaction:
    """Sentiment needs a better than 2:1 split; satisfaction scales 1-5."""

    def test_mixed_product_is_neutral(self) -> None:
        tokens = ["love the cookie", "great cookie", "cookie too expensive"]
        assert product_sentiment(tokens, "cookie") == "neutral"
        assert product_satisfaction(tokens, "cookie") == 4

    def test_all_positive(self) -> None:
        tokens = ["great cake"]
        assert product_sentiment(tokens, "cake") == "positive"
        assert product_satisfaction(tokens, "cake") == 5

    def test_all_negative(self) -> None:
        tokens = ["bad tea"]
        assert product_sentiment(tokens, "tea") == "negative"
        assert product_satisfaction(tokens, "tea") == 1

    def test_no_sentiment_is_neutral_three(self) -> None:
        tokens = ["pizza"]
        assert product_sentiment(tokens, "pizza") == "neutral"
        assert product_satisfaction(tokens, "pizza") == 3

    def test_unmentioned_product(self) -> None:
        assert product_satisfaction(["great cake"], "soup") == 3


class TestBuildProductInsight:
    """Tests for build_product_insight."""

    def test_pain_points_capped_at_three_in_table_order(self) -> None:
        insight = build_product_insight(["cake problem issue slow bug"], "cake")
        assert insight.pain_points == ["problem", "issue", "slow"]

    def test_competitive_advantage_uncapped(self) -> None:
        insight = build_product_insight(["fresh organic cake with unique taste"], "cake")
        assert insight.competitive_advantage == ["fresh", "taste", "unique", "organic"]

    def test_opportunities_and_feature_requests(self) -> None:
        insight = build_product_insight(["cake: add more, improve, new, expand"], "cake")
        assert insight.opportunities == ["improve", "add", "expand"]
        assert insight.feature_requests == ["improve", "add", "expand", "more", "new"]

    def test_only_tokens_mentioning_product_count(self) -> None:
        tokens = ["love the cookie", "great cookie", "cookie too expensive", "slow coffee"]
        insight = build_product_insight(tokens, "cookie")
        assert insight.product_name == "cookie"
        assert insight.pain_points == ["expensive"]
        assert insight.pricing_feedback == ["expensive"]
        assert "slow" not in insight.pain_points

    def test_camel_case_dump(self) -> None:
        data = build_product_insight(["great cake"], "cake").model_dump(by_alias=True)
        assert data["productName"] == "cake"
        assert data["competitiveAdvantage"] == []
        assert data["featureRequests"] == []


class TestProductInsightsFromTokens:
    def test_one_per_product(self) -> None:
        insights = product_insights_from_tokens(["pizza and coffee", "great cake"])
        assert [i.product_name for i in insights] == ["cake", "coffee", "pizza"]
