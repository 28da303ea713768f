"""Per-product keyword breakdowns."""

from typing import Sequence

from feedback_insights.matching import filter_tokens, matched_keywords
from feedback_insights.models.insights import ProductInsight, Sentiment

from .keywords import (
    ALL_PRODUCTS,
    COMPETITIVE_ADVANTAGE_KEYWORDS,
    NEGATIVE_KEYWORDS,
    OPPORTUNITY_KEYWORDS,
    PAIN_POINT_KEYWORDS,
    POSITIVE_KEYWORDS,
    PRICING_INDICATORS,
)
from .rules import round_half_up


def identify_products(tokens: Sequence[str]) -> list[str]:
    """Catalog products (catalog order) mentioned in at least one token."""
    return [p for p in ALL_PRODUCTS if any(p in t for t in tokens)]


def _product_tokens(tokens: Sequence[str], product: str) -> list[str]:
    return [t for t in tokens if product in t]


def _sentiment_counts(product_tokens: Sequence[str]) -> tuple[int, int]:
    positive = len(filter_tokens(product_tokens, POSITIVE_KEYWORDS))
    negative = len(filter_tokens(product_tokens, NEGATIVE_KEYWORDS))
    return positive, negative


def product_sentiment(tokens: Sequence[str], product: str) -> Sentiment:
    """positive/negative only when one side outweighs the other more than 2:1."""
    positive, negative = _sentiment_counts(_product_tokens(tokens, product))
    if positive > negative * 2:
        return "positive"
    if negative > positive * 2:
        return "negative"
    return "neutral"


def product_satisfaction(tokens: Sequence[str], product: str) -> int:
    """1-5 score from the positive share; 3 when there is nothing to score."""
    product_tokens = _product_tokens(tokens, product)
    if not product_tokens:
        return 3
    positive, negative = _sentiment_counts(product_tokens)
    if positive + negative == 0:
        return 3
    score = round_half_up(1 + 4 * positive / (positive + negative))
    return max(1, min(5, score))


def build_product_insight(tokens: Sequence[str], product: str) -> ProductInsight:
    """Full breakdown for one product."""
    product_tokens = _product_tokens(tokens, product)
    return ProductInsight(
        product_name=product,
        sentiment=product_sentiment(tokens, product),
        satisfaction=product_satisfaction(tokens, product),
        pain_points=matched_keywords(product_tokens, PAIN_POINT_KEYWORDS)[:3],
        opportunities=matched_keywords(product_tokens, OPPORTUNITY_KEYWORDS)[:3],
        competitive_advantage=matched_keywords(product_tokens, COMPETITIVE_ADVANTAGE_KEYWORDS),
        pricing_feedback=matched_keywords(product_tokens, PRICING_INDICATORS),
        feature_requests=matched_keywords(product_tokens, OPPORTUNITY_KEYWORDS),
    )


def product_insights_from_tokens(tokens: Sequence[str]) -> list[ProductInsight]:
    return [build_product_insight(tokens, p) for p in identify_products(tokens)]
