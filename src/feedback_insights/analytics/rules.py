"""Insight rules: each takes the token list and returns insight(s) or None.

A rule with nothing to say (no matching tokens, zero denominator) returns
None or an empty list rather than raising.
"""

import math
from typing import Optional, Sequence

from feedback_insights.matching import (
    count_keyword_hits,
    filter_tokens,
    keyword_frequencies,
    matches_any_keyword,
    top_keywords,
)
from feedback_insights.models.insights import BusinessInsight

from .keywords import (
    CHEAP_KEYWORDS,
    COMPETITIVE_PHRASES,
    CUSTOMER_SEGMENTS,
    EXPENSIVE_KEYWORDS,
    NEGATIVE_KEYWORDS,
    OPPORTUNITY_KEYWORDS,
    PAIN_POINT_KEYWORDS,
    POSITIVE_KEYWORDS,
    PRICING_INDICATORS,
    PRODUCT_CATALOG,
    category_label,
)


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (2.5 -> 3, not 2)."""
    return int(math.floor(value + 0.5))


def percent(ratio: float) -> int:
    """0.8 -> 80."""
    return round_half_up(ratio * 100)


def _confidence(value: int, ceiling: int, floor: int = 0) -> int:
    return min(ceiling, max(floor, value))


def _join_top(keywords: list[str]) -> str:
    """'a and b' for two or more keywords, 'a' for one."""
    if len(keywords) >= 2:
        return f"{keywords[0]} and {keywords[1]}"
    return keywords[0]


def analyze_sentiment(tokens: Sequence[str]) -> Optional[BusinessInsight]:
    """
    Overall sentiment from per-token keyword hits.
    A token containing two positive keywords counts twice.
    """
    total = len(tokens)
    if total == 0:
        return None

    positive = sum(count_keyword_hits(t, POSITIVE_KEYWORDS) for t in tokens)
    negative = sum(count_keyword_hits(t, NEGATIVE_KEYWORDS) for t in tokens)
    if positive + negative == 0:
        return None

    ratio = positive / (positive + negative)
    if ratio > 0.7:
        insight = (
            f"Strong positive sentiment detected ({percent(ratio)}% positive). "
            "Customers are highly satisfied with your products."
        )
        impact = "high"
        recommendation = (
            "Leverage positive feedback for marketing campaigns and testimonials. "
            "Consider premium pricing for high-value products."
        )
    elif ratio > 0.5:
        insight = (
            f"Moderate positive sentiment ({percent(ratio)}% positive). "
            "Room for improvement in customer satisfaction."
        )
        impact = "medium"
        recommendation = (
            "Focus on addressing pain points and improving product quality to increase satisfaction."
        )
    else:
        insight = (
            f"Negative sentiment detected ({percent(1 - ratio)}% negative). "
            "Immediate attention required."
        )
        impact = "high"
        recommendation = (
            "Conduct detailed customer interviews to understand issues. "
            "Prioritize fixing major pain points."
        )

    return BusinessInsight(
        category="Customer Sentiment",
        insight=insight,
        impact=impact,
        recommendation=recommendation,
        confidence=_confidence(total * 2, 95, floor=60),
        data_points=total,
    )


def analyze_product_performance(tokens: Sequence[str]) -> list[BusinessInsight]:
    """One insight per catalog category that has sentiment-bearing mentions."""
    insights: list[BusinessInsight] = []

    for category, products in PRODUCT_CATALOG.items():
        category_tokens = filter_tokens(tokens, products)
        if not category_tokens:
            continue

        positive = len(filter_tokens(category_tokens, POSITIVE_KEYWORDS))
        negative = len(filter_tokens(category_tokens, NEGATIVE_KEYWORDS))
        if positive + negative == 0:
            continue

        performance = positive / (positive + negative)
        label = category_label(category)
        if performance > 0.7:
            insight = (
                f"{label} products performing excellently with "
                f"{percent(performance)}% positive feedback."
            )
            impact = "high"
            recommendation = f"Expand {category} product line and increase marketing focus on this category."
        elif performance > 0.5:
            insight = f"{label} products showing moderate performance."
            impact = "medium"
            recommendation = f"Improve {category} product quality and gather more specific feedback."
        else:
            insight = f"{label} products need immediate attention due to poor feedback."
            impact = "high"
            recommendation = (
                f"Conduct detailed analysis of {category} products and implement quality improvements."
            )

        insights.append(
            BusinessInsight(
                category="Product Performance",
                insight=insight,
                impact=impact,
                recommendation=recommendation,
                confidence=_confidence(len(category_tokens) * 3, 90),
                data_points=len(category_tokens),
            )
        )

    return insights


def analyze_pain_points(tokens: Sequence[str]) -> Optional[BusinessInsight]:
    """Most frequent pain-point keywords."""
    matched = filter_tokens(tokens, PAIN_POINT_KEYWORDS)
    if not matched:
        return None

    top = top_keywords(keyword_frequencies(matched, PAIN_POINT_KEYWORDS), 3)
    impact = "high" if len(matched) > len(tokens) * 0.3 else "medium"
    share = percent(len(matched) / len(tokens))

    return BusinessInsight(
        category="Pain Points",
        insight=(
            f"Identified {', '.join(top)} as top customer pain points "
            f"affecting {share}% of customers."
        ),
        impact=impact,
        recommendation=(
            f"Prioritize addressing {_join_top(top)} to improve customer "
            "satisfaction and reduce churn."
        ),
        confidence=_confidence(len(matched) * 2, 85),
        data_points=len(matched),
    )


def analyze_pricing_feedback(tokens: Sequence[str]) -> Optional[BusinessInsight]:
    """Whether pricing mentions lean expensive or good value."""
    matched = filter_tokens(tokens, PRICING_INDICATORS)
    if not matched:
        return None

    expensive = len(filter_tokens(matched, EXPENSIVE_KEYWORDS))
    cheap = len(filter_tokens(matched, CHEAP_KEYWORDS))
    if expensive + cheap == 0:
        return None

    ratio = expensive / (expensive + cheap)
    if ratio > 0.6:
        insight = f"{percent(ratio)}% of pricing feedback indicates products are perceived as expensive."
        impact = "high"
        recommendation = (
            "Review pricing strategy. Consider value-based pricing or bundling to improve perceived value."
        )
    elif ratio < 0.4:
        insight = f"{percent(1 - ratio)}% of pricing feedback indicates good value perception."
        impact = "medium"
        recommendation = (
            "Maintain current pricing strategy. Consider premium positioning for high-quality products."
        )
    else:
        insight = "Mixed pricing feedback with balanced perception of value."
        impact = "low"
        recommendation = "Continue monitoring pricing feedback and optimize based on customer segments."

    return BusinessInsight(
        category="Pricing Analysis",
        insight=insight,
        impact=impact,
        recommendation=recommendation,
        confidence=_confidence(len(matched) * 2, 80),
        data_points=len(matched),
    )


def analyze_feature_requests(tokens: Sequence[str]) -> Optional[BusinessInsight]:
    """Most frequent improvement/opportunity keywords."""
    matched = filter_tokens(tokens, OPPORTUNITY_KEYWORDS)
    if not matched:
        return None

    top = top_keywords(keyword_frequencies(matched, OPPORTUNITY_KEYWORDS), 3)
    share = percent(len(matched) / len(tokens))

    return BusinessInsight(
        category="Feature Requests",
        insight=(
            f"Customers requesting {', '.join(top)} improvements. "
            f"{share}% of customers have feature requests."
        ),
        impact="medium",
        recommendation=(
            f"Prioritize {_join_top(top)} improvements in product roadmap "
            "to meet customer expectations."
        ),
        confidence=_confidence(len(matched) * 2, 75),
        data_points=len(matched),
    )


def segment_counts(tokens: Sequence[str]) -> dict[str, int]:
    """Tokens matching each customer segment, in segment order."""
    return {name: len(filter_tokens(tokens, kws)) for name, kws in CUSTOMER_SEGMENTS}


def analyze_customer_segments(tokens: Sequence[str]) -> Optional[BusinessInsight]:
    """Dominant customer segment by keyword share."""
    total = len(tokens)
    if total == 0:
        return None

    counts = segment_counts(tokens)
    # max() keeps the first of equal counts
    segment, count = max(counts.items(), key=lambda kv: kv[1])

    return BusinessInsight(
        category="Customer Segmentation",
        insight=f"{segment} customers represent {percent(count / total)}% of your customer base.",
        impact="medium",
        recommendation=f"Tailor marketing and product development to {segment.lower()} customer needs.",
        confidence=_confidence(total, 70),
        data_points=total,
    )


def analyze_competitive_position(tokens: Sequence[str]) -> Optional[BusinessInsight]:
    """Share of competitor comparisons that are positive."""
    competitive = filter_tokens(tokens, COMPETITIVE_PHRASES)
    if not competitive:
        return None

    positive = sum(1 for t in competitive if matches_any_keyword(t, POSITIVE_KEYWORDS))
    ratio = positive / len(competitive)

    if ratio > 0.6:
        insight = (
            f"{percent(ratio)}% of competitive mentions are positive, "
            "indicating strong market position."
        )
        impact = "high"
        recommendation = "Leverage competitive advantages in marketing. Consider premium positioning."
    elif ratio < 0.4:
        insight = (
            f"{percent(1 - ratio)}% of competitive mentions are negative, "
            "indicating need for improvement."
        )
        impact = "high"
        recommendation = "Analyze competitor strengths and develop differentiation strategy."
    else:
        insight = "Mixed competitive positioning with opportunities for improvement."
        impact = "medium"
        recommendation = "Focus on unique value propositions and customer experience improvements."

    return BusinessInsight(
        category="Competitive Analysis",
        insight=insight,
        impact=impact,
        recommendation=recommendation,
        confidence=_confidence(len(competitive) * 2, 65),
        data_points=len(competitive),
    )
