"""Sales opportunity rules."""

from typing import Sequence

from feedback_insights.matching import filter_tokens
from feedback_insights.models.insights import SalesOpportunity

from .keywords import PAIN_POINT_KEYWORDS, POSITIVE_KEYWORDS, PRODUCT_CATALOG, category_label

UPSELL_THRESHOLD = 0.3
CROSS_SELL_THRESHOLD = 0.1
RETENTION_THRESHOLD = 0.2


def identify_upsell_opportunities(tokens: Sequence[str]) -> list[SalesOpportunity]:
    """Satisfied customers (positive tokens above 30%) can be upsold."""
    satisfied = filter_tokens(tokens, POSITIVE_KEYWORDS)
    if len(satisfied) > len(tokens) * UPSELL_THRESHOLD:
        return [
            SalesOpportunity(
                type="upsell",
                description="High customer satisfaction indicates potential for premium product upsells",
                potential_revenue="high",
                effort="medium",
                timeframe="short-term",
                target_segment="Satisfied Customers",
            )
        ]
    return []


def identify_cross_sell_opportunities(tokens: Sequence[str]) -> list[SalesOpportunity]:
    """One opportunity per category mentioned in more than 10% of tokens."""
    opportunities: list[SalesOpportunity] = []
    for category, products in PRODUCT_CATALOG.items():
        mentions = len(filter_tokens(tokens, products))
        if mentions > len(tokens) * CROSS_SELL_THRESHOLD:
            opportunities.append(
                SalesOpportunity(
                    type="cross-sell",
                    description=f"Strong interest in {category} products indicates cross-selling potential",
                    potential_revenue="medium",
                    effort="low",
                    timeframe="immediate",
                    target_segment=f"{category_label(category)} Customers",
                )
            )
    return opportunities


def identify_retention_opportunities(tokens: Sequence[str]) -> list[SalesOpportunity]:
    """Pain points in more than 20% of tokens signal churn risk."""
    pain = filter_tokens(tokens, PAIN_POINT_KEYWORDS)
    if len(pain) > len(tokens) * RETENTION_THRESHOLD:
        return [
            SalesOpportunity(
                type="retention",
                description="Multiple pain points identified - risk of customer churn",
                potential_revenue="high",
                effort="high",
                timeframe="immediate",
                target_segment="At-Risk Customers",
            )
        ]
    return []


def sales_opportunities_from_tokens(tokens: Sequence[str]) -> list[SalesOpportunity]:
    return [
        *identify_upsell_opportunities(tokens),
        *identify_cross_sell_opportunities(tokens),
        *identify_retention_opportunities(tokens),
    ]
