"""Insight engine: runs every rule over one token extraction."""

import logging
from typing import Callable, Optional, Sequence, Union

from feedback_insights.models.insights import (
    AnalysisReport,
    BusinessInsight,
    ProductInsight,
    SalesOpportunity,
)
from feedback_insights.models.submission import Submission

from .extraction import extract_tokens
from .opportunities import sales_opportunities_from_tokens
from .products import product_insights_from_tokens
from .rules import (
    analyze_competitive_position,
    analyze_customer_segments,
    analyze_feature_requests,
    analyze_pain_points,
    analyze_pricing_feedback,
    analyze_product_performance,
    analyze_sentiment,
)

logger = logging.getLogger(__name__)

RuleFn = Callable[[Sequence[str]], Union[Optional[BusinessInsight], list[BusinessInsight]]]


class InsightEngine:
    """
    Applies the insight rules to a set of submissions.
    Rules run in a fixed order; a rule returning None contributes nothing,
    a rule returning a list contributes every item.
    """

    def __init__(self) -> None:
        self._rules: list[RuleFn] = [
            analyze_sentiment,
            analyze_product_performance,
            analyze_pain_points,
            analyze_pricing_feedback,
            analyze_feature_requests,
            analyze_customer_segments,
            analyze_competitive_position,
        ]

    def business_insights(self, tokens: Sequence[str]) -> list[BusinessInsight]:
        """Run all insight rules over already-extracted tokens."""
        insights: list[BusinessInsight] = []
        for rule_fn in self._rules:
            result = rule_fn(tokens)
            if result is None:
                continue
            if isinstance(result, list):
                insights.extend(result)
            else:
                insights.append(result)
        return insights

    def analyze(self, submissions: Sequence[Submission]) -> AnalysisReport:
        """Extract tokens once and produce insights, product insights and opportunities."""
        tokens = extract_tokens(submissions)
        report = AnalysisReport(
            business_insights=self.business_insights(tokens),
            product_insights=product_insights_from_tokens(tokens),
            sales_opportunities=sales_opportunities_from_tokens(tokens),
            submission_count=len(submissions),
            token_count=len(tokens),
        )
        logger.debug(
            "Analyzed %d submissions (%d tokens): %d insights, %d products, %d opportunities",
            report.submission_count,
            report.token_count,
            len(report.business_insights),
            len(report.product_insights),
            len(report.sales_opportunities),
        )
        return report


def analyze_user_responses(submissions: Sequence[Submission]) -> list[BusinessInsight]:
    """Business insights for a set of submissions."""
    return InsightEngine().business_insights(extract_tokens(submissions))


def generate_product_insights(submissions: Sequence[Submission]) -> list[ProductInsight]:
    """Per-product insights for every catalog product mentioned."""
    return product_insights_from_tokens(extract_tokens(submissions))


def generate_sales_opportunities(submissions: Sequence[Submission]) -> list[SalesOpportunity]:
    """Upsell, cross-sell and retention opportunities."""
    return sales_opportunities_from_tokens(extract_tokens(submissions))
