"""Rule-based text analytics over feedback submissions."""

from .engine import (
    InsightEngine,
    analyze_user_responses,
    generate_product_insights,
    generate_sales_opportunities,
)
from .extraction import extract_tokens
from .summary import summarize_submissions

__all__ = [
    "InsightEngine",
    "analyze_user_responses",
    "extract_tokens",
    "generate_product_insights",
    "generate_sales_opportunities",
    "summarize_submissions",
]
