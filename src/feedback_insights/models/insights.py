"""Analysis outputs: business insights, product insights, sales opportunities."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Level = Literal["high", "medium", "low"]
Sentiment = Literal["positive", "negative", "neutral"]
OpportunityType = Literal["upsell", "cross-sell", "retention", "acquisition"]
Timeframe = Literal["immediate", "short-term", "long-term"]


class _OutputModel(BaseModel):
    """Frozen value object; dumps camelCase keys with by_alias=True."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class BusinessInsight(_OutputModel):
    """A conclusion drawn from aggregate keyword statistics."""

    category: str
    insight: str
    impact: Level
    recommendation: str
    confidence: int = Field(..., ge=0, le=100)
    data_points: int = Field(..., ge=0, description="Responses the conclusion was based on")


class ProductInsight(_OutputModel):
    """Keyword breakdown for one catalog product mentioned in responses."""

    product_name: str
    sentiment: Sentiment
    satisfaction: int = Field(..., ge=1, le=5)
    pain_points: list[str] = Field(default_factory=list)
    opportunities: list[str] = Field(default_factory=list)
    competitive_advantage: list[str] = Field(default_factory=list)
    pricing_feedback: list[str] = Field(default_factory=list)
    feature_requests: list[str] = Field(default_factory=list)


class SalesOpportunity(_OutputModel):
    """A sales action suggested by the response mix."""

    type: OpportunityType
    description: str
    potential_revenue: Level
    effort: Level
    timeframe: Timeframe
    target_segment: str


class AnalysisReport(_OutputModel):
    """Everything one engine run produces."""

    business_insights: list[BusinessInsight] = Field(default_factory=list)
    product_insights: list[ProductInsight] = Field(default_factory=list)
    sales_opportunities: list[SalesOpportunity] = Field(default_factory=list)
    submission_count: int = 0
    token_count: int = 0
