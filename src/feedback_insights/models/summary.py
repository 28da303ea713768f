"""Submission summary statistics shown alongside the insights."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _SummaryModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class QuestionAnalysis(_SummaryModel):
    """Answer counts for one question."""

    total: int = 0
    responses: dict[str, int] = Field(default_factory=dict)
    type: Literal["text", "checkbox"] = "text"


class TopResponse(_SummaryModel):
    response: str
    count: int
    percentage: float


class ResponseTrend(_SummaryModel):
    date: str = Field(..., description="ISO date (UTC)")
    count: int


class SubmissionSummary(_SummaryModel):
    """Totals, completion rate and per-question breakdown."""

    total_submissions: int = 0
    completion_rate: float = Field(0.0, description="Percent of submissions with status completed")
    question_analysis: dict[str, QuestionAnalysis] = Field(default_factory=dict)
    top_responses: dict[str, list[TopResponse]] = Field(default_factory=dict)
    response_trends: list[ResponseTrend] = Field(default_factory=list)
