"""Data models for submissions, form layout and analysis outputs."""

from feedback_insights.models.form import FormDefinition
from feedback_insights.models.insights import (
    AnalysisReport,
    BusinessInsight,
    ProductInsight,
    SalesOpportunity,
)
from feedback_insights.models.submission import Answer, AnswerKind, Submission
from feedback_insights.models.summary import (
    QuestionAnalysis,
    ResponseTrend,
    SubmissionSummary,
    TopResponse,
)

__all__ = [
    "AnalysisReport",
    "Answer",
    "AnswerKind",
    "BusinessInsight",
    "FormDefinition",
    "ProductInsight",
    "QuestionAnalysis",
    "ResponseTrend",
    "SalesOpportunity",
    "Submission",
    "SubmissionSummary",
    "TopResponse",
]
