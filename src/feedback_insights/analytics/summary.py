"""Completion rate, per-question counts and submission trend."""

from datetime import date, datetime, timedelta, timezone
from typing import Optional, Sequence

from feedback_insights.models.submission import AnswerKind, Submission
from feedback_insights.models.summary import (
    QuestionAnalysis,
    ResponseTrend,
    SubmissionSummary,
    TopResponse,
)

TOP_RESPONSES = 5


def completion_rate(submissions: Sequence[Submission]) -> float:
    """Percent of submissions with status completed; 0 when there are none."""
    if not submissions:
        return 0.0
    completed = sum(1 for s in submissions if s.status == "completed")
    return completed / len(submissions) * 100


def analyze_questions(submissions: Sequence[Submission]) -> dict[str, QuestionAnalysis]:
    """
    Per-question answer counts, in first-seen question order.
    Multi-selects count each choice and mark the question as checkbox;
    numeric and blank text answers count toward the total only.
    """
    analysis: dict[str, QuestionAnalysis] = {}
    for submission in submissions:
        for question, answer in submission.responses.items():
            qa = analysis.setdefault(question, QuestionAnalysis())
            qa.total += 1
            if answer.kind == AnswerKind.CHOICES:
                qa.type = "checkbox"
                for choice in answer.choices:
                    qa.responses[choice] = qa.responses.get(choice, 0) + 1
            elif answer.kind == AnswerKind.TEXT and not answer.is_blank:
                qa.type = "text"
                qa.responses[answer.text] = qa.responses.get(answer.text, 0) + 1
    return analysis


def top_responses(qa: QuestionAnalysis, n: int = TOP_RESPONSES) -> list[TopResponse]:
    """Most frequent answers for one question; ties keep first-seen order."""
    ranked = sorted(qa.responses.items(), key=lambda kv: kv[1], reverse=True)[:n]
    return [
        TopResponse(
            response=response,
            count=count,
            percentage=round(count / qa.total * 100, 1) if qa.total else 0.0,
        )
        for response, count in ranked
    ]


def _created_date(submission: Submission) -> Optional[date]:
    created = submission.created_at
    if created is None:
        return None
    if created.tzinfo is None:
        created = created.replace(tzinfo=timezone.utc)
    return created.astimezone(timezone.utc).date()


def response_trends(
    submissions: Sequence[Submission],
    *,
    now: Optional[datetime] = None,
    days: int = 7,
) -> list[ResponseTrend]:
    """Submissions per UTC day for the last `days` days ending today, oldest first."""
    today = (now or datetime.now(timezone.utc)).astimezone(timezone.utc).date()
    counts: dict[date, int] = {}
    for s in submissions:
        d = _created_date(s)
        if d is not None:
            counts[d] = counts.get(d, 0) + 1
    window = [today - timedelta(days=offset) for offset in range(days - 1, -1, -1)]
    return [ResponseTrend(date=d.isoformat(), count=counts.get(d, 0)) for d in window]


def summarize_submissions(
    submissions: Sequence[Submission],
    *,
    now: Optional[datetime] = None,
    trend_days: int = 7,
) -> SubmissionSummary:
    """Dashboard statistics for a set of submissions."""
    questions = analyze_questions(submissions)
    return SubmissionSummary(
        total_submissions=len(submissions),
        completion_rate=completion_rate(submissions),
        question_analysis=questions,
        top_responses={q: top_responses(qa) for q, qa in questions.items()},
        response_trends=response_trends(submissions, now=now, days=trend_days),
    )
