"""Flatten submissions into lowercase text tokens."""

from typing import Iterable

from feedback_insights.models.submission import Answer, AnswerKind, Submission


def answer_tokens(answer: Answer) -> list[str]:
    """Tokens contributed by one answer; numbers and unsupported values give none."""
    if answer.is_blank or answer.kind == AnswerKind.NUMBER:
        return []
    if answer.kind == AnswerKind.TEXT:
        return [(answer.text or "").lower()]
    if answer.kind == AnswerKind.CHOICES:
        return [c.lower() for c in answer.choices if c.strip()]
    raise ValueError(f"Unhandled answer kind: {answer.kind}")


def extract_tokens(submissions: Iterable[Submission]) -> list[str]:
    """
    All text tokens, in submission order, then question order, then choice order.
    """
    tokens: list[str] = []
    for submission in submissions:
        for answer in submission.responses.values():
            tokens.extend(answer_tokens(answer))
    return tokens
