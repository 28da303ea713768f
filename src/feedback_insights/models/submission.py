"""Submission records and the classified answer values they carry."""

from datetime import datetime
from enum import Enum
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field, field_serializer, field_validator

SubmissionStatus = Literal["completed", "partial", "abandoned"]


class AnswerKind(str, Enum):
    """Shape of a raw answer value, decided once at ingestion."""

    TEXT = "text"
    CHOICES = "choices"
    NUMBER = "number"
    UNSUPPORTED = "unsupported"


class Answer(BaseModel):
    """
    One answer to one question.
    Free text and single selections are TEXT, multi-selects are CHOICES,
    numeric ratings sent as JSON numbers are NUMBER. Anything else is kept
    as UNSUPPORTED so downstream code can skip it without inspecting types.
    """

    kind: AnswerKind
    text: Optional[str] = None
    choices: list[str] = Field(default_factory=list)
    number: Optional[float] = None

    @classmethod
    def from_raw(cls, value: Any) -> "Answer":
        """Classify a raw JSON answer value."""
        if isinstance(value, Answer):
            return value
        if isinstance(value, str):
            return cls(kind=AnswerKind.TEXT, text=value)
        if isinstance(value, bool):
            return cls(kind=AnswerKind.UNSUPPORTED)
        if isinstance(value, (int, float)):
            return cls(kind=AnswerKind.NUMBER, number=float(value))
        if isinstance(value, (list, tuple)):
            # Non-string items in a multi-select carry no text to analyze
            return cls(
                kind=AnswerKind.CHOICES,
                choices=[item for item in value if isinstance(item, str)],
            )
        return cls(kind=AnswerKind.UNSUPPORTED)

    def to_raw(self) -> Any:
        """Return the JSON value this answer was built from."""
        if self.kind == AnswerKind.TEXT:
            return self.text
        if self.kind == AnswerKind.CHOICES:
            return list(self.choices)
        if self.kind == AnswerKind.NUMBER:
            if self.number is not None and self.number.is_integer():
                return int(self.number)
            return self.number
        return None

    @property
    def is_blank(self) -> bool:
        """True when the answer holds nothing worth counting."""
        if self.kind == AnswerKind.TEXT:
            return not (self.text or "").strip()
        if self.kind == AnswerKind.CHOICES:
            return not any(c.strip() for c in self.choices)
        return self.kind == AnswerKind.UNSUPPORTED


class Submission(BaseModel):
    """One respondent's answers to the feedback form."""

    id: Optional[str] = None
    quiz_title: str = ""
    responses: dict[str, Answer] = Field(
        default_factory=dict,
        description="Question id -> answer, in the order the form recorded them",
    )
    total_pages: int = 0
    completed_pages: int = 0
    status: SubmissionStatus = "completed"
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    metadata: dict[str, Any] = Field(default_factory=dict)

    @field_validator("responses", mode="before")
    @classmethod
    def _classify_responses(cls, value: Any) -> dict[str, Answer]:
        if value is None:
            return {}
        return {str(k): Answer.from_raw(v) for k, v in dict(value).items()}

    @field_serializer("responses")
    def _dump_responses(self, responses: dict[str, Answer]) -> dict[str, Any]:
        return {k: a.to_raw() for k, a in responses.items()}

    def raw_responses(self) -> dict[str, Any]:
        """Responses as plain JSON values (the persistence format)."""
        return {k: a.to_raw() for k, a in self.responses.items()}
