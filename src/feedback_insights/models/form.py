"""Form definition: which page each question lives on."""

from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

try:
    import yaml
except ModuleNotFoundError as e:
    raise ModuleNotFoundError(
        "PyYAML is required for form definition loading. Run: poetry install"
    ) from e
from pydantic import BaseModel, Field

from feedback_insights.models.submission import Submission, SubmissionStatus

# Product Feedback quiz, 9 pages. Question ids are the names the form posts.
_DEFAULT_QUESTION_PAGES: dict[str, int] = {
    "question1": 1,
    "question2": 2,
    "question3": 2,
    "About You": 3,
    "question4": 3,
    "question5": 4,
    "question6": 4,
    "question7": 5,
    "question8": 5,
    "question10": 6,
    "question9": 7,
    "question12": 8,
    "question13": 8,
    "Please provide your details below to enter our lucky draw.": 9,
    "Phone": 9,
    "question11": 9,
}


class FormDefinition(BaseModel):
    """Quiz layout used to derive completed pages and submission status."""

    title: str = "Product Feedback"
    total_pages: int = Field(..., ge=1)
    question_pages: dict[str, int] = Field(default_factory=dict)

    @classmethod
    def default(cls) -> "FormDefinition":
        """The Product Feedback quiz the form ships with."""
        return cls(
            title="Product Feedback",
            total_pages=9,
            question_pages=dict(_DEFAULT_QUESTION_PAGES),
        )

    @classmethod
    def from_yaml(cls, path: str | Path) -> "FormDefinition":
        """
        Load from YAML. Supports `pages` (page number -> question ids) or a flat
        `question_pages` mapping. total_pages defaults to the highest page seen.
        """
        data = yaml.safe_load(Path(path).read_text()) or {}
        question_pages: dict[str, int] = {
            str(q): int(p) for q, p in (data.get("question_pages") or {}).items()
        }
        for page, questions in (data.get("pages") or {}).items():
            for q in questions or []:
                question_pages[str(q)] = int(page)

        total = data.get("total_pages") or max(question_pages.values(), default=1)
        return cls.model_validate(
            {
                "title": data.get("title", "Product Feedback"),
                "total_pages": total,
                "question_pages": question_pages,
            }
        )

    def completed_pages(self, responses: dict[str, Any]) -> int:
        """Count distinct pages that have at least one answered question."""
        pages = {self.question_pages[q] for q in responses if q in self.question_pages}
        return len(pages)

    def resolve_status(
        self,
        responses: dict[str, Any],
        completed_pages: Optional[int] = None,
    ) -> SubmissionStatus:
        """completed when every page was reached, otherwise partial."""
        pages = completed_pages or self.completed_pages(responses)
        return "completed" if pages >= self.total_pages else "partial"

    def build_submission(
        self,
        responses: dict[str, Any],
        *,
        completed_pages: Optional[int] = None,
        metadata: Optional[dict[str, Any]] = None,
    ) -> Submission:
        """Create a new Submission for these answers, ready to insert."""
        pages = completed_pages or self.completed_pages(responses)
        now = datetime.now(timezone.utc)
        meta = {"timestamp": now.isoformat()}
        meta.update(metadata or {})
        return Submission(
            quiz_title=self.title,
            responses=responses,
            total_pages=self.total_pages,
            completed_pages=pages,
            status=self.resolve_status(responses, pages),
            created_at=now,
            metadata=meta,
        )
