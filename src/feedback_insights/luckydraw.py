"""Lucky draw: pick entrants from submissions and draw a winner.

Respondents enter by leaving a name, email and phone number on the last
form page. Each contact field has been recorded under different question
ids across form versions, so every id in the matching *_KEYS tuple is tried
in order.
"""

import logging
import random
from datetime import datetime
from typing import Optional, Sequence

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from feedback_insights.models.submission import AnswerKind, Submission

logger = logging.getLogger(__name__)

NAME_KEYS: tuple[str, ...] = ("name", "Please provide your details below to enter our lucky draw.")
EMAIL_KEYS: tuple[str, ...] = ("email", "question11")
PHONE_KEYS: tuple[str, ...] = ("phone", "Phone")

MIN_ENTRIES = 4


class LuckyDrawEntry(BaseModel):
    """Contact details of one eligible submission."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    submission_id: Optional[str] = None
    name: str
    email: str
    phone: str
    created_at: Optional[datetime] = None


def contact_field(submission: Submission, keys: Sequence[str]) -> str:
    """First non-blank text answer among keys, or '' when none."""
    for key in keys:
        answer = submission.responses.get(key)
        if answer is not None and answer.kind == AnswerKind.TEXT and not answer.is_blank:
            return answer.text or ""
    return ""


def valid_entries(submissions: Sequence[Submission]) -> list[LuckyDrawEntry]:
    """Submissions with a name, email and phone, in input order."""
    entries: list[LuckyDrawEntry] = []
    for submission in submissions:
        name = contact_field(submission, NAME_KEYS)
        email = contact_field(submission, EMAIL_KEYS)
        phone = contact_field(submission, PHONE_KEYS)
        if name and email and phone:
            entries.append(
                LuckyDrawEntry(
                    submission_id=submission.id,
                    name=name,
                    email=email,
                    phone=phone,
                    created_at=submission.created_at,
                )
            )
    return entries


def draw_winner(
    entries: Sequence[LuckyDrawEntry],
    rng: Optional[random.Random] = None,
) -> LuckyDrawEntry:
    """
    Pick one entry uniformly at random.
    Raises ValueError with fewer than MIN_ENTRIES entries.
    """
    if len(entries) < MIN_ENTRIES:
        raise ValueError(
            f"A lucky draw needs at least {MIN_ENTRIES} valid entries, found {len(entries)}"
        )
    winner = (rng or random.Random()).choice(list(entries))
    logger.info("Drew winner %s from %d entries", winner.submission_id, len(entries))
    return winner
