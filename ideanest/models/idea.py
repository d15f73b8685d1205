"""Idea submission and the persisted idea record."""

from __future__ import annotations

import secrets
import string
import time
from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field

from ideanest.errors import IdeaValidationError
from ideanest.models.base import WireModel
from ideanest.models.evaluation import EvaluationResult

MIN_DESCRIPTION_LENGTH = 150

_ID_ALPHABET = string.digits + string.ascii_lowercase
_ID_SUFFIX_LENGTH = 9


def _utcnow() -> datetime:
    return datetime.now(UTC)


def new_idea_id() -> str:
    """Generate a store key of the form ``idea_<epoch-millis>_<9 base36 chars>``."""
    millis = int(time.time() * 1000)
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(_ID_SUFFIX_LENGTH))
    return f"idea_{millis}_{suffix}"


class IdeaSubmission(BaseModel):
    """A title/description pair as entered by the user. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    title: str
    description: str

    @classmethod
    def create(cls, title: str, description: str) -> IdeaSubmission:
        """Validate raw form input and build a submission with stripped fields.

        Raises IdeaValidationError before any network work happens.
        """
        title = (title or "").strip()
        description = (description or "").strip()
        if not title:
            raise IdeaValidationError("Please enter a title for your idea")
        if not description:
            raise IdeaValidationError("Please describe your idea")
        if len(description) < MIN_DESCRIPTION_LENGTH:
            raise IdeaValidationError(
                f"Description must be at least {MIN_DESCRIPTION_LENGTH} characters"
            )
        return cls(title=title, description=description)


class IdeaRecord(WireModel):
    """Value stored in the key-value store for each evaluated idea."""

    title: str
    description: str
    evaluation: EvaluationResult
    created_at: datetime = Field(default_factory=_utcnow)
