"""Exception hierarchy for failures that reach the caller."""

from __future__ import annotations


class IdeaNestError(Exception):
    """Base class for all ideanest errors."""


class IdeaValidationError(IdeaNestError, ValueError):
    """Idea form input rejected before any network attempt."""


class SignupError(IdeaNestError):
    """Account creation failed; the message is safe to show to the user."""


class NoActiveIdeaError(IdeaNestError):
    """An auxiliary analysis was requested before any idea was submitted."""
