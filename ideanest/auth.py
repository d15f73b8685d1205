"""Account creation through the service's signup endpoint.

Sign-in itself belongs to the external auth provider. Signup is the one
flow whose failures are shown to the user as-is: there is no substitute
for creating an account.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from pydantic import ValidationError

from ideanest.errors import SignupError
from ideanest.models.base import WireModel

if TYPE_CHECKING:
    from ideanest.protocols import EvaluationServicePort

logger = structlog.get_logger()

MIN_PASSWORD_LENGTH = 6


class User(WireModel):
    id: str
    email: str
    name: str = ""


def validate_signup(email: str, password: str, name: str) -> None:
    """Reject incomplete signup forms before any request is sent."""
    if not email or not password:
        raise SignupError("Please fill in all required fields")
    if not name:
        raise SignupError("Please enter your name")
    if len(password) < MIN_PASSWORD_LENGTH:
        raise SignupError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")


async def signup(service: EvaluationServicePort, email: str, password: str, name: str) -> User:
    """Create an account and return the new user.

    Raises:
        SignupError: with a user-facing message for every failure.
    """
    validate_signup(email, password, name)

    try:
        reply = await service.post("/signup", {"email": email, "password": password, "name": name})
    except Exception as exc:
        logger.error("signup_transport_failed", email=email, error=str(exc))
        raise SignupError("Authentication failed. Please try again.") from exc

    if not reply.ok:
        error = reply.error_message
        logger.warning("signup_rejected", email=email, status=reply.status_code, error=error)
        if "already registered" in error.lower():
            raise SignupError("Email already registered. Please sign in instead.")
        raise SignupError(error or "Failed to create account")

    raw_user = reply.body.get("user")
    if not isinstance(raw_user, dict):
        logger.error("signup_response_invalid", email=email, keys=sorted(reply.body))
        raise SignupError("Failed to create account")

    try:
        user = User.model_validate(raw_user)
    except ValidationError as exc:
        logger.error("signup_response_invalid", email=email, errors=exc.error_count())
        raise SignupError("Failed to create account") from exc
    logger.info("signup_complete", user_id=user.id)
    return user
