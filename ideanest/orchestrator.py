"""Evaluation request orchestration: live service call with substitute fallback.

``IdeaOrchestrator.evaluate`` always produces an evaluation. A usable
service reply is returned as-is and marks the session live; anything else
(quota or auth rejection, malformed reply, transport error) is absorbed,
the session flips to substitute mode, and locally generated data is
returned after a short simulated delay.

The auxiliary analyses follow the same absorb-and-substitute policy but
never change the session mode, and skip the network entirely once the
session is in substitute mode.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from enum import StrEnum
from typing import TYPE_CHECKING

import structlog
from pydantic import ValidationError

from ideanest import substitute
from ideanest.errors import NoActiveIdeaError
from ideanest.metrics import auxiliary_requests_total, evaluation_outcomes_total
from ideanest.models.auxiliary import (
    PAYLOAD_MODELS,
    AuxiliaryData,
    AuxiliaryKind,
    AuxiliaryResult,
)
from ideanest.models.evaluation import EvaluationResult
from ideanest.models.idea import IdeaRecord, IdeaSubmission, new_idea_id
from ideanest.session import SessionMode, SessionState

if TYPE_CHECKING:
    from ideanest.client import ServiceReply
    from ideanest.config import Settings
    from ideanest.notifications import NotificationQueue
    from ideanest.protocols import EvaluationServicePort, IdeaStorePort

logger = structlog.get_logger()

QUOTA_STATUS_CODES = frozenset({401, 429})
QUOTA_MARKERS = ("quota", "exceeded", "insufficient_quota", "rate limit", "api key")


class Outcome(StrEnum):
    SUCCESS = "success"
    QUOTA_AUTH = "quota_auth"
    REQUEST_FAILURE = "request_failure"
    TRANSPORT_FAILURE = "transport_failure"


# Notification copy for each fallback outcome: (description, duration in ms).
_FALLBACK_COPY: dict[Outcome, tuple[str, int]] = {
    Outcome.QUOTA_AUTH: ("Using AI-powered demo data due to API limits", 5000),
    Outcome.REQUEST_FAILURE: ("Using sample evaluation data", 4000),
    Outcome.TRANSPORT_FAILURE: ("Using sample data - check logs for details", 4000),
}

_AUXILIARY_FALLBACK_COPY: dict[AuxiliaryKind, str] = {
    AuxiliaryKind.REFINEMENT: "Using demo refinements",
    AuxiliaryKind.COMPETITORS: "Using demo competitor analysis",
    AuxiliaryKind.MARKET_STRATEGY: "Using demo market strategy",
}

_GENERATORS: dict[AuxiliaryKind, Callable[[str], AuxiliaryData]] = {
    AuxiliaryKind.REFINEMENT: substitute.generate_refinements,
    AuxiliaryKind.COMPETITORS: substitute.generate_competitors,
    AuxiliaryKind.MARKET_STRATEGY: substitute.generate_market_strategy,
}


def is_quota_error(reply: ServiceReply) -> bool:
    """True for 401/429 or an error message that mentions quota, rate limits or keys."""
    if reply.status_code in QUOTA_STATUS_CODES:
        return True
    message = reply.error_message.lower()
    return any(marker in message for marker in QUOTA_MARKERS)


def classify_reply(reply: ServiceReply) -> tuple[Outcome, EvaluationResult | None]:
    """Classify an evaluation reply that arrived without a transport error."""
    if not reply.ok:
        if is_quota_error(reply):
            return Outcome.QUOTA_AUTH, None
        return Outcome.REQUEST_FAILURE, None

    raw = reply.body.get("evaluation")
    if not isinstance(raw, dict):
        logger.warning("evaluation_missing", keys=sorted(reply.body))
        return Outcome.REQUEST_FAILURE, None
    try:
        return Outcome.SUCCESS, EvaluationResult.model_validate(raw)
    except ValidationError as exc:
        logger.warning("evaluation_invalid", errors=exc.error_count(), detail=str(exc))
        return Outcome.REQUEST_FAILURE, None


class IdeaOrchestrator:
    """Runs evaluation and auxiliary requests for a single user session."""

    def __init__(
        self,
        service: EvaluationServicePort,
        session: SessionState,
        notifications: NotificationQueue,
        settings: Settings,
        store: IdeaStorePort | None = None,
    ) -> None:
        self.service = service
        self.session = session
        self.notifications = notifications
        self.settings = settings
        self.store = store
        self._pending_writes: set[asyncio.Task[None]] = set()

    # ------------------------------------------------------------------
    # Primary evaluation
    # ------------------------------------------------------------------

    async def evaluate(
        self, title: str, description: str
    ) -> tuple[EvaluationResult, SessionMode]:
        """Evaluate an idea, falling back to substitute data on any failure.

        Input is assumed to be validated already (see IdeaSubmission.create).
        Never raises for service-side problems.
        """
        idea = IdeaSubmission(title=title, description=description)
        self.session.begin(idea)
        log = logger.bind(title=title)

        try:
            reply = await self.service.post(
                "/evaluate", {"title": title, "description": description}
            )
        except Exception as exc:
            log.warning(
                "evaluation_transport_failed",
                error_type=type(exc).__name__,
                error=str(exc),
            )
            outcome, result = Outcome.TRANSPORT_FAILURE, None
        else:
            outcome, result = classify_reply(reply)
            if outcome is Outcome.QUOTA_AUTH:
                log.warning(
                    "evaluation_quota_or_auth_rejected",
                    status=reply.status_code,
                    error=reply.error_message,
                )
            elif outcome is Outcome.REQUEST_FAILURE:
                log.warning(
                    "evaluation_request_failed",
                    status=reply.status_code,
                    error=reply.error_message,
                    details=reply.details,
                )

        evaluation_outcomes_total.labels(outcome=outcome.value).inc()

        if result is not None:
            mode = self.session.mark_live()
            self.session.evaluation = result
            log.info("evaluation_complete", mode=mode.value)
            self.notifications.success("Evaluation complete!")
            self._persist(idea, result)
            return result, mode

        return await self._evaluate_fallback(idea, outcome)

    async def _evaluate_fallback(
        self, idea: IdeaSubmission, outcome: Outcome
    ) -> tuple[EvaluationResult, SessionMode]:
        mode = self.session.mark_substitute()
        await asyncio.sleep(self.settings.evaluate_fallback_delay)
        result = substitute.generate_evaluation(idea.title, idea.description)
        self.session.evaluation = result
        logger.info("evaluation_substituted", title=idea.title, outcome=outcome.value)

        description, duration_ms = _FALLBACK_COPY[outcome]
        self.notifications.success(
            "Evaluation complete! (Demo Mode)",
            description=description,
            duration_ms=duration_ms,
        )
        return result, mode

    def _persist(self, idea: IdeaSubmission, result: EvaluationResult) -> None:
        """Schedule a background save of a live evaluation to the idea store.

        The write runs in a worker thread so a slow store never delays the
        caller; ``flush()`` waits for outstanding writes.
        """
        if self.store is None:
            return
        idea_id = new_idea_id()
        record = IdeaRecord(title=idea.title, description=idea.description, evaluation=result)
        task = asyncio.create_task(self._save(self.store, idea_id, record))
        self._pending_writes.add(task)
        task.add_done_callback(self._pending_writes.discard)

    async def _save(self, store: IdeaStorePort, idea_id: str, record: IdeaRecord) -> None:
        try:
            await asyncio.to_thread(store.save, idea_id, record)
        except Exception as exc:
            logger.warning("idea_store_write_failed", idea_id=idea_id, error=str(exc))
        else:
            logger.debug("idea_persisted", idea_id=idea_id)

    async def flush(self) -> None:
        """Wait until every scheduled store write has finished."""
        if self._pending_writes:
            await asyncio.gather(*self._pending_writes)

    # ------------------------------------------------------------------
    # Auxiliary analyses
    # ------------------------------------------------------------------

    async def refine(self) -> AuxiliaryResult:
        return await self._auxiliary(AuxiliaryKind.REFINEMENT)

    async def competitors(self) -> AuxiliaryResult:
        return await self._auxiliary(AuxiliaryKind.COMPETITORS)

    async def market_strategy(self) -> AuxiliaryResult:
        return await self._auxiliary(AuxiliaryKind.MARKET_STRATEGY)

    async def _auxiliary(self, kind: AuxiliaryKind) -> AuxiliaryResult:
        if not self.session.has_idea:
            raise NoActiveIdeaError(f"No idea submitted; cannot run {kind.value}")

        title = self.session.title
        description = self.session.description
        log = logger.bind(kind=kind.value, title=title)

        if self.session.is_substitute:
            await asyncio.sleep(self.settings.auxiliary_substitute_delay)
            log.debug("auxiliary_substituted", reason="session_substitute")
            return self._hold(kind, _GENERATORS[kind](title), SessionMode.SUBSTITUTE)

        data: AuxiliaryData | None = None
        try:
            reply = await self.service.post(
                kind.endpoint, {"title": title, "description": description}
            )
            if reply.ok:
                data = PAYLOAD_MODELS[kind].model_validate(reply.body)
            else:
                log.warning(
                    "auxiliary_request_failed",
                    status=reply.status_code,
                    error=reply.error_message,
                )
        except ValidationError as exc:
            log.warning("auxiliary_response_invalid", errors=exc.error_count())
        except Exception as exc:
            log.warning(
                "auxiliary_transport_failed",
                error_type=type(exc).__name__,
                error=str(exc),
            )

        if data is not None:
            return self._hold(kind, data, SessionMode.LIVE)

        await asyncio.sleep(self.settings.auxiliary_fallback_delay)
        self.notifications.info(_AUXILIARY_FALLBACK_COPY[kind], duration_ms=3000)
        return self._hold(kind, _GENERATORS[kind](title), SessionMode.SUBSTITUTE)

    def _hold(
        self, kind: AuxiliaryKind, data: AuxiliaryData, source: SessionMode
    ) -> AuxiliaryResult:
        """Record *data* as the session's single current auxiliary result."""
        auxiliary_requests_total.labels(kind=kind.value, source=source.value).inc()
        result = AuxiliaryResult(kind=kind, data=data, mode=source)
        self.session.auxiliary = result
        return result
