"""Session-scoped mode flag and the idea currently under evaluation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from ideanest.models.auxiliary import AuxiliaryResult
    from ideanest.models.evaluation import EvaluationResult
    from ideanest.models.idea import IdeaSubmission

logger = structlog.get_logger()


class SessionMode(StrEnum):
    LIVE = "live"
    SUBSTITUTE = "substitute"


@dataclass
class SessionState:
    """Mutable state shared by the evaluation and auxiliary flows.

    Written only by the orchestrator and by the back/reset actions.
    ``mode`` is None until the first evaluation finishes. Substitute mode is
    sticky: nothing short of ``reset()`` moves the session back to live.
    """

    mode: SessionMode | None = None
    title: str = ""
    description: str = ""
    evaluation: EvaluationResult | None = None
    auxiliary: AuxiliaryResult | None = None

    @property
    def is_substitute(self) -> bool:
        return self.mode is SessionMode.SUBSTITUTE

    @property
    def has_idea(self) -> bool:
        return bool(self.title)

    def begin(self, idea: IdeaSubmission) -> None:
        """Make *idea* current, discarding results from the previous one."""
        self.title = idea.title
        self.description = idea.description
        self.evaluation = None
        self.auxiliary = None

    def mark_live(self) -> SessionMode:
        if self.mode is not SessionMode.SUBSTITUTE:
            self.mode = SessionMode.LIVE
        return self.mode

    def mark_substitute(self) -> SessionMode:
        if self.mode is not SessionMode.SUBSTITUTE:
            logger.info("session_mode_changed", mode=SessionMode.SUBSTITUTE.value)
        self.mode = SessionMode.SUBSTITUTE
        return self.mode

    def back(self) -> None:
        """Leave the results view: drop the idea and its results, keep the mode."""
        self.title = ""
        self.description = ""
        self.evaluation = None
        self.auxiliary = None

    def reset(self) -> None:
        """Logout: clear everything, including the mode."""
        self.back()
        self.mode = None
