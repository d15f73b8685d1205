"""Re-exports all Pydantic models."""

from ideanest.models.auxiliary import (
    PAYLOAD_MODELS,
    AuxiliaryData,
    AuxiliaryKind,
    AuxiliaryResult,
    Competitor,
    CompetitorSet,
    GoToMarketStrategy,
    MarketStrategy,
    Refinement,
    RefinementSet,
    RevenueModel,
    TargetAudience,
)
from ideanest.models.base import WireModel
from ideanest.models.evaluation import EvaluationResult, Scores, SwotAnalysis, normalize_score
from ideanest.models.idea import (
    MIN_DESCRIPTION_LENGTH,
    IdeaRecord,
    IdeaSubmission,
    new_idea_id,
)

__all__ = [
    "MIN_DESCRIPTION_LENGTH",
    "PAYLOAD_MODELS",
    "AuxiliaryData",
    "AuxiliaryKind",
    "AuxiliaryResult",
    "Competitor",
    "CompetitorSet",
    "EvaluationResult",
    "GoToMarketStrategy",
    "IdeaRecord",
    "IdeaSubmission",
    "MarketStrategy",
    "Refinement",
    "RefinementSet",
    "RevenueModel",
    "Scores",
    "SwotAnalysis",
    "TargetAudience",
    "WireModel",
    "new_idea_id",
    "normalize_score",
]
