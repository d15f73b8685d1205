"""Models for the on-demand auxiliary analyses."""

from __future__ import annotations

from enum import StrEnum

from pydantic import Field

from ideanest.models.base import WireModel
from ideanest.models.evaluation import NonEmptyStr
from ideanest.session import SessionMode


class AuxiliaryKind(StrEnum):
    REFINEMENT = "refinement"
    COMPETITORS = "competitors"
    MARKET_STRATEGY = "market-strategy"

    @property
    def endpoint(self) -> str:
        """Service path for this analysis."""
        return _ENDPOINTS[self]


_ENDPOINTS = {
    AuxiliaryKind.REFINEMENT: "/refine",
    AuxiliaryKind.COMPETITORS: "/competitors",
    AuxiliaryKind.MARKET_STRATEGY: "/market-strategy",
}


# --- Refinements ---


class Refinement(WireModel):
    title: NonEmptyStr
    description: NonEmptyStr
    reasoning: NonEmptyStr


class RefinementSet(WireModel):
    refinements: list[Refinement] = Field(min_length=1)


# --- Competitors ---


class Competitor(WireModel):
    """A competing product, with optional market facts when the service has them."""

    name: NonEmptyStr
    description: NonEmptyStr
    key_features: list[NonEmptyStr]
    differentiator: NonEmptyStr
    pricing: str | None = None
    market_share: str | None = None
    founded: str | None = None
    funding: str | None = None
    employees: str | None = None
    strengths: list[str] | None = None
    weaknesses: list[str] | None = None


class CompetitorSet(WireModel):
    competitors: list[Competitor] = Field(min_length=1)


# --- Market strategy ---


class TargetAudience(WireModel):
    primary: NonEmptyStr
    secondary: NonEmptyStr
    demographics: list[NonEmptyStr]


class GoToMarketStrategy(WireModel):
    phase1: NonEmptyStr
    phase2: NonEmptyStr
    phase3: NonEmptyStr


class RevenueModel(WireModel):
    primary: NonEmptyStr
    secondary: NonEmptyStr
    pricing: NonEmptyStr


class MarketStrategy(WireModel):
    target_audience: TargetAudience
    go_to_market_strategy: GoToMarketStrategy
    revenue_model: RevenueModel
    marketing_channels: list[NonEmptyStr]


AuxiliaryData = RefinementSet | CompetitorSet | MarketStrategy

PAYLOAD_MODELS: dict[AuxiliaryKind, type[AuxiliaryData]] = {
    AuxiliaryKind.REFINEMENT: RefinementSet,
    AuxiliaryKind.COMPETITORS: CompetitorSet,
    AuxiliaryKind.MARKET_STRATEGY: MarketStrategy,
}


class AuxiliaryResult(WireModel):
    """One auxiliary analysis plus the path that produced it."""

    kind: AuxiliaryKind
    data: AuxiliaryData
    mode: SessionMode
