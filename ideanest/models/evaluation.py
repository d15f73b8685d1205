"""Structured evaluation record returned by the service or the substitute generator."""

from __future__ import annotations

from typing import Annotated

from pydantic import ConfigDict, Field, StringConstraints

from ideanest.models.base import WireModel

NonEmptyStr = Annotated[str, StringConstraints(min_length=1)]
Triple = Annotated[list[NonEmptyStr], Field(min_length=3, max_length=3)]

# Scores arrive on either a 0-10 or a 0-100 scale.
RawScore = Annotated[int | float, Field(ge=0, le=100)]


def normalize_score(score: float) -> float:
    """Map a raw score onto the 0-10 display scale.

    Anything above 10 is treated as a percentage: 85 becomes 8.5, while
    7 and the boundary value 10 pass through unchanged.
    """
    return score / 10 if score > 10 else score


class SwotAnalysis(WireModel):
    strengths: Triple
    weaknesses: Triple
    opportunities: Triple
    threats: Triple


class Scores(WireModel):
    innovation: RawScore
    feasibility: RawScore
    scalability: RawScore

    def normalized(self) -> Scores:
        """Return a copy with every score on the 0-10 display scale."""
        return Scores(
            innovation=normalize_score(self.innovation),
            feasibility=normalize_score(self.feasibility),
            scalability=normalize_score(self.scalability),
        )

    def average(self) -> float:
        """Overall score: mean of the normalized scores, one decimal place."""
        n = self.normalized()
        return round((n.innovation + n.feasibility + n.scalability) / 3, 1)


class EvaluationResult(WireModel):
    """VC-style evaluation of a single idea.

    Fields the service adds beyond the known schema are kept and written
    back out by ``to_wire()``, so a live result round-trips unchanged.
    """

    model_config = ConfigDict(extra="allow")

    problem_statement: NonEmptyStr
    existing_solutions: NonEmptyStr
    proposed_solution: NonEmptyStr
    market_potential: NonEmptyStr
    swot_analysis: SwotAnalysis
    business_model: NonEmptyStr
    pros: Triple
    cons: Triple
    improvements: Triple
    pitch_summary: NonEmptyStr
    scores: Scores

    @property
    def display_scores(self) -> Scores:
        return self.scores.normalized()
