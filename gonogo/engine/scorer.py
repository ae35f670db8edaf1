"""Composite scoring.

The final score is the weighted sum of the six 0-10 category scores,
scaled to 0-100 and rounded half up.
"""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field, model_validator

from gonogo.engine.formatting import round_half_up
from gonogo.engine.result import SubScores


class CategoryWeights(BaseModel):
    """Weight of each category in the composite score. Must sum to exactly 1."""

    model_config = ConfigDict(frozen=True)

    financial: float = Field(default=0.25, ge=0, le=1.0)
    operational: float = Field(default=0.30, ge=0, le=1.0)
    risk: float = Field(default=0.20, ge=0, le=1.0)
    strategy: float = Field(default=0.15, ge=0, le=1.0)
    reform_revenue: float = Field(default=0.05, ge=0, le=1.0)
    communication: float = Field(default=0.05, ge=0, le=1.0)

    @model_validator(mode="after")
    def weights_sum_to_one(self) -> CategoryWeights:
        total = math.fsum(self.model_dump().values())
        if total != 1.0:
            raise ValueError(f"Category weights must sum to 1.0, got {total}")
        return self


CATEGORY_WEIGHTS = CategoryWeights()


def weighted_sum(sub_scores: SubScores, weights: CategoryWeights = CATEGORY_WEIGHTS) -> float:
    """Weighted 0-10 score."""
    scores = sub_scores.as_dict()
    return math.fsum(
        scores[category] * weight for category, weight in weights.model_dump().items()
    )


def composite_score(sub_scores: SubScores, weights: CategoryWeights = CATEGORY_WEIGHTS) -> int:
    return round_half_up(weighted_sum(sub_scores, weights) * 10)
