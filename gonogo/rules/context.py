from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from gonogo.engine.result import OperationalAssessment, SubScores
from gonogo.models.inputs import (
    FinancialMetrics,
    OperationalData,
    RiskRatings,
    StrategyRatings,
)


@dataclass(frozen=True)
class RuleContext:
    """Everything a governance gate or remediation rule may read."""

    financial: Optional[FinancialMetrics]
    risk: Optional[RiskRatings]
    strategy: Optional[StrategyRatings]
    operational_data: OperationalData
    operational: OperationalAssessment
    sub_scores: SubScores
    commission_ratio: float = 0.0

    def has_score_groups(self) -> bool:
        return (
            self.financial is not None
            and self.risk is not None
            and self.strategy is not None
        )
