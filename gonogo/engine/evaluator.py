"""Decision engine.

Takes the full input snapshot -> produces an Evaluation holding every
intermediate figure, the governance report and the final decision.
"""

from __future__ import annotations

import logging

from gonogo.engine import normalizers
from gonogo.engine.classifier import decide
from gonogo.engine.formatting import format_percentage
from gonogo.engine.governance import evaluate_gates
from gonogo.engine.insights import build_insights
from gonogo.engine.operational import assess_operations
from gonogo.engine.result import (
    Evaluation,
    OperationalAssessment,
    RevenueBreakdown,
    SubScores,
)
from gonogo.engine.revenue import resolve_total_units, revenue_breakdown
from gonogo.engine.scorer import composite_score
from gonogo.models.inputs import EvaluationInputs
from gonogo.rules.context import RuleContext

logger = logging.getLogger(__name__)


class DecisionEngine:
    """Stateless engine that scores a partnership proposal."""

    def evaluate(self, inputs: EvaluationInputs) -> Evaluation:
        """Run the full pipeline for one input snapshot.

        The unit count is resolved once and handed to every calculator.
        """
        total_units = resolve_total_units(inputs)
        revenue = revenue_breakdown(inputs, total_units)
        operational = assess_operations(total_units, inputs.operational)
        sub_scores = self._sub_scores(inputs, revenue, operational)

        ctx = RuleContext(
            financial=inputs.scores.financial,
            risk=inputs.scores.risk,
            strategy=inputs.scores.strategy,
            operational_data=inputs.operational,
            operational=operational,
            sub_scores=sub_scores,
            commission_ratio=revenue.reform.commission_ratio,
        )
        gate_report = evaluate_gates(ctx)
        final_score = composite_score(sub_scores)
        result = decide(final_score, gate_report, ctx)

        logger.debug(
            "Evaluated %r: units=%d score=%d decision=%s gates=%d",
            inputs.project.name,
            total_units,
            final_score,
            result.decision.value,
            len(gate_report.gates),
        )

        return Evaluation(
            revenue=revenue,
            operational=operational,
            sub_scores=sub_scores,
            gate_report=gate_report,
            result=result,
            insights=build_insights(inputs.scores),
            warnings=self._warnings(inputs, revenue),
        )

    def _sub_scores(
        self,
        inputs: EvaluationInputs,
        revenue: RevenueBreakdown,
        operational: OperationalAssessment,
    ) -> SubScores:
        scores = inputs.scores
        return SubScores(
            financial=normalizers.financial_score(scores.financial),
            operational=operational.score,
            risk=normalizers.risk_score(scores.risk),
            strategy=normalizers.strategy_score(scores.strategy),
            reform_revenue=normalizers.reform_revenue_score(
                revenue.reform.net_revenue_per_unit
            ),
            communication=normalizers.communication_score(inputs.communication_package),
        )

    def _warnings(self, inputs: EvaluationInputs, revenue: RevenueBreakdown) -> list[str]:
        warnings: list[str] = []
        missing = [
            name
            for name in ("financial", "risk", "strategy")
            if getattr(inputs.scores, name) is None
        ]
        if missing:
            warnings.append(
                f"Grupos de avaliação ausentes: {', '.join(missing)}. "
                "Governança não avaliada."
            )
        if revenue.reform.adhesion_over_limit:
            warnings.append(
                f"Adesão total excede 100% "
                f"({format_percentage(revenue.reform.total_adhesion)})"
            )
        if revenue.total_units == 0:
            warnings.append("Número de unidades não informado")
        return warnings
