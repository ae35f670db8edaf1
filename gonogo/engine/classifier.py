"""Decision classification.

First match wins: automatic NO-GO from a critical gate, then the score
bands GO (>= 70), GO WITH CONDITIONS (>= 50) and NO-GO.
"""

from __future__ import annotations

# Ensure all remediation conditions are registered on import
import gonogo.rules.conditions  # noqa: F401
from gonogo.engine.result import (
    DecisionResult,
    GateReport,
    RenegotiationAdvisory,
    SubScores,
)
from gonogo.models.enums import Decision
from gonogo.rules.context import RuleContext
from gonogo.rules.registry import get_all_conditions

GO_THRESHOLD = 70
CONDITIONAL_THRESHOLD = 50
STRONG_SCORE = 7
WEAK_SCORE = 5
MAX_FACTORS = 2
MAX_CONDITIONALS = 4

MAX_COMMISSION_RATIO = 0.15
MIN_HEALTHY_MARGIN = 7

DECISION_LABELS: dict[Decision, str] = {
    Decision.AUTOMATIC_NO_GO: "NO-GO AUTOMÁTICO",
    Decision.GO: "GO",
    Decision.GO_WITH_CONDITIONS: "GO COM RESSALVAS",
    Decision.NO_GO: "NO-GO",
}

# (category, strong phrase, weak phrase)
_FACTOR_PHRASES = [
    ("financial", "viabilidade financeira sólida", "viabilidade financeira comprometida"),
    ("operational", "forte capacidade operacional", "limitações operacionais"),
    ("risk", "baixo perfil de risco", "alto perfil de risco"),
    ("strategy", "alta aderência estratégica", "baixa aderência estratégica"),
]
MODERATE_FACTOR = "indicadores moderados em todas as dimensões"


def classify(final_score: int, auto_no_go: bool) -> Decision:
    if auto_no_go:
        return Decision.AUTOMATIC_NO_GO
    if final_score >= GO_THRESHOLD:
        return Decision.GO
    if final_score >= CONDITIONAL_THRESHOLD:
        return Decision.GO_WITH_CONDITIONS
    return Decision.NO_GO


def decision_factors(sub_scores: SubScores) -> list[str]:
    """Strong phrases first, then weak ones; at most MAX_FACTORS."""
    scores = sub_scores.as_dict()
    strong = [s for cat, s, _ in _FACTOR_PHRASES if scores[cat] >= STRONG_SCORE]
    weak = [w for cat, _, w in _FACTOR_PHRASES if scores[cat] < WEAK_SCORE]
    factors = (strong + weak)[:MAX_FACTORS]
    return factors or [MODERATE_FACTOR]


def explanation(label: str, factors: list[str]) -> str:
    return (
        f"Esta decisão foi classificada como {label} "
        f"principalmente devido a {' e '.join(factors)}."
    )


def conditionals(decision: Decision, ctx: RuleContext) -> list[str]:
    if decision != Decision.GO_WITH_CONDITIONS:
        return []
    applicable = [
        cond.text
        for cond in get_all_conditions().values()
        if cond.applies_fn(ctx)
    ]
    return applicable[:MAX_CONDITIONALS]


def renegotiation_advisory(ctx: RuleContext) -> RenegotiationAdvisory:
    reasons: list[str] = []
    if ctx.commission_ratio > MAX_COMMISSION_RATIO:
        reasons.append("Comissão acima de 15% impacta significativamente a margem líquida")
    if ctx.financial is not None and ctx.financial.margin < MIN_HEALTHY_MARGIN:
        reasons.append("Margem abaixo de 7% requer otimização de estrutura de custos")
    return RenegotiationAdvisory(needed=bool(reasons), reasons=reasons)


def decide(final_score: int, gate_report: GateReport, ctx: RuleContext) -> DecisionResult:
    """Build the full decision record for a scored evaluation."""
    decision = classify(final_score, gate_report.auto_no_go)
    label = DECISION_LABELS[decision]
    factors = decision_factors(ctx.sub_scores)
    return DecisionResult(
        final_score=final_score,
        decision=decision,
        label=label,
        gates=list(gate_report.gates),
        factors=factors,
        explanation=explanation(label, factors),
        conditionals=conditionals(decision, ctx),
        renegotiation=renegotiation_advisory(ctx),
    )
