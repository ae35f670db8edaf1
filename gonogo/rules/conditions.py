"""Remediation conditions for GO WITH CONDITIONS decisions.

Evaluated in registration order; the classifier keeps the first few that
apply.
"""

from __future__ import annotations

from gonogo.rules.context import RuleContext
from gonogo.rules.registry import register_condition


@register_condition(
    "legal_due_diligence", "Aprovação jurídica com due diligence completa"
)
def needs_legal_review(ctx: RuleContext) -> bool:
    return ctx.risk is not None and ctx.risk.legal >= 6


@register_condition(
    "contractual_guarantees", "Estabelecimento de garantias contratuais robustas"
)
def needs_guarantees(ctx: RuleContext) -> bool:
    return ctx.risk is not None and ctx.risk.default >= 6


@register_condition(
    "cost_structure_review", "Revisão e otimização da estrutura de custos"
)
def needs_cost_review(ctx: RuleContext) -> bool:
    return ctx.financial is not None and ctx.financial.margin < 7


@register_condition(
    "execution_plan", "Plano de execução detalhado com marcos de validação"
)
def needs_execution_plan(ctx: RuleContext) -> bool:
    return ctx.operational_data.technical_complexity >= 7


@register_condition(
    "risk_mitigation_plan", "Plano de mitigação de riscos aprovado pelo comitê"
)
def needs_mitigation_plan(ctx: RuleContext) -> bool:
    return ctx.sub_scores.risk < 5
