"""Governance gates.

Critical gates veto the project (automatic NO-GO) regardless of its
composite score; warning gates are surfaced without blocking.
"""

from __future__ import annotations

from typing import Optional

from gonogo.engine.formatting import format_brl, format_number, round_half_up
from gonogo.models.enums import GateSeverity
from gonogo.rules.context import RuleContext
from gonogo.rules.registry import register_gate

MIN_MARGIN = 3
MAX_PAYBACK_MONTHS = 24
CRITICAL_RISK_RATING = 8
MAX_CRITICAL_RISKS = 2
MAX_PEAK_UTILIZATION = 150
MIN_LTV = 5_000
MIN_ADHERENCE = 3


@register_gate(
    gate_id="insufficient_margin",
    label="Margem Insuficiente",
    severity=GateSeverity.CRITICAL,
    threshold="< 3%",
    description="Margem abaixo do mínimo aceitável para viabilidade do negócio",
)
def check_margin(ctx: RuleContext) -> Optional[str]:
    if ctx.financial.margin < MIN_MARGIN:
        return f"{format_number(ctx.financial.margin)}%"
    return None


@register_gate(
    gate_id="excessive_payback",
    label="Payback Excessivo",
    severity=GateSeverity.CRITICAL,
    threshold="> 24 meses",
    description="Período de retorno incompatível com estratégia de crescimento",
)
def check_payback(ctx: RuleContext) -> Optional[str]:
    if ctx.financial.payback > MAX_PAYBACK_MONTHS:
        return f"{format_number(ctx.financial.payback)} meses"
    return None


@register_gate(
    gate_id="high_risk_profile",
    label="Perfil de Risco Elevado",
    severity=GateSeverity.CRITICAL,
    threshold="< 2 riscos críticos",
    description="Múltiplos fatores de risco em nível crítico comprometem viabilidade",
)
def check_risk_profile(ctx: RuleContext) -> Optional[str]:
    critical_risks = sum(
        1 for rating in ctx.risk.core_ratings() if rating >= CRITICAL_RISK_RATING
    )
    if critical_risks >= MAX_CRITICAL_RISKS:
        return f"{critical_risks} riscos ≥8"
    return None


@register_gate(
    gate_id="critical_operational_capacity",
    label="Capacidade Operacional Crítica",
    severity=GateSeverity.CRITICAL,
    threshold="≤ 150% no pico",
    description="Demanda de pico excede significativamente a capacidade instalada",
)
def check_peak_capacity(ctx: RuleContext) -> Optional[str]:
    if ctx.operational.peak_utilization > MAX_PEAK_UTILIZATION:
        return f"{round_half_up(ctx.operational.peak_utilization)}%"
    return None


@register_gate(
    gate_id="low_ltv",
    label="LTV Abaixo do Esperado",
    severity=GateSeverity.WARNING,
    threshold="≥ R$5.000",
    description="Valor de vida do cliente insuficiente para justificar investimento",
)
def check_ltv(ctx: RuleContext) -> Optional[str]:
    if ctx.financial.ltv < MIN_LTV:
        return format_brl(ctx.financial.ltv)
    return None


@register_gate(
    gate_id="strategic_misalignment",
    label="Desalinhamento Estratégico",
    severity=GateSeverity.WARNING,
    threshold="> 3/10",
    description="Projeto não alinhado com diretrizes estratégicas da companhia",
)
def check_adherence(ctx: RuleContext) -> Optional[str]:
    if ctx.strategy.adherence <= MIN_ADHERENCE:
        return f"{format_number(ctx.strategy.adherence)}/10"
    return None
