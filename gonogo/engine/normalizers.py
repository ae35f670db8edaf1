"""Sub-score normalizers.

Map raw business metrics onto a common 0-10 scale where higher is better.
Linear interpolation against a fixed domain, clamped to [0, 10].
"""

from __future__ import annotations

from typing import Optional

from gonogo.models.enums import CommunicationTier
from gonogo.models.inputs import FinancialMetrics, RiskRatings, StrategyRatings

MARGIN_DOMAIN = (0, 15)
TICKET_DOMAIN = (2_000, 40_000)
LTV_DOMAIN = (0, 30_000)
PAYBACK_DOMAIN = (0, 36)
CAC_DOMAIN = (0, 5_000)

REFERENCE_NET_REVENUE_PER_UNIT = 10_000

COMMUNICATION_SCORES: dict[CommunicationTier, float] = {
    CommunicationTier.NONE: 5,
    CommunicationTier.BASIC: 6,
    CommunicationTier.STANDARD: 8,
    CommunicationTier.PREMIUM: 10,
}


def clamp_score(value: float) -> float:
    return max(0.0, min(10.0, value))


def _mean(values: list[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def normalize_margin(margin: float) -> float:
    """0-15% -> 0-10"""
    return clamp_score((margin / MARGIN_DOMAIN[1]) * 10)


def normalize_ticket(ticket: float) -> float:
    """R$2k-40k -> 0-10"""
    low, high = TICKET_DOMAIN
    return clamp_score(((ticket - low) / (high - low)) * 10)


def normalize_ltv(ltv: float) -> float:
    """R$0-30k -> 0-10"""
    return clamp_score((ltv / LTV_DOMAIN[1]) * 10)


def normalize_payback(payback: float) -> float:
    """0-36 months -> 10-0 (shorter is better)"""
    return clamp_score(10 - (payback / PAYBACK_DOMAIN[1]) * 10)


def normalize_cac(cac: float) -> float:
    """R$0-5k -> 10-0 (cheaper is better)"""
    return clamp_score(10 - (cac / CAC_DOMAIN[1]) * 10)


def normalized_financials(financial: FinancialMetrics) -> dict[str, float]:
    return {
        "margin": normalize_margin(financial.margin),
        "ticket": normalize_ticket(financial.ticket),
        "ltv": normalize_ltv(financial.ltv),
        "payback": normalize_payback(financial.payback),
        "cac": normalize_cac(financial.cac),
    }


def financial_score(financial: Optional[FinancialMetrics]) -> float:
    """Unweighted mean of the five normalized financial metrics."""
    return _mean(list(normalized_financials(financial or FinancialMetrics()).values()))


def risk_score(risk: Optional[RiskRatings]) -> float:
    """10 - mean(legal, default, reputational, operational).

    Raw risk ratings are "higher is worse"; the result is "higher is better".
    """
    return clamp_score(10 - _mean((risk or RiskRatings()).core_ratings()))


def strategy_score(strategy: Optional[StrategyRatings]) -> float:
    s = strategy or StrategyRatings()
    return _mean([s.adherence, s.synergy, s.recurrence, s.cross_sell])


def reform_revenue_score(net_revenue_per_unit: float) -> float:
    """R$10k net revenue per unit or more scores 10.

    Capped above only: a commission larger than gross revenue scores below 0.
    """
    return min(10.0, (net_revenue_per_unit / REFERENCE_NET_REVENUE_PER_UNIT) * 10)


def communication_score(tier: Optional[CommunicationTier]) -> float:
    """Fixed score per tier; no package selected is neutral (5)."""
    if tier is None:
        return COMMUNICATION_SCORES[CommunicationTier.NONE]
    return COMMUNICATION_SCORES.get(tier, COMMUNICATION_SCORES[CommunicationTier.NONE])
