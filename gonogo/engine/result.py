"""Immutable result records produced by the decision engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from gonogo.models.enums import (
    ActionPriority,
    BottleneckSeverity,
    CommunicationTier,
    Decision,
    GateSeverity,
    InstallationType,
)


@dataclass(frozen=True)
class PackageRevenue:
    """Revenue contributed by one reform slot before the per-unit cap."""

    slot: str
    value: float
    adhesion: float
    revenue: float


@dataclass(frozen=True)
class ReformRevenue:
    package_revenues: list[PackageRevenue]
    uncapped_revenue: float
    gross_revenue: float
    capped: bool
    gross_revenue_per_unit: float
    commission: float
    commission_ratio: float
    commission_impact: str
    net_revenue: float
    net_revenue_per_unit: float
    total_adhesion: float
    adhesion_over_limit: bool


@dataclass(frozen=True)
class TypologyLine:
    id: str
    label: str
    vgv: float
    capture_per_unit: float
    capture_potential: float


@dataclass(frozen=True)
class TypologySummary:
    lines: list[TypologyLine]
    total_units: int
    total_vgv: float
    capture_potential: float
    capture_share_of_vgv: float


@dataclass(frozen=True)
class InstallationLine:
    id: str
    kind: InstallationType
    quantity: int
    gross_revenue: float
    payout_cost: float
    margin: float
    margin_percentage: float


@dataclass(frozen=True)
class InstallationSummary:
    lines: list[InstallationLine]
    total_quantity: int
    gross_revenue: float
    payout_cost: float
    margin: float
    margin_percentage: float
    health: str


@dataclass(frozen=True)
class LTVProjection:
    capture_per_unit: float
    initial_margin: float
    annual_cross_sell: float
    cross_sell_total: float
    ltv_per_client: float
    development_potential: float
    development_ltv: float


@dataclass(frozen=True)
class RevenueBreakdown:
    total_units: int
    reform: ReformRevenue
    communication_tier: CommunicationTier
    communication_revenue: float
    typology: TypologySummary
    installations: InstallationSummary
    ltv: LTVProjection
    litigation_adjusted_margin: float


@dataclass(frozen=True)
class Bottleneck:
    severity: BottleneckSeverity
    title: str
    description: str


@dataclass(frozen=True)
class EngineeringSchedule:
    """Delivery schedule for a given monthly unit production capacity."""

    production_capacity: float
    schedule_months: int
    operational_cost: float
    monthly_cost: float
    max_efficiency: bool
    recommended_capacity: Optional[int] = None


@dataclass(frozen=True)
class OperationalAssessment:
    total_units: int
    total_rooms: float
    required_monthly_capacity: float
    capacity_utilization: float
    peak_multiplier: float
    peak_capacity: float
    peak_utilization: float
    concentration_risk: float
    has_concentration_risk: bool
    execution_score: float
    execution_status: str
    engineers_needed: int
    technical_utilization: float
    technical_score: float
    technical_status: str
    supply_complexity_score: float
    score: float
    bottlenecks: list[Bottleneck]
    schedule: EngineeringSchedule


@dataclass(frozen=True)
class SubScores:
    """Category scores, each on a 0-10 scale."""

    financial: float
    operational: float
    risk: float
    strategy: float
    reform_revenue: float
    communication: float

    def as_dict(self) -> dict[str, float]:
        return {
            "financial": self.financial,
            "operational": self.operational,
            "risk": self.risk,
            "strategy": self.strategy,
            "reform_revenue": self.reform_revenue,
            "communication": self.communication,
        }


@dataclass(frozen=True)
class GovernanceGate:
    """A triggered governance gate."""

    gate_id: str
    label: str
    severity: GateSeverity
    threshold: str
    current: str
    description: str


@dataclass(frozen=True)
class GateReport:
    gates: list[GovernanceGate]
    auto_no_go: bool
    remediation_actions: list[str] = field(default_factory=list)
    advisory: Optional[str] = None

    @property
    def critical(self) -> list[GovernanceGate]:
        return [g for g in self.gates if g.severity == GateSeverity.CRITICAL]

    @property
    def warnings(self) -> list[GovernanceGate]:
        return [g for g in self.gates if g.severity == GateSeverity.WARNING]


@dataclass(frozen=True)
class RenegotiationAdvisory:
    """Non-blocking advisory raised alongside the primary decision."""

    needed: bool
    reasons: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class DecisionResult:
    final_score: int
    decision: Decision
    label: str
    gates: list[GovernanceGate]
    factors: list[str]
    explanation: str
    conditionals: list[str]
    renegotiation: RenegotiationAdvisory


@dataclass(frozen=True)
class InsightItem:
    title: str
    description: str


@dataclass(frozen=True)
class SuggestedAction:
    priority: ActionPriority
    action: str
    description: str


@dataclass(frozen=True)
class Insights:
    critical_risks: list[InsightItem]
    opportunities: list[InsightItem]
    suggested_actions: list[SuggestedAction]


@dataclass(frozen=True)
class Evaluation:
    """Top-level output of one engine run."""

    revenue: RevenueBreakdown
    operational: OperationalAssessment
    sub_scores: SubScores
    gate_report: GateReport
    result: DecisionResult
    insights: Insights
    warnings: list[str] = field(default_factory=list)
