"""Revenue calculators.

Each function is a pure calculation with no side effects. Monetary values
are in BRL. Zero unit counts never raise: per-unit figures divide by
``total_units or 1`` so an empty project reports 0 instead of NaN.
"""

from __future__ import annotations

from dataclasses import dataclass

from gonogo.engine.result import (
    InstallationLine,
    InstallationSummary,
    LTVProjection,
    PackageRevenue,
    ReformRevenue,
    RevenueBreakdown,
    TypologyLine,
    TypologySummary,
)
from gonogo.models.enums import CommissionType, CommunicationTier
from gonogo.models.inputs import (
    CommercialModel,
    EvaluationInputs,
    FinancialMetrics,
    InstallationItem,
    ReformPackageSet,
    TypologyRow,
)

MAX_REVENUE_PER_UNIT = 80_000
MAX_TOTAL_ADHESION = 100
CAPTURE_PER_M2 = 1_200
CROSS_SELL_RATE = 0.15
LTV_PROJECTION_YEARS = 3


@dataclass(frozen=True)
class CommunicationPackage:
    """Catalog entry for a communication package tier."""

    tier: CommunicationTier
    name: str
    value: float
    description: str
    features: tuple[str, ...]
    popular: bool = False


COMMUNICATION_PACKAGES: dict[CommunicationTier, CommunicationPackage] = {
    CommunicationTier.BASIC: CommunicationPackage(
        tier=CommunicationTier.BASIC,
        name="Basic",
        value=20_000,
        description="Comunicação essencial",
        features=(
            "Material de ponto de venda",
            "Folhetos informativos",
            "Sinalização básica",
            "Suporte por email",
        ),
    ),
    CommunicationTier.STANDARD: CommunicationPackage(
        tier=CommunicationTier.STANDARD,
        name="Standard",
        value=45_000,
        description="Comunicação completa",
        features=(
            "Tudo do Basic",
            "Stand customizado",
            "Material digital",
            "Campanha de email marketing",
            "Gerente de conta dedicado",
        ),
        popular=True,
    ),
    CommunicationTier.PREMIUM: CommunicationPackage(
        tier=CommunicationTier.PREMIUM,
        name="Premium",
        value=85_000,
        description="Solução 360º",
        features=(
            "Tudo do Standard",
            "Evento de lançamento",
            "Campanha em redes sociais",
            "Vídeo institucional",
            "App personalizado",
            "Assessoria estratégica",
        ),
    ),
}


def resolve_total_units(inputs: EvaluationInputs) -> int:
    """Pick the unit count every downstream calculation uses.

    Typology mix total first, then the project's declared unit count,
    then the operational form's own count.
    """
    typology_units = sum(row.quantity for row in inputs.typologies)
    if typology_units > 0:
        return typology_units
    if inputs.project.total_units > 0:
        return inputs.project.total_units
    return inputs.operational.total_units


def per_unit(amount: float, total_units: int) -> float:
    return amount / (total_units or 1)


def package_revenues(
    packages: ReformPackageSet, total_units: int
) -> list[PackageRevenue]:
    """Revenue per slot = value x adhesion/100 x units (no cap applied)."""
    return [
        PackageRevenue(
            slot=slot,
            value=package.value,
            adhesion=package.adhesion,
            revenue=(package.value * package.adhesion / 100) * total_units,
        )
        for slot, package in packages.slots()
    ]


def gross_reform_revenue(packages: ReformPackageSet, total_units: int) -> float:
    """Sum of slot revenues, capped at MAX_REVENUE_PER_UNIT x units.

    The cap applies to the total, not to individual slots.
    """
    total = sum(p.revenue for p in package_revenues(packages, total_units))
    if per_unit(total, total_units) > MAX_REVENUE_PER_UNIT:
        total = MAX_REVENUE_PER_UNIT * total_units
    return total


def commission_amount(
    commercial: CommercialModel, gross_revenue: float, total_units: int
) -> float:
    """Developer commission: a share of gross revenue or a fixed fee per unit."""
    if commercial.commission_type == CommissionType.PERCENTAGE:
        return commercial.commission_value * gross_revenue / 100
    return commercial.commission_value * total_units


def commission_ratio(commission: float, gross_revenue: float) -> float:
    """Commission as a share of gross revenue.

    A zero gross counts as 1, so a fixed fee on a project with no reform
    revenue reads as an oversized ratio.
    """
    return commission / (gross_revenue or 1)


def commission_impact(ratio: float) -> str:
    if ratio > 0.20:
        return "high"
    if ratio > 0.15:
        return "attention"
    return "normal"


def reform_revenue(
    packages: ReformPackageSet,
    commercial: CommercialModel,
    total_units: int,
) -> ReformRevenue:
    revenues = package_revenues(packages, total_units)
    uncapped = sum(p.revenue for p in revenues)
    gross = gross_reform_revenue(packages, total_units)
    commission = commission_amount(commercial, gross, total_units)
    ratio = commission_ratio(commission, gross)
    net = gross - commission
    total_adhesion = packages.total_adhesion()

    return ReformRevenue(
        package_revenues=revenues,
        uncapped_revenue=uncapped,
        gross_revenue=gross,
        capped=gross < uncapped,
        gross_revenue_per_unit=per_unit(gross, total_units),
        commission=commission,
        commission_ratio=ratio,
        commission_impact=commission_impact(ratio),
        net_revenue=net,
        net_revenue_per_unit=per_unit(net, total_units),
        total_adhesion=total_adhesion,
        adhesion_over_limit=total_adhesion > MAX_TOTAL_ADHESION,
    )


def communication_revenue(tier: CommunicationTier) -> float:
    package = COMMUNICATION_PACKAGES.get(tier)
    return package.value if package is not None else 0.0


def summarize_typologies(typologies: list[TypologyRow]) -> TypologySummary:
    """Unit mix totals.

    Capture potential = area x CAPTURE_PER_M2 x quantity, i.e. what the
    retailer could bill for furnishing each unit.
    """
    lines = [
        TypologyLine(
            id=row.id,
            label=row.label,
            vgv=row.sale_price * row.quantity,
            capture_per_unit=row.area_m2 * CAPTURE_PER_M2,
            capture_potential=row.area_m2 * CAPTURE_PER_M2 * row.quantity,
        )
        for row in typologies
    ]
    total_vgv = sum(line.vgv for line in lines)
    capture = sum(line.capture_potential for line in lines)
    return TypologySummary(
        lines=lines,
        total_units=sum(row.quantity for row in typologies),
        total_vgv=total_vgv,
        capture_potential=capture,
        capture_share_of_vgv=(capture / total_vgv * 100) if total_vgv > 0 else 0.0,
    )


def installation_health(margin_percentage: float) -> str:
    if margin_percentage >= 25:
        return "Instalações simples com margem sustentável"
    if margin_percentage >= 15:
        return "Margem em atenção - monitorar repasses"
    return "Modelo de repasse exige revisão"


def summarize_installations(items: list[InstallationItem]) -> InstallationSummary:
    lines: list[InstallationLine] = []
    for item in items:
        gross = item.sale_price * item.quantity
        cost = item.provider_payout * item.quantity
        margin = gross - cost
        lines.append(
            InstallationLine(
                id=item.id,
                kind=item.kind,
                quantity=item.quantity,
                gross_revenue=gross,
                payout_cost=cost,
                margin=margin,
                margin_percentage=(margin / gross * 100) if gross > 0 else 0.0,
            )
        )

    gross_total = sum(line.gross_revenue for line in lines)
    margin_total = sum(line.margin for line in lines)
    margin_pct = (margin_total / gross_total * 100) if gross_total > 0 else 0.0
    return InstallationSummary(
        lines=lines,
        total_quantity=sum(line.quantity for line in lines),
        gross_revenue=gross_total,
        payout_cost=sum(line.payout_cost for line in lines),
        margin=margin_total,
        margin_percentage=margin_pct,
        health=installation_health(margin_pct) if lines else "",
    )


def project_ltv(typologies: list[TypologyRow], service_margin: float) -> LTVProjection:
    """Customer lifetime value from the unit mix.

    LTV per client = capture x service_margin% + capture x CROSS_SELL_RATE
    x LTV_PROJECTION_YEARS.
    """
    summary = summarize_typologies(typologies)
    capture_per_unit = (
        summary.capture_potential / summary.total_units
        if summary.total_units > 0
        else 0.0
    )
    initial_margin = capture_per_unit * (service_margin / 100)
    annual_cross_sell = capture_per_unit * CROSS_SELL_RATE
    cross_sell_total = annual_cross_sell * LTV_PROJECTION_YEARS
    ltv_per_client = initial_margin + cross_sell_total

    return LTVProjection(
        capture_per_unit=capture_per_unit,
        initial_margin=initial_margin,
        annual_cross_sell=annual_cross_sell,
        cross_sell_total=cross_sell_total,
        ltv_per_client=ltv_per_client,
        development_potential=capture_per_unit * summary.total_units,
        development_ltv=ltv_per_client * summary.total_units,
    )


def litigation_adjusted_margin(
    financial: FinancialMetrics, litigation_percentage: float
) -> float:
    """Margin left after the share expected to be lost to litigation."""
    return financial.margin * (1 - litigation_percentage / 100)


def revenue_breakdown(inputs: EvaluationInputs, total_units: int) -> RevenueBreakdown:
    financial = inputs.scores.financial or FinancialMetrics()
    litigation = (
        inputs.scores.risk.litigation_percentage if inputs.scores.risk else 0.0
    )
    return RevenueBreakdown(
        total_units=total_units,
        reform=reform_revenue(inputs.reform_packages, inputs.commercial, total_units),
        communication_tier=inputs.communication_package,
        communication_revenue=communication_revenue(inputs.communication_package),
        typology=summarize_typologies(inputs.typologies),
        installations=summarize_installations(inputs.installations),
        ltv=project_ltv(inputs.typologies, financial.margin),
        litigation_adjusted_margin=litigation_adjusted_margin(financial, litigation),
    )
