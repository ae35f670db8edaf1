"""Tests for the revenue calculators."""

import pytest

from gonogo.engine.revenue import (
    MAX_REVENUE_PER_UNIT,
    commission_amount,
    commission_impact,
    commission_ratio,
    communication_revenue,
    gross_reform_revenue,
    installation_health,
    litigation_adjusted_margin,
    project_ltv,
    reform_revenue,
    resolve_total_units,
    summarize_installations,
    summarize_typologies,
)
from gonogo.models.enums import CommissionType, CommunicationTier, InstallationType
from gonogo.models.inputs import (
    CommercialModel,
    EvaluationInputs,
    FinancialMetrics,
    InstallationItem,
    OperationalData,
    ProjectInputs,
    ReformPackage,
    ReformPackageSet,
    TypologyRow,
)


@pytest.fixture
def typologies():
    return [
        TypologyRow(label="2 dormitórios", area_m2=62, quantity=80, sale_price=650_000),
        TypologyRow(label="3 dormitórios", area_m2=85, quantity=40, sale_price=890_000),
    ]


@pytest.fixture
def percentage_commission():
    return CommercialModel(commission_type=CommissionType.PERCENTAGE, commission_value=10)


class TestReformRevenue:
    def test_reference_packages(self, reform_packages, percentage_commission):
        result = reform_revenue(reform_packages, percentage_commission, 100)
        assert result.gross_revenue == pytest.approx(2_440_000)
        assert result.commission == pytest.approx(244_000)
        assert result.net_revenue == pytest.approx(2_196_000)
        assert result.net_revenue_per_unit == pytest.approx(21_960)
        assert result.capped is False

    def test_slot_breakdown_in_fixed_order(self, reform_packages, percentage_commission):
        result = reform_revenue(reform_packages, percentage_commission, 100)
        assert [p.slot for p in result.package_revenues] == [
            "bathroom", "kitchen", "living_room", "bedroom",
        ]
        assert [p.revenue for p in result.package_revenues] == pytest.approx(
            [630_000, 800_000, 450_000, 560_000]
        )

    def test_scales_linearly_below_cap(self, reform_packages):
        assert gross_reform_revenue(reform_packages, 200) == pytest.approx(
            2 * gross_reform_revenue(reform_packages, 100)
        )

    def test_cap_applies_to_total(self, percentage_commission):
        packages = ReformPackageSet(
            bathroom=ReformPackage(value=300_000, adhesion=100),
        )
        result = reform_revenue(packages, percentage_commission, 10)
        assert result.uncapped_revenue == pytest.approx(3_000_000)
        assert result.gross_revenue == pytest.approx(MAX_REVENUE_PER_UNIT * 10)
        assert result.capped is True

    def test_single_slot_may_exceed_cap_share(self):
        """Only the total is capped; one large slot with the rest empty passes."""
        packages = ReformPackageSet(kitchen=ReformPackage(value=80_000, adhesion=100))
        assert gross_reform_revenue(packages, 5) == pytest.approx(400_000)

    def test_fixed_commission_per_unit(self, reform_packages):
        fixed = CommercialModel(commission_type=CommissionType.FIXED, commission_value=500)
        result = reform_revenue(reform_packages, fixed, 100)
        assert result.commission == pytest.approx(50_000)
        assert result.net_revenue == pytest.approx(2_390_000)

    def test_zero_units_reports_zero(self, reform_packages, percentage_commission):
        result = reform_revenue(reform_packages, percentage_commission, 0)
        assert result.gross_revenue == 0
        assert result.net_revenue == 0
        assert result.gross_revenue_per_unit == 0
        assert result.net_revenue_per_unit == 0
        assert result.commission_ratio == 0

    def test_adhesion_over_limit_flagged_not_clamped(self, percentage_commission):
        packages = ReformPackageSet(
            bathroom=ReformPackage(value=10_000, adhesion=60),
            kitchen=ReformPackage(value=10_000, adhesion=60),
        )
        result = reform_revenue(packages, percentage_commission, 10)
        assert result.total_adhesion == 120
        assert result.adhesion_over_limit is True
        assert result.gross_revenue == pytest.approx(120_000)


class TestCommission:
    def test_percentage(self, percentage_commission):
        assert commission_amount(percentage_commission, 1_000_000, 50) == pytest.approx(100_000)

    def test_zero_gross_counts_as_one(self):
        assert commission_ratio(5_000, 0) == 5_000
        assert commission_ratio(0, 0) == 0

    def test_fixed_fee_without_reform_revenue(self):
        fixed = CommercialModel(commission_type=CommissionType.FIXED, commission_value=5_000)
        result = reform_revenue(ReformPackageSet(), fixed, 100)
        assert result.gross_revenue == 0
        assert result.commission == pytest.approx(500_000)
        assert result.commission_ratio > 0.15
        assert result.commission_impact == "high"
        assert result.net_revenue_per_unit == pytest.approx(-5_000)

    @pytest.mark.parametrize(
        "ratio,expected",
        [(0.25, "high"), (0.21, "high"), (0.2, "attention"), (0.16, "attention"), (0.15, "normal")],
    )
    def test_impact_levels(self, ratio, expected):
        assert commission_impact(ratio) == expected


class TestCommunicationRevenue:
    def test_tier_lookup(self):
        assert communication_revenue(CommunicationTier.BASIC) == 20_000
        assert communication_revenue(CommunicationTier.STANDARD) == 45_000
        assert communication_revenue(CommunicationTier.PREMIUM) == 85_000

    def test_none_is_zero(self):
        assert communication_revenue(CommunicationTier.NONE) == 0


class TestTotalUnits:
    def test_typology_mix_wins(self, typologies):
        inputs = EvaluationInputs(
            project=ProjectInputs(total_units=999),
            typologies=typologies,
        )
        assert resolve_total_units(inputs) == 120

    def test_project_units_when_no_mix(self):
        inputs = EvaluationInputs(
            project=ProjectInputs(total_units=64),
            operational=OperationalData(total_units=10),
        )
        assert resolve_total_units(inputs) == 64

    def test_operational_units_last(self):
        inputs = EvaluationInputs(operational=OperationalData(total_units=10))
        assert resolve_total_units(inputs) == 10

    def test_all_empty(self, empty_inputs):
        assert resolve_total_units(empty_inputs) == 0


class TestTypologySummary:
    def test_totals(self, typologies):
        summary = summarize_typologies(typologies)
        assert summary.total_units == 120
        assert summary.total_vgv == pytest.approx(87_600_000)
        assert summary.capture_potential == pytest.approx(10_032_000)
        assert summary.capture_share_of_vgv == pytest.approx(10_032_000 / 87_600_000 * 100)

    def test_empty_mix(self):
        summary = summarize_typologies([])
        assert summary.total_units == 0
        assert summary.capture_share_of_vgv == 0.0


class TestLTVProjection:
    def test_per_client_and_development(self, typologies):
        ltv = project_ltv(typologies, service_margin=8)
        assert ltv.capture_per_unit == pytest.approx(83_600)
        assert ltv.initial_margin == pytest.approx(6_688)
        assert ltv.annual_cross_sell == pytest.approx(12_540)
        assert ltv.cross_sell_total == pytest.approx(37_620)
        assert ltv.ltv_per_client == pytest.approx(44_308)
        assert ltv.development_ltv == pytest.approx(44_308 * 120)

    def test_no_typologies(self):
        ltv = project_ltv([], service_margin=8)
        assert ltv.capture_per_unit == 0
        assert ltv.ltv_per_client == 0


class TestInstallations:
    def test_line_and_totals(self):
        items = [
            InstallationItem(
                kind=InstallationType.SPLIT_AC, quantity=10, sale_price=2_800, provider_payout=2_000
            ),
            InstallationItem(
                kind=InstallationType.SHOWER, quantity=20, sale_price=500, provider_payout=400
            ),
        ]
        summary = summarize_installations(items)
        assert summary.lines[0].gross_revenue == pytest.approx(28_000)
        assert summary.lines[0].margin == pytest.approx(8_000)
        assert summary.total_quantity == 30
        assert summary.gross_revenue == pytest.approx(38_000)
        assert summary.payout_cost == pytest.approx(28_000)
        assert summary.margin_percentage == pytest.approx(10_000 / 38_000 * 100)

    def test_zero_price_line(self):
        summary = summarize_installations([InstallationItem(quantity=3)])
        assert summary.lines[0].margin_percentage == 0.0
        assert summary.margin_percentage == 0.0

    def test_no_lines_has_no_health(self):
        assert summarize_installations([]).health == ""

    @pytest.mark.parametrize(
        "margin,expected",
        [
            (30, "Instalações simples com margem sustentável"),
            (25, "Instalações simples com margem sustentável"),
            (20, "Margem em atenção - monitorar repasses"),
            (10, "Modelo de repasse exige revisão"),
        ],
    )
    def test_health(self, margin, expected):
        assert installation_health(margin) == expected


class TestLitigationAdjustedMargin:
    def test_discounts_litigation_share(self):
        assert litigation_adjusted_margin(FinancialMetrics(margin=10), 20) == pytest.approx(8)

    def test_no_litigation(self):
        assert litigation_adjusted_margin(FinancialMetrics(margin=10), 0) == pytest.approx(10)
