"""Shared test fixtures for the Go/No-Go test suite."""

import pytest

from gonogo.models.enums import CommissionType, CommunicationTier, PackageType
from gonogo.models.inputs import (
    CommercialModel,
    EvaluationInputs,
    FinancialMetrics,
    OperationalData,
    ProjectInputs,
    ReformPackage,
    ReformPackageSet,
    RiskRatings,
    ScoreSet,
    StrategyRatings,
)


@pytest.fixture
def reform_packages() -> ReformPackageSet:
    """Reference packages: 24 400 expected revenue per unit."""
    return ReformPackageSet(
        bathroom=ReformPackage(package_type=PackageType.FULL, value=18_000, adhesion=35),
        kitchen=ReformPackage(package_type=PackageType.FULL, value=32_000, adhesion=25),
        living_room=ReformPackage(package_type=PackageType.PARTIAL, value=15_000, adhesion=30),
        bedroom=ReformPackage(package_type=PackageType.PARTIAL, value=14_000, adhesion=40),
    )


@pytest.fixture
def operational_data() -> OperationalData:
    return OperationalData(
        total_units=100,
        rooms_per_unit=4,
        work_duration=18,
        monthly_capacity_available=30,
        engineer_capacity=8,
        technical_complexity=5,
        supply_dependency=5,
        logistical_risk=5,
        standardization=6,
        peak_months=6,
        peak_multiplier=1.5,
        unit_production_capacity=10,
    )


@pytest.fixture
def nominal_scores() -> ScoreSet:
    return ScoreSet(
        financial=FinancialMetrics(margin=8, ticket=15_000, ltv=12_000, payback=18, cac=2_000),
        risk=RiskRatings(legal=5, default=5, reputational=5, operational=5),
        strategy=StrategyRatings(adherence=7, synergy=7, recurrence=6, cross_sell=6),
    )


@pytest.fixture
def nominal_inputs(reform_packages, operational_data, nominal_scores) -> EvaluationInputs:
    """100-unit development that lands in GO WITH CONDITIONS (score 64), no gates.

    financial 4.7509, operational 7.775, risk 5, strategy 6.5,
    reform revenue 10, communication 8.
    """
    return EvaluationInputs(
        project=ProjectInputs(name="Residencial Vista Mar", total_units=100),
        reform_packages=reform_packages,
        commercial=CommercialModel(
            commission_type=CommissionType.PERCENTAGE, commission_value=10
        ),
        operational=operational_data,
        scores=nominal_scores,
        communication_package=CommunicationTier.STANDARD,
    )


@pytest.fixture
def empty_inputs() -> EvaluationInputs:
    """A blank form: every field at its default, no score groups."""
    return EvaluationInputs()
