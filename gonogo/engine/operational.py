"""Operational viability analysis.

The consolidated operational score weighs three blocks:

- execution capacity (40%): monthly room throughput vs. installed capacity
- technical structure (30%): engineering headcount load
- supply & complexity (30%): inverted complexity/supply/logistics ratings
  plus standardization

Missing inputs never raise; a block without data falls back to its
neutral value.
"""

from __future__ import annotations

import math

from gonogo.engine.result import (
    Bottleneck,
    EngineeringSchedule,
    OperationalAssessment,
)
from gonogo.models.enums import BottleneckSeverity
from gonogo.models.inputs import OperationalData

EXECUTION_WEIGHT = 0.40
TECHNICAL_WEIGHT = 0.30
SUPPLY_COMPLEXITY_WEIGHT = 0.30

DEFAULT_PEAK_MULTIPLIER = 1.5
CONCENTRATION_THRESHOLD = 0.3
MAX_BOTTLENECKS = 4

OPERATIONAL_COST_PER_UNIT = 2_500
MAX_EFFICIENCY_MONTHS = 12

AWAITING_DATA = "Aguardando dados"


def required_monthly_capacity(total_units: int, data: OperationalData) -> float:
    """Rooms to deliver per month over the work duration."""
    if data.work_duration <= 0:
        return 0.0
    return (total_units * data.rooms_per_unit) / data.work_duration


def capacity_utilization(required: float, data: OperationalData) -> float:
    if data.monthly_capacity_available <= 0:
        return 0.0
    return required / data.monthly_capacity_available


def peak_multiplier(data: OperationalData) -> float:
    return data.peak_multiplier or DEFAULT_PEAK_MULTIPLIER


def peak_utilization(required: float, data: OperationalData) -> float:
    """Peak-month demand as a percentage of installed capacity."""
    if data.monthly_capacity_available <= 0:
        return 0.0
    return required * peak_multiplier(data) / data.monthly_capacity_available * 100


def execution_score(utilization: float) -> float:
    if utilization > 1.0:
        return 3
    if utilization > 0.85:
        return 6
    if utilization > 0.7:
        return 8
    return 10


def engineers_needed(total_units: int, data: OperationalData) -> int:
    if not total_units or not data.work_duration or not data.engineer_capacity:
        return 0
    return math.ceil(total_units / (data.engineer_capacity * data.work_duration))


def engineer_utilization(total_units: int, data: OperationalData) -> float:
    """Workload per engineer relative to the optimal workload."""
    engineers = engineers_needed(total_units, data)
    if engineers == 0:
        return 0.0
    workload = total_units / engineers
    optimal = data.engineer_capacity * data.work_duration
    return workload / optimal


def technical_score(total_units: int, data: OperationalData) -> float:
    if engineers_needed(total_units, data) == 0:
        return 5
    utilization = engineer_utilization(total_units, data)
    if utilization <= 0.8:
        return 10
    if utilization <= 1.0:
        return 7
    return 4


def technical_status(total_units: int, data: OperationalData) -> str:
    if engineers_needed(total_units, data) == 0:
        return AWAITING_DATA
    utilization = engineer_utilization(total_units, data)
    if utilization <= 0.8:
        return "Adequado"
    if utilization <= 1.0:
        return "Risco Moderado"
    return "Crítico"


def supply_complexity_score(data: OperationalData) -> float:
    return (
        (10 - data.technical_complexity)
        + (10 - data.supply_dependency)
        + (10 - data.logistical_risk)
        + data.standardization
    ) / 4


def operational_score(total_units: int, data: OperationalData) -> float:
    """Weighted operational viability on 0-10."""
    utilization = capacity_utilization(
        required_monthly_capacity(total_units, data), data
    )
    return (
        execution_score(utilization) * EXECUTION_WEIGHT
        + technical_score(total_units, data) * TECHNICAL_WEIGHT
        + supply_complexity_score(data) * SUPPLY_COMPLEXITY_WEIGHT
    )


def execution_status(total_units: int, data: OperationalData, peak_pct: float) -> str:
    if not total_units or not data.work_duration:
        return AWAITING_DATA
    if peak_pct <= 80:
        return "Capacidade Adequada"
    if peak_pct <= 100:
        return "Atenção"
    return "Capacidade Insuficiente"


def find_bottlenecks(
    total_units: int,
    data: OperationalData,
    required: float,
    peak_pct: float,
) -> list[Bottleneck]:
    """Up to MAX_BOTTLENECKS operational alerts, in priority order."""
    bottlenecks: list[Bottleneck] = []

    if peak_pct > 100:
        bottlenecks.append(Bottleneck(
            severity=BottleneckSeverity.CRITICAL,
            title="Capacidade de Execução Insuficiente",
            description=(
                f"Demanda de {math.ceil(required)} ambientes/mês excede capacidade "
                f"de {data.monthly_capacity_available:g}/mês"
            ),
        ))
    elif peak_pct > 85:
        utilization_pct = capacity_utilization(required, data) * 100
        bottlenecks.append(Bottleneck(
            severity=BottleneckSeverity.WARNING,
            title="Utilização de Capacidade Elevada",
            description=f"{round(utilization_pct)}% da capacidade instalada comprometida",
        ))

    if technical_status(total_units, data) == "Crítico":
        bottlenecks.append(Bottleneck(
            severity=BottleneckSeverity.CRITICAL,
            title="Equipe Técnica Subdimensionada",
            description=(
                f"Necessário {engineers_needed(total_units, data)} engenheiros "
                "com carga acima do recomendado"
            ),
        ))
    if data.technical_complexity >= 8:
        bottlenecks.append(Bottleneck(
            severity=BottleneckSeverity.WARNING,
            title="Alta Complexidade Técnica",
            description="Projeto demanda expertise especializada e processos customizados",
        ))
    if data.supply_dependency >= 7:
        bottlenecks.append(Bottleneck(
            severity=BottleneckSeverity.WARNING,
            title="Dependência Crítica de Supply",
            description="Risco de atrasos por indisponibilidade de materiais específicos",
        ))
    if data.logistical_risk >= 7:
        bottlenecks.append(Bottleneck(
            severity=BottleneckSeverity.CRITICAL,
            title="Risco Logístico Elevado",
            description="Necessário plano de contingência para cadeia de suprimentos",
        ))
    if data.standardization <= 3:
        bottlenecks.append(Bottleneck(
            severity=BottleneckSeverity.WARNING,
            title="Baixa Padronização",
            description="Dificuldade de escala e replicação do modelo operacional",
        ))

    if not bottlenecks:
        bottlenecks.append(Bottleneck(
            severity=BottleneckSeverity.SUCCESS,
            title="Operação Viável",
            description="Nenhum gargalo operacional crítico identificado",
        ))
    return bottlenecks[:MAX_BOTTLENECKS]


def engineering_schedule(total_units: int, production_capacity: float) -> EngineeringSchedule:
    """Delivery schedule when ``production_capacity`` units are finished per month."""
    if production_capacity <= 0 or total_units == 0:
        return EngineeringSchedule(
            production_capacity=production_capacity,
            schedule_months=0,
            operational_cost=0.0,
            monthly_cost=0.0,
            max_efficiency=False,
        )

    months = math.ceil(total_units / production_capacity)
    cost = total_units * OPERATIONAL_COST_PER_UNIT
    recommended = None
    if months > 24:
        recommended = math.ceil(total_units / 18)
    elif months >= MAX_EFFICIENCY_MONTHS:
        recommended = math.ceil(total_units / 11)

    return EngineeringSchedule(
        production_capacity=production_capacity,
        schedule_months=months,
        operational_cost=cost,
        monthly_cost=cost / months,
        max_efficiency=months < MAX_EFFICIENCY_MONTHS,
        recommended_capacity=recommended,
    )


def assess_operations(total_units: int, data: OperationalData) -> OperationalAssessment:
    """Full operational analysis for the resolved unit count."""
    required = required_monthly_capacity(total_units, data)
    utilization = capacity_utilization(required, data)
    peak_pct = peak_utilization(required, data)
    concentration = data.peak_months / (data.work_duration or 1)

    return OperationalAssessment(
        total_units=total_units,
        total_rooms=total_units * data.rooms_per_unit,
        required_monthly_capacity=required,
        capacity_utilization=utilization,
        peak_multiplier=peak_multiplier(data),
        peak_capacity=required * peak_multiplier(data),
        peak_utilization=peak_pct,
        concentration_risk=concentration,
        has_concentration_risk=concentration > CONCENTRATION_THRESHOLD,
        execution_score=execution_score(utilization),
        execution_status=execution_status(total_units, data, peak_pct),
        engineers_needed=engineers_needed(total_units, data),
        technical_utilization=engineer_utilization(total_units, data),
        technical_score=technical_score(total_units, data),
        technical_status=technical_status(total_units, data),
        supply_complexity_score=supply_complexity_score(data),
        score=operational_score(total_units, data),
        bottlenecks=find_bottlenecks(total_units, data, required, peak_pct),
        schedule=engineering_schedule(total_units, data.unit_production_capacity),
    )
