"""Pydantic records for the raw form state handed to the engine.

Every field has a default so that a partially filled form validates.
Numeric fields accept blanks (read as 0) and pt-BR formatted strings such
as ``"50.000.000"`` or ``"R$ 1.234,56"``, since unit counts and VGV come
from free-text inputs. Field names are snake_case and also accept the
camelCase keys used by the presentation layer.
"""

from __future__ import annotations

import re
from typing import Annotated, Any, Optional
from uuid import uuid4

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .enums import (
    ApartmentStandard,
    CommissionType,
    CommunicationTier,
    InstallationType,
    PackageType,
    ProjectPhase,
    TypologyTag,
)

_CURRENCY_PREFIX = re.compile(r"^\s*R\$\s*")
_THOUSANDS_ONLY = re.compile(r"^-?\d{1,3}(\.\d{3})+$")


def coerce_number(value: Any) -> Any:
    """Normalize blank and pt-BR formatted numeric input before validation."""
    if value is None:
        return 0
    if isinstance(value, str):
        text = _CURRENCY_PREFIX.sub("", value).strip().replace(" ", "")
        if not text:
            return 0
        if "," in text:
            text = text.replace(".", "").replace(",", ".")
        elif _THOUSANDS_ONLY.match(text):
            text = text.replace(".", "")
        return text
    return value


def coerce_count(value: Any) -> Any:
    number = coerce_number(value)
    if isinstance(number, str):
        number = float(number)
    if isinstance(number, float) and number.is_integer():
        return int(number)
    return number


def _blank_to(default: Any):
    def coerce(value: Any) -> Any:
        if value is None or value == "":
            return default
        return value

    return coerce


Number = Annotated[float, BeforeValidator(coerce_number)]
Amount = Annotated[float, BeforeValidator(coerce_number), Field(ge=0)]
Count = Annotated[int, BeforeValidator(coerce_count), Field(ge=0)]
Rating = Annotated[float, BeforeValidator(coerce_number), Field(ge=0, le=10)]
Percentage = Annotated[float, BeforeValidator(coerce_number), Field(ge=0, le=100)]
Text = Annotated[str, BeforeValidator(_blank_to(""))]


class InputRecord(BaseModel):
    """Immutable input record; edits go through ``model_copy(update=...)``."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class ProjectInputs(InputRecord):
    name: Text = ""
    developer: Text = ""
    city: Text = ""
    state: Text = ""
    store_name: Text = ""
    total_units: Count = 0
    vgv: Amount = 0
    months_to_key: Count = 0
    apartment_standard: Annotated[
        ApartmentStandard, BeforeValidator(_blank_to(ApartmentStandard.MEDIUM))
    ] = ApartmentStandard.MEDIUM
    phase: Annotated[
        ProjectPhase, BeforeValidator(_blank_to(ProjectPhase.PRE_LAUNCH))
    ] = ProjectPhase.PRE_LAUNCH
    typology: Annotated[
        TypologyTag, BeforeValidator(_blank_to(TypologyTag.RESIDENTIAL))
    ] = TypologyTag.RESIDENTIAL


class TypologyRow(InputRecord):
    """One row of the development's unit mix."""

    id: str = Field(default_factory=lambda: uuid4().hex)
    label: Text = ""
    area_m2: Amount = 0
    quantity: Count = 0
    sale_price: Amount = 0


class InstallationItem(InputRecord):
    """A simple-installation line sold to unit buyers."""

    id: str = Field(default_factory=lambda: uuid4().hex)
    kind: Annotated[
        InstallationType, BeforeValidator(_blank_to(InstallationType.SPLIT_AC))
    ] = InstallationType.SPLIT_AC
    quantity: Count = 0
    sale_price: Amount = 0
    provider_payout: Amount = 0


class ReformPackage(InputRecord):
    package_type: Annotated[
        PackageType, BeforeValidator(_blank_to(PackageType.FULL))
    ] = PackageType.FULL
    value: Amount = 0
    adhesion: Percentage = 0


class ReformPackageSet(InputRecord):
    """The four fixed reform slots.

    Adhesion percentages are bounded individually; their sum is expected
    to stay within 100 but is not enforced.
    """

    bathroom: ReformPackage = Field(default_factory=ReformPackage)
    kitchen: ReformPackage = Field(default_factory=ReformPackage)
    living_room: ReformPackage = Field(default_factory=ReformPackage)
    bedroom: ReformPackage = Field(default_factory=ReformPackage)

    def slots(self) -> list[tuple[str, ReformPackage]]:
        return [
            ("bathroom", self.bathroom),
            ("kitchen", self.kitchen),
            ("living_room", self.living_room),
            ("bedroom", self.bedroom),
        ]

    def total_adhesion(self) -> float:
        return sum(package.adhesion for _, package in self.slots())


class CommercialModel(InputRecord):
    commission_type: Annotated[
        CommissionType, BeforeValidator(_blank_to(CommissionType.PERCENTAGE))
    ] = CommissionType.PERCENTAGE
    commission_value: Amount = 0
    incentives: Text = ""
    counterparty_obligations: Text = ""


class OperationalData(InputRecord):
    """Execution capacity and supply inputs.

    ``monthly_capacity_needed`` is derived by the engine; any value supplied
    here is ignored.
    """

    total_units: Count = 0
    rooms_per_unit: Amount = 0
    work_duration: Amount = 0
    monthly_capacity_needed: Amount = 0
    monthly_capacity_available: Amount = 0
    engineer_capacity: Amount = 0
    technical_complexity: Rating = 0
    supply_dependency: Rating = 0
    logistical_risk: Rating = 0
    standardization: Rating = 0
    peak_months: Amount = 0
    peak_multiplier: Amount = 0
    unit_production_capacity: Amount = 0


class FinancialMetrics(InputRecord):
    """Raw business metrics; normalized by the engine, not here."""

    margin: Number = 0
    ticket: Number = 0
    ltv: Number = 0
    payback: Number = 0
    cac: Number = 0


class RiskRatings(InputRecord):
    """Risk ratings on 0-10, where higher is worse."""

    legal: Rating = 0
    default: Rating = 0
    reputational: Rating = 0
    operational: Rating = 0
    litigation_percentage: Percentage = 0

    def core_ratings(self) -> list[float]:
        return [self.legal, self.default, self.reputational, self.operational]


class StrategyRatings(InputRecord):
    """Strategic fit ratings on 0-10, where higher is better."""

    adherence: Rating = 0
    synergy: Rating = 0
    recurrence: Rating = 0
    cross_sell: Rating = 0


class ScoreSet(InputRecord):
    """Rating groups; a group left out is treated as absent, not as zeros."""

    financial: Optional[FinancialMetrics] = None
    risk: Optional[RiskRatings] = None
    strategy: Optional[StrategyRatings] = None

    def is_complete(self) -> bool:
        return (
            self.financial is not None
            and self.risk is not None
            and self.strategy is not None
        )


class EvaluationInputs(InputRecord):
    """Full input snapshot for one recomputation."""

    project: ProjectInputs = Field(default_factory=ProjectInputs)
    typologies: list[TypologyRow] = Field(default_factory=list)
    installations: list[InstallationItem] = Field(default_factory=list)
    reform_packages: ReformPackageSet = Field(default_factory=ReformPackageSet)
    commercial: CommercialModel = Field(default_factory=CommercialModel)
    operational: OperationalData = Field(default_factory=OperationalData)
    scores: ScoreSet = Field(default_factory=ScoreSet)
    communication_package: Annotated[
        CommunicationTier, BeforeValidator(_blank_to(CommunicationTier.NONE))
    ] = CommunicationTier.NONE
