from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional

from gonogo.models.enums import GateSeverity

if TYPE_CHECKING:
    from gonogo.rules.context import RuleContext

# Registration order is evaluation order.
_GATES: dict[str, GateDefinition] = {}
_CONDITIONS: dict[str, ConditionDefinition] = {}


@dataclass(frozen=True)
class GateDefinition:
    """A governance gate.

    ``check_fn`` returns the display string of the offending value when the
    gate triggers, or None when it does not.
    """

    id: str
    label: str
    severity: GateSeverity
    threshold: str
    description: str
    check_fn: Callable[[RuleContext], Optional[str]]


@dataclass(frozen=True)
class ConditionDefinition:
    """A remediation condition attached to a GO WITH CONDITIONS decision."""

    id: str
    text: str
    applies_fn: Callable[[RuleContext], bool]


def register_gate(
    gate_id: str,
    label: str,
    severity: GateSeverity,
    threshold: str,
    description: str,
) -> Callable:
    """Decorator to register a check function as a governance gate."""

    def decorator(fn: Callable[[RuleContext], Optional[str]]) -> Callable:
        if gate_id in _GATES:
            raise ValueError(f"Gate '{gate_id}' is already registered")
        _GATES[gate_id] = GateDefinition(
            id=gate_id,
            label=label,
            severity=severity,
            threshold=threshold,
            description=description,
            check_fn=fn,
        )
        return fn

    return decorator


def register_condition(condition_id: str, text: str) -> Callable:
    """Decorator to register a predicate as a remediation condition."""

    def decorator(fn: Callable[[RuleContext], bool]) -> Callable:
        if condition_id in _CONDITIONS:
            raise ValueError(f"Condition '{condition_id}' is already registered")
        _CONDITIONS[condition_id] = ConditionDefinition(
            id=condition_id, text=text, applies_fn=fn
        )
        return fn

    return decorator


def get_gate(gate_id: str) -> Optional[GateDefinition]:
    return _GATES.get(gate_id)


def get_all_gates() -> dict[str, GateDefinition]:
    """Return the gate registry (read-only copy), in evaluation order."""
    return dict(_GATES)


def get_all_conditions() -> dict[str, ConditionDefinition]:
    return dict(_CONDITIONS)
