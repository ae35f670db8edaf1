"""Governance gate evaluation.

Runs every registered gate against a ``RuleContext`` and collects the
triggered ones in registration order. Any critical gate forces an
automatic NO-GO.
"""

from __future__ import annotations

import logging

# Ensure all gates are registered on import
import gonogo.rules.gates  # noqa: F401
from gonogo.engine.result import GateReport, GovernanceGate
from gonogo.models.enums import GateSeverity
from gonogo.rules.context import RuleContext
from gonogo.rules.registry import get_all_gates

logger = logging.getLogger(__name__)


def remediation_action(gate: GovernanceGate) -> str:
    return (
        f'Corrigir "{gate.label}" através de renegociação comercial '
        "ou revisão de premissas"
    )


def mitigation_advisory(warning_count: int) -> str:
    return (
        f"{warning_count} alerta(s) identificado(s). Recomenda-se plano de "
        "mitigação antes da aprovação final."
    )


def triggered_gates(ctx: RuleContext) -> list[GovernanceGate]:
    """All gates whose check returns a current value, in evaluation order.

    Returns an empty list when any score group is absent.
    """
    if not ctx.has_score_groups():
        return []

    gates: list[GovernanceGate] = []
    for gate_def in get_all_gates().values():
        current = gate_def.check_fn(ctx)
        if current is None:
            continue
        gates.append(GovernanceGate(
            gate_id=gate_def.id,
            label=gate_def.label,
            severity=gate_def.severity,
            threshold=gate_def.threshold,
            current=current,
            description=gate_def.description,
        ))
    return gates


def evaluate_gates(ctx: RuleContext) -> GateReport:
    gates = triggered_gates(ctx)
    critical = [g for g in gates if g.severity == GateSeverity.CRITICAL]
    warning_count = len(gates) - len(critical)
    auto_no_go = bool(critical)

    if auto_no_go:
        logger.info(
            "Automatic NO-GO raised by %d critical gate(s): %s",
            len(critical),
            ", ".join(g.gate_id for g in critical),
        )

    advisory = None
    if warning_count and not auto_no_go:
        advisory = mitigation_advisory(warning_count)

    return GateReport(
        gates=gates,
        auto_no_go=auto_no_go,
        remediation_actions=[remediation_action(g) for g in critical],
        advisory=advisory,
    )
