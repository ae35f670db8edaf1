"""Render engine results as JSON-ready dicts."""

from __future__ import annotations

from dataclasses import asdict
from enum import Enum
from typing import Any

from gonogo.engine.result import DecisionResult, Evaluation, GateReport


def _plain_dict(items: list[tuple[str, Any]]) -> dict[str, Any]:
    """``asdict`` factory that stores enum members by value."""
    return {key: value.value if isinstance(value, Enum) else value for key, value in items}


def _record_to_dict(record: Any) -> dict[str, Any]:
    return asdict(record, dict_factory=_plain_dict)


def _gate_report_to_dict(report: GateReport) -> dict[str, Any]:
    return {
        "auto_no_go": report.auto_no_go,
        "gates": [_record_to_dict(g) for g in report.gates],
        "critical_count": len(report.critical),
        "warning_count": len(report.warnings),
        "remediation_actions": list(report.remediation_actions),
        "advisory": report.advisory,
    }


def decision_to_dict(result: DecisionResult) -> dict[str, Any]:
    return {
        "final_score": result.final_score,
        "decision": result.decision.value,
        "label": result.label,
        "gates": [_record_to_dict(g) for g in result.gates],
        "factors": list(result.factors),
        "explanation": result.explanation,
        "conditionals": list(result.conditionals),
        "renegotiation": _record_to_dict(result.renegotiation),
    }


def evaluation_to_dict(evaluation: Evaluation) -> dict[str, Any]:
    """Convert an Evaluation to a serializable dict."""
    return {
        "result": decision_to_dict(evaluation.result),
        "sub_scores": evaluation.sub_scores.as_dict(),
        "governance": _gate_report_to_dict(evaluation.gate_report),
        "revenue": _record_to_dict(evaluation.revenue),
        "operational": _record_to_dict(evaluation.operational),
        "insights": _record_to_dict(evaluation.insights),
        "warnings": list(evaluation.warnings),
    }
