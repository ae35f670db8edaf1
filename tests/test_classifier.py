"""Tests for decision classification, factors and advisories."""

import pytest

from gonogo.engine.classifier import (
    MODERATE_FACTOR,
    classify,
    conditionals,
    decide,
    decision_factors,
    renegotiation_advisory,
)
from gonogo.engine.operational import assess_operations
from gonogo.engine.result import GateReport, GovernanceGate, SubScores
from gonogo.models.enums import Decision, GateSeverity
from gonogo.models.inputs import RiskRatings
from gonogo.rules.context import RuleContext


def _sub_scores(financial=6, operational=6, risk=6, strategy=6):
    return SubScores(
        financial=financial,
        operational=operational,
        risk=risk,
        strategy=strategy,
        reform_revenue=5,
        communication=5,
    )


@pytest.fixture
def make_context(nominal_scores, operational_data):
    def _make(sub_scores=None, risk=None, financial=None, commission_ratio=0.10, **op):
        data = operational_data.model_copy(update=op)
        return RuleContext(
            financial=financial or nominal_scores.financial,
            risk=risk or nominal_scores.risk,
            strategy=nominal_scores.strategy,
            operational_data=data,
            operational=assess_operations(100, data),
            sub_scores=sub_scores or _sub_scores(),
            commission_ratio=commission_ratio,
        )

    return _make


@pytest.fixture
def clear_report():
    return GateReport(gates=[], auto_no_go=False)


@pytest.fixture
def blocking_report():
    gate = GovernanceGate(
        gate_id="insufficient_margin",
        label="Margem Insuficiente",
        severity=GateSeverity.CRITICAL,
        threshold="< 3%",
        current="2%",
        description="Margem abaixo do mínimo aceitável para viabilidade do negócio",
    )
    return GateReport(gates=[gate], auto_no_go=True)


class TestClassify:
    @pytest.mark.parametrize(
        "score,expected",
        [
            (100, Decision.GO),
            (70, Decision.GO),
            (69, Decision.GO_WITH_CONDITIONS),
            (50, Decision.GO_WITH_CONDITIONS),
            (49, Decision.NO_GO),
            (0, Decision.NO_GO),
        ],
    )
    def test_score_bands(self, score, expected):
        assert classify(score, auto_no_go=False) == expected

    @pytest.mark.parametrize("score", [0, 55, 72, 100])
    def test_critical_gate_overrides_score(self, score):
        assert classify(score, auto_no_go=True) == Decision.AUTOMATIC_NO_GO


class TestFactors:
    def test_strong_before_weak(self):
        factors = decision_factors(_sub_scores(financial=4, operational=8))
        assert factors == ["forte capacidade operacional", "viabilidade financeira comprometida"]

    def test_at_most_two(self):
        factors = decision_factors(_sub_scores(financial=9, operational=9, risk=9, strategy=9))
        assert factors == ["viabilidade financeira sólida", "forte capacidade operacional"]

    def test_weak_phrases(self):
        factors = decision_factors(_sub_scores(risk=2, strategy=1))
        assert factors == ["alto perfil de risco", "baixa aderência estratégica"]

    def test_moderate_fallback(self):
        assert decision_factors(_sub_scores()) == [MODERATE_FACTOR]

    def test_boundaries(self):
        # 7 is strong, 5 is not weak
        assert decision_factors(_sub_scores(financial=7, operational=5)) == [
            "viabilidade financeira sólida"
        ]


class TestConditionals:
    def test_only_for_conditional_go(self, make_context):
        ctx = make_context(risk=RiskRatings(legal=9, default=9))
        assert conditionals(Decision.GO, ctx) == []
        assert conditionals(Decision.NO_GO, ctx) == []
        assert conditionals(Decision.AUTOMATIC_NO_GO, ctx) == []

    def test_legal_due_diligence(self, make_context):
        ctx = make_context(risk=RiskRatings(legal=7, default=2, reputational=2, operational=2))
        assert conditionals(Decision.GO_WITH_CONDITIONS, ctx) == [
            "Aprovação jurídica com due diligence completa"
        ]

    def test_complexity_rule(self, make_context):
        ctx = make_context(technical_complexity=7)
        assert conditionals(Decision.GO_WITH_CONDITIONS, ctx) == [
            "Plano de execução detalhado com marcos de validação"
        ]

    def test_bounded_to_four(self, make_context, nominal_scores):
        ctx = make_context(
            risk=RiskRatings(legal=8, default=8, reputational=8, operational=8),
            financial=nominal_scores.financial.model_copy(update={"margin": 5}),
            sub_scores=_sub_scores(risk=2),
            technical_complexity=9,
        )
        result = conditionals(Decision.GO_WITH_CONDITIONS, ctx)
        assert len(result) == 4
        assert "Plano de mitigação de riscos aprovado pelo comitê" not in result


class TestRenegotiation:
    def test_not_needed(self, make_context):
        advisory = renegotiation_advisory(make_context())
        assert advisory.needed is False
        assert advisory.reasons == []

    def test_high_commission(self, make_context):
        advisory = renegotiation_advisory(make_context(commission_ratio=0.16))
        assert advisory.needed is True
        assert advisory.reasons == [
            "Comissão acima de 15% impacta significativamente a margem líquida"
        ]

    def test_commission_at_threshold(self, make_context):
        assert renegotiation_advisory(make_context(commission_ratio=0.15)).needed is False

    def test_thin_margin(self, make_context, nominal_scores):
        financial = nominal_scores.financial.model_copy(update={"margin": 6.5})
        advisory = renegotiation_advisory(make_context(financial=financial))
        assert advisory.reasons == [
            "Margem abaixo de 7% requer otimização de estrutura de custos"
        ]


class TestDecide:
    def test_go_has_no_conditionals(self, make_context, clear_report):
        ctx = make_context(risk=RiskRatings(legal=7))
        result = decide(72, clear_report, ctx)
        assert result.decision == Decision.GO
        assert result.label == "GO"
        assert result.conditionals == []

    def test_conditional_go_with_legal_risk(self, make_context, clear_report):
        ctx = make_context(risk=RiskRatings(legal=7))
        result = decide(55, clear_report, ctx)
        assert result.decision == Decision.GO_WITH_CONDITIONS
        assert result.label == "GO COM RESSALVAS"
        assert "Aprovação jurídica com due diligence completa" in result.conditionals

    def test_auto_no_go_keeps_score_and_gates(self, make_context, blocking_report):
        result = decide(100, blocking_report, make_context())
        assert result.decision == Decision.AUTOMATIC_NO_GO
        assert result.label == "NO-GO AUTOMÁTICO"
        assert result.final_score == 100
        assert [g.label for g in result.gates] == ["Margem Insuficiente"]

    def test_explanation_joins_factors(self, make_context, clear_report):
        ctx = make_context(sub_scores=_sub_scores(financial=4, operational=8))
        result = decide(40, clear_report, ctx)
        assert result.label == "NO-GO"
        assert result.explanation == (
            "Esta decisão foi classificada como NO-GO principalmente devido a "
            "forte capacidade operacional e viabilidade financeira comprometida."
        )

    def test_renegotiation_alongside_go(self, make_context, clear_report):
        result = decide(80, clear_report, make_context(commission_ratio=0.25))
        assert result.decision == Decision.GO
        assert result.renegotiation.needed is True
