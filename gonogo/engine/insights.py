"""Strategic insights drawn from the raw ratings.

Three lists: critical risks, opportunities and suggested actions. Each
rule is a (predicate, entry) pair evaluated in order; when none apply a
fallback entry is returned instead.
"""

from __future__ import annotations

from typing import Callable

from gonogo.engine.result import InsightItem, Insights, SuggestedAction
from gonogo.models.enums import ActionPriority
from gonogo.models.inputs import FinancialMetrics, RiskRatings, ScoreSet, StrategyRatings

MAX_RISKS = 3
MAX_OPPORTUNITIES = 3
MAX_ACTIONS = 4

_RISK_RULES: list[tuple[Callable[[RiskRatings, FinancialMetrics], bool], InsightItem]] = [
    (
        lambda r, f: r.legal >= 7,
        InsightItem(
            "Risco Jurídico Elevado",
            "Requer análise jurídica completa antes da aprovação",
        ),
    ),
    (
        lambda r, f: r.default >= 7,
        InsightItem(
            "Alto Risco de Inadimplência",
            "Estabelecer garantias contratuais robustas e modelo de pagamento escalonado",
        ),
    ),
    (
        lambda r, f: r.reputational >= 7,
        InsightItem(
            "Risco Reputacional Significativo",
            "Avaliar histórico da incorporadora e implementar cláusulas de proteção de marca",
        ),
    ),
    (
        lambda r, f: r.operational >= 7,
        InsightItem(
            "Complexidade Operacional Alta",
            "Estruturar equipe dedicada e prever contingências operacionais",
        ),
    ),
    (
        lambda r, f: f.margin < 5,
        InsightItem(
            "Margem Financeira Insuficiente",
            "Renegociar condições comerciais ou reavaliar estrutura de custos",
        ),
    ),
]

_OPPORTUNITY_RULES: list[
    tuple[Callable[[FinancialMetrics, StrategyRatings], bool], InsightItem]
] = [
    (
        lambda f, s: f.margin >= 10,
        InsightItem("Margem Atrativa", "Projeto com rentabilidade acima da média do portfólio"),
    ),
    (
        lambda f, s: f.ticket >= 25_000,
        InsightItem("Alto Ticket Médio", "Potencial de receita significativa por unidade atendida"),
    ),
    (
        lambda f, s: f.ltv >= 20_000,
        InsightItem(
            "LTV Elevado",
            "Oportunidade de receita recorrente e relacionamento de longo prazo",
        ),
    ),
    (
        lambda f, s: s.synergy >= 7,
        InsightItem(
            "Forte Sinergia Operacional",
            "Aproveitamento de capacidade instalada e competências existentes",
        ),
    ),
    (
        lambda f, s: s.cross_sell >= 7,
        InsightItem(
            "Potencial de Cross-sell",
            "Base para expansão de serviços e produtos complementares",
        ),
    ),
    (
        lambda f, s: s.recurrence >= 7,
        InsightItem("Modelo Escalável", "Possibilidade de replicação em outros empreendimentos"),
    ),
]

_ACTION_RULES: list[tuple[Callable[[ScoreSet], bool], SuggestedAction]] = [
    (
        lambda s: s.risk.legal >= 6,
        SuggestedAction(
            ActionPriority.HIGH,
            "Due Diligence Jurídica",
            "Conduzir análise completa de contratos, licenças e passivos",
        ),
    ),
    (
        lambda s: s.financial.margin < 7,
        SuggestedAction(
            ActionPriority.HIGH,
            "Revisão Comercial",
            "Renegociar termos contratuais para melhorar viabilidade financeira",
        ),
    ),
    (
        lambda s: s.strategy.synergy < 5,
        SuggestedAction(
            ActionPriority.MEDIUM,
            "Expansão de Rede",
            "Qualificar e homologar parceiros técnicos na região do projeto",
        ),
    ),
    (
        lambda s: s.strategy.recurrence < 5,
        SuggestedAction(
            ActionPriority.MEDIUM,
            "Estratégia de Retenção",
            "Desenvolver programa de fidelização e serviços pós-entrega",
        ),
    ),
    (
        lambda s: s.risk.default >= 6,
        SuggestedAction(
            ActionPriority.HIGH,
            "Estrutura de Garantias",
            "Definir modelo de pagamento com garantias e marcos de validação",
        ),
    ),
    (
        lambda s: s.risk.operational >= 7,
        SuggestedAction(
            ActionPriority.HIGH,
            "Plano de Execução",
            "Criar cronograma detalhado com gestão de complexidade técnica",
        ),
    ),
]

CONTROLLED_RISK = InsightItem(
    "Perfil de Risco Controlado",
    "Nenhum fator de risco crítico identificado na análise atual",
)
STRATEGIC_PROJECT = InsightItem(
    "Projeto Estratégico",
    "Oportunidade alinhada com objetivos corporativos de expansão",
)
DEFAULT_ACTIONS = [
    SuggestedAction(
        ActionPriority.LOW,
        "Monitoramento Contínuo",
        "Estabelecer KPIs e marcos de acompanhamento ao longo da parceria",
    ),
    SuggestedAction(
        ActionPriority.LOW,
        "Alinhamento Estratégico",
        "Validar aderência aos objetivos do plano estratégico 2026-2028",
    ),
]

AWAITING_DATA = InsightItem(
    "Aguardando Dados",
    "Configure os critérios de avaliação para visualizar os insights",
)
AWAITING_ANALYSIS = InsightItem(
    "Aguardando Análise",
    "Complete os dados para identificar oportunidades",
)
CONFIGURE_ANALYSIS = SuggestedAction(
    ActionPriority.LOW,
    "Configurar Análise",
    "Preencha todos os critérios de avaliação para receber recomendações",
)


def critical_risks(scores: ScoreSet) -> list[InsightItem]:
    if not scores.is_complete():
        return [AWAITING_DATA]
    risks = [item for rule, item in _RISK_RULES if rule(scores.risk, scores.financial)]
    return (risks or [CONTROLLED_RISK])[:MAX_RISKS]


def opportunities(scores: ScoreSet) -> list[InsightItem]:
    # Risk ratings play no part here.
    if scores.financial is None or scores.strategy is None:
        return [AWAITING_ANALYSIS]
    found = [
        item
        for rule, item in _OPPORTUNITY_RULES
        if rule(scores.financial, scores.strategy)
    ]
    return (found or [STRATEGIC_PROJECT])[:MAX_OPPORTUNITIES]


def suggested_actions(scores: ScoreSet) -> list[SuggestedAction]:
    if not scores.is_complete():
        return [CONFIGURE_ANALYSIS]
    actions = [action for rule, action in _ACTION_RULES if rule(scores)]
    return (actions or list(DEFAULT_ACTIONS))[:MAX_ACTIONS]


def build_insights(scores: ScoreSet) -> Insights:
    return Insights(
        critical_risks=critical_risks(scores),
        opportunities=opportunities(scores),
        suggested_actions=suggested_actions(scores),
    )
