"""
Gestor de Safras - Serviços

Monta os dados do painel de resultados, do relatório de safras e do resumo
patrimonial a partir dos repositórios e do cálculo de indicadores.
"""

import logging
from decimal import Decimal

from . import repositories
from .indicadores import IndicadoresSafra, calcular_indicadores
from .models import TipoCusto

logger = logging.getLogger(__name__)


def _indicadores(safra, registros):
    return calcular_indicadores(
        safra,
        registros.operacoes,
        registros.custos,
        registros.colheitas,
        registros.safras,
    )


def indicadores_da_safra(safra_id):
    """
    Retorna (safra, indicadores). Safra inexistente resulta em (None,
    indicadores zerados).
    """
    safra_id = int(safra_id)
    registros = repositories.carregar_registros(safra_ids=[safra_id])
    safra = next((s for s in registros.safras if s.pk == safra_id), None)
    if safra is None:
        logger.info("Safra %s não encontrada; indicadores zerados.", safra_id)
        return None, IndicadoresSafra()
    return safra, _indicadores(safra, registros)


def resumo_resultados():
    """Indicadores de todas as safras, da mais recente para a mais antiga."""
    registros = repositories.carregar_registros()
    safras = sorted(registros.safras, key=lambda s: s.data_inicio, reverse=True)
    return [
        {'safra': safra, 'indicadores': _indicadores(safra, registros)}
        for safra in safras
    ]


def montar_relatorio(safra_ids):
    """
    Seções do Relatório Técnico de Safra, uma por safra selecionada.
    Ids inexistentes são ignorados.
    """
    ids = {int(pk) for pk in safra_ids}
    registros = repositories.carregar_registros(safra_ids=list(ids))
    selecionadas = sorted(
        (s for s in registros.safras if s.pk in ids),
        key=lambda s: s.data_inicio
    )

    secoes = []
    for safra in selecionadas:
        colheitas = sorted(
            (h for h in registros.colheitas if h.safra_id == safra.pk),
            key=lambda h: h.data
        )
        indicadores = _indicadores(safra, registros)
        secoes.append({
            'safra': safra,
            'fazenda': safra.fazenda,
            'indicadores': indicadores,
            'distribuicao': [
                {'item': item, 'percentual': indicadores.participacao(item)}
                for item in indicadores.distribuicao_custos
            ],
            'operacoes': sorted(
                (op for op in registros.operacoes if op.safra_id == safra.pk),
                key=lambda op: op.data
            ),
            'custos_variaveis': sorted(
                (c for c in registros.custos
                 if c.safra_id == safra.pk and c.tipo == TipoCusto.VARIAVEL),
                key=lambda c: c.data
            ),
            'colheitas': [
                {'colheita': h, 'valor_total': h.valor_total}
                for h in colheitas
            ],
        })
    return secoes


def resumo_patrimonio(fazenda_id):
    """Maquinário com depreciação e benfeitorias com saldo devedor da fazenda."""
    maquinarios = repositories.maquinarios.listar(fazenda_id=fazenda_id)
    benfeitorias = repositories.benfeitorias.listar(fazenda_id=fazenda_id)

    itens_maquinario = [
        {
            'maquinario': m,
            'valor_residual': m.valor_residual,
            'depreciacao_anual': m.depreciacao_anual,
        }
        for m in maquinarios
    ]
    itens_benfeitoria = [
        {
            'benfeitoria': b,
            'valor_parcela': b.valor_parcela,
            'saldo_devedor': b.saldo_devedor,
        }
        for b in benfeitorias
    ]

    return {
        'maquinarios': itens_maquinario,
        'benfeitorias': itens_benfeitoria,
        'totais': {
            'valor_aquisicao': sum((m.valor_aquisicao for m in maquinarios), Decimal('0')),
            'depreciacao_anual': sum((i['depreciacao_anual'] for i in itens_maquinario), Decimal('0')),
            'saldo_devedor': sum((i['saldo_devedor'] for i in itens_benfeitoria), Decimal('0')),
        },
    }
