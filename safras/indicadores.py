"""
Gestor de Safras - Indicadores Financeiros e Agronômicos

Cálculo dos indicadores de uma safra a partir dos registros de operações,
custos e colheitas: receita, custo total (com rateio dos custos fixos entre as
safras ativas), lucro, ROI, rentabilidade, produtividade e distribuição de
custos por categoria.

As funções deste módulo não acessam o banco de dados e não alteram os
registros recebidos. Qualquer objeto com os mesmos atributos dos modelos
(instâncias, registros simples em testes) pode ser usado.
Entradas incompletas nunca geram exceção: o valor correspondente vira zero.
"""

import logging
from dataclasses import dataclass, field, asdict
from datetime import date, datetime, time, timezone as dt_timezone
from decimal import Decimal, InvalidOperation
from typing import Optional, Tuple

from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime

from .models import TipoCusto, UnidadeColheita

logger = logging.getLogger(__name__)

ZERO = Decimal('0')
CEM = Decimal('100')

# Saca padrão de 60 kg
KG_POR_SACA = Decimal('60')
KG_POR_TONELADA = Decimal('1000')

ROTULO_CUSTOS_FIXOS = 'Custos Fixos (Rateado)'


@dataclass(frozen=True)
class ItemDistribuicaoCusto:
    categoria: str
    valor: Decimal


@dataclass(frozen=True)
class IndicadoresSafra:
    """Resultado do cálculo de indicadores de uma safra."""
    receita_total: Decimal = ZERO
    custo_total: Decimal = ZERO
    lucro_bruto: Decimal = ZERO
    roi: Decimal = ZERO
    rentabilidade: Decimal = ZERO
    produtividade: Decimal = ZERO
    custo_por_saca: Decimal = ZERO
    lucro_por_hectare: Decimal = ZERO
    distribuicao_custos: Tuple[ItemDistribuicaoCusto, ...] = field(default_factory=tuple)
    total_sacas: Decimal = ZERO

    def participacao(self, item):
        """Percentual do custo total representado por um item da distribuição."""
        if self.custo_total > 0:
            return item.valor / self.custo_total * CEM
        return ZERO

    def as_dict(self):
        return asdict(self)


def _decimal(valor):
    if valor is None or valor == '':
        return ZERO
    try:
        resultado = valor if isinstance(valor, Decimal) else Decimal(str(valor))
    except (InvalidOperation, ValueError, TypeError):
        resultado = None
    # NaN e infinito não são comparáveis
    if resultado is None or not resultado.is_finite():
        logger.warning("Valor numérico inválido ignorado: %r", valor)
        return ZERO
    return resultado


def _para_datetime(valor) -> Optional[datetime]:
    """
    Converte date, datetime ou texto ISO-8601 em datetime sem fuso.
    Retorna None para datas ausentes ou inválidas.
    """
    if valor is None or valor == '':
        return None
    if isinstance(valor, datetime):
        resultado = valor
    elif isinstance(valor, date):
        return datetime.combine(valor, time.min)
    else:
        texto = str(valor).strip()
        try:
            resultado = parse_datetime(texto)
            if resultado is None:
                dia = parse_date(texto)
                if dia is None:
                    return None
                return datetime.combine(dia, time.min)
        except ValueError:
            return None

    if timezone.is_aware(resultado):
        resultado = timezone.make_naive(resultado, dt_timezone.utc)
    return resultado


def safra_ativa_em(safra, data) -> bool:
    """
    Indica se a safra estava ativa na data informada.

    Ativa = iniciada até a data E (marcada como ativa OU com término
    informado não anterior à data). Datas inválidas tornam a safra inativa.
    Uma safra ativa sem data de término é considerada ativa em qualquer data
    a partir do início.
    """
    dia = _para_datetime(data)
    if dia is None:
        return False

    inicio = _para_datetime(safra.data_inicio)
    if inicio is None:
        return False
    if inicio > dia:
        return False

    if safra.ativa:
        return True

    fim = _para_datetime(getattr(safra, 'data_fim', None))
    return fim is not None and dia <= fim


def converter_para_sacas(quantidade, unidade) -> Decimal:
    """Converte a quantidade colhida para sacas de 60 kg."""
    quantidade = _decimal(quantidade)
    if unidade == UnidadeColheita.SACA:
        return quantidade
    if unidade == UnidadeColheita.KG:
        return quantidade / KG_POR_SACA
    if unidade == UnidadeColheita.TON:
        return quantidade * KG_POR_TONELADA / KG_POR_SACA
    logger.warning("Unidade de colheita desconhecida: %r", unidade)
    return ZERO


def ratear_custos_fixos(safra, custos, safras) -> Decimal:
    """
    Parcela dos custos fixos que cabe à safra.

    Cada custo fixo é dividido igualmente entre todas as safras ativas na data
    do custo. Se a safra não estava ativa na data, o custo não entra.
    """
    safras = list(safras)
    total = ZERO

    for custo in custos:
        if custo.tipo != TipoCusto.FIXO:
            continue

        data_custo = _para_datetime(custo.data)
        if data_custo is None:
            logger.warning("Custo fixo %s com data inválida (%r) ignorado no rateio.",
                           getattr(custo, 'id', None), custo.data)
            continue

        if not safra_ativa_em(safra, data_custo):
            continue

        ativas = sum(1 for s in safras if safra_ativa_em(s, data_custo))
        divisor = ativas if ativas > 0 else 1
        total += _decimal(custo.valor) / Decimal(divisor)

    return total


def _agrupar_por_categoria(itens):
    agrupado = {}
    for categoria, valor in itens:
        if valor <= 0:
            continue
        agrupado[categoria] = agrupado.get(categoria, ZERO) + valor
    return tuple(ItemDistribuicaoCusto(categoria=c, valor=v) for c, v in agrupado.items())


def calcular_indicadores(safra, operacoes, custos, colheitas, safras) -> IndicadoresSafra:
    """
    Calcula os indicadores da safra.

    Recebe a safra alvo (ou None) e as coleções completas de operações,
    custos, colheitas e safras; filtra o que pertence à safra e rateia os
    custos fixos entre as safras ativas em cada data.
    """
    if safra is None:
        return IndicadoresSafra()

    custos = list(custos)

    operacoes_safra = [op for op in operacoes if op.safra_id == safra.id]
    custos_variaveis = [
        c for c in custos
        if c.tipo == TipoCusto.VARIAVEL and c.safra_id == safra.id
    ]
    colheitas_safra = [h for h in colheitas if h.safra_id == safra.id]

    custos_fixos_rateados = ratear_custos_fixos(safra, custos, safras)

    receita_total = sum(
        (_decimal(h.quantidade) * _decimal(h.preco_unitario) for h in colheitas_safra),
        ZERO
    )

    custo_operacoes = sum((_decimal(op.custo) for op in operacoes_safra), ZERO)
    custo_variaveis = sum((_decimal(c.valor) for c in custos_variaveis), ZERO)
    custo_total = custo_operacoes + custo_variaveis + custos_fixos_rateados

    lucro_bruto = receita_total - custo_total
    roi = lucro_bruto / custo_total * CEM if custo_total > 0 else ZERO
    rentabilidade = lucro_bruto / receita_total * CEM if receita_total > 0 else ZERO

    total_sacas = sum(
        (converter_para_sacas(h.quantidade, h.unidade) for h in colheitas_safra),
        ZERO
    )

    area = _decimal(safra.area)
    produtividade = total_sacas / area if area > 0 else ZERO
    custo_por_saca = custo_total / total_sacas if total_sacas > 0 else ZERO
    lucro_por_hectare = lucro_bruto / area if area > 0 else ZERO

    itens = [(str(op.tipo), _decimal(op.custo)) for op in operacoes_safra]
    itens += [(str(c.categoria), _decimal(c.valor)) for c in custos_variaveis]
    itens.append((ROTULO_CUSTOS_FIXOS, custos_fixos_rateados))

    logger.debug("Indicadores calculados para a safra %s: custo=%s receita=%s",
                 safra.id, custo_total, receita_total)

    return IndicadoresSafra(
        receita_total=receita_total,
        custo_total=custo_total,
        lucro_bruto=lucro_bruto,
        roi=roi,
        rentabilidade=rentabilidade,
        produtividade=produtividade,
        custo_por_saca=custo_por_saca,
        lucro_por_hectare=lucro_por_hectare,
        distribuicao_custos=_agrupar_por_categoria(itens),
        total_sacas=total_sacas,
    )
