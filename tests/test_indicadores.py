"""
Testes do cálculo de indicadores por safra.

Os registros são objetos simples com os mesmos atributos dos modelos;
o cálculo não acessa o banco de dados.
"""

from datetime import date, datetime, timezone
from decimal import Decimal
from types import SimpleNamespace

import pytest

from safras.indicadores import (
    ROTULO_CUSTOS_FIXOS,
    IndicadoresSafra,
    ItemDistribuicaoCusto,
    calcular_indicadores,
    converter_para_sacas,
    ratear_custos_fixos,
    safra_ativa_em,
)


def safra(id=1, area="50", inicio="2023-10-15", fim=None, ativa=True):
    return SimpleNamespace(id=id, area=Decimal(area), data_inicio=inicio, data_fim=fim, ativa=ativa)


def operacao(safra_id, custo, tipo="Plantio", data="2023-10-16"):
    return SimpleNamespace(safra_id=safra_id, tipo=tipo, custo=Decimal(str(custo)), data=data)


def custo_variavel(safra_id, valor, categoria="Mão de Obra", data="2024-03-20"):
    return SimpleNamespace(id=None, safra_id=safra_id, tipo="Variável",
                           categoria=categoria, valor=Decimal(str(valor)), data=data)


def custo_fixo(valor, data, categoria="Impostos"):
    return SimpleNamespace(id=None, safra_id=None, tipo="Fixo",
                           categoria=categoria, valor=Decimal(str(valor)), data=data)


def colheita(safra_id, quantidade, unidade="saca", preco="55"):
    return SimpleNamespace(safra_id=safra_id, quantidade=Decimal(str(quantidade)),
                           unidade=unidade, preco_unitario=Decimal(str(preco)),
                           data="2024-03-18")


# =============================================================================
# CASOS DEGENERADOS
# =============================================================================

def test_sem_safra_retorna_indicadores_zerados():
    alvo = safra()
    resultado = calcular_indicadores(
        None,
        [operacao(1, 100)],
        [custo_variavel(1, 50)],
        [colheita(1, 10)],
        [alvo],
    )

    assert resultado == IndicadoresSafra()
    assert resultado.custo_total == 0
    assert resultado.receita_total == 0
    assert resultado.distribuicao_custos == ()


def test_safra_sem_registros_retorna_zeros():
    alvo = safra()
    resultado = calcular_indicadores(alvo, [], [], [], [alvo])

    assert resultado.custo_total == 0
    assert resultado.roi == 0
    assert resultado.rentabilidade == 0
    assert resultado.custo_por_saca == 0
    assert resultado.distribuicao_custos == ()


@pytest.mark.parametrize("area", ["0", "-10"])
def test_area_nao_positiva_zera_indicadores_por_hectare(area):
    alvo = safra(area=area)
    resultado = calcular_indicadores(alvo, [operacao(1, 100)], [], [colheita(1, 10)], [alvo])

    assert resultado.total_sacas == Decimal("10")
    assert resultado.produtividade == 0
    assert resultado.lucro_por_hectare == 0


def test_roi_zero_sem_custos_e_rentabilidade_zero_sem_receita():
    alvo = safra()
    so_receita = calcular_indicadores(alvo, [], [], [colheita(1, 10)], [alvo])
    so_custo = calcular_indicadores(alvo, [operacao(1, 100)], [], [], [alvo])

    assert so_receita.roi == 0
    assert so_receita.rentabilidade == Decimal("100")
    assert so_custo.rentabilidade == 0
    assert so_custo.roi == Decimal("-100")

# =============================================================================
# VALORES NUMÉRICOS INVÁLIDOS
# =============================================================================

def registros_com_valor(campo, valor):
    alvo = safra()
    op = operacao(1, 100)
    custo = custo_variavel(1, 50, categoria="Transporte")
    colhido = colheita(1, 10)
    registro = {"area": alvo, "custo": op, "valor": custo, "quantidade": colhido}[campo]
    setattr(registro, campo, valor)
    return alvo, [op], [custo], [colhido]


@pytest.mark.parametrize("valor", [
    "abc", "NaN", "Infinity", float("nan"), Decimal("NaN"), Decimal("-Infinity"),
])
@pytest.mark.parametrize("campo, custo_esperado, receita_esperada", [
    ("custo", Decimal("50"), Decimal("550")),
    ("valor", Decimal("100"), Decimal("550")),
    ("quantidade", Decimal("150"), Decimal("0")),
    ("area", Decimal("150"), Decimal("550")),
])
def test_valor_invalido_conta_como_zero(campo, custo_esperado, receita_esperada, valor):
    alvo, operacoes, custos, colheitas = registros_com_valor(campo, valor)

    resultado = calcular_indicadores(alvo, operacoes, custos, colheitas, [alvo])

    assert resultado.custo_total == custo_esperado
    assert resultado.receita_total == receita_esperada
    assert resultado.lucro_bruto == receita_esperada - custo_esperado
    if campo == "area":
        assert resultado.produtividade == 0
        assert resultado.lucro_por_hectare == 0
    if campo == "quantidade":
        assert resultado.total_sacas == 0
        assert resultado.custo_por_saca == 0


def test_resultado_pode_ser_usado_como_chave():
    alvo = safra()
    primeiro = calcular_indicadores(alvo, [operacao(1, 100)], [], [], [alvo])
    segundo = calcular_indicadores(alvo, [operacao(1, 100)], [], [], [alvo])

    assert hash(primeiro) == hash(segundo)
    assert len({primeiro, segundo, IndicadoresSafra()}) == 2



# =============================================================================
# CONVERSÃO DE UNIDADES
# =============================================================================

def test_conversao_para_sacas():
    assert converter_para_sacas(Decimal("120"), "kg") == Decimal("2")
    assert converter_para_sacas(Decimal("1"), "ton") == Decimal("1000") / Decimal("60")
    assert converter_para_sacas(Decimal("5"), "saca") == Decimal("5")


def test_unidade_desconhecida_nao_conta():
    assert converter_para_sacas(Decimal("10"), "bushel") == 0


# =============================================================================
# ATIVIDADE DA SAFRA E RATEIO DOS CUSTOS FIXOS
# =============================================================================

def test_safra_ativa_nos_limites_de_inicio_e_fim():
    finalizada = safra(inicio="2023-01-01", fim="2023-06-30", ativa=False)

    assert safra_ativa_em(finalizada, "2023-01-01")
    assert safra_ativa_em(finalizada, "2023-06-30")
    assert not safra_ativa_em(finalizada, "2022-12-31")
    assert not safra_ativa_em(finalizada, "2023-07-01")


def test_safra_ativa_sem_termino_acumula_custos_indefinidamente():
    aberta = safra(inicio="2023-01-01", ativa=True)

    assert safra_ativa_em(aberta, "2030-01-01")
    assert ratear_custos_fixos(aberta, [custo_fixo(500, "2030-01-01")], [aberta]) == Decimal("500")


def test_safra_inativa_sem_termino_nao_recebe_custos_fixos():
    inativa = safra(inicio="2023-01-01", ativa=False)

    assert not safra_ativa_em(inativa, "2023-02-01")
    assert ratear_custos_fixos(inativa, [custo_fixo(500, "2023-02-01")], [inativa]) == 0


def test_custo_fixo_dividido_entre_safras_ativas():
    a = safra(id=1, inicio="2024-01-01")
    b = safra(id=2, inicio="2024-01-01")
    custos = [custo_fixo(1200, "2024-02-01")]

    assert ratear_custos_fixos(a, custos, [a, b]) == Decimal("600")
    assert ratear_custos_fixos(b, custos, [a, b]) == Decimal("600")


def test_custo_fixo_integral_para_unica_safra_ativa():
    a = safra(id=1, inicio="2024-01-01")
    b = safra(id=2, inicio="2023-01-01", fim="2023-12-31", ativa=False)
    custos = [custo_fixo(1200, "2024-02-01")]

    assert ratear_custos_fixos(a, custos, [a, b]) == Decimal("1200")
    assert ratear_custos_fixos(b, custos, [a, b]) == 0


def test_safra_inativa_com_termino_conta_no_rateio_ate_o_fim():
    a = safra(id=1, inicio="2024-01-01")
    b = safra(id=2, inicio="2023-06-01", fim="2024-03-31", ativa=False)
    custos = [custo_fixo(1000, "2024-03-31")]

    assert ratear_custos_fixos(a, custos, [a, b]) == Decimal("500")
    assert ratear_custos_fixos(b, custos, [a, b]) == Decimal("500")


def test_custo_fixo_com_data_invalida_e_ignorado():
    a = safra(id=1, inicio="2024-01-01")
    custos = [custo_fixo(1000, "data-invalida"), custo_fixo(300, "2024-05-01")]

    assert ratear_custos_fixos(a, custos, [a]) == Decimal("300")


def test_safra_com_inicio_invalido_fica_fora_do_rateio():
    a = safra(id=1, inicio="2024-01-01")
    quebrada = safra(id=2, inicio="sem data")
    custos = [custo_fixo(900, "2024-05-01")]

    assert ratear_custos_fixos(quebrada, custos, [a, quebrada]) == 0
    assert ratear_custos_fixos(a, custos, [a, quebrada]) == Decimal("900")


def test_datas_como_date_datetime_e_texto_sao_equivalentes():
    a = safra(id=1, inicio=date(2024, 1, 1))
    b = safra(id=2, inicio="2024-01-01T00:00:00")
    custos = [
        custo_fixo(100, datetime(2024, 2, 1, 12, 0, tzinfo=timezone.utc)),
        custo_fixo(200, "2024-02-01"),
    ]

    assert ratear_custos_fixos(a, custos, [a, b]) == Decimal("150")


def test_custo_variavel_nao_entra_no_rateio():
    a = safra(id=1, inicio="2024-01-01")
    custos = [custo_variavel(1, 400, data="2024-02-01")]

    assert ratear_custos_fixos(a, custos, [a]) == 0


# =============================================================================
# DISTRIBUIÇÃO DE CUSTOS
# =============================================================================

def test_distribuicao_agrupa_categorias_na_ordem_de_aparicao():
    alvo = safra(inicio="2024-01-01")
    operacoes = [
        operacao(1, 100, tipo="Plantio"),
        operacao(1, 40, tipo="Defensivo"),
        operacao(1, 50, tipo="Plantio"),
        operacao(1, 0, tipo="Irrigação"),
    ]
    custos = [custo_variavel(1, 30, categoria="Transporte"), custo_fixo(20, "2024-02-01")]

    resultado = calcular_indicadores(alvo, operacoes, custos, [], [alvo])

    assert resultado.distribuicao_custos == (
        ItemDistribuicaoCusto("Plantio", Decimal("150")),
        ItemDistribuicaoCusto("Defensivo", Decimal("40")),
        ItemDistribuicaoCusto("Transporte", Decimal("30")),
        ItemDistribuicaoCusto(ROTULO_CUSTOS_FIXOS, Decimal("20")),
    )
    assert sum(item.valor for item in resultado.distribuicao_custos) == resultado.custo_total


def test_distribuicao_sem_custos_fixos_omite_rotulo_rateado():
    alvo = safra()
    resultado = calcular_indicadores(alvo, [operacao(1, 100)], [], [], [alvo])

    assert [item.categoria for item in resultado.distribuicao_custos] == ["Plantio"]


def test_participacao_de_item_no_custo_total():
    alvo = safra()
    resultado = calcular_indicadores(
        alvo, [operacao(1, 75), operacao(1, 25, tipo="Defensivo")], [], [], [alvo]
    )

    assert resultado.participacao(resultado.distribuicao_custos[0]) == Decimal("75")
    assert IndicadoresSafra().participacao(ItemDistribuicaoCusto("X", Decimal("1"))) == 0


def test_registros_de_outras_safras_sao_ignorados():
    alvo = safra(id=1)
    outra = safra(id=2)
    resultado = calcular_indicadores(
        alvo,
        [operacao(2, 999)],
        [custo_variavel(2, 999)],
        [colheita(2, 100)],
        [alvo, outra],
    )

    assert resultado.custo_total == 0
    assert resultado.receita_total == 0


# =============================================================================
# CENÁRIO COMPLETO
# =============================================================================

def test_cenario_safra_de_50_hectares():
    alvo = safra(area="50")
    operacoes = [operacao(1, 10000)]
    custos = [custo_variavel(1, 2000)]
    colheitas = [colheita(1, 3000, unidade="kg", preco="55")]

    resultado = calcular_indicadores(alvo, operacoes, custos, colheitas, [alvo])

    assert resultado.total_sacas == Decimal("50")
    assert resultado.receita_total == Decimal("165000")
    assert resultado.custo_total == Decimal("12000")
    assert resultado.lucro_bruto == Decimal("153000")
    assert resultado.produtividade == Decimal("1")
    assert resultado.roi == Decimal("1275")
    assert resultado.lucro_por_hectare == Decimal("3060")
    assert resultado.custo_por_saca == Decimal("240")
    assert resultado.rentabilidade.quantize(Decimal("0.01")) == Decimal("92.73")


def test_calculo_e_idempotente_e_nao_altera_entradas():
    a = safra(id=1, inicio="2024-01-01")
    b = safra(id=2, inicio="2024-01-01")
    operacoes = [operacao(1, 100)]
    custos = [custo_fixo(1200, "2024-02-01"), custo_variavel(1, 80)]
    colheitas = [colheita(1, 10)]

    primeiro = calcular_indicadores(a, operacoes, custos, colheitas, [a, b])
    segundo = calcular_indicadores(a, operacoes, custos, colheitas, [a, b])

    assert primeiro == segundo
    assert primeiro.custo_total == Decimal("780")
    assert custos[0].valor == Decimal("1200")
    assert len(custos) == 2


def test_as_dict_expoe_todos_os_indicadores():
    dados = IndicadoresSafra().as_dict()

    assert set(dados) == {
        "receita_total", "custo_total", "lucro_bruto", "roi", "rentabilidade",
        "produtividade", "custo_por_saca", "lucro_por_hectare",
        "distribuicao_custos", "total_sacas",
    }
