"""
Gestor de Safras - Repositórios

Acesso aos registros por identificador (obter, listar, salvar, excluir) e
carga das coleções usadas no cálculo de indicadores.
"""

import logging
from typing import Generic, List, NamedTuple, Optional, Type, TypeVar

from django.db import models, transaction
from django.db.models import Q

from .models import (
    Fazenda, Safra, OperacaoCampo, Custo, Colheita, Maquinario, Benfeitoria,
    TipoCusto,
)

logger = logging.getLogger(__name__)

M = TypeVar('M', bound=models.Model)


class Repositorio(Generic[M]):
    """Repositório genérico sobre um modelo Django."""

    def __init__(self, model: Type[M]):
        self.model = model

    def __repr__(self):
        return f"Repositorio({self.model.__name__})"

    def obter(self, pk) -> Optional[M]:
        return self.model.objects.filter(pk=pk).first()

    def listar(self, **filtros) -> List[M]:
        return list(self.model.objects.filter(**filtros))

    @transaction.atomic
    def salvar(self, registro: Optional[M] = None, **dados) -> M:
        """
        Insere ou atualiza um registro.

        Aceita uma instância do modelo ou os campos como argumentos nomeados.
        Com 'id' nos dados, atualiza o registro existente (ou cria com esse id).
        O registro é validado com full_clean() antes de gravar.
        """
        if registro is None:
            pk = dados.pop('id', None)
            existente = self.obter(pk) if pk is not None else None
            if existente is not None:
                registro = existente
                for campo, valor in dados.items():
                    setattr(registro, campo, valor)
            else:
                registro = self.model(pk=pk, **dados)
        elif dados:
            for campo, valor in dados.items():
                setattr(registro, campo, valor)

        registro.full_clean()
        registro.save()
        logger.info("%s #%s salvo.", self.model.__name__, registro.pk)
        return registro

    def excluir(self, pk) -> bool:
        excluidos, _ = self.model.objects.filter(pk=pk).delete()
        if excluidos:
            logger.info("%s #%s excluído.", self.model.__name__, pk)
        return bool(excluidos)


fazendas = Repositorio(Fazenda)
safras = Repositorio(Safra)
operacoes = Repositorio(OperacaoCampo)
custos = Repositorio(Custo)
colheitas = Repositorio(Colheita)
maquinarios = Repositorio(Maquinario)
benfeitorias = Repositorio(Benfeitoria)


class Registros(NamedTuple):
    safras: List[Safra]
    operacoes: List[OperacaoCampo]
    custos: List[Custo]
    colheitas: List[Colheita]


def carregar_registros(safra_ids=None) -> Registros:
    """
    Carrega as coleções consumidas pelo cálculo de indicadores.

    Com safra_ids, operações, colheitas e custos variáveis ficam restritos a
    essas safras. Todas as safras e todos os custos fixos entram sempre,
    pois o rateio conta as safras ativas em cada data.
    Os registros vêm na ordem de cadastro.
    """
    operacoes_qs = OperacaoCampo.objects.order_by('id')
    colheitas_qs = Colheita.objects.order_by('id')
    custos_qs = Custo.objects.order_by('id')

    if safra_ids is not None:
        operacoes_qs = operacoes_qs.filter(safra_id__in=safra_ids)
        colheitas_qs = colheitas_qs.filter(safra_id__in=safra_ids)
        custos_qs = custos_qs.filter(Q(tipo=TipoCusto.FIXO) | Q(safra_id__in=safra_ids))

    return Registros(
        safras=list(Safra.objects.select_related('fazenda').order_by('id')),
        operacoes=list(operacoes_qs),
        custos=list(custos_qs),
        colheitas=list(colheitas_qs),
    )
