"""
Gestor de Safras - Views

Endpoints de resultados (JSON) e do Relatório Técnico de Safra (PDF).
O cadastro dos registros é feito pelo Django Admin.
"""

import logging

from django.conf import settings
from django.contrib.auth.decorators import login_required
from django.http import HttpResponse, JsonResponse
from django.shortcuts import get_object_or_404
from django.utils import timezone
from django.views.decorators.http import require_GET

from . import services
from .models import Fazenda, Safra
from .utils.pdf import render_to_pdf

logger = logging.getLogger(__name__)


def _safra_json(safra):
    return {
        'id': safra.pk,
        'fazenda_id': safra.fazenda_id,
        'nome': safra.nome,
        'cultura': safra.cultura,
        'variedade': safra.variedade,
        'area': safra.area,
        'data_inicio': safra.data_inicio,
        'data_fim': safra.data_fim,
        'ativa': safra.ativa,
    }


def _indicadores_json(indicadores):
    dados = indicadores.as_dict()
    dados['distribuicao_custos'] = [
        {
            'categoria': item.categoria,
            'valor': item.valor,
            'percentual': indicadores.participacao(item),
        }
        for item in indicadores.distribuicao_custos
    ]
    return dados


# =============================================================================
# RESULTADOS E INDICADORES
# =============================================================================

@login_required
@require_GET
def resultados_list(request):
    """Lista as safras com os principais indicadores."""
    resultados = [
        {
            'safra': _safra_json(item['safra']),
            'status': item['safra'].status_display,
            'receita_total': item['indicadores'].receita_total,
            'custo_total': item['indicadores'].custo_total,
            'lucro_bruto': item['indicadores'].lucro_bruto,
            'roi': item['indicadores'].roi,
            'produtividade': item['indicadores'].produtividade,
        }
        for item in services.resumo_resultados()
    ]
    return JsonResponse({'resultados': resultados})


@login_required
@require_GET
def safra_indicadores(request, pk):
    """Indicadores financeiros e agronômicos de uma safra."""
    get_object_or_404(Safra, pk=pk)
    safra, indicadores = services.indicadores_da_safra(pk)
    return JsonResponse({
        'safra': _safra_json(safra),
        'indicadores': _indicadores_json(indicadores),
    })


@login_required
@require_GET
def fazenda_patrimonio(request, pk):
    """Maquinário (depreciação) e benfeitorias (saldo devedor) da fazenda."""
    fazenda = get_object_or_404(Fazenda, pk=pk)
    resumo = services.resumo_patrimonio(fazenda.pk)

    return JsonResponse({
        'fazenda': {'id': fazenda.pk, 'nome': fazenda.nome},
        'maquinarios': [
            {
                'id': item['maquinario'].pk,
                'nome': item['maquinario'].nome,
                'tipo': item['maquinario'].tipo,
                'valor_aquisicao': item['maquinario'].valor_aquisicao,
                'valor_residual': item['valor_residual'],
                'depreciacao_anual': item['depreciacao_anual'],
            }
            for item in resumo['maquinarios']
        ],
        'benfeitorias': [
            {
                'id': item['benfeitoria'].pk,
                'nome': item['benfeitoria'].nome,
                'parcelas': f"{item['benfeitoria'].parcelas_pagas}/{item['benfeitoria'].parcelas_total}",
                'valor_parcela': item['valor_parcela'],
                'saldo_devedor': item['saldo_devedor'],
            }
            for item in resumo['benfeitorias']
        ],
        'totais': resumo['totais'],
    })


# =============================================================================
# RELATÓRIOS
# =============================================================================

@login_required
@require_GET
def relatorio_safras_pdf(request):
    """Gera o PDF do Relatório Técnico das safras selecionadas (?safras=1&safras=2)."""
    try:
        safra_ids = [int(pk) for pk in request.GET.getlist('safras')]
    except ValueError:
        return HttpResponse("Seleção de safras inválida", status=400)

    if not safra_ids:
        return HttpResponse("Selecione ao menos uma safra", status=400)

    secoes = services.montar_relatorio(safra_ids)
    if not secoes:
        return HttpResponse("Nenhuma safra encontrada", status=404)

    context = {
        'secoes': secoes,
        'sistema_nome': settings.SISTEMA_NOME,
        'data_atual': timezone.now(),
    }

    pdf = render_to_pdf('safras/relatorio/safras_pdf.html', context)
    if pdf:
        response = HttpResponse(pdf, content_type='application/pdf')
        response['Content-Disposition'] = 'inline; filename="relatorio_safras.pdf"'
        return response

    logger.error("Falha ao gerar o relatório das safras %s", safra_ids)
    return HttpResponse("Erro ao gerar PDF", status=500)
