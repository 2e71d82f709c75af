"""
Gestor de Safras - Configuração do Admin

Registro dos modelos no Django Admin (cadastro de todos os registros).
"""

from django.contrib import admin
from .models import (
    Fazenda, Safra, AnaliseSolo, OperacaoCampo, Custo, Colheita,
    Maquinario, Benfeitoria,
)


@admin.register(Fazenda)
class FazendaAdmin(admin.ModelAdmin):
    list_display = ['nome', 'localizacao', 'produtor']
    search_fields = ['nome', 'localizacao', 'produtor']


class AnaliseSoloInline(admin.StackedInline):
    model = AnaliseSolo
    extra = 0


@admin.register(Safra)
class SafraAdmin(admin.ModelAdmin):
    list_display = ['nome', 'fazenda', 'cultura', 'variedade', 'area', 'data_inicio', 'data_fim', 'ativa']
    list_filter = ['fazenda', 'ativa', 'cultura']
    search_fields = ['nome', 'cultura', 'variedade', 'fazenda__nome']
    inlines = [AnaliseSoloInline]
    date_hierarchy = 'data_inicio'


@admin.register(OperacaoCampo)
class OperacaoCampoAdmin(admin.ModelAdmin):
    list_display = ['data', 'safra', 'tipo', 'custo']
    list_filter = ['safra', 'tipo', 'data']
    search_fields = ['detalhes', 'safra__nome']
    date_hierarchy = 'data'


@admin.register(Custo)
class CustoAdmin(admin.ModelAdmin):
    list_display = ['data', 'tipo', 'categoria', 'descricao', 'safra', 'valor']
    list_filter = ['tipo', 'categoria', 'safra']
    search_fields = ['descricao', 'categoria']
    date_hierarchy = 'data'


@admin.register(Colheita)
class ColheitaAdmin(admin.ModelAdmin):
    list_display = ['data', 'safra', 'quantidade', 'unidade', 'preco_unitario', 'get_valor_total', 'responsavel']
    list_filter = ['safra', 'unidade']

    def get_valor_total(self, obj):
        return obj.valor_total
    get_valor_total.short_description = 'Valor Total (R$)'


@admin.register(Maquinario)
class MaquinarioAdmin(admin.ModelAdmin):
    list_display = ['nome', 'fazenda', 'tipo', 'valor_aquisicao', 'data_aquisicao', 'get_depreciacao_anual']
    list_filter = ['fazenda', 'tipo']
    search_fields = ['nome', 'tipo']

    def get_depreciacao_anual(self, obj):
        return round(obj.depreciacao_anual, 2)
    get_depreciacao_anual.short_description = 'Depreciação Anual (R$)'


@admin.register(Benfeitoria)
class BenfeitoriaAdmin(admin.ModelAdmin):
    list_display = ['nome', 'fazenda', 'valor_total', 'parcelas_pagas', 'parcelas_total', 'get_saldo_devedor']
    list_filter = ['fazenda']
    search_fields = ['nome']

    def get_saldo_devedor(self, obj):
        return round(obj.saldo_devedor, 2)
    get_saldo_devedor.short_description = 'Saldo Devedor (R$)'
