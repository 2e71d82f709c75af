"""
Gestor de Safras - URLs do App Safras
"""

from django.urls import path
from . import views

urlpatterns = [
    # Resultados
    path('resultados/', views.resultados_list, name='resultados_list'),
    path('safras/<int:pk>/indicadores/', views.safra_indicadores, name='safra_indicadores'),

    # Patrimônio
    path('fazendas/<int:pk>/patrimonio/', views.fazenda_patrimonio, name='fazenda_patrimonio'),

    # Relatórios
    path('relatorios/safras/', views.relatorio_safras_pdf, name='relatorio_safras_pdf'),
]
