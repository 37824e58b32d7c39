# apps/relatorios/urls.py

from django.urls import path
from . import views

app_name = 'relatorios'

urlpatterns = [
    # Dashboard principal
    path('', views.dashboard_view, name='dashboard'),

    # Exportações
    path('leads/csv/', views.exportar_leads_csv, name='leads_csv'),
    path('clientes/excel/', views.exportar_clientes_excel, name='clientes_excel'),
    path('resumo/pdf/', views.relatorio_resumo_pdf, name='resumo_pdf'),

    # API para os gráficos
    path('api/metricas/', views.api_metricas, name='api_metricas'),
]
