# apps/crm/urls.py

from django.urls import path
from . import views

app_name = 'crm'

urlpatterns = [
    path('', views.kanban_view, name='kanban'),
    path('mover/', views.mover_lead_ajax, name='mover_lead'),
    path('lead/<int:lead_id>/', views.historico_lead_modal, name='historico_lead'),
]
