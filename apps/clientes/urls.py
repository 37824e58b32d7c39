# apps/clientes/urls.py

from django.urls import path
from . import views

app_name = 'clientes'

urlpatterns = [
    path('', views.lista_view, name='lista'),
    path('novo/', views.criar_view, name='criar'),
    path('<int:cliente_id>/editar/', views.editar_view, name='editar'),
    path('converter/<int:lead_id>/', views.converter_lead_view, name='converter_lead'),
]
