# apps/labs/urls_admin.py

from django.urls import path
from . import views

app_name = 'labs_admin'

urlpatterns = [
    path('', views.admin_lista_view, name='lista'),
    path('novo/', views.admin_criar_view, name='criar'),
    path('<int:projeto_id>/alternar/', views.admin_alternar_view, name='alternar'),
    path('<int:projeto_id>/excluir/', views.admin_excluir_view, name='excluir'),
]
