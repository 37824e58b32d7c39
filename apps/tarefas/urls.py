# apps/tarefas/urls.py

from django.urls import path
from . import views

app_name = 'tarefas'

urlpatterns = [
    path('', views.lista_view, name='lista'),
    path('nova/', views.criar_view, name='criar'),
    path('<int:tarefa_id>/alternar/', views.alternar_view, name='alternar'),
]
