# apps/institucional/urls.py

from django.urls import path
from . import views

app_name = 'institucional'

urlpatterns = [
    path('', views.index_view, name='index'),
    path('contato/', views.contato_view, name='contato'),
    path('diagnostico/', views.diagnostico_view, name='diagnostico'),
]
