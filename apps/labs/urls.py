# apps/labs/urls.py

from django.urls import path
from . import views

app_name = 'labs'

urlpatterns = [
    path('', views.vitrine_view, name='vitrine'),
    path('<str:slug>/', views.visualizar_view, name='visualizar'),
]
