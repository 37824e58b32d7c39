# apps/core/urls.py

from django.urls import path
from . import views

app_name = 'core'

urlpatterns = [
    # === AUTENTICAÇÃO ===
    path('login/', views.login_view, name='login'),
    path('logout/', views.logout_view, name='logout'),

    # === PAINEL PRINCIPAL ===
    path('dashboard/', views.painel_view, name='painel'),

    # === MONITORAMENTO ===
    path('health/', views.health_check, name='health'),
]
