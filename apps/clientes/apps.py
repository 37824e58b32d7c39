# apps/clientes/apps.py

from django.apps import AppConfig


class ClientesConfig(AppConfig):
    """Configuração da app Clientes"""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.clientes'
    verbose_name = 'Clientes'
