# apps/institucional/apps.py

from django.apps import AppConfig


class InstitucionalConfig(AppConfig):
    """Configuração da app Institucional"""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.institucional'
    verbose_name = 'Site Institucional'
