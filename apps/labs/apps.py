# apps/labs/apps.py

from django.apps import AppConfig


class LabsConfig(AppConfig):
    """Configuração da app Labs"""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.labs'
    verbose_name = 'Pevetech Labs'
