# apps/crm/apps.py

import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class CrmConfig(AppConfig):
    """Configuração da app CRM"""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.crm'
    verbose_name = 'CRM - Pipeline de Leads'

    def ready(self):
        from . import signals  # noqa: F401

        logger.debug("CRM inicializado - WebSockets do pipeline habilitados")
