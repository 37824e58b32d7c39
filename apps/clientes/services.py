# apps/clientes/services.py

import logging

from django.db import transaction

from apps.core.exceptions import TransicaoInvalida
from apps.crm.models import Lead
from .models import Cliente

logger = logging.getLogger(__name__)


def converter_em_cliente(lead: Lead):
    """
    Cria cliente ativo a partir de um lead ganho

    Returns:
        Tupla (cliente, criado). Converter o mesmo lead de novo
        devolve o cliente existente.

    Raises:
        TransicaoInvalida: lead fora da coluna "Fechado"
    """
    if lead.status != Lead.STATUS_GANHO:
        raise TransicaoInvalida('Apenas leads fechados podem virar clientes')

    with transaction.atomic():
        cliente, criado = Cliente.objects.get_or_create(
            lead=lead,
            defaults={
                'nome': lead.nome,
                'empresa': lead.empresa or lead.nome,
                'status': Cliente.STATUS_ATIVO,
            }
        )

    if criado:
        logger.info("Lead %s convertido no cliente %s", lead.id, cliente.id)

    return cliente, criado
