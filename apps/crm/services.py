# apps/crm/services.py

"""
Regras do pipeline de leads

A movimentação no Kanban é uma atribuição direta de status:
qualquer etapa pode ir para qualquer outra e a última escrita vence.
"""

import logging
from typing import Dict, Optional

from asgiref.sync import async_to_sync
from channels.layers import get_channel_layer
from django.conf import settings
from django.db import transaction
from django.utils import timezone

from apps.core.exceptions import ItemNaoEncontrado, TransicaoInvalida
from .models import Lead, MovimentacaoLead

logger = logging.getLogger(__name__)


def notificar_pipeline(tipo: str, mensagem: Dict) -> None:
    """
    Envia evento ao grupo do pipeline no channel layer

    Falhas de entrega são registradas e não desfazem a escrita no banco.
    """
    channel_layer = get_channel_layer()
    if channel_layer is None:
        return

    try:
        async_to_sync(channel_layer.group_send)(
            settings.PEVETECH_CRM_GRUPO,
            {
                'type': tipo,
                'message': {**mensagem, 'timestamp': timezone.now().isoformat()},
            }
        )
    except Exception:
        logger.exception("Falha ao notificar o pipeline (%s)", tipo)


def serializar_lead(lead: Lead) -> Dict:
    """Dados do card do Kanban"""
    return {
        'id': lead.id,
        'nome': lead.nome,
        'empresa': lead.empresa or '',
        'email': lead.email or '',
        'status': lead.status,
    }


def mover_lead(lead_id, novo_status: str, usuario=None) -> Dict:
    """
    Move lead para outra coluna do Kanban

    Returns:
        Dict com lead, status_anterior, novo_status e se houve alteração

    Raises:
        TransicaoInvalida: status de destino fora do pipeline
        ItemNaoEncontrado: lead inexistente
    """
    if novo_status not in Lead.status_validos():
        raise TransicaoInvalida(f'Status "{novo_status}" não existe no pipeline')

    try:
        lead = Lead.objects.get(pk=lead_id)
    except (Lead.DoesNotExist, ValueError, TypeError):
        raise ItemNaoEncontrado('Lead não encontrado')

    status_anterior = lead.status

    # Soltar na mesma coluna não gera escrita
    if status_anterior == novo_status:
        return {
            'lead': lead,
            'status_anterior': status_anterior,
            'novo_status': novo_status,
            'alterado': False,
        }

    with transaction.atomic():
        lead.status = novo_status
        lead.save(update_fields=['status', 'atualizado_em'])

        MovimentacaoLead.objects.create(
            lead=lead,
            status_anterior=status_anterior,
            status_novo=novo_status,
            usuario=usuario if usuario is not None and usuario.is_authenticated else None
        )

    logger.info(
        "Lead %s movido de %s para %s por %s",
        lead.id, status_anterior, novo_status,
        usuario.username if usuario is not None and usuario.is_authenticated else 'sistema'
    )

    mensagem = {
        **serializar_lead(lead),
        'status_anterior': status_anterior,
        'novo_status': novo_status,
        'usuario': usuario.nome_exibicao if usuario is not None and usuario.is_authenticated else None,
    }
    transaction.on_commit(lambda: notificar_pipeline('lead_moved', mensagem))

    return {
        'lead': lead,
        'status_anterior': status_anterior,
        'novo_status': novo_status,
        'alterado': True,
    }


def criar_lead(dados: Dict, origem: str = Lead.ORIGEM_CONTATO) -> Lead:
    """
    Registra lead vindo dos formulários públicos

    Sempre entra no pipeline como "Novo"; empresa vazia vira NULL.
    """
    lead = Lead.objects.create(
        nome=dados['nome'],
        email=dados['email'],
        empresa=dados.get('empresa') or None,
        whatsapp=dados.get('whatsapp') or '',
        mensagem=dados.get('mensagem') or '',
        status=Lead.STATUS_NOVO,
        origem=origem,
    )
    logger.info("Novo lead %s via %s", lead.id, origem)
    return lead


def leads_por_coluna(leads=None) -> list:
    """
    Agrupa leads nas colunas do Kanban, na ordem do pipeline

    Cada coluna mantém a ordem recebida (mais recentes primeiro por padrão).
    """
    if leads is None:
        leads = Lead.objects.order_by('-criado_em')

    colunas = {valor: [] for valor in Lead.status_validos()}
    for lead in leads:
        # Status desconhecido não aparece no quadro
        if lead.status in colunas:
            colunas[lead.status].append(lead)

    return [
        {
            'status': valor,
            'label': label,
            'leads': colunas[valor],
            'total': len(colunas[valor]),
        }
        for valor, label in Lead.STATUS_CHOICES
    ]


def historico_lead(lead: Lead, limite: Optional[int] = 20):
    qs = lead.movimentacoes.select_related('usuario')
    return qs[:limite] if limite else qs
