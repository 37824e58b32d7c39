# apps/crm/views.py

import json
import logging

from django.contrib.auth.decorators import login_required
from django.http import JsonResponse
from django.shortcuts import get_object_or_404, render
from django.views.decorators.http import require_POST

from apps.core.exceptions import PevetechError
from apps.core.permissions import PevetechPermissions, ajax_requer_permissao
from .models import Lead
from .services import historico_lead, leads_por_coluna, mover_lead

logger = logging.getLogger(__name__)


@login_required
def kanban_view(request):
    """
    Kanban do pipeline comercial
    Seis colunas fixas, cards arrastáveis entre elas
    """
    colunas = leads_por_coluna(Lead.objects.order_by('-criado_em'))

    context = {
        'colunas': colunas,
        'total_leads': sum(coluna['total'] for coluna in colunas),
        'pode_converter': PevetechPermissions.pode_converter_lead(request.user),
    }
    return render(request, 'crm/kanban.html', context)


@login_required
@require_POST
@ajax_requer_permissao(PevetechPermissions.pode_mover_lead)
def mover_lead_ajax(request):
    """
    Move lead entre colunas via AJAX
    Usado pelo drag-and-drop; o card já foi movido na tela
    e volta para a coluna original se a resposta indicar falha
    """
    if request.content_type == 'application/json':
        try:
            data = json.loads(request.body)
        except (json.JSONDecodeError, UnicodeDecodeError):
            return JsonResponse({'success': False, 'error': 'Parâmetros inválidos'}, status=400)
        if not isinstance(data, dict):
            return JsonResponse({'success': False, 'error': 'Parâmetros inválidos'}, status=400)
    else:
        data = request.POST

    lead_id = data.get('lead_id')
    novo_status = data.get('novo_status')

    # lead_id 0 é um id desconhecido (404), não um parâmetro ausente
    if lead_id in (None, '') or not novo_status:
        return JsonResponse({'success': False, 'error': 'Parâmetros inválidos'}, status=400)

    try:
        resultado = mover_lead(lead_id, novo_status, request.user)
    except PevetechError as e:
        logger.warning("Falha ao mover lead %s para %s: %s", lead_id, novo_status, e.mensagem)
        return JsonResponse({'success': False, 'error': e.mensagem}, status=e.status_code)

    return JsonResponse({
        'success': True,
        'alterado': resultado['alterado'],
        'status_anterior': resultado['status_anterior'],
        'novo_status': resultado['novo_status'],
    })


@login_required
def historico_lead_modal(request, lead_id):
    """Partial HTMX com detalhes e movimentações do lead"""
    lead = get_object_or_404(Lead, id=lead_id)

    context = {
        'lead': lead,
        'movimentacoes': historico_lead(lead),
        'pode_converter': (
            PevetechPermissions.pode_converter_lead(request.user)
            and lead.status == Lead.STATUS_GANHO
        ),
    }
    return render(request, 'crm/partials/historico_lead.html', context)
