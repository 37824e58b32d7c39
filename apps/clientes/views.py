# apps/clientes/views.py

import logging

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.shortcuts import get_object_or_404, redirect, render
from django.views.decorators.http import require_http_methods, require_POST

from apps.core.exceptions import PevetechError
from apps.core.permissions import requer_gerente_ou_admin
from apps.crm.models import Lead
from apps.relatorios.utils import calcular_mrr, contar_clientes_ativos
from .forms import ClienteForm
from .models import Cliente
from .services import converter_em_cliente

logger = logging.getLogger(__name__)


@login_required
def lista_view(request):
    """Carteira de clientes com card de MRR"""
    clientes = list(Cliente.objects.order_by('-criado_em'))

    context = {
        'clientes': clientes,
        'mrr': calcular_mrr(clientes),
        'clientes_ativos': contar_clientes_ativos(clientes),
    }
    return render(request, 'clientes/lista.html', context)


@login_required
@requer_gerente_ou_admin
@require_http_methods(["GET", "POST"])
def criar_view(request):
    if request.method == 'POST':
        form = ClienteForm(request.POST)
        if form.is_valid():
            cliente = form.save()
            logger.info("Cliente %s cadastrado por %s", cliente.id, request.user.username)
            messages.success(request, f'Cliente "{cliente.nome}" cadastrado!')
            return redirect('clientes:lista')
    else:
        form = ClienteForm()

    return render(request, 'clientes/form.html', {'form': form, 'titulo': 'Novo cliente'})


@login_required
@requer_gerente_ou_admin
@require_http_methods(["GET", "POST"])
def editar_view(request, cliente_id):
    cliente = get_object_or_404(Cliente, id=cliente_id)

    if request.method == 'POST':
        form = ClienteForm(request.POST, instance=cliente)
        if form.is_valid():
            form.save()
            messages.success(request, 'Cliente atualizado!')
            return redirect('clientes:lista')
    else:
        form = ClienteForm(instance=cliente)

    context = {
        'form': form,
        'cliente': cliente,
        'titulo': f'Editar {cliente.nome}',
    }
    return render(request, 'clientes/form.html', context)


@login_required
@requer_gerente_ou_admin
@require_POST
def converter_lead_view(request, lead_id):
    """Transforma lead fechado em cliente ativo (botão do Kanban)"""
    lead = get_object_or_404(Lead, id=lead_id)

    try:
        cliente, criado = converter_em_cliente(lead)
    except PevetechError as e:
        messages.error(request, e.mensagem)
        return redirect('crm:kanban')

    if criado:
        messages.success(request, f'{cliente.nome} agora é cliente!')
        return redirect('clientes:editar', cliente_id=cliente.id)

    messages.info(request, f'{lead.nome} já estava na carteira de clientes.')
    return redirect('clientes:lista')
