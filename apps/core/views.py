# apps/core/views.py

from django.conf import settings
from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.core.cache import cache
from django.db import DatabaseError
from django.http import JsonResponse
from django.shortcuts import redirect, render
from django.utils import timezone
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.http import require_http_methods
import logging

from apps.clientes.models import Cliente
from apps.crm.models import Lead
from apps.relatorios.utils import calcular_mrr, contar_clientes_ativos
from apps.tarefas.models import Tarefa
from .auth_service import auth_service
from .forms import LoginForm
from .models import Usuario

logger = logging.getLogger(__name__)


@require_http_methods(["GET", "POST"])
def login_view(request):
    """
    View de login usando serviço encapsulado

    A view cuida do HTTP; bloqueio e verificação de credenciais ficam no serviço
    """
    if request.user.is_authenticated:
        return redirect('core:painel')

    form = LoginForm()

    if request.method == 'POST':
        form = LoginForm(request.POST)

        if form.is_valid():
            sucesso, mensagem = auth_service.fazer_login(
                request,
                form.cleaned_data['username'],
                form.cleaned_data['password'],
                form.cleaned_data['lembrar_me']
            )

            if sucesso:
                messages.success(request, mensagem)
                next_url = request.POST.get('next') or request.GET.get('next')
                if next_url and url_has_allowed_host_and_scheme(
                    next_url, allowed_hosts={request.get_host()}, require_https=request.is_secure()
                ):
                    return redirect(next_url)
                return redirect('core:painel')

            messages.error(request, mensagem)

    context = {
        'title': 'Login - Pevetech',
        'form': form,
        'next': request.GET.get('next', ''),
    }
    return render(request, 'core/login.html', context)


@require_http_methods(["GET", "POST"])
def logout_view(request):
    auth_service.fazer_logout(request)
    messages.info(request, 'Você foi desconectado com sucesso.')
    return redirect('core:login')


@login_required
def painel_view(request):
    """
    Visão geral do back-office
    MRR, clientes ativos, leads novos e tarefas pendentes
    """
    clientes = list(Cliente.objects.only('valor_mensal', 'status'))

    context = {
        'mrr': calcular_mrr(clientes),
        'clientes_ativos': contar_clientes_ativos(clientes),
        'leads_novos': Lead.objects.filter(status=Lead.STATUS_NOVO).count(),
        'tarefas_pendentes': Tarefa.objects.filter(concluida=False).count(),
        'leads_recentes': Lead.objects.order_by('-criado_em')[:5],
    }
    return render(request, 'core/painel.html', context)


def health_check(request):
    """
    Health check para monitoramento
    """
    status = {
        'status': 'healthy',
        'database': 'ok',
        'cache': 'ok',
    }

    try:
        Usuario.objects.exists()
    except DatabaseError as e:
        logger.error("Health check falhou no banco: %s", e)
        status.update({'status': 'unhealthy', 'database': 'erro'})

    try:
        cache.set('health_check', 'ok', 60)
        if cache.get('health_check') != 'ok':
            status.update({'status': 'unhealthy', 'cache': 'erro'})
    except Exception as e:
        # Backends de cache levantam exceções próprias (Redis fora do ar)
        logger.error("Health check falhou no cache: %s", e)
        status.update({'status': 'unhealthy', 'cache': 'erro'})

    status.update({
        'timestamp': timezone.now().isoformat(),
        'version': settings.PEVETECH_VERSAO
    })

    return JsonResponse(status, status=200 if status['status'] == 'healthy' else 500)


def pagina_nao_encontrada(request, exception=None):
    return render(request, '404.html', status=404)
