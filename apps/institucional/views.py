# apps/institucional/views.py

import logging

from django.conf import settings
from django.contrib import messages
from django.db import DatabaseError
from django.shortcuts import redirect, render
from django.urls import reverse
from django.views.decorators.http import require_http_methods, require_POST

from apps.core.utils import primeiro_erro
from apps.crm.models import Lead
from apps.crm.services import criar_lead
from apps.labs.models import ProjetoLab
from .diagnostico import PASSOS_TERMINAL, renderizar_relatorio
from .forms import ContatoForm, DiagnosticoForm

logger = logging.getLogger(__name__)


def index_view(request):
    """Landing page com o formulário de contato"""
    context = {
        'form': ContatoForm(),
        'projetos_labs': ProjetoLab.objects.publicados().order_by('-criado_em')[:3],
    }
    return render(request, 'institucional/index.html', context)


@require_POST
def contato_view(request):
    """
    Recebe o formulário de contato e registra o lead

    Com HTMX devolve apenas o formulário (limpo ou com o erro);
    sem HTMX volta para a landing page.
    """
    form = ContatoForm(request.POST)
    enviado = False

    if not form.is_valid():
        messages.error(request, primeiro_erro(form))
    else:
        try:
            criar_lead(form.dados_lead(), origem=Lead.ORIGEM_CONTATO)
        except DatabaseError:
            logger.exception("Erro ao registrar lead do formulário de contato")
            messages.error(request, 'Erro ao enviar. Tente novamente mais tarde.')
        else:
            messages.success(request, 'Mensagem enviada! Entraremos em contato em breve.')
            enviado = True
            form = ContatoForm()

    if request.htmx:
        # HTMX só troca o conteúdo em respostas 2xx
        return render(
            request,
            'institucional/partials/contato_form.html',
            {'form': form, 'enviado': enviado}
        )

    return redirect(reverse('institucional:index') + '#contato')


@require_http_methods(["GET", "POST"])
def diagnostico_view(request):
    """
    Diagnóstico operacional
    POST válido registra o lead e devolve os passos do terminal e o relatório
    """
    context = {
        'passo_ms': settings.PEVETECH_DIAGNOSTICO_PASSOS_MS,
        'fase': 'formulario',
    }

    if request.method == 'GET':
        context['form'] = DiagnosticoForm()
        return render(request, 'institucional/diagnostico.html', context)

    form = DiagnosticoForm(request.POST)
    context['form'] = form

    if not form.is_valid():
        messages.error(request, primeiro_erro(form))
        if request.htmx:
            return render(request, 'institucional/partials/diagnostico_form.html', context)
        return render(request, 'institucional/diagnostico.html', context, status=400)

    try:
        criar_lead(form.dados_lead(), origem=Lead.ORIGEM_DIAGNOSTICO)
    except DatabaseError:
        logger.exception("Erro ao registrar lead do diagnóstico")
        messages.error(request, 'Erro ao enviar. Tente novamente mais tarde.')
        if request.htmx:
            return render(request, 'institucional/partials/diagnostico_form.html', context)
        return render(request, 'institucional/diagnostico.html', context, status=500)

    context.update({
        'fase': 'resultado',
        'passos': PASSOS_TERMINAL,
        'relatorio_html': renderizar_relatorio(),
        'nome': form.cleaned_data['name'],
    })

    if request.htmx:
        return render(request, 'institucional/partials/diagnostico_resultado.html', context)
    return render(request, 'institucional/diagnostico.html', context)
