# apps/labs/views.py

import logging

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.shortcuts import get_object_or_404, redirect, render
from django.views.decorators.http import require_POST

from apps.core.permissions import requer_gerente_ou_admin
from .forms import ProjetoLabForm
from .models import ProjetoLab

logger = logging.getLogger(__name__)


# === Vitrine pública ===

def vitrine_view(request):
    projetos = ProjetoLab.objects.publicados().order_by('-criado_em')
    return render(request, 'labs/vitrine.html', {'projetos': projetos})


def visualizar_view(request, slug):
    """
    Abre o experimento em iframe
    Slug inexistente ou projeto oculto mostram a página de não encontrado
    """
    projeto = ProjetoLab.objects.publicados().filter(slug=slug).first()

    if projeto is None:
        return render(request, 'labs/nao_encontrado.html', {'slug': slug}, status=404)

    return render(request, 'labs/visualizar.html', {'projeto': projeto})


# === Gestão (back-office) ===

@login_required
@requer_gerente_ou_admin
def admin_lista_view(request):
    context = {
        'projetos': ProjetoLab.objects.order_by('-criado_em'),
        'form': ProjetoLabForm(),
    }
    return render(request, 'labs/admin_lista.html', context)


@login_required
@requer_gerente_ou_admin
@require_POST
def admin_criar_view(request):
    form = ProjetoLabForm(request.POST)

    if form.is_valid():
        projeto = form.save()
        logger.info("Projeto do Labs %s criado por %s", projeto.slug, request.user.username)
        messages.success(request, 'Experimento criado com sucesso!')
        return redirect('labs_admin:lista')

    # Formulário volta aberto com os erros
    context = {
        'projetos': ProjetoLab.objects.order_by('-criado_em'),
        'form': form,
        'form_aberto': True,
    }
    return render(request, 'labs/admin_lista.html', context, status=400)


@login_required
@requer_gerente_ou_admin
@require_POST
def admin_alternar_view(request, projeto_id):
    projeto = get_object_or_404(ProjetoLab, id=projeto_id)

    projeto.ativo = not projeto.ativo
    projeto.save(update_fields=['ativo'])

    logger.info(
        "Projeto do Labs %s %s por %s",
        projeto.slug, 'publicado' if projeto.ativo else 'ocultado', request.user.username
    )

    if projeto.ativo:
        messages.success(request, 'Projeto publicado na vitrine!')
    else:
        messages.success(request, 'Projeto ocultado da vitrine.')

    return redirect('labs_admin:lista')


@login_required
@requer_gerente_ou_admin
@require_POST
def admin_excluir_view(request, projeto_id):
    projeto = get_object_or_404(ProjetoLab, id=projeto_id)
    titulo = projeto.titulo
    projeto.delete()

    logger.info("Projeto do Labs %s excluído por %s", titulo, request.user.username)
    messages.success(request, f'Projeto "{titulo}" excluído.')
    return redirect('labs_admin:lista')
