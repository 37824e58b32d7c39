# apps/tarefas/views.py

import logging

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.http import JsonResponse
from django.shortcuts import redirect, render
from django.views.decorators.http import require_POST

from apps.core.utils import CORES_PRIORIDADE, primeiro_erro
from .forms import TarefaForm
from .models import Tarefa

logger = logging.getLogger(__name__)

VALORES_VERDADEIROS = ('true', '1', 'on')


@login_required
def lista_view(request):
    """
    Quadro de tarefas
    Pendentes primeiro; a seção de concluídas só aparece se houver alguma
    """
    tarefas = Tarefa.objects.order_by('-criado_em')

    context = {
        'pendentes': [t for t in tarefas if not t.concluida],
        'concluidas': [t for t in tarefas if t.concluida],
        'form': TarefaForm(),
        'cores_prioridade': CORES_PRIORIDADE,
    }
    return render(request, 'tarefas/lista.html', context)


@login_required
@require_POST
def alternar_view(request, tarefa_id):
    """
    Marca/desmarca tarefa como concluída via AJAX

    A tela envia o estado marcado no checkbox em `concluida`; repetir o
    pedido ou enviá-lo de uma aba desatualizada não inverte a escolha.
    Sem `concluida`, inverte o estado gravado.
    """
    valor = request.POST.get('concluida')

    if valor is None:
        atual = Tarefa.objects.filter(id=tarefa_id).values_list('concluida', flat=True).first()
        if atual is None:
            return JsonResponse({'success': False, 'error': 'Tarefa não encontrada'}, status=404)
        concluida = not atual
    else:
        concluida = valor.strip().lower() in VALORES_VERDADEIROS

    if not Tarefa.objects.filter(id=tarefa_id).update(concluida=concluida):
        return JsonResponse({'success': False, 'error': 'Tarefa não encontrada'}, status=404)

    return JsonResponse({'success': True, 'id': tarefa_id, 'concluida': concluida})


@login_required
@require_POST
def criar_view(request):
    form = TarefaForm(request.POST)

    if form.is_valid():
        tarefa = form.save()
        logger.info("Tarefa %s criada por %s", tarefa.id, request.user.username)
        messages.success(request, 'Tarefa criada!')
    else:
        messages.error(request, primeiro_erro(form))

    return redirect('tarefas:lista')
