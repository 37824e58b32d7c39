# apps/tarefas/forms.py

from django import forms

from .models import Tarefa


class TarefaForm(forms.ModelForm):
    """Criação rápida de tarefa no topo do quadro"""

    class Meta:
        model = Tarefa
        fields = ['titulo', 'descricao', 'prioridade']
        labels = {
            'titulo': 'Título',
            'descricao': 'Descrição',
            'prioridade': 'Prioridade',
        }
        widgets = {
            'titulo': forms.TextInput(attrs={
                'class': 'form-input w-full px-4 py-2 border rounded-lg',
                'placeholder': 'Nova tarefa...'
            }),
            'descricao': forms.Textarea(attrs={
                'class': 'form-input w-full px-4 py-2 border rounded-lg',
                'rows': 2
            }),
            'prioridade': forms.Select(attrs={'class': 'form-input px-4 py-2 border rounded-lg'}),
        }
        error_messages = {
            'titulo': {
                'required': 'Informe o título da tarefa.',
                'max_length': 'O título deve ter no máximo 200 caracteres.',
            },
        }
