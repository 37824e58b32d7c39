# apps/labs/forms.py

import re

from django import forms

from .models import ProjetoLab

CLASSE_INPUT = 'form-input w-full px-4 py-2 border rounded-lg'


def normalizar_slug(valor: str) -> str:
    """Ex: "AI Pitch  Generator" -> "ai-pitch-generator" """
    return re.sub(r'\s+', '-', valor.lower())


def separar_stack(texto: str) -> list:
    """Ex: "Django, HTMX, ,Redis" -> ["Django", "HTMX", "Redis"]"""
    return [item.strip() for item in (texto or '').split(',') if item.strip()]


class ProjetoLabForm(forms.ModelForm):
    """
    Cadastro de experimento no Labs
    A stack é digitada como texto separado por vírgulas
    """

    slug = forms.CharField(
        label='Slug (URL)',
        max_length=150,
        widget=forms.TextInput(attrs={'class': CLASSE_INPUT, 'placeholder': 'ai-pitch-generator'})
    )
    stack_texto = forms.CharField(
        label='Stack',
        required=False,
        help_text='Separe as tecnologias por vírgula',
        widget=forms.TextInput(attrs={'class': CLASSE_INPUT, 'placeholder': 'Django, HTMX, OpenAI'})
    )

    class Meta:
        model = ProjetoLab
        fields = ['titulo', 'slug', 'url_externa', 'descricao', 'categoria', 'status', 'icone']
        labels = {
            'titulo': 'Nome do Projeto',
            'url_externa': 'URL Externa',
            'descricao': 'Descrição',
            'categoria': 'Categoria',
            'status': 'Status',
            'icone': 'Ícone',
        }
        widgets = {
            'titulo': forms.TextInput(attrs={'class': CLASSE_INPUT, 'placeholder': 'Ex: AI Pitch Generator'}),
            'url_externa': forms.URLInput(attrs={'class': CLASSE_INPUT, 'placeholder': 'https://projeto.app'}),
            'descricao': forms.Textarea(attrs={'class': CLASSE_INPUT, 'rows': 3}),
            'categoria': forms.TextInput(attrs={'class': CLASSE_INPUT}),
            'status': forms.TextInput(attrs={'class': CLASSE_INPUT}),
            'icone': forms.TextInput(attrs={'class': CLASSE_INPUT, 'placeholder': 'terminal, bot, database'}),
        }

    def clean_slug(self):
        return normalizar_slug(self.cleaned_data['slug'])

    def save(self, commit=True):
        projeto = super().save(commit=False)
        projeto.stack = separar_stack(self.cleaned_data.get('stack_texto'))
        # Novos experimentos já entram publicados
        if projeto.pk is None:
            projeto.ativo = True
        if commit:
            projeto.save()
        return projeto
