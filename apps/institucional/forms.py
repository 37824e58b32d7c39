# apps/institucional/forms.py

from django import forms

CLASSE_INPUT = 'form-input w-full bg-transparent border-b px-0 py-3'


class ContatoForm(forms.Form):
    """Formulário de contato da landing page (todos os campos passam por strip)"""

    name = forms.CharField(
        label='Nome',
        max_length=100,
        error_messages={
            'required': 'Nome é obrigatório',
            'max_length': 'Nome deve ter no máximo 100 caracteres',
        },
        widget=forms.TextInput(attrs={'class': CLASSE_INPUT, 'placeholder': 'Seu nome'})
    )
    email = forms.EmailField(
        label='Email',
        max_length=255,
        error_messages={
            'required': 'Email inválido',
            'invalid': 'Email inválido',
            'max_length': 'Email deve ter no máximo 255 caracteres',
        },
        widget=forms.EmailInput(attrs={'class': CLASSE_INPUT, 'placeholder': 'seu@email.com'})
    )
    company = forms.CharField(
        label='Empresa',
        max_length=100,
        required=False,
        error_messages={'max_length': 'Empresa deve ter no máximo 100 caracteres'},
        widget=forms.TextInput(attrs={'class': CLASSE_INPUT, 'placeholder': 'Empresa (opcional)'})
    )
    message = forms.CharField(
        label='Mensagem',
        max_length=2000,
        error_messages={
            'required': 'Mensagem é obrigatória',
            'max_length': 'Mensagem deve ter no máximo 2000 caracteres',
        },
        widget=forms.Textarea(attrs={'class': CLASSE_INPUT, 'rows': 4, 'placeholder': 'Como podemos ajudar?'})
    )

    def dados_lead(self):
        return {
            'nome': self.cleaned_data['name'],
            'email': self.cleaned_data['email'],
            'empresa': self.cleaned_data.get('company'),
            'mensagem': self.cleaned_data['message'],
        }


class DiagnosticoForm(forms.Form):
    """Dados do diagnóstico operacional; empresa e WhatsApp são obrigatórios aqui"""

    name = forms.CharField(
        label='Nome',
        max_length=100,
        error_messages={
            'required': 'Nome é obrigatório',
            'max_length': 'Nome deve ter no máximo 100 caracteres',
        },
        widget=forms.TextInput(attrs={'class': CLASSE_INPUT, 'placeholder': 'Seu nome'})
    )
    email = forms.EmailField(
        label='Email',
        max_length=255,
        error_messages={
            'required': 'Email inválido',
            'invalid': 'Email inválido',
            'max_length': 'Email deve ter no máximo 255 caracteres',
        },
        widget=forms.EmailInput(attrs={'class': CLASSE_INPUT, 'placeholder': 'seu@email.com'})
    )
    whatsapp = forms.CharField(
        label='WhatsApp',
        max_length=20,
        error_messages={
            'required': 'WhatsApp é obrigatório',
            'max_length': 'WhatsApp deve ter no máximo 20 caracteres',
        },
        widget=forms.TextInput(attrs={'class': CLASSE_INPUT, 'placeholder': '(00) 00000-0000'})
    )
    company = forms.CharField(
        label='Empresa',
        max_length=100,
        error_messages={
            'required': 'Empresa é obrigatória',
            'max_length': 'Empresa deve ter no máximo 100 caracteres',
        },
        widget=forms.TextInput(attrs={'class': CLASSE_INPUT, 'placeholder': 'Nome da empresa'})
    )
    challenge = forms.CharField(
        label='Desafio',
        max_length=2000,
        error_messages={
            'required': 'Descreva seu desafio',
            'max_length': 'Desafio deve ter no máximo 2000 caracteres',
        },
        widget=forms.Textarea(attrs={
            'class': CLASSE_INPUT,
            'rows': 4,
            'placeholder': 'Qual processo mais consome tempo da sua equipe hoje?'
        })
    )

    def dados_lead(self):
        return {
            'nome': self.cleaned_data['name'],
            'email': self.cleaned_data['email'],
            'empresa': self.cleaned_data['company'],
            'whatsapp': self.cleaned_data['whatsapp'],
            'mensagem': self.cleaned_data['challenge'],
        }
