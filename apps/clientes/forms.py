# apps/clientes/forms.py

from django import forms

from .models import Cliente

CLASSE_INPUT = 'form-input w-full px-4 py-2 border rounded-lg'


class ClienteForm(forms.ModelForm):
    """Cadastro e edição de cliente"""

    class Meta:
        model = Cliente
        fields = ['nome', 'empresa', 'logo_url', 'valor_mensal', 'status']
        labels = {
            'nome': 'Nome',
            'empresa': 'Empresa',
            'logo_url': 'URL do logo',
            'valor_mensal': 'Valor mensal (R$)',
            'status': 'Status',
        }
        widgets = {
            'nome': forms.TextInput(attrs={'class': CLASSE_INPUT}),
            'empresa': forms.TextInput(attrs={'class': CLASSE_INPUT}),
            'logo_url': forms.URLInput(attrs={'class': CLASSE_INPUT, 'placeholder': 'https://'}),
            'valor_mensal': forms.NumberInput(attrs={'class': CLASSE_INPUT, 'step': '0.01', 'min': '0'}),
            'status': forms.Select(attrs={'class': CLASSE_INPUT}),
        }

    def clean_valor_mensal(self):
        valor = self.cleaned_data.get('valor_mensal')
        if valor is not None and valor < 0:
            raise forms.ValidationError('O valor mensal não pode ser negativo.')
        return valor
