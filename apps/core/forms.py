# apps/core/forms.py

from django import forms


class LoginForm(forms.Form):
    """Formulário de login do back-office"""

    username = forms.CharField(
        label='Usuário ou Email',
        max_length=254,
        widget=forms.TextInput(attrs={
            'class': 'form-input w-full px-4 py-2 border rounded-lg',
            'placeholder': 'Email',
            'autofocus': True
        })
    )

    password = forms.CharField(
        label='Senha',
        widget=forms.PasswordInput(attrs={
            'class': 'form-input w-full px-4 py-2 border rounded-lg',
            'placeholder': 'Senha'
        })
    )

    lembrar_me = forms.BooleanField(
        label='Lembrar-me',
        required=False,
        widget=forms.CheckboxInput(attrs={
            'class': 'form-checkbox h-4 w-4'
        })
    )
