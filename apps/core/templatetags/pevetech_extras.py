# apps/core/templatetags/pevetech_extras.py

from django import template

from apps.core.utils import cor_prioridade, formatar_moeda_brl, formatar_percentual

register = template.Library()


@register.filter
def moeda(valor):
    """{{ cliente.valor_mensal|moeda }} -> R$ 1.234,56"""
    return formatar_moeda_brl(valor)


@register.filter
def percentual(valor):
    return formatar_percentual(valor or 0)


@register.filter
def classe_prioridade(prioridade):
    return cor_prioridade(prioridade)
