# apps/core/utils.py

from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union

Numero = Union[Decimal, int, float, str]

# Cores dos badges de prioridade (quadro de tarefas)
CORES_PRIORIDADE = {
    'low': 'bg-secondary text-muted',
    'medium': 'bg-neon-10 text-neon',
    'high': 'bg-destructive-20 text-destructive',
}


def para_decimal(valor: Optional[Numero]) -> Decimal:
    """Converte para Decimal tratando ausência de valor como zero"""
    if valor is None or valor == '':
        return Decimal('0')
    if isinstance(valor, Decimal):
        return valor
    return Decimal(str(valor))


def formatar_moeda_brl(valor: Optional[Numero]) -> str:
    """
    Formata valor monetário no padrão brasileiro
    Ex: 1234.5 -> "R$ 1.234,50", -1234.5 -> "-R$ 1.234,50"
    """
    quantia = para_decimal(valor).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)
    texto = f"{abs(quantia):,.2f}"

    # 1,234.50 -> 1.234,50
    texto = texto.replace(',', '_').replace('.', ',').replace('_', '.')
    sinal = '-' if quantia < 0 else ''
    return f"{sinal}R$ {texto}"


def cor_prioridade(prioridade: Optional[str]) -> str:
    """Classe CSS do badge de prioridade"""
    return CORES_PRIORIDADE.get(prioridade or '', '')


def formatar_percentual(valor: float) -> str:
    """Ex: 33.333 -> "33,3%" """
    return f"{valor:.1f}".replace('.', ',') + '%'


def primeiro_erro(form) -> str:
    """Primeira mensagem de erro do formulário, na ordem dos campos"""
    for erros in form.errors.values():
        if erros:
            return erros[0]
    return ''
