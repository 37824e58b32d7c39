# apps/clientes/admin.py

from django.contrib import admin

from apps.core.utils import formatar_moeda_brl
from .models import Cliente


@admin.register(Cliente)
class ClienteAdmin(admin.ModelAdmin):
    """Admin da carteira de clientes"""

    list_display = ['nome', 'empresa', 'valor_formatado', 'status', 'lead', 'criado_em']
    list_filter = ['status', 'criado_em']
    search_fields = ['nome', 'empresa']
    raw_id_fields = ['lead']
    readonly_fields = ['criado_em']

    def valor_formatado(self, obj):
        return formatar_moeda_brl(obj.valor_mensal)

    valor_formatado.short_description = 'Valor mensal'
