# apps/crm/admin.py

from django.contrib import admin
from django.utils.html import format_html

from .models import Lead, MovimentacaoLead

CORES_STATUS = {
    Lead.STATUS_NOVO: '#3B82F6',
    Lead.STATUS_CONTATADO: '#8B5CF6',
    Lead.STATUS_REUNIAO: '#F59E0B',
    Lead.STATUS_PROPOSTA: '#06B6D4',
    Lead.STATUS_GANHO: '#10B981',
    Lead.STATUS_PERDIDO: '#EF4444',
}


class MovimentacaoLeadInline(admin.TabularInline):
    model = MovimentacaoLead
    extra = 0
    fields = ['status_anterior', 'status_novo', 'usuario', 'criado_em']
    readonly_fields = ['status_anterior', 'status_novo', 'usuario', 'criado_em']
    can_delete = False


@admin.register(Lead)
class LeadAdmin(admin.ModelAdmin):
    """Admin dos leads do pipeline"""

    list_display = ['nome', 'empresa', 'email', 'status_badge', 'origem', 'criado_em']
    list_filter = ['status', 'origem', 'criado_em']
    search_fields = ['nome', 'email', 'empresa']
    readonly_fields = ['criado_em', 'atualizado_em']
    inlines = [MovimentacaoLeadInline]

    fieldsets = (
        ('Contato', {
            'fields': ('nome', 'email', 'empresa', 'whatsapp')
        }),
        ('Pipeline', {
            'fields': ('status', 'origem', 'mensagem')
        }),
        ('Datas', {
            'fields': ('criado_em', 'atualizado_em'),
            'classes': ('collapse',)
        })
    )

    def status_badge(self, obj):
        """Status com badge colorido"""
        cor = CORES_STATUS.get(obj.status, '#6B7280')
        return format_html(
            '<span style="background-color: {}; color: white; '
            'padding: 3px 8px; border-radius: 4px; font-size: 11px;">{}</span>',
            cor, obj.get_status_display()
        )

    status_badge.short_description = 'Status'


@admin.register(MovimentacaoLead)
class MovimentacaoLeadAdmin(admin.ModelAdmin):
    list_display = ['lead', 'status_anterior', 'status_novo', 'usuario', 'criado_em']
    list_filter = ['status_novo', 'criado_em']
    search_fields = ['lead__nome']
    readonly_fields = ['lead', 'status_anterior', 'status_novo', 'usuario', 'criado_em']
