# apps/core/admin.py

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils.html import format_html

from .models import Usuario


@admin.register(Usuario)
class UsuarioAdmin(BaseUserAdmin):
    """Admin da equipe do back-office"""

    list_display = [
        'username', 'email', 'get_full_name', 'tipo_badge',
        'is_active', 'date_joined'
    ]
    list_filter = ['tipo', 'is_staff', 'is_active', 'date_joined']
    search_fields = ['username', 'first_name', 'last_name', 'email']
    ordering = ['-date_joined']

    fieldsets = BaseUserAdmin.fieldsets + (
        ('Equipe Pevetech', {
            'fields': ('tipo', 'telefone')
        }),
    )

    add_fieldsets = BaseUserAdmin.add_fieldsets + (
        ('Equipe Pevetech', {
            'fields': ('tipo', 'telefone')
        }),
    )

    def tipo_badge(self, obj):
        cores = {
            Usuario.TIPO_ADMIN: '#EF4444',
            Usuario.TIPO_GERENTE: '#F59E0B',
            Usuario.TIPO_FUNCIONARIO: '#3B82F6',
        }
        cor = cores.get(obj.tipo, '#6B7280')
        return format_html(
            '<span style="background-color: {}; color: white; '
            'padding: 3px 8px; border-radius: 4px; font-size: 11px;">{}</span>',
            cor, obj.get_tipo_display()
        )

    tipo_badge.short_description = 'Tipo'

