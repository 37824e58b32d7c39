# apps/labs/admin.py

from django.contrib import admin

from .models import ProjetoLab


@admin.register(ProjetoLab)
class ProjetoLabAdmin(admin.ModelAdmin):
    list_display = ['titulo', 'slug', 'categoria', 'status', 'ativo', 'criado_em']
    list_filter = ['ativo', 'categoria']
    search_fields = ['titulo', 'slug', 'descricao']
    prepopulated_fields = {'slug': ('titulo',)}
    list_editable = ['ativo']
