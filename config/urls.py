# config/urls.py

from django.contrib import admin
from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static

urlpatterns = [
    # Admin
    path('admin/', admin.site.urls),

    # Site público
    path('', include('apps.institucional.urls')),
    path('labs/', include('apps.labs.urls')),

    # Autenticação e painel
    path('', include('apps.core.urls')),

    # Back-office
    path('dashboard/crm/', include('apps.crm.urls')),
    path('dashboard/clientes/', include('apps.clientes.urls')),
    path('dashboard/tarefas/', include('apps.tarefas.urls')),
    path('dashboard/labs/', include('apps.labs.urls_admin')),
    path('dashboard/relatorios/', include('apps.relatorios.urls')),
]

# Servir arquivos de mídia em desenvolvimento
if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)

    # Debug Toolbar se disponível
    try:
        import debug_toolbar

        urlpatterns = [
            path('__debug__/', include(debug_toolbar.urls)),
        ] + urlpatterns
    except ImportError:
        pass

handler404 = 'apps.core.views.pagina_nao_encontrada'

admin.site.site_header = 'Pevetech Admin'
admin.site.site_title = 'Pevetech'
admin.site.index_title = 'Administração do Back-office'
