# apps/core/context_processors.py

from .permissions import PevetechPermissions

LINKS_DASHBOARD = [
    {'url_name': 'core:painel', 'icone': '📊', 'label': 'Visão Geral'},
    {'url_name': 'crm:kanban', 'icone': '💼', 'label': 'CRM'},
    {'url_name': 'clientes:lista', 'icone': '👥', 'label': 'Clientes'},
    {'url_name': 'tarefas:lista', 'icone': '✅', 'label': 'Tarefas'},
]

LINKS_GERENCIA = [
    {'url_name': 'labs_admin:lista', 'icone': '🧪', 'label': 'Labs'},
    {'url_name': 'relatorios:dashboard', 'icone': '📈', 'label': 'Relatórios'},
]


def navegacao(request):
    """Links da barra lateral do dashboard conforme o tipo de usuário"""
    user = getattr(request, 'user', None)
    if user is None or not user.is_authenticated:
        return {}

    links = list(LINKS_DASHBOARD)
    if PevetechPermissions.is_gerente_ou_admin(user):
        links += LINKS_GERENCIA

    return {'links_dashboard': links}
