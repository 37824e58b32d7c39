# apps/core/permissions.py

from functools import wraps
from django.shortcuts import redirect
from django.contrib import messages
from django.http import JsonResponse


class PevetechPermissions:
    """
    Sistema de permissões do back-office
    Baseado nos tipos de usuário: admin, gerente, funcionário
    """

    @staticmethod
    def is_equipe(user):
        """Qualquer membro ativo da equipe acessa o back-office"""
        return user.is_authenticated and user.is_active

    @staticmethod
    def is_admin(user):
        """Verifica se é administrador"""
        return user.is_authenticated and user.tipo == 'admin'

    @staticmethod
    def is_gerente_ou_admin(user):
        """Verifica se é gerente ou admin"""
        return user.is_authenticated and user.tipo in ['admin', 'gerente']

    @staticmethod
    def pode_mover_lead(user):
        """Toda a equipe opera o pipeline"""
        return PevetechPermissions.is_equipe(user)

    @staticmethod
    def pode_editar_cliente(user):
        return PevetechPermissions.is_gerente_ou_admin(user)

    @staticmethod
    def pode_converter_lead(user):
        return PevetechPermissions.is_gerente_ou_admin(user)

    @staticmethod
    def pode_gerenciar_labs(user):
        return PevetechPermissions.is_gerente_ou_admin(user)

    @staticmethod
    def pode_ver_relatorios(user):
        return PevetechPermissions.is_gerente_ou_admin(user)


# Decoradores para views

def requer_gerente_ou_admin(view_func):
    """Decorador que requer gerente ou admin"""

    @wraps(view_func)
    def wrapped_view(request, *args, **kwargs):
        if not PevetechPermissions.is_gerente_ou_admin(request.user):
            messages.error(request, 'Acesso negado. Apenas gerentes e administradores.')
            return redirect('core:painel')
        return view_func(request, *args, **kwargs)

    return wrapped_view


def ajax_requer_permissao(permission_check):
    """
    Decorador genérico para views AJAX/HTMX
    Retorna 403 em JSON ao invés de redirecionar
    """

    def decorator(view_func):
        @wraps(view_func)
        def wrapped_view(request, *args, **kwargs):
            if not permission_check(request.user):
                return JsonResponse(
                    {'success': False, 'error': 'Você não tem permissão para esta ação.'},
                    status=403
                )
            return view_func(request, *args, **kwargs)

        return wrapped_view

    return decorator
