# apps/core/auth_service.py

"""
Serviço de Autenticação - Encapsula a lógica de login do back-office

Login por username ou email, bloqueio temporário após tentativas
incorretas (contador no cache) e sessão estendida com "lembrar-me".
"""

import logging
from typing import Optional, Tuple

from django.conf import settings
from django.contrib.auth import authenticate, login, logout
from django.core.cache import cache

from .models import Usuario

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Serviço encapsulado para gerenciar autenticação

    Os limites de tentativa vêm das configurações PEVETECH_LOGIN_*,
    lidas a cada chamada para respeitar overrides de teste.
    """

    _prefixo_cache = 'login_tentativas'

    @property
    def max_tentativas(self) -> int:
        return settings.PEVETECH_LOGIN_MAX_TENTATIVAS

    @property
    def bloqueio_segundos(self) -> int:
        return settings.PEVETECH_LOGIN_BLOQUEIO_MINUTOS * 60

    @property
    def sessao_persistente_segundos(self) -> int:
        return settings.PEVETECH_LEMBRAR_ME_DIAS * 86400

    def fazer_login(self, request, username: str, password: str, lembrar_me: bool = False) -> Tuple[bool, str]:
        """
        Realiza login com verificações de segurança

        Returns:
            Tuple[sucesso, mensagem]
        """
        identificador = username.strip().lower()

        if self.conta_esta_bloqueada(identificador):
            logger.warning("Login bloqueado para %s", identificador)
            return False, "Conta temporariamente bloqueada por muitas tentativas incorretas"

        usuario = self._autenticar_usuario(request, username.strip(), password)

        if usuario is None:
            tentativas = self._registrar_tentativa_falha(identificador)
            logger.info("Falha de login para %s (%d/%d)", identificador, tentativas, self.max_tentativas)
            return False, "Credenciais inválidas"

        login(request, usuario)

        if lembrar_me:
            request.session.set_expiry(self.sessao_persistente_segundos)

        self._resetar_tentativas_login(identificador)
        logger.info("Login de %s", usuario.username)

        return True, f"Bem-vindo, {usuario.nome_exibicao}!"

    def fazer_logout(self, request) -> None:
        """Encerra a sessão"""
        if request.user.is_authenticated:
            logger.info("Logout de %s", request.user.username)
        logout(request)

    def conta_esta_bloqueada(self, identificador: str) -> bool:
        """Verifica se o identificador atingiu o limite de tentativas"""
        return cache.get(self._chave(identificador), 0) >= self.max_tentativas

    # =================== MÉTODOS PRIVADOS ===================

    def _chave(self, identificador: str) -> str:
        return f"{self._prefixo_cache}:{identificador}"

    def _autenticar_usuario(self, request, username: str, password: str) -> Optional[Usuario]:
        """Autentica usuário (username ou email)"""
        usuario = authenticate(request, username=username, password=password)

        if usuario is None and '@' in username:
            user_obj = Usuario.objects.filter(email__iexact=username, is_active=True).first()
            if user_obj:
                usuario = authenticate(request, username=user_obj.username, password=password)

        return usuario

    def _registrar_tentativa_falha(self, identificador: str) -> int:
        """Incrementa o contador de falhas, que expira junto com o bloqueio"""
        chave = self._chave(identificador)
        if cache.add(chave, 1, self.bloqueio_segundos):
            return 1
        try:
            return cache.incr(chave)
        except ValueError:
            # Chave expirou entre o add e o incr
            cache.set(chave, 1, self.bloqueio_segundos)
            return 1

    def _resetar_tentativas_login(self, identificador: str) -> None:
        cache.delete(self._chave(identificador))


# Instância global do serviço
auth_service = AuthenticationService()
