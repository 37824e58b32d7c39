# apps/core/models.py

from django.contrib.auth.models import AbstractUser
from django.db import models


class Usuario(AbstractUser):
    """
    Modelo de usuário customizado do back-office

    O tipo define o que cada membro da equipe pode fazer:
    administradores e gerentes publicam projetos no Labs e editam clientes,
    funcionários operam o CRM e as tarefas.
    """

    TIPO_ADMIN = 'admin'
    TIPO_GERENTE = 'gerente'
    TIPO_FUNCIONARIO = 'funcionario'

    TIPO_CHOICES = [
        (TIPO_ADMIN, 'Administrador'),
        (TIPO_GERENTE, 'Gerente'),
        (TIPO_FUNCIONARIO, 'Funcionário'),
    ]

    # === INFORMAÇÕES PESSOAIS ===
    telefone = models.CharField(max_length=20, blank=True)
    tipo = models.CharField(max_length=20, choices=TIPO_CHOICES, default=TIPO_FUNCIONARIO)

    # === METADADOS ===
    criado_em = models.DateTimeField(auto_now_add=True)
    atualizado_em = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'usuario'
        indexes = [
            models.Index(fields=['tipo'], name='usuario_tipo_idx'),
        ]

    @property
    def nome_exibicao(self):
        return self.get_full_name() or self.username

    def is_gerente_ou_admin(self):
        return self.tipo in (self.TIPO_ADMIN, self.TIPO_GERENTE)

    def __str__(self):
        return f"{self.nome_exibicao} ({self.get_tipo_display()})"
