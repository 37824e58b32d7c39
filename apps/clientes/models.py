# apps/clientes/models.py

from django.core.validators import MinValueValidator
from django.db import models


class Cliente(models.Model):
    """
    Cliente da carteira

    O valor mensal entra no MRR apenas enquanto o status for "active".
    """

    STATUS_ATIVO = 'active'
    STATUS_CANCELADO = 'churned'
    STATUS_PAUSADO = 'paused'

    STATUS_CHOICES = [
        (STATUS_ATIVO, 'Ativo'),
        (STATUS_CANCELADO, 'Churned'),
        (STATUS_PAUSADO, 'Pausado'),
    ]

    nome = models.CharField(max_length=100)
    empresa = models.CharField(max_length=100)
    logo_url = models.URLField(max_length=500, blank=True)
    valor_mensal = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(0)]
    )
    status = models.CharField(
        max_length=20,
        choices=STATUS_CHOICES,
        default=STATUS_ATIVO,
        db_index=True
    )
    lead = models.OneToOneField(
        'crm.Lead',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='cliente'
    )
    criado_em = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'cliente'
        ordering = ['-criado_em']

    def __str__(self):
        return f"{self.nome} - {self.empresa}"

    @property
    def status_efetivo(self):
        """Registros sem status contam como ativos"""
        return self.status or self.STATUS_ATIVO

    @property
    def esta_ativo(self):
        return self.status_efetivo == self.STATUS_ATIVO
