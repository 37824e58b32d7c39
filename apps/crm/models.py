# apps/crm/models.py

from django.conf import settings
from django.db import models


class Lead(models.Model):
    """
    Lead do pipeline comercial

    Criado pelos formulários públicos (contato e diagnóstico) ou
    manualmente pelo admin. O status avança pelo Kanban do CRM.
    """

    STATUS_NOVO = 'new'
    STATUS_CONTATADO = 'contacted'
    STATUS_REUNIAO = 'meeting'
    STATUS_PROPOSTA = 'proposal'
    STATUS_GANHO = 'closed_won'
    STATUS_PERDIDO = 'closed_lost'

    # Ordem das colunas do Kanban
    STATUS_CHOICES = [
        (STATUS_NOVO, 'Novo'),
        (STATUS_CONTATADO, 'Contatado'),
        (STATUS_REUNIAO, 'Reunião'),
        (STATUS_PROPOSTA, 'Proposta'),
        (STATUS_GANHO, 'Fechado ✓'),
        (STATUS_PERDIDO, 'Perdido'),
    ]

    ORIGEM_CONTATO = 'contato'
    ORIGEM_DIAGNOSTICO = 'diagnostico'
    ORIGEM_MANUAL = 'manual'

    ORIGEM_CHOICES = [
        (ORIGEM_CONTATO, 'Formulário de contato'),
        (ORIGEM_DIAGNOSTICO, 'Diagnóstico com IA'),
        (ORIGEM_MANUAL, 'Cadastro manual'),
    ]

    nome = models.CharField(max_length=100)
    email = models.EmailField(max_length=255)
    empresa = models.CharField(max_length=100, null=True, blank=True)
    whatsapp = models.CharField(max_length=20, blank=True)
    mensagem = models.TextField(blank=True)
    status = models.CharField(
        max_length=20,
        choices=STATUS_CHOICES,
        default=STATUS_NOVO,
        db_index=True
    )
    origem = models.CharField(max_length=20, choices=ORIGEM_CHOICES, default=ORIGEM_CONTATO)
    criado_em = models.DateTimeField(auto_now_add=True)
    atualizado_em = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'lead'
        ordering = ['-criado_em']

    def __str__(self):
        if self.empresa:
            return f"{self.nome} ({self.empresa})"
        return self.nome

    @classmethod
    def status_validos(cls):
        return [valor for valor, _ in cls.STATUS_CHOICES]

    @property
    def esta_fechado(self):
        return self.status in (self.STATUS_GANHO, self.STATUS_PERDIDO)


class MovimentacaoLead(models.Model):
    """Histórico de mudanças de status feitas no Kanban"""

    lead = models.ForeignKey(
        Lead,
        on_delete=models.CASCADE,
        related_name='movimentacoes'
    )
    status_anterior = models.CharField(max_length=20, choices=Lead.STATUS_CHOICES)
    status_novo = models.CharField(max_length=20, choices=Lead.STATUS_CHOICES)
    usuario = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='movimentacoes_lead'
    )
    criado_em = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'movimentacao_lead'
        ordering = ['-criado_em']

    def __str__(self):
        return f"{self.lead.nome}: {self.get_status_anterior_display()} → {self.get_status_novo_display()}"
