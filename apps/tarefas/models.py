# apps/tarefas/models.py

from django.db import models


class Tarefa(models.Model):
    """Tarefa interna; prioridade é opcional"""

    PRIORIDADE_BAIXA = 'low'
    PRIORIDADE_MEDIA = 'medium'
    PRIORIDADE_ALTA = 'high'

    PRIORIDADE_CHOICES = [
        (PRIORIDADE_BAIXA, 'Baixa'),
        (PRIORIDADE_MEDIA, 'Média'),
        (PRIORIDADE_ALTA, 'Alta'),
    ]

    titulo = models.CharField(max_length=200)
    descricao = models.TextField(blank=True)
    prioridade = models.CharField(
        max_length=10,
        choices=PRIORIDADE_CHOICES,
        blank=True
    )
    concluida = models.BooleanField(default=False, db_index=True)
    criado_em = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'tarefa'
        ordering = ['-criado_em']

    def __str__(self):
        return self.titulo
