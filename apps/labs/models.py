# apps/labs/models.py

from django.db import models


class ProjetoLabQuerySet(models.QuerySet):

    def publicados(self):
        return self.filter(ativo=True)


class ProjetoLab(models.Model):
    """
    Experimento exibido no Pevetech Labs

    Apenas projetos ativos aparecem na vitrine e podem ser abertos
    pelo slug.
    """

    CATEGORIA_PADRAO = 'SaaS Interno'
    STATUS_PADRAO = 'Em Desenvolvimento'

    titulo = models.CharField(max_length=150)
    # Aceita acentos e pontos; só a duplicidade é recusada
    slug = models.CharField(
        max_length=150,
        unique=True,
        error_messages={'unique': 'Erro ao cadastrar. Verifique se o Slug já existe.'}
    )
    descricao = models.TextField(blank=True)
    categoria = models.CharField(max_length=100, default=CATEGORIA_PADRAO)
    status = models.CharField(max_length=100, default=STATUS_PADRAO)
    url_externa = models.URLField(max_length=500)
    icone = models.CharField(max_length=50, blank=True)
    stack = models.JSONField(default=list, blank=True)
    ativo = models.BooleanField(default=True, db_index=True)
    criado_em = models.DateTimeField(auto_now_add=True)

    objects = ProjetoLabQuerySet.as_manager()

    class Meta:
        db_table = 'projeto_lab'
        ordering = ['-criado_em']
        verbose_name = 'Projeto do Labs'
        verbose_name_plural = 'Projetos do Labs'

    def __str__(self):
        return self.titulo
