# apps/crm/signals.py

from django.db import transaction
from django.db.models.signals import post_save
from django.dispatch import receiver

from .models import Lead
from .services import notificar_pipeline, serializar_lead


@receiver(post_save, sender=Lead)
def anunciar_novo_lead(sender, instance, created, **kwargs):
    """
    Avisa o Kanban aberto quando entra um lead novo
    (formulários públicos, admin ou seed)
    """
    if created:
        mensagem = serializar_lead(instance)
        transaction.on_commit(lambda: notificar_pipeline('lead_created', mensagem))
