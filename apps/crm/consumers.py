# apps/crm/consumers.py

import json
import logging

from channels.db import database_sync_to_async
from channels.generic.websocket import AsyncWebsocketConsumer
from django.conf import settings
from django.db.models import Count
from django.utils import timezone

from .models import Lead

logger = logging.getLogger(__name__)


class CrmConsumer(AsyncWebsocketConsumer):
    """
    Consumer WebSocket do Kanban de leads

    Funcionalidades:
    - Notificações de movimentação de cards
    - Aviso de novos leads vindos do site
    - Indicação de usuários online
    - Sincronização das contagens por coluna
    """

    async def connect(self):
        self.grupo = settings.PEVETECH_CRM_GRUPO
        self.user = self.scope.get('user')

        if self.user is None or not self.user.is_authenticated:
            logger.warning("Conexão WebSocket do CRM rejeitada - usuário não autenticado")
            await self.close()
            return

        await self.channel_layer.group_add(self.grupo, self.channel_name)
        await self.accept()

        await self.channel_layer.group_send(
            self.grupo,
            {
                'type': 'user_joined',
                'message': {
                    'usuario': self.user.nome_exibicao,
                    'user_id': self.user.id,
                    'timestamp': self.get_timestamp()
                }
            }
        )

        logger.info("WebSocket do CRM conectado - %s", self.user.username)

    async def disconnect(self, close_code):
        # connect() recusado não chega a entrar no grupo
        if self.user is None or not self.user.is_authenticated:
            return

        await self.channel_layer.group_send(
            self.grupo,
            {
                'type': 'user_left',
                'message': {
                    'usuario': self.user.nome_exibicao,
                    'user_id': self.user.id,
                    'timestamp': self.get_timestamp()
                }
            }
        )
        await self.channel_layer.group_discard(self.grupo, self.channel_name)

        logger.info("WebSocket do CRM desconectado - %s (código %s)", self.user.username, close_code)

    async def receive(self, text_data=None, bytes_data=None):
        try:
            data = json.loads(text_data or '')
        except json.JSONDecodeError:
            logger.error("JSON inválido recebido via WebSocket de %s", self.user.username)
            return

        if not isinstance(data, dict):
            return

        tipo = data.get('type')

        if tipo == 'ping':
            await self.send(text_data=json.dumps({
                'type': 'pong',
                'timestamp': self.get_timestamp()
            }))

        elif tipo == 'sync_pipeline':
            contagens = await self.get_pipeline_state()
            await self.send(text_data=json.dumps({
                'type': 'pipeline_sync',
                'colunas': contagens,
                'timestamp': self.get_timestamp()
            }))

    # === Handlers dos eventos do grupo ===

    async def lead_moved(self, event):
        await self.send(text_data=json.dumps({
            'type': 'lead_moved',
            'message': event['message']
        }))

    async def lead_created(self, event):
        await self.send(text_data=json.dumps({
            'type': 'lead_created',
            'message': event['message']
        }))

    async def user_joined(self, event):
        message = event['message']
        # Não enviar para o próprio usuário
        if message['user_id'] != self.user.id:
            await self.send(text_data=json.dumps({
                'type': 'user_joined',
                'message': message
            }))

    async def user_left(self, event):
        message = event['message']
        if message['user_id'] != self.user.id:
            await self.send(text_data=json.dumps({
                'type': 'user_left',
                'message': message
            }))

    # === Métodos auxiliares ===

    @database_sync_to_async
    def get_pipeline_state(self):
        """Quantidade de leads por status, na ordem das colunas"""
        totais = {
            linha['status']: linha['total']
            for linha in Lead.objects.order_by().values('status').annotate(total=Count('id'))
        }
        return [
            {'status': valor, 'label': label, 'total': totais.get(valor, 0)}
            for valor, label in Lead.STATUS_CHOICES
        ]

    def get_timestamp(self):
        return timezone.now().isoformat()
