# apps/crm/routing.py

from django.urls import re_path
from . import consumers

# Rotas WebSocket do pipeline comercial
websocket_urlpatterns = [
    re_path(r'ws/crm/$', consumers.CrmConsumer.as_asgi()),
]
