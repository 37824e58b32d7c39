# apps/crm/__init__.py

"""
CRM - Pipeline de leads em Kanban

Funcionalidades:
- Quadro com as seis etapas do funil
- Movimentação por drag-and-drop via AJAX
- Histórico de movimentações
- Atualizações em tempo real via WebSocket
"""
