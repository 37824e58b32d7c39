# apps/core/__init__.py

"""
Core - Aplicação principal da Pevetech

Contém:
- Usuario customizado com tipos (admin, gerente, funcionário)
- Serviço de autenticação com bloqueio por tentativas
- Sistema de permissões do back-office
- Visão geral do dashboard e health check
- Comando de seed para desenvolvimento
"""
