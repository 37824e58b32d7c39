# apps/__init__.py

"""
Pevetech - Aplicações Django

Este pacote contém todas as aplicações do sistema:
- core: Usuário, autenticação, permissões e visão geral do dashboard
- crm: Pipeline de leads em Kanban e WebSockets
- clientes: Carteira de clientes e receita recorrente (MRR)
- tarefas: Quadro de tarefas internas
- labs: Vitrine Pevetech Labs e painel de publicação
- institucional: Site público, formulário de contato e diagnóstico
- relatorios: Métricas derivadas e exportações PDF, CSV e Excel
"""

__version__ = '1.0.0'
__author__ = 'Equipe Pevetech'
