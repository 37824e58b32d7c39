# apps/relatorios/__init__.py

"""
Relatórios - Métricas derivadas do back-office

Funcionalidades:
- MRR, funil de leads e taxa de conversão
- Dados JSON para os gráficos do dashboard
- Exportação CSV (leads), Excel (clientes) e PDF (resumo)
"""
