# apps/clientes/__init__.py

"""
Clientes - Carteira de clientes e receita recorrente (MRR)
"""
