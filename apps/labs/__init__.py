# apps/labs/__init__.py

"""
Pevetech Labs - Vitrine pública de experimentos (MVPs, automações)

Os projetos são cadastrados pela gerência e exibidos em iframe.
"""
