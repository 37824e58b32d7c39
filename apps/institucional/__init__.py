# apps/institucional/__init__.py

"""
Institucional - Site público da Pevetech

Landing page com formulário de contato e o diagnóstico operacional
simulado. Os dois formulários viram leads no CRM.
"""
