# apps/tarefas/__init__.py

"""
Tarefas - Quadro de tarefas internas da equipe
"""
