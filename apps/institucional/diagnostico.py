# apps/institucional/diagnostico.py

"""
Conteúdo do diagnóstico simulado

O relatório é fixo: o formulário só registra o lead, a análise
exibida é a mesma para todos.
"""

import markdown

PASSOS_TERMINAL = [
    "> Reading inputs...",
    "> Mapping operational flow...",
    "> Analyzing bottleneck...",
    "> Cross-referencing automation patterns...",
    "> Designing architecture...",
    "> Generating diagnostic report...",
]

RELATORIO_SIMULADO = """## Diagnóstico Operacional

**Gargalo identificado:** Processos manuais com alto custo de tempo e risco de erro humano.

**Arquitetura recomendada:**

1. **Automação de Workflow** — Implementar fluxos automatizados via n8n/Make conectando suas ferramentas atuais, eliminando entrada manual de dados.

2. **Agente de IA** — Implantar um assistente inteligente que processa e categoriza informações automaticamente, reduzindo o tempo de operação em até 70%.

3. **Dashboard em Tempo Real** — Painel de BI conectado ao seu banco de dados para acompanhamento de KPIs sem depender de planilhas.

**Impacto estimado:** Redução de 60-80% no tempo operacional e eliminação de erros manuais.

**Próximo passo:** Agendar uma sessão de 30 min para validar a arquitetura e iniciar a execução."""


def renderizar_relatorio(texto: str = RELATORIO_SIMULADO) -> str:
    return markdown.markdown(texto)
