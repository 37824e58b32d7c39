# apps/relatorios/utils.py

from datetime import timedelta
from decimal import Decimal
from typing import Dict, Iterable, List, Optional

from django.db.models import Count
from django.db.models.functions import TruncDate
from django.utils import timezone

from apps.clientes.models import Cliente
from apps.core.utils import para_decimal
from apps.crm.models import Lead
from apps.tarefas.models import Tarefa


def calcular_mrr(clientes: Optional[Iterable[Cliente]] = None) -> Decimal:
    """
    Receita recorrente mensal
    Soma o valor mensal dos clientes ativos; valor ausente conta como zero
    """
    if clientes is None:
        clientes = Cliente.objects.all()

    return sum(
        (para_decimal(cliente.valor_mensal) for cliente in clientes if cliente.esta_ativo),
        Decimal('0')
    )


def contar_clientes_ativos(clientes: Optional[Iterable[Cliente]] = None) -> int:
    if clientes is None:
        clientes = Cliente.objects.all()
    return sum(1 for cliente in clientes if cliente.esta_ativo)


def funil_leads(leads: Optional[Iterable[Lead]] = None) -> List[Dict]:
    """
    Quantidade de leads por etapa, na ordem do pipeline
    Etapas sem leads aparecem com zero
    """
    if leads is None:
        leads = Lead.objects.only('status')

    totais = {valor: 0 for valor in Lead.status_validos()}
    for lead in leads:
        if lead.status in totais:
            totais[lead.status] += 1

    return [
        {'status': valor, 'label': label, 'total': totais[valor]}
        for valor, label in Lead.STATUS_CHOICES
    ]


def taxa_conversao(leads: Optional[Iterable[Lead]] = None) -> float:
    """
    Percentual de leads ganhos entre os fechados
    ganhos / (ganhos + perdidos) * 100; zero quando nenhum lead foi fechado
    """
    funil = {etapa['status']: etapa['total'] for etapa in funil_leads(leads)}
    ganhos = funil[Lead.STATUS_GANHO]
    fechados = ganhos + funil[Lead.STATUS_PERDIDO]

    if fechados == 0:
        return 0.0
    return round(ganhos / fechados * 100, 1)


def tarefas_por_prioridade(apenas_pendentes: bool = True) -> List[Dict]:
    """Distribuição de tarefas por prioridade (sem prioridade incluída)"""
    qs = Tarefa.objects.order_by()
    if apenas_pendentes:
        qs = qs.filter(concluida=False)

    totais = {
        linha['prioridade']: linha['total']
        for linha in qs.values('prioridade').annotate(total=Count('id'))
    }

    distribuicao = [
        {'prioridade': valor, 'label': label, 'total': totais.get(valor, 0)}
        for valor, label in Tarefa.PRIORIDADE_CHOICES
    ]
    distribuicao.append({'prioridade': '', 'label': 'Sem prioridade', 'total': totais.get('', 0)})
    return distribuicao


def leads_por_dia(dias: int = 30) -> List[Dict]:
    """
    Leads recebidos por dia nos últimos N dias (hoje incluso)
    Dias sem leads aparecem com zero
    """
    hoje = timezone.localdate()
    inicio = hoje - timedelta(days=dias - 1)

    totais = {
        linha['dia']: linha['total']
        for linha in Lead.objects.order_by()
        .filter(criado_em__date__gte=inicio)
        .annotate(dia=TruncDate('criado_em'))
        .values('dia')
        .annotate(total=Count('id'))
    }

    dados = []
    for indice in range(dias):
        dia = inicio + timedelta(days=indice)
        dados.append({
            'data': dia.isoformat(),
            'label': dia.strftime('%d/%m'),
            'total': totais.get(dia, 0),
        })
    return dados


def resumo_metricas() -> Dict:
    """Pacote completo usado pelo dashboard, pela API e pelo PDF"""
    clientes = list(Cliente.objects.all())
    leads = list(Lead.objects.only('status'))

    return {
        'mrr': calcular_mrr(clientes),
        'clientes_ativos': contar_clientes_ativos(clientes),
        'total_clientes': len(clientes),
        'total_leads': len(leads),
        'funil': funil_leads(leads),
        'taxa_conversao': taxa_conversao(leads),
        'tarefas_prioridade': tarefas_por_prioridade(),
        'tarefas_pendentes': Tarefa.objects.filter(concluida=False).count(),
        'tarefas_concluidas': Tarefa.objects.filter(concluida=True).count(),
    }
