# apps/relatorios/views.py

import csv
from io import BytesIO

from django.contrib.auth.decorators import login_required
from django.http import HttpResponse, JsonResponse
from django.shortcuts import render
from django.utils import timezone

# ReportLab para PDFs
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

# Excel export
import xlsxwriter

from apps.clientes.models import Cliente
from apps.core.permissions import PevetechPermissions, ajax_requer_permissao, requer_gerente_ou_admin
from apps.core.utils import formatar_moeda_brl, formatar_percentual, para_decimal
from apps.crm.models import Lead
from .utils import leads_por_dia, resumo_metricas

ESTILO_CABECALHO_TABELA = [
    ('BACKGROUND', (0, 0), (-1, 0), colors.HexColor('#0F172A')),
    ('TEXTCOLOR', (0, 0), (-1, 0), colors.whitesmoke),
    ('ALIGN', (0, 0), (-1, -1), 'LEFT'),
    ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
    ('FONTSIZE', (0, 0), (-1, 0), 11),
    ('BOTTOMPADDING', (0, 0), (-1, 0), 10),
    ('GRID', (0, 0), (-1, -1), 0.5, colors.grey),
]


def _nome_arquivo(prefixo, extensao):
    return f'{prefixo}_{timezone.localdate().strftime("%Y%m%d")}.{extensao}'


@login_required
@requer_gerente_ou_admin
def dashboard_view(request):
    """
    Dashboard de relatórios
    Os gráficos buscam os dados em api_metricas
    """
    metricas = resumo_metricas()

    context = {
        'metricas': metricas,
        'mrr_formatado': formatar_moeda_brl(metricas['mrr']),
        'taxa_formatada': formatar_percentual(metricas['taxa_conversao']),
    }
    return render(request, 'relatorios/dashboard.html', context)


@login_required
@ajax_requer_permissao(PevetechPermissions.pode_ver_relatorios)
def api_metricas(request):
    """
    API de métricas para os gráficos do dashboard
    """
    metricas = resumo_metricas()

    try:
        dias = int(request.GET.get('dias', 30))
    except ValueError:
        dias = 30
    dias = min(max(dias, 1), 365)

    return JsonResponse({
        'success': True,
        'funil': metricas['funil'],
        'taxa_conversao': metricas['taxa_conversao'],
        'mrr': str(metricas['mrr']),
        'mrr_formatado': formatar_moeda_brl(metricas['mrr']),
        'clientes_ativos': metricas['clientes_ativos'],
        'tarefas_prioridade': metricas['tarefas_prioridade'],
        'leads_por_dia': leads_por_dia(dias),
        'timestamp': timezone.now().isoformat(),
    })


@login_required
@requer_gerente_ou_admin
def exportar_leads_csv(request):
    """
    Exporta os leads para CSV
    """
    response = HttpResponse(content_type='text/csv; charset=utf-8')
    response['Content-Disposition'] = f'attachment; filename="{_nome_arquivo("leads", "csv")}"'
    response.write('\ufeff')  # BOM para o Excel abrir acentos corretamente

    writer = csv.writer(response)
    writer.writerow(['ID', 'Nome', 'Email', 'Empresa', 'WhatsApp', 'Status', 'Origem', 'Mensagem', 'Criado em'])

    for lead in Lead.objects.order_by('-criado_em'):
        writer.writerow([
            lead.id,
            lead.nome,
            lead.email,
            lead.empresa or '',
            lead.whatsapp,
            lead.get_status_display(),
            lead.get_origem_display(),
            lead.mensagem,
            timezone.localtime(lead.criado_em).strftime('%d/%m/%Y %H:%M'),
        ])

    return response


@login_required
@requer_gerente_ou_admin
def exportar_clientes_excel(request):
    """
    Exporta a carteira de clientes para Excel (XLSX)
    Aba de clientes e aba de resumo com o MRR
    """
    output = BytesIO()
    workbook = xlsxwriter.Workbook(output, {'in_memory': True, 'remove_timezone': True})

    header_format = workbook.add_format({
        'bold': True,
        'font_color': 'white',
        'bg_color': '#0F172A',
        'border': 1
    })
    cell_format = workbook.add_format({'border': 1})
    date_format = workbook.add_format({'num_format': 'dd/mm/yyyy', 'border': 1})
    money_format = workbook.add_format({'num_format': 'R$ #,##0.00', 'border': 1})

    # Aba 1: Clientes
    sheet = workbook.add_worksheet('Clientes')
    cabecalho = ['Nome', 'Empresa', 'Status', 'Valor mensal', 'Cliente desde']
    for col, titulo in enumerate(cabecalho):
        sheet.write(0, col, titulo, header_format)

    clientes = list(Cliente.objects.order_by('-criado_em'))
    for row, cliente in enumerate(clientes, start=1):
        sheet.write(row, 0, cliente.nome, cell_format)
        sheet.write(row, 1, cliente.empresa, cell_format)
        sheet.write(row, 2, dict(Cliente.STATUS_CHOICES).get(cliente.status_efetivo), cell_format)
        sheet.write_number(row, 3, float(para_decimal(cliente.valor_mensal)), money_format)
        sheet.write_datetime(row, 4, timezone.localtime(cliente.criado_em), date_format)

    sheet.set_column('A:B', 28)
    sheet.set_column('C:C', 12)
    sheet.set_column('D:E', 16)

    # Aba 2: Resumo
    metricas = resumo_metricas()
    resumo = workbook.add_worksheet('Resumo')
    resumo.write('A1', 'CARTEIRA DE CLIENTES', header_format)
    resumo.write('A3', 'MRR:', header_format)
    resumo.write_number('B3', float(metricas['mrr']), money_format)
    resumo.write('A4', 'Clientes ativos:', header_format)
    resumo.write_number('B4', metricas['clientes_ativos'], cell_format)
    resumo.write('A5', 'Total de clientes:', header_format)
    resumo.write_number('B5', metricas['total_clientes'], cell_format)
    resumo.set_column('A:B', 22)

    workbook.close()
    output.seek(0)

    response = HttpResponse(
        output.read(),
        content_type='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
    )
    response['Content-Disposition'] = f'attachment; filename="{_nome_arquivo("clientes", "xlsx")}"'
    return response


@login_required
@requer_gerente_ou_admin
def relatorio_resumo_pdf(request):
    """
    Resumo executivo em PDF: receita, funil e tarefas
    """
    metricas = resumo_metricas()

    response = HttpResponse(content_type='application/pdf')
    response['Content-Disposition'] = f'attachment; filename="{_nome_arquivo("resumo_pevetech", "pdf")}"'

    doc = SimpleDocTemplate(response, pagesize=A4)
    story = []

    styles = getSampleStyleSheet()
    title_style = ParagraphStyle(
        'Titulo',
        parent=styles['Heading1'],
        fontSize=20,
        spaceAfter=24,
        textColor=colors.HexColor('#0F172A')
    )
    heading_style = ParagraphStyle(
        'Secao',
        parent=styles['Heading2'],
        fontSize=14,
        spaceAfter=10,
        textColor=colors.HexColor('#0F172A')
    )

    story.append(Paragraph("Resumo Pevetech", title_style))
    story.append(Paragraph(
        f"Gerado em: {timezone.localtime().strftime('%d/%m/%Y %H:%M')}",
        styles['Normal']
    ))
    story.append(Spacer(1, 20))

    # Receita
    story.append(Paragraph("Receita", heading_style))
    receita = Table([
        ['Métrica', 'Valor'],
        ['MRR', formatar_moeda_brl(metricas['mrr'])],
        ['Clientes ativos', str(metricas['clientes_ativos'])],
        ['Total de clientes', str(metricas['total_clientes'])],
    ])
    receita.setStyle(TableStyle(ESTILO_CABECALHO_TABELA))
    story.append(receita)
    story.append(Spacer(1, 20))

    # Funil
    story.append(Paragraph("Funil de leads", heading_style))
    funil_data = [['Etapa', 'Leads']]
    funil_data += [[etapa['label'], str(etapa['total'])] for etapa in metricas['funil']]
    funil_data.append(['Taxa de conversão', formatar_percentual(metricas['taxa_conversao'])])

    funil = Table(funil_data)
    funil.setStyle(TableStyle(ESTILO_CABECALHO_TABELA + [
        ('FONTNAME', (0, -1), (-1, -1), 'Helvetica-Bold'),
    ]))
    story.append(funil)
    story.append(Spacer(1, 20))

    # Tarefas
    story.append(Paragraph("Tarefas pendentes por prioridade", heading_style))
    tarefas_data = [['Prioridade', 'Tarefas']]
    tarefas_data += [[item['label'], str(item['total'])] for item in metricas['tarefas_prioridade']]
    tarefas_data.append(['Concluídas', str(metricas['tarefas_concluidas'])])

    tarefas = Table(tarefas_data)
    tarefas.setStyle(TableStyle(ESTILO_CABECALHO_TABELA))
    story.append(tarefas)

    doc.build(story)
    return response
