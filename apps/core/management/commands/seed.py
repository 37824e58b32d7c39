# apps/core/management/commands/seed.py

from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.clientes.models import Cliente
from apps.core.models import Usuario
from apps.crm.models import Lead
from apps.labs.models import ProjetoLab
from apps.tarefas.models import Tarefa

LEADS_DEMO = [
    ('Ana Souza', 'ana@padariaexemplo.com.br', 'Padaria Exemplo', Lead.STATUS_NOVO),
    ('Bruno Lima', 'bruno@logfast.com.br', 'LogFast', Lead.STATUS_NOVO),
    ('Carla Mendes', 'carla@clinicavida.com.br', 'Clínica Vida', Lead.STATUS_CONTATADO),
    ('Diego Rocha', 'diego@rochaadv.com.br', None, Lead.STATUS_REUNIAO),
    ('Elisa Prado', 'elisa@pradoimoveis.com.br', 'Prado Imóveis', Lead.STATUS_PROPOSTA),
    ('Fábio Nunes', 'fabio@nunesauto.com.br', 'Nunes Auto', Lead.STATUS_GANHO),
    ('Gabriela Reis', 'gabriela@reisfit.com.br', 'Reis Fit', Lead.STATUS_PERDIDO),
]

CLIENTES_DEMO = [
    ('Marcos Teixeira', 'Teixeira Contabilidade', Decimal('2500.00'), Cliente.STATUS_ATIVO),
    ('Juliana Castro', 'Castro Odontologia', Decimal('1800.00'), Cliente.STATUS_ATIVO),
    ('Paulo Freitas', 'Freitas Transportes', None, Cliente.STATUS_ATIVO),
    ('Renata Alves', 'Alves Moda', Decimal('1200.00'), Cliente.STATUS_PAUSADO),
    ('Sérgio Matos', 'Matos Engenharia', Decimal('3000.00'), Cliente.STATUS_CANCELADO),
]

TAREFAS_DEMO = [
    ('Revisar proposta da Prado Imóveis', Tarefa.PRIORIDADE_ALTA, False),
    ('Atualizar fluxo n8n do cliente Castro', Tarefa.PRIORIDADE_MEDIA, False),
    ('Organizar backlog do Labs', Tarefa.PRIORIDADE_BAIXA, False),
    ('Enviar relatório mensal aos clientes', '', True),
]

PROJETOS_DEMO = [
    {
        'titulo': 'AI Pitch Generator',
        'slug': 'ai-pitch-generator',
        'descricao': 'Gera roteiros de pitch a partir de um briefing curto.',
        'url_externa': 'https://pitch.pevetech.com.br',
        'icone': 'bot',
        'stack': ['Django', 'OpenAI', 'HTMX'],
    },
    {
        'titulo': 'Conciliador Financeiro',
        'slug': 'conciliador-financeiro',
        'descricao': 'Automação que cruza extratos bancários com o ERP.',
        'categoria': 'Automação',
        'status': 'Beta',
        'url_externa': 'https://conciliador.pevetech.com.br',
        'icone': 'database',
        'stack': ['n8n', 'PostgreSQL'],
    },
]


class Command(BaseCommand):
    help = 'Cria dados de demonstração (usuário admin, leads, clientes, tarefas e projetos do Labs)'

    def add_arguments(self, parser):
        parser.add_argument(
            '--limpar',
            action='store_true',
            help='Remove leads, clientes, tarefas e projetos do Labs antes de criar os dados'
        )
        parser.add_argument(
            '--senha',
            default='pevetech123',
            help='Senha do usuário admin de demonstração'
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['limpar']:
            self._limpar()

        self._criar_admin(options['senha'])
        leads = self._criar_leads()
        clientes = self._criar_clientes()
        tarefas = self._criar_tarefas()
        projetos = self._criar_projetos()

        self.stdout.write(
            self.style.SUCCESS(
                '\n✅ Dados de demonstração prontos!\n'
                f'  Leads criados: {leads}\n'
                f'  Clientes criados: {clientes}\n'
                f'  Tarefas criadas: {tarefas}\n'
                f'  Projetos do Labs criados: {projetos}\n'
                '\nLogin: admin / senha informada em --senha\n'
            )
        )

    def _limpar(self):
        self.stdout.write('🧹 Removendo dados existentes...')
        Cliente.objects.all().delete()
        Lead.objects.all().delete()
        Tarefa.objects.all().delete()
        ProjetoLab.objects.all().delete()

    def _criar_admin(self, senha):
        usuario, criado = Usuario.objects.get_or_create(
            username='admin',
            defaults={
                'email': 'admin@pevetech.com.br',
                'first_name': 'Admin',
                'tipo': Usuario.TIPO_ADMIN,
                'is_staff': True,
                'is_superuser': True,
            }
        )
        if criado:
            usuario.set_password(senha)
            usuario.save()
            self.stdout.write('  👤 Usuário admin criado')

    def _criar_leads(self):
        criados = 0
        for nome, email, empresa, status in LEADS_DEMO:
            _, criado = Lead.objects.get_or_create(
                email=email,
                defaults={
                    'nome': nome,
                    'empresa': empresa,
                    'status': status,
                    'origem': Lead.ORIGEM_MANUAL,
                    'mensagem': 'Lead de demonstração',
                }
            )
            criados += criado
        return criados

    def _criar_clientes(self):
        criados = 0
        for nome, empresa, valor, status in CLIENTES_DEMO:
            _, criado = Cliente.objects.get_or_create(
                nome=nome,
                empresa=empresa,
                defaults={'valor_mensal': valor, 'status': status}
            )
            criados += criado
        return criados

    def _criar_tarefas(self):
        criados = 0
        for titulo, prioridade, concluida in TAREFAS_DEMO:
            _, criado = Tarefa.objects.get_or_create(
                titulo=titulo,
                defaults={'prioridade': prioridade, 'concluida': concluida}
            )
            criados += criado
        return criados

    def _criar_projetos(self):
        criados = 0
        for dados in PROJETOS_DEMO:
            dados = dict(dados)
            _, criado = ProjetoLab.objects.get_or_create(slug=dados.pop('slug'), defaults=dados)
            criados += criado
        return criados
