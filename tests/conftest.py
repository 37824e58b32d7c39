"""
Fixtures compartilhadas dos testes.

Banco SQLite em memória (config.settings.test), cache local e
channel layer em memória.
"""

from decimal import Decimal

import pytest
from django.core.cache import cache

from apps.clientes.models import Cliente
from apps.core.models import Usuario
from apps.crm.models import Lead
from apps.tarefas.models import Tarefa


# =============================================================================
# Infra
# =============================================================================


@pytest.fixture(autouse=True)
def limpar_cache():
    """Contadores de login e health check não vazam entre testes."""
    cache.clear()
    yield
    cache.clear()


# =============================================================================
# Usuários
# =============================================================================


@pytest.fixture
def funcionario(db):
    return Usuario.objects.create_user(
        username='joana',
        email='joana@pevetech.com.br',
        password='senha-forte-123',
        first_name='Joana',
        tipo=Usuario.TIPO_FUNCIONARIO,
    )


@pytest.fixture
def gerente(db):
    return Usuario.objects.create_user(
        username='marcos',
        email='marcos@pevetech.com.br',
        password='senha-forte-123',
        first_name='Marcos',
        tipo=Usuario.TIPO_GERENTE,
    )


@pytest.fixture
def client_funcionario(client, funcionario):
    client.force_login(funcionario)
    return client


@pytest.fixture
def client_gerente(client, gerente):
    client.force_login(gerente)
    return client


# =============================================================================
# Dados de domínio
# =============================================================================


@pytest.fixture
def criar_lead_db(db):
    def _criar(**kwargs):
        dados = {
            'nome': 'Ana Souza',
            'email': 'ana@exemplo.com.br',
            'empresa': 'Padaria Exemplo',
            'status': Lead.STATUS_NOVO,
        }
        dados.update(kwargs)
        return Lead.objects.create(**dados)

    return _criar


@pytest.fixture
def lead(criar_lead_db):
    return criar_lead_db()


@pytest.fixture
def criar_cliente_db(db):
    def _criar(**kwargs):
        dados = {
            'nome': 'Marcos Teixeira',
            'empresa': 'Teixeira Contabilidade',
            'valor_mensal': Decimal('1000.00'),
            'status': Cliente.STATUS_ATIVO,
        }
        dados.update(kwargs)
        return Cliente.objects.create(**dados)

    return _criar


@pytest.fixture
def criar_tarefa_db(db):
    def _criar(**kwargs):
        dados = {'titulo': 'Revisar proposta', 'prioridade': Tarefa.PRIORIDADE_MEDIA}
        dados.update(kwargs)
        return Tarefa.objects.create(**dados)

    return _criar
