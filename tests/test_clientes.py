"""
Tests for the client portfolio.
"""

from decimal import Decimal

import pytest
from django.contrib.messages import get_messages
from django.urls import reverse

from apps.clientes.forms import ClienteForm
from apps.clientes.models import Cliente


@pytest.mark.django_db
class TestListaClientes:
    """Tests for the client list and its MRR card."""

    def test_empty_state(self, client_funcionario):
        response = client_funcionario.get(reverse('clientes:lista'))

        assert response.status_code == 200
        assert 'Nenhum cliente cadastrado.' in response.content.decode()
        assert response.context['mrr'] == Decimal('0')

    def test_mrr_counts_only_active(self, client_funcionario, criar_cliente_db):
        """Should ignore paused and churned clients in MRR."""
        # Arrange
        criar_cliente_db(valor_mensal=Decimal('1500.00'))
        criar_cliente_db(nome='Pausado', valor_mensal=Decimal('700.00'), status=Cliente.STATUS_PAUSADO)
        criar_cliente_db(nome='Saiu', valor_mensal=Decimal('300.00'), status=Cliente.STATUS_CANCELADO)

        # Act
        response = client_funcionario.get(reverse('clientes:lista'))

        # Assert
        assert response.context['mrr'] == Decimal('1500.00')
        assert response.context['clientes_ativos'] == 1
        assert 'R$ 1.500,00' in response.content.decode()

    def test_staff_does_not_see_edit_links(self, client_funcionario, criar_cliente_db):
        cliente = criar_cliente_db()

        response = client_funcionario.get(reverse('clientes:lista'))

        assert reverse('clientes:editar', args=[cliente.id]) not in response.content.decode()


@pytest.mark.django_db
class TestFormularioCliente:
    """Tests for creating and editing clients."""

    def test_negative_value_is_rejected(self):
        form = ClienteForm(data={
            'nome': 'Carla',
            'empresa': 'Loja da Carla',
            'valor_mensal': '-10',
            'status': Cliente.STATUS_ATIVO,
        })

        assert not form.is_valid()
        assert 'valor_mensal' in form.errors

    def test_value_is_optional(self):
        form = ClienteForm(data={
            'nome': 'Carla',
            'empresa': 'Loja da Carla',
            'status': Cliente.STATUS_ATIVO,
        })

        assert form.is_valid()

    def test_manager_creates_client(self, client_gerente):
        response = client_gerente.post(reverse('clientes:criar'), {
            'nome': 'Carla',
            'empresa': 'Loja da Carla',
            'valor_mensal': '890.00',
            'status': Cliente.STATUS_ATIVO,
        })

        assert response.url == reverse('clientes:lista')
        assert Cliente.objects.get(nome='Carla').valor_mensal == Decimal('890.00')

    def test_staff_cannot_create(self, client_funcionario):
        response = client_funcionario.post(reverse('clientes:criar'), {
            'nome': 'Carla',
            'empresa': 'Loja da Carla',
            'status': Cliente.STATUS_ATIVO,
        })

        mensagens = [str(m) for m in get_messages(response.wsgi_request)]
        assert response.url == reverse('core:painel')
        assert 'Acesso negado. Apenas gerentes e administradores.' in mensagens
        assert not Cliente.objects.exists()

    def test_manager_pauses_client(self, client_gerente, criar_cliente_db):
        """Should drop the client from MRR once paused."""
        cliente = criar_cliente_db()

        client_gerente.post(reverse('clientes:editar', args=[cliente.id]), {
            'nome': cliente.nome,
            'empresa': cliente.empresa,
            'valor_mensal': '1000.00',
            'status': Cliente.STATUS_PAUSADO,
        })

        cliente.refresh_from_db()
        assert cliente.status == Cliente.STATUS_PAUSADO
        assert not cliente.esta_ativo

    def test_edit_unknown_client_is_404(self, client_gerente):
        response = client_gerente.get(reverse('clientes:editar', args=[999]))

        assert response.status_code == 404
