"""
Tests for the CRM pipeline: kanban board, lead moves and conversion to client.
"""

import json
from datetime import timedelta

import pytest
from asgiref.sync import async_to_sync
from channels.layers import get_channel_layer
from django.conf import settings
from django.urls import reverse
from django.utils import timezone

from apps.clientes.models import Cliente
from apps.clientes.services import converter_em_cliente
from apps.core.exceptions import ItemNaoEncontrado, TransicaoInvalida
from apps.crm.models import Lead, MovimentacaoLead
from apps.crm.services import criar_lead, leads_por_coluna, mover_lead


def post_json(client, url, payload):
    return client.post(url, data=json.dumps(payload), content_type='application/json')


# =============================================================================
# Service: mover_lead
# =============================================================================


@pytest.mark.django_db
class TestMoverLead:
    """Tests for mover_lead."""

    def test_moves_and_records_history(self, lead, funcionario):
        """Should update the status and write a history row."""
        resultado = mover_lead(lead.id, Lead.STATUS_REUNIAO, funcionario)

        lead.refresh_from_db()
        assert resultado['alterado'] is True
        assert resultado['status_anterior'] == Lead.STATUS_NOVO
        assert lead.status == Lead.STATUS_REUNIAO

        movimentacao = MovimentacaoLead.objects.get(lead=lead)
        assert movimentacao.status_novo == Lead.STATUS_REUNIAO
        assert movimentacao.usuario == funcionario

    def test_any_status_can_go_to_any_other(self, criar_lead_db):
        """Should allow jumping backwards and skipping stages."""
        lead = criar_lead_db(status=Lead.STATUS_GANHO)

        mover_lead(lead.id, Lead.STATUS_NOVO)

        lead.refresh_from_db()
        assert lead.status == Lead.STATUS_NOVO

    def test_same_status_does_not_write(self, lead):
        """Should skip the update when dropped on its own column."""
        resultado = mover_lead(lead.id, Lead.STATUS_NOVO)

        assert resultado['alterado'] is False
        assert not MovimentacaoLead.objects.exists()

    def test_unknown_status_raises(self, lead):
        with pytest.raises(TransicaoInvalida):
            mover_lead(lead.id, 'won')

    def test_unknown_lead_raises(self, db):
        with pytest.raises(ItemNaoEncontrado):
            mover_lead(999, Lead.STATUS_CONTATADO)

    def test_broadcasts_move_after_commit(self, lead, django_capture_on_commit_callbacks):
        """Should publish lead_moved to the pipeline group."""
        # Arrange
        layer = get_channel_layer()
        async_to_sync(layer.group_add)(settings.PEVETECH_CRM_GRUPO, 'teste-mover')

        try:
            # Act
            with django_capture_on_commit_callbacks(execute=True):
                mover_lead(lead.id, Lead.STATUS_PROPOSTA)

            evento = async_to_sync(layer.receive)('teste-mover')
        finally:
            async_to_sync(layer.group_discard)(settings.PEVETECH_CRM_GRUPO, 'teste-mover')

        # Assert
        assert evento['type'] == 'lead_moved'
        assert evento['message']['id'] == lead.id
        assert evento['message']['status_anterior'] == Lead.STATUS_NOVO
        assert evento['message']['novo_status'] == Lead.STATUS_PROPOSTA


# =============================================================================
# Service: criar_lead
# =============================================================================


@pytest.mark.django_db
class TestCriarLead:
    """Tests for criar_lead."""

    def test_new_lead_starts_as_new(self):
        lead = criar_lead({'nome': 'Bruno', 'email': 'bruno@exemplo.com', 'status': Lead.STATUS_GANHO})

        assert lead.status == Lead.STATUS_NOVO
        assert lead.origem == Lead.ORIGEM_CONTATO

    def test_empty_company_is_null(self):
        lead = criar_lead({'nome': 'Bruno', 'email': 'bruno@exemplo.com', 'empresa': ''})

        assert lead.empresa is None

    def test_broadcasts_lead_created(self, django_capture_on_commit_callbacks):
        """Should announce new leads to the open boards."""
        layer = get_channel_layer()
        async_to_sync(layer.group_add)(settings.PEVETECH_CRM_GRUPO, 'teste-criar')

        try:
            with django_capture_on_commit_callbacks(execute=True):
                lead = criar_lead({'nome': 'Bruno', 'email': 'bruno@exemplo.com'})

            evento = async_to_sync(layer.receive)('teste-criar')
        finally:
            async_to_sync(layer.group_discard)(settings.PEVETECH_CRM_GRUPO, 'teste-criar')

        assert evento['type'] == 'lead_created'
        assert evento['message']['id'] == lead.id
        assert evento['message']['status'] == Lead.STATUS_NOVO


# =============================================================================
# Board
# =============================================================================


@pytest.mark.django_db
class TestKanban:
    """Tests for the kanban view and column grouping."""

    def test_columns_in_pipeline_order_with_counts(self, client_funcionario, criar_lead_db):
        """Should show six columns, each with its own count."""
        criar_lead_db(email='a@exemplo.com')
        criar_lead_db(email='b@exemplo.com')
        criar_lead_db(email='c@exemplo.com', status=Lead.STATUS_PERDIDO)

        response = client_funcionario.get(reverse('crm:kanban'))

        colunas = response.context['colunas']
        assert [c['status'] for c in colunas] == Lead.status_validos()
        assert colunas[0]['total'] == 2
        assert colunas[5]['total'] == 1
        assert response.context['total_leads'] == 3

    def test_newest_first_within_column(self, criar_lead_db):
        antigo = criar_lead_db(email='antigo@exemplo.com')
        novo = criar_lead_db(email='novo@exemplo.com')
        Lead.objects.filter(pk=antigo.pk).update(criado_em=timezone.now() - timedelta(days=1))

        colunas = leads_por_coluna()

        assert colunas[0]['leads'] == [novo, antigo]

    def test_card_without_company(self, client_funcionario, criar_lead_db):
        criar_lead_db(nome='Diego Rocha', empresa=None)

        response = client_funcionario.get(reverse('crm:kanban'))

        assert 'Diego Rocha' in response.content.decode()

    def test_requires_login(self, client):
        response = client.get(reverse('crm:kanban'))

        assert response.status_code == 302


# =============================================================================
# AJAX endpoint
# =============================================================================


@pytest.mark.django_db
class TestMoverLeadAjax:
    """Tests for the drag-and-drop endpoint."""

    def test_success(self, client_funcionario, lead):
        response = post_json(client_funcionario, reverse('crm:mover_lead'), {
            'lead_id': lead.id,
            'novo_status': Lead.STATUS_CONTATADO,
        })

        assert response.status_code == 200
        assert response.json() == {
            'success': True,
            'alterado': True,
            'status_anterior': Lead.STATUS_NOVO,
            'novo_status': Lead.STATUS_CONTATADO,
        }

    def test_same_status(self, client_funcionario, lead):
        response = post_json(client_funcionario, reverse('crm:mover_lead'), {
            'lead_id': lead.id,
            'novo_status': Lead.STATUS_NOVO,
        })

        assert response.json()['success'] is True
        assert response.json()['alterado'] is False

    def test_invalid_status_is_400(self, client_funcionario, lead):
        response = post_json(client_funcionario, reverse('crm:mover_lead'), {
            'lead_id': lead.id,
            'novo_status': 'archived',
        })

        assert response.status_code == 400
        assert response.json()['success'] is False
        lead.refresh_from_db()
        assert lead.status == Lead.STATUS_NOVO

    def test_unknown_lead_is_404(self, client_funcionario):
        response = post_json(client_funcionario, reverse('crm:mover_lead'), {
            'lead_id': 12345,
            'novo_status': Lead.STATUS_CONTATADO,
        })

        assert response.status_code == 404
        assert response.json()['error'] == 'Lead não encontrado'

    def test_missing_params_is_400(self, client_funcionario):
        response = post_json(client_funcionario, reverse('crm:mover_lead'), {'lead_id': 1})

        assert response.status_code == 400

    def test_zero_id_is_unknown_lead(self, client_funcionario):
        """Should answer 404 for id 0 instead of treating it as missing."""
        response = post_json(client_funcionario, reverse('crm:mover_lead'), {
            'lead_id': 0,
            'novo_status': Lead.STATUS_CONTATADO,
        })

        assert response.status_code == 404
        assert response.json()['error'] == 'Lead não encontrado'

    def test_malformed_json_is_400(self, client_funcionario):
        response = client_funcionario.post(
            reverse('crm:mover_lead'), data='{nao e json', content_type='application/json'
        )

        assert response.status_code == 400

    def test_form_encoded_body(self, client_funcionario, lead):
        """Should also accept a regular form POST (HTMX)."""
        response = client_funcionario.post(reverse('crm:mover_lead'), {
            'lead_id': lead.id,
            'novo_status': Lead.STATUS_GANHO,
        })

        assert response.json()['novo_status'] == Lead.STATUS_GANHO

    def test_get_not_allowed(self, client_funcionario):
        response = client_funcionario.get(reverse('crm:mover_lead'))

        assert response.status_code == 405

    def test_history_modal(self, client_funcionario, lead, funcionario):
        mover_lead(lead.id, Lead.STATUS_CONTATADO, funcionario)

        response = client_funcionario.get(reverse('crm:historico_lead', args=[lead.id]))

        assert response.status_code == 200
        assert len(response.context['movimentacoes']) == 1


# =============================================================================
# Conversion to client
# =============================================================================


@pytest.mark.django_db
class TestConverterEmCliente:
    """Tests for converter_em_cliente and its view."""

    def test_only_won_leads(self, lead):
        with pytest.raises(TransicaoInvalida):
            converter_em_cliente(lead)

    def test_creates_active_client(self, criar_lead_db):
        lead = criar_lead_db(status=Lead.STATUS_GANHO)

        cliente, criado = converter_em_cliente(lead)

        assert criado is True
        assert cliente.status == Cliente.STATUS_ATIVO
        assert cliente.empresa == 'Padaria Exemplo'
        assert cliente.lead == lead

    def test_company_falls_back_to_name(self, criar_lead_db):
        lead = criar_lead_db(status=Lead.STATUS_GANHO, empresa=None)

        cliente, _ = converter_em_cliente(lead)

        assert cliente.empresa == lead.nome

    def test_idempotent(self, criar_lead_db):
        lead = criar_lead_db(status=Lead.STATUS_GANHO)

        primeiro, _ = converter_em_cliente(lead)
        segundo, criado = converter_em_cliente(lead)

        assert criado is False
        assert primeiro.pk == segundo.pk
        assert Cliente.objects.count() == 1

    def test_view_requires_manager(self, client_funcionario, criar_lead_db):
        lead = criar_lead_db(status=Lead.STATUS_GANHO)

        response = client_funcionario.post(reverse('clientes:converter_lead', args=[lead.id]))

        assert response.url == reverse('core:painel')
        assert not Cliente.objects.exists()

    def test_view_converts(self, client_gerente, criar_lead_db):
        lead = criar_lead_db(status=Lead.STATUS_GANHO)

        response = client_gerente.post(reverse('clientes:converter_lead', args=[lead.id]))

        cliente = Cliente.objects.get(lead=lead)
        assert response.url == reverse('clientes:editar', args=[cliente.id])

    def test_view_rejects_open_lead(self, client_gerente, lead):
        response = client_gerente.post(reverse('clientes:converter_lead', args=[lead.id]))

        assert response.url == reverse('crm:kanban')
        assert not Cliente.objects.exists()
