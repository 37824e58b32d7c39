"""
Tests for the public site: landing page, contact form and diagnostic.
"""

import pytest
from django.contrib.messages import get_messages
from django.db import DatabaseError
from django.urls import reverse

from apps.crm.models import Lead
from apps.labs.models import ProjetoLab

HTMX = {'HX-Request': 'true'}


def contato(**kwargs):
    dados = {
        'name': '  Beatriz Lima ',
        'email': 'beatriz@exemplo.com',
        'company': '',
        'message': 'Quero automatizar meu atendimento',
    }
    dados.update(kwargs)
    return dados


def diagnostico(**kwargs):
    dados = {
        'name': 'Rafael Costa',
        'email': 'rafael@exemplo.com',
        'whatsapp': '(11) 98888-7777',
        'company': 'Costa Transportes',
        'challenge': 'Planilhas de rota feitas à mão',
    }
    dados.update(kwargs)
    return dados


def mensagens(response):
    return [str(m) for m in get_messages(response.wsgi_request)]


@pytest.mark.django_db
class TestLandingPage:
    """Tests for the landing page."""

    def test_renders_with_contact_form(self, client):
        response = client.get(reverse('institucional:index'))

        assert response.status_code == 200
        assert 'id="form-contato"' in response.content.decode()

    def test_shows_at_most_three_labs_projects(self, client):
        for i in range(4):
            ProjetoLab.objects.create(titulo=f'Projeto {i}', slug=f'projeto-{i}', url_externa='https://x.app')

        response = client.get(reverse('institucional:index'))

        assert len(response.context['projetos_labs']) == 3


@pytest.mark.django_db
class TestContato:
    """Tests for the contact form."""

    def test_creates_new_lead_and_redirects(self, client):
        """Should register a stripped lead in the first column."""
        response = client.post(reverse('institucional:contato'), contato())

        lead = Lead.objects.get()
        assert response.url == reverse('institucional:index') + '#contato'
        assert lead.nome == 'Beatriz Lima'
        assert lead.empresa is None
        assert lead.status == Lead.STATUS_NOVO
        assert lead.origem == Lead.ORIGEM_CONTATO
        assert 'Mensagem enviada! Entraremos em contato em breve.' in mensagens(response)

    @pytest.mark.parametrize('campo, erro', [
        ('name', 'Nome é obrigatório'),
        ('email', 'Email inválido'),
        ('message', 'Mensagem é obrigatória'),
    ])
    def test_required_fields(self, client, campo, erro):
        response = client.post(reverse('institucional:contato'), contato(**{campo: '   '}))

        assert not Lead.objects.exists()
        assert erro in mensagens(response)

    def test_invalid_email(self, client):
        response = client.post(reverse('institucional:contato'), contato(email='nao-e-email'))

        assert 'Email inválido' in mensagens(response)

    def test_htmx_returns_clean_form(self, client):
        response = client.post(reverse('institucional:contato'), contato(), headers=HTMX)
        html = response.content.decode()

        assert response.status_code == 200
        assert 'Mensagem enviada!' in html
        assert 'Beatriz' not in html

    def test_htmx_error_keeps_typed_values(self, client):
        """Should answer 200 so HTMX swaps the form with the error."""
        response = client.post(reverse('institucional:contato'), contato(name=''), headers=HTMX)
        html = response.content.decode()

        assert response.status_code == 200
        assert 'Nome é obrigatório' in html
        assert 'beatriz@exemplo.com' in html

    def test_database_error(self, client, monkeypatch):
        def falhar(*args, **kwargs):
            raise DatabaseError('banco fora do ar')

        monkeypatch.setattr('apps.institucional.views.criar_lead', falhar)

        response = client.post(reverse('institucional:contato'), contato())

        assert 'Erro ao enviar. Tente novamente mais tarde.' in mensagens(response)

    def test_get_not_allowed(self, client):
        response = client.get(reverse('institucional:contato'))

        assert response.status_code == 405


@pytest.mark.django_db
class TestDiagnostico:
    """Tests for the operational diagnostic page."""

    def test_form_page(self, client):
        response = client.get(reverse('institucional:diagnostico'))

        assert response.status_code == 200
        assert response.context['fase'] == 'formulario'

    def test_valid_submission_shows_report(self, client):
        """Should register the lead and render the terminal steps and report."""
        response = client.post(reverse('institucional:diagnostico'), diagnostico(), headers=HTMX)
        html = response.content.decode()

        lead = Lead.objects.get()
        assert lead.origem == Lead.ORIGEM_DIAGNOSTICO
        assert lead.whatsapp == '(11) 98888-7777'
        assert lead.mensagem == 'Planilhas de rota feitas à mão'
        assert '&gt; Reading inputs...' in html
        assert '<h2>Diagnóstico Operacional</h2>' in html
        assert 'Rafael Costa' in html

    def test_full_page_result_without_htmx(self, client):
        response = client.post(reverse('institucional:diagnostico'), diagnostico())

        assert response.status_code == 200
        assert response.context['fase'] == 'resultado'
        assert len(response.context['passos']) == 6

    @pytest.mark.parametrize('campo, erro', [
        ('whatsapp', 'WhatsApp é obrigatório'),
        ('company', 'Empresa é obrigatória'),
        ('challenge', 'Descreva seu desafio'),
    ])
    def test_required_fields(self, client, campo, erro):
        response = client.post(reverse('institucional:diagnostico'), diagnostico(**{campo: ''}))

        assert response.status_code == 400
        assert erro in response.content.decode()
        assert not Lead.objects.exists()

    def test_htmx_error_returns_form(self, client):
        response = client.post(
            reverse('institucional:diagnostico'), diagnostico(email='x'), headers=HTMX
        )

        assert response.status_code == 200
        assert 'Email inválido' in response.content.decode()
        assert 'Gerar diagnóstico' in response.content.decode()
