"""
Tests for Pevetech Labs: public showcase and project management.
"""

import pytest
from django.contrib.messages import get_messages
from django.urls import reverse

from apps.labs.forms import ProjetoLabForm, normalizar_slug, separar_stack
from apps.labs.models import ProjetoLab


def dados_projeto(**kwargs):
    dados = {
        'titulo': 'AI Pitch Generator',
        'slug': 'AI Pitch Generator',
        'url_externa': 'https://pitch.pevetech.app',
        'descricao': 'Gera pitches de venda',
        'categoria': 'IA',
        'status': 'Beta',
        'icone': 'bot',
        'stack_texto': 'Django, HTMX, , OpenAI',
    }
    dados.update(kwargs)
    return dados


@pytest.fixture
def criar_projeto_db(db):
    def _criar(**kwargs):
        dados = {
            'titulo': 'Agenda Inteligente',
            'slug': 'agenda-inteligente',
            'url_externa': 'https://agenda.pevetech.app',
            'stack': ['Django', 'Redis'],
        }
        dados.update(kwargs)
        return ProjetoLab.objects.create(**dados)

    return _criar


def mensagens(response):
    return [str(m) for m in get_messages(response.wsgi_request)]


class TestHelpers:
    """Tests for slug and stack parsing."""

    def test_slug_lowercases_and_joins_words(self):
        assert normalizar_slug('AI  Pitch Generator') == 'ai-pitch-generator'

    def test_stack_drops_blank_items(self):
        assert separar_stack(' Django ,HTMX,, ') == ['Django', 'HTMX']

    def test_empty_stack(self):
        assert separar_stack('') == []


@pytest.mark.django_db
class TestProjetoLabForm:
    """Tests for ProjetoLabForm."""

    def test_saves_normalized_slug_and_stack(self):
        form = ProjetoLabForm(data=dados_projeto())

        assert form.is_valid(), form.errors
        projeto = form.save()

        assert projeto.slug == 'ai-pitch-generator'
        assert projeto.stack == ['Django', 'HTMX', 'OpenAI']
        assert projeto.ativo is True

    def test_duplicate_slug(self, criar_projeto_db):
        """Should reject a slug already in use after normalization."""
        criar_projeto_db(slug='ai-pitch-generator')

        form = ProjetoLabForm(data=dados_projeto())

        assert not form.is_valid()
        assert form.errors['slug'] == ['Erro ao cadastrar. Verifique se o Slug já existe.']

    @pytest.mark.parametrize('digitado, esperado', [
        ('Automação Fiscal', 'automação-fiscal'),
        ('Meu Projeto.v2', 'meu-projeto.v2'),
    ])
    def test_accepts_accents_and_dots(self, digitado, esperado):
        """Should keep any character besides whitespace in the slug."""
        form = ProjetoLabForm(data=dados_projeto(slug=digitado))

        assert form.is_valid(), form.errors
        assert form.save().slug == esperado

    def test_accented_slug_opens_in_showcase(self, client, criar_projeto_db):
        criar_projeto_db(titulo='Automação Fiscal', slug='automação-fiscal')

        response = client.get(reverse('labs:visualizar', args=['automação-fiscal']))

        assert response.status_code == 200
        assert 'Automação Fiscal' in response.content.decode()

    def test_requires_external_url(self):
        form = ProjetoLabForm(data=dados_projeto(url_externa=''))

        assert not form.is_valid()
        assert 'url_externa' in form.errors


@pytest.mark.django_db
class TestVitrine:
    """Tests for the public showcase."""

    def test_lists_only_published(self, client, criar_projeto_db):
        criar_projeto_db()
        criar_projeto_db(titulo='Projeto Oculto', slug='oculto', ativo=False)

        response = client.get(reverse('labs:vitrine'))
        html = response.content.decode()

        assert 'Agenda Inteligente' in html
        assert 'Projeto Oculto' not in html

    def test_opens_project_in_iframe(self, client, criar_projeto_db):
        criar_projeto_db()

        response = client.get(reverse('labs:visualizar', args=['agenda-inteligente']))

        assert response.status_code == 200
        assert '<iframe src="https://agenda.pevetech.app"' in response.content.decode()

    def test_unknown_slug_shows_not_found(self, client, db):
        response = client.get(reverse('labs:visualizar', args=['nao-existe']))

        assert response.status_code == 404
        assert 'Projeto não encontrado' in response.content.decode()
        assert reverse('labs:vitrine') in response.content.decode()

    def test_hidden_project_shows_not_found(self, client, criar_projeto_db):
        criar_projeto_db(ativo=False)

        response = client.get(reverse('labs:visualizar', args=['agenda-inteligente']))

        assert response.status_code == 404


@pytest.mark.django_db
class TestGestaoLabs:
    """Tests for the back-office management of projects."""

    def test_staff_is_denied(self, client_funcionario):
        response = client_funcionario.get(reverse('labs_admin:lista'))

        assert response.url == reverse('core:painel')

    def test_create(self, client_gerente):
        response = client_gerente.post(reverse('labs_admin:criar'), dados_projeto())

        assert response.url == reverse('labs_admin:lista')
        assert ProjetoLab.objects.get(slug='ai-pitch-generator').ativo is True
        assert 'Experimento criado com sucesso!' in mensagens(response)

    def test_create_invalid_keeps_form_open(self, client_gerente, criar_projeto_db):
        criar_projeto_db(slug='ai-pitch-generator')

        response = client_gerente.post(reverse('labs_admin:criar'), dados_projeto())

        assert response.status_code == 400
        assert response.context['form_aberto'] is True
        assert ProjetoLab.objects.count() == 1

    def test_toggle_hides_and_publishes(self, client_gerente, criar_projeto_db):
        """Should flip visibility and tell which way it went."""
        projeto = criar_projeto_db()
        url = reverse('labs_admin:alternar', args=[projeto.id])

        ocultou = client_gerente.post(url)
        projeto.refresh_from_db()
        assert projeto.ativo is False
        assert 'Projeto ocultado da vitrine.' in mensagens(ocultou)

        publicou = client_gerente.post(url)
        projeto.refresh_from_db()
        assert projeto.ativo is True
        assert 'Projeto publicado na vitrine!' in mensagens(publicou)

    def test_delete(self, client_gerente, criar_projeto_db):
        projeto = criar_projeto_db()

        client_gerente.post(reverse('labs_admin:excluir', args=[projeto.id]))

        assert not ProjetoLab.objects.exists()

    def test_delete_requires_post(self, client_gerente, criar_projeto_db):
        projeto = criar_projeto_db()

        response = client_gerente.get(reverse('labs_admin:excluir', args=[projeto.id]))

        assert response.status_code == 405
        assert ProjetoLab.objects.exists()
