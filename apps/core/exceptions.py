# apps/core/exceptions.py

"""
Exceções de domínio da Pevetech

Os serviços levantam estas exceções e as views traduzem cada uma
para a resposta HTTP adequada (JSON nas chamadas AJAX, mensagem nas páginas).
"""


class PevetechError(Exception):
    """Erro base dos serviços"""

    status_code = 400
    mensagem_padrao = 'Não foi possível concluir a operação'

    def __init__(self, mensagem=None):
        self.mensagem = mensagem or self.mensagem_padrao
        super().__init__(self.mensagem)


class TransicaoInvalida(PevetechError):
    """Status de destino inexistente ou operação não permitida no estado atual"""

    mensagem_padrao = 'Status inválido'


class ItemNaoEncontrado(PevetechError):
    """Registro referenciado não existe"""

    status_code = 404
    mensagem_padrao = 'Registro não encontrado'
