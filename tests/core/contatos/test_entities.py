"""
Testes das entidades de Contato (Telefone e Endereço).
"""

import pytest

from src.core.contatos.entities import EnderecoEntity, TelefoneEntity
from src.core.shared.exceptions import DomainValidationError


@pytest.fixture
def endereco_valido():
    return dict(
        rua="avenida  paulista",
        numero="1000",
        bairro="bela vista",
        cep="01310-100",
        cidade="são paulo",
        estado="sp",
    )


class TestTelefoneEntity:

    def test_criar_normaliza_digitos(self):
        """Deve manter apenas dígitos em cada parte."""
        telefone = TelefoneEntity.criar(ddi="+55", ddd="(11)", numero="98399-1005")

        assert telefone.ddi == "55"
        assert telefone.ddd == "11"
        assert telefone.numero == "983991005"
        assert telefone.is_celular

    def test_str_formato_internacional(self):
        telefone = TelefoneEntity.criar("55", "11", "33334444")

        assert str(telefone) == "+55 (11) 3333-4444"
        assert telefone.is_fixo

    def test_criar_de_texto(self):
        telefone = TelefoneEntity.criar_de_texto("+55 (11) 98399-1005")

        assert (telefone.ddi, telefone.ddd, telefone.numero) == ("55", "11", "983991005")

    @pytest.mark.parametrize("texto", ["11 98399-1005", "+55 11 983991005", "telefone"])
    def test_criar_de_texto_formato_invalido(self, texto):
        with pytest.raises(DomainValidationError) as exc:
            TelefoneEntity.criar_de_texto(texto)
        assert "formato" in exc.value.errors[0]

    def test_criar_de_texto_vazio(self):
        with pytest.raises(DomainValidationError) as exc:
            TelefoneEntity.criar_de_texto("  ")
        assert exc.value.errors == ["O telefone é obrigatório."]

    def test_todos_os_erros_reportados(self):
        """Erros de DDI, DDD e número vêm juntos."""
        with pytest.raises(DomainValidationError) as exc:
            TelefoneEntity.criar(ddi="", ddd="1", numero="123")

        assert exc.value.errors == [
            "O DDI é obrigatório.",
            "O DDD deve conter 2 dígitos.",
            "O número do telefone deve conter 8 ou 9 dígitos.",
        ]

    def test_atualizar(self):
        telefone = TelefoneEntity.criar("55", "11", "33334444")

        telefone.atualizar("55", "21", "987654321")

        assert telefone.ddd == "21"
        assert telefone.atualizado_em is not None

    def test_atualizar_invalido_nao_altera(self):
        """Atualização rejeitada mantém os valores anteriores."""
        telefone = TelefoneEntity.criar("55", "11", "33334444")

        with pytest.raises(DomainValidationError):
            telefone.atualizar("55", "2", "987654321")

        assert telefone.ddd == "11"
        assert telefone.numero == "33334444"


class TestEnderecoEntity:

    def test_criar_normaliza(self, endereco_valido):
        endereco = EnderecoEntity.criar(**endereco_valido)

        assert endereco.rua == "Avenida Paulista"
        assert endereco.bairro == "Bela Vista"
        assert endereco.cidade == "São Paulo"
        assert endereco.estado == "SP"
        assert endereco.cep == "01310100"
        assert endereco.complemento is None

    def test_str(self, endereco_valido):
        endereco = EnderecoEntity.criar(**endereco_valido, complemento="Sala 12")

        assert str(endereco) == (
            "Avenida Paulista, 1000, Sala 12 - Bela Vista, São Paulo/SP - 01310-100"
        )

    def test_campos_obrigatorios(self):
        with pytest.raises(DomainValidationError) as exc:
            EnderecoEntity.criar(rua="", numero="", bairro="", cep="", cidade="", estado="")

        assert exc.value.errors == [
            "A rua é obrigatória.",
            "O número do endereço é obrigatório.",
            "O bairro é obrigatório.",
            "O CEP é obrigatório.",
            "A cidade é obrigatória.",
            "O estado é obrigatório.",
        ]

    def test_cep_e_uf_invalidos(self, endereco_valido):
        endereco_valido.update(cep="0131", estado="XX")

        with pytest.raises(DomainValidationError) as exc:
            EnderecoEntity.criar(**endereco_valido)

        assert "O CEP informado é inválido." in exc.value.errors
        assert "O estado (UF) informado é inválido." in exc.value.errors

    def test_tamanho_maximo(self, endereco_valido):
        endereco_valido["rua"] = "r" * 201

        with pytest.raises(DomainValidationError) as exc:
            EnderecoEntity.criar(**endereco_valido)

        assert exc.value.errors == ["A rua deve conter no máximo 200 caracteres."]

    def test_atualizar_invalido_nao_altera(self, endereco_valido):
        endereco = EnderecoEntity.criar(**endereco_valido)

        with pytest.raises(DomainValidationError):
            endereco.atualizar(**{**endereco_valido, "cidade": ""})

        assert endereco.cidade == "São Paulo"
