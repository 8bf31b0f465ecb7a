"""
Testes para entidades do domínio de Organizações.
"""

import pytest

from src.core.contatos.entities import TelefoneEntity
from src.core.organizacoes.entities import EstadoOrganizacao, OrganizacaoEntity
from src.core.shared.exceptions import (
    DomainValidationError,
    EntityNotFoundError,
    InvalidArgumentError,
)


@pytest.fixture
def organizacao():
    return OrganizacaoEntity.criar(
        nome_fantasia="clínica  saúde total",
        razao_social="saúde total serviços médicos ltda",
        cnpj="11.222.333/0001-81",
    )


class TestCriarOrganizacao:

    def test_criar_normaliza(self, organizacao):
        """Nomes em Title Case e CNPJ somente com dígitos."""
        assert organizacao.nome_fantasia == "Clínica Saúde Total"
        assert organizacao.razao_social == "Saúde Total Serviços Médicos Ltda"
        assert organizacao.cnpj == "11222333000181"
        assert organizacao.cnpj_formatado == "11.222.333/0001-81"
        assert organizacao.estado == EstadoOrganizacao.ATIVA

    def test_todos_os_erros(self):
        with pytest.raises(DomainValidationError) as exc:
            OrganizacaoEntity.criar(nome_fantasia="", razao_social="", cnpj="11.222.333/0001-82")

        assert exc.value.errors == [
            "O nome fantasia é obrigatório.",
            "A razão social é obrigatória.",
            "O CNPJ informado é inválido.",
        ]

    def test_cnpj_de_digitos_repetidos(self):
        """CNPJ com um só dígito repetido é rejeitado mesmo bem formatado."""
        with pytest.raises(DomainValidationError) as exc:
            OrganizacaoEntity.criar(
                nome_fantasia="Clínica Vida", razao_social="Vida Ltda", cnpj="11.111.111/1111-11"
            )

        assert exc.value.errors == ["O CNPJ informado é inválido."]

    def test_cnpj_obrigatorio(self):
        with pytest.raises(DomainValidationError) as exc:
            OrganizacaoEntity.criar(nome_fantasia="A", razao_social="B", cnpj="")

        assert exc.value.errors == ["O CNPJ é obrigatório."]

    def test_tamanho_maximo(self):
        with pytest.raises(DomainValidationError) as exc:
            OrganizacaoEntity.criar(
                nome_fantasia="a" * 151, razao_social="B", cnpj="11222333000181"
            )

        assert exc.value.errors == ["O nome fantasia deve conter no máximo 150 caracteres."]

    @pytest.mark.parametrize("valor", ["ATIVA", "suspensa", "Inativa"])
    def test_estado_from_string(self, valor):
        assert isinstance(EstadoOrganizacao.from_string(valor), EstadoOrganizacao)


class TestAtualizarOrganizacao:

    def test_atualizar(self, organizacao):
        organizacao.atualizar(
            nome_fantasia="Clínica Nova",
            razao_social="Nova Ltda",
            cnpj="11.444.777/0001-61",
            estado=EstadoOrganizacao.SUSPENSA,
        )

        assert organizacao.nome_fantasia == "Clínica Nova"
        assert organizacao.cnpj == "11444777000161"
        assert organizacao.estado == EstadoOrganizacao.SUSPENSA

    def test_atualizar_invalido_nao_altera(self, organizacao):
        """Atualização rejeitada mantém a instância inalterada."""
        with pytest.raises(DomainValidationError):
            organizacao.atualizar(
                nome_fantasia="Clínica Nova",
                razao_social="",
                cnpj="123",
                estado=EstadoOrganizacao.ATIVA,
            )

        assert organizacao.nome_fantasia == "Clínica Saúde Total"
        assert organizacao.cnpj == "11222333000181"


class TestTelefonesOrganizacao:

    def test_primeiro_telefone_principal(self, organizacao):
        vinculo = organizacao.adicionar_telefone(TelefoneEntity.criar("55", "11", "33334444"))

        assert vinculo.is_principal
        assert vinculo.organizacao_id == organizacao.id
        assert organizacao.telefone_principal is vinculo

    def test_apenas_um_principal(self, organizacao):
        primeiro = organizacao.adicionar_telefone(TelefoneEntity.criar("55", "11", "33334444"))
        segundo = organizacao.adicionar_telefone(
            TelefoneEntity.criar("55", "11", "33335555"), is_principal=True
        )

        assert not primeiro.is_principal
        assert organizacao.telefone_principal is segundo

    def test_remover_principal(self, organizacao):
        primeiro = organizacao.adicionar_telefone(TelefoneEntity.criar("55", "11", "33334444"))
        segundo = organizacao.adicionar_telefone(TelefoneEntity.criar("55", "11", "33335555"))

        organizacao.remover_telefone(primeiro.id)

        assert organizacao.telefones == [segundo]
        assert segundo.is_principal

    def test_definir_principal(self, organizacao):
        organizacao.adicionar_telefone(TelefoneEntity.criar("55", "11", "33334444"))
        segundo = organizacao.adicionar_telefone(TelefoneEntity.criar("55", "11", "33335555"))

        organizacao.definir_telefone_principal(segundo.id)

        assert organizacao.telefone_principal is segundo

    def test_telefone_nulo(self, organizacao):
        with pytest.raises(InvalidArgumentError):
            organizacao.adicionar_telefone(None)

    def test_remover_inexistente(self, organizacao):
        with pytest.raises(EntityNotFoundError):
            organizacao.remover_telefone("nao-existe")


class TestEstadoOrganizacao:

    def test_transicoes(self, organizacao):
        organizacao.suspender()
        assert organizacao.estado == EstadoOrganizacao.SUSPENSA
        assert not organizacao.esta_ativa

        organizacao.desativar()
        assert organizacao.estado == EstadoOrganizacao.INATIVA

        organizacao.ativar()
        assert organizacao.esta_ativa
