"""
Testes para entidades do domínio de Profissionais.

Testa regras de negócio encapsuladas em ProfissionalEntity e nos
validadores compostos por tipo.
"""

from datetime import date, timedelta
from unittest.mock import patch

import pytest

from src.core.contatos.entities import EnderecoEntity, TelefoneEntity
from src.core.organizacoes.entities import OrganizacaoEntity
from src.core.profissionais.entities import (
    EstadoProfissional,
    EstadoVinculo,
    Genero,
    ProfissionalEntity,
    ROTULO_REGISTRO,
    TipoProfissional,
    VALIDADORES_POR_TIPO,
)
from src.core.shared.exceptions import (
    BusinessRuleViolationError,
    DomainValidationError,
    EntityNotFoundError,
    InvalidArgumentError,
)
from src.core.usuarios.entities import EstadoUsuario, UsuarioEntity


@pytest.fixture
def profissional():
    return ProfissionalEntity.criar(
        tipo=TipoProfissional.PSICOLOGO,
        nome="maria  oliveira",
        cpf="529.982.247-25",
        registro_profissional="06/12345",
        rg="12.345.678-9",
        data_nascimento=date(1985, 4, 12),
        genero=Genero.FEMININO,
    )


@pytest.fixture
def organizacao():
    return OrganizacaoEntity.criar("Clínica Vida", "Vida Ltda", "11.444.777/0001-61")


class TestEnums:

    @pytest.mark.parametrize("valor, esperado", [
        ("PSICOLOGO", TipoProfissional.PSICOLOGO),
        ("psicólogo", TipoProfissional.PSICOLOGO),
        ("Nutricionista", TipoProfissional.NUTRICIONISTA),
    ])
    def test_tipo_from_string(self, valor, esperado):
        assert TipoProfissional.from_string(valor) == esperado

    def test_genero_com_espaco(self):
        """Nome com espaço e valor de exibição são aceitos."""
        assert Genero.from_string("nao informado") == Genero.NAO_INFORMADO
        assert Genero.from_string("Não informado") == Genero.NAO_INFORMADO

    def test_invalido(self):
        with pytest.raises(ValueError):
            TipoProfissional.from_string("MEDICO")


class TestCriarProfissional:

    def test_criar_normaliza(self, profissional):
        assert profissional.nome == "Maria Oliveira"
        assert profissional.cpf == "52998224725"
        assert profissional.cpf_formatado == "529.982.247-25"
        assert profissional.rg == "123456789"
        assert profissional.estado == EstadoProfissional.ATIVO
        assert profissional.rotulo_registro == "CRP"

    def test_registro_em_maiusculas(self):
        profissional = ProfissionalEntity.criar(
            tipo=TipoProfissional.NUTRICIONISTA,
            nome="João",
            cpf="111.444.777-35",
            registro_profissional="crn3 12345",
        )

        assert profissional.registro_profissional == "CRN3 12345"
        assert profissional.rotulo_registro == "CRN"

    def test_rg_vazio_vira_none(self):
        profissional = ProfissionalEntity.criar(
            tipo=TipoProfissional.PSICOLOGO,
            nome="João",
            cpf="111.444.777-35",
            registro_profissional="06/54321",
            rg="",
        )

        assert profissional.rg is None

    def test_todos_os_erros(self):
        """Erros pessoais e do registro do tipo vêm juntos e em ordem."""
        with pytest.raises(DomainValidationError) as exc:
            ProfissionalEntity.criar(
                tipo=TipoProfissional.PSICOLOGO,
                nome="",
                cpf="123.456.789-00",
                registro_profissional="",
            )

        assert exc.value.errors == [
            "O nome é obrigatório.",
            "O CPF informado é inválido.",
            "O CRP é obrigatório.",
        ]

    def test_registro_curto_por_tipo(self):
        with pytest.raises(DomainValidationError) as exc:
            ProfissionalEntity.criar(
                tipo=TipoProfissional.NUTRICIONISTA,
                nome="João",
                cpf="111.444.777-35",
                registro_profissional="123",
            )

        assert exc.value.errors == ["O CRN deve conter pelo menos 5 caracteres."]

    def test_data_nascimento_futura(self):
        with pytest.raises(DomainValidationError) as exc:
            ProfissionalEntity.criar(
                tipo=TipoProfissional.PSICOLOGO,
                nome="João",
                cpf="111.444.777-35",
                registro_profissional="06/54321",
                data_nascimento=date.today() + timedelta(days=1),
            )

        assert exc.value.errors == ["A data de nascimento não pode ser futura."]

    def test_data_nascimento_antiga_demais(self):
        with pytest.raises(DomainValidationError) as exc:
            ProfissionalEntity.criar(
                tipo=TipoProfissional.PSICOLOGO,
                nome="João",
                cpf="111.444.777-35",
                registro_profissional="06/54321",
                data_nascimento=date(1800, 1, 1),
            )

        assert exc.value.errors == ["A data de nascimento é inválida."]

    def test_tipo_invalido(self):
        with pytest.raises(InvalidArgumentError):
            ProfissionalEntity.criar(
                tipo="PSICOLOGO",
                nome="João",
                cpf="111.444.777-35",
                registro_profissional="06/54321",
            )

    def test_tipo_sem_validadores_registrados(self):
        """Tipo fora de VALIDADORES_POR_TIPO é rejeitado, nunca aceito sem validar."""
        with patch.dict(VALIDADORES_POR_TIPO, clear=True):
            with pytest.raises(InvalidArgumentError) as exc:
                ProfissionalEntity.criar(
                    tipo=TipoProfissional.NUTRICIONISTA,
                    nome="João",
                    cpf="111.444.777-35",
                    registro_profissional="1",
                )

        assert exc.value.field == "tipo"
        assert "Nutricionista" in exc.value.message

    def test_validadores_derivados_dos_rotulos(self):
        assert set(VALIDADORES_POR_TIPO) == set(ROTULO_REGISTRO) == set(TipoProfissional)

    def test_atualizar_mantem_tipo(self, profissional):
        profissional.atualizar(
            nome="Maria Oliveira Santos",
            cpf="52998224725",
            registro_profissional="06/99999",
        )

        assert profissional.nome == "Maria Oliveira Santos"
        assert profissional.registro_profissional == "06/99999"
        assert profissional.tipo == TipoProfissional.PSICOLOGO
        assert profissional.atualizado_em is not None

    def test_atualizar_invalido_nao_altera(self, profissional):
        with pytest.raises(DomainValidationError):
            profissional.atualizar(nome="", cpf="52998224725", registro_profissional="06/99999")

        assert profissional.nome == "Maria Oliveira"
        assert profissional.registro_profissional == "06/12345"


class TestUsuarioDoProfissional:

    @pytest.fixture
    def usuario(self, politica):
        return UsuarioEntity.criar("Maria", "maria@clinica.com", "Senha@123", politica=politica)

    def test_adicionar_usuario(self, profissional, usuario):
        profissional.adicionar_usuario(usuario)

        assert profissional.usuario is usuario

    def test_segundo_usuario_rejeitado(self, profissional, usuario, politica):
        """No máximo um usuário por profissional."""
        profissional.adicionar_usuario(usuario)
        outro = UsuarioEntity.criar("Outra", "outra@clinica.com", "Senha@123", politica=politica)

        with pytest.raises(BusinessRuleViolationError) as exc:
            profissional.adicionar_usuario(outro)

        assert exc.value.rule == "usuario_unico"
        assert profissional.usuario is usuario

    def test_usuario_mantem_nome_e_estado(self, profissional, usuario):
        usuario.bloquear()

        profissional.adicionar_usuario(usuario)

        assert profissional.usuario.nome == "Maria"
        assert profissional.usuario.estado == EstadoUsuario.BLOQUEADO

    def test_definir_estado_usuario(self, profissional, usuario):
        profissional.adicionar_usuario(usuario)

        profissional.definir_estado_usuario(EstadoUsuario.INATIVO)

        assert usuario.estado == EstadoUsuario.INATIVO

    def test_definir_estado_sem_usuario(self, profissional):
        with pytest.raises(BusinessRuleViolationError):
            profissional.definir_estado_usuario(EstadoUsuario.ATIVO)


class TestContatosDoProfissional:

    def test_telefones_com_um_principal(self, profissional):
        primeiro = profissional.adicionar_telefone(TelefoneEntity.criar("55", "11", "33334444"))
        segundo = profissional.adicionar_telefone(
            TelefoneEntity.criar("55", "11", "983991005"), is_principal=True
        )

        assert not primeiro.is_principal
        assert profissional.telefone_principal is segundo
        assert segundo.profissional_id == profissional.id

    def test_remover_telefone_principal(self, profissional):
        primeiro = profissional.adicionar_telefone(TelefoneEntity.criar("55", "11", "33334444"))
        segundo = profissional.adicionar_telefone(TelefoneEntity.criar("55", "11", "983991005"))

        profissional.remover_telefone(primeiro.id)

        assert profissional.telefone_principal is segundo

    def test_definir_telefone_principal(self, profissional):
        profissional.adicionar_telefone(TelefoneEntity.criar("55", "11", "33334444"))
        segundo = profissional.adicionar_telefone(TelefoneEntity.criar("55", "11", "983991005"))

        profissional.definir_telefone_principal(segundo.id)

        assert profissional.telefone_principal is segundo

    def test_enderecos(self, profissional):
        endereco = EnderecoEntity.criar("Rua A", "10", "Centro", "01310100", "São Paulo", "SP")

        vinculo = profissional.adicionar_endereco(endereco)

        assert profissional.endereco_principal is vinculo

        profissional.remover_endereco(vinculo.id)
        assert profissional.endereco_principal is None

    def test_endereco_nulo(self, profissional):
        with pytest.raises(InvalidArgumentError):
            profissional.adicionar_endereco(None)


class TestOrganizacoesDoProfissional:

    def test_adicionar_organizacao(self, profissional, organizacao):
        vinculo = profissional.adicionar_organizacao(organizacao)

        assert vinculo.organizacao_id == organizacao.id
        assert vinculo.profissional_id == profissional.id
        assert vinculo.estado == EstadoVinculo.ATIVO

    def test_organizacao_duplicada(self, profissional, organizacao):
        profissional.adicionar_organizacao(organizacao)

        with pytest.raises(BusinessRuleViolationError) as exc:
            profissional.adicionar_organizacao(organizacao)

        assert exc.value.rule == "organizacao_unica"

    def test_remover_organizacao(self, profissional, organizacao):
        profissional.adicionar_organizacao(organizacao)

        removido = profissional.remover_organizacao(organizacao.id)

        assert removido.organizacao is organizacao
        assert profissional.organizacoes == []

    def test_remover_organizacao_inexistente(self, profissional):
        with pytest.raises(EntityNotFoundError):
            profissional.remover_organizacao("nao-existe")

    def test_estado_do_vinculo(self, profissional, organizacao):
        vinculo = profissional.adicionar_organizacao(organizacao)

        vinculo.desativar()

        assert not vinculo.esta_ativo


class TestEstadoProfissional:

    def test_desativar_e_ativar(self, profissional):
        profissional.desativar()
        assert not profissional.esta_ativo

        profissional.ativar()
        assert profissional.esta_ativo
