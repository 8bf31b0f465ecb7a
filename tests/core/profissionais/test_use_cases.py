"""
Testes Unitários para Use Cases do Domínio de Profissionais.

Estratégia de Teste:
- Repositórios em memória para usuários, organizações e profissionais
- FakeUnitOfWork para verificar commit, rollback e eventos
- Auto-cadastro com todos os erros e conflitos reportados juntos
"""

from datetime import date

import pytest

from src.core.organizacoes.entities import OrganizacaoEntity
from src.core.profissionais.dtos import (
    ListarProfissionaisQueryDTO,
    RegistrarProfissionalInputDTO,
)
from src.core.profissionais.entities import (
    EstadoProfissional,
    Genero,
    ProfissionalEntity,
    TipoProfissional,
)
from src.core.profissionais.events import (
    ProfissionalDesativadoEvent,
    ProfissionalRegistradoEvent,
)
from src.core.profissionais.factories import criar_provider_padrao
from src.core.profissionais.use_cases import (
    DesativarProfissionalService,
    ListarProfissionaisService,
    ObterProfissionalService,
    RegistrarProfissionalService,
    resolver_data,
    resolver_genero,
)
from src.core.shared.exceptions import (
    ConflictError,
    DomainValidationError,
    EntityNotFoundError,
    InvalidArgumentError,
)
from src.core.usuarios.entities import UsuarioEntity


@pytest.fixture
def service(profissional_repo, usuario_repo, organizacao_repo, uow, politica):
    return RegistrarProfissionalService(
        profissional_repo,
        usuario_repo,
        organizacao_repo,
        criar_provider_padrao(),
        uow,
        politica,
    )


@pytest.fixture
def input_dto(dados_registro):
    return RegistrarProfissionalInputDTO(**dados_registro)


def _novo_profissional(tipo, nome, cpf, registro):
    return ProfissionalEntity.criar(
        tipo=tipo, nome=nome, cpf=cpf, registro_profissional=registro
    )


class TestResolvedores:

    def test_resolver_data(self):
        assert resolver_data("1985-04-12") == date(1985, 4, 12)
        assert resolver_data(date(1985, 4, 12)) == date(1985, 4, 12)
        assert resolver_data(None) is None
        assert resolver_data("  ") is None

    def test_resolver_data_invalida(self):
        with pytest.raises(InvalidArgumentError) as exc:
            resolver_data("12/04/1985")
        assert exc.value.field == "data_nascimento"

    def test_resolver_genero(self):
        assert resolver_genero(None) == Genero.NAO_INFORMADO
        assert resolver_genero("feminino") == Genero.FEMININO

    def test_resolver_genero_invalido(self):
        with pytest.raises(InvalidArgumentError) as exc:
            resolver_genero("X")
        assert exc.value.field == "genero"


class TestRegistrarProfissionalService:

    def test_registrar_sucesso(self, service, input_dto):
        """Deve criar profissional com usuário, telefone, endereço e organização."""
        output = service.execute(input_dto)

        assert output.tipo == "Psicólogo"
        assert output.nome == "Maria Oliveira"
        assert output.cpf == "529.982.247-25"
        assert output.rotulo_registro == "CRP"
        assert output.genero == "Feminino"
        assert output.data_nascimento == date(1985, 4, 12)
        assert output.estado == "Ativo"

        assert output.usuario.email == "maria@clinica.com"
        assert output.usuario.nome == "Maria Oliveira"
        assert len(output.telefones) == 1 and output.telefones[0].is_principal
        assert output.telefones[0].formatado == "+55 (11) 98399-1005"
        assert len(output.enderecos) == 1 and output.enderecos[0].is_principal
        assert output.enderecos[0].cidade == "São Paulo"
        assert output.enderecos[0].complemento == "Sala 12"
        assert output.organizacoes[0].nome_fantasia == "Clínica Saúde Total"
        assert output.organizacoes[0].estado == "Ativo"

    def test_registrar_persiste_todos_os_agregados(
        self, service, input_dto, profissional_repo, usuario_repo, organizacao_repo, uow
    ):
        output = service.execute(input_dto)

        assert profissional_repo.exists(output.id)
        assert usuario_repo.get_by_email("maria@clinica.com") is not None
        assert organizacao_repo.get_by_cnpj("11222333000181") is not None
        assert uow.committed

    def test_registrar_publica_evento(self, service, input_dto, uow):
        output = service.execute(input_dto)

        events = uow.collect_events()
        assert len(events) == 1
        evento = events[0]
        assert isinstance(evento, ProfissionalRegistradoEvent)
        assert evento.aggregate_id == output.id
        assert evento.tipo == "Psicólogo"
        assert evento.email == "maria@clinica.com"
        assert evento.organizacao_id == output.organizacoes[0].organizacao_id

    def test_usuario_verifica_senha(self, service, input_dto, usuario_repo):
        service.execute(input_dto)

        usuario = usuario_repo.get_by_email("maria@clinica.com")
        assert usuario.verificar_senha("Senha@123")

    def test_registrar_nutricionista(self, service, dados_registro):
        dados_registro.update(tipo_profissional="Nutricionista", registro_profissional="CRN3-12345")

        output = service.execute(RegistrarProfissionalInputDTO(**dados_registro))

        assert output.tipo == "Nutricionista"
        assert output.rotulo_registro == "CRN"

    def test_tipo_invalido(self, service, dados_registro, uow):
        dados_registro["tipo_profissional"] = "MEDICO"

        with pytest.raises(InvalidArgumentError) as exc:
            service.execute(RegistrarProfissionalInputDTO(**dados_registro))

        assert exc.value.field == "tipo_profissional"
        assert uow.rolled_back

    def test_erros_de_todos_os_agregados(self, service, dados_registro, profissional_repo):
        """Erros do profissional, contatos, organização e usuário vêm juntos."""
        dados_registro.update(
            cpf="123",
            telefone="11 98399-1005",
            cep="123",
            cnpj="11.222.333/0001-82",
            email="invalido",
        )

        with pytest.raises(DomainValidationError) as exc:
            service.execute(RegistrarProfissionalInputDTO(**dados_registro))

        assert exc.value.errors == [
            "O CPF informado é inválido.",
            "O telefone deve estar no formato +DDI (DDD) NÚMERO.",
            "O CEP informado é inválido.",
            "O CNPJ informado é inválido.",
            "O e-mail informado é inválido.",
        ]
        assert profissional_repo.list_all() == []

    def test_registro_curto(self, service, dados_registro):
        dados_registro["registro_profissional"] = "123"

        with pytest.raises(DomainValidationError) as exc:
            service.execute(RegistrarProfissionalInputDTO(**dados_registro))

        assert exc.value.errors == ["CRP inválido. Deve ter pelo menos 5 caracteres."]

    def test_conflitos_reportados_juntos(
        self, service, input_dto, profissional_repo, usuario_repo, organizacao_repo, politica, uow
    ):
        """CPF, registro, e-mail, razão social e CNPJ em uso geram um único conflito."""
        profissional_repo.save(_novo_profissional(
            TipoProfissional.PSICOLOGO, "Outra", "529.982.247-25", "06/12345"
        ))
        usuario_repo.save(UsuarioEntity.criar(
            "Outra", "maria@clinica.com", "Senha@123", politica=politica
        ))
        organizacao_repo.save(OrganizacaoEntity.criar(
            "Outra Clínica", "Saúde Total Serviços Médicos Ltda", "11.222.333/0001-81"
        ))

        with pytest.raises(ConflictError) as exc:
            service.execute(input_dto)

        assert exc.value.conflitos == [
            "Profissional com CPF '529.982.247-25' já existe.",
            "Profissional com CRP '06/12345' já existe.",
            "Usuário com e-mail 'maria@clinica.com' já existe.",
            "Organização com razão social 'Saúde Total Serviços Médicos Ltda' já existe.",
            "Organização com CNPJ '11.222.333/0001-81' já existe.",
        ]
        assert uow.rolled_back
        assert uow.collect_events() == []

    def test_registro_unico_por_tipo(self, service, dados_registro, profissional_repo):
        """O mesmo número de registro pode existir em outro tipo."""
        profissional_repo.save(_novo_profissional(
            TipoProfissional.NUTRICIONISTA, "Outro", "111.444.777-35", "06/12345"
        ))

        output = service.execute(RegistrarProfissionalInputDTO(**dados_registro))

        assert output.registro_profissional == "06/12345"


class TestConsultasProfissional:

    @pytest.fixture
    def cadastrados(self, profissional_repo):
        psicologa = _novo_profissional(
            TipoProfissional.PSICOLOGO, "Maria", "529.982.247-25", "06/12345"
        )
        nutricionista = _novo_profissional(
            TipoProfissional.NUTRICIONISTA, "João", "111.444.777-35", "CRN3-1234"
        )
        nutricionista.desativar()
        profissional_repo.save(psicologa)
        profissional_repo.save(nutricionista)
        return psicologa, nutricionista

    def test_obter(self, profissional_repo, cadastrados):
        psicologa, _ = cadastrados

        output = ObterProfissionalService(profissional_repo).execute(psicologa.id)

        assert output.nome == "Maria"
        assert output.usuario is None

    def test_obter_inexistente(self, profissional_repo):
        with pytest.raises(EntityNotFoundError):
            ObterProfissionalService(profissional_repo).execute("nao-existe")

    def test_listar_todos(self, profissional_repo, cadastrados):
        resultado = ListarProfissionaisService(profissional_repo).execute()

        assert [p.nome for p in resultado] == ["João", "Maria"]

    def test_listar_por_tipo(self, profissional_repo, cadastrados):
        resultado = ListarProfissionaisService(profissional_repo).execute(
            ListarProfissionaisQueryDTO(tipo="NUTRICIONISTA")
        )

        assert [p.tipo for p in resultado] == ["Nutricionista"]

    def test_listar_apenas_ativos(self, profissional_repo, cadastrados):
        resultado = ListarProfissionaisService(profissional_repo).execute(
            ListarProfissionaisQueryDTO(apenas_ativos=True)
        )

        assert [p.nome for p in resultado] == ["Maria"]

    def test_listar_tipo_invalido(self, profissional_repo):
        with pytest.raises(InvalidArgumentError):
            ListarProfissionaisService(profissional_repo).execute(
                ListarProfissionaisQueryDTO(tipo="MEDICO")
            )


class TestDesativarProfissionalService:

    def test_desativar(self, profissional_repo, uow):
        profissional = _novo_profissional(
            TipoProfissional.PSICOLOGO, "Maria", "529.982.247-25", "06/12345"
        )
        profissional_repo.save(profissional)

        output = DesativarProfissionalService(profissional_repo, uow).execute(profissional.id)

        assert output.estado == "Inativo"
        assert profissional_repo.get_by_id(profissional.id).estado == EstadoProfissional.INATIVO
        events = uow.collect_events()
        assert isinstance(events[0], ProfissionalDesativadoEvent)
        assert events[0].tipo == "Psicólogo"

    def test_desativar_inexistente(self, profissional_repo, uow):
        with pytest.raises(EntityNotFoundError):
            DesativarProfissionalService(profissional_repo, uow).execute("nao-existe")
