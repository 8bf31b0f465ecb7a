"""
Testes de Integração End-to-End.

Testes que validam o fluxo completo da aplicação:
- Container → Use Case → Repository (em memória e Django)
- Domain Events → Publisher → Dispatcher → Handler

Usa o TestingContainer para os fluxos sem banco e o container
global (SQLite em memória) para o fluxo persistido.
"""

from unittest.mock import Mock, patch

import pytest

from src.adapters.django_app.events.handlers import EVENT_HANDLERS, dispatch_domain_event
from src.config.container import TestingContainer, get_container, reset_container
from src.core.organizacoes.dtos import CriarOrganizacaoInputDTO
from src.core.profissionais.dtos import (
    ListarProfissionaisQueryDTO,
    RegistrarProfissionalInputDTO,
)
from src.core.shared.exceptions import ConflictError, DomainValidationError
from src.core.usuarios.dtos import LoginInputDTO


pytestmark = pytest.mark.integration


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def container():
    return TestingContainer()


@pytest.fixture
def registrar(container):
    return container.registrar_profissional_service()


# =============================================================================
# Ciclo de vida do profissional
# =============================================================================

class TestProfissionalLifecycleIntegration:

    def test_registro_completo_e_login(self, container, registrar, dados_registro):
        """Profissional registrado consegue autenticar com a conta criada."""
        output = registrar.execute(RegistrarProfissionalInputDTO(**dados_registro))

        login = container.login_usuario_service()
        assert login.execute(LoginInputDTO(email="maria@clinica.com", senha="Senha@123"))
        assert not login.execute(LoginInputDTO(email="maria@clinica.com", senha="Outra@123"))

        usuario = container.buscar_usuario_por_email_service().execute("MARIA@clinica.com")
        assert usuario.id == output.usuario.id

        organizacao = container.buscar_organizacao_por_cnpj_service().execute("11222333000181")
        assert organizacao.id == output.organizacoes[0].organizacao_id

    def test_registro_desativacao_listagem(self, container, registrar, dados_registro):
        output = registrar.execute(RegistrarProfissionalInputDTO(**dados_registro))

        container.desativar_profissional_service().execute(output.id)

        listar = container.listar_profissionais_service()
        assert listar.execute(ListarProfissionaisQueryDTO(apenas_ativos=True)) == []
        assert [p.estado for p in listar.execute()] == ["Inativo"]

        eventos = [e.event_type for e in container.unit_of_work().published_events]
        assert eventos == ["ProfissionalRegistradoEvent", "ProfissionalDesativadoEvent"]

    def test_dois_tipos_de_profissional(self, container, registrar, dados_registro):
        registrar.execute(RegistrarProfissionalInputDTO(**dados_registro))
        dados_registro.update(
            nome="João Lima",
            cpf="111.444.777-35",
            tipo_profissional="NUTRICIONISTA",
            registro_profissional="CRN3-12345",
            email="joao@clinica.com",
            razao_social="Nutri Vida Ltda",
            nome_fantasia="Nutri Vida",
            cnpj="11.444.777/0001-61",
        )
        registrar.execute(RegistrarProfissionalInputDTO(**dados_registro))

        listar = container.listar_profissionais_service()
        nutricionistas = listar.execute(ListarProfissionaisQueryDTO(tipo="Nutricionista"))
        assert [p.nome for p in nutricionistas] == ["João Lima"]
        assert len(listar.execute()) == 2


class TestValidationIntegration:

    def test_falha_nao_deixa_residuos(self, container, registrar, dados_registro):
        """Cadastro rejeitado não grava usuário nem organização."""
        dados_registro["cep"] = "000"

        with pytest.raises(DomainValidationError):
            registrar.execute(RegistrarProfissionalInputDTO(**dados_registro))

        assert container.listar_usuarios_service().execute() == []
        assert container.listar_organizacoes_service().execute() == []

    def test_organizacao_previa_gera_conflito(self, container, registrar, dados_registro):
        container.criar_organizacao_service().execute(CriarOrganizacaoInputDTO(
            nome_fantasia="Outra Clínica",
            razao_social="Outra Ltda",
            cnpj="11.222.333/0001-81",
        ))

        with pytest.raises(ConflictError) as exc:
            registrar.execute(RegistrarProfissionalInputDTO(**dados_registro))

        assert exc.value.conflitos == ["Organização com CNPJ '11.222.333/0001-81' já existe."]


# =============================================================================
# Fluxo persistido e eventos
# =============================================================================

@pytest.mark.django_db
class TestPersistedFlowIntegration:

    @pytest.fixture(autouse=True)
    def container_global(self):
        reset_container()
        yield get_container()
        reset_container()

    def test_registro_persistido_e_eventos_roteados(self, container_global, dados_registro):
        """Eventos publicados após commit chegam ao handler via dispatcher."""
        output = container_global.registrar_profissional_service().execute(
            RegistrarProfissionalInputDTO(**dados_registro)
        )

        recuperado = container_global.obter_profissional_service().execute(output.id)
        assert recuperado.usuario.email == "maria@clinica.com"
        assert recuperado.enderecos[0].cep == "01310-100"

        evento = container_global.event_publisher().published_events[0]
        handler = Mock()
        with patch.dict(EVENT_HANDLERS, {'ProfissionalRegistradoEvent': handler}):
            assert dispatch_domain_event(evento.event_type, evento.to_dict())

        handler.delay.assert_called_once()
        assert handler.delay.call_args.args[0]['aggregate_id'] == output.id
