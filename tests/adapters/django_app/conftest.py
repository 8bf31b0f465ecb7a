"""
Fixtures para testes dos adapters Django.

Django já é configurado pelo conftest raiz (SQLite em memória);
aqui ficam repositórios Django, publisher em memória e entidades
de exemplo prontas para persistir.
"""

import pytest

from src.config.container import reset_container


@pytest.fixture(autouse=True)
def reset_di_container():
    """Reset container entre testes."""
    reset_container()
    yield
    reset_container()


@pytest.fixture
def usuario_repo():
    from src.adapters.django_app.usuarios.repositories import DjangoUsuarioRepository
    return DjangoUsuarioRepository()


@pytest.fixture
def organizacao_repo():
    from src.adapters.django_app.organizacoes.repositories import DjangoOrganizacaoRepository
    return DjangoOrganizacaoRepository()


@pytest.fixture
def profissional_repo():
    from src.adapters.django_app.profissionais.repositories import DjangoProfissionalRepository
    return DjangoProfissionalRepository()


@pytest.fixture
def publisher():
    """Publisher em memória para verificar eventos pós-commit."""
    from src.adapters.django_app.events.publishers import InMemoryEventPublisher
    return InMemoryEventPublisher()


@pytest.fixture
def usuario(politica):
    from src.core.usuarios.entities import UsuarioEntity
    return UsuarioEntity.criar(
        nome="ana souza",
        email="Ana@Clinica.com",
        senha="Senha@123",
        politica=politica,
    )


@pytest.fixture
def organizacao():
    from src.core.contatos.entities import TelefoneEntity
    from src.core.organizacoes.entities import OrganizacaoEntity

    organizacao = OrganizacaoEntity.criar(
        nome_fantasia="Clínica Vida",
        razao_social="Vida Serviços Médicos Ltda",
        cnpj="11.444.777/0001-61",
    )
    organizacao.adicionar_telefone(TelefoneEntity.criar("55", "11", "33334444"))
    return organizacao


@pytest.fixture
def profissional():
    from src.core.contatos.entities import EnderecoEntity, TelefoneEntity
    from src.core.profissionais.entities import Genero, ProfissionalEntity, TipoProfissional

    profissional = ProfissionalEntity.criar(
        tipo=TipoProfissional.PSICOLOGO,
        nome="Ana Souza",
        cpf="111.444.777-35",
        registro_profissional="06/54321",
        genero=Genero.FEMININO,
    )
    profissional.adicionar_telefone(TelefoneEntity.criar("55", "11", "983991005"))
    profissional.adicionar_endereco(
        EnderecoEntity.criar("Rua Augusta", "500", "Consolação", "01305000", "São Paulo", "SP")
    )
    return profissional
