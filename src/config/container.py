"""
Dependency Injection Container.

Configura e gerencia todas as dependências da aplicação.
Usa dependency-injector para lazy-loading e injeção automática.

Padrões:
- Singleton: Uma instância para toda app (repositories, publisher, política)
- Factory: Nova instância por chamada (services, UoW)
- Configuration: Valores vindos das settings do Django

Adapters Django são importados sob demanda: o container pode ser
criado (e usado nos testes do Core) sem Django configurado.
"""

import importlib
from typing import Optional

from dependency_injector import containers, providers

from src.core.organizacoes.use_cases import (
    AtualizarOrganizacaoService,
    BuscarOrganizacaoPorCnpjService,
    CriarOrganizacaoService,
    ListarOrganizacoesService,
    ObterOrganizacaoService,
    RemoverOrganizacaoService,
)
from src.core.organizacoes.ports import InMemoryOrganizacaoRepository
from src.core.profissionais.factories import criar_provider_padrao
from src.core.profissionais.ports import InMemoryProfissionalRepository
from src.core.profissionais.use_cases import (
    DesativarProfissionalService,
    ListarProfissionaisService,
    ObterProfissionalService,
    RegistrarProfissionalService,
)
from src.core.shared.security import PoliticaSenha
from src.core.usuarios.ports import InMemoryUsuarioRepository
from src.core.usuarios.use_cases import (
    AtualizarUsuarioService,
    BuscarUsuarioPorEmailService,
    CriarUsuarioService,
    ListarUsuariosService,
    LoginUsuarioService,
    ObterUsuarioService,
    RemoverUsuarioService,
)


def lazy(caminho: str):
    """
    Callable que importa `modulo.Nome` só na primeira chamada.

    Example:
        providers.Singleton(lazy('src.adapters.django_app.usuarios.repositories.DjangoUsuarioRepository'))
    """
    modulo, nome = caminho.rsplit('.', 1)

    def criar(*args, **kwargs):
        return getattr(importlib.import_module(modulo), nome)(*args, **kwargs)

    criar.__name__ = nome
    return criar


DEFAULTS = {
    'event_publisher_mode': 'logging',
    'senha': {
        'min_length': 8,
        'max_length': 25,
        'require_uppercase': True,
        'require_lowercase': True,
        'require_digit': True,
        'require_special_char': True,
        'iteracoes': 100000,
    },
}


class Container(containers.DeclarativeContainer):
    """
    Container principal de Dependency Injection.

    Organização:
    - Configuration: settings (com defaults)
    - Infrastructure: publisher de eventos, política de senha
    - Repositories: Persistência
    - Unit of Work: Transações
    - Services: Use Cases

    Example:
        container = Container()
        service = container.registrar_profissional_service()
        output = service.execute(input_dto)
    """

    # =========================================================================
    # Configuration
    # =========================================================================

    config = providers.Configuration(default=DEFAULTS)

    # =========================================================================
    # Infrastructure
    # =========================================================================

    event_publisher = providers.Singleton(
        lazy('src.adapters.django_app.events.publishers.get_event_publisher'),
        mode=config.event_publisher_mode,
    )

    politica_senha = providers.Singleton(
        PoliticaSenha,
        min_length=config.senha.min_length,
        max_length=config.senha.max_length,
        require_uppercase=config.senha.require_uppercase,
        require_lowercase=config.senha.require_lowercase,
        require_digit=config.senha.require_digit,
        require_special_char=config.senha.require_special_char,
        iteracoes=config.senha.iteracoes,
    )

    factory_provider = providers.Singleton(criar_provider_padrao)

    # =========================================================================
    # Repositories (Singleton - uma instância por app)
    # =========================================================================

    usuario_repository = providers.Singleton(
        lazy('src.adapters.django_app.usuarios.repositories.DjangoUsuarioRepository')
    )

    organizacao_repository = providers.Singleton(
        lazy('src.adapters.django_app.organizacoes.repositories.DjangoOrganizacaoRepository')
    )

    profissional_repository = providers.Singleton(
        lazy('src.adapters.django_app.profissionais.repositories.DjangoProfissionalRepository')
    )

    # =========================================================================
    # Unit of Work (Factory - nova instância por operação)
    # =========================================================================

    unit_of_work = providers.Factory(
        lazy('src.adapters.django_app.shared.unit_of_work.DjangoUnitOfWork'),
        event_publisher=event_publisher,
    )

    # =========================================================================
    # Services - Usuários
    # =========================================================================

    criar_usuario_service = providers.Factory(
        CriarUsuarioService,
        usuario_repo=usuario_repository,
        uow=unit_of_work,
        politica=politica_senha,
    )

    atualizar_usuario_service = providers.Factory(
        AtualizarUsuarioService,
        usuario_repo=usuario_repository,
        uow=unit_of_work,
        politica=politica_senha,
    )

    obter_usuario_service = providers.Factory(
        ObterUsuarioService,
        usuario_repo=usuario_repository,
    )

    buscar_usuario_por_email_service = providers.Factory(
        BuscarUsuarioPorEmailService,
        usuario_repo=usuario_repository,
    )

    listar_usuarios_service = providers.Factory(
        ListarUsuariosService,
        usuario_repo=usuario_repository,
    )

    remover_usuario_service = providers.Factory(
        RemoverUsuarioService,
        usuario_repo=usuario_repository,
        uow=unit_of_work,
    )

    # Singleton: o hash fictício é calculado uma vez por container
    login_usuario_service = providers.Singleton(
        LoginUsuarioService,
        usuario_repo=usuario_repository,
        politica=politica_senha,
    )

    # =========================================================================
    # Services - Organizações
    # =========================================================================

    criar_organizacao_service = providers.Factory(
        CriarOrganizacaoService,
        organizacao_repo=organizacao_repository,
        uow=unit_of_work,
    )

    atualizar_organizacao_service = providers.Factory(
        AtualizarOrganizacaoService,
        organizacao_repo=organizacao_repository,
        uow=unit_of_work,
    )

    obter_organizacao_service = providers.Factory(
        ObterOrganizacaoService,
        organizacao_repo=organizacao_repository,
    )

    buscar_organizacao_por_cnpj_service = providers.Factory(
        BuscarOrganizacaoPorCnpjService,
        organizacao_repo=organizacao_repository,
    )

    listar_organizacoes_service = providers.Factory(
        ListarOrganizacoesService,
        organizacao_repo=organizacao_repository,
    )

    remover_organizacao_service = providers.Factory(
        RemoverOrganizacaoService,
        organizacao_repo=organizacao_repository,
        uow=unit_of_work,
    )

    # =========================================================================
    # Services - Profissionais
    # =========================================================================

    registrar_profissional_service = providers.Factory(
        RegistrarProfissionalService,
        profissional_repo=profissional_repository,
        usuario_repo=usuario_repository,
        organizacao_repo=organizacao_repository,
        factory_provider=factory_provider,
        uow=unit_of_work,
        politica=politica_senha,
    )

    obter_profissional_service = providers.Factory(
        ObterProfissionalService,
        profissional_repo=profissional_repository,
    )

    listar_profissionais_service = providers.Factory(
        ListarProfissionaisService,
        profissional_repo=profissional_repository,
    )

    desativar_profissional_service = providers.Factory(
        DesativarProfissionalService,
        profissional_repo=profissional_repository,
        uow=unit_of_work,
    )


# =============================================================================
# Container Global (Singleton)
# =============================================================================

_container: Optional[Container] = None


def get_container() -> Container:
    """
    Retorna instância global do container.

    Cria se não existir, carregando EVENT_PUBLISHER_MODE e
    SENHA_POLITICA das settings do Django.
    """
    global _container

    if _container is None:
        from django.conf import settings

        _container = Container()
        _container.config.from_dict({
            'event_publisher_mode': getattr(settings, 'EVENT_PUBLISHER_MODE', 'logging'),
            'senha': getattr(settings, 'SENHA_POLITICA', {}),
        })

    return _container


def reset_container() -> None:
    """Reset do container (para testes)."""
    global _container
    _container = None


# =============================================================================
# Testing Container
# =============================================================================

@containers.copy(Container)
class TestingContainer(Container):
    """
    Container para testes com implementações InMemory.

    Services são os mesmos do Container; apenas infraestrutura muda.
    Hash de senha usa o mínimo de iterações para testes rápidos.

    Example:
        container = TestingContainer()
        container.criar_usuario_service().execute(input_dto)
        assert container.unit_of_work().published_events == []
    """

    __test__ = False

    event_publisher = providers.Singleton(
        lazy('src.adapters.django_app.events.publishers.InMemoryEventPublisher')
    )

    politica_senha = providers.Singleton(PoliticaSenha, iteracoes=10000)

    usuario_repository = providers.Singleton(InMemoryUsuarioRepository)
    organizacao_repository = providers.Singleton(InMemoryOrganizacaoRepository)
    profissional_repository = providers.Singleton(InMemoryProfissionalRepository)

    unit_of_work = providers.Singleton(
        lazy('src.adapters.django_app.shared.unit_of_work.InMemoryUnitOfWork')
    )
