"""
Domínio de Organizações - Clínicas e consultórios.

Contém:
- Entidades (OrganizacaoEntity, OrganizacaoTelefone, EstadoOrganizacao)
- Use Cases (CRUD + busca por CNPJ)
- Domain Events (OrganizacaoCriada)
- DTOs e Ports
"""

from .entities import OrganizacaoEntity, OrganizacaoTelefone, EstadoOrganizacao
from .events import OrganizacaoCriadaEvent
from .dtos import (
    CriarOrganizacaoInputDTO,
    AtualizarOrganizacaoInputDTO,
    OrganizacaoOutputDTO,
)
from .ports import OrganizacaoRepository, InMemoryOrganizacaoRepository
from .use_cases import (
    CriarOrganizacaoService,
    AtualizarOrganizacaoService,
    ObterOrganizacaoService,
    BuscarOrganizacaoPorCnpjService,
    ListarOrganizacoesService,
    RemoverOrganizacaoService,
)

__all__ = [
    "OrganizacaoEntity",
    "OrganizacaoTelefone",
    "EstadoOrganizacao",
    "OrganizacaoCriadaEvent",
    "CriarOrganizacaoInputDTO",
    "AtualizarOrganizacaoInputDTO",
    "OrganizacaoOutputDTO",
    "OrganizacaoRepository",
    "InMemoryOrganizacaoRepository",
    "CriarOrganizacaoService",
    "AtualizarOrganizacaoService",
    "ObterOrganizacaoService",
    "BuscarOrganizacaoPorCnpjService",
    "ListarOrganizacoesService",
    "RemoverOrganizacaoService",
]
