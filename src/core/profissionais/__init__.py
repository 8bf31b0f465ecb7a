"""
Domínio de Profissionais - Psicólogos e Nutricionistas.

Contém:
- Entidades (ProfissionalEntity e vínculos)
- Factories por tipo de profissional (registro explícito)
- Use Cases (registro, consulta, desativação)
- Domain Events (ProfissionalRegistrado, ProfissionalDesativado)
- DTOs e Ports
"""

from .entities import (
    ProfissionalEntity,
    ProfissionalTelefone,
    ProfissionalEndereco,
    OrganizacaoProfissional,
    TipoProfissional,
    Genero,
    EstadoProfissional,
    EstadoVinculo,
    VALIDADORES_POR_TIPO,
)
from .factories import (
    ProfessionalModuleFactory,
    PsicologiaModuleFactory,
    NutricaoModuleFactory,
    ProfessionalFactoryProvider,
    criar_provider_padrao,
)
from .events import ProfissionalRegistradoEvent, ProfissionalDesativadoEvent
from .dtos import (
    RegistrarProfissionalInputDTO,
    ListarProfissionaisQueryDTO,
    ProfissionalOutputDTO,
)
from .ports import ProfissionalRepository, InMemoryProfissionalRepository
from .use_cases import (
    RegistrarProfissionalService,
    ObterProfissionalService,
    ListarProfissionaisService,
    DesativarProfissionalService,
)

__all__ = [
    "ProfissionalEntity",
    "ProfissionalTelefone",
    "ProfissionalEndereco",
    "OrganizacaoProfissional",
    "TipoProfissional",
    "Genero",
    "EstadoProfissional",
    "EstadoVinculo",
    "VALIDADORES_POR_TIPO",
    "ProfessionalModuleFactory",
    "PsicologiaModuleFactory",
    "NutricaoModuleFactory",
    "ProfessionalFactoryProvider",
    "criar_provider_padrao",
    "ProfissionalRegistradoEvent",
    "ProfissionalDesativadoEvent",
    "RegistrarProfissionalInputDTO",
    "ListarProfissionaisQueryDTO",
    "ProfissionalOutputDTO",
    "ProfissionalRepository",
    "InMemoryProfissionalRepository",
    "RegistrarProfissionalService",
    "ObterProfissionalService",
    "ListarProfissionaisService",
    "DesativarProfissionalService",
]
