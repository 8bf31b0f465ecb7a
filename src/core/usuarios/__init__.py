"""
Domínio de Usuários - Contas de acesso ao sistema.

Contém:
- Entidades (UsuarioEntity, EstadoUsuario)
- Use Cases (CRUD + login)
- Domain Events (UsuarioCriado, UsuarioRemovido)
- DTOs e Ports
"""

from .entities import UsuarioEntity, EstadoUsuario
from .events import UsuarioCriadoEvent, UsuarioRemovidoEvent
from .dtos import (
    CriarUsuarioInputDTO,
    AtualizarUsuarioInputDTO,
    LoginInputDTO,
    UsuarioOutputDTO,
)
from .ports import UsuarioRepository, InMemoryUsuarioRepository
from .use_cases import (
    CriarUsuarioService,
    AtualizarUsuarioService,
    ObterUsuarioService,
    BuscarUsuarioPorEmailService,
    ListarUsuariosService,
    RemoverUsuarioService,
    LoginUsuarioService,
)

__all__ = [
    "UsuarioEntity",
    "EstadoUsuario",
    "UsuarioCriadoEvent",
    "UsuarioRemovidoEvent",
    "CriarUsuarioInputDTO",
    "AtualizarUsuarioInputDTO",
    "LoginInputDTO",
    "UsuarioOutputDTO",
    "UsuarioRepository",
    "InMemoryUsuarioRepository",
    "CriarUsuarioService",
    "AtualizarUsuarioService",
    "ObterUsuarioService",
    "BuscarUsuarioPorEmailService",
    "ListarUsuariosService",
    "RemoverUsuarioService",
    "LoginUsuarioService",
]
