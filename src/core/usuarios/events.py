"""
Domain Events do Domínio de Usuários.

Eventos:
- UsuarioCriadoEvent: nova conta criada
- UsuarioRemovidoEvent: conta removida
"""

from dataclasses import dataclass
from typing import Any, Dict

from src.core.shared.events import DomainEvent


@dataclass
class UsuarioCriadoEvent(DomainEvent):
    """
    Evento: Usuário foi criado.

    Handlers típicos:
    - Enviar e-mail de boas-vindas
    """

    nome: str = ""
    email: str = ""

    @property
    def aggregate_type(self) -> str:
        return "Usuario"

    def _get_event_data(self) -> Dict[str, Any]:
        return {"nome": self.nome, "email": self.email}


@dataclass
class UsuarioRemovidoEvent(DomainEvent):
    """Evento: Usuário foi removido."""

    email: str = ""

    @property
    def aggregate_type(self) -> str:
        return "Usuario"

    def _get_event_data(self) -> Dict[str, Any]:
        return {"email": self.email}
