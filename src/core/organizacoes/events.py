"""
Domain Events do Domínio de Organizações.

Eventos:
- OrganizacaoCriadaEvent: nova organização cadastrada
"""

from dataclasses import dataclass
from typing import Any, Dict

from src.core.shared.events import DomainEvent


@dataclass
class OrganizacaoCriadaEvent(DomainEvent):
    """
    Evento: Organização foi cadastrada.

    Attributes:
        nome_fantasia: Nome fantasia normalizado
        cnpj: CNPJ somente dígitos
    """

    nome_fantasia: str = ""
    cnpj: str = ""

    @property
    def aggregate_type(self) -> str:
        return "Organizacao"

    def _get_event_data(self) -> Dict[str, Any]:
        return {"nome_fantasia": self.nome_fantasia, "cnpj": self.cnpj}
