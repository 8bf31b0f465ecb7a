"""
Domain Events do Domínio de Profissionais.

Eventos:
- ProfissionalRegistradoEvent: cadastro completo concluído
- ProfissionalDesativadoEvent: profissional desativado
"""

from dataclasses import dataclass
from typing import Any, Dict

from src.core.shared.events import DomainEvent


@dataclass
class ProfissionalRegistradoEvent(DomainEvent):
    """
    Evento: Profissional concluiu o auto-cadastro.

    Handlers típicos:
    - Enviar boas-vindas ao e-mail do usuário criado

    Attributes:
        tipo: Valor do TipoProfissional
        nome: Nome do profissional
        email: E-mail da conta criada
        organizacao_id: Organização criada junto ao cadastro
    """

    tipo: str = ""
    nome: str = ""
    email: str = ""
    organizacao_id: str = ""

    @property
    def aggregate_type(self) -> str:
        return "Profissional"

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            "tipo": self.tipo,
            "nome": self.nome,
            "email": self.email,
            "organizacao_id": self.organizacao_id,
        }


@dataclass
class ProfissionalDesativadoEvent(DomainEvent):
    tipo: str = ""

    @property
    def aggregate_type(self) -> str:
        return "Profissional"

    def _get_event_data(self) -> Dict[str, Any]:
        return {"tipo": self.tipo}
