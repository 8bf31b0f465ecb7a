"""
Data Transfer Objects do Domínio de Organizações.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Tuple

from src.core.contatos.dtos import TelefoneOutputDTO

from .entities import OrganizacaoEntity


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class CriarOrganizacaoInputDTO:
    """
    DTO de entrada para cadastro de organização.

    Attributes:
        nome_fantasia: Nome fantasia
        razao_social: Razão social
        cnpj: CNPJ com ou sem pontuação
        telefones: Telefones no formato "+55 (11) 3333-4444"; o primeiro é o principal
    """

    nome_fantasia: str
    razao_social: str
    cnpj: str
    telefones: Tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "nome_fantasia": self.nome_fantasia,
            "razao_social": self.razao_social,
            "cnpj": self.cnpj,
            "telefones": list(self.telefones),
        }


@dataclass(frozen=True)
class AtualizarOrganizacaoInputDTO:
    organizacao_id: str
    nome_fantasia: str
    razao_social: str
    cnpj: str
    estado: str

    def to_dict(self) -> dict:
        return {
            "organizacao_id": self.organizacao_id,
            "nome_fantasia": self.nome_fantasia,
            "razao_social": self.razao_social,
            "cnpj": self.cnpj,
            "estado": self.estado,
        }


# =============================================================================
# OUTPUT DTOs (Saída)
# =============================================================================

@dataclass
class OrganizacaoOutputDTO:
    """DTO de saída com dados da organização e seus telefones."""

    id: str
    nome_fantasia: str
    razao_social: str
    cnpj: str
    cnpj_formatado: str
    estado: str
    criado_em: datetime
    atualizado_em: Optional[datetime]
    telefones: List[TelefoneOutputDTO] = field(default_factory=list)

    @classmethod
    def from_entity(cls, entity: OrganizacaoEntity) -> "OrganizacaoOutputDTO":
        return cls(
            id=entity.id,
            nome_fantasia=entity.nome_fantasia,
            razao_social=entity.razao_social,
            cnpj=entity.cnpj,
            cnpj_formatado=entity.cnpj_formatado,
            estado=entity.estado.value,
            criado_em=entity.criado_em,
            atualizado_em=entity.atualizado_em,
            telefones=[TelefoneOutputDTO.from_vinculo(t) for t in entity.telefones],
        )

    def to_dict(self) -> dict:
        """Converte para dicionário (serialização JSON)."""
        return {
            "id": self.id,
            "nome_fantasia": self.nome_fantasia,
            "razao_social": self.razao_social,
            "cnpj": self.cnpj,
            "cnpj_formatado": self.cnpj_formatado,
            "estado": self.estado,
            "criado_em": self.criado_em.isoformat(),
            "atualizado_em": self.atualizado_em.isoformat() if self.atualizado_em else None,
            "telefones": [t.to_dict() for t in self.telefones],
        }
