"""
Data Transfer Objects do Domínio de Usuários.

DTOs de entrada são imutáveis (frozen); DTOs de saída nunca expõem
o hash da senha.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .entities import UsuarioEntity


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class CriarUsuarioInputDTO:
    """
    DTO de entrada para criação de usuário.

    Attributes:
        nome: Nome completo
        email: E-mail de login
        senha: Senha em texto puro (será convertida em hash)
        estado: Estado inicial (nome ou valor do enum)
    """

    nome: str
    email: str
    senha: str
    estado: str = "ATIVO"

    def to_dict(self) -> dict:
        """Converte para dicionário sem a senha (logging seguro)."""
        return {"nome": self.nome, "email": self.email, "estado": self.estado}


@dataclass(frozen=True)
class AtualizarUsuarioInputDTO:
    """DTO de entrada para atualização; `senha` None mantém a atual."""

    usuario_id: str
    nome: str
    email: str
    estado: str
    senha: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "usuario_id": self.usuario_id,
            "nome": self.nome,
            "email": self.email,
            "estado": self.estado,
        }


@dataclass(frozen=True)
class LoginInputDTO:
    email: str
    senha: str


# =============================================================================
# OUTPUT DTOs (Saída)
# =============================================================================

@dataclass
class UsuarioOutputDTO:
    """DTO de saída com dados públicos do usuário."""

    id: str
    nome: str
    email: str
    estado: str
    criado_em: datetime
    atualizado_em: Optional[datetime]

    @classmethod
    def from_entity(cls, entity: UsuarioEntity) -> "UsuarioOutputDTO":
        return cls(
            id=entity.id,
            nome=entity.nome,
            email=entity.email,
            estado=entity.estado.value,
            criado_em=entity.criado_em,
            atualizado_em=entity.atualizado_em,
        )

    def to_dict(self) -> dict:
        """Converte para dicionário (serialização JSON)."""
        return {
            "id": self.id,
            "nome": self.nome,
            "email": self.email,
            "estado": self.estado,
            "criado_em": self.criado_em.isoformat(),
            "atualizado_em": self.atualizado_em.isoformat() if self.atualizado_em else None,
        }
