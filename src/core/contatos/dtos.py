"""
DTOs de saída de Contatos.

Recebem o vínculo (entidade de relação) para expor também o flag
is_principal.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class TelefoneOutputDTO:
    id: str
    ddi: str
    ddd: str
    numero: str
    formatado: str
    is_principal: bool

    @classmethod
    def from_vinculo(cls, vinculo) -> "TelefoneOutputDTO":
        """Converte OrganizacaoTelefone ou ProfissionalTelefone."""
        telefone = vinculo.telefone
        return cls(
            id=vinculo.id,
            ddi=telefone.ddi,
            ddd=telefone.ddd,
            numero=telefone.numero,
            formatado=str(telefone),
            is_principal=vinculo.is_principal,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "ddi": self.ddi,
            "ddd": self.ddd,
            "numero": self.numero,
            "formatado": self.formatado,
            "is_principal": self.is_principal,
        }


@dataclass
class EnderecoOutputDTO:
    id: str
    rua: str
    numero: str
    complemento: Optional[str]
    bairro: str
    cep: str
    cidade: str
    estado: str
    is_principal: bool

    @classmethod
    def from_vinculo(cls, vinculo) -> "EnderecoOutputDTO":
        endereco = vinculo.endereco
        return cls(
            id=vinculo.id,
            rua=endereco.rua,
            numero=endereco.numero,
            complemento=endereco.complemento,
            bairro=endereco.bairro,
            cep=endereco.cep_formatado,
            cidade=endereco.cidade,
            estado=endereco.estado,
            is_principal=vinculo.is_principal,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "rua": self.rua,
            "numero": self.numero,
            "complemento": self.complemento,
            "bairro": self.bairro,
            "cep": self.cep,
            "cidade": self.cidade,
            "estado": self.estado,
            "is_principal": self.is_principal,
        }
