"""
Data Transfer Objects do Domínio de Profissionais.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import List, Optional, Union

from src.core.contatos.dtos import EnderecoOutputDTO, TelefoneOutputDTO
from src.core.usuarios.dtos import UsuarioOutputDTO

from .entities import OrganizacaoProfissional, ProfissionalEntity


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class RegistrarProfissionalInputDTO:
    """
    DTO de entrada do auto-cadastro de profissional.

    Reúne em uma única requisição os dados do profissional, da conta
    de acesso, do telefone, do endereço e da organização.

    Attributes:
        tipo_profissional: "PSICOLOGO" / "Psicólogo", "NUTRICIONISTA" / "Nutricionista"
        registro_profissional: CRP ou CRN
        telefone: Formato "+55 (11) 98399-1005"
        data_nascimento: Data ISO (AAAA-MM-DD) ou date
    """

    nome: str
    cpf: str
    registro_profissional: str
    tipo_profissional: str
    email: str
    senha: str
    telefone: str
    rua: str
    numero: str
    bairro: str
    cep: str
    cidade: str
    estado: str
    razao_social: str
    nome_fantasia: str
    cnpj: str
    complemento: Optional[str] = None
    rg: Optional[str] = None
    data_nascimento: Optional[Union[str, date]] = None
    genero: str = "NAO_INFORMADO"

    def to_dict(self) -> dict:
        """Converte para dicionário sem a senha (logging seguro)."""
        return {
            "nome": self.nome,
            "tipo_profissional": self.tipo_profissional,
            "registro_profissional": self.registro_profissional,
            "email": self.email,
            "cnpj": self.cnpj,
        }


@dataclass(frozen=True)
class ListarProfissionaisQueryDTO:
    tipo: Optional[str] = None
    apenas_ativos: bool = False


# =============================================================================
# OUTPUT DTOs (Saída)
# =============================================================================

@dataclass
class VinculoOrganizacaoOutputDTO:
    id: str
    organizacao_id: str
    nome_fantasia: Optional[str]
    estado: str

    @classmethod
    def from_vinculo(cls, vinculo: OrganizacaoProfissional) -> "VinculoOrganizacaoOutputDTO":
        return cls(
            id=vinculo.id,
            organizacao_id=vinculo.organizacao_id,
            nome_fantasia=vinculo.organizacao.nome_fantasia if vinculo.organizacao else None,
            estado=vinculo.estado.value,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "organizacao_id": self.organizacao_id,
            "nome_fantasia": self.nome_fantasia,
            "estado": self.estado,
        }


@dataclass
class ProfissionalOutputDTO:
    """DTO de saída completo do profissional."""

    id: str
    tipo: str
    nome: str
    cpf: str
    rg: Optional[str]
    data_nascimento: Optional[date]
    genero: str
    estado: str
    rotulo_registro: str
    registro_profissional: str
    criado_em: datetime
    atualizado_em: Optional[datetime]
    usuario: Optional[UsuarioOutputDTO] = None
    telefones: List[TelefoneOutputDTO] = field(default_factory=list)
    enderecos: List[EnderecoOutputDTO] = field(default_factory=list)
    organizacoes: List[VinculoOrganizacaoOutputDTO] = field(default_factory=list)

    @classmethod
    def from_entity(cls, entity: ProfissionalEntity) -> "ProfissionalOutputDTO":
        return cls(
            id=entity.id,
            tipo=entity.tipo.value,
            nome=entity.nome,
            cpf=entity.cpf_formatado,
            rg=entity.rg,
            data_nascimento=entity.data_nascimento,
            genero=entity.genero.value,
            estado=entity.estado.value,
            rotulo_registro=entity.rotulo_registro,
            registro_profissional=entity.registro_profissional,
            criado_em=entity.criado_em,
            atualizado_em=entity.atualizado_em,
            usuario=UsuarioOutputDTO.from_entity(entity.usuario) if entity.usuario else None,
            telefones=[TelefoneOutputDTO.from_vinculo(t) for t in entity.telefones],
            enderecos=[EnderecoOutputDTO.from_vinculo(e) for e in entity.enderecos],
            organizacoes=[
                VinculoOrganizacaoOutputDTO.from_vinculo(o) for o in entity.organizacoes
            ],
        )

    def to_dict(self) -> dict:
        """Converte para dicionário (serialização JSON)."""
        return {
            "id": self.id,
            "tipo": self.tipo,
            "nome": self.nome,
            "cpf": self.cpf,
            "rg": self.rg,
            "data_nascimento": self.data_nascimento.isoformat() if self.data_nascimento else None,
            "genero": self.genero,
            "estado": self.estado,
            "rotulo_registro": self.rotulo_registro,
            "registro_profissional": self.registro_profissional,
            "criado_em": self.criado_em.isoformat(),
            "atualizado_em": self.atualizado_em.isoformat() if self.atualizado_em else None,
            "usuario": self.usuario.to_dict() if self.usuario else None,
            "telefones": [t.to_dict() for t in self.telefones],
            "enderecos": [e.to_dict() for e in self.enderecos],
            "organizacoes": [o.to_dict() for o in self.organizacoes],
        }
