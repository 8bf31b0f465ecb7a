"""
Entidades do Domínio de Organizações (clínicas).

Entidades:
- OrganizacaoEntity: Agregado principal
- OrganizacaoTelefone: Vínculo organização ↔ telefone (com principal)
- EstadoOrganizacao: Ativa, Inativa, Suspensa

Regras de Negócio Encapsuladas:
- Nome fantasia e razão social em Title Case, até 150 caracteres
- CNPJ armazenado somente com dígitos e validado pelo módulo 11
- No máximo um telefone principal
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from src.core.contatos.entities import TelefoneEntity
from src.core.shared.entities import (
    Entidade,
    VinculoPrincipal,
    adicionar_com_principal,
    definir_principal,
    remover_com_principal,
)
from src.core.shared.exceptions import InvalidArgumentError
from src.core.shared.formatters import format_cnpj
from src.core.shared.strings import get_only_numbers, remove_double_spaces, to_title_case
from src.core.shared.validation import ValidationCollector
from src.core.shared.validators import is_cnpj


class EstadoOrganizacao(Enum):
    """Estados possíveis de uma organização."""

    ATIVA = "Ativa"
    INATIVA = "Inativa"
    SUSPENSA = "Suspensa"

    @classmethod
    def from_string(cls, value: str) -> "EstadoOrganizacao":
        """
        Converte string (nome ou valor) para enum.

        Raises:
            ValueError: Se valor inválido
        """
        try:
            return cls[value.upper()]
        except KeyError:
            pass

        for estado in cls:
            if estado.value.lower() == value.lower():
                return estado

        raise ValueError(f"Estado de organização inválido: {value}")


@dataclass(eq=False)
class OrganizacaoTelefone(VinculoPrincipal):
    """Vínculo entre organização e telefone."""

    organizacao_id: str = ""
    telefone: Optional[TelefoneEntity] = None


@dataclass(eq=False)
class OrganizacaoEntity(Entidade):
    """
    Entidade de Domínio: Organização.

    Invariantes:
    - Nome fantasia e razão social obrigatórios (até 150 caracteres)
    - CNPJ obrigatório e válido
    - Estado é um EstadoOrganizacao

    Example:
        organizacao = OrganizacaoEntity.criar(
            nome_fantasia="clínica saúde total",
            razao_social="Saúde Total Serviços Médicos Ltda",
            cnpj="11.222.333/0001-81",
        )
        organizacao.cnpj  # "11222333000181"
    """

    nome_fantasia: str = ""
    razao_social: str = ""
    cnpj: str = ""
    estado: EstadoOrganizacao = EstadoOrganizacao.ATIVA
    telefones: List[OrganizacaoTelefone] = field(default_factory=list)

    NOME_FANTASIA_MAX_LENGTH = 150
    RAZAO_SOCIAL_MAX_LENGTH = 150

    @classmethod
    def criar(
        cls,
        nome_fantasia: str,
        razao_social: str,
        cnpj: str,
        estado: EstadoOrganizacao = EstadoOrganizacao.ATIVA,
    ) -> "OrganizacaoEntity":
        """
        Factory method para criar organização validada.

        Raises:
            DomainValidationError: Com todas as violações encontradas
        """
        return cls(**cls._preparar(nome_fantasia, razao_social, cnpj, estado))

    def atualizar(
        self,
        nome_fantasia: str,
        razao_social: str,
        cnpj: str,
        estado: EstadoOrganizacao,
    ) -> None:
        """
        Atualiza os dados cadastrais.

        Em caso de erro de validação a instância permanece inalterada.
        """
        dados = self._preparar(nome_fantasia, razao_social, cnpj, estado)
        for campo, valor in dados.items():
            setattr(self, campo, valor)
        self._tocar()

    @classmethod
    def _preparar(
        cls,
        nome_fantasia: str,
        razao_social: str,
        cnpj: str,
        estado: EstadoOrganizacao,
    ) -> Dict[str, Any]:
        dados = {
            "nome_fantasia": to_title_case(remove_double_spaces(nome_fantasia)),
            "razao_social": to_title_case(remove_double_spaces(razao_social)),
            "cnpj": get_only_numbers(cnpj),
            "estado": estado,
        }
        cls._validar(dados)
        return dados

    @classmethod
    def _validar(cls, dados: Dict[str, Any]) -> None:
        v = ValidationCollector()

        v.when(not dados["nome_fantasia"], "O nome fantasia é obrigatório.")
        v.when(
            len(dados["nome_fantasia"]) > cls.NOME_FANTASIA_MAX_LENGTH,
            f"O nome fantasia deve conter no máximo {cls.NOME_FANTASIA_MAX_LENGTH} caracteres.",
        )
        v.when(not dados["razao_social"], "A razão social é obrigatória.")
        v.when(
            len(dados["razao_social"]) > cls.RAZAO_SOCIAL_MAX_LENGTH,
            f"A razão social deve conter no máximo {cls.RAZAO_SOCIAL_MAX_LENGTH} caracteres.",
        )
        v.when(not dados["cnpj"], "O CNPJ é obrigatório.")
        v.when(dados["cnpj"] and not is_cnpj(dados["cnpj"]), "O CNPJ informado é inválido.")
        v.when(
            not isinstance(dados["estado"], EstadoOrganizacao),
            "O estado da organização é inválido.",
        )

        v.raise_if_any()

    # =========================================================================
    # Telefones
    # =========================================================================

    def adicionar_telefone(
        self, telefone: TelefoneEntity, is_principal: bool = False
    ) -> OrganizacaoTelefone:
        """
        Vincula telefone à organização.

        O primeiro telefone, ou um marcado como principal, rebaixa os demais.
        """
        if telefone is None:
            raise InvalidArgumentError("O telefone é obrigatório.", field="telefone")

        vinculo = OrganizacaoTelefone(
            organizacao_id=self.id,
            telefone=telefone,
            is_principal=is_principal,
        )
        adicionar_com_principal(self.telefones, vinculo)
        self._tocar()
        return vinculo

    def remover_telefone(self, vinculo_id: str) -> OrganizacaoTelefone:
        removido = remover_com_principal(self.telefones, vinculo_id, "Telefone da organização")
        self._tocar()
        return removido

    def definir_telefone_principal(self, vinculo_id: str) -> OrganizacaoTelefone:
        vinculo = definir_principal(self.telefones, vinculo_id, "Telefone da organização")
        self._tocar()
        return vinculo

    @property
    def telefone_principal(self) -> Optional[OrganizacaoTelefone]:
        return next((t for t in self.telefones if t.is_principal), None)

    # =========================================================================
    # Estado
    # =========================================================================

    def ativar(self) -> None:
        self.estado = EstadoOrganizacao.ATIVA
        self._tocar()

    def desativar(self) -> None:
        self.estado = EstadoOrganizacao.INATIVA
        self._tocar()

    def suspender(self) -> None:
        self.estado = EstadoOrganizacao.SUSPENSA
        self._tocar()

    @property
    def esta_ativa(self) -> bool:
        return self.estado == EstadoOrganizacao.ATIVA

    @property
    def cnpj_formatado(self) -> str:
        return format_cnpj(self.cnpj)
