"""
Entidades de Contato: Telefone e Endereço.

Entidades de valor reutilizadas por organizações e profissionais.
Ambas seguem o ciclo normalizar → validar → aplicar: os valores
candidatos são normalizados, validados em conjunto e só então
atribuídos. Uma atualização rejeitada não altera a instância.
"""

from dataclasses import dataclass
import re
from typing import Any, Dict, Optional

from src.core.shared.entities import Entidade
from src.core.shared.formatters import format_cep, format_phone_with_ddd
from src.core.shared.strings import (
    get_only_numbers,
    is_blank,
    remove_double_spaces,
    to_title_case,
)
from src.core.shared.validation import ValidationCollector
from src.core.shared.validators import is_cep, is_uf
from src.core.shared.exceptions import DomainValidationError

# "+55 (11) 98399-1005", com tolerância a espaços
_TELEFONE_TEXTO_RE = re.compile(r"\+?\s*(\d{1,3})\s*\(\s*(\d{2})\s*\)\s*(\d[\d .-]*)")


@dataclass(eq=False)
class TelefoneEntity(Entidade):
    """
    Telefone no formato internacional.

    Invariantes:
    - DDI com 1 a 3 dígitos
    - DDD com exatamente 2 dígitos
    - Número com 8 (fixo) ou 9 (celular) dígitos

    Example:
        telefone = TelefoneEntity.criar(ddi="55", ddd="11", numero="98765-4321")
        str(telefone)                # "+55 (11) 98765-4321"
        telefone.numero_formatado    # "(11) 98765-4321"
    """

    ddi: str = ""
    ddd: str = ""
    numero: str = ""

    @classmethod
    def criar(cls, ddi: str, ddd: str, numero: str) -> "TelefoneEntity":
        """
        Factory method para criar telefone validado.

        Raises:
            DomainValidationError: Se algum campo inválido
        """
        return cls(**cls._preparar(ddi, ddd, numero))

    @classmethod
    def criar_de_texto(cls, texto: str) -> "TelefoneEntity":
        """
        Cria telefone a partir do formato "+55 (11) 98399-1005".

        Raises:
            DomainValidationError: Se o texto não segue o formato
        """
        if is_blank(texto):
            raise DomainValidationError(["O telefone é obrigatório."])

        match = _TELEFONE_TEXTO_RE.fullmatch(texto.strip())
        if not match:
            raise DomainValidationError(
                ["O telefone deve estar no formato +DDI (DDD) NÚMERO."]
            )
        ddi, ddd, numero = match.groups()
        return cls.criar(ddi, ddd, numero)

    def atualizar(self, ddi: str, ddd: str, numero: str) -> None:
        for campo, valor in self._preparar(ddi, ddd, numero).items():
            setattr(self, campo, valor)
        self._tocar()

    @classmethod
    def _preparar(cls, ddi: str, ddd: str, numero: str) -> Dict[str, Any]:
        dados = {
            "ddi": get_only_numbers(ddi),
            "ddd": get_only_numbers(ddd),
            "numero": get_only_numbers(numero),
        }

        v = ValidationCollector()
        v.when(not dados["ddi"], "O DDI é obrigatório.")
        v.when(
            dados["ddi"] and len(dados["ddi"]) > 3,
            "O DDI deve conter entre 1 e 3 dígitos.",
        )
        v.when(not dados["ddd"], "O DDD é obrigatório.")
        v.when(
            dados["ddd"] and len(dados["ddd"]) != 2,
            "O DDD deve conter 2 dígitos.",
        )
        v.when(not dados["numero"], "O número do telefone é obrigatório.")
        v.when(
            dados["numero"] and len(dados["numero"]) not in (8, 9),
            "O número do telefone deve conter 8 ou 9 dígitos.",
        )
        v.raise_if_any()
        return dados

    @property
    def is_celular(self) -> bool:
        return len(self.numero) == 9

    @property
    def is_fixo(self) -> bool:
        return len(self.numero) == 8

    @property
    def numero_formatado(self) -> str:
        return format_phone_with_ddd(self.ddd, self.numero)

    def __str__(self) -> str:
        return f"+{self.ddi} {self.numero_formatado}"


@dataclass(eq=False)
class EnderecoEntity(Entidade):
    """
    Endereço brasileiro.

    Normalização:
    - Rua, bairro e cidade em Title Case
    - UF em maiúsculas
    - CEP somente dígitos
    """

    rua: str = ""
    numero: str = ""
    complemento: Optional[str] = None
    bairro: str = ""
    cep: str = ""
    cidade: str = ""
    estado: str = ""

    RUA_MAX_LENGTH = 200
    NUMERO_MAX_LENGTH = 20
    COMPLEMENTO_MAX_LENGTH = 100
    BAIRRO_MAX_LENGTH = 100
    CIDADE_MAX_LENGTH = 100

    @classmethod
    def criar(
        cls,
        rua: str,
        numero: str,
        bairro: str,
        cep: str,
        cidade: str,
        estado: str,
        complemento: Optional[str] = None,
    ) -> "EnderecoEntity":
        return cls(**cls._preparar(rua, numero, bairro, cep, cidade, estado, complemento))

    def atualizar(
        self,
        rua: str,
        numero: str,
        bairro: str,
        cep: str,
        cidade: str,
        estado: str,
        complemento: Optional[str] = None,
    ) -> None:
        dados = self._preparar(rua, numero, bairro, cep, cidade, estado, complemento)
        for campo, valor in dados.items():
            setattr(self, campo, valor)
        self._tocar()

    @classmethod
    def _preparar(
        cls,
        rua: str,
        numero: str,
        bairro: str,
        cep: str,
        cidade: str,
        estado: str,
        complemento: Optional[str],
    ) -> Dict[str, Any]:
        complemento = remove_double_spaces(complemento)
        dados = {
            "rua": to_title_case(remove_double_spaces(rua)),
            "numero": remove_double_spaces(numero),
            "complemento": complemento or None,
            "bairro": to_title_case(remove_double_spaces(bairro)),
            "cep": get_only_numbers(cep),
            "cidade": to_title_case(remove_double_spaces(cidade)),
            "estado": remove_double_spaces(estado).upper(),
        }
        cls._validar(dados)
        return dados

    @classmethod
    def _validar(cls, dados: Dict[str, Any]) -> None:
        v = ValidationCollector()

        v.when(not dados["rua"], "A rua é obrigatória.")
        v.when(
            len(dados["rua"]) > cls.RUA_MAX_LENGTH,
            f"A rua deve conter no máximo {cls.RUA_MAX_LENGTH} caracteres.",
        )
        v.when(not dados["numero"], "O número do endereço é obrigatório.")
        v.when(
            len(dados["numero"]) > cls.NUMERO_MAX_LENGTH,
            f"O número do endereço deve conter no máximo {cls.NUMERO_MAX_LENGTH} caracteres.",
        )
        v.when(
            dados["complemento"] and len(dados["complemento"]) > cls.COMPLEMENTO_MAX_LENGTH,
            f"O complemento deve conter no máximo {cls.COMPLEMENTO_MAX_LENGTH} caracteres.",
        )
        v.when(not dados["bairro"], "O bairro é obrigatório.")
        v.when(
            len(dados["bairro"]) > cls.BAIRRO_MAX_LENGTH,
            f"O bairro deve conter no máximo {cls.BAIRRO_MAX_LENGTH} caracteres.",
        )
        v.when(not dados["cep"], "O CEP é obrigatório.")
        v.when(dados["cep"] and not is_cep(dados["cep"]), "O CEP informado é inválido.")
        v.when(not dados["cidade"], "A cidade é obrigatória.")
        v.when(
            len(dados["cidade"]) > cls.CIDADE_MAX_LENGTH,
            f"A cidade deve conter no máximo {cls.CIDADE_MAX_LENGTH} caracteres.",
        )
        v.when(not dados["estado"], "O estado é obrigatório.")
        v.when(dados["estado"] and not is_uf(dados["estado"]), "O estado (UF) informado é inválido.")

        v.raise_if_any()

    @property
    def cep_formatado(self) -> str:
        return format_cep(self.cep)

    def __str__(self) -> str:
        complemento = f", {self.complemento}" if self.complemento else ""
        return (
            f"{self.rua}, {self.numero}{complemento} - {self.bairro}, "
            f"{self.cidade}/{self.estado} - {self.cep_formatado}"
        )
