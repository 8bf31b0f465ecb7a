"""
Entidades do Domínio de Profissionais.

Entidades:
- ProfissionalEntity: Agregado principal (dados pessoais + registro profissional)
- ProfissionalTelefone / ProfissionalEndereco: vínculos com flag principal
- OrganizacaoProfissional: vínculo com organização (Ativo/Inativo)

Variantes (psicólogo, nutricionista) não são subclasses: a validação é
composta por `validar_dados_pessoais` mais a lista de validadores
registrada para o tipo em VALIDADORES_POR_TIPO, derivado de ROTULO_REGISTRO.
Novos tipos entram acrescentando o conselho em ROTULO_REGISTRO; tipo
sem validadores é rejeitado.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple

from src.core.contatos.entities import EnderecoEntity, TelefoneEntity
from src.core.organizacoes.entities import OrganizacaoEntity
from src.core.shared.entities import (
    Entidade,
    VinculoPrincipal,
    adicionar_com_principal,
    definir_principal,
    remover_com_principal,
)
from src.core.shared.exceptions import (
    BusinessRuleViolationError,
    EntityNotFoundError,
    InvalidArgumentError,
)
from src.core.shared.formatters import format_cpf
from src.core.shared.strings import get_only_numbers, remove_double_spaces, to_title_case
from src.core.shared.validation import ValidationCollector
from src.core.shared.validators import is_cpf
from src.core.usuarios.entities import EstadoUsuario, UsuarioEntity


class _EnumTexto(Enum):
    """Enum com conversão a partir do nome ou do valor."""

    @classmethod
    def from_string(cls, value: str):
        """
        Raises:
            ValueError: Se valor inválido
        """
        try:
            return cls[value.upper().replace(" ", "_")]
        except KeyError:
            pass

        for item in cls:
            if item.value.lower() == value.lower():
                return item

        raise ValueError(f"{cls.__name__} inválido: {value}")


class TipoProfissional(_EnumTexto):
    PSICOLOGO = "Psicólogo"
    NUTRICIONISTA = "Nutricionista"


class Genero(_EnumTexto):
    NAO_INFORMADO = "Não informado"
    MASCULINO = "Masculino"
    FEMININO = "Feminino"
    OUTRO = "Outro"


class EstadoProfissional(_EnumTexto):
    ATIVO = "Ativo"
    INATIVO = "Inativo"


class EstadoVinculo(_EnumTexto):
    ATIVO = "Ativo"
    INATIVO = "Inativo"


# =============================================================================
# Validadores compostos
# =============================================================================

NOME_MAX_LENGTH = 150
RG_MAX_LENGTH = 20
REGISTRO_MIN_LENGTH = 5
REGISTRO_MAX_LENGTH = 20
IDADE_MAXIMA_ANOS = 150

ValidadorProfissional = Callable[[Dict[str, Any], ValidationCollector], None]


def _anos_atras(referencia: date, anos: int) -> date:
    try:
        return referencia.replace(year=referencia.year - anos)
    except ValueError:
        # 29/02 em ano não bissexto
        return referencia.replace(year=referencia.year - anos, day=28)


def validar_dados_pessoais(dados: Dict[str, Any], v: ValidationCollector) -> None:
    """Validação base comum a todo profissional (dados de pessoa)."""
    v.when(not dados["nome"], "O nome é obrigatório.")
    v.when(
        len(dados["nome"]) > NOME_MAX_LENGTH,
        f"O nome deve conter no máximo {NOME_MAX_LENGTH} caracteres.",
    )
    v.when(not dados["cpf"], "O CPF é obrigatório.")
    v.when(dados["cpf"] and not is_cpf(dados["cpf"]), "O CPF informado é inválido.")
    v.when(
        dados["rg"] and len(dados["rg"]) > RG_MAX_LENGTH,
        f"O RG deve conter no máximo {RG_MAX_LENGTH} caracteres.",
    )

    nascimento = dados["data_nascimento"]
    if nascimento is not None:
        hoje = date.today()
        v.when(nascimento > hoje, "A data de nascimento não pode ser futura.")
        v.when(
            nascimento < _anos_atras(hoje, IDADE_MAXIMA_ANOS),
            "A data de nascimento é inválida.",
        )

    v.when(not isinstance(dados["genero"], Genero), "O gênero informado é inválido.")
    v.when(
        not isinstance(dados["estado"], EstadoProfissional),
        "O estado do profissional é inválido.",
    )


def validador_de_registro(rotulo: str) -> ValidadorProfissional:
    """Cria validador do número de registro no conselho (CRP, CRN, ...)."""

    def validar(dados: Dict[str, Any], v: ValidationCollector) -> None:
        registro = dados["registro_profissional"]
        v.when(not registro, f"O {rotulo} é obrigatório.")
        v.when(
            registro and len(registro) < REGISTRO_MIN_LENGTH,
            f"O {rotulo} deve conter pelo menos {REGISTRO_MIN_LENGTH} caracteres.",
        )
        v.when(
            len(registro) > REGISTRO_MAX_LENGTH,
            f"O {rotulo} deve conter no máximo {REGISTRO_MAX_LENGTH} caracteres.",
        )

    validar.__name__ = f"validar_{rotulo.lower()}"
    return validar


ROTULO_REGISTRO: Dict[TipoProfissional, str] = {
    TipoProfissional.PSICOLOGO: "CRP",
    TipoProfissional.NUTRICIONISTA: "CRN",
}

VALIDADORES_POR_TIPO: Dict[TipoProfissional, Tuple[ValidadorProfissional, ...]] = {
    tipo: (validador_de_registro(rotulo),) for tipo, rotulo in ROTULO_REGISTRO.items()
}


def validadores_do_tipo(tipo: TipoProfissional) -> Tuple[ValidadorProfissional, ...]:
    """
    Raises:
        InvalidArgumentError: Se o tipo não tiver validadores registrados
    """
    validadores = VALIDADORES_POR_TIPO.get(tipo)
    if not validadores:
        raise InvalidArgumentError(
            f"Nenhum validador registrado para o tipo de profissional: {tipo.value}",
            field="tipo",
        )
    return validadores


# =============================================================================
# Entidades de relação
# =============================================================================

@dataclass(eq=False)
class ProfissionalTelefone(VinculoPrincipal):
    profissional_id: str = ""
    telefone: Optional[TelefoneEntity] = None


@dataclass(eq=False)
class ProfissionalEndereco(VinculoPrincipal):
    profissional_id: str = ""
    endereco: Optional[EnderecoEntity] = None


@dataclass(eq=False)
class OrganizacaoProfissional(Entidade):
    """Vínculo entre profissional e organização."""

    organizacao_id: str = ""
    profissional_id: str = ""
    organizacao: Optional[OrganizacaoEntity] = None
    estado: EstadoVinculo = EstadoVinculo.ATIVO

    def ativar(self) -> None:
        self.estado = EstadoVinculo.ATIVO
        self._tocar()

    def desativar(self) -> None:
        self.estado = EstadoVinculo.INATIVO
        self._tocar()

    @property
    def esta_ativo(self) -> bool:
        return self.estado == EstadoVinculo.ATIVO


# =============================================================================
# Agregado
# =============================================================================

@dataclass(eq=False)
class ProfissionalEntity(Entidade):
    """
    Entidade de Domínio: Profissional de saúde.

    Invariantes:
    - Nome obrigatório (até 150), CPF válido, RG até 20 dígitos
    - Data de nascimento não futura e no máximo 150 anos atrás
    - Registro profissional conforme validadores do tipo
    - No máximo um telefone e um endereço principal
    - Profissionais não são removidos fisicamente: desativar()

    Example:
        profissional = ProfissionalEntity.criar(
            tipo=TipoProfissional.PSICOLOGO,
            nome="maria  oliveira",
            cpf="529.982.247-25",
            registro_profissional="06/12345",
        )
        profissional.nome  # "Maria Oliveira"
        profissional.cpf   # "52998224725"
    """

    nome: str = ""
    cpf: str = ""
    rg: Optional[str] = None
    data_nascimento: Optional[date] = None
    genero: Genero = Genero.NAO_INFORMADO
    estado: EstadoProfissional = EstadoProfissional.ATIVO
    tipo: TipoProfissional = TipoProfissional.PSICOLOGO
    registro_profissional: str = ""
    usuario: Optional[UsuarioEntity] = None
    telefones: List[ProfissionalTelefone] = field(default_factory=list)
    enderecos: List[ProfissionalEndereco] = field(default_factory=list)
    organizacoes: List[OrganizacaoProfissional] = field(default_factory=list)

    @classmethod
    def criar(
        cls,
        tipo: TipoProfissional,
        nome: str,
        cpf: str,
        registro_profissional: str,
        rg: Optional[str] = None,
        data_nascimento: Optional[date] = None,
        genero: Genero = Genero.NAO_INFORMADO,
        estado: EstadoProfissional = EstadoProfissional.ATIVO,
    ) -> "ProfissionalEntity":
        """
        Factory method para criar profissional validado.

        Raises:
            InvalidArgumentError: Se tipo não for TipoProfissional
            DomainValidationError: Com todas as violações encontradas
        """
        dados = cls._preparar(
            tipo, nome, cpf, registro_profissional, rg, data_nascimento, genero, estado
        )
        return cls(tipo=tipo, **dados)

    def atualizar(
        self,
        nome: str,
        cpf: str,
        registro_profissional: str,
        rg: Optional[str] = None,
        data_nascimento: Optional[date] = None,
        genero: Genero = Genero.NAO_INFORMADO,
        estado: EstadoProfissional = EstadoProfissional.ATIVO,
    ) -> None:
        """Atualiza dados; o tipo do profissional não muda."""
        dados = self._preparar(
            self.tipo, nome, cpf, registro_profissional, rg, data_nascimento, genero, estado
        )
        for campo, valor in dados.items():
            setattr(self, campo, valor)
        self._tocar()

    @classmethod
    def _preparar(
        cls,
        tipo: TipoProfissional,
        nome: str,
        cpf: str,
        registro_profissional: str,
        rg: Optional[str],
        data_nascimento: Optional[date],
        genero: Genero,
        estado: EstadoProfissional,
    ) -> Dict[str, Any]:
        if not isinstance(tipo, TipoProfissional):
            raise InvalidArgumentError("O tipo de profissional é inválido.", field="tipo")

        if isinstance(data_nascimento, datetime):
            data_nascimento = data_nascimento.date()

        dados = {
            "nome": to_title_case(remove_double_spaces(nome)),
            "cpf": get_only_numbers(cpf),
            "rg": get_only_numbers(rg) or None,
            "data_nascimento": data_nascimento,
            "genero": genero,
            "estado": estado,
            "registro_profissional": remove_double_spaces(registro_profissional).upper(),
        }

        v = ValidationCollector()
        validar_dados_pessoais(dados, v)
        for validador in validadores_do_tipo(tipo):
            validador(dados, v)
        v.raise_if_any()
        return dados

    # =========================================================================
    # Usuário
    # =========================================================================

    def adicionar_usuario(self, usuario: UsuarioEntity) -> None:
        """
        Associa a conta de acesso do profissional.

        Raises:
            BusinessRuleViolationError: Se já houver usuário associado
        """
        if usuario is None:
            raise InvalidArgumentError("O usuário é obrigatório.", field="usuario")
        if self.usuario is not None:
            raise BusinessRuleViolationError(
                "Um usuário já está associado a este profissional.",
                rule="usuario_unico",
            )
        self.usuario = usuario
        self._tocar()

    def definir_estado_usuario(self, estado: EstadoUsuario) -> None:
        if self.usuario is None:
            raise BusinessRuleViolationError(
                "Nenhum usuário associado a este profissional.",
                rule="usuario_obrigatorio",
            )
        transicoes = {
            EstadoUsuario.ATIVO: self.usuario.ativar,
            EstadoUsuario.INATIVO: self.usuario.desativar,
            EstadoUsuario.BLOQUEADO: self.usuario.bloquear,
        }
        if estado not in transicoes:
            raise InvalidArgumentError("Estado de usuário inválido.", field="estado")
        transicoes[estado]()
        self._tocar()

    # =========================================================================
    # Telefones e endereços
    # =========================================================================

    def adicionar_telefone(
        self, telefone: TelefoneEntity, is_principal: bool = False
    ) -> ProfissionalTelefone:
        if telefone is None:
            raise InvalidArgumentError("O telefone é obrigatório.", field="telefone")
        vinculo = ProfissionalTelefone(
            profissional_id=self.id, telefone=telefone, is_principal=is_principal
        )
        adicionar_com_principal(self.telefones, vinculo)
        self._tocar()
        return vinculo

    def remover_telefone(self, vinculo_id: str) -> ProfissionalTelefone:
        removido = remover_com_principal(self.telefones, vinculo_id, "Telefone do profissional")
        self._tocar()
        return removido

    def definir_telefone_principal(self, vinculo_id: str) -> ProfissionalTelefone:
        vinculo = definir_principal(self.telefones, vinculo_id, "Telefone do profissional")
        self._tocar()
        return vinculo

    def adicionar_endereco(
        self, endereco: EnderecoEntity, is_principal: bool = False
    ) -> ProfissionalEndereco:
        if endereco is None:
            raise InvalidArgumentError("O endereço é obrigatório.", field="endereco")
        vinculo = ProfissionalEndereco(
            profissional_id=self.id, endereco=endereco, is_principal=is_principal
        )
        adicionar_com_principal(self.enderecos, vinculo)
        self._tocar()
        return vinculo

    def remover_endereco(self, vinculo_id: str) -> ProfissionalEndereco:
        removido = remover_com_principal(self.enderecos, vinculo_id, "Endereço do profissional")
        self._tocar()
        return removido

    @property
    def telefone_principal(self) -> Optional[ProfissionalTelefone]:
        return next((t for t in self.telefones if t.is_principal), None)

    @property
    def endereco_principal(self) -> Optional[ProfissionalEndereco]:
        return next((e for e in self.enderecos if e.is_principal), None)

    # =========================================================================
    # Organizações
    # =========================================================================

    def adicionar_organizacao(self, organizacao: OrganizacaoEntity) -> OrganizacaoProfissional:
        """
        Vincula o profissional a uma organização.

        Raises:
            BusinessRuleViolationError: Se a organização já estiver vinculada
        """
        if organizacao is None:
            raise InvalidArgumentError("A organização é obrigatória.", field="organizacao")
        if any(o.organizacao_id == organizacao.id for o in self.organizacoes):
            raise BusinessRuleViolationError(
                "A organização já está associada a este profissional.",
                rule="organizacao_unica",
            )

        vinculo = OrganizacaoProfissional(
            organizacao_id=organizacao.id,
            profissional_id=self.id,
            organizacao=organizacao,
        )
        self.organizacoes.append(vinculo)
        self._tocar()
        return vinculo

    def remover_organizacao(self, organizacao_id: str) -> OrganizacaoProfissional:
        for indice, vinculo in enumerate(self.organizacoes):
            if vinculo.organizacao_id == organizacao_id:
                self._tocar()
                return self.organizacoes.pop(indice)
        raise EntityNotFoundError("Organização do profissional", organizacao_id)

    # =========================================================================
    # Estado
    # =========================================================================

    def ativar(self) -> None:
        self.estado = EstadoProfissional.ATIVO
        self._tocar()

    def desativar(self) -> None:
        self.estado = EstadoProfissional.INATIVO
        self._tocar()

    @property
    def esta_ativo(self) -> bool:
        return self.estado == EstadoProfissional.ATIVO

    @property
    def rotulo_registro(self) -> str:
        return ROTULO_REGISTRO[self.tipo]

    @property
    def cpf_formatado(self) -> str:
        return format_cpf(self.cpf)
