"""
Entidades do Domínio de Usuários.

Entidades:
- UsuarioEntity: identidade de autenticação
- EstadoUsuario: Ativo, Inativo, Bloqueado

Regras de Negócio Encapsuladas:
- Nome normalizado em Title Case, e-mail em minúsculas
- Senha validada contra a PoliticaSenha antes do hash
- Senha em texto puro nunca é armazenada (apenas hash PBKDF2)
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

from src.core.shared.entities import Entidade
from src.core.shared.exceptions import DomainValidationError
from src.core.shared.security import (
    POLITICA_SENHA_PADRAO,
    PoliticaSenha,
    hash_password_pbkdf2,
    verify_password_pbkdf2,
)
from src.core.shared.strings import (
    is_blank,
    is_length_between,
    remove_all_spaces,
    remove_double_spaces,
    to_title_case,
)
from src.core.shared.validation import ValidationCollector
from src.core.shared.validators import is_email


class EstadoUsuario(Enum):
    """Estados possíveis de uma conta de usuário."""

    ATIVO = "Ativo"
    INATIVO = "Inativo"
    BLOQUEADO = "Bloqueado"

    @classmethod
    def from_string(cls, value: str) -> "EstadoUsuario":
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

        raise ValueError(f"Estado de usuário inválido: {value}")


def _mensagem_forca_senha(politica: PoliticaSenha) -> str:
    exigencias = []
    if politica.require_uppercase:
        exigencias.append("letras maiúsculas")
    if politica.require_lowercase:
        exigencias.append("letras minúsculas")
    if politica.require_digit:
        exigencias.append("números")
    if politica.require_special_char:
        exigencias.append("caracteres especiais")
    if not exigencias:
        return "A senha não atende aos requisitos de segurança."
    if len(exigencias) == 1:
        return f"A senha deve conter {exigencias[0]}."
    return f"A senha deve conter {', '.join(exigencias[:-1])} e {exigencias[-1]}."


def validar_senha(senha: Optional[str], politica: PoliticaSenha, v: ValidationCollector) -> None:
    """Registra no coletor as violações da política de senha."""
    if is_blank(senha):
        v.add("A senha é obrigatória.")
        return
    v.when(
        not is_length_between(senha, politica.min_length, politica.max_length),
        f"A senha deve conter entre {politica.min_length} e {politica.max_length} caracteres.",
    )
    v.when(not politica.is_strong(senha), _mensagem_forca_senha(politica))


@dataclass(eq=False)
class UsuarioEntity(Entidade):
    """
    Entidade de Domínio: Usuário.

    Invariantes:
    - Nome obrigatório, até 100 caracteres
    - E-mail obrigatório, válido, até 100 caracteres
    - senha_hash sempre no formato PBKDF2

    Example:
        usuario = UsuarioEntity.criar(
            nome="ana  souza",
            email="Ana@Clinica.com",
            senha="SenhaForte@123",
        )
        usuario.nome                              # "Ana Souza"
        usuario.email                             # "ana@clinica.com"
        usuario.verificar_senha("SenhaForte@123") # True
    """

    nome: str = ""
    email: str = ""
    senha_hash: str = field(default="", repr=False)
    estado: EstadoUsuario = EstadoUsuario.ATIVO

    NOME_MAX_LENGTH = 100
    EMAIL_MAX_LENGTH = 100

    @classmethod
    def criar(
        cls,
        nome: str,
        email: str,
        senha: str,
        estado: EstadoUsuario = EstadoUsuario.ATIVO,
        politica: Optional[PoliticaSenha] = None,
    ) -> "UsuarioEntity":
        """
        Factory method para criar usuário validado.

        Raises:
            DomainValidationError: Se dados ou senha inválidos
        """
        politica = politica or POLITICA_SENHA_PADRAO
        dados = cls._preparar(nome, email, estado, senha, politica, exigir_senha=True)
        return cls(**dados)

    def atualizar(
        self,
        nome: str,
        email: str,
        estado: EstadoUsuario,
        senha: Optional[str] = None,
        politica: Optional[PoliticaSenha] = None,
    ) -> None:
        """
        Atualiza dados do usuário.

        Se `senha` for None o hash atual é mantido.
        """
        politica = politica or POLITICA_SENHA_PADRAO
        dados = self._preparar(nome, email, estado, senha, politica, exigir_senha=False)
        for campo, valor in dados.items():
            setattr(self, campo, valor)
        self._tocar()

    @classmethod
    def _preparar(
        cls,
        nome: str,
        email: str,
        estado: EstadoUsuario,
        senha: Optional[str],
        politica: PoliticaSenha,
        exigir_senha: bool,
    ) -> Dict[str, Any]:
        dados: Dict[str, Any] = {
            "nome": to_title_case(remove_double_spaces(nome)),
            "email": remove_all_spaces(email).lower(),
            "estado": estado,
        }

        v = ValidationCollector()
        v.when(not dados["nome"], "O nome é obrigatório.")
        v.when(
            len(dados["nome"]) > cls.NOME_MAX_LENGTH,
            f"O nome deve conter no máximo {cls.NOME_MAX_LENGTH} caracteres.",
        )
        v.when(not dados["email"], "O e-mail é obrigatório.")
        v.when(
            len(dados["email"]) > cls.EMAIL_MAX_LENGTH,
            f"O e-mail deve conter no máximo {cls.EMAIL_MAX_LENGTH} caracteres.",
        )
        v.when(dados["email"] and not is_email(dados["email"]), "O e-mail informado é inválido.")
        v.when(not isinstance(estado, EstadoUsuario), "O estado do usuário é inválido.")
        if exigir_senha or senha is not None:
            validar_senha(senha, politica, v)
        v.raise_if_any()

        if senha is not None:
            dados["senha_hash"] = hash_password_pbkdf2(senha, politica.iteracoes)
        return dados

    # =========================================================================
    # Senha
    # =========================================================================

    def verificar_senha(self, senha: Optional[str]) -> bool:
        """Verifica a senha; vazia ou sem hash cadastrado retorna False."""
        if is_blank(senha) or not self.senha_hash:
            return False
        return verify_password_pbkdf2(senha, self.senha_hash)

    def alterar_senha(
        self,
        senha_atual: str,
        nova_senha: str,
        politica: Optional[PoliticaSenha] = None,
    ) -> None:
        """
        Troca a senha após confirmar a senha atual.

        Raises:
            DomainValidationError: Se senha atual incorreta ou nova inválida
        """
        if not self.verificar_senha(senha_atual):
            raise DomainValidationError(["A senha atual está incorreta."])

        politica = politica or POLITICA_SENHA_PADRAO
        v = ValidationCollector()
        validar_senha(nova_senha, politica, v)
        v.raise_if_any()

        self.senha_hash = hash_password_pbkdf2(nova_senha, politica.iteracoes)
        self._tocar()

    # =========================================================================
    # Estado
    # =========================================================================

    def ativar(self) -> None:
        self.estado = EstadoUsuario.ATIVO
        self._tocar()

    def desativar(self) -> None:
        self.estado = EstadoUsuario.INATIVO
        self._tocar()

    def bloquear(self) -> None:
        self.estado = EstadoUsuario.BLOQUEADO
        self._tocar()

    @property
    def esta_ativo(self) -> bool:
        return self.estado == EstadoUsuario.ATIVO
