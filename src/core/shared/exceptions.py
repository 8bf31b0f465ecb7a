"""
Exceções de Domínio do SisMed Manager.

Este módulo define exceções específicas do domínio que permitem
comunicar erros de forma clara e tipada entre as camadas.

Hierarquia:
    DomainException (base)
    ├── DomainValidationError (agregado de erros de validação)
    ├── EntityNotFoundError (entidade não existe)
    ├── ConflictError (violação de unicidade)
    ├── UnauthorizedError (falha de credenciais)
    ├── InvalidArgumentError (uso incorreto pelo chamador)
    └── BusinessRuleViolationError (regra de negócio violada)
"""

from typing import Iterable, List, Optional


class DomainException(Exception):
    """
    Exceção base para todos os erros de domínio.

    Todas as exceções específicas do domínio devem herdar desta classe.
    Isso permite capturar qualquer erro de domínio de forma genérica.

    Example:
        try:
            organizacao.atualizar(...)
        except DomainException as e:
            logger.error(f"Erro de domínio: {e}")
    """

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict:
        """Serializa exceção para dicionário (útil para APIs)."""
        return {
            "error": self.code,
            "message": self.message,
        }


class DomainValidationError(DomainException):
    """
    Agregado de uma ou mais violações de validação.

    Lançada por ValidationCollector.raise_if_any() ao final da
    validação de uma entidade. Carrega a lista ordenada de mensagens
    para que o chamador possa corrigir todos os campos de uma vez.

    Example:
        raise DomainValidationError([
            "O nome é obrigatório.",
            "O CPF informado é inválido.",
        ])
    """

    HEADER = "Um ou mais erros de validação de domínio ocorreram:"

    def __init__(self, errors: Iterable[str]):
        self.errors: List[str] = list(errors)
        message = self.HEADER + "".join(f"\n- {erro}" for erro in self.errors)
        super().__init__(message, "DOMAIN_VALIDATION_ERROR")

    def to_dict(self) -> dict:
        result = super().to_dict()
        result["errors"] = list(self.errors)
        return result


class EntityNotFoundError(DomainException):
    """
    Entidade não encontrada no repositório.

    Lançada quando uma busca por identificador não retorna resultado.

    Example:
        usuario = repo.get_by_id(usuario_id)
        if not usuario:
            raise EntityNotFoundError("Usuário", usuario_id)
    """

    def __init__(self, entity_type: str, entity_id: str, message: str = None):
        self.entity_type = entity_type
        self.entity_id = entity_id
        message = message or (
            f"{entity_type} com identificador '{entity_id}' não foi encontrado(a)."
        )
        super().__init__(message, "ENTITY_NOT_FOUND")

    def to_dict(self) -> dict:
        result = super().to_dict()
        result["entity_type"] = self.entity_type
        result["entity_id"] = self.entity_id
        return result


class ConflictError(DomainException):
    """
    Violação de unicidade (documento, e-mail ou razão social duplicados).

    Pode carregar vários conflitos detectados de uma vez; a mensagem
    principal é a junção deles separada por "; ".

    Example:
        raise ConflictError.para_campo("Usuário", "e-mail", "ana@clinica.com")
    """

    def __init__(self, message: str = None, conflitos: Iterable[str] = None):
        self.conflitos: List[str] = list(conflitos or [])
        if message is None:
            message = "; ".join(self.conflitos)
        if not self.conflitos:
            self.conflitos = [message]
        super().__init__(message, "CONFLICT")

    @classmethod
    def para_campo(cls, recurso: str, campo: str, valor: str) -> "ConflictError":
        """Cria conflito para um único campo já existente."""
        return cls(f"{recurso} com {campo} '{valor}' já existe.")

    def to_dict(self) -> dict:
        result = super().to_dict()
        result["conflitos"] = list(self.conflitos)
        return result


class UnauthorizedError(DomainException):
    """Falha de autenticação (credenciais inválidas ou usuário sem acesso)."""

    def __init__(self, message: str = "Credenciais inválidas."):
        super().__init__(message, "UNAUTHORIZED")


class InvalidArgumentError(DomainException, ValueError):
    """
    Uso incorreto por parte do chamador.

    Indica bug do chamador (dependência nula, enum inválido, hash
    malformado), não uma violação de domínio. Também é ValueError
    para manter compatibilidade com código que captura ValueError.
    """

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        code = f"INVALID_ARGUMENT_{field.upper()}" if field else "INVALID_ARGUMENT"
        super().__init__(message, code)

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.field:
            result["field"] = self.field
        return result


class BusinessRuleViolationError(DomainException):
    """
    Violação de regra de negócio.

    Lançada quando uma operação viola uma regra de negócio
    estabelecida no domínio.

    Example:
        if profissional.usuario is not None:
            raise BusinessRuleViolationError(
                "Um usuário já está associado a este profissional.",
                rule="usuario_unico",
            )
    """

    def __init__(self, message: str, rule: str = None):
        self.rule = rule
        super().__init__(message, "BUSINESS_RULE_VIOLATION")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.rule:
            result["rule"] = self.rule
        return result
