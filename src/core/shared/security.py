"""
Helpers de segurança: hash de senhas, força de senha e tokens.

Responsabilidades:
- Hash PBKDF2-HMAC-SHA256 com salt aleatório por senha
- Verificação em tempo constante
- Política de senha configurável (PoliticaSenha)
- Geração de strings e tokens aleatórios seguros

Formato do hash armazenado:
    pbkdf2_sha256$<iteracoes>$<salt base64>$<hash base64>
"""

import base64
import binascii
import hashlib
import hmac
import secrets
import string
import warnings
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .exceptions import InvalidArgumentError
from .strings import (
    contains_lower_case,
    contains_number,
    contains_special_character,
    contains_upper_case,
    is_blank,
)

PBKDF2_ALGORITHM = "pbkdf2_sha256"
PBKDF2_DEFAULT_ITERATIONS = 100_000
PBKDF2_MIN_ITERATIONS = 10_000
SALT_SIZE = 16
HASH_SIZE = 32

SPECIAL_CHARS = "!@#$%^&*()_+-=[]{}|;:,.<>?"


@dataclass(frozen=True)
class PoliticaSenha:
    """
    Política de senha e custo de hash.

    Valores padrão espelham as configurações de produção; o container
    de DI monta uma instância a partir das settings do Django.
    """

    min_length: int = 8
    max_length: int = 25
    require_uppercase: bool = True
    require_lowercase: bool = True
    require_digit: bool = True
    require_special_char: bool = True
    iteracoes: int = PBKDF2_DEFAULT_ITERATIONS

    def __post_init__(self):
        if self.min_length < 1 or self.max_length < self.min_length:
            raise InvalidArgumentError(
                "Limites de tamanho de senha inválidos", field="min_length"
            )
        if self.iteracoes < PBKDF2_MIN_ITERATIONS:
            raise InvalidArgumentError(
                f"Iterações devem ser no mínimo {PBKDF2_MIN_ITERATIONS}",
                field="iteracoes",
            )

    def is_strong(self, password: Optional[str]) -> bool:
        return is_password_strong(
            password,
            min_length=self.min_length,
            require_uppercase=self.require_uppercase,
            require_lowercase=self.require_lowercase,
            require_digit=self.require_digit,
            require_special_char=self.require_special_char,
        )


POLITICA_SENHA_PADRAO = PoliticaSenha()


# =============================================================================
# PBKDF2
# =============================================================================

def _b64encode(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def hash_password_pbkdf2(
    password: Optional[str], iterations: int = PBKDF2_DEFAULT_ITERATIONS
) -> str:
    """
    Gera hash PBKDF2 da senha com salt aleatório de 16 bytes.

    Args:
        password: Senha em texto puro
        iterations: Número de iterações (mínimo 10000)

    Returns:
        String no formato pbkdf2_sha256$iter$salt$hash

    Raises:
        InvalidArgumentError: Se senha vazia ou iterações abaixo do mínimo
    """
    if is_blank(password):
        raise InvalidArgumentError("A senha não pode ser vazia.", field="password")
    if iterations < PBKDF2_MIN_ITERATIONS:
        raise InvalidArgumentError(
            f"Iterações devem ser no mínimo {PBKDF2_MIN_ITERATIONS}",
            field="iterations",
        )

    salt = secrets.token_bytes(SALT_SIZE)
    derived = hashlib.pbkdf2_hmac(
        "sha256", password.encode("utf-8"), salt, iterations, dklen=HASH_SIZE
    )
    return f"{PBKDF2_ALGORITHM}${iterations}${_b64encode(salt)}${_b64encode(derived)}"


def verify_password_pbkdf2(password: Optional[str], stored_hash: Optional[str]) -> bool:
    """
    Verifica senha contra hash armazenado em tempo constante.

    Raises:
        InvalidArgumentError: Se argumentos nulos ou hash em formato inválido
    """
    if password is None:
        raise InvalidArgumentError("A senha é obrigatória.", field="password")
    if stored_hash is None:
        raise InvalidArgumentError("O hash é obrigatório.", field="stored_hash")

    parts = stored_hash.split("$")
    if len(parts) != 4 or parts[0] != PBKDF2_ALGORITHM:
        raise InvalidArgumentError("Formato de hash inválido.", field="stored_hash")

    try:
        iterations = int(parts[1])
        salt = base64.b64decode(parts[2], validate=True)
        expected = base64.b64decode(parts[3], validate=True)
    except (ValueError, binascii.Error) as e:
        raise InvalidArgumentError(
            "Formato de hash inválido.", field="stored_hash"
        ) from e

    if iterations < 1 or not salt or not expected:
        raise InvalidArgumentError("Formato de hash inválido.", field="stored_hash")

    derived = hashlib.pbkdf2_hmac(
        "sha256", password.encode("utf-8"), salt, iterations, dklen=len(expected)
    )
    return hmac.compare_digest(derived, expected)


# =============================================================================
# Força de senha
# =============================================================================

def is_password_strong(
    password: Optional[str],
    min_length: int = 8,
    require_uppercase: bool = True,
    require_lowercase: bool = True,
    require_digit: bool = True,
    require_special_char: bool = True,
) -> bool:
    """
    Verifica se a senha atende a todos os critérios habilitados.

    Nunca lança exceção; qualquer critério não atendido retorna False.

    Example:
        is_password_strong("alllowercase1")  # False
        is_password_strong("Str0ng!Pass")    # True
    """
    if is_blank(password) or len(password) < min_length:
        return False
    if require_uppercase and not contains_upper_case(password):
        return False
    if require_lowercase and not contains_lower_case(password):
        return False
    if require_digit and not contains_number(password):
        return False
    if require_special_char and not contains_special_character(password):
        return False
    return True


# =============================================================================
# Hashes e aleatoriedade
# =============================================================================

class HashAlgorithm(Enum):
    """Algoritmos suportados por generate_hash."""

    MD5 = "md5"
    SHA1 = "sha1"
    SHA256 = "sha256"
    SHA384 = "sha384"
    SHA512 = "sha512"

    @property
    def deprecated(self) -> bool:
        return self in (HashAlgorithm.MD5, HashAlgorithm.SHA1)


def generate_hash(value: Optional[str], algorithm: HashAlgorithm = HashAlgorithm.SHA256) -> str:
    """
    Gera hash hexadecimal (minúsculo) de uma string.

    MD5 e SHA1 são aceitos apenas para compatibilidade e emitem
    DeprecationWarning.
    """
    if not value:
        raise InvalidArgumentError("O valor não pode ser vazio.", field="value")

    if algorithm.deprecated:
        warnings.warn(
            f"{algorithm.name} é considerado inseguro; use SHA256 ou superior.",
            DeprecationWarning,
            stacklevel=2,
        )

    return hashlib.new(algorithm.value, value.encode("utf-8")).hexdigest()


def generate_secure_random_string(length: int = 32, include_special_chars: bool = False) -> str:
    """Gera string aleatória criptograficamente segura."""
    if length < 1:
        raise InvalidArgumentError("O tamanho deve ser maior que zero.", field="length")

    alphabet = string.ascii_letters + string.digits
    if include_special_chars:
        alphabet += SPECIAL_CHARS
    return "".join(secrets.choice(alphabet) for _ in range(length))


def generate_security_token() -> str:
    """Token de 32 bytes aleatórios em base64url sem padding."""
    return secrets.token_urlsafe(32)
