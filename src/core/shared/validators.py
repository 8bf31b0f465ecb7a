"""
Validadores de formatos brasileiros e de e-mail.

Funções puras:
- is_cpf / is_cnpj / is_cpf_or_cnpj: dígitos verificadores oficiais (módulo 11)
- is_email: e-mail com limites de tamanho, verificado em tempo linear
- is_cep, is_phone, is_uf: formatos simples
"""

import re
from typing import Optional, Sequence

from .strings import get_only_numbers, is_blank

# =============================================================================
# CPF / CNPJ
# =============================================================================

CPF_MULTIPLICADORES_1 = (10, 9, 8, 7, 6, 5, 4, 3, 2)
CPF_MULTIPLICADORES_2 = (11, 10, 9, 8, 7, 6, 5, 4, 3, 2)
CNPJ_MULTIPLICADORES_1 = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
CNPJ_MULTIPLICADORES_2 = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)

CPF_LENGTH = 11
CNPJ_LENGTH = 14

# Sequências de dígito repetido passam no módulo 11 mas não são documentos
CPF_BLACKLIST = frozenset(str(d) * CPF_LENGTH for d in range(10))
CNPJ_BLACKLIST = frozenset(str(d) * CNPJ_LENGTH for d in range(10))


def _digito_verificador(digits: str, multiplicadores: Sequence[int]) -> int:
    soma = sum(int(d) * m for d, m in zip(digits, multiplicadores))
    resto = soma % 11
    return 0 if resto < 2 else 11 - resto


def _documento_valido(
    value: Optional[str],
    length: int,
    blacklist: frozenset,
    mult1: Sequence[int],
    mult2: Sequence[int],
) -> bool:
    digits = get_only_numbers(value)
    if len(digits) != length or digits in blacklist:
        return False

    base = digits[: length - 2]
    primeiro = _digito_verificador(base, mult1)
    segundo = _digito_verificador(base + str(primeiro), mult2)
    return digits[-2:] == f"{primeiro}{segundo}"


def is_cpf(value: Optional[str]) -> bool:
    """
    Valida CPF (aceita com ou sem pontuação).

    Example:
        is_cpf("529.982.247-25")  # True
        is_cpf("111.111.111-11")  # False (blacklist)
    """
    return _documento_valido(
        value, CPF_LENGTH, CPF_BLACKLIST, CPF_MULTIPLICADORES_1, CPF_MULTIPLICADORES_2
    )


def is_cnpj(value: Optional[str]) -> bool:
    """
    Valida CNPJ (aceita com ou sem pontuação).

    Example:
        is_cnpj("11.222.333/0001-81")  # True
    """
    return _documento_valido(
        value, CNPJ_LENGTH, CNPJ_BLACKLIST, CNPJ_MULTIPLICADORES_1, CNPJ_MULTIPLICADORES_2
    )


def is_cpf_or_cnpj(value: Optional[str]) -> bool:
    digits = get_only_numbers(value)
    if len(digits) == CPF_LENGTH:
        return is_cpf(digits)
    if len(digits) == CNPJ_LENGTH:
        return is_cnpj(digits)
    return False


# =============================================================================
# E-mail
# =============================================================================

EMAIL_MAX_LENGTH = 254
EMAIL_LOCAL_MAX_LENGTH = 64
EMAIL_DOMAIN_MAX_LENGTH = 253

# Classes simples, sem quantificadores aninhados: casamento em tempo linear
_EMAIL_LOCAL_RE = re.compile(r"[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+")
_EMAIL_LABEL_RE = re.compile(r"[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?")


def is_email(value: Optional[str]) -> bool:
    """
    Valida e-mail no formato local@dominio.

    Regras:
    - Até 254 caracteres no total
    - Exatamente um '@', que não pode ser o primeiro caractere
    - Parte local com 1 a 64 caracteres
    - Domínio com 1 a 253 caracteres, rótulos separados por '.'
    """
    if is_blank(value) or len(value) > EMAIL_MAX_LENGTH:
        return False
    if value.count("@") != 1:
        return False

    local, _, domain = value.partition("@")
    if not 1 <= len(local) <= EMAIL_LOCAL_MAX_LENGTH:
        return False
    if not 1 <= len(domain) <= EMAIL_DOMAIN_MAX_LENGTH:
        return False

    if not _EMAIL_LOCAL_RE.fullmatch(local):
        return False
    return all(_EMAIL_LABEL_RE.fullmatch(label) for label in domain.split("."))


# =============================================================================
# CEP / Telefone / UF
# =============================================================================

UFS = frozenset({
    "AC", "AL", "AP", "AM", "BA", "CE", "DF", "ES", "GO", "MA", "MT", "MS",
    "MG", "PA", "PB", "PR", "PE", "PI", "RJ", "RN", "RS", "RO", "RR", "SC",
    "SP", "SE", "TO",
})


def is_cep(value: Optional[str]) -> bool:
    return len(get_only_numbers(value)) == 8


def is_phone(value: Optional[str]) -> bool:
    """Telefone com 8 ou 9 dígitos, opcionalmente precedido do DDD."""
    return len(get_only_numbers(value)) in (8, 9, 10, 11)


def is_uf(value: Optional[str]) -> bool:
    return not is_blank(value) and value.strip().upper() in UFS
