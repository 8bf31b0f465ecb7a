"""
Formatação de documentos e telefones brasileiros.

Todas as funções retornam string vazia quando a entrada não tem a
quantidade de dígitos esperada.
"""

from typing import Optional

from .strings import get_only_numbers


def format_cep(value: Optional[str]) -> str:
    """01310100 → 01310-100"""
    digits = get_only_numbers(value)
    if len(digits) != 8:
        return ""
    return f"{digits[:5]}-{digits[5:]}"


def format_cpf(value: Optional[str]) -> str:
    """12345678901 → 123.456.789-01"""
    digits = get_only_numbers(value)
    if len(digits) != 11:
        return ""
    return f"{digits[:3]}.{digits[3:6]}.{digits[6:9]}-{digits[9:]}"


def format_cnpj(value: Optional[str]) -> str:
    """11222333000181 → 11.222.333/0001-81"""
    digits = get_only_numbers(value)
    if len(digits) != 14:
        return ""
    return f"{digits[:2]}.{digits[2:5]}.{digits[5:8]}/{digits[8:12]}-{digits[12:]}"


def format_cpf_or_cnpj(value: Optional[str]) -> str:
    digits = get_only_numbers(value)
    if len(digits) == 11:
        return format_cpf(digits)
    if len(digits) == 14:
        return format_cnpj(digits)
    return ""


def format_phone(value: Optional[str]) -> str:
    """
    Formata telefone conforme a quantidade de dígitos.

    - 8: XXXX-XXXX
    - 9: XXXXX-XXXX
    - 10: (XX) XXXX-XXXX
    - 11: (XX) XXXXX-XXXX
    """
    digits = get_only_numbers(value)
    if len(digits) in (8, 9):
        return f"{digits[:-4]}-{digits[-4:]}"
    if len(digits) in (10, 11):
        return f"({digits[:2]}) {digits[2:-4]}-{digits[-4:]}"
    return ""


def format_phone_with_ddd(ddd: Optional[str], number: Optional[str]) -> str:
    ddd_digits = get_only_numbers(ddd)
    numero = format_phone(number)
    if len(ddd_digits) != 2 or not numero or len(get_only_numbers(number)) > 9:
        return ""
    return f"({ddd_digits}) {numero}"


def format_phone_with_ddi_and_ddd(
    ddi: Optional[str], ddd: Optional[str], number: Optional[str]
) -> str:
    ddi_digits = get_only_numbers(ddi)
    com_ddd = format_phone_with_ddd(ddd, number)
    if not 1 <= len(ddi_digits) <= 3 or not com_ddd:
        return ""
    return f"+{ddi_digits} {com_ddd}"
