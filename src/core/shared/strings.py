"""
Helpers de normalização de strings.

Funções puras, sem estado, usadas pelas entidades na etapa de
normalização (antes da validação).
"""

import unicodedata
from typing import Optional


def is_blank(value: Optional[str]) -> bool:
    """Verdadeiro para None, string vazia ou apenas espaços."""
    return value is None or not value.strip()


def to_first_letter_upper(value: Optional[str]) -> str:
    """Primeira letra maiúscula, restante inalterado."""
    if not value:
        return ""
    return value[0].upper() + value[1:]


def to_title_case(value: Optional[str]) -> str:
    """
    Converte para Title Case palavra a palavra.

    Espaços extras são descartados.

    Example:
        to_title_case("JOÃO  SILVA")  # "João Silva"
    """
    if not value:
        return ""
    palavras = [p for p in value.split(" ") if p]
    return " ".join(p[0].upper() + p[1:].lower() for p in palavras)


def to_sentence_case(value: Optional[str]) -> str:
    if not value:
        return ""
    return value[0].upper() + value[1:].lower()


def remove_double_spaces(value: Optional[str]) -> str:
    """Colapsa sequências de espaços em um só e remove bordas."""
    if not value:
        return ""
    return " ".join(p for p in value.split(" ") if p).strip()


def remove_all_spaces(value: Optional[str]) -> str:
    if not value:
        return ""
    return "".join(value.split())


def is_length_between(value: Optional[str], min_length: int, max_length: int) -> bool:
    length = len(value) if value is not None else 0
    return min_length <= length <= max_length


def get_only_numbers(value: Optional[str]) -> str:
    """Mantém apenas dígitos ASCII."""
    if not value:
        return ""
    return "".join(c for c in value if "0" <= c <= "9")


def contains_number(value: Optional[str]) -> bool:
    return bool(value) and any(c.isdigit() for c in value)


def contains_upper_case(value: Optional[str]) -> bool:
    return bool(value) and any(c.isupper() for c in value)


def contains_lower_case(value: Optional[str]) -> bool:
    return bool(value) and any(c.islower() for c in value)


def contains_letter(value: Optional[str]) -> bool:
    return bool(value) and any(c.isalpha() for c in value)


def contains_special_character(value: Optional[str]) -> bool:
    """Pontuação ou símbolo Unicode (categorias P* e S*)."""
    if not value:
        return False
    return any(unicodedata.category(c)[0] in ("P", "S") for c in value)


def reverse(value: Optional[str]) -> str:
    if not value:
        return ""
    return value[::-1]
