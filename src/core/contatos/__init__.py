"""
Domínio de Contatos.

Telefones e endereços compartilhados por organizações e profissionais.
"""

from .entities import TelefoneEntity, EnderecoEntity

__all__ = [
    "TelefoneEntity",
    "EnderecoEntity",
]
