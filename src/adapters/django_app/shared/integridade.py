"""
Tradução de violações de unicidade do banco para ConflictError.

As verificações `exists_by_*` dos use cases não cobrem duas requisições
concorrentes; a restrição UNIQUE do banco é a última barreira e, quando
dispara, vira o mesmo 409 de um conflito detectado antes da escrita.

Example:
    with conflito_de_unicidade("Organização", {"cnpj": "CNPJ"}):
        OrganizacaoModel.objects.update_or_create(...)
"""

import logging
from contextlib import contextmanager
from typing import Dict, Iterator

from django.db import IntegrityError, transaction

from src.core.shared.exceptions import ConflictError

logger = logging.getLogger(__name__)


def _violou_unicidade(erro: IntegrityError) -> bool:
    # SQLite: "UNIQUE constraint failed"; PostgreSQL: "violates unique constraint"
    return "unique" in str(erro).lower()


@contextmanager
def conflito_de_unicidade(recurso: str, campos: Dict[str, str]) -> Iterator[None]:
    """
    Executa o bloco em um savepoint e converte violação UNIQUE em ConflictError.

    Args:
        recurso: Nome do recurso na mensagem ("Usuário", "Organização", ...)
        campos: Coluna do banco -> rótulo na mensagem

    Raises:
        ConflictError: Se o banco rejeitar a escrita por unicidade
    """
    try:
        with transaction.atomic():
            yield
    except IntegrityError as e:
        if not _violou_unicidade(e):
            raise
        logger.warning(f"Violação de unicidade ao salvar {recurso}: {e}")
        mensagem = str(e).lower()
        rotulo = next((r for coluna, r in campos.items() if coluna in mensagem), None)
        if rotulo is None:
            raise ConflictError(f"{recurso} já existe.") from e
        raise ConflictError(f"{recurso} com {rotulo} já cadastrado(a).") from e
