"""
Repositório Django para persistência de Usuários.

Implementa o UsuarioRepository (src/core/usuarios/ports.py).
"""

from typing import List, Optional
import logging

from src.core.usuarios.entities import UsuarioEntity

from ..shared.integridade import conflito_de_unicidade
from .mappers import UsuarioMapper
from .models import UsuarioModel

logger = logging.getLogger(__name__)


def _normalizar_email(email: Optional[str]) -> str:
    return (email or "").strip().lower()


class DjangoUsuarioRepository:
    """
    Implementação Django do UsuarioRepository.

    Example:
        repo = DjangoUsuarioRepository()
        repo.save(usuario)
        usuario = repo.get_by_email("ana@clinica.com")
    """

    def __init__(self):
        self._mapper = UsuarioMapper()

    def save(self, usuario: UsuarioEntity) -> None:
        """
        Raises:
            ConflictError: Se o banco rejeitar e-mail duplicado
        """
        with conflito_de_unicidade("Usuário", {"email": "e-mail"}):
            UsuarioModel.objects.update_or_create(
                id=usuario.id,
                defaults=self._mapper.to_model_data(usuario),
            )
        logger.info(f"Usuario saved: {usuario.id}")

    def get_by_id(self, usuario_id: str) -> Optional[UsuarioEntity]:
        try:
            return self._mapper.to_entity(UsuarioModel.objects.get(id=usuario_id))
        except UsuarioModel.DoesNotExist:
            logger.debug(f"Usuario not found: {usuario_id}")
            return None

    def get_by_email(self, email: str) -> Optional[UsuarioEntity]:
        model = UsuarioModel.objects.filter(email=_normalizar_email(email)).first()
        return self._mapper.to_entity(model) if model else None

    def exists_by_email(self, email: str, excluir_id: Optional[str] = None) -> bool:
        queryset = UsuarioModel.objects.filter(email=_normalizar_email(email))
        if excluir_id:
            queryset = queryset.exclude(id=excluir_id)
        return queryset.exists()

    def delete(self, usuario_id: str) -> None:
        deleted_count, _ = UsuarioModel.objects.filter(id=usuario_id).delete()
        if deleted_count > 0:
            logger.info(f"Usuario deleted: {usuario_id}")
        else:
            logger.debug(f"Usuario not found for deletion: {usuario_id}")

    def list_all(self) -> List[UsuarioEntity]:
        return self._mapper.to_entity_list(UsuarioModel.objects.order_by('nome'))

    def exists(self, usuario_id: str) -> bool:
        return UsuarioModel.objects.filter(id=usuario_id).exists()
