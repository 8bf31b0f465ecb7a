"""
Mapper para conversão entre UsuarioEntity (Core) e UsuarioModel (Django).
"""

from typing import Any, Dict, Iterable, List

from src.core.usuarios.entities import EstadoUsuario, UsuarioEntity

from ..shared.mappers import to_aware
from .models import UsuarioModel


class UsuarioMapper:
    """
    Responsável por:
    - to_model_data(): Entity -> campos do Model
    - to_entity(): Model -> Entity (sem revalidar)
    """

    @staticmethod
    def to_model_data(entity: UsuarioEntity) -> Dict[str, Any]:
        return {
            'nome': entity.nome,
            'email': entity.email,
            'senha_hash': entity.senha_hash,
            'estado': entity.estado.value,
            'criado_em': to_aware(entity.criado_em),
            'atualizado_em': to_aware(entity.atualizado_em),
        }

    @staticmethod
    def to_entity(model: UsuarioModel) -> UsuarioEntity:
        return UsuarioEntity(
            id=model.id,
            nome=model.nome,
            email=model.email,
            senha_hash=model.senha_hash,
            estado=EstadoUsuario(model.estado),
            criado_em=model.criado_em,
            atualizado_em=model.atualizado_em,
        )

    @classmethod
    def to_entity_list(cls, models: Iterable[UsuarioModel]) -> List[UsuarioEntity]:
        return [cls.to_entity(m) for m in models]
