"""
Mappers para conversão entre OrganizacaoEntity (Core) e Models Django.
"""

from typing import Any, Dict, Iterable, List

from src.core.organizacoes.entities import (
    EstadoOrganizacao,
    OrganizacaoEntity,
    OrganizacaoTelefone,
)

from ..contatos.mappers import TelefoneMapper
from ..shared.mappers import to_aware
from .models import OrganizacaoModel, OrganizacaoTelefoneModel


class OrganizacaoMapper:
    """
    Responsável por:
    - to_model_data(): Entity -> campos do Model
    - to_entity(): Model (com telefones) -> Entity
    """

    @staticmethod
    def to_model_data(entity: OrganizacaoEntity) -> Dict[str, Any]:
        return {
            'nome_fantasia': entity.nome_fantasia,
            'razao_social': entity.razao_social,
            'cnpj': entity.cnpj,
            'estado': entity.estado.value,
            'criado_em': to_aware(entity.criado_em),
            'atualizado_em': to_aware(entity.atualizado_em),
        }

    @staticmethod
    def vinculo_to_model_data(vinculo: OrganizacaoTelefone) -> Dict[str, Any]:
        return {
            'organizacao_id': vinculo.organizacao_id,
            'telefone_id': vinculo.telefone.id,
            'is_principal': vinculo.is_principal,
            'criado_em': to_aware(vinculo.criado_em),
            'atualizado_em': to_aware(vinculo.atualizado_em),
        }

    @staticmethod
    def vinculo_to_entity(model: OrganizacaoTelefoneModel) -> OrganizacaoTelefone:
        return OrganizacaoTelefone(
            id=model.id,
            organizacao_id=model.organizacao_id,
            telefone=TelefoneMapper.to_entity(model.telefone),
            is_principal=model.is_principal,
            criado_em=model.criado_em,
            atualizado_em=model.atualizado_em,
        )

    @classmethod
    def to_entity(cls, model: OrganizacaoModel) -> OrganizacaoEntity:
        """
        Note:
            Bypassa validações de criar(); dados já foram validados
            na criação original.
        """
        return OrganizacaoEntity(
            id=model.id,
            nome_fantasia=model.nome_fantasia,
            razao_social=model.razao_social,
            cnpj=model.cnpj,
            estado=EstadoOrganizacao(model.estado),
            criado_em=model.criado_em,
            atualizado_em=model.atualizado_em,
            telefones=[cls.vinculo_to_entity(t) for t in model.telefones.all()],
        )

    @classmethod
    def to_entity_list(cls, models: Iterable[OrganizacaoModel]) -> List[OrganizacaoEntity]:
        return [cls.to_entity(m) for m in models]
