"""
Mappers para conversão entre Entities de Contatos e Models Django.

Princípios:
- Mappers são stateless
- Não contêm lógica de negócio
- to_entity() bypassa validação: dados já foram validados na criação
"""

from typing import Any, Dict

from src.core.contatos.entities import EnderecoEntity, TelefoneEntity

from ..shared.mappers import to_aware
from .models import EnderecoModel, TelefoneModel


class TelefoneMapper:

    @staticmethod
    def to_model_data(entity: TelefoneEntity) -> Dict[str, Any]:
        """Campos para update_or_create (sem o id)."""
        return {
            'ddi': entity.ddi,
            'ddd': entity.ddd,
            'numero': entity.numero,
            'criado_em': to_aware(entity.criado_em),
            'atualizado_em': to_aware(entity.atualizado_em),
        }

    @staticmethod
    def to_entity(model: TelefoneModel) -> TelefoneEntity:
        return TelefoneEntity(
            id=model.id,
            ddi=model.ddi,
            ddd=model.ddd,
            numero=model.numero,
            criado_em=model.criado_em,
            atualizado_em=model.atualizado_em,
        )

    @classmethod
    def save(cls, entity: TelefoneEntity) -> TelefoneModel:
        model, _ = TelefoneModel.objects.update_or_create(
            id=entity.id, defaults=cls.to_model_data(entity)
        )
        return model


class EnderecoMapper:

    @staticmethod
    def to_model_data(entity: EnderecoEntity) -> Dict[str, Any]:
        return {
            'rua': entity.rua,
            'numero': entity.numero,
            'complemento': entity.complemento,
            'bairro': entity.bairro,
            'cep': entity.cep,
            'cidade': entity.cidade,
            'estado': entity.estado,
            'criado_em': to_aware(entity.criado_em),
            'atualizado_em': to_aware(entity.atualizado_em),
        }

    @staticmethod
    def to_entity(model: EnderecoModel) -> EnderecoEntity:
        return EnderecoEntity(
            id=model.id,
            rua=model.rua,
            numero=model.numero,
            complemento=model.complemento,
            bairro=model.bairro,
            cep=model.cep,
            cidade=model.cidade,
            estado=model.estado,
            criado_em=model.criado_em,
            atualizado_em=model.atualizado_em,
        )

    @classmethod
    def save(cls, entity: EnderecoEntity) -> EnderecoModel:
        model, _ = EnderecoModel.objects.update_or_create(
            id=entity.id, defaults=cls.to_model_data(entity)
        )
        return model
