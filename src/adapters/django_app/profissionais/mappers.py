"""
Mappers para conversão entre ProfissionalEntity (Core) e Models Django.

to_entity() espera o queryset com prefetch dos vínculos
(ver DjangoProfissionalRepository._queryset).
"""

from typing import Any, Dict, Iterable, List

from src.core.profissionais.entities import (
    EstadoProfissional,
    EstadoVinculo,
    Genero,
    OrganizacaoProfissional,
    ProfissionalEndereco,
    ProfissionalEntity,
    ProfissionalTelefone,
    TipoProfissional,
)

from ..contatos.mappers import EnderecoMapper, TelefoneMapper
from ..organizacoes.mappers import OrganizacaoMapper
from ..shared.mappers import to_aware
from ..usuarios.mappers import UsuarioMapper
from .models import (
    OrganizacaoProfissionalModel,
    ProfissionalEnderecoModel,
    ProfissionalModel,
    ProfissionalTelefoneModel,
)


def _timestamps(entity) -> Dict[str, Any]:
    return {
        'criado_em': to_aware(entity.criado_em),
        'atualizado_em': to_aware(entity.atualizado_em),
    }


class ProfissionalMapper:
    """
    Responsável por:
    - to_model_data(): Entity -> campos do ProfissionalModel
    - *_to_model_data(): vínculos -> campos das tabelas de relação
    - to_entity(): Model -> Entity com usuário, contatos e organizações
    """

    @staticmethod
    def to_model_data(entity: ProfissionalEntity) -> Dict[str, Any]:
        return {
            'tipo': entity.tipo.value,
            'nome': entity.nome,
            'cpf': entity.cpf,
            'rg': entity.rg,
            'data_nascimento': entity.data_nascimento,
            'genero': entity.genero.value,
            'estado': entity.estado.value,
            'registro_profissional': entity.registro_profissional,
            'usuario_id': entity.usuario.id if entity.usuario else None,
            **_timestamps(entity),
        }

    @staticmethod
    def telefone_to_model_data(vinculo: ProfissionalTelefone) -> Dict[str, Any]:
        return {
            'profissional_id': vinculo.profissional_id,
            'telefone_id': vinculo.telefone.id,
            'is_principal': vinculo.is_principal,
            **_timestamps(vinculo),
        }

    @staticmethod
    def endereco_to_model_data(vinculo: ProfissionalEndereco) -> Dict[str, Any]:
        return {
            'profissional_id': vinculo.profissional_id,
            'endereco_id': vinculo.endereco.id,
            'is_principal': vinculo.is_principal,
            **_timestamps(vinculo),
        }

    @staticmethod
    def organizacao_to_model_data(vinculo: OrganizacaoProfissional) -> Dict[str, Any]:
        return {
            'organizacao_id': vinculo.organizacao_id,
            'profissional_id': vinculo.profissional_id,
            'estado': vinculo.estado.value,
            **_timestamps(vinculo),
        }

    @staticmethod
    def _telefone_to_entity(model: ProfissionalTelefoneModel) -> ProfissionalTelefone:
        return ProfissionalTelefone(
            id=model.id,
            profissional_id=model.profissional_id,
            telefone=TelefoneMapper.to_entity(model.telefone),
            is_principal=model.is_principal,
            criado_em=model.criado_em,
            atualizado_em=model.atualizado_em,
        )

    @staticmethod
    def _endereco_to_entity(model: ProfissionalEnderecoModel) -> ProfissionalEndereco:
        return ProfissionalEndereco(
            id=model.id,
            profissional_id=model.profissional_id,
            endereco=EnderecoMapper.to_entity(model.endereco),
            is_principal=model.is_principal,
            criado_em=model.criado_em,
            atualizado_em=model.atualizado_em,
        )

    @staticmethod
    def _organizacao_to_entity(model: OrganizacaoProfissionalModel) -> OrganizacaoProfissional:
        return OrganizacaoProfissional(
            id=model.id,
            organizacao_id=model.organizacao_id,
            profissional_id=model.profissional_id,
            organizacao=OrganizacaoMapper.to_entity(model.organizacao),
            estado=EstadoVinculo(model.estado),
            criado_em=model.criado_em,
            atualizado_em=model.atualizado_em,
        )

    @classmethod
    def to_entity(cls, model: ProfissionalModel) -> ProfissionalEntity:
        """
        Note:
            Bypassa validações de criar(); dados já foram validados
            na criação original.
        """
        return ProfissionalEntity(
            id=model.id,
            tipo=TipoProfissional(model.tipo),
            nome=model.nome,
            cpf=model.cpf,
            rg=model.rg,
            data_nascimento=model.data_nascimento,
            genero=Genero(model.genero),
            estado=EstadoProfissional(model.estado),
            registro_profissional=model.registro_profissional,
            usuario=UsuarioMapper.to_entity(model.usuario) if model.usuario else None,
            telefones=[cls._telefone_to_entity(t) for t in model.telefones.all()],
            enderecos=[cls._endereco_to_entity(e) for e in model.enderecos.all()],
            organizacoes=[cls._organizacao_to_entity(o) for o in model.organizacoes.all()],
            criado_em=model.criado_em,
            atualizado_em=model.atualizado_em,
        )

    @classmethod
    def to_entity_list(cls, models: Iterable[ProfissionalModel]) -> List[ProfissionalEntity]:
        return [cls.to_entity(m) for m in models]
