"""
Repositório Django para persistência de Profissionais.

Implementa o ProfissionalRepository (src/core/profissionais/ports.py).

O usuário e as organizações vinculadas são persistidos pelos próprios
repositórios antes do profissional; aqui são gravados apenas os
vínculos. Telefones e endereços pertencem ao profissional e são
removidos junto com o vínculo.
"""

from typing import List, Optional
import logging

from src.core.profissionais.entities import ProfissionalEntity, TipoProfissional

from ..contatos.mappers import EnderecoMapper, TelefoneMapper
from ..contatos.models import EnderecoModel, TelefoneModel
from ..shared.integridade import conflito_de_unicidade
from .mappers import ProfissionalMapper
from .models import (
    OrganizacaoProfissionalModel,
    ProfissionalEnderecoModel,
    ProfissionalModel,
    ProfissionalTelefoneModel,
)

logger = logging.getLogger(__name__)


class DjangoProfissionalRepository:
    """
    Implementação Django do ProfissionalRepository.

    Example:
        repo = DjangoProfissionalRepository()
        repo.save(profissional)
        psicologos = repo.list_by_tipo(TipoProfissional.PSICOLOGO)
    """

    def __init__(self):
        self._mapper = ProfissionalMapper()

    def _queryset(self):
        return ProfissionalModel.objects.select_related('usuario').prefetch_related(
            'telefones__telefone',
            'enderecos__endereco',
            'organizacoes__organizacao__telefones__telefone',
        )

    def save(self, profissional: ProfissionalEntity) -> None:
        """
        Raises:
            ConflictError: Se o banco rejeitar CPF duplicado
        """
        with conflito_de_unicidade("Profissional", {"cpf": "CPF"}):
            ProfissionalModel.objects.update_or_create(
                id=profissional.id,
                defaults=self._mapper.to_model_data(profissional),
            )
            self._sincronizar_telefones(profissional)
            self._sincronizar_enderecos(profissional)
            self._sincronizar_organizacoes(profissional)

        logger.info(f"Profissional saved: {profissional.id}")

    def _sincronizar_telefones(self, profissional: ProfissionalEntity) -> None:
        ids = []
        for vinculo in profissional.telefones:
            TelefoneMapper.save(vinculo.telefone)
            ProfissionalTelefoneModel.objects.update_or_create(
                id=vinculo.id,
                defaults=self._mapper.telefone_to_model_data(vinculo),
            )
            ids.append(vinculo.id)

        obsoletos = ProfissionalTelefoneModel.objects.filter(
            profissional_id=profissional.id
        ).exclude(id__in=ids)
        telefone_ids = list(obsoletos.values_list('telefone_id', flat=True))
        obsoletos.delete()
        TelefoneModel.objects.filter(id__in=telefone_ids).delete()

    def _sincronizar_enderecos(self, profissional: ProfissionalEntity) -> None:
        ids = []
        for vinculo in profissional.enderecos:
            EnderecoMapper.save(vinculo.endereco)
            ProfissionalEnderecoModel.objects.update_or_create(
                id=vinculo.id,
                defaults=self._mapper.endereco_to_model_data(vinculo),
            )
            ids.append(vinculo.id)

        obsoletos = ProfissionalEnderecoModel.objects.filter(
            profissional_id=profissional.id
        ).exclude(id__in=ids)
        endereco_ids = list(obsoletos.values_list('endereco_id', flat=True))
        obsoletos.delete()
        EnderecoModel.objects.filter(id__in=endereco_ids).delete()

    def _sincronizar_organizacoes(self, profissional: ProfissionalEntity) -> None:
        ids = []
        for vinculo in profissional.organizacoes:
            OrganizacaoProfissionalModel.objects.update_or_create(
                id=vinculo.id,
                defaults=self._mapper.organizacao_to_model_data(vinculo),
            )
            ids.append(vinculo.id)

        OrganizacaoProfissionalModel.objects.filter(
            profissional_id=profissional.id
        ).exclude(id__in=ids).delete()

    def get_by_id(self, profissional_id: str) -> Optional[ProfissionalEntity]:
        try:
            return self._mapper.to_entity(self._queryset().get(id=profissional_id))
        except ProfissionalModel.DoesNotExist:
            logger.debug(f"Profissional not found: {profissional_id}")
            return None

    def exists_by_cpf(self, cpf: str) -> bool:
        return ProfissionalModel.objects.filter(cpf=cpf).exists()

    def exists_by_registro(self, tipo: TipoProfissional, registro: str) -> bool:
        return ProfissionalModel.objects.filter(
            tipo=tipo.value, registro_profissional=registro
        ).exists()

    def list_all(self) -> List[ProfissionalEntity]:
        return self._mapper.to_entity_list(self._queryset().order_by('nome'))

    def list_by_tipo(self, tipo: TipoProfissional) -> List[ProfissionalEntity]:
        return self._mapper.to_entity_list(
            self._queryset().filter(tipo=tipo.value).order_by('nome')
        )

    def exists(self, profissional_id: str) -> bool:
        return ProfissionalModel.objects.filter(id=profissional_id).exists()
