"""
Repositório Django para persistência de Organizações.

Implementa o OrganizacaoRepository (src/core/organizacoes/ports.py).
Salvar o agregado sincroniza os vínculos com telefones: vínculos
ausentes da entidade são removidos junto com o telefone.
"""

from typing import List, Optional
import logging

from django.db import transaction

from src.core.organizacoes.entities import OrganizacaoEntity

from ..contatos.mappers import TelefoneMapper
from ..contatos.models import TelefoneModel
from ..shared.integridade import conflito_de_unicidade
from .mappers import OrganizacaoMapper
from .models import OrganizacaoModel, OrganizacaoTelefoneModel

logger = logging.getLogger(__name__)

CAMPOS_UNICOS = {"cnpj": "CNPJ", "razao_social": "razão social"}


class DjangoOrganizacaoRepository:
    """
    Implementação Django do OrganizacaoRepository.

    Queries usam prefetch de telefones para evitar N+1.
    """

    def __init__(self):
        self._mapper = OrganizacaoMapper()

    def _queryset(self):
        return OrganizacaoModel.objects.prefetch_related('telefones__telefone')

    def save(self, organizacao: OrganizacaoEntity) -> None:
        """
        Raises:
            ConflictError: Se o banco rejeitar CNPJ ou razão social duplicados
        """
        with conflito_de_unicidade("Organização", CAMPOS_UNICOS):
            OrganizacaoModel.objects.update_or_create(
                id=organizacao.id,
                defaults=self._mapper.to_model_data(organizacao),
            )
            self._sincronizar_telefones(organizacao)

        logger.info(f"Organizacao saved: {organizacao.id}")

    def _sincronizar_telefones(self, organizacao: OrganizacaoEntity) -> None:
        ids = []
        for vinculo in organizacao.telefones:
            TelefoneMapper.save(vinculo.telefone)
            OrganizacaoTelefoneModel.objects.update_or_create(
                id=vinculo.id,
                defaults=self._mapper.vinculo_to_model_data(vinculo),
            )
            ids.append(vinculo.id)

        obsoletos = OrganizacaoTelefoneModel.objects.filter(
            organizacao_id=organizacao.id
        ).exclude(id__in=ids)
        telefone_ids = list(obsoletos.values_list('telefone_id', flat=True))
        obsoletos.delete()
        TelefoneModel.objects.filter(id__in=telefone_ids).delete()

    def get_by_id(self, organizacao_id: str) -> Optional[OrganizacaoEntity]:
        try:
            return self._mapper.to_entity(self._queryset().get(id=organizacao_id))
        except OrganizacaoModel.DoesNotExist:
            logger.debug(f"Organizacao not found: {organizacao_id}")
            return None

    def get_by_cnpj(self, cnpj: str) -> Optional[OrganizacaoEntity]:
        model = self._queryset().filter(cnpj=cnpj).first()
        return self._mapper.to_entity(model) if model else None

    def exists_by_cnpj(self, cnpj: str, excluir_id: Optional[str] = None) -> bool:
        queryset = OrganizacaoModel.objects.filter(cnpj=cnpj)
        if excluir_id:
            queryset = queryset.exclude(id=excluir_id)
        return queryset.exists()

    def exists_by_razao_social(self, razao_social: str, excluir_id: Optional[str] = None) -> bool:
        queryset = OrganizacaoModel.objects.filter(razao_social__iexact=razao_social or "")
        if excluir_id:
            queryset = queryset.exclude(id=excluir_id)
        return queryset.exists()

    def delete(self, organizacao_id: str) -> None:
        with transaction.atomic():
            telefone_ids = list(
                OrganizacaoTelefoneModel.objects.filter(
                    organizacao_id=organizacao_id
                ).values_list('telefone_id', flat=True)
            )
            deleted_count, _ = OrganizacaoModel.objects.filter(id=organizacao_id).delete()
            TelefoneModel.objects.filter(id__in=telefone_ids).delete()

        if deleted_count > 0:
            logger.info(f"Organizacao deleted: {organizacao_id}")
        else:
            logger.debug(f"Organizacao not found for deletion: {organizacao_id}")

    def list_all(self) -> List[OrganizacaoEntity]:
        return self._mapper.to_entity_list(self._queryset().order_by('nome_fantasia'))

    def exists(self, organizacao_id: str) -> bool:
        return OrganizacaoModel.objects.filter(id=organizacao_id).exists()
