"""
Use Cases (Application Services) do Domínio de Organizações.

Use Cases implementados:
- CriarOrganizacaoService: Cadastra organização (CNPJ e razão social únicos)
- AtualizarOrganizacaoService: Atualiza dados cadastrais
- ObterOrganizacaoService: Obtém organização por ID
- BuscarOrganizacaoPorCnpjService: Obtém organização por CNPJ
- ListarOrganizacoesService: Lista organizações
- RemoverOrganizacaoService: Remove organização
"""

import logging
from typing import List, Optional

from src.core.contatos.entities import TelefoneEntity
from src.core.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    InvalidArgumentError,
)
from src.core.shared.interfaces import UnitOfWork
from src.core.shared.strings import get_only_numbers, is_blank
from src.core.shared.validation import ValidationCollector
from src.core.shared.validators import is_cnpj

from .dtos import (
    AtualizarOrganizacaoInputDTO,
    CriarOrganizacaoInputDTO,
    OrganizacaoOutputDTO,
)
from .entities import EstadoOrganizacao, OrganizacaoEntity
from .events import OrganizacaoCriadaEvent
from .ports import OrganizacaoRepository

logger = logging.getLogger(__name__)


def resolver_estado_organizacao(valor: str) -> EstadoOrganizacao:
    try:
        return EstadoOrganizacao.from_string(valor or "")
    except ValueError as e:
        raise InvalidArgumentError(str(e), field="estado") from e


def verificar_unicidade_organizacao(
    organizacao_repo: OrganizacaoRepository,
    organizacao: OrganizacaoEntity,
    excluir_id: Optional[str] = None,
) -> List[str]:
    """Retorna mensagens de conflito de razão social e CNPJ."""
    conflitos = []
    if organizacao_repo.exists_by_razao_social(organizacao.razao_social, excluir_id=excluir_id):
        conflitos.append(
            f"Organização com razão social '{organizacao.razao_social}' já existe."
        )
    if organizacao_repo.exists_by_cnpj(organizacao.cnpj, excluir_id=excluir_id):
        conflitos.append(f"Organização com CNPJ '{organizacao.cnpj_formatado}' já existe.")
    return conflitos


class CriarOrganizacaoService:
    """
    Use Case: Cadastrar organização.

    Fluxo:
    1. Construir organização e telefones (erros coletados em conjunto)
    2. Verificar unicidade de razão social e CNPJ
    3. Ativar, persistir e disparar OrganizacaoCriada

    Example:
        service = CriarOrganizacaoService(organizacao_repo, uow)
        output = service.execute(CriarOrganizacaoInputDTO(
            nome_fantasia="Clínica Saúde Total",
            razao_social="Saúde Total Ltda",
            cnpj="11.222.333/0001-81",
            telefones=("+55 (11) 3333-4444",),
        ))
    """

    def __init__(self, organizacao_repo: OrganizacaoRepository, uow: UnitOfWork):
        self.organizacao_repo = organizacao_repo
        self.uow = uow

    def execute(self, input_dto: CriarOrganizacaoInputDTO) -> OrganizacaoOutputDTO:
        """
        Raises:
            DomainValidationError: Se dados da organização ou telefones inválidos
            ConflictError: Se razão social ou CNPJ já cadastrados
        """
        with self.uow:
            v = ValidationCollector()
            organizacao = v.collect(
                OrganizacaoEntity.criar,
                nome_fantasia=input_dto.nome_fantasia,
                razao_social=input_dto.razao_social,
                cnpj=input_dto.cnpj,
            )
            telefones = [
                v.collect(TelefoneEntity.criar_de_texto, texto)
                for texto in input_dto.telefones
            ]
            v.raise_if_any()

            conflitos = verificar_unicidade_organizacao(self.organizacao_repo, organizacao)
            if conflitos:
                raise ConflictError(conflitos=conflitos)

            for telefone in telefones:
                organizacao.adicionar_telefone(telefone)
            organizacao.ativar()

            self.organizacao_repo.save(organizacao)
            self.uow.publish_event(
                OrganizacaoCriadaEvent(
                    aggregate_id=organizacao.id,
                    nome_fantasia=organizacao.nome_fantasia,
                    cnpj=organizacao.cnpj,
                )
            )

        logger.info(f"Organização criada: {organizacao.id}")
        return OrganizacaoOutputDTO.from_entity(organizacao)


class AtualizarOrganizacaoService:
    """Use Case: Atualizar dados cadastrais de uma organização."""

    def __init__(self, organizacao_repo: OrganizacaoRepository, uow: UnitOfWork):
        self.organizacao_repo = organizacao_repo
        self.uow = uow

    def execute(self, input_dto: AtualizarOrganizacaoInputDTO) -> OrganizacaoOutputDTO:
        """
        Raises:
            EntityNotFoundError: Se organização não existe
            DomainValidationError: Se dados inválidos (entidade inalterada)
            ConflictError: Se razão social ou CNPJ pertencem a outra organização
        """
        with self.uow:
            organizacao = self.organizacao_repo.get_by_id(input_dto.organizacao_id)
            if not organizacao:
                raise EntityNotFoundError("Organização", input_dto.organizacao_id)

            # Valida em uma cópia para checar conflitos antes de alterar
            candidata = OrganizacaoEntity.criar(
                nome_fantasia=input_dto.nome_fantasia,
                razao_social=input_dto.razao_social,
                cnpj=input_dto.cnpj,
                estado=resolver_estado_organizacao(input_dto.estado),
            )
            conflitos = verificar_unicidade_organizacao(
                self.organizacao_repo, candidata, excluir_id=organizacao.id
            )
            if conflitos:
                raise ConflictError(conflitos=conflitos)

            organizacao.atualizar(
                nome_fantasia=candidata.nome_fantasia,
                razao_social=candidata.razao_social,
                cnpj=candidata.cnpj,
                estado=candidata.estado,
            )
            self.organizacao_repo.save(organizacao)

        logger.info(f"Organização atualizada: {organizacao.id}")
        return OrganizacaoOutputDTO.from_entity(organizacao)


class ObterOrganizacaoService:
    """Use Case: Obter organização por ID."""

    def __init__(self, organizacao_repo: OrganizacaoRepository):
        self.organizacao_repo = organizacao_repo

    def execute(self, organizacao_id: str) -> OrganizacaoOutputDTO:
        organizacao = self.organizacao_repo.get_by_id(organizacao_id)
        if not organizacao:
            raise EntityNotFoundError("Organização", organizacao_id)
        return OrganizacaoOutputDTO.from_entity(organizacao)


class BuscarOrganizacaoPorCnpjService:
    """Use Case: Obter organização pelo CNPJ (com ou sem pontuação)."""

    def __init__(self, organizacao_repo: OrganizacaoRepository):
        self.organizacao_repo = organizacao_repo

    def execute(self, cnpj: str) -> OrganizacaoOutputDTO:
        """
        Raises:
            InvalidArgumentError: Se CNPJ vazio ou inválido
            EntityNotFoundError: Se não houver organização com o CNPJ
        """
        if is_blank(cnpj):
            raise InvalidArgumentError("O CNPJ é obrigatório.", field="cnpj")
        if not is_cnpj(cnpj):
            raise InvalidArgumentError("O CNPJ informado é inválido.", field="cnpj")

        digits = get_only_numbers(cnpj)
        organizacao = self.organizacao_repo.get_by_cnpj(digits)
        if not organizacao:
            raise EntityNotFoundError("Organização", digits)
        return OrganizacaoOutputDTO.from_entity(organizacao)


class ListarOrganizacoesService:
    """Use Case: Listar organizações."""

    def __init__(self, organizacao_repo: OrganizacaoRepository):
        self.organizacao_repo = organizacao_repo

    def execute(self) -> List[OrganizacaoOutputDTO]:
        return [
            OrganizacaoOutputDTO.from_entity(o)
            for o in self.organizacao_repo.list_all()
        ]


class RemoverOrganizacaoService:
    """Use Case: Remover organização."""

    def __init__(self, organizacao_repo: OrganizacaoRepository, uow: UnitOfWork):
        self.organizacao_repo = organizacao_repo
        self.uow = uow

    def execute(self, organizacao_id: str) -> None:
        with self.uow:
            if not self.organizacao_repo.exists(organizacao_id):
                raise EntityNotFoundError("Organização", organizacao_id)
            self.organizacao_repo.delete(organizacao_id)

        logger.info(f"Organização removida: {organizacao_id}")
