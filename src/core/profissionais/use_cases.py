"""
Use Cases (Application Services) do Domínio de Profissionais.

Use Cases implementados:
- RegistrarProfissionalService: Auto-cadastro completo (profissional,
  usuário, telefone, endereço e organização em uma transação)
- ObterProfissionalService: Obtém profissional por ID
- ListarProfissionaisService: Lista com filtro opcional por tipo
- DesativarProfissionalService: Exclusão lógica
"""

import logging
from datetime import date
from typing import List, Optional, Union

from src.core.contatos.entities import EnderecoEntity, TelefoneEntity
from src.core.organizacoes.entities import OrganizacaoEntity
from src.core.organizacoes.ports import OrganizacaoRepository
from src.core.organizacoes.use_cases import verificar_unicidade_organizacao
from src.core.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    InvalidArgumentError,
)
from src.core.shared.interfaces import UnitOfWork
from src.core.shared.security import POLITICA_SENHA_PADRAO, PoliticaSenha
from src.core.shared.strings import is_blank
from src.core.shared.validation import ValidationCollector
from src.core.usuarios.entities import UsuarioEntity
from src.core.usuarios.ports import UsuarioRepository

from .dtos import (
    ListarProfissionaisQueryDTO,
    ProfissionalOutputDTO,
    RegistrarProfissionalInputDTO,
)
from .entities import Genero, ProfissionalEntity, TipoProfissional
from .events import ProfissionalDesativadoEvent, ProfissionalRegistradoEvent
from .factories import ProfessionalFactoryProvider
from .ports import ProfissionalRepository

logger = logging.getLogger(__name__)


def resolver_tipo_profissional(valor: str) -> TipoProfissional:
    try:
        return TipoProfissional.from_string(valor or "")
    except ValueError as e:
        raise InvalidArgumentError(
            f"Tipo de profissional inválido: {valor}", field="tipo_profissional"
        ) from e


def resolver_genero(valor: Optional[str]) -> Genero:
    if is_blank(valor):
        return Genero.NAO_INFORMADO
    try:
        return Genero.from_string(valor)
    except ValueError as e:
        raise InvalidArgumentError(f"Gênero inválido: {valor}", field="genero") from e


def resolver_data(valor: Optional[Union[str, date]]) -> Optional[date]:
    if valor is None or isinstance(valor, date):
        return valor
    if is_blank(valor):
        return None
    try:
        return date.fromisoformat(valor.strip())
    except ValueError as e:
        raise InvalidArgumentError(
            f"Data de nascimento inválida: {valor}", field="data_nascimento"
        ) from e


class RegistrarProfissionalService:
    """
    Use Case: Auto-cadastro de profissional.

    Fluxo:
    1. Resolver tipo e obter a factory registrada
    2. Construir profissional, telefone, endereço, usuário e organização,
       coletando todos os erros de validação em um único agregado
    3. Verificar unicidade (CPF, registro, e-mail, CNPJ, razão social),
       reportando todos os conflitos juntos
    4. Montar vínculos, persistir e disparar ProfissionalRegistrado

    Example:
        service = RegistrarProfissionalService(
            profissional_repo, usuario_repo, organizacao_repo,
            criar_provider_padrao(), uow,
        )
        output = service.execute(input_dto)
    """

    def __init__(
        self,
        profissional_repo: ProfissionalRepository,
        usuario_repo: UsuarioRepository,
        organizacao_repo: OrganizacaoRepository,
        factory_provider: ProfessionalFactoryProvider,
        uow: UnitOfWork,
        politica: Optional[PoliticaSenha] = None,
    ):
        self.profissional_repo = profissional_repo
        self.usuario_repo = usuario_repo
        self.organizacao_repo = organizacao_repo
        self.factory_provider = factory_provider
        self.uow = uow
        self.politica = politica or POLITICA_SENHA_PADRAO

    def execute(self, input_dto: RegistrarProfissionalInputDTO) -> ProfissionalOutputDTO:
        """
        Raises:
            InvalidArgumentError: Tipo, gênero ou data em formato inválido
            DomainValidationError: Todas as violações de validação
            ConflictError: Todos os conflitos de unicidade
        """
        with self.uow:
            tipo = resolver_tipo_profissional(input_dto.tipo_profissional)
            factory = self.factory_provider.obter_factory(tipo)

            v = ValidationCollector()
            profissional: ProfissionalEntity = v.collect(
                factory.criar_profissional,
                nome=input_dto.nome,
                cpf=input_dto.cpf,
                registro_profissional=input_dto.registro_profissional,
                rg=input_dto.rg,
                data_nascimento=resolver_data(input_dto.data_nascimento),
                genero=resolver_genero(input_dto.genero),
            )
            telefone = v.collect(TelefoneEntity.criar_de_texto, input_dto.telefone)
            endereco = v.collect(
                EnderecoEntity.criar,
                rua=input_dto.rua,
                numero=input_dto.numero,
                complemento=input_dto.complemento,
                bairro=input_dto.bairro,
                cep=input_dto.cep,
                cidade=input_dto.cidade,
                estado=input_dto.estado,
            )
            organizacao = v.collect(
                OrganizacaoEntity.criar,
                nome_fantasia=input_dto.nome_fantasia,
                razao_social=input_dto.razao_social,
                cnpj=input_dto.cnpj,
            )
            usuario = v.collect(
                UsuarioEntity.criar,
                nome=input_dto.nome,
                email=input_dto.email,
                senha=input_dto.senha,
                politica=self.politica,
            )
            v.raise_if_any()

            self._verificar_conflitos(profissional, usuario, organizacao)

            profissional.adicionar_telefone(telefone, is_principal=True)
            profissional.adicionar_endereco(endereco, is_principal=True)
            profissional.adicionar_usuario(usuario)
            profissional.adicionar_organizacao(organizacao)

            self.usuario_repo.save(usuario)
            self.organizacao_repo.save(organizacao)
            self.profissional_repo.save(profissional)

            self.uow.publish_event(
                ProfissionalRegistradoEvent(
                    aggregate_id=profissional.id,
                    tipo=tipo.value,
                    nome=profissional.nome,
                    email=usuario.email,
                    organizacao_id=organizacao.id,
                )
            )

        logger.info(
            f"Profissional registrado: {profissional.id} ({tipo.value})"
        )
        return ProfissionalOutputDTO.from_entity(profissional)

    def _verificar_conflitos(
        self,
        profissional: ProfissionalEntity,
        usuario: UsuarioEntity,
        organizacao: OrganizacaoEntity,
    ) -> None:
        conflitos: List[str] = []

        if self.profissional_repo.exists_by_cpf(profissional.cpf):
            conflitos.append(
                f"Profissional com CPF '{profissional.cpf_formatado}' já existe."
            )
        if self.profissional_repo.exists_by_registro(
            profissional.tipo, profissional.registro_profissional
        ):
            conflitos.append(
                f"Profissional com {profissional.rotulo_registro} "
                f"'{profissional.registro_profissional}' já existe."
            )
        if self.usuario_repo.exists_by_email(usuario.email):
            conflitos.append(f"Usuário com e-mail '{usuario.email}' já existe.")
        conflitos.extend(verificar_unicidade_organizacao(self.organizacao_repo, organizacao))

        if conflitos:
            raise ConflictError(conflitos=conflitos)


class ObterProfissionalService:
    """Use Case: Obter profissional por ID."""

    def __init__(self, profissional_repo: ProfissionalRepository):
        self.profissional_repo = profissional_repo

    def execute(self, profissional_id: str) -> ProfissionalOutputDTO:
        profissional = self.profissional_repo.get_by_id(profissional_id)
        if not profissional:
            raise EntityNotFoundError("Profissional", profissional_id)
        return ProfissionalOutputDTO.from_entity(profissional)


class ListarProfissionaisService:
    """Use Case: Listar profissionais, opcionalmente por tipo."""

    def __init__(self, profissional_repo: ProfissionalRepository):
        self.profissional_repo = profissional_repo

    def execute(
        self, query: Optional[ListarProfissionaisQueryDTO] = None
    ) -> List[ProfissionalOutputDTO]:
        query = query or ListarProfissionaisQueryDTO()

        if query.tipo:
            profissionais = self.profissional_repo.list_by_tipo(
                resolver_tipo_profissional(query.tipo)
            )
        else:
            profissionais = self.profissional_repo.list_all()

        if query.apenas_ativos:
            profissionais = [p for p in profissionais if p.esta_ativo]

        return [ProfissionalOutputDTO.from_entity(p) for p in profissionais]


class DesativarProfissionalService:
    """
    Use Case: Desativar profissional (exclusão lógica).

    Profissionais nunca são removidos fisicamente.
    """

    def __init__(self, profissional_repo: ProfissionalRepository, uow: UnitOfWork):
        self.profissional_repo = profissional_repo
        self.uow = uow

    def execute(self, profissional_id: str) -> ProfissionalOutputDTO:
        with self.uow:
            profissional = self.profissional_repo.get_by_id(profissional_id)
            if not profissional:
                raise EntityNotFoundError("Profissional", profissional_id)

            profissional.desativar()
            self.profissional_repo.save(profissional)
            self.uow.publish_event(
                ProfissionalDesativadoEvent(
                    aggregate_id=profissional.id,
                    tipo=profissional.tipo.value,
                )
            )

        logger.info(f"Profissional desativado: {profissional_id}")
        return ProfissionalOutputDTO.from_entity(profissional)
