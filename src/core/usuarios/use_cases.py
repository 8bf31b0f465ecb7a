"""
Use Cases (Application Services) do Domínio de Usuários.

Use Cases implementados:
- CriarUsuarioService: Cria conta (e-mail único)
- AtualizarUsuarioService: Atualiza dados e, opcionalmente, a senha
- ObterUsuarioService: Obtém usuário por ID
- BuscarUsuarioPorEmailService: Obtém usuário por e-mail
- ListarUsuariosService: Lista usuários
- RemoverUsuarioService: Remove usuário
- LoginUsuarioService: Verifica credenciais (resposta uniforme)
"""

import logging
from typing import List, Optional

from src.core.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    InvalidArgumentError,
)
from src.core.shared.interfaces import UnitOfWork
from src.core.shared.security import (
    POLITICA_SENHA_PADRAO,
    PoliticaSenha,
    hash_password_pbkdf2,
    verify_password_pbkdf2,
)
from src.core.shared.strings import is_blank, remove_all_spaces
from src.core.shared.validators import is_email

from .dtos import (
    AtualizarUsuarioInputDTO,
    CriarUsuarioInputDTO,
    LoginInputDTO,
    UsuarioOutputDTO,
)
from .entities import EstadoUsuario, UsuarioEntity
from .events import UsuarioCriadoEvent, UsuarioRemovidoEvent
from .ports import UsuarioRepository

logger = logging.getLogger(__name__)


def resolver_estado_usuario(valor: str) -> EstadoUsuario:
    """Converte texto em EstadoUsuario ou lança InvalidArgumentError."""
    try:
        return EstadoUsuario.from_string(valor or "")
    except ValueError as e:
        raise InvalidArgumentError(str(e), field="estado") from e


def normalizar_email(email: str) -> str:
    return remove_all_spaces(email).lower()


class CriarUsuarioService:
    """
    Use Case: Criar um novo usuário.

    Fluxo:
    1. Construir entidade (normaliza, valida e gera hash da senha)
    2. Garantir e-mail único
    3. Persistir e disparar UsuarioCriado

    Example:
        service = CriarUsuarioService(usuario_repo, uow)
        output = service.execute(CriarUsuarioInputDTO(
            nome="Ana Souza", email="ana@clinica.com", senha="SenhaForte@123"
        ))
    """

    def __init__(
        self,
        usuario_repo: UsuarioRepository,
        uow: UnitOfWork,
        politica: Optional[PoliticaSenha] = None,
    ):
        self.usuario_repo = usuario_repo
        self.uow = uow
        self.politica = politica or POLITICA_SENHA_PADRAO

    def execute(self, input_dto: CriarUsuarioInputDTO) -> UsuarioOutputDTO:
        """
        Raises:
            DomainValidationError: Se dados inválidos
            ConflictError: Se e-mail já cadastrado
        """
        with self.uow:
            estado = resolver_estado_usuario(input_dto.estado)
            usuario = UsuarioEntity.criar(
                nome=input_dto.nome,
                email=input_dto.email,
                senha=input_dto.senha,
                estado=estado,
                politica=self.politica,
            )

            if self.usuario_repo.exists_by_email(usuario.email):
                raise ConflictError.para_campo("Usuário", "e-mail", usuario.email)

            self.usuario_repo.save(usuario)
            self.uow.publish_event(
                UsuarioCriadoEvent(
                    aggregate_id=usuario.id,
                    nome=usuario.nome,
                    email=usuario.email,
                )
            )

        logger.info(f"Usuário criado: {usuario.id}")
        return UsuarioOutputDTO.from_entity(usuario)


class AtualizarUsuarioService:
    """Use Case: Atualizar dados de um usuário existente."""

    def __init__(
        self,
        usuario_repo: UsuarioRepository,
        uow: UnitOfWork,
        politica: Optional[PoliticaSenha] = None,
    ):
        self.usuario_repo = usuario_repo
        self.uow = uow
        self.politica = politica or POLITICA_SENHA_PADRAO

    def execute(self, input_dto: AtualizarUsuarioInputDTO) -> UsuarioOutputDTO:
        """
        Raises:
            EntityNotFoundError: Se usuário não existe
            ConflictError: Se o novo e-mail pertence a outro usuário
            DomainValidationError: Se dados inválidos
        """
        with self.uow:
            usuario = self.usuario_repo.get_by_id(input_dto.usuario_id)
            if not usuario:
                raise EntityNotFoundError("Usuário", input_dto.usuario_id)

            email = normalizar_email(input_dto.email)
            if email and self.usuario_repo.exists_by_email(email, excluir_id=usuario.id):
                raise ConflictError.para_campo("Usuário", "e-mail", email)

            usuario.atualizar(
                nome=input_dto.nome,
                email=input_dto.email,
                estado=resolver_estado_usuario(input_dto.estado),
                senha=input_dto.senha,
                politica=self.politica,
            )
            self.usuario_repo.save(usuario)

        logger.info(f"Usuário atualizado: {usuario.id}")
        return UsuarioOutputDTO.from_entity(usuario)


class ObterUsuarioService:
    """Use Case: Obter usuário por ID."""

    def __init__(self, usuario_repo: UsuarioRepository):
        self.usuario_repo = usuario_repo

    def execute(self, usuario_id: str) -> UsuarioOutputDTO:
        usuario = self.usuario_repo.get_by_id(usuario_id)
        if not usuario:
            raise EntityNotFoundError("Usuário", usuario_id)
        return UsuarioOutputDTO.from_entity(usuario)


class BuscarUsuarioPorEmailService:
    """Use Case: Obter usuário pelo e-mail."""

    def __init__(self, usuario_repo: UsuarioRepository):
        self.usuario_repo = usuario_repo

    def execute(self, email: str) -> UsuarioOutputDTO:
        """
        Raises:
            InvalidArgumentError: Se e-mail vazio ou inválido
            EntityNotFoundError: Se não houver usuário com o e-mail
        """
        if is_blank(email):
            raise InvalidArgumentError("O e-mail é obrigatório.", field="email")

        email = normalizar_email(email)
        if not is_email(email):
            raise InvalidArgumentError("O e-mail informado é inválido.", field="email")

        usuario = self.usuario_repo.get_by_email(email)
        if not usuario:
            raise EntityNotFoundError("Usuário", email)
        return UsuarioOutputDTO.from_entity(usuario)


class ListarUsuariosService:
    """Use Case: Listar todos os usuários."""

    def __init__(self, usuario_repo: UsuarioRepository):
        self.usuario_repo = usuario_repo

    def execute(self) -> List[UsuarioOutputDTO]:
        return [UsuarioOutputDTO.from_entity(u) for u in self.usuario_repo.list_all()]


class RemoverUsuarioService:
    """Use Case: Remover usuário."""

    def __init__(self, usuario_repo: UsuarioRepository, uow: UnitOfWork):
        self.usuario_repo = usuario_repo
        self.uow = uow

    def execute(self, usuario_id: str) -> None:
        with self.uow:
            usuario = self.usuario_repo.get_by_id(usuario_id)
            if not usuario:
                raise EntityNotFoundError("Usuário", usuario_id)

            self.usuario_repo.delete(usuario.id)
            self.uow.publish_event(
                UsuarioRemovidoEvent(aggregate_id=usuario.id, email=usuario.email)
            )

        logger.info(f"Usuário removido: {usuario_id}")


class LoginUsuarioService:
    """
    Use Case: Verificar credenciais de login.

    Retorna False de forma uniforme para e-mail desconhecido, senha
    incorreta, usuário não ativo ou hash armazenado corrompido; o
    chamador não distingue o motivo.

    O hash fictício, usado para igualar o tempo de resposta quando o
    e-mail não existe, é calculado uma vez por instância.
    """

    def __init__(
        self,
        usuario_repo: UsuarioRepository,
        politica: Optional[PoliticaSenha] = None,
    ):
        self.usuario_repo = usuario_repo
        self.politica = politica or POLITICA_SENHA_PADRAO
        self._hash_ficticio = hash_password_pbkdf2("Ficticio@123", self.politica.iteracoes)

    def execute(self, input_dto: LoginInputDTO) -> bool:
        if is_blank(input_dto.email) or is_blank(input_dto.senha):
            return False

        usuario = self.usuario_repo.get_by_email(normalizar_email(input_dto.email))
        if usuario is None:
            verify_password_pbkdf2(input_dto.senha, self._hash_ficticio)
            logger.info("Tentativa de login sem sucesso")
            return False

        try:
            senha_confere = usuario.verificar_senha(input_dto.senha)
        except InvalidArgumentError:
            logger.warning(f"Hash de senha inválido para o usuário {usuario.id}")
            senha_confere = False

        autenticado = senha_confere and usuario.esta_ativo
        if autenticado:
            logger.info(f"Login efetuado: {usuario.id}")
        else:
            logger.info("Tentativa de login sem sucesso")
        return autenticado
