"""
Base das entidades de domínio.

- Entidade: identidade por UUID, timestamps de auditoria e igualdade por ID
- VinculoPrincipal: base das entidades de relação com flag is_principal
- adicionar_com_principal / remover_com_principal: invariante de
  no máximo um membro principal por coleção
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, TypeVar
import uuid

from .exceptions import EntityNotFoundError, InvalidArgumentError


@dataclass(eq=False)
class Entidade:
    """
    Base com identidade e timestamps.

    Duas entidades são iguais quando têm o mesmo tipo e o mesmo id.
    """

    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    criado_em: datetime = field(default_factory=datetime.now)
    atualizado_em: Optional[datetime] = None

    def _tocar(self) -> None:
        """Marca a entidade como atualizada agora."""
        self.atualizado_em = datetime.now()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entidade) or type(self) is not type(other):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.id))


@dataclass(eq=False)
class VinculoPrincipal(Entidade):
    """Entidade de relação que pode ser a principal da coleção."""

    is_principal: bool = False

    def definir_como_principal(self) -> None:
        self.is_principal = True
        self._tocar()

    def definir_como_secundario(self) -> None:
        self.is_principal = False
        self._tocar()


V = TypeVar("V", bound=VinculoPrincipal)


def adicionar_com_principal(colecao: List[V], vinculo: V) -> V:
    """
    Adiciona vínculo mantendo um único principal.

    Se a coleção está vazia ou o novo vínculo é principal, os demais
    são rebaixados e o novo passa a ser o principal.
    """
    if vinculo is None:
        raise InvalidArgumentError("O vínculo é obrigatório.", field="vinculo")

    if not colecao or vinculo.is_principal:
        for existente in colecao:
            if existente.is_principal:
                existente.definir_como_secundario()
        if not vinculo.is_principal:
            vinculo.definir_como_principal()

    colecao.append(vinculo)
    return vinculo


def remover_com_principal(colecao: List[V], vinculo_id: str, tipo: str) -> V:
    """
    Remove vínculo pelo id; se era o principal, promove o primeiro restante.

    Raises:
        EntityNotFoundError: Se o vínculo não pertence à coleção
    """
    for indice, existente in enumerate(colecao):
        if existente.id == vinculo_id:
            removido = colecao.pop(indice)
            if removido.is_principal and colecao:
                colecao[0].definir_como_principal()
            return removido
    raise EntityNotFoundError(tipo, vinculo_id)


def definir_principal(colecao: List[V], vinculo_id: str, tipo: str) -> V:
    """Torna principal o vínculo informado e rebaixa os demais."""
    alvo = next((v for v in colecao if v.id == vinculo_id), None)
    if alvo is None:
        raise EntityNotFoundError(tipo, vinculo_id)

    for existente in colecao:
        if existente is not alvo and existente.is_principal:
            existente.definir_como_secundario()
    if not alvo.is_principal:
        alvo.definir_como_principal()
    return alvo
