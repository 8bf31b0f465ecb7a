"""
Ports (Interfaces) do Domínio de Organizações.
"""

from typing import Dict, List, Optional, Protocol, runtime_checkable

from .entities import OrganizacaoEntity


@runtime_checkable
class OrganizacaoRepository(Protocol):
    """
    Interface para persistência de Organizações.

    `save` persiste o agregado completo, incluindo os telefones.
    """

    def save(self, organizacao: OrganizacaoEntity) -> None:
        ...

    def get_by_id(self, organizacao_id: str) -> Optional[OrganizacaoEntity]:
        ...

    def get_by_cnpj(self, cnpj: str) -> Optional[OrganizacaoEntity]:
        ...

    def exists_by_cnpj(self, cnpj: str, excluir_id: Optional[str] = None) -> bool:
        ...

    def exists_by_razao_social(self, razao_social: str, excluir_id: Optional[str] = None) -> bool:
        """Comparação sem distinção de maiúsculas."""
        ...

    def delete(self, organizacao_id: str) -> None:
        ...

    def list_all(self) -> List[OrganizacaoEntity]:
        ...

    def exists(self, organizacao_id: str) -> bool:
        ...


class InMemoryOrganizacaoRepository:
    """Implementação em memória do OrganizacaoRepository (testes)."""

    def __init__(self):
        self._organizacoes: Dict[str, OrganizacaoEntity] = {}

    def save(self, organizacao: OrganizacaoEntity) -> None:
        self._organizacoes[organizacao.id] = organizacao

    def get_by_id(self, organizacao_id: str) -> Optional[OrganizacaoEntity]:
        return self._organizacoes.get(organizacao_id)

    def get_by_cnpj(self, cnpj: str) -> Optional[OrganizacaoEntity]:
        return next((o for o in self._organizacoes.values() if o.cnpj == cnpj), None)

    def exists_by_cnpj(self, cnpj: str, excluir_id: Optional[str] = None) -> bool:
        return any(
            o.cnpj == cnpj and o.id != excluir_id for o in self._organizacoes.values()
        )

    def exists_by_razao_social(self, razao_social: str, excluir_id: Optional[str] = None) -> bool:
        alvo = (razao_social or "").lower()
        return any(
            o.razao_social.lower() == alvo and o.id != excluir_id
            for o in self._organizacoes.values()
        )

    def delete(self, organizacao_id: str) -> None:
        self._organizacoes.pop(organizacao_id, None)

    def list_all(self) -> List[OrganizacaoEntity]:
        return sorted(self._organizacoes.values(), key=lambda o: o.nome_fantasia)

    def exists(self, organizacao_id: str) -> bool:
        return organizacao_id in self._organizacoes

    def clear(self) -> None:
        self._organizacoes.clear()
