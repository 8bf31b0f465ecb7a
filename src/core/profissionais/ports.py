"""
Ports (Interfaces) do Domínio de Profissionais.
"""

from typing import Dict, List, Optional, Protocol, runtime_checkable

from .entities import ProfissionalEntity, TipoProfissional


@runtime_checkable
class ProfissionalRepository(Protocol):
    """
    Interface para persistência de Profissionais.

    `save` persiste o agregado com telefones, endereços e vínculos com
    organizações. O usuário e as organizações são persistidos pelos
    próprios repositórios antes do profissional.
    """

    def save(self, profissional: ProfissionalEntity) -> None:
        ...

    def get_by_id(self, profissional_id: str) -> Optional[ProfissionalEntity]:
        ...

    def exists_by_cpf(self, cpf: str) -> bool:
        ...

    def exists_by_registro(self, tipo: TipoProfissional, registro: str) -> bool:
        """Registro é único por tipo (CRP entre psicólogos, CRN entre nutricionistas)."""
        ...

    def list_all(self) -> List[ProfissionalEntity]:
        ...

    def list_by_tipo(self, tipo: TipoProfissional) -> List[ProfissionalEntity]:
        ...

    def exists(self, profissional_id: str) -> bool:
        ...


class InMemoryProfissionalRepository:
    """Implementação em memória do ProfissionalRepository (testes)."""

    def __init__(self):
        self._profissionais: Dict[str, ProfissionalEntity] = {}

    def save(self, profissional: ProfissionalEntity) -> None:
        self._profissionais[profissional.id] = profissional

    def get_by_id(self, profissional_id: str) -> Optional[ProfissionalEntity]:
        return self._profissionais.get(profissional_id)

    def exists_by_cpf(self, cpf: str) -> bool:
        return any(p.cpf == cpf for p in self._profissionais.values())

    def exists_by_registro(self, tipo: TipoProfissional, registro: str) -> bool:
        return any(
            p.tipo == tipo and p.registro_profissional == registro
            for p in self._profissionais.values()
        )

    def list_all(self) -> List[ProfissionalEntity]:
        return sorted(self._profissionais.values(), key=lambda p: p.nome)

    def list_by_tipo(self, tipo: TipoProfissional) -> List[ProfissionalEntity]:
        return [p for p in self.list_all() if p.tipo == tipo]

    def exists(self, profissional_id: str) -> bool:
        return profissional_id in self._profissionais

    def clear(self) -> None:
        self._profissionais.clear()
