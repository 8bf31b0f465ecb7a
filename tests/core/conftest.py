"""
Fixtures compartilhadas pelos testes do Core.

Os testes do Core não dependem de Django: usam repositórios em
memória e um Unit of Work fake.
"""

import pytest

from src.core.organizacoes.ports import InMemoryOrganizacaoRepository
from src.core.profissionais.ports import InMemoryProfissionalRepository
from src.core.shared.interfaces import UnitOfWork
from src.core.usuarios.ports import InMemoryUsuarioRepository


class FakeUnitOfWork(UnitOfWork):
    """
    Fake Unit of Work para testes.

    Permite testar:
    - Comportamento de commit/rollback
    - Eventos publicados (mantidos após commit para inspeção)
    """

    def __init__(self):
        super().__init__()
        self._committed = False
        self._rolled_back = False

    def _begin_transaction(self):
        pass

    def commit(self):
        self._committed = True

    def rollback(self):
        self._rolled_back = True
        self.clear_events()

    @property
    def committed(self) -> bool:
        return self._committed

    @property
    def rolled_back(self) -> bool:
        return self._rolled_back


@pytest.fixture
def uow():
    """Fixture para Unit of Work fake."""
    return FakeUnitOfWork()


@pytest.fixture
def usuario_repo():
    return InMemoryUsuarioRepository()


@pytest.fixture
def organizacao_repo():
    return InMemoryOrganizacaoRepository()


@pytest.fixture
def profissional_repo():
    return InMemoryProfissionalRepository()
