"""
Interfaces (Ports) - Contratos entre Core e Adapters.

Driven Ports definidos aqui:
- UnitOfWork: transação atômica + fila de eventos pós-commit
- Repository: operações básicas de persistência
- EventPublisher: entrega de eventos a consumidores

Core define interfaces; Adapters implementam.
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, Protocol, TypeVar

from .events import DomainEvent

T = TypeVar("T")


class UnitOfWork(ABC):
    """
    Unit of Work - Coordena transações atômicas.

    Pattern: Context Manager
        with uow:
            usuario_repo.save(usuario)
            organizacao_repo.save(organizacao)
            uow.publish_event(evento)
        # Commit automático ao sair sem erro
        # Rollback automático se exceção

    Eventos enfileirados só são publicados após commit bem-sucedido;
    em rollback são descartados.
    """

    def __init__(self):
        self._events: List[DomainEvent] = []

    def __enter__(self) -> "UnitOfWork":
        self._begin_transaction()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if exc_type is not None:
            self.rollback()
        else:
            self.commit()
        return False

    @abstractmethod
    def _begin_transaction(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def commit(self) -> None:
        """
        Persiste mudanças e publica eventos enfileirados.

        Ordem: commit no banco, publicação, limpeza da fila.
        """
        raise NotImplementedError

    @abstractmethod
    def rollback(self) -> None:
        """Desfaz mudanças e descarta eventos."""
        raise NotImplementedError

    def publish_event(self, event: DomainEvent) -> None:
        """Enfileira evento para publicação após commit."""
        self._events.append(event)

    def collect_events(self) -> List[DomainEvent]:
        return list(self._events)

    def clear_events(self) -> None:
        self._events.clear()


class Repository(Protocol, Generic[T]):
    """
    Interface genérica para repositórios.

    Usa Protocol: adapters não precisam herdar explicitamente.
    Repositórios de cada domínio estendem com buscas específicas.
    """

    def save(self, entity: T) -> None:
        ...

    def get_by_id(self, entity_id: str) -> Optional[T]:
        ...

    def delete(self, entity_id: str) -> None:
        ...

    def list_all(self) -> List[T]:
        ...

    def exists(self, entity_id: str) -> bool:
        ...


class EventPublisher(ABC):
    """
    Interface para publicação de eventos.

    Implementações ficam nos adapters (logging, Celery, memória).
    """

    @abstractmethod
    def publish(self, event: DomainEvent) -> None:
        raise NotImplementedError

    def publish_batch(self, events: List[DomainEvent]) -> None:
        for event in events:
            self.publish(event)
