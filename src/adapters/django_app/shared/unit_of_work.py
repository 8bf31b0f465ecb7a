"""
Unit of Work - Implementação Django.

Gerencia transações atômicas entre múltiplos repositórios
(usuário, organização e profissional no auto-cadastro).

Responsabilidades:
- Iniciar/finalizar transações
- Commit/Rollback coordenado
- Publicar eventos após commit bem-sucedido
"""

from typing import List, Optional
import logging

from django.db import transaction

from src.core.shared.events import DomainEvent
from src.core.shared.interfaces import EventPublisher, UnitOfWork

logger = logging.getLogger(__name__)


class DjangoUnitOfWork(UnitOfWork):
    """
    Implementação Django do Unit of Work.

    Usa transaction.atomic() para delimitar a transação, o que permite
    aninhar o UoW dentro de outro bloco atômico (savepoint).
    Eventos são publicados apenas após commit bem-sucedido.

    Example:
        with DjangoUnitOfWork(event_publisher=publisher) as uow:
            usuario_repo.save(usuario)
            profissional_repo.save(profissional)
            uow.publish_event(ProfissionalRegistradoEvent(...))
        # Commit automático + eventos publicados

    Example com rollback:
        with DjangoUnitOfWork() as uow:
            repo.save(entity)
            raise ConflictError("...")
        # Rollback automático, eventos descartados
    """

    def __init__(self, event_publisher: Optional[EventPublisher] = None):
        super().__init__()
        self._event_publisher = event_publisher
        self._atomic = None
        self._committed = False
        self._rolled_back = False

    def _begin_transaction(self) -> None:
        """Abre o bloco atômico (transação ou savepoint)."""
        self._committed = False
        self._rolled_back = False
        self._atomic = transaction.atomic()
        self._atomic.__enter__()
        logger.debug("Transaction started")

    def commit(self) -> None:
        """
        Persiste todas as mudanças e publica eventos.

        Ordem de execução:
        1. Fechar o bloco atômico (commit no banco)
        2. Publicar eventos para handlers assíncronos
        3. Limpar estado interno

        Raises:
            Exception: Se commit falhar, re-lança exceção
        """
        if self._committed or self._rolled_back:
            logger.warning("Transaction already finalized")
            return

        if self._atomic is not None:
            atomic, self._atomic = self._atomic, None
            try:
                atomic.__exit__(None, None, None)
            except Exception as e:
                logger.error(f"Commit failed: {e}")
                self._rolled_back = True
                self.clear_events()
                raise
            logger.debug("Transaction committed")

        self._committed = True
        if self._events:
            self._publish_events()

    def rollback(self) -> None:
        """
        Desfaz todas as mudanças e descarta eventos.

        Chamado automaticamente se exceção ocorrer dentro do contexto.
        """
        if self._committed or self._rolled_back:
            return

        if self._atomic is not None:
            atomic, self._atomic = self._atomic, None
            try:
                transaction.set_rollback(True)
                atomic.__exit__(None, None, None)
                logger.debug("Transaction rolled back")
            except Exception as e:
                logger.error(f"Rollback failed: {e}")

        self._rolled_back = True
        self.clear_events()

    def _publish_events(self) -> None:
        """
        Publica eventos para handlers assíncronos.

        Se event_publisher não estiver configurado, apenas loga.
        Falhas de publicação não desfazem a transação já comitada.
        """
        for event in self._events:
            logger.info(
                f"Publishing event: {event.event_type} "
                f"for aggregate {event.aggregate_id}"
            )

            if self._event_publisher:
                try:
                    self._event_publisher.publish(event)
                except Exception as e:
                    logger.error(f"Failed to publish event: {e}")

        self.clear_events()

    @property
    def is_committed(self) -> bool:
        return self._committed

    @property
    def is_rolled_back(self) -> bool:
        return self._rolled_back


class InMemoryUnitOfWork(UnitOfWork):
    """
    Unit of Work em memória para testes.

    Não persiste nada - apenas simula comportamento
    para testes unitários sem banco de dados.

    Example:
        uow = InMemoryUnitOfWork()
        with uow:
            uow.publish_event(event)

        assert uow.committed
        assert len(uow.published_events) == 1
    """

    def __init__(self):
        super().__init__()
        self._committed = False
        self._rolled_back = False
        self._published_events: List[DomainEvent] = []

    def _begin_transaction(self) -> None:
        pass

    def commit(self) -> None:
        self._committed = True
        self._published_events.extend(self._events)
        self.clear_events()

    def rollback(self) -> None:
        self._rolled_back = True
        self.clear_events()

    @property
    def committed(self) -> bool:
        return self._committed

    @property
    def rolled_back(self) -> bool:
        return self._rolled_back

    @property
    def published_events(self) -> List[DomainEvent]:
        """Retorna eventos que foram 'publicados'."""
        return self._published_events

    def reset(self) -> None:
        """Reset para próximo teste."""
        self._committed = False
        self._rolled_back = False
        self._published_events.clear()
        self.clear_events()
