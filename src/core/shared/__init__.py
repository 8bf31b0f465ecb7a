"""
Shared Domain Components.

Contém componentes compartilhados entre todos os domínios:
- Exceções de domínio
- Coletor de validação
- Helpers de strings, formatação, validação de documentos e segurança
- Interfaces (Ports) e base de Domain Events
"""

from .exceptions import (
    DomainException,
    DomainValidationError,
    EntityNotFoundError,
    ConflictError,
    UnauthorizedError,
    InvalidArgumentError,
    BusinessRuleViolationError,
)
from .events import DomainEvent
from .interfaces import UnitOfWork, EventPublisher
from .security import PoliticaSenha, POLITICA_SENHA_PADRAO
from .validation import ValidationCollector

__all__ = [
    "DomainException",
    "DomainValidationError",
    "EntityNotFoundError",
    "ConflictError",
    "UnauthorizedError",
    "InvalidArgumentError",
    "BusinessRuleViolationError",
    "DomainEvent",
    "UnitOfWork",
    "EventPublisher",
    "PoliticaSenha",
    "POLITICA_SENHA_PADRAO",
    "ValidationCollector",
]
