"""
Coletor de erros de validação.

Acumula mensagens de violação em vez de falhar no primeiro erro,
permitindo que a entidade reporte todos os problemas de uma vez
através de um único DomainValidationError.

Example:
    v = ValidationCollector()
    v.when(not nome, "O nome é obrigatório.")
    v.when(not is_cpf(cpf), "O CPF informado é inválido.")
    v.raise_if_any()
"""

from typing import Any, Callable, Iterable, List, Optional, Tuple

from .exceptions import DomainValidationError
from .strings import is_blank


class ValidationCollector:
    """Acumula mensagens de erro em ordem de inserção."""

    def __init__(self):
        self._errors: List[str] = []

    def when(self, has_error: Any, message: str) -> "ValidationCollector":
        """
        Registra a mensagem se a condição de erro for verdadeira.

        Mensagens vazias são ignoradas.
        """
        if has_error and not is_blank(message):
            self._errors.append(message)
        return self

    def add(self, message: str) -> "ValidationCollector":
        """Registra mensagem incondicionalmente."""
        return self.when(True, message)

    def extend(self, messages: Iterable[str]) -> "ValidationCollector":
        for message in messages:
            self.add(message)
        return self

    def collect(self, func: Callable[..., Any], *args, **kwargs) -> Optional[Any]:
        """
        Executa `func` absorvendo seus erros de validação.

        Útil para montar vários agregados e reportar todas as violações
        juntas. Outras exceções propagam normalmente.

        Returns:
            Resultado de `func`, ou None se ela lançou DomainValidationError
        """
        try:
            return func(*args, **kwargs)
        except DomainValidationError as e:
            self.extend(e.errors)
            return None

    @property
    def errors(self) -> Tuple[str, ...]:
        return tuple(self._errors)

    @property
    def has_errors(self) -> bool:
        return bool(self._errors)

    def raise_if_any(self) -> None:
        """
        Lança DomainValidationError se houver erros acumulados.

        Raises:
            DomainValidationError: Com todas as mensagens coletadas
        """
        if self._errors:
            raise DomainValidationError(self._errors)
