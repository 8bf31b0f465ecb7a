"""
Ports (Interfaces) do Domínio de Usuários.

Implementações:
- DjangoUsuarioRepository (adapters/django_app/usuarios)
- InMemoryUsuarioRepository (testes)
"""

from typing import Dict, List, Optional, Protocol, runtime_checkable

from .entities import UsuarioEntity


@runtime_checkable
class UsuarioRepository(Protocol):
    """
    Interface para persistência de Usuários.

    E-mails são comparados já normalizados (minúsculas, sem espaços).
    """

    def save(self, usuario: UsuarioEntity) -> None:
        """Persiste usuário (create ou update)."""
        ...

    def get_by_id(self, usuario_id: str) -> Optional[UsuarioEntity]:
        ...

    def get_by_email(self, email: str) -> Optional[UsuarioEntity]:
        ...

    def exists_by_email(self, email: str, excluir_id: Optional[str] = None) -> bool:
        """Verifica se o e-mail já está em uso, ignorando `excluir_id`."""
        ...

    def delete(self, usuario_id: str) -> None:
        ...

    def list_all(self) -> List[UsuarioEntity]:
        ...

    def exists(self, usuario_id: str) -> bool:
        ...


class InMemoryUsuarioRepository:
    """
    Implementação em memória do UsuarioRepository.

    Não usar em produção!
    """

    def __init__(self):
        self._usuarios: Dict[str, UsuarioEntity] = {}

    def save(self, usuario: UsuarioEntity) -> None:
        self._usuarios[usuario.id] = usuario

    def get_by_id(self, usuario_id: str) -> Optional[UsuarioEntity]:
        return self._usuarios.get(usuario_id)

    def get_by_email(self, email: str) -> Optional[UsuarioEntity]:
        email = (email or "").strip().lower()
        return next((u for u in self._usuarios.values() if u.email == email), None)

    def exists_by_email(self, email: str, excluir_id: Optional[str] = None) -> bool:
        usuario = self.get_by_email(email)
        return usuario is not None and usuario.id != excluir_id

    def delete(self, usuario_id: str) -> None:
        self._usuarios.pop(usuario_id, None)

    def list_all(self) -> List[UsuarioEntity]:
        return sorted(self._usuarios.values(), key=lambda u: u.nome)

    def exists(self, usuario_id: str) -> bool:
        return usuario_id in self._usuarios

    def clear(self) -> None:
        """Limpa todos os dados (útil para testes)."""
        self._usuarios.clear()
