"""
Django Models para o domínio de Usuários.

ADAPTER de src/core/usuarios/entities.py. Sem lógica de negócio:
hash de senha e regras de estado ficam na UsuarioEntity.
"""

from django.db import models
from django.utils import timezone


class EstadoUsuarioChoices(models.TextChoices):
    """Espelha EstadoUsuario do Core."""
    ATIVO = 'Ativo', 'Ativo'
    INATIVO = 'Inativo', 'Inativo'
    BLOQUEADO = 'Bloqueado', 'Bloqueado'


class UsuarioModel(models.Model):
    """
    Model Django para persistência de Usuários.

    Fields:
        id: UUID gerado pela Entity
        email: Normalizado (minúsculas), único
        senha_hash: pbkdf2_sha256$iteracoes$salt$hash
    """

    id = models.CharField(
        max_length=36,
        primary_key=True,
        editable=False,
        help_text="UUID único do usuário"
    )

    nome = models.CharField(max_length=100, db_index=True)
    email = models.CharField(max_length=100, unique=True)
    senha_hash = models.CharField(max_length=255)

    estado = models.CharField(
        max_length=20,
        choices=EstadoUsuarioChoices.choices,
        default=EstadoUsuarioChoices.ATIVO,
        db_index=True,
    )

    criado_em = models.DateTimeField(default=timezone.now)
    atualizado_em = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'usuarios'
        ordering = ['nome']
        verbose_name = 'Usuário'
        verbose_name_plural = 'Usuários'

    def __str__(self):
        return f"{self.nome} <{self.email}>"
