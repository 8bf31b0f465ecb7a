"""
Configuração do Django App de Usuários.
"""

from django.apps import AppConfig


class UsuariosConfig(AppConfig):
    """Contas de acesso (login por e-mail)."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'src.adapters.django_app.usuarios'
    label = 'usuarios'
    verbose_name = 'Usuários'
