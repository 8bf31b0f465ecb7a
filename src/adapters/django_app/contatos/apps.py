"""
Configuração do Django App de Contatos.
"""

from django.apps import AppConfig


class ContatosConfig(AppConfig):
    """Telefones e endereços compartilhados pelos agregados."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'src.adapters.django_app.contatos'
    label = 'contatos'
    verbose_name = 'Contatos'
