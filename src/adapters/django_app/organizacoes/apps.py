"""
Configuração do Django App de Organizações.
"""

from django.apps import AppConfig


class OrganizacoesConfig(AppConfig):
    """Clínicas e consultórios (pessoa jurídica)."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'src.adapters.django_app.organizacoes'
    label = 'organizacoes'
    verbose_name = 'Organizações'
