"""
Configuração do Django App de Profissionais.
"""

from django.apps import AppConfig


class ProfissionaisConfig(AppConfig):
    """Psicólogos e nutricionistas."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'src.adapters.django_app.profissionais'
    label = 'profissionais'
    verbose_name = 'Profissionais'
