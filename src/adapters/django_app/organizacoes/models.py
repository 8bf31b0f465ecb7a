"""
Django Models para o domínio de Organizações.

ADAPTERS de src/core/organizacoes/entities.py.

Relacionamentos:
- OrganizacaoModel: Tabela principal
- OrganizacaoTelefoneModel: Vínculo organização-telefone com flag is_principal
"""

from django.db import models
from django.utils import timezone

from src.adapters.django_app.contatos.models import TelefoneModel


class EstadoOrganizacaoChoices(models.TextChoices):
    """Espelha EstadoOrganizacao do Core."""
    ATIVA = 'Ativa', 'Ativa'
    INATIVA = 'Inativa', 'Inativa'
    SUSPENSA = 'Suspensa', 'Suspensa'


class OrganizacaoModel(models.Model):
    """
    Model Django para persistência de Organizações.

    Fields:
        cnpj: 14 dígitos sem máscara, único
        razao_social: Única (comparação sem diferenciar maiúsculas)
    """

    id = models.CharField(
        max_length=36,
        primary_key=True,
        editable=False,
        help_text="UUID único da organização"
    )

    nome_fantasia = models.CharField(max_length=150, db_index=True)
    razao_social = models.CharField(max_length=150, unique=True)
    cnpj = models.CharField(max_length=14, unique=True)

    estado = models.CharField(
        max_length=20,
        choices=EstadoOrganizacaoChoices.choices,
        default=EstadoOrganizacaoChoices.ATIVA,
        db_index=True,
    )

    criado_em = models.DateTimeField(default=timezone.now)
    atualizado_em = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'organizacoes'
        ordering = ['nome_fantasia']
        verbose_name = 'Organização'
        verbose_name_plural = 'Organizações'

    def __str__(self):
        return f"{self.nome_fantasia} ({self.cnpj})"


class OrganizacaoTelefoneModel(models.Model):
    """Vínculo entre organização e telefone."""

    id = models.CharField(max_length=36, primary_key=True, editable=False)

    organizacao = models.ForeignKey(
        OrganizacaoModel,
        on_delete=models.CASCADE,
        related_name='telefones',
    )
    telefone = models.ForeignKey(
        TelefoneModel,
        on_delete=models.CASCADE,
        related_name='organizacoes',
    )
    is_principal = models.BooleanField(default=False)

    criado_em = models.DateTimeField(default=timezone.now)
    atualizado_em = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'organizacoes_telefones'
        ordering = ['criado_em']
        verbose_name = 'Telefone da Organização'
        verbose_name_plural = 'Telefones da Organização'

    def __str__(self):
        return f"{self.organizacao_id} -> {self.telefone_id}"
