"""
Django Models de Contatos (telefones e endereços).

Estes models são ADAPTERS - persistem os value-like entities de
src/core/contatos/entities.py. Os vínculos com organizações e
profissionais (flag is_principal) ficam nos apps donos do agregado.
"""

from django.db import models
from django.utils import timezone


class TelefoneModel(models.Model):
    """
    Model Django para persistência de Telefones.

    Fields:
        id: UUID gerado pela Entity
        ddi: 1 a 3 dígitos
        ddd: 2 dígitos
        numero: 8 (fixo) ou 9 (celular) dígitos, sem máscara
    """

    id = models.CharField(
        max_length=36,
        primary_key=True,
        editable=False,
        help_text="UUID único do telefone"
    )

    ddi = models.CharField(max_length=3, default='55')
    ddd = models.CharField(max_length=2)
    numero = models.CharField(max_length=9, help_text="Somente dígitos")

    criado_em = models.DateTimeField(default=timezone.now)
    atualizado_em = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'telefones'
        verbose_name = 'Telefone'
        verbose_name_plural = 'Telefones'

    def __str__(self):
        return f"+{self.ddi} ({self.ddd}) {self.numero}"


class EnderecoModel(models.Model):
    """Model Django para persistência de Endereços."""

    id = models.CharField(
        max_length=36,
        primary_key=True,
        editable=False,
        help_text="UUID único do endereço"
    )

    rua = models.CharField(max_length=200)
    numero = models.CharField(max_length=20)
    complemento = models.CharField(max_length=100, null=True, blank=True)
    bairro = models.CharField(max_length=100)
    cep = models.CharField(max_length=8, db_index=True, help_text="Somente dígitos")
    cidade = models.CharField(max_length=100)
    estado = models.CharField(max_length=2, help_text="Sigla da UF")

    criado_em = models.DateTimeField(default=timezone.now)
    atualizado_em = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'enderecos'
        verbose_name = 'Endereço'
        verbose_name_plural = 'Endereços'

    def __str__(self):
        return f"{self.rua}, {self.numero} - {self.cidade}/{self.estado}"
