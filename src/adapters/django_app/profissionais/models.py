"""
Django Models para o domínio de Profissionais.

ADAPTERS de src/core/profissionais/entities.py.

Relacionamentos:
- ProfissionalModel: Tabela principal (um tipo por linha)
- ProfissionalTelefoneModel / ProfissionalEnderecoModel: Vínculos com flag is_principal
- OrganizacaoProfissionalModel: Vínculo N:N com organizações, com estado próprio
"""

from django.db import models
from django.utils import timezone

from src.adapters.django_app.contatos.models import EnderecoModel, TelefoneModel
from src.adapters.django_app.organizacoes.models import OrganizacaoModel
from src.adapters.django_app.usuarios.models import UsuarioModel


class TipoProfissionalChoices(models.TextChoices):
    """Espelha TipoProfissional do Core."""
    PSICOLOGO = 'Psicólogo', 'Psicólogo'
    NUTRICIONISTA = 'Nutricionista', 'Nutricionista'


class GeneroChoices(models.TextChoices):
    NAO_INFORMADO = 'Não informado', 'Não informado'
    MASCULINO = 'Masculino', 'Masculino'
    FEMININO = 'Feminino', 'Feminino'
    OUTRO = 'Outro', 'Outro'


class EstadoChoices(models.TextChoices):
    """Estado do profissional e do vínculo com organização."""
    ATIVO = 'Ativo', 'Ativo'
    INATIVO = 'Inativo', 'Inativo'


class ProfissionalModel(models.Model):
    """
    Model Django para persistência de Profissionais.

    Fields:
        cpf: 11 dígitos sem máscara, único
        registro_profissional: CRP ou CRN, único por tipo
        usuario: Conta de acesso (opcional)
    """

    id = models.CharField(
        max_length=36,
        primary_key=True,
        editable=False,
        help_text="UUID único do profissional"
    )

    tipo = models.CharField(
        max_length=20,
        choices=TipoProfissionalChoices.choices,
        db_index=True,
    )

    nome = models.CharField(max_length=150, db_index=True)
    cpf = models.CharField(max_length=11, unique=True)
    rg = models.CharField(max_length=20, null=True, blank=True)
    data_nascimento = models.DateField(null=True, blank=True)

    genero = models.CharField(
        max_length=20,
        choices=GeneroChoices.choices,
        default=GeneroChoices.NAO_INFORMADO,
    )

    estado = models.CharField(
        max_length=20,
        choices=EstadoChoices.choices,
        default=EstadoChoices.ATIVO,
        db_index=True,
    )

    registro_profissional = models.CharField(max_length=20)

    usuario = models.OneToOneField(
        UsuarioModel,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='profissional',
    )

    criado_em = models.DateTimeField(default=timezone.now)
    atualizado_em = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'profissionais'
        ordering = ['nome']
        verbose_name = 'Profissional'
        verbose_name_plural = 'Profissionais'
        constraints = [
            models.UniqueConstraint(
                fields=['tipo', 'registro_profissional'],
                name='profissional_registro_unico_por_tipo',
            ),
        ]

    def __str__(self):
        return f"{self.nome} ({self.tipo})"


class ProfissionalTelefoneModel(models.Model):
    id = models.CharField(max_length=36, primary_key=True, editable=False)

    profissional = models.ForeignKey(
        ProfissionalModel,
        on_delete=models.CASCADE,
        related_name='telefones',
    )
    telefone = models.ForeignKey(
        TelefoneModel,
        on_delete=models.CASCADE,
        related_name='profissionais',
    )
    is_principal = models.BooleanField(default=False)

    criado_em = models.DateTimeField(default=timezone.now)
    atualizado_em = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'profissionais_telefones'
        ordering = ['criado_em']


class ProfissionalEnderecoModel(models.Model):
    id = models.CharField(max_length=36, primary_key=True, editable=False)

    profissional = models.ForeignKey(
        ProfissionalModel,
        on_delete=models.CASCADE,
        related_name='enderecos',
    )
    endereco = models.ForeignKey(
        EnderecoModel,
        on_delete=models.CASCADE,
        related_name='profissionais',
    )
    is_principal = models.BooleanField(default=False)

    criado_em = models.DateTimeField(default=timezone.now)
    atualizado_em = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'profissionais_enderecos'
        ordering = ['criado_em']


class OrganizacaoProfissionalModel(models.Model):
    """Vínculo entre organização e profissional."""

    id = models.CharField(max_length=36, primary_key=True, editable=False)

    organizacao = models.ForeignKey(
        OrganizacaoModel,
        on_delete=models.CASCADE,
        related_name='profissionais',
    )
    profissional = models.ForeignKey(
        ProfissionalModel,
        on_delete=models.CASCADE,
        related_name='organizacoes',
    )
    estado = models.CharField(
        max_length=20,
        choices=EstadoChoices.choices,
        default=EstadoChoices.ATIVO,
    )

    criado_em = models.DateTimeField(default=timezone.now)
    atualizado_em = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'organizacoes_profissionais'
        ordering = ['criado_em']
        constraints = [
            models.UniqueConstraint(
                fields=['organizacao', 'profissional'],
                name='vinculo_organizacao_profissional_unico',
            ),
        ]
