"""
Migration inicial de Organizações.

Cria as tabelas:
- organizacoes
- organizacoes_telefones
"""

from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('contatos', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='OrganizacaoModel',
            fields=[
                ('id', models.CharField(
                    max_length=36,
                    primary_key=True,
                    serialize=False,
                    editable=False,
                    help_text='UUID único da organização'
                )),
                ('nome_fantasia', models.CharField(max_length=150, db_index=True)),
                ('razao_social', models.CharField(max_length=150, unique=True)),
                ('cnpj', models.CharField(max_length=14, unique=True)),
                ('estado', models.CharField(
                    max_length=20,
                    choices=[
                        ('Ativa', 'Ativa'),
                        ('Inativa', 'Inativa'),
                        ('Suspensa', 'Suspensa'),
                    ],
                    default='Ativa',
                    db_index=True,
                )),
                ('criado_em', models.DateTimeField(default=django.utils.timezone.now)),
                ('atualizado_em', models.DateTimeField(null=True, blank=True)),
            ],
            options={
                'db_table': 'organizacoes',
                'ordering': ['nome_fantasia'],
                'verbose_name': 'Organização',
                'verbose_name_plural': 'Organizações',
            },
        ),
        migrations.CreateModel(
            name='OrganizacaoTelefoneModel',
            fields=[
                ('id', models.CharField(
                    max_length=36,
                    primary_key=True,
                    serialize=False,
                    editable=False,
                )),
                ('is_principal', models.BooleanField(default=False)),
                ('criado_em', models.DateTimeField(default=django.utils.timezone.now)),
                ('atualizado_em', models.DateTimeField(null=True, blank=True)),
                ('organizacao', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='telefones',
                    to='organizacoes.organizacaomodel',
                )),
                ('telefone', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='organizacoes',
                    to='contatos.telefonemodel',
                )),
            ],
            options={
                'db_table': 'organizacoes_telefones',
                'ordering': ['criado_em'],
                'verbose_name': 'Telefone da Organização',
                'verbose_name_plural': 'Telefones da Organização',
            },
        ),
    ]
