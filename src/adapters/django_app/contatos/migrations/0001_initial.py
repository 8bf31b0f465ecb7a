"""
Migration inicial de Contatos.

Cria as tabelas:
- telefones
- enderecos
"""

from django.db import migrations, models
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='TelefoneModel',
            fields=[
                ('id', models.CharField(
                    max_length=36,
                    primary_key=True,
                    serialize=False,
                    editable=False,
                    help_text='UUID único do telefone'
                )),
                ('ddi', models.CharField(max_length=3, default='55')),
                ('ddd', models.CharField(max_length=2)),
                ('numero', models.CharField(max_length=9, help_text='Somente dígitos')),
                ('criado_em', models.DateTimeField(default=django.utils.timezone.now)),
                ('atualizado_em', models.DateTimeField(null=True, blank=True)),
            ],
            options={
                'db_table': 'telefones',
                'verbose_name': 'Telefone',
                'verbose_name_plural': 'Telefones',
            },
        ),
        migrations.CreateModel(
            name='EnderecoModel',
            fields=[
                ('id', models.CharField(
                    max_length=36,
                    primary_key=True,
                    serialize=False,
                    editable=False,
                    help_text='UUID único do endereço'
                )),
                ('rua', models.CharField(max_length=200)),
                ('numero', models.CharField(max_length=20)),
                ('complemento', models.CharField(max_length=100, null=True, blank=True)),
                ('bairro', models.CharField(max_length=100)),
                ('cep', models.CharField(max_length=8, db_index=True, help_text='Somente dígitos')),
                ('cidade', models.CharField(max_length=100)),
                ('estado', models.CharField(max_length=2, help_text='Sigla da UF')),
                ('criado_em', models.DateTimeField(default=django.utils.timezone.now)),
                ('atualizado_em', models.DateTimeField(null=True, blank=True)),
            ],
            options={
                'db_table': 'enderecos',
                'verbose_name': 'Endereço',
                'verbose_name_plural': 'Endereços',
            },
        ),
    ]
