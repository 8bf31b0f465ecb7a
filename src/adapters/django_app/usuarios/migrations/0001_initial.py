"""
Migration inicial de Usuários.
"""

from django.db import migrations, models
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='UsuarioModel',
            fields=[
                ('id', models.CharField(
                    max_length=36,
                    primary_key=True,
                    serialize=False,
                    editable=False,
                    help_text='UUID único do usuário'
                )),
                ('nome', models.CharField(max_length=100, db_index=True)),
                ('email', models.CharField(max_length=100, unique=True)),
                ('senha_hash', models.CharField(max_length=255)),
                ('estado', models.CharField(
                    max_length=20,
                    choices=[
                        ('Ativo', 'Ativo'),
                        ('Inativo', 'Inativo'),
                        ('Bloqueado', 'Bloqueado'),
                    ],
                    default='Ativo',
                    db_index=True,
                )),
                ('criado_em', models.DateTimeField(default=django.utils.timezone.now)),
                ('atualizado_em', models.DateTimeField(null=True, blank=True)),
            ],
            options={
                'db_table': 'usuarios',
                'ordering': ['nome'],
                'verbose_name': 'Usuário',
                'verbose_name_plural': 'Usuários',
            },
        ),
    ]
