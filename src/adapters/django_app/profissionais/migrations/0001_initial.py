"""
Migration inicial de Profissionais.

Cria as tabelas:
- profissionais
- profissionais_telefones
- profissionais_enderecos
- organizacoes_profissionais
"""

from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


ESTADOS = [
    ('Ativo', 'Ativo'),
    ('Inativo', 'Inativo'),
]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('contatos', '0001_initial'),
        ('usuarios', '0001_initial'),
        ('organizacoes', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='ProfissionalModel',
            fields=[
                ('id', models.CharField(
                    max_length=36,
                    primary_key=True,
                    serialize=False,
                    editable=False,
                    help_text='UUID único do profissional'
                )),
                ('tipo', models.CharField(
                    max_length=20,
                    choices=[
                        ('Psicólogo', 'Psicólogo'),
                        ('Nutricionista', 'Nutricionista'),
                    ],
                    db_index=True,
                )),
                ('nome', models.CharField(max_length=150, db_index=True)),
                ('cpf', models.CharField(max_length=11, unique=True)),
                ('rg', models.CharField(max_length=20, null=True, blank=True)),
                ('data_nascimento', models.DateField(null=True, blank=True)),
                ('genero', models.CharField(
                    max_length=20,
                    choices=[
                        ('Não informado', 'Não informado'),
                        ('Masculino', 'Masculino'),
                        ('Feminino', 'Feminino'),
                        ('Outro', 'Outro'),
                    ],
                    default='Não informado',
                )),
                ('estado', models.CharField(
                    max_length=20,
                    choices=ESTADOS,
                    default='Ativo',
                    db_index=True,
                )),
                ('registro_profissional', models.CharField(max_length=20)),
                ('criado_em', models.DateTimeField(default=django.utils.timezone.now)),
                ('atualizado_em', models.DateTimeField(null=True, blank=True)),
                ('usuario', models.OneToOneField(
                    on_delete=django.db.models.deletion.SET_NULL,
                    null=True,
                    blank=True,
                    related_name='profissional',
                    to='usuarios.usuariomodel',
                )),
            ],
            options={
                'db_table': 'profissionais',
                'ordering': ['nome'],
                'verbose_name': 'Profissional',
                'verbose_name_plural': 'Profissionais',
            },
        ),
        migrations.AddConstraint(
            model_name='profissionalmodel',
            constraint=models.UniqueConstraint(
                fields=('tipo', 'registro_profissional'),
                name='profissional_registro_unico_por_tipo',
            ),
        ),
        migrations.CreateModel(
            name='ProfissionalTelefoneModel',
            fields=[
                ('id', models.CharField(
                    max_length=36, primary_key=True, serialize=False, editable=False
                )),
                ('is_principal', models.BooleanField(default=False)),
                ('criado_em', models.DateTimeField(default=django.utils.timezone.now)),
                ('atualizado_em', models.DateTimeField(null=True, blank=True)),
                ('profissional', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='telefones',
                    to='profissionais.profissionalmodel',
                )),
                ('telefone', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='profissionais',
                    to='contatos.telefonemodel',
                )),
            ],
            options={
                'db_table': 'profissionais_telefones',
                'ordering': ['criado_em'],
            },
        ),
        migrations.CreateModel(
            name='ProfissionalEnderecoModel',
            fields=[
                ('id', models.CharField(
                    max_length=36, primary_key=True, serialize=False, editable=False
                )),
                ('is_principal', models.BooleanField(default=False)),
                ('criado_em', models.DateTimeField(default=django.utils.timezone.now)),
                ('atualizado_em', models.DateTimeField(null=True, blank=True)),
                ('profissional', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='enderecos',
                    to='profissionais.profissionalmodel',
                )),
                ('endereco', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='profissionais',
                    to='contatos.enderecomodel',
                )),
            ],
            options={
                'db_table': 'profissionais_enderecos',
                'ordering': ['criado_em'],
            },
        ),
        migrations.CreateModel(
            name='OrganizacaoProfissionalModel',
            fields=[
                ('id', models.CharField(
                    max_length=36, primary_key=True, serialize=False, editable=False
                )),
                ('estado', models.CharField(max_length=20, choices=ESTADOS, default='Ativo')),
                ('criado_em', models.DateTimeField(default=django.utils.timezone.now)),
                ('atualizado_em', models.DateTimeField(null=True, blank=True)),
                ('organizacao', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='profissionais',
                    to='organizacoes.organizacaomodel',
                )),
                ('profissional', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='organizacoes',
                    to='profissionais.profissionalmodel',
                )),
            ],
            options={
                'db_table': 'organizacoes_profissionais',
                'ordering': ['criado_em'],
            },
        ),
        migrations.AddConstraint(
            model_name='organizacaoprofissionalmodel',
            constraint=models.UniqueConstraint(
                fields=('organizacao', 'profissional'),
                name='vinculo_organizacao_profissional_unico',
            ),
        ),
    ]
