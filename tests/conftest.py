"""
Configurações globais do Pytest para SisMed Manager.

Este arquivo é carregado automaticamente pelo pytest e
fornece fixtures e configurações compartilhadas.

Django é configurado com SQLite em memória antes da coleta, de modo
que testes do Core, dos adapters e de integração usem as mesmas
settings.
"""

from pathlib import Path

import pytest


def _configurar_django():
    """Configura Django para os testes (SQLite em memória)."""
    import django
    from django.conf import settings

    if settings.configured:
        return

    settings.configure(
        DEBUG=True,
        SECRET_KEY='test-secret-key',
        DATABASES={
            'default': {
                'ENGINE': 'django.db.backends.sqlite3',
                'NAME': ':memory:',
            }
        },
        INSTALLED_APPS=[
            'django.contrib.contenttypes',
            'src.adapters.django_app.contatos',
            'src.adapters.django_app.usuarios',
            'src.adapters.django_app.organizacoes',
            'src.adapters.django_app.profissionais',
        ],
        MIDDLEWARE=[],
        ROOT_URLCONF='src.config.urls',
        DEFAULT_AUTO_FIELD='django.db.models.BigAutoField',
        USE_TZ=True,
        TIME_ZONE='America/Sao_Paulo',
        EVENT_PUBLISHER_MODE='memory',
        SENHA_POLITICA={
            'min_length': 8,
            'max_length': 25,
            'require_uppercase': True,
            'require_lowercase': True,
            'require_digit': True,
            'require_special_char': True,
            'iteracoes': 10000,
        },
    )
    django.setup()


def pytest_configure(config):
    """Configuração do pytest."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    _configurar_django()


@pytest.fixture(scope="session")
def project_root():
    """Retorna o caminho raiz do projeto."""
    return Path(__file__).parent.parent


@pytest.fixture
def politica():
    """Política de senha com custo mínimo de hash (testes rápidos)."""
    from src.core.shared.security import PoliticaSenha

    return PoliticaSenha(iteracoes=10000)


# =============================================================================
# Dados de exemplo válidos
# =============================================================================

@pytest.fixture
def dados_registro():
    """Payload completo de auto-cadastro de psicólogo."""
    return {
        "nome": "maria  oliveira",
        "cpf": "529.982.247-25",
        "registro_profissional": "06/12345",
        "tipo_profissional": "PSICOLOGO",
        "email": "Maria@Clinica.com",
        "senha": "Senha@123",
        "telefone": "+55 (11) 98399-1005",
        "rua": "avenida paulista",
        "numero": "1000",
        "complemento": "Sala 12",
        "bairro": "bela vista",
        "cep": "01310-100",
        "cidade": "são paulo",
        "estado": "sp",
        "razao_social": "Saúde Total Serviços Médicos Ltda",
        "nome_fantasia": "Clínica Saúde Total",
        "cnpj": "11.222.333/0001-81",
        "rg": "12.345.678-9",
        "data_nascimento": "1985-04-12",
        "genero": "FEMININO",
    }
