#!/usr/bin/env python
"""
Setup rápido para desenvolvimento local.

Este script:
1. Configura Django settings
2. Cria banco de dados SQLite
3. Executa migrations
4. Registra profissionais de exemplo (opcional)

Uso:
    python scripts/quick_setup.py
    python scripts/quick_setup.py --with-sample-data
"""

import os
import sys
import argparse

# Adicionar raiz do projeto ao path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


SAMPLE_PROFISSIONAIS = [
    {
        'nome': 'Maria Oliveira',
        'cpf': '529.982.247-25',
        'registro_profissional': '06/12345',
        'tipo_profissional': 'PSICOLOGO',
        'email': 'maria@clinicasaude.com.br',
        'senha': 'Senha@123',
        'telefone': '+55 (11) 98399-1005',
        'rua': 'Avenida Paulista',
        'numero': '1000',
        'complemento': 'Sala 12',
        'bairro': 'Bela Vista',
        'cep': '01310-100',
        'cidade': 'São Paulo',
        'estado': 'SP',
        'razao_social': 'Saúde Total Serviços Médicos Ltda',
        'nome_fantasia': 'Clínica Saúde Total',
        'cnpj': '11.222.333/0001-81',
        'genero': 'FEMININO',
    },
    {
        'nome': 'João Lima',
        'cpf': '111.444.777-35',
        'registro_profissional': 'CRN3-12345',
        'tipo_profissional': 'NUTRICIONISTA',
        'email': 'joao@nutrivida.com.br',
        'senha': 'Nutri#2024',
        'telefone': '+55 (21) 3333-4444',
        'rua': 'Rua Voluntários da Pátria',
        'numero': '45',
        'bairro': 'Botafogo',
        'cep': '22270-000',
        'cidade': 'Rio de Janeiro',
        'estado': 'RJ',
        'razao_social': 'Nutri Vida Consultoria Ltda',
        'nome_fantasia': 'Nutri Vida',
        'cnpj': '11.444.777/0001-61',
        'genero': 'MASCULINO',
    },
]


def setup_django():
    """Configura Django para uso standalone."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'src.config.settings')

    # Forçar SQLite para desenvolvimento rápido
    os.environ['DATABASE_URL'] = 'sqlite:///db.sqlite3'

    import django
    django.setup()


def run_migrations():
    """Executa migrations."""
    from django.core.management import call_command

    print("📦 Executando migrations...")
    call_command('migrate', verbosity=1)
    print("✅ Migrations concluídas!")


def create_sample_data():
    """Registra profissionais de exemplo pelo fluxo de auto-cadastro."""
    from src.config.container import get_container
    from src.core.profissionais.dtos import RegistrarProfissionalInputDTO
    from src.core.shared.exceptions import ConflictError

    service = get_container().registrar_profissional_service()

    print("📝 Registrando profissionais de exemplo...")

    criados = 0
    for dados in SAMPLE_PROFISSIONAIS:
        try:
            output = service.execute(RegistrarProfissionalInputDTO(**dados))
        except ConflictError as e:
            print(f"   - {dados['nome']} já cadastrado(a): {e.message}")
            continue
        criados += 1
        print(f"   ✓ {output.nome} ({output.tipo}, {output.rotulo_registro} {output.registro_profissional})")

    print(f"✅ {criados} profissionais registrados!")


def check_connection():
    """Verifica conexão com o banco."""
    from django.db import connection

    print("🔍 Verificando conexão com o banco...")

    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
        print("✅ Conexão OK!")
        return True
    except Exception as e:
        print(f"❌ Erro de conexão: {e}")
        return False


def show_info():
    """Mostra informações do setup."""
    from django.conf import settings

    print("\n" + "=" * 60)
    print("📊 Informações do Setup")
    print("=" * 60)
    print(f"  Database Engine: {settings.DATABASES['default']['ENGINE']}")
    print(f"  Database Name: {settings.DATABASES['default']['NAME']}")
    print(f"  Event Publisher: {settings.EVENT_PUBLISHER_MODE}")
    print(f"  Debug Mode: {settings.DEBUG}")
    print("=" * 60)
    print("\n🚀 Próximos passos:")
    print("   1. python -m django runserver --settings=src.config.settings")
    print("   2. Acesse: http://localhost:8000/api/profissionais/")
    print("   3. Acesse: http://localhost:8000/health/")
    print("\n")


def main():
    parser = argparse.ArgumentParser(description='Setup rápido para desenvolvimento')
    parser.add_argument(
        '--with-sample-data',
        action='store_true',
        help='Registrar profissionais de exemplo'
    )
    parser.add_argument(
        '--check-only',
        action='store_true',
        help='Apenas verificar conexão'
    )

    args = parser.parse_args()

    print("\n" + "=" * 60)
    print("🔧 SisMed Manager - Quick Setup")
    print("=" * 60 + "\n")

    setup_django()

    if args.check_only:
        check_connection()
        return

    if not check_connection():
        print("\n⚠️  Certifique-se de que o banco de dados está acessível.")
        print("   Para usar SQLite, defina: DATABASE_URL=sqlite:///db.sqlite3")
        return

    run_migrations()

    if args.with_sample_data:
        create_sample_data()

    show_info()


if __name__ == '__main__':
    main()
