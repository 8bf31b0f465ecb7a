"""
Core Domain Layer - O Hexágono.

Lógica de negócio pura do SisMed, sem dependências de frameworks:
- shared: exceções, validação, helpers e ports
- contatos: telefones e endereços
- usuarios: contas de acesso
- organizacoes: clínicas
- profissionais: psicólogos e nutricionistas
"""
