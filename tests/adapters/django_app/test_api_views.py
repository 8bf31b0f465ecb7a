"""
Testes para API Views JSON.

Requests passam pelo URLconf real e pelo container global
(repositórios Django em SQLite, publisher em memória).
Casos de mapeamento de exceção usam services mockados.
"""

import json
from unittest.mock import Mock, patch

import pytest
from django.test import Client

from src.core.shared.exceptions import BusinessRuleViolationError


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def client():
    """Django test client."""
    return Client()


def post_json(client, url, data):
    return client.post(url, data=json.dumps(data), content_type='application/json')


def put_json(client, url, data):
    return client.put(url, data=json.dumps(data), content_type='application/json')


@pytest.fixture
def usuario_criado(client, db):
    response = post_json(client, '/api/usuarios/', {
        'nome': 'ana souza',
        'email': 'ana@clinica.com',
        'senha': 'Senha@123',
    })
    return response.json()['data']


@pytest.fixture
def organizacao_criada(client, db):
    response = post_json(client, '/api/organizacoes/', {
        'nome_fantasia': 'Clínica Vida',
        'razao_social': 'Vida Ltda',
        'cnpj': '11.444.777/0001-61',
        'telefones': ['+55 (11) 3333-4444'],
    })
    return response.json()['data']


# =============================================================================
# Usuários
# =============================================================================

@pytest.mark.django_db
class TestUsuarioAPI:

    def test_post_cria_usuario(self, client):
        """POST deve criar usuário e nunca expor a senha."""
        response = post_json(client, '/api/usuarios/', {
            'nome': 'ana souza',
            'email': 'Ana@Clinica.com',
            'senha': 'Senha@123',
        })

        assert response.status_code == 201
        data = response.json()
        assert data['success'] is True
        assert data['data']['nome'] == 'Ana Souza'
        assert data['data']['email'] == 'ana@clinica.com'
        assert data['data']['estado'] == 'Ativo'
        assert 'senha' not in data['data'] and 'senha_hash' not in data['data']

    def test_post_validacao_erro(self, client):
        """Todos os erros de validação vêm em meta.errors."""
        response = post_json(client, '/api/usuarios/', {
            'nome': '',
            'email': 'invalido',
            'senha': 'fraca',
        })

        assert response.status_code == 400
        data = response.json()
        assert data['success'] is False
        assert data['meta']['error'] == 'DOMAIN_VALIDATION_ERROR'
        assert data['meta']['errors'] == [
            'O nome é obrigatório.',
            'O e-mail informado é inválido.',
            'A senha deve conter entre 8 e 25 caracteres.',
            'A senha deve conter letras maiúsculas, letras minúsculas, números '
            'e caracteres especiais.',
        ]

    def test_post_email_duplicado(self, client, usuario_criado):
        response = post_json(client, '/api/usuarios/', {
            'nome': 'Outra',
            'email': 'ANA@clinica.com',
            'senha': 'Senha@123',
        })

        assert response.status_code == 409
        assert response.json()['meta']['conflitos'] == [
            "Usuário com e-mail 'ana@clinica.com' já existe."
        ]

    def test_post_json_invalido(self, client):
        response = client.post('/api/usuarios/', data='{nome', content_type='application/json')

        assert response.status_code == 400
        assert response.json()['meta']['field'] == 'body'

    def test_get_lista(self, client, usuario_criado):
        response = client.get('/api/usuarios/')

        assert response.status_code == 200
        assert response.json()['meta']['total'] == 1

    def test_get_detalhe(self, client, usuario_criado):
        response = client.get(f"/api/usuarios/{usuario_criado['id']}/")

        assert response.status_code == 200
        assert response.json()['data']['email'] == 'ana@clinica.com'

    def test_get_inexistente(self, client):
        response = client.get('/api/usuarios/nao-existe/')

        assert response.status_code == 404
        data = response.json()
        assert data['error'] == "Usuário com identificador 'nao-existe' não foi encontrado(a)."
        assert data['meta']['error'] == 'ENTITY_NOT_FOUND'

    def test_buscar_por_email(self, client, usuario_criado):
        response = client.get('/api/usuarios/buscar/', {'email': 'ANA@clinica.com'})

        assert response.status_code == 200
        assert response.json()['data']['id'] == usuario_criado['id']

    def test_buscar_sem_email(self, client):
        response = client.get('/api/usuarios/buscar/')

        assert response.status_code == 400
        assert response.json()['meta']['field'] == 'email'

    def test_put_atualiza(self, client, usuario_criado):
        response = put_json(client, f"/api/usuarios/{usuario_criado['id']}/", {
            'nome': 'Ana Souza Lima',
            'email': 'ana@clinica.com',
            'estado': 'BLOQUEADO',
        })

        assert response.status_code == 200
        assert response.json()['data']['nome'] == 'Ana Souza Lima'
        assert response.json()['data']['estado'] == 'Bloqueado'

    def test_delete(self, client, usuario_criado):
        response = client.delete(f"/api/usuarios/{usuario_criado['id']}/")

        assert response.status_code == 200
        assert client.get(f"/api/usuarios/{usuario_criado['id']}/").status_code == 404


@pytest.mark.django_db
class TestLoginAPI:

    def test_login_valido(self, client, usuario_criado):
        response = post_json(client, '/api/auth/login/', {
            'email': 'ana@clinica.com',
            'senha': 'Senha@123',
        })

        assert response.status_code == 200
        assert response.json()['data'] == {'autenticado': True}

    @pytest.mark.parametrize("email, senha", [
        ('ana@clinica.com', 'Errada@123'),
        ('ninguem@clinica.com', 'Senha@123'),
    ])
    def test_login_invalido_resposta_uniforme(self, client, usuario_criado, email, senha):
        """Senha errada e e-mail inexistente são indistinguíveis."""
        response = post_json(client, '/api/auth/login/', {'email': email, 'senha': senha})

        assert response.status_code == 401
        assert response.json()['error'] == 'Credenciais inválidas.'


# =============================================================================
# Organizações
# =============================================================================

@pytest.mark.django_db
class TestOrganizacaoAPI:

    def test_post_cria(self, organizacao_criada):
        assert organizacao_criada['cnpj_formatado'] == '11.444.777/0001-61'
        assert organizacao_criada['telefones'][0]['is_principal'] is True

    def test_post_conflitos(self, client, organizacao_criada):
        response = post_json(client, '/api/organizacoes/', {
            'nome_fantasia': 'Outra',
            'razao_social': 'VIDA LTDA',
            'cnpj': '11444777000161',
        })

        assert response.status_code == 409
        assert len(response.json()['meta']['conflitos']) == 2

    def test_buscar_por_cnpj(self, client, organizacao_criada):
        response = client.get('/api/organizacoes/buscar/', {'cnpj': '11.444.777/0001-61'})

        assert response.status_code == 200
        assert response.json()['data']['id'] == organizacao_criada['id']

    def test_put_estado(self, client, organizacao_criada):
        response = put_json(client, f"/api/organizacoes/{organizacao_criada['id']}/", {
            'nome_fantasia': 'Clínica Vida',
            'razao_social': 'Vida Ltda',
            'cnpj': '11444777000161',
            'estado': 'SUSPENSA',
        })

        assert response.status_code == 200
        assert response.json()['data']['estado'] == 'Suspensa'
        assert len(response.json()['data']['telefones']) == 1

    def test_delete(self, client, organizacao_criada):
        response = client.delete(f"/api/organizacoes/{organizacao_criada['id']}/")

        assert response.status_code == 200
        assert client.get('/api/organizacoes/').json()['meta']['total'] == 0


# =============================================================================
# Profissionais
# =============================================================================

@pytest.mark.django_db
class TestProfissionalAPI:

    @pytest.fixture
    def registrado(self, client, dados_registro):
        response = post_json(client, '/api/profissionais/registrar/', dados_registro)
        assert response.status_code == 201
        return response.json()['data']

    def test_registrar(self, registrado):
        """Auto-cadastro retorna o agregado completo."""
        assert registrado['nome'] == 'Maria Oliveira'
        assert registrado['cpf'] == '529.982.247-25'
        assert registrado['data_nascimento'] == '1985-04-12'
        assert registrado['usuario']['email'] == 'maria@clinica.com'
        assert registrado['telefones'][0]['formatado'] == '+55 (11) 98399-1005'
        assert registrado['enderecos'][0]['is_principal'] is True
        assert registrado['organizacoes'][0]['nome_fantasia'] == 'Clínica Saúde Total'

    def test_registrar_publica_evento(self, client, dados_registro):
        from src.config.container import get_container

        post_json(client, '/api/profissionais/registrar/', dados_registro)

        publisher = get_container().event_publisher()
        assert [e.event_type for e in publisher.published_events] == [
            'ProfissionalRegistradoEvent'
        ]

    def test_registrar_duplicado(self, client, dados_registro, registrado):
        response = post_json(client, '/api/profissionais/registrar/', dados_registro)

        assert response.status_code == 409
        assert len(response.json()['meta']['conflitos']) == 5

    def test_registrar_tipo_invalido(self, client, dados_registro):
        dados_registro['tipo_profissional'] = 'MEDICO'

        response = post_json(client, '/api/profissionais/registrar/', dados_registro)

        assert response.status_code == 400
        assert response.json()['meta']['field'] == 'tipo_profissional'

    def test_registrar_campos_ausentes(self, client):
        response = post_json(client, '/api/profissionais/registrar/', {
            'tipo_profissional': 'NUTRICIONISTA',
        })

        assert response.status_code == 400
        errors = response.json()['meta']['errors']
        assert 'O nome é obrigatório.' in errors
        assert 'CRN inválido. Deve ter pelo menos 5 caracteres.' in errors
        assert 'O CNPJ é obrigatório.' in errors

    def test_registrar_falha_nao_persiste(self, client, dados_registro):
        """Conflito em um agregado não deixa os outros gravados."""
        post_json(client, '/api/usuarios/', {
            'nome': 'Outra',
            'email': 'maria@clinica.com',
            'senha': 'Senha@123',
        })

        response = post_json(client, '/api/profissionais/registrar/', dados_registro)

        assert response.status_code == 409
        assert client.get('/api/organizacoes/').json()['meta']['total'] == 0
        assert client.get('/api/profissionais/').json()['meta']['total'] == 0

    def test_listar_por_tipo(self, client, registrado):
        psicologos = client.get('/api/profissionais/', {'tipo': 'PSICOLOGO'}).json()
        nutricionistas = client.get('/api/profissionais/', {'tipo': 'NUTRICIONISTA'}).json()

        assert psicologos['meta']['total'] == 1
        assert nutricionistas['meta']['total'] == 0

    def test_detalhe(self, client, registrado):
        response = client.get(f"/api/profissionais/{registrado['id']}/")

        assert response.status_code == 200
        assert response.json()['data']['rotulo_registro'] == 'CRP'

    def test_delete_desativa(self, client, registrado):
        response = client.delete(f"/api/profissionais/{registrado['id']}/")

        assert response.status_code == 200
        assert response.json()['data']['estado'] == 'Inativo'
        ativos = client.get('/api/profissionais/', {'ativos': '1'}).json()
        assert ativos['meta']['total'] == 0


# =============================================================================
# Campos que não chegam como texto
# =============================================================================

@pytest.mark.django_db
class TestCamposNaoTextuais:
    """Números no JSON viram texto; outros tipos são rejeitados com 400."""

    def test_registrar_documentos_numericos(self, client, dados_registro):
        dados_registro.update(rg=123456789, complemento=12)

        response = post_json(client, '/api/profissionais/registrar/', dados_registro)

        assert response.status_code == 201
        assert response.json()['data']['rg'] == '123456789'

    def test_registrar_genero_numerico(self, client, dados_registro):
        dados_registro['genero'] = 1

        response = post_json(client, '/api/profissionais/registrar/', dados_registro)

        assert response.status_code == 400
        assert response.json()['meta']['field'] == 'genero'

    def test_registrar_data_em_lista(self, client, dados_registro):
        dados_registro['data_nascimento'] = [1985, 4, 12]

        response = post_json(client, '/api/profissionais/registrar/', dados_registro)

        assert response.status_code == 400
        assert response.json()['meta']['field'] == 'data_nascimento'
        assert response.json()['error'] == "O campo 'data_nascimento' deve ser um texto."

    def test_organizacao_cnpj_numerico(self, client):
        response = post_json(client, '/api/organizacoes/', {
            'nome_fantasia': 'Clínica Vida',
            'razao_social': 'Vida Ltda',
            'cnpj': 11444777000161,
        })

        assert response.status_code == 201
        assert response.json()['data']['cnpj_formatado'] == '11.444.777/0001-61'

    @pytest.mark.parametrize("telefones", ['+55 (11) 3333-4444', [{'numero': '33334444'}]])
    def test_organizacao_telefones_nao_lista_de_textos(self, client, telefones):
        response = post_json(client, '/api/organizacoes/', {
            'nome_fantasia': 'Clínica Vida',
            'razao_social': 'Vida Ltda',
            'cnpj': '11.444.777/0001-61',
            'telefones': telefones,
        })

        assert response.status_code == 400
        assert response.json()['meta']['field'] == 'telefones'

    def test_usuario_email_numerico(self, client):
        response = post_json(client, '/api/usuarios/', {
            'nome': 'Ana',
            'email': 12345,
            'senha': 'Senha@123',
        })

        assert response.status_code == 400
        assert 'errors' in response.json()['meta']

    def test_login_email_booleano(self, client):
        response = post_json(client, '/api/auth/login/', {'email': True, 'senha': 'x'})

        assert response.status_code == 400
        assert response.json()['meta']['field'] == 'email'


# =============================================================================
# Mapeamento de exceções
# =============================================================================

class TestHandleException:

    def _com_service(self, client, service):
        container = Mock()
        container.obter_profissional_service.return_value = service
        with patch('src.config.container.get_container', return_value=container):
            return client.get('/api/profissionais/qualquer/')

    def test_regra_de_negocio_422(self, client):
        service = Mock()
        service.execute.side_effect = BusinessRuleViolationError(
            "O profissional já possui um usuário.", rule="usuario_unico"
        )

        response = self._com_service(client, service)

        assert response.status_code == 422
        assert response.json()['meta']['rule'] == 'usuario_unico'

    def test_value_error_400(self, client):
        service = Mock()
        service.execute.side_effect = ValueError("valor inválido")

        response = self._com_service(client, service)

        assert response.status_code == 400
        assert response.json()['error'] == 'valor inválido'

    def test_erro_inesperado_500(self, client):
        service = Mock()
        service.execute.side_effect = RuntimeError("boom")

        response = self._com_service(client, service)

        assert response.status_code == 500
        assert response.json()['error'] == 'Erro interno do servidor'


def test_health(client):
    response = client.get('/health/')

    assert response.json() == {'status': 'ok'}
