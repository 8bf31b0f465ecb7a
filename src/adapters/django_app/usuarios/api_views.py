"""
API Views JSON para o domínio de Usuários.

Endpoints:
- GET /api/usuarios/ - Listar usuários
- POST /api/usuarios/ - Criar usuário
- GET /api/usuarios/buscar/?email= - Buscar por e-mail
- GET /api/usuarios/<id>/ - Obter usuário
- PUT /api/usuarios/<id>/ - Atualizar usuário
- DELETE /api/usuarios/<id>/ - Remover usuário
- POST /api/auth/login/ - Verificar credenciais
"""

import logging

from django.http import HttpRequest, JsonResponse

from src.core.shared.exceptions import UnauthorizedError
from src.core.usuarios.dtos import (
    AtualizarUsuarioInputDTO,
    CriarUsuarioInputDTO,
    LoginInputDTO,
)

from ..shared.api import BaseAPIView, campo_texto, json_response

logger = logging.getLogger(__name__)


class UsuarioAPIListView(BaseAPIView):
    """
    GET /api/usuarios/ - Lista usuários
    POST /api/usuarios/ - Cria usuário
    """

    def get(self, request: HttpRequest) -> JsonResponse:
        try:
            usuarios = self.get_service('listar_usuarios_service').execute()
            return json_response(
                success=True,
                data=[u.to_dict() for u in usuarios],
                meta={'total': len(usuarios)},
            )
        except Exception as e:
            return self.handle_exception(e)

    def post(self, request: HttpRequest) -> JsonResponse:
        """
        Cria novo usuário.

        Body JSON:
        {
            "nome": "string",
            "email": "string",
            "senha": "string",
            "estado": "ATIVO|INATIVO|BLOQUEADO (opcional)"
        }
        """
        try:
            data = self.parse_body(request)

            input_dto = CriarUsuarioInputDTO(
                nome=campo_texto(data, 'nome'),
                email=campo_texto(data, 'email'),
                senha=campo_texto(data, 'senha'),
                estado=campo_texto(data, 'estado', 'ATIVO'),
            )
            output = self.get_service('criar_usuario_service').execute(input_dto)

            logger.info(f"API: Usuario criado: {output.id}")
            return json_response(success=True, data=output.to_dict(), status=201)

        except Exception as e:
            return self.handle_exception(e)


class UsuarioAPIBuscarView(BaseAPIView):
    """GET /api/usuarios/buscar/?email="""

    def get(self, request: HttpRequest) -> JsonResponse:
        try:
            servico = self.get_service('buscar_usuario_por_email_service')
            output = servico.execute(request.GET.get('email', ''))
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)


class UsuarioAPIDetailView(BaseAPIView):
    """
    GET /api/usuarios/<id>/ - Obter usuário
    PUT /api/usuarios/<id>/ - Atualizar usuário
    DELETE /api/usuarios/<id>/ - Remover usuário
    """

    def get(self, request: HttpRequest, pk: str) -> JsonResponse:
        try:
            output = self.get_service('obter_usuario_service').execute(pk)
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)

    def put(self, request: HttpRequest, pk: str) -> JsonResponse:
        """
        Atualiza usuário.

        Body JSON:
        {
            "nome": "string",
            "email": "string",
            "estado": "string",
            "senha": "string (opcional - mantém a atual se ausente)"
        }
        """
        try:
            data = self.parse_body(request)

            input_dto = AtualizarUsuarioInputDTO(
                usuario_id=pk,
                nome=campo_texto(data, 'nome'),
                email=campo_texto(data, 'email'),
                estado=campo_texto(data, 'estado'),
                senha=campo_texto(data, 'senha') or None,
            )
            output = self.get_service('atualizar_usuario_service').execute(input_dto)

            return json_response(success=True, data=output.to_dict())

        except Exception as e:
            return self.handle_exception(e)

    def delete(self, request: HttpRequest, pk: str) -> JsonResponse:
        try:
            self.get_service('remover_usuario_service').execute(pk)
            logger.info(f"API: Usuario {pk} removido")
            return json_response(success=True, data={'id': pk})
        except Exception as e:
            return self.handle_exception(e)


class LoginAPIView(BaseAPIView):
    """
    POST /api/auth/login/

    Responde 200 para credenciais válidas e 401 caso contrário,
    sem distinguir e-mail inexistente de senha incorreta.
    """

    def post(self, request: HttpRequest) -> JsonResponse:
        try:
            data = self.parse_body(request)

            input_dto = LoginInputDTO(
                email=campo_texto(data, 'email'),
                senha=campo_texto(data, 'senha'),
            )
            if not self.get_service('login_usuario_service').execute(input_dto):
                raise UnauthorizedError()

            return json_response(success=True, data={'autenticado': True})

        except Exception as e:
            return self.handle_exception(e)
