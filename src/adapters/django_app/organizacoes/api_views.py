"""
API Views JSON para o domínio de Organizações.

Endpoints:
- GET /api/organizacoes/ - Listar organizações
- POST /api/organizacoes/ - Criar organização
- GET /api/organizacoes/buscar/?cnpj= - Buscar por CNPJ
- GET /api/organizacoes/<id>/ - Obter organização
- PUT /api/organizacoes/<id>/ - Atualizar organização
- DELETE /api/organizacoes/<id>/ - Remover organização
"""

import logging

from django.http import HttpRequest, JsonResponse

from src.core.organizacoes.dtos import (
    AtualizarOrganizacaoInputDTO,
    CriarOrganizacaoInputDTO,
)

from ..shared.api import (
    BaseAPIView,
    campo_lista_de_textos,
    campo_texto,
    json_response,
)

logger = logging.getLogger(__name__)


class OrganizacaoAPIListView(BaseAPIView):
    """
    GET /api/organizacoes/ - Lista organizações
    POST /api/organizacoes/ - Cria organização
    """

    def get(self, request: HttpRequest) -> JsonResponse:
        try:
            organizacoes = self.get_service('listar_organizacoes_service').execute()
            return json_response(
                success=True,
                data=[o.to_dict() for o in organizacoes],
                meta={'total': len(organizacoes)},
            )
        except Exception as e:
            return self.handle_exception(e)

    def post(self, request: HttpRequest) -> JsonResponse:
        """
        Cria nova organização.

        Body JSON:
        {
            "nome_fantasia": "string",
            "razao_social": "string",
            "cnpj": "string (com ou sem pontuação)",
            "telefones": ["+55 (11) 3333-4444"] (opcional)
        }
        """
        try:
            data = self.parse_body(request)

            input_dto = CriarOrganizacaoInputDTO(
                nome_fantasia=campo_texto(data, 'nome_fantasia'),
                razao_social=campo_texto(data, 'razao_social'),
                cnpj=campo_texto(data, 'cnpj'),
                telefones=campo_lista_de_textos(data, 'telefones'),
            )
            output = self.get_service('criar_organizacao_service').execute(input_dto)

            logger.info(f"API: Organizacao criada: {output.id}")
            return json_response(success=True, data=output.to_dict(), status=201)

        except Exception as e:
            return self.handle_exception(e)


class OrganizacaoAPIBuscarView(BaseAPIView):
    """GET /api/organizacoes/buscar/?cnpj="""

    def get(self, request: HttpRequest) -> JsonResponse:
        try:
            servico = self.get_service('buscar_organizacao_por_cnpj_service')
            output = servico.execute(request.GET.get('cnpj', ''))
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)


class OrganizacaoAPIDetailView(BaseAPIView):
    """
    GET /api/organizacoes/<id>/
    PUT /api/organizacoes/<id>/
    DELETE /api/organizacoes/<id>/
    """

    def get(self, request: HttpRequest, pk: str) -> JsonResponse:
        try:
            output = self.get_service('obter_organizacao_service').execute(pk)
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)

    def put(self, request: HttpRequest, pk: str) -> JsonResponse:
        """
        Body JSON:
        {
            "nome_fantasia": "string",
            "razao_social": "string",
            "cnpj": "string",
            "estado": "ATIVA|INATIVA|SUSPENSA"
        }
        """
        try:
            data = self.parse_body(request)

            input_dto = AtualizarOrganizacaoInputDTO(
                organizacao_id=pk,
                nome_fantasia=campo_texto(data, 'nome_fantasia'),
                razao_social=campo_texto(data, 'razao_social'),
                cnpj=campo_texto(data, 'cnpj'),
                estado=campo_texto(data, 'estado'),
            )
            output = self.get_service('atualizar_organizacao_service').execute(input_dto)

            return json_response(success=True, data=output.to_dict())

        except Exception as e:
            return self.handle_exception(e)

    def delete(self, request: HttpRequest, pk: str) -> JsonResponse:
        try:
            self.get_service('remover_organizacao_service').execute(pk)
            logger.info(f"API: Organizacao {pk} removida")
            return json_response(success=True, data={'id': pk})
        except Exception as e:
            return self.handle_exception(e)
