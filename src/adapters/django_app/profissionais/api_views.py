"""
API Views JSON para o domínio de Profissionais.

Endpoints:
- GET /api/profissionais/ - Listar profissionais (?tipo=, ?ativos=1)
- POST /api/profissionais/registrar/ - Auto-cadastro completo
- GET /api/profissionais/<id>/ - Obter profissional
- DELETE /api/profissionais/<id>/ - Desativar profissional
"""

import logging

from django.http import HttpRequest, JsonResponse

from src.core.profissionais.dtos import (
    ListarProfissionaisQueryDTO,
    RegistrarProfissionalInputDTO,
)

from ..shared.api import BaseAPIView, campo_texto, json_response

logger = logging.getLogger(__name__)


CAMPOS_REGISTRO = (
    'nome', 'cpf', 'registro_profissional', 'tipo_profissional', 'email',
    'senha', 'telefone', 'rua', 'numero', 'bairro', 'cep', 'cidade',
    'estado', 'razao_social', 'nome_fantasia', 'cnpj',
)


class ProfissionalAPIListView(BaseAPIView):
    """GET /api/profissionais/"""

    def get(self, request: HttpRequest) -> JsonResponse:
        try:
            query = ListarProfissionaisQueryDTO(
                tipo=request.GET.get('tipo') or None,
                apenas_ativos=request.GET.get('ativos', '').lower() in ('1', 'true', 'sim'),
            )
            profissionais = self.get_service('listar_profissionais_service').execute(query)
            return json_response(
                success=True,
                data=[p.to_dict() for p in profissionais],
                meta={'total': len(profissionais)},
            )
        except Exception as e:
            return self.handle_exception(e)


class ProfissionalAPIRegistrarView(BaseAPIView):
    """
    POST /api/profissionais/registrar/

    Body JSON:
    {
        "nome", "cpf", "registro_profissional",
        "tipo_profissional": "PSICOLOGO|NUTRICIONISTA",
        "email", "senha",
        "telefone": "+55 (11) 98399-1005",
        "rua", "numero", "complemento" (opcional), "bairro", "cep", "cidade", "estado",
        "razao_social", "nome_fantasia", "cnpj",
        "rg", "data_nascimento" (AAAA-MM-DD), "genero" (opcionais)
    }
    """

    def post(self, request: HttpRequest) -> JsonResponse:
        try:
            data = self.parse_body(request)

            input_dto = RegistrarProfissionalInputDTO(
                **{campo: campo_texto(data, campo) for campo in CAMPOS_REGISTRO},
                complemento=campo_texto(data, 'complemento') or None,
                rg=campo_texto(data, 'rg') or None,
                data_nascimento=campo_texto(data, 'data_nascimento') or None,
                genero=campo_texto(data, 'genero') or 'NAO_INFORMADO',
            )
            logger.info(f"API: Registrando profissional: {input_dto.to_dict()}")

            output = self.get_service('registrar_profissional_service').execute(input_dto)

            return json_response(success=True, data=output.to_dict(), status=201)

        except Exception as e:
            return self.handle_exception(e)


class ProfissionalAPIDetailView(BaseAPIView):
    """
    GET /api/profissionais/<id>/
    DELETE /api/profissionais/<id>/ - Exclusão lógica (desativa)
    """

    def get(self, request: HttpRequest, pk: str) -> JsonResponse:
        try:
            output = self.get_service('obter_profissional_service').execute(pk)
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)

    def delete(self, request: HttpRequest, pk: str) -> JsonResponse:
        try:
            output = self.get_service('desativar_profissional_service').execute(pk)
            logger.info(f"API: Profissional {pk} desativado")
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)
