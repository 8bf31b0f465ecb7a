"""
Base das API Views JSON.

Formato:
- Entrada: JSON
- Saída: JSON com estrutura {success, data/error, meta}

Mapeamento de exceções de domínio para HTTP:
- DomainValidationError      -> 400 (meta.errors)
- InvalidArgumentError       -> 400 (meta.field)
- UnauthorizedError          -> 401
- EntityNotFoundError        -> 404
- ConflictError              -> 409 (meta.conflitos)
- BusinessRuleViolationError -> 422 (meta.rule)
"""

import json
import logging
from typing import Any, Dict, Optional, Tuple

from django.http import HttpRequest, JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from src.core.shared.exceptions import (
    BusinessRuleViolationError,
    ConflictError,
    DomainException,
    DomainValidationError,
    EntityNotFoundError,
    InvalidArgumentError,
    UnauthorizedError,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Helpers
# =============================================================================

def json_response(success: bool, data: Any = None, error: str = None,
                  status: int = 200, meta: Dict = None) -> JsonResponse:
    """
    Cria resposta JSON padronizada.

    Args:
        success: Se operação foi bem sucedida
        data: Dados da resposta
        error: Mensagem de erro (se aplicável)
        status: HTTP status code
        meta: Metadados adicionais

    Returns:
        JsonResponse formatada
    """
    response = {'success': success}

    if data is not None:
        response['data'] = data

    if error is not None:
        response['error'] = error

    if meta is not None:
        response['meta'] = meta

    return JsonResponse(response, status=status, safe=False)


def parse_json_body(request: HttpRequest) -> Dict:
    """
    Parseia body JSON do request.

    Raises:
        InvalidArgumentError: Se JSON inválido ou não for um objeto
    """
    if not request.body:
        return {}

    try:
        data = json.loads(request.body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidArgumentError(f"JSON inválido: {e}", field="body") from e

    if not isinstance(data, dict):
        raise InvalidArgumentError("O corpo da requisição deve ser um objeto JSON.", field="body")
    return data


def _como_texto(valor: Any, campo: str) -> str:
    # Números chegam sem aspas (CPF, CNPJ, RG); booleanos, listas e objetos não
    if isinstance(valor, bool) or not isinstance(valor, (str, int, float)):
        raise InvalidArgumentError(f"O campo '{campo}' deve ser um texto.", field=campo)
    return str(valor)


def campo_texto(data: Dict, campo: str, padrao: Optional[str] = '') -> Optional[str]:
    """
    Lê campo textual do body JSON.

    Ausente ou null retorna o padrão; números viram texto.

    Raises:
        InvalidArgumentError: Se o valor não for texto nem número
    """
    valor = data.get(campo)
    if valor is None:
        return padrao
    return _como_texto(valor, campo)


def campo_lista_de_textos(data: Dict, campo: str) -> Tuple[str, ...]:
    """
    Lê lista de textos do body JSON (ex.: telefones).

    Raises:
        InvalidArgumentError: Se o valor não for uma lista de textos
    """
    valor = data.get(campo)
    if valor is None:
        return ()
    if not isinstance(valor, list):
        raise InvalidArgumentError(
            f"O campo '{campo}' deve ser uma lista de textos.", field=campo
        )
    return tuple(_como_texto(item, campo) for item in valor)


STATUS_POR_EXCECAO = (
    (DomainValidationError, 400),
    (InvalidArgumentError, 400),
    (UnauthorizedError, 401),
    (EntityNotFoundError, 404),
    (ConflictError, 409),
    (BusinessRuleViolationError, 422),
)


# =============================================================================
# Base API View
# =============================================================================

@method_decorator(csrf_exempt, name='dispatch')
class BaseAPIView(View):
    """
    View base para APIs JSON.

    Fornece:
    - Parsing de JSON
    - Acesso ao container DI
    - Tratamento de erros padronizado
    """

    def get_container(self):
        """Retorna container de DI."""
        from src.config.container import get_container

        return get_container()

    def get_service(self, service_name: str):
        """Obtém service do container."""
        return getattr(self.get_container(), service_name)()

    def parse_body(self, request: HttpRequest) -> Dict:
        return parse_json_body(request)

    def handle_exception(self, e: Exception) -> JsonResponse:
        """
        Trata exceções e retorna resposta apropriada.

        Exceções de domínio viram 4xx com o to_dict() em meta.
        ValueError vira 400; qualquer outra é logada e vira 500.
        """
        if isinstance(e, DomainException):
            status = next(
                (code for tipo, code in STATUS_POR_EXCECAO if isinstance(e, tipo)),
                400,
            )
            meta = e.to_dict()
            meta.pop('message', None)
            logger.info(f"API: {e.code} -> {status}")
            return json_response(
                success=False,
                error=e.message,
                status=status,
                meta=meta,
            )

        if isinstance(e, ValueError):
            return json_response(
                success=False,
                error=str(e),
                status=400
            )

        logger.exception(f"Erro inesperado na API: {e}")
        return json_response(
            success=False,
            error="Erro interno do servidor",
            status=500
        )
