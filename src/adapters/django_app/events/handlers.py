"""
Event Handlers - Processadores de Eventos de Domínio.

Handlers são executados de forma assíncrona via Celery quando
Domain Events são publicados pelo CeleryEventPublisher.

Padrão:
    @shared_task(bind=True, ...)
    def handle_<evento>(self, event_data: dict) -> None:
        # Processar evento

event_data é o DomainEvent.to_dict(): campos de envelope
(event_id, aggregate_id, occurred_at...) e os dados do evento em "data".
"""

import logging
from typing import Any, Dict

from celery import shared_task

logger = logging.getLogger(__name__)


# =============================================================================
# Event Handlers - Usuários e Organizações
# =============================================================================

@shared_task(
    bind=True,
    max_retries=3,
    default_retry_delay=60,
    acks_late=True,
)
def handle_usuario_criado(self, event_data: Dict[str, Any]) -> None:
    """Handler para UsuarioCriadoEvent: registra auditoria."""
    data = event_data.get('data', {})
    logger.info(
        f"[HANDLER] UsuarioCriado: {event_data.get('aggregate_id')} | "
        f"E-mail: {data.get('email')}"
    )


@shared_task(
    bind=True,
    max_retries=3,
    default_retry_delay=60,
    acks_late=True,
)
def handle_usuario_removido(self, event_data: Dict[str, Any]) -> None:
    data = event_data.get('data', {})
    logger.info(
        f"[HANDLER] UsuarioRemovido: {event_data.get('aggregate_id')} | "
        f"E-mail: {data.get('email')}"
    )


@shared_task(
    bind=True,
    max_retries=3,
    default_retry_delay=60,
    acks_late=True,
)
def handle_organizacao_criada(self, event_data: Dict[str, Any]) -> None:
    data = event_data.get('data', {})
    logger.info(
        f"[HANDLER] OrganizacaoCriada: {event_data.get('aggregate_id')} | "
        f"{data.get('nome_fantasia')} ({data.get('cnpj')})"
    )


# =============================================================================
# Event Handlers - Profissionais
# =============================================================================

@shared_task(
    bind=True,
    max_retries=3,
    default_retry_delay=60,
    autoretry_for=(Exception,),
    acks_late=True,
)
def handle_profissional_registrado(self, event_data: Dict[str, Any]) -> None:
    """
    Handler para ProfissionalRegistradoEvent.

    Ações:
    - Enviar boas-vindas ao e-mail da conta criada

    Args:
        event_data: Dados do evento serializado
    """
    try:
        profissional_id = event_data.get('aggregate_id')
        data = event_data.get('data', {})

        logger.info(
            f"[HANDLER] ProfissionalRegistrado: {profissional_id} | "
            f"Tipo: {data.get('tipo')} | Organização: {data.get('organizacao_id')}"
        )

        if data.get('email'):
            notify_user.delay(
                user_id=data['email'],
                message=f"Bem-vindo(a) ao SisMed, {data.get('nome')}!",
                channel='email',
            )

    except Exception as e:
        logger.error(f"Erro no handler ProfissionalRegistrado: {e}", exc_info=True)
        raise


@shared_task(
    bind=True,
    max_retries=3,
    default_retry_delay=60,
    acks_late=True,
)
def handle_profissional_desativado(self, event_data: Dict[str, Any]) -> None:
    data = event_data.get('data', {})
    logger.info(
        f"[HANDLER] ProfissionalDesativado: {event_data.get('aggregate_id')} | "
        f"Tipo: {data.get('tipo')}"
    )


# =============================================================================
# Event Dispatcher (Router)
# =============================================================================

EVENT_HANDLERS = {
    'UsuarioCriadoEvent': handle_usuario_criado,
    'UsuarioRemovidoEvent': handle_usuario_removido,
    'OrganizacaoCriadaEvent': handle_organizacao_criada,
    'ProfissionalRegistradoEvent': handle_profissional_registrado,
    'ProfissionalDesativadoEvent': handle_profissional_desativado,
}


@shared_task(bind=True, max_retries=5, default_retry_delay=30)
def dispatch_domain_event(self, event_type: str, event_data: Dict[str, Any]) -> bool:
    """
    Dispatcher central para Domain Events.

    Roteia eventos para os handlers apropriados.

    Args:
        event_type: Tipo do evento (ex: 'ProfissionalRegistradoEvent')
        event_data: Dados do evento serializado

    Returns:
        True se algum handler foi acionado
    """
    handler = EVENT_HANDLERS.get(event_type)

    if handler is None:
        logger.warning(f"[DISPATCHER] Handler não encontrado para {event_type}")
        return False

    logger.info(f"[DISPATCHER] Roteando {event_type} para handler")
    handler.delay(event_data)
    return True


# =============================================================================
# Notification Tasks
# =============================================================================

@shared_task(bind=True, max_retries=3, default_retry_delay=120)
def notify_user(
    self,
    user_id: str,
    message: str,
    channel: str = 'email',
    **kwargs
) -> None:
    """
    Notifica usuário por canal especificado.

    Args:
        user_id: Identificador do destinatário (e-mail)
        message: Mensagem a enviar
        channel: Canal (email, push, sms)
    """
    logger.info(f"[NOTIFICATION] {channel.upper()} para {user_id}: {message}")
