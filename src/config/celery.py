"""
Configuração do Celery para processamento assíncrono.

O Celery é usado para:
- Processar Domain Events de forma assíncrona
- Notificações (boas-vindas por e-mail)

Arquitetura:
- Broker: RabbitMQ (mensagens entre Django e Workers)
- Backend: Redis (resultados de tarefas)

Uso:
    celery -A src.config.celery worker -l INFO
"""

import os
from celery import Celery
from kombu import Exchange, Queue

# Definir módulo de settings do Django
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'src.config.settings')

app = Celery('sismed')

# Carregar configurações do Django (prefixo CELERY_)
app.config_from_object('django.conf:settings', namespace='CELERY')

app.conf.update(
    task_serializer='json',
    accept_content=['json'],
    result_serializer='json',
    timezone='America/Sao_Paulo',
    enable_utc=True,
    worker_send_task_events=True,
    task_send_sent_event=True,
)

# Filas
app.conf.task_queues = (
    Queue('default', Exchange('default'), routing_key='default'),
    Queue('events', Exchange('events'), routing_key='events.#'),
    Queue('notifications', Exchange('notifications'), routing_key='notifications.#'),
)
app.conf.task_default_queue = 'default'

# Roteamento de tarefas para filas
app.conf.task_routes = {
    'src.adapters.django_app.events.handlers.notify_user': {'queue': 'notifications'},
    'src.adapters.django_app.events.handlers.*': {'queue': 'events'},
}

# Auto-descoberta de tarefas
app.autodiscover_tasks(['src.adapters.django_app.events'], related_name='handlers')
