"""
MQX Schemas - типизированная модель данных консоли MQX.

Зеркалирует формы сущностей management API брокера: клиент ничего не
хранит и не вычисляет, только описывает данные.

Основные модули:
- base: Общий конфиг моделей и конверт ответа
- topics: Топики и партиции
- consumers: Группы потребителей и их смещения
- messages: Сообщения, параметры поиска, страница результатов
- envelopes: Конверты ответов по операциям
- routes: Маршруты веб-консоли
"""

from .base import ApiEnvelope, CamelModel
from .consumers import ConsumerGroup, ConsumerOffset
from .envelopes import (
    ConsumerGroupsEnvelope,
    MessagesEnvelope,
    OffsetsEnvelope,
    PartitionsEnvelope,
    SendMessageEnvelope,
    TopicsEnvelope,
)
from .messages import Message, MessagePage, QueryMessageParams, SendMessageRequest
from .routes import ConsoleRoute, build_route_path
from .topics import (
    CreateTopicRequest,
    Partition,
    PartitionStat,
    Topic,
    UpdateTopicRequest,
)

__all__ = [
    # Base
    "ApiEnvelope",
    "CamelModel",
    # Topics
    "CreateTopicRequest",
    "Partition",
    "PartitionStat",
    "Topic",
    "UpdateTopicRequest",
    # Consumers
    "ConsumerGroup",
    "ConsumerOffset",
    # Messages
    "Message",
    "MessagePage",
    "QueryMessageParams",
    "SendMessageRequest",
    # Envelopes
    "ConsumerGroupsEnvelope",
    "MessagesEnvelope",
    "OffsetsEnvelope",
    "PartitionsEnvelope",
    "SendMessageEnvelope",
    "TopicsEnvelope",
    # Routes
    "ConsoleRoute",
    "build_route_path",
]
