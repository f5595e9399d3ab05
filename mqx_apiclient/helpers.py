from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional
from urllib.parse import quote

from mqx_schemas import ApiEnvelope


class HTTPMethod(Enum):
    """HTTP-методы, которые использует management API."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class ApiPath:
    """Пути management API относительно BASE_URL."""

    TOPICS = "/api/topics"
    MESSAGES = "/api/messages"

    @staticmethod
    def segment(value: str) -> str:
        """Экранирует значение для подстановки в сегмент пути."""
        return quote(str(value), safe="")

    @classmethod
    def topic(cls, topic: str) -> str:
        return f"{cls.TOPICS}/{cls.segment(topic)}"

    @classmethod
    def topic_messages(cls, topic: str) -> str:
        return f"{cls.topic(topic)}/messages"

    @classmethod
    def consumer_groups(cls, topic: str) -> str:
        return f"{cls.topic(topic)}/consumer-groups"

    @classmethod
    def partitions(cls, topic: str) -> str:
        return f"{cls.topic(topic)}/partitions"

    @classmethod
    def consumer_offsets(cls, topic: str, group: str) -> str:
        return f"{cls.consumer_groups(topic)}/{cls.segment(group)}/offsets"


@dataclass(frozen=True)
class ApiRequest:
    """Описание одного вызова management API.

    Attributes:
        method: HTTP метод.
        path: Путь относительно BASE_URL.
        envelope: Модель конверта ответа.
        params: Query-параметры.
        json_data: Тело запроса.
    """

    method: HTTPMethod
    path: str
    envelope: type[ApiEnvelope] = ApiEnvelope
    params: Optional[dict[str, Any]] = None
    json_data: Optional[dict[str, Any]] = None
