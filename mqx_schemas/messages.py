"""
Схемы сообщений: отправка, поиск и постраничная выдача.

Сообщение неизменяемо: после отправки его можно только найти запросом.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from .base import CamelModel


class Message(CamelModel):
    """Сообщение, найденное запросом."""

    message_id: str = Field(..., description="ID, присвоенный брокером")
    tag: str = Field("", description="Произвольный тег классификации")
    key: str = Field("", description="Ключ маршрутизации/дедупликации")
    body: str = Field("", description="Тело сообщения (текст)")
    born_time: str = Field("", description="Время создания (как передал бэкенд)")


class SendMessageRequest(CamelModel):
    """Тело запроса на отправку сообщения."""

    tag: str = Field("", description="Тег")
    key: str = Field("", description="Ключ")
    body: str = Field(..., description="Тело сообщения")


class QueryMessageParams(CamelModel):
    """
    Параметры поиска сообщений.

    Фильтры ``message_id`` и ``tag`` комбинируются; ``None`` означает
    отсутствие ограничения по полю, и такой фильтр не попадает в запрос.
    """

    page_no: int = Field(..., description="Номер страницы (с единицы)")
    page_size: int = Field(..., description="Размер страницы")
    topic: str = Field(..., description="Имя топика")
    partition: int = Field(..., description="Номер партиции")
    message_id: str | None = Field(None, description="Фильтр по ID")
    tag: str | None = Field(None, description="Фильтр по тегу")

    @property
    def window(self) -> tuple[int, int]:
        """Полуинтервал позиций страницы: [start, end)."""
        start = (self.page_no - 1) * self.page_size
        return start, start + self.page_size

    def to_query_params(self) -> dict[str, Any]:
        """Query-параметры запроса; отсутствующие фильтры опускаются."""
        return self.to_wire()


class MessagePage(BaseModel):
    """Страница сообщений вместе с общим количеством совпадений."""

    messages: list[Message] = Field(default_factory=list)
    total: int = Field(0, description="Общее количество совпадений")
