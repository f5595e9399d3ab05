"""
Схемы топиков и партиций.

Топик идентифицируется именем. Партиции и их статистика только читаются:
клиент никогда их не создаёт и не изменяет.
"""

from __future__ import annotations

from pydantic import Field

from .base import CamelModel


class Topic(CamelModel):
    """Топик в представлении консоли."""

    topic: str = Field(..., description="Уникальное имя топика")
    partition_num: int = Field(..., description="Количество партиций")
    retention_days: int = Field(..., description="Срок хранения в днях")
    message_total: int = Field(
        0, description="Общее количество сообщений по всем партициям"
    )

    @property
    def name(self) -> str:
        return self.topic


class CreateTopicRequest(CamelModel):
    """Тело запроса на создание топика."""

    topic: str = Field(..., description="Имя нового топика")
    partition_num: int = Field(..., description="Количество партиций")
    retention_days: int = Field(..., description="Срок хранения в днях")


class UpdateTopicRequest(CamelModel):
    """
    Тело запроса на обновление топика.

    Всегда передаются оба изменяемых поля целиком.
    """

    partition_num: int = Field(..., description="Количество партиций")
    retention_days: int = Field(..., description="Срок хранения в днях")


class PartitionStat(CamelModel):
    """Статистика смещений партиции."""

    max_offset: int = Field(..., description="Максимальное смещение")
    min_offset: int = Field(..., description="Минимальное смещение")
    total: int = Field(
        ..., description="Количество сообщений, оставшихся после очистки"
    )


class Partition(CamelModel):
    """Партиция топика со статистикой."""

    partition: int = Field(..., description="Порядковый номер (с нуля)")
    stat: PartitionStat

    @property
    def index(self) -> int:
        return self.partition

    @property
    def min_offset(self) -> int:
        return self.stat.min_offset

    @property
    def max_offset(self) -> int:
        return self.stat.max_offset

    @property
    def total(self) -> int:
        return self.stat.total
