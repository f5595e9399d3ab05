"""
Схемы групп потребителей и их смещений.

Задержка (delay) группы вычисляется бэкендом и здесь не пересчитывается.
"""

from __future__ import annotations

from pydantic import Field

from .base import CamelModel


class ConsumerGroup(CamelModel):
    """Группа потребителей топика."""

    group: str = Field(..., description="Имя группы")
    client_count: int = Field(0, description="Количество активных клиентов")
    delay: int = Field(0, description="Отставание группы (считает бэкенд)")


class ConsumerOffset(CamelModel):
    """
    Закоммиченное смещение группы по одной партиции.

    Смещение вне диапазона [min_offset, max_offset] допустимо и не
    отклоняется: например, отставание за min_offset после очистки по
    retention означает риск потери данных.
    """

    partition: int = Field(..., description="Номер партиции")
    offset: int = Field(..., description="Закоммиченное смещение")
    instance_id: str = Field("", description="ID экземпляра-владельца")
    hostname: str = Field("", description="Хост экземпляра")
    active: bool = Field(False, description="Жив ли экземпляр")
    max_offset: int = Field(0, description="Максимальное смещение партиции")
    min_offset: int = Field(0, description="Минимальное смещение партиции")

    @property
    def in_range(self) -> bool:
        """Лежит ли смещение внутри сохранённого диапазона партиции."""
        return self.min_offset <= self.offset <= self.max_offset

    @property
    def behind_min(self) -> bool:
        """Смещение позади min_offset (часть сообщений уже удалена)."""
        return self.offset < self.min_offset
