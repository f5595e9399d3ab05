"""
Базовые Pydantic схемы консоли MQX.

Содержит общий конфиг моделей (camelCase на проводе, snake_case в Python)
и конверт ответа management API.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Общий конфиг: бэкенд отдаёт camelCase, принимаем оба варианта имён
CAMEL_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    extra="ignore",
)


class CamelModel(BaseModel):
    """Базовая модель с camelCase алиасами полей."""

    model_config = CAMEL_CONFIG

    def to_wire(self) -> dict:
        """Сериализует модель в тело запроса (camelCase, без None)."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ApiEnvelope(CamelModel):
    """
    Конверт ответа management API.

    Любой ответ может содержать поле ``error``. Непустое значение означает
    отказ бэкенда независимо от HTTP статуса и наличия полезной нагрузки.
    """

    error: str | None = Field(None, description="Текст ошибки бэкенда")
