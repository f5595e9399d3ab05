"""
Конверты ответов management API для каждой операции.

Поле полезной нагрузки, отсутствующее или равное null, читается как пустой
список.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, ValidationInfo, field_validator

from .base import ApiEnvelope
from .consumers import ConsumerGroup, ConsumerOffset
from .messages import Message
from .topics import Partition, Topic


class _ListEnvelope(ApiEnvelope):
    """Общий предок конвертов со списком в полезной нагрузке."""

    @field_validator("*", mode="before")
    @classmethod
    def null_list_to_empty(cls, value: Any, info: ValidationInfo) -> Any:
        field = cls.model_fields.get(info.field_name)
        if value is None and field is not None and field.default_factory is list:
            return []
        return value


class TopicsEnvelope(_ListEnvelope):
    topics: list[Topic] = Field(default_factory=list)
    total: int | None = None


class ConsumerGroupsEnvelope(_ListEnvelope):
    consumer_groups: list[ConsumerGroup] = Field(default_factory=list)


class PartitionsEnvelope(_ListEnvelope):
    partitions: list[Partition] = Field(default_factory=list)


class OffsetsEnvelope(_ListEnvelope):
    offsets: list[ConsumerOffset] = Field(default_factory=list)


class MessagesEnvelope(_ListEnvelope):
    messages: list[Message] = Field(default_factory=list)
    total: int | None = None


class SendMessageEnvelope(ApiEnvelope):
    message_id: str | None = None
