# -*- coding: utf-8 -*-
"""Процессоры structlog: обогащение, маскировка и порядок полей."""

from __future__ import annotations

import datetime
import sys
import traceback
from typing import Any

from structlog.types import EventDict, Processor, WrappedLogger

from .context import get_current_context

REDACTED_PLACEHOLDER = "[REDACTED]"

PRIORITY_FIELDS = [
    "timestamp",
    "level",
    "event",
    "logger",
    "service",
    "version",
    "environment",
    "host",
    "correlation_id",
]


def add_timestamp(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Добавляет ISO 8601 timestamp в UTC."""
    event_dict["timestamp"] = datetime.datetime.now(
        datetime.timezone.utc
    ).isoformat()
    return event_dict


def add_log_level(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    event_dict["level"] = method_name
    return event_dict


def add_logger_name(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    # Имя приходит из get_logger(name) как начальное значение контекста
    name = event_dict.pop("logger_name", None) or getattr(logger, "name", None)
    if name:
        event_dict["logger"] = name
    return event_dict


def add_contextvars_context(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Добавляет поля из ContextVars, не перетирая явно переданные."""
    for key, value in get_current_context().items():
        event_dict.setdefault(key, value)
    return event_dict


def create_service_context_processor(
    service_name: str,
    version: str,
    environment: str,
    host: str,
) -> Processor:
    """Создает процессор со статическим контекстом сервиса."""
    static_context: dict[str, Any] = {
        "service": service_name,
        "environment": environment,
        "host": host,
    }
    if version and version != "unknown":
        static_context["version"] = version

    def processor(
        logger: WrappedLogger, method_name: str, event_dict: EventDict
    ) -> EventDict:
        for key, value in static_context.items():
            event_dict.setdefault(key, value)
        return event_dict

    return processor


def format_exception_info(exc_info: Any = True) -> dict[str, Any]:
    """Структурированное описание исключения (type, message, traceback)."""
    if isinstance(exc_info, BaseException):
        exc_info = (type(exc_info), exc_info, exc_info.__traceback__)
    elif not isinstance(exc_info, tuple):
        exc_info = sys.exc_info()

    exc_type, exc_value, exc_traceback = exc_info
    if exc_type is None or exc_value is None:
        return {}

    tb_lines = traceback.format_exception(exc_type, exc_value, exc_traceback)
    return {
        "type": exc_type.__name__,
        "message": str(exc_value),
        "traceback": [line.rstrip() for line in tb_lines],
    }


def add_exception_info(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Заменяет exc_info на структурированное поле exception."""
    exc_info = event_dict.pop("exc_info", None)
    if exc_info:
        exc_data = format_exception_info(exc_info)
        if exc_data:
            event_dict["exception"] = exc_data
    return event_dict


def sanitize_value(value: Any, sensitive_fields: set[str]) -> Any:
    """Рекурсивно маскирует значения чувствительных ключей.

    Examples:
        >>> sanitize_value({"headers": {"Authorization": "x"}}, {"authorization"})
        {'headers': {'Authorization': '[REDACTED]'}}
    """
    if isinstance(value, dict):
        return {
            key: (
                REDACTED_PLACEHOLDER
                if str(key).lower() in sensitive_fields
                else sanitize_value(val, sensitive_fields)
            )
            for key, val in value.items()
        }
    if isinstance(value, (list, tuple)):
        return type(value)(
            sanitize_value(item, sensitive_fields) for item in value
        )
    return value


def create_sanitizer_processor(sensitive_fields: list[str]) -> Processor:
    sensitive_set = {field.lower() for field in sensitive_fields}

    def processor(
        logger: WrappedLogger, method_name: str, event_dict: EventDict
    ) -> EventDict:
        return sanitize_value(event_dict, sensitive_set)

    return processor


def order_fields(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Ставит приоритетные поля в начало записи."""
    ordered: EventDict = {
        field: event_dict[field]
        for field in PRIORITY_FIELDS
        if field in event_dict
    }
    for key, value in event_dict.items():
        ordered.setdefault(key, value)
    return ordered
