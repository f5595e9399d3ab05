# -*- coding: utf-8 -*-
"""Настройка structlog для клиента консоли.

Клиент - библиотека, поэтому настройка не одноразовая: приложение может
вызвать configure_logging() в любой момент, последняя конфигурация
действует. Если приложение ничего не настроило, первый get_logger()
применяет LoggerConfig() из переменных окружения.
"""

from __future__ import annotations

import logging
from typing import Any

import structlog
from structlog.typing import FilteringBoundLogger

from .config import LoggerConfig
from .formatters import get_formatter
from .processors import (
    add_contextvars_context,
    add_exception_info,
    add_log_level,
    add_logger_name,
    add_timestamp,
    create_sanitizer_processor,
    create_service_context_processor,
    order_fields,
)

_active_config: LoggerConfig | None = None


def _build_processors(config: LoggerConfig) -> list[Any]:
    return [
        add_log_level,
        add_timestamp,
        add_logger_name,
        create_service_context_processor(
            service_name=config.service_name,
            version=config.version,
            environment=config.environment,
            host=config.host,
        ),
        add_contextvars_context,
        add_exception_info,
        create_sanitizer_processor(list(config.sanitize_fields)),
        order_fields,
        get_formatter(
            enable_json=config.enable_json,
            enable_colors=config.enable_console_colors,
        ),
    ]


def configure_logging(
    config: LoggerConfig | None = None, **overrides: Any
) -> LoggerConfig:
    """Применяет конфигурацию логирования и возвращает её.

    Args:
        config: Готовая конфигурация; по умолчанию собирается из окружения
            и ``overrides``.
        **overrides: Поля LoggerConfig поверх окружения.

    Examples:
        >>> configure_logging(service_name="mqx-console", log_level="DEBUG")
    """
    global _active_config

    config = config or LoggerConfig(**overrides)
    structlog.configure(
        processors=_build_processors(config),
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(config.log_level)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )
    # У клиента свои события запросов, access-логи httpx дублируют их
    for noisy in ("httpx", "httpcore"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    _active_config = config
    return config


def get_logger(name: str | None = None) -> FilteringBoundLogger:
    """Логгер с именем ``name`` (обычно __name__ модуля)."""
    if _active_config is None:
        configure_logging()
    return structlog.get_logger(logger_name=name or "root")


def get_config() -> LoggerConfig | None:
    """Действующая конфигурация или None, если логирование не настроено."""
    return _active_config


def reset_configuration() -> None:
    """Возвращает structlog к умолчаниям. Только для тестов."""
    global _active_config
    _active_config = None
    structlog.reset_defaults()
