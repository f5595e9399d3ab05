# -*- coding: utf-8 -*-
"""Контекст логирования на ContextVars.

Correlation ID прокидывается клиентом в заголовок X-Correlation-ID, чтобы
запрос консоли можно было найти в логах бэкенда.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

_correlation_id_var: ContextVar[str | None] = ContextVar(
    "correlation_id", default=None
)
_custom_context_var: ContextVar[dict[str, Any] | None] = ContextVar(
    "custom_context", default=None
)


def get_correlation_id() -> str | None:
    return _correlation_id_var.get()


def get_custom_context() -> dict[str, Any]:
    """Копия произвольного контекста текущей задачи."""
    return dict(_custom_context_var.get() or {})


def get_current_context() -> dict[str, Any]:
    """Весь контекст, который добавляется в записи логов."""
    context = get_custom_context()
    correlation_id = get_correlation_id()
    if correlation_id:
        context["correlation_id"] = correlation_id
    return context


@contextmanager
def bind_context(
    correlation_id: str | None = None, **kwargs: Any
) -> Iterator[None]:
    """Временно добавить поля в контекст логирования.

    Args:
        correlation_id: Correlation ID на время блока.
        **kwargs: Произвольные поля.

    Examples:
        >>> with bind_context(correlation_id="abc", topic="orders"):
        ...     logger.info("topic.opened")  # содержит correlation_id и topic
    """
    corr_token = (
        _correlation_id_var.set(correlation_id) if correlation_id else None
    )
    custom_token = _custom_context_var.set({**get_custom_context(), **kwargs})
    try:
        yield
    finally:
        _custom_context_var.reset(custom_token)
        if corr_token is not None:
            _correlation_id_var.reset(corr_token)


def clear_all_context() -> None:
    """Очистить весь контекст (используется в тестах)."""
    _correlation_id_var.set(None)
    _custom_context_var.set(None)
