"""Маршруты веб-консоли: обзор топиков и карточка топика."""

from __future__ import annotations

import re
from enum import Enum
from urllib.parse import quote


class ConsoleRoute(str, Enum):
    """Именованные маршруты консоли и их шаблоны путей."""

    TOPIC = "/"
    TOPIC_DETAIL = "/topic/:topic"

    @property
    def required_params(self) -> list[str]:
        """Обязательные параметры пути маршрута."""
        return re.findall(r":(\w+)", self.value)


def build_route_path(route: ConsoleRoute, **params: str) -> str:
    """Подставляет параметры в шаблон маршрута.

    Args:
        route: Маршрут консоли.
        **params: Значения параметров пути.

    Returns:
        Готовый путь.

    Raises:
        ValueError: Если не передан обязательный параметр.

    Examples:
        >>> build_route_path(ConsoleRoute.TOPIC_DETAIL, topic="orders")
        '/topic/orders'
    """
    path = route.value
    for name in route.required_params:
        value = params.get(name)
        if not value:
            raise ValueError(
                f"Route '{route.name}' requires path parameter '{name}'"
            )
        path = path.replace(f":{name}", quote(str(value), safe=""))
    return path
