# -*- coding: utf-8 -*-
"""Форматтеры вывода: JSON для production, читаемый для разработки."""

from __future__ import annotations

import json
from typing import Any

from structlog.types import EventDict


class JSONFormatter:
    """Компактный однострочный JSON на каждое событие."""

    def __init__(self, sort_keys: bool = False):
        self.sort_keys = sort_keys

    def __call__(
        self, logger: Any, method_name: str, event_dict: EventDict
    ) -> str:
        return json.dumps(
            event_dict,
            sort_keys=self.sort_keys,
            default=str,
            ensure_ascii=False,
        )


class ConsoleFormatter:
    """Читаемый вывод: строка события и поля с отступом."""

    COLORS = {
        "debug": "\033[36m",
        "info": "\033[32m",
        "warning": "\033[33m",
        "error": "\033[31m",
        "critical": "\033[35m",
        "reset": "\033[0m",
    }

    SKIP_FIELDS = {"timestamp", "level", "event", "logger"}

    def __init__(self, colors: bool = False, pad: int = 36):
        self.colors = colors
        self.pad = pad

    def _colorize(self, text: str, level: str) -> str:
        if not self.colors:
            return text
        return f"{self.COLORS.get(level, '')}{text}{self.COLORS['reset']}"

    def __call__(
        self, logger: Any, method_name: str, event_dict: EventDict
    ) -> str:
        timestamp = str(event_dict.get("timestamp", ""))
        level = str(event_dict.get("level", "info"))
        event = str(event_dict.get("event", ""))

        # Из ISO timestamp оставляем только время с миллисекундами
        time_part = timestamp.split("T")[-1][:12]

        level_str = self._colorize(level.upper().ljust(8), level)
        main_line = f"{time_part} [{level_str}] {event.ljust(self.pad)}"
        if event_dict.get("logger"):
            main_line += f" logger={event_dict['logger']}"

        lines = [main_line]
        for key, value in event_dict.items():
            if key in self.SKIP_FIELDS:
                continue
            lines.append(f"    {key}: {value}")
        return "\n".join(lines)


def get_formatter(
    enable_json: bool = True,
    enable_colors: bool = False,
) -> JSONFormatter | ConsoleFormatter:
    """Возвращает форматтер по настройкам.

    Examples:
        >>> isinstance(get_formatter(enable_json=True), JSONFormatter)
        True
    """
    if enable_json:
        return JSONFormatter()
    return ConsoleFormatter(colors=enable_colors)
