# -*- coding: utf-8 -*-
"""Настройки логирования клиента консоли (переменные MQX_LOG_*)."""

from __future__ import annotations

import socket
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggerConfig(BaseSettings):
    """Что и куда пишет логгер клиента.

    Attributes:
        service_name: Имя приложения, использующего клиент.
        version: Версия приложения; "unknown" в записи не попадает.
        environment: Окружение.
        log_level: Минимальный уровень событий.
        enable_json: JSON строки вместо читаемого вывода.
        enable_console_colors: ANSI цвета в читаемом выводе.
        sanitize_fields: Ключи, значения которых заменяются на [REDACTED].
        host: Имя хоста.
    """

    model_config = SettingsConfigDict(env_prefix="MQX_LOG_", frozen=True)

    service_name: str = Field("mqx-console", min_length=1)
    version: str = "unknown"
    environment: Literal["development", "staging", "production"] = "development"
    log_level: LogLevel = "INFO"
    enable_json: bool = True
    enable_console_colors: bool = False
    # Заголовки запросов клиента могут содержать авторизацию
    sanitize_fields: frozenset[str] = frozenset(
        {"authorization", "cookie", "password", "token", "api_key", "secret"}
    )
    host: str = Field(default_factory=socket.gethostname)

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    @field_validator("sanitize_fields", mode="after")
    @classmethod
    def lower_fields(cls, value: frozenset[str]) -> frozenset[str]:
        return frozenset(field.lower() for field in value)
