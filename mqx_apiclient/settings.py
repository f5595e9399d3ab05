from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConsoleClientSettings(BaseSettings):
    """
    Конфигурация клиента management API консоли MQX.
    Переменные окружения с префиксом MQX_CONSOLE_ или локальный .env файл.
    """

    model_config = SettingsConfigDict(
        env_prefix="MQX_CONSOLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Общие настройки ---
    SERVICE_NAME: str = Field("mqx-console", description="Имя клиента")
    SERVICE_VERSION: str = Field("1.0.0", description="Версия клиента")

    # --- Management API ---
    BASE_URL: str = Field(
        "http://localhost:8080", description="Адрес management API брокера"
    )
    TIMEOUT: float = Field(
        30.0, description="Таймаут HTTP запросов в секундах"
    )
    FOLLOW_REDIRECTS: bool = Field(
        False, description="Следовать ли редиректам"
    )

    @property
    def user_agent(self) -> str:
        return f"{self.SERVICE_NAME}/{self.SERVICE_VERSION}"


@lru_cache
def get_settings() -> ConsoleClientSettings:
    return ConsoleClientSettings()
