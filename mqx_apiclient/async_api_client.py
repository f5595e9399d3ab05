"""
Асинхронный клиент management API консоли MQX.

Каждая операция - одна корутина, которая приостанавливается на сетевом
вызове. Вызовы независимы: общего изменяемого состояния нет, порядок
ответов параллельных вызовов не гарантируется.

Используемые пакеты:
    httpx: асинхронные HTTP-запросы.
    mqx_schemas: типизированные сущности и конверты ответов.
    mqx_logger: структурированное логирование.
"""

from __future__ import annotations

import time
from types import TracebackType
from typing import Optional

import httpx
from mqx_logger import get_logger
from mqx_schemas import (
    ConsumerGroup,
    ConsumerOffset,
    Message,
    MessagePage,
    Partition,
    Topic,
)

from .base_client_mixin import ConsoleApiClientBase
from .helpers import ApiRequest
from .settings import ConsoleClientSettings


class AsyncConsoleApiClient(ConsoleApiClientBase):
    """Асинхронный клиент management API.

    Example:
        ```python
        async with AsyncConsoleApiClient(base_url="http://mqx:8080") as api:
            await api.create_topic("orders", partition_num=4, retention_days=7)
            for partition in await api.list_partitions("orders"):
                print(partition.index, partition.min_offset, partition.max_offset)
        ```
    """

    def __init__(
        self,
        settings: Optional[ConsoleClientSettings] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """
        Args:
            settings: Конфигурация; по умолчанию из окружения.
            base_url: Переопределение BASE_URL.
            timeout: Переопределение TIMEOUT.
            client: Готовый httpx.AsyncClient (его закрывает владелец).
        """
        self._init_settings(settings, base_url, timeout)
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            follow_redirects=self.settings.FOLLOW_REDIRECTS,
            headers=self._default_headers(),
        )
        self.logger = get_logger(__name__)

    async def close(self) -> None:
        """Закрывает HTTP клиент, если он создан этим объектом."""
        if self._owns_client:
            await self.client.aclose()
            self.logger.debug("apiclient.client_closed")

    async def __aenter__(self) -> AsyncConsoleApiClient:
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        await self.close()

    async def _call(self, request: ApiRequest):
        """Отправляет запрос и разбирает конверт ответа."""
        self.logger.debug(
            "apiclient.request_started",
            method=request.method.value,
            path=request.path,
            params=request.params,
            has_json_data=request.json_data is not None,
        )
        try:
            time_start = time.time()
            response = await self.client.request(
                request.method.value,
                request.path,
                params=request.params,
                json=request.json_data,
                headers=self._request_headers(),
            )
            self.logger.debug(
                "apiclient.response_received",
                method=request.method.value,
                path=request.path,
                status_code=response.status_code,
                response_size_bytes=len(response.content),
                request_time_seconds=round(time.time() - time_start, 3),
            )
            return self._unwrap(response, request)
        except httpx.HTTPError as err:
            self._log_transport_error(err, request)
            raise

    # --- Топики ---

    async def list_topics(self) -> list[Topic]:
        """Все топики (полный снимок, без пагинации)."""
        envelope = await self._call(self._list_topics_request())
        return envelope.topics

    async def create_topic(
        self, topic: str, partition_num: int, retention_days: int
    ) -> None:
        """Создает топик. Повторное имя отклоняет бэкенд."""
        await self._call(
            self._create_topic_request(topic, partition_num, retention_days)
        )

    async def update_topic(
        self, topic: str, partition_num: int, retention_days: int
    ) -> None:
        """Обновляет топик, передавая оба изменяемых поля целиком."""
        await self._call(
            self._update_topic_request(topic, partition_num, retention_days)
        )

    async def delete_topic(self, topic: str) -> None:
        await self._call(self._delete_topic_request(topic))

    # --- Сообщения ---

    async def send_message(
        self, topic: str, tag: str, key: str, body: str
    ) -> None:
        """Отправляет сообщение в топик; ID сообщения не возвращается."""
        await self._call(self._send_message_request(topic, tag, key, body))

    async def send_message_with_id(
        self, topic: str, tag: str, key: str, body: str
    ) -> Optional[str]:
        """Как send_message, но возвращает ID, если бэкенд его прислал."""
        envelope = await self._call(
            self._send_message_request(topic, tag, key, body)
        )
        return envelope.message_id

    async def query_messages(
        self,
        topic: str,
        partition: int,
        page_no: int,
        page_size: int,
        message_id: Optional[str] = None,
        tag: Optional[str] = None,
    ) -> list[Message]:
        """Страница сообщений партиции с необязательными фильтрами.

        Args:
            topic: Имя топика.
            partition: Номер партиции.
            page_no: Номер страницы (с единицы).
            page_size: Размер страницы.
            message_id: Фильтр по ID; None - без ограничения.
            tag: Фильтр по тегу; None - без ограничения.
        """
        page = await self.query_message_page(
            topic, partition, page_no, page_size, message_id, tag
        )
        return page.messages

    async def query_message_page(
        self,
        topic: str,
        partition: int,
        page_no: int,
        page_size: int,
        message_id: Optional[str] = None,
        tag: Optional[str] = None,
    ) -> MessagePage:
        """Как query_messages, но вместе с общим количеством совпадений."""
        envelope = await self._call(
            self._query_messages_request(
                topic, partition, page_no, page_size, message_id, tag
            )
        )
        return MessagePage(
            messages=envelope.messages, total=envelope.total or 0
        )

    # --- Потребители и партиции ---

    async def list_consumer_groups(self, topic: str) -> list[ConsumerGroup]:
        envelope = await self._call(self._list_consumer_groups_request(topic))
        return envelope.consumer_groups

    async def list_partitions(self, topic: str) -> list[Partition]:
        envelope = await self._call(self._list_partitions_request(topic))
        return envelope.partitions

    async def list_consumer_offsets(
        self, topic: str, group: str
    ) -> list[ConsumerOffset]:
        """Смещения группы: одна запись на пару партиция/экземпляр."""
        envelope = await self._call(
            self._list_consumer_offsets_request(topic, group)
        )
        return envelope.offsets
