"""
Синхронный клиент management API консоли MQX.

Тот же контракт, что у AsyncConsoleApiClient, для скриптов и CLI, где
event loop не нужен.

Используемые пакеты:
    httpx: синхронные HTTP-запросы.
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


class SyncConsoleApiClient(ConsoleApiClientBase):
    """Синхронный клиент management API."""

    def __init__(
        self,
        settings: Optional[ConsoleClientSettings] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.Client] = None,
    ) -> None:
        """
        Args:
            settings: Конфигурация; по умолчанию из окружения.
            base_url: Переопределение BASE_URL.
            timeout: Переопределение TIMEOUT.
            client: Готовый httpx.Client (его закрывает владелец).
        """
        self._init_settings(settings, base_url, timeout)
        self._owns_client = client is None
        self.client = client or httpx.Client(
            base_url=self.base_url,
            timeout=self.timeout,
            follow_redirects=self.settings.FOLLOW_REDIRECTS,
            headers=self._default_headers(),
        )
        self.logger = get_logger(__name__)

    def close(self) -> None:
        if self._owns_client:
            self.client.close()
            self.logger.debug("apiclient.client_closed")

    def __enter__(self) -> SyncConsoleApiClient:
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        self.close()

    def _call(self, request: ApiRequest):
        self.logger.debug(
            "apiclient.request_started",
            method=request.method.value,
            path=request.path,
            params=request.params,
            has_json_data=request.json_data is not None,
        )
        try:
            time_start = time.time()
            response = self.client.request(
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

    def list_topics(self) -> list[Topic]:
        return self._call(self._list_topics_request()).topics

    def create_topic(
        self, topic: str, partition_num: int, retention_days: int
    ) -> None:
        self._call(
            self._create_topic_request(topic, partition_num, retention_days)
        )

    def update_topic(
        self, topic: str, partition_num: int, retention_days: int
    ) -> None:
        self._call(
            self._update_topic_request(topic, partition_num, retention_days)
        )

    def delete_topic(self, topic: str) -> None:
        self._call(self._delete_topic_request(topic))

    def send_message(self, topic: str, tag: str, key: str, body: str) -> None:
        self._call(self._send_message_request(topic, tag, key, body))

    def send_message_with_id(
        self, topic: str, tag: str, key: str, body: str
    ) -> Optional[str]:
        envelope = self._call(self._send_message_request(topic, tag, key, body))
        return envelope.message_id

    def query_messages(
        self,
        topic: str,
        partition: int,
        page_no: int,
        page_size: int,
        message_id: Optional[str] = None,
        tag: Optional[str] = None,
    ) -> list[Message]:
        return self.query_message_page(
            topic, partition, page_no, page_size, message_id, tag
        ).messages

    def query_message_page(
        self,
        topic: str,
        partition: int,
        page_no: int,
        page_size: int,
        message_id: Optional[str] = None,
        tag: Optional[str] = None,
    ) -> MessagePage:
        envelope = self._call(
            self._query_messages_request(
                topic, partition, page_no, page_size, message_id, tag
            )
        )
        return MessagePage(
            messages=envelope.messages, total=envelope.total or 0
        )

    def list_consumer_groups(self, topic: str) -> list[ConsumerGroup]:
        return self._call(self._list_consumer_groups_request(topic)).consumer_groups

    def list_partitions(self, topic: str) -> list[Partition]:
        return self._call(self._list_partitions_request(topic)).partitions

    def list_consumer_offsets(
        self, topic: str, group: str
    ) -> list[ConsumerOffset]:
        return self._call(
            self._list_consumer_offsets_request(topic, group)
        ).offsets
