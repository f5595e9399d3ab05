from __future__ import annotations

from abc import ABC
from typing import Any, Optional

import httpx
from mqx_logger import get_correlation_id
from mqx_schemas import (
    ApiEnvelope,
    ConsumerGroupsEnvelope,
    CreateTopicRequest,
    MessagesEnvelope,
    OffsetsEnvelope,
    PartitionsEnvelope,
    QueryMessageParams,
    SendMessageEnvelope,
    SendMessageRequest,
    TopicsEnvelope,
    UpdateTopicRequest,
)

from .exceptions import ConsoleApiError
from .helpers import ApiPath, ApiRequest, HTTPMethod
from .settings import ConsoleClientSettings, get_settings


class ConsoleApiClientBase(ABC):
    """Общая часть синхронного и асинхронного клиентов management API.

    Здесь описаны все операции (метод, путь, тело, конверт ответа) и
    единственная процедура разбора конверта ``_unwrap``. Подклассы только
    отправляют запрос своим транспортом.

    Клиент не хранит состояния, не кеширует и не повторяет запросы:
    каждый вызов - ровно один HTTP запрос.
    """

    def _init_settings(
        self,
        settings: Optional[ConsoleClientSettings],
        base_url: Optional[str],
        timeout: Optional[float],
    ) -> None:
        self.settings = settings or get_settings()
        self.base_url = (base_url or self.settings.BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else self.settings.TIMEOUT

    def _default_headers(self) -> dict[str, str]:
        return {
            "User-Agent": self.settings.user_agent,
            "Accept": "application/json",
        }

    def _request_headers(self) -> dict[str, str]:
        """Заголовки конкретного запроса (correlation_id из контекста)."""
        headers: dict[str, str] = {}
        correlation_id = get_correlation_id()
        if correlation_id:
            headers["X-Correlation-ID"] = correlation_id
        return headers

    # ------------------------------------------------------------------
    # Описание операций
    # ------------------------------------------------------------------

    @staticmethod
    def _list_topics_request() -> ApiRequest:
        return ApiRequest(HTTPMethod.GET, ApiPath.TOPICS, TopicsEnvelope)

    @staticmethod
    def _create_topic_request(
        topic: str, partition_num: int, retention_days: int
    ) -> ApiRequest:
        body = CreateTopicRequest(
            topic=topic,
            partition_num=partition_num,
            retention_days=retention_days,
        )
        return ApiRequest(
            HTTPMethod.POST, ApiPath.TOPICS, json_data=body.to_wire()
        )

    @staticmethod
    def _update_topic_request(
        topic: str, partition_num: int, retention_days: int
    ) -> ApiRequest:
        body = UpdateTopicRequest(
            partition_num=partition_num, retention_days=retention_days
        )
        return ApiRequest(
            HTTPMethod.PUT, ApiPath.topic(topic), json_data=body.to_wire()
        )

    @staticmethod
    def _delete_topic_request(topic: str) -> ApiRequest:
        return ApiRequest(HTTPMethod.DELETE, ApiPath.topic(topic))

    @staticmethod
    def _send_message_request(
        topic: str, tag: str, key: str, body: str
    ) -> ApiRequest:
        payload = SendMessageRequest(tag=tag, key=key, body=body)
        return ApiRequest(
            HTTPMethod.POST,
            ApiPath.topic_messages(topic),
            SendMessageEnvelope,
            json_data=payload.to_wire(),
        )

    @staticmethod
    def _list_consumer_groups_request(topic: str) -> ApiRequest:
        return ApiRequest(
            HTTPMethod.GET,
            ApiPath.consumer_groups(topic),
            ConsumerGroupsEnvelope,
        )

    @staticmethod
    def _list_partitions_request(topic: str) -> ApiRequest:
        return ApiRequest(
            HTTPMethod.GET, ApiPath.partitions(topic), PartitionsEnvelope
        )

    @staticmethod
    def _list_consumer_offsets_request(topic: str, group: str) -> ApiRequest:
        return ApiRequest(
            HTTPMethod.GET,
            ApiPath.consumer_offsets(topic, group),
            OffsetsEnvelope,
        )

    @staticmethod
    def _query_messages_request(
        topic: str,
        partition: int,
        page_no: int,
        page_size: int,
        message_id: Optional[str] = None,
        tag: Optional[str] = None,
    ) -> ApiRequest:
        query = QueryMessageParams(
            topic=topic,
            partition=partition,
            page_no=page_no,
            page_size=page_size,
            message_id=message_id,
            tag=tag,
        )
        return ApiRequest(
            HTTPMethod.GET,
            ApiPath.MESSAGES,
            MessagesEnvelope,
            params=query.to_query_params(),
        )

    # ------------------------------------------------------------------
    # Разбор ответа
    # ------------------------------------------------------------------

    def _unwrap(
        self, response: httpx.Response, request: ApiRequest
    ) -> ApiEnvelope:
        """Разбирает конверт ответа по единому для всех операций правилу.

        1. Тело не JSON или не UTF-8: при не-2xx статусе - ``httpx.HTTPStatusError``,
           иначе пробрасывается ошибка декодирования.
        2. Непустое поле ``error`` - ``ConsoleApiError`` с этим текстом,
           независимо от HTTP статуса и наличия полезной нагрузки.
        3. Не-2xx статус без ошибки в конверте - ``httpx.HTTPStatusError``.
        4. Иначе - провалидированный конверт операции.

        Raises:
            ConsoleApiError: Бэкенд сообщил об ошибке в конверте.
            httpx.HTTPStatusError: Ошибочный статус без ошибки в конверте.
            ValueError: Тело успешного ответа не JSON (JSONDecodeError) или
                не UTF-8 (UnicodeDecodeError).
        """
        method = request.method.value
        try:
            data: Any = response.json()
        except ValueError as err:
            self.logger.error(
                "apiclient.json_decode_error",
                method=method,
                path=request.path,
                status_code=response.status_code,
                error=str(err),
                response_text=response.text[:1000],
            )
            response.raise_for_status()
            raise

        error = data.get("error") if isinstance(data, dict) else None
        if error:
            self.logger.warning(
                "apiclient.envelope_error",
                method=method,
                path=request.path,
                status_code=response.status_code,
                error=str(error),
            )
            raise ConsoleApiError(
                str(error),
                method=method,
                path=request.path,
                status_code=response.status_code,
            )

        response.raise_for_status()
        return request.envelope.model_validate(data)

    def _log_transport_error(
        self, err: httpx.HTTPError, request: ApiRequest
    ) -> None:
        """Логирует транспортную ошибку; сама ошибка пробрасывается дальше."""
        self.logger.error(
            "apiclient.transport_error",
            method=request.method.value,
            path=request.path,
            exception_type=type(err).__name__,
            error=str(err),
        )
