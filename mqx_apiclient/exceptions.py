"""
Исключения API-клиента консоли.

Транспортные ошибки (сеть, таймаут, HTTP статус без ошибки в конверте)
пробрасываются как исключения httpx без обёртки.
"""

from __future__ import annotations


class ConsoleApiError(Exception):
    """Ошибка, о которой бэкенд сообщил полем ``error`` конверта.

    Единый тип для всех операций: ``str(err)`` совпадает с текстом бэкенда,
    никакой классификации (not found, conflict и т.д.) нет.
    """

    def __init__(
        self,
        message: str,
        method: str | None = None,
        path: str | None = None,
        status_code: int | None = None,
    ):
        """
        Args:
            message: Текст ошибки из конверта, как есть.
            method: HTTP метод запроса (для диагностики).
            path: Путь запроса (для диагностики).
            status_code: HTTP статус ответа (для диагностики).
        """
        self.message = message
        self.method = method
        self.path = path
        self.status_code = status_code
        super().__init__(message)
