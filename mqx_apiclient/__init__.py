from .async_api_client import AsyncConsoleApiClient
from .exceptions import ConsoleApiError
from .settings import ConsoleClientSettings, get_settings
from .sync_api_client import SyncConsoleApiClient

__all__ = [
    "AsyncConsoleApiClient",
    "SyncConsoleApiClient",
    "ConsoleApiError",
    "ConsoleClientSettings",
    "get_settings",
]
