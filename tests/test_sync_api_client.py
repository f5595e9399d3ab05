"""
Тесты синхронного клиента: тот же контракт конверта, что у async.
"""

import httpx
import pytest

from mqx_apiclient import ConsoleApiError, SyncConsoleApiClient

OPERATIONS = [
    ("GET", "/api/topics", lambda api: api.list_topics(), "topics"),
    ("POST", "/api/topics", lambda api: api.create_topic("orders", 4, 7), None),
    (
        "PUT",
        "/api/topics/orders",
        lambda api: api.update_topic("orders", 4, 14),
        None,
    ),
    ("DELETE", "/api/topics/orders", lambda api: api.delete_topic("orders"), None),
    (
        "POST",
        "/api/topics/orders/messages",
        lambda api: api.send_message("orders", "T1", "K1", "hello"),
        None,
    ),
    (
        "GET",
        "/api/topics/orders/consumer-groups",
        lambda api: api.list_consumer_groups("orders"),
        "consumerGroups",
    ),
    (
        "GET",
        "/api/topics/orders/partitions",
        lambda api: api.list_partitions("orders"),
        "partitions",
    ),
    (
        "GET",
        "/api/topics/orders/consumer-groups/billing/offsets",
        lambda api: api.list_consumer_offsets("orders", "billing"),
        "offsets",
    ),
    (
        "GET",
        "/api/messages",
        lambda api: api.query_messages("orders", 0, 1, 20),
        "messages",
    ),
]


@pytest.mark.parametrize("method,path,call,field", OPERATIONS)
def test_error_field_raises(sync_api, backend, method, path, call, field):
    payload = {"error": "permission denied"}
    if field:
        payload[field] = []
    backend.reply(method, path, payload)

    with pytest.raises(ConsoleApiError, match="^permission denied$"):
        call(sync_api)


@pytest.mark.parametrize("method,path,call,field", OPERATIONS)
def test_success_returns_payload(sync_api, backend, method, path, call, field):
    backend.reply(method, path, {field: []} if field else {})

    assert call(sync_api) == ([] if field else None)
    assert backend.last.method == method
    assert backend.last.url.path == path


def test_each_call_is_one_request(sync_api, backend):
    backend.reply("GET", "/api/topics", {"topics": []})

    sync_api.list_topics()
    sync_api.list_topics()

    assert len(backend.requests) == 2


def test_status_error_is_not_retried(sync_api, backend):
    backend.reply("GET", "/api/topics", {}, status_code=503)

    with pytest.raises(httpx.HTTPStatusError):
        sync_api.list_topics()

    assert len(backend.requests) == 1


def test_transport_error_propagates(sync_api, backend):
    backend.fail("GET", "/api/topics", httpx.ConnectError("refused"))

    with pytest.raises(httpx.ConnectError, match="refused"):
        sync_api.list_topics()


def test_query_page_window_params(sync_api, backend):
    backend.reply("GET", "/api/messages", {"messages": [], "total": 0})

    page = sync_api.query_message_page("orders", 1, 1, 20, tag="T1")

    assert page.total == 0
    assert dict(backend.last.url.params) == {
        "pageNo": "1",
        "pageSize": "20",
        "topic": "orders",
        "partition": "1",
        "tag": "T1",
    }


def test_context_manager_closes_owned_client(settings):
    with SyncConsoleApiClient(settings=settings, timeout=5) as api:
        assert api.timeout == 5
        assert api.client.timeout.read == 5
    assert api.client.is_closed


def test_injected_client_is_left_open(backend, settings):
    client = httpx.Client(
        base_url="http://mqx.test", transport=httpx.MockTransport(backend)
    )
    with SyncConsoleApiClient(settings=settings, client=client):
        pass
    assert not client.is_closed
    client.close()


def test_non_utf8_error_page_is_status_error(sync_api, backend):
    backend.reply(
        "GET",
        "/api/topics",
        raw=b"<html>Passerelle \xe9chou\xe9e</html>",
        status_code=502,
    )

    with pytest.raises(httpx.HTTPStatusError):
        sync_api.list_topics()


def test_non_utf8_success_body_propagates(sync_api, backend):
    backend.reply("GET", "/api/topics", raw=b"\xe9chec")

    with pytest.raises(UnicodeDecodeError):
        sync_api.list_topics()


def test_error_field_with_partial_payload(sync_api, backend):
    backend.reply(
        "GET",
        "/api/topics/orders/partitions",
        {
            "error": "partition stat unavailable",
            "partitions": [
                {
                    "partition": 0,
                    "stat": {"maxOffset": 9, "minOffset": 0, "total": 10},
                }
            ],
        },
    )

    with pytest.raises(ConsoleApiError, match="^partition stat unavailable$"):
        sync_api.list_partitions("orders")
