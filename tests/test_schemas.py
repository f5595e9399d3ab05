"""Тесты моделей данных консоли."""

import pytest

from mqx_schemas import (
    ConsoleRoute,
    ConsumerOffset,
    CreateTopicRequest,
    Partition,
    QueryMessageParams,
    SendMessageRequest,
    Topic,
    TopicsEnvelope,
    UpdateTopicRequest,
    build_route_path,
)


class TestTopicModels:
    def test_topic_accepts_wire_and_python_names(self):
        wire = Topic.model_validate(
            {"topic": "orders", "partitionNum": 4, "retentionDays": 7}
        )
        python = Topic(topic="orders", partition_num=4, retention_days=7)

        assert wire == python
        assert wire.message_total == 0

    def test_requests_serialize_camel_case(self):
        assert CreateTopicRequest(
            topic="orders", partition_num=4, retention_days=7
        ).to_wire() == {"topic": "orders", "partitionNum": 4, "retentionDays": 7}
        assert UpdateTopicRequest(
            partition_num=4, retention_days=14
        ).to_wire() == {"partitionNum": 4, "retentionDays": 14}

    def test_send_message_request(self):
        assert SendMessageRequest(tag="T1", key="K1", body="hello").to_wire() == {
            "tag": "T1",
            "key": "K1",
            "body": "hello",
        }

    def test_no_local_range_validation(self):
        # Диапазоны проверяет бэкенд
        request = CreateTopicRequest(
            topic="orders", partition_num=0, retention_days=-1
        )
        assert request.partition_num == 0

    def test_unknown_envelope_keys_are_ignored(self):
        envelope = TopicsEnvelope.model_validate(
            {"topics": [], "total": 0, "message": "ok"}
        )
        assert envelope.topics == []
        assert envelope.error is None


class TestPartition:
    def test_retention_trimmed_head(self):
        partition = Partition.model_validate(
            {
                "partition": 3,
                "stat": {"maxOffset": 100, "minOffset": 60, "total": 20},
            }
        )
        assert partition.total < partition.max_offset - partition.min_offset + 1


class TestConsumerOffset:
    @pytest.mark.parametrize(
        "offset,in_range,behind_min",
        [(5, True, False), (0, True, False), (10, True, False), (-1, False, True)],
    )
    def test_range_flags(self, offset, in_range, behind_min):
        entry = ConsumerOffset(
            partition=0, offset=offset, min_offset=0, max_offset=10
        )
        assert entry.in_range is in_range
        assert entry.behind_min is behind_min

    def test_offset_past_max_is_representable(self):
        entry = ConsumerOffset(
            partition=0, offset=50, min_offset=0, max_offset=10
        )
        assert not entry.in_range
        assert not entry.behind_min


class TestQueryMessageParams:
    def test_window(self):
        params = QueryMessageParams(
            page_no=3, page_size=20, topic="orders", partition=0
        )
        assert params.window == (40, 60)

    def test_first_page_window(self):
        params = QueryMessageParams(
            page_no=1, page_size=20, topic="orders", partition=0
        )
        assert params.window == (0, 20)

    def test_absent_filters_are_omitted(self):
        params = QueryMessageParams(
            page_no=1, page_size=20, topic="orders", partition=0
        )
        assert params.to_query_params() == {
            "pageNo": 1,
            "pageSize": 20,
            "topic": "orders",
            "partition": 0,
        }

    def test_empty_string_filter_is_sent(self):
        params = QueryMessageParams(
            page_no=1, page_size=20, topic="orders", partition=0, tag=""
        )
        assert params.to_query_params()["tag"] == ""


class TestRoutes:
    def test_root_route(self):
        assert build_route_path(ConsoleRoute.TOPIC) == "/"

    def test_detail_route(self):
        assert (
            build_route_path(ConsoleRoute.TOPIC_DETAIL, topic="orders")
            == "/topic/orders"
        )

    def test_detail_route_requires_topic(self):
        with pytest.raises(ValueError, match="topic"):
            build_route_path(ConsoleRoute.TOPIC_DETAIL)

    def test_required_params(self):
        assert ConsoleRoute.TOPIC.required_params == []
        assert ConsoleRoute.TOPIC_DETAIL.required_params == ["topic"]
