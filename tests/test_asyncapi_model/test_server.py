"""Tests for the Server entity."""
from __future__ import annotations

from src.asyncapi_model.server import Server, Servers
from tests.fixtures import make_meta


def _parsed() -> dict:
    return {
        "servers": {
            "production": {"url": "broker:9092", "protocol": "kafka", "protocolVersion": 3.5},
            "mqtt": {"url": "mqtt.example.com", "protocol": "mqtt"},
        },
        "channels": {
            "everywhere": {"publish": {"operationId": "onEverywhere"}},
            "kafka-only": {"servers": ["production"], "subscribe": {"operationId": "toKafka"}},
            "mqtt-only": {"servers": ["mqtt"], "publish": {"message": {"messageId": "m"}}},
        },
    }


def _server(parsed: dict, name: str) -> Server:
    meta = make_meta(parsed, id=name, pointer=f"/servers/{name}", action=None)  # type: ignore[arg-type]
    return Server(parsed["servers"][name], meta)


class TestServerFields:
    def test_url_and_protocol(self):
        server = _server(_parsed(), "production")
        assert server.id() == "production"
        assert server.url() == "broker:9092"
        assert server.protocol() == "kafka"

    def test_protocol_version_is_stringified(self):
        server = _server(_parsed(), "production")
        assert server.has_protocol_version() is True
        assert server.protocol_version() == "3.5"

    def test_missing_protocol_version(self):
        server = _server(_parsed(), "mqtt")
        assert server.has_protocol_version() is False
        assert server.protocol_version() is None


class TestServerNavigation:
    def test_channels(self):
        parsed = _parsed()
        assert [c.address() for c in _server(parsed, "production").channels()] == [
            "everywhere",
            "kafka-only",
        ]
        assert [c.address() for c in _server(parsed, "mqtt").channels()] == [
            "everywhere",
            "mqtt-only",
        ]

    def test_operations(self):
        parsed = _parsed()
        assert [o.id() for o in _server(parsed, "production").operations()] == [
            "onEverywhere",
            "toKafka",
        ]

    def test_messages(self):
        assert [m.id() for m in _server(_parsed(), "mqtt").messages()] == ["m"]

    def test_unknown_server_has_no_channels(self):
        server = Server({}, make_meta(_parsed(), id="staging"))
        assert server.channels().is_empty()

    def test_without_document(self):
        assert Server({}).channels().is_empty()
        assert Server({}).operations().is_empty()


class TestServersCollection:
    def test_filters_by_action(self):
        parsed = _parsed()
        servers = Servers(_server(parsed, name) for name in parsed["servers"])

        assert [s.id() for s in servers.filter_by_send()] == ["production"]
        assert [s.id() for s in servers.filter_by_receive()] == ["production", "mqtt"]
