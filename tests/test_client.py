"""ApiClient behaviour against a mocked transport."""

from __future__ import annotations

import json
from typing import Callable, List

import httpx
import pytest
import typer

from cli.client import GENERIC_ERROR_MESSAGE, ApiClient
from cli.config import CLIConfig


def _client(handler: Callable[[httpx.Request], httpx.Response]) -> ApiClient:
    return ApiClient(CLIConfig(base_url="http://sensors.test"), transport=httpx.MockTransport(handler))


def test_list_sensors_hits_collection_or_type_path() -> None:
    seen: List[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url.raw_path.decode())
        return httpx.Response(200, json=[])

    client = _client(handler)
    try:
        assert client.list_sensors() == []
        assert client.list_sensors("Luz") == []
        assert client.list_sensors("Luz Solar") == []
    finally:
        client.close()

    assert seen == [
        "/api/sensores",
        "/api/sensores/tipo/Luz",
        "/api/sensores/tipo/Luz%20Solar",
    ]


def test_create_and_delete_send_expected_requests() -> None:
    requests: List[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        if request.method == "POST":
            body = json.loads(request.content)
            return httpx.Response(201, json={"id": 7, **body})
        return httpx.Response(200, json={"mensaje": "Sensor eliminado correctamente", "id": 7})

    client = _client(handler)
    try:
        created = client.create_sensor("Test", "Luz", 50.0)
        ack = client.delete_sensor(7)
    finally:
        client.close()

    assert created == {"id": 7, "nombre": "Test", "tipo": "Luz", "valor": 50.0}
    assert ack["id"] == 7
    assert [(r.method, r.url.path) for r in requests] == [
        ("POST", "/api/sensores"),
        ("DELETE", "/api/sensores/7"),
    ]


def test_error_status_exits_with_generic_message(capsys: pytest.CaptureFixture[str]) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(422, json={"detail": [{"msg": "Input should be a valid number"}]})

    client = _client(handler)
    try:
        with pytest.raises(typer.Exit) as excinfo:
            client.create_sensor("bad", "Luz", 1.0)
    finally:
        client.close()

    assert excinfo.value.exit_code == 1
    assert "Request failed with status 422" in capsys.readouterr().err


def test_transport_failure_exits_with_generic_message(capsys: pytest.CaptureFixture[str]) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = _client(handler)
    try:
        with pytest.raises(typer.Exit) as excinfo:
            client.list_sensors()
    finally:
        client.close()

    assert excinfo.value.exit_code == 1
    assert GENERIC_ERROR_MESSAGE in capsys.readouterr().err
