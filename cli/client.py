from __future__ import annotations

import logging
from typing import Any, Dict, List, NoReturn, Optional
from urllib.parse import quote

import httpx
import typer

from cli.config import CLIConfig

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Could not reach the sensor service. Is the backend running?"


class ApiClient:
    """Minimal HTTP client for the sensor registry service."""

    def __init__(
        self,
        config: CLIConfig,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._config = config
        self._client = httpx.Client(
            base_url=config.base_url,
            timeout=config.timeout,
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def list_sensors(self, tipo: Optional[str] = None) -> List[Dict[str, Any]]:
        path = "/api/sensores"
        if tipo is not None:
            path = f"/api/sensores/tipo/{quote(tipo, safe='')}"
        return self._request("GET", path)

    def create_sensor(self, nombre: str, tipo: str, valor: float) -> Dict[str, Any]:
        return self._request(
            "POST",
            "/api/sensores",
            json={"nombre": nombre, "tipo": tipo, "valor": valor},
        )

    def delete_sensor(self, sensor_id: int) -> Dict[str, Any]:
        return self._request("DELETE", f"/api/sensores/{sensor_id}")

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        try:
            response = self._client.request(method, path, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            self._handle_http_error(exc)
        except httpx.TransportError as exc:
            self._handle_transport_error(exc)
        return response.json()

    @staticmethod
    def _handle_http_error(exc: httpx.HTTPStatusError) -> NoReturn:
        try:
            payload = exc.response.json()
            detail = payload.get("detail") if isinstance(payload, dict) else payload
        except ValueError:
            detail = exc.response.text.strip()
        logger.error(
            "Request %s %s failed",
            exc.request.method,
            exc.request.url,
            extra={"status_code": exc.response.status_code, "reason": detail},
        )
        typer.secho(
            f"Request failed with status {exc.response.status_code}. Please try again.",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=1)

    @staticmethod
    def _handle_transport_error(exc: httpx.TransportError) -> NoReturn:
        logger.error("Transport error talking to sensor service", extra={"reason": repr(exc)})
        typer.secho(GENERIC_ERROR_MESSAGE, fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
