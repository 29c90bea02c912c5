"""Cliente HTTP base para o conector de webhook."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 15.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpError(Exception):
    """Erro de requisição HTTP sem dados sensíveis."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code


class WebhookTransportError(HttpError):
    """Falha de rede/timeout antes de obter resposta."""


class HttpClient:
    """Cliente HTTP simples: uma chamada, uma resposta, sem retry.

    Se ``client`` for informado ele é reutilizado (e fechado pelo dono);
    caso contrário cada chamada abre e fecha seu próprio AsyncClient.
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._client = client

    async def post(
        self,
        url: str,
        *,
        json: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
        files: list[tuple[str, tuple[str, bytes]]] | None = None,
        params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        return await self._request(
            "POST",
            url,
            json=json,
            data=data,
            files=files,
            params=params,
            headers=headers,
        )

    async def get(
        self,
        url: str,
        *,
        params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        return await self._request("GET", url, params=params, headers=headers)

    async def _request(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str] | None = None,
        **kwargs: Any,
    ) -> httpx.Response:
        merged_headers = {**self._config.default_headers, **(headers or {})}
        try:
            if self._client is not None:
                return await self._client.request(
                    method,
                    url,
                    headers=merged_headers,
                    timeout=self._config.timeout_seconds,
                    **kwargs,
                )
            async with httpx.AsyncClient(verify=self._config.verify_ssl) as client:
                return await client.request(
                    method,
                    url,
                    headers=merged_headers,
                    timeout=self._config.timeout_seconds,
                    **kwargs,
                )
        except httpx.TimeoutException as exc:
            logger.warning("http_timeout", extra={"method": method})
            raise WebhookTransportError("http_timeout") from exc
        except httpx.TransportError as exc:
            logger.warning("http_connection_error", extra={"method": method})
            raise WebhookTransportError("http_connection_error") from exc
        except httpx.RequestError as exc:
            logger.warning("http_request_error", extra={"method": method})
            raise WebhookTransportError("http_request_error") from exc
