"""Testes para hookpost.connectors.http_client (WebhookClient).

HTTP simulado com httpx.MockTransport.
"""

from __future__ import annotations

import json
import logging
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager

import httpx
import pytest

from hookpost.connectors import (
    HttpClientConfig,
    HttpError,
    WebhookClient,
    WebhookHttpError,
    WebhookTransportError,
    create_webhook_client,
)
from hookpost.config.settings import WebhookSettings
from hookpost.constants import ButtonStyle
from hookpost.payload_builders import MessageBuilder
from hookpost.validators import ValidationError


@asynccontextmanager
async def _client(
    url: str,
    handler: Callable[[httpx.Request], httpx.Response],
    **kwargs,
) -> AsyncIterator[WebhookClient]:
    """WebhookClient sobre MockTransport; o AsyncClient é fechado ao sair."""
    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
        yield WebhookClient(url, client=http, **kwargs)


def _no_request(request: httpx.Request) -> httpx.Response:
    pytest.fail(f"Requisição inesperada: {request.method}")


class TestWebhookClientInit:
    def test_rejects_empty_url(self) -> None:
        with pytest.raises(ValueError, match="obrigatória"):
            WebhookClient("")

    def test_rejects_non_http_url(self) -> None:
        with pytest.raises(ValueError):
            WebhookClient("ftp://discord.com/api/webhooks/1/x")

    def test_strips_url(self, webhook_url: str) -> None:
        assert WebhookClient(f"  {webhook_url} ").url == webhook_url

class TestSendMessage:
    """Testes de envio (POST)."""

    @pytest.mark.asyncio
    async def test_send_json_body(self, webhook_url: str) -> None:
        """POST único com JSON no schema do Discord; 204 = sucesso."""
        captured: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(204)

        async with _client(webhook_url, handler) as client:
            result = await client.send(
                lambda m: m.content("test")
                .username("Thoo")
                .embed(lambda e: e.title("test").description("o hey men"))
            )

        assert result is None
        assert len(captured) == 1
        request = captured[0]
        assert request.method == "POST"
        assert str(request.url) == webhook_url
        assert request.headers["content-type"] == "application/json"
        assert json.loads(request.content) == {
            "content": "test",
            "username": "Thoo",
            "embeds": [{"title": "test", "description": "o hey men"}],
        }

    @pytest.mark.asyncio
    async def test_send_with_wait_returns_message(self, webhook_url: str) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.params["wait"] == "true"
            assert request.url.params["thread_id"] == "999"
            return httpx.Response(200, json={"id": "555", "content": "x"})

        message = MessageBuilder().content("x").build()
        async with _client(webhook_url, handler) as client:
            result = await client.send_message(message, wait=True, thread_id="999")
        assert result == {"id": "555", "content": "x"}

    @pytest.mark.asyncio
    async def test_default_headers_sent(self, webhook_url: str) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.headers["user-agent"] == "hookpost-tests"
            return httpx.Response(204)

        config = HttpClientConfig(default_headers={"User-Agent": "hookpost-tests"})
        async with _client(webhook_url, handler, config=config) as client:
            await client.send(lambda m: m.content("x"))

    @pytest.mark.asyncio
    async def test_attachments_sent_as_multipart(self, webhook_url: str) -> None:
        captured: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(204)

        async with _client(webhook_url, handler) as client:
            await client.send(lambda m: m.content("log").file("build.log", b"linha 1\n"))

        request = captured[0]
        assert request.headers["content-type"].startswith("multipart/form-data")
        body = request.content
        assert b'name="payload_json"' in body
        assert b'"attachments":[{"id":0,"filename":"build.log"}]' in body
        assert b'name="files[0]"; filename="build.log"' in body
        assert b"linha 1\n" in body

    @pytest.mark.asyncio
    async def test_http_error_carries_discord_error(self, webhook_url: str) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                400,
                json={
                    "code": 50035,
                    "message": "Invalid Form Body",
                    "errors": {"embeds": {"0": {"title": {"_errors": []}}}},
                },
            )

        async with _client(webhook_url, handler) as client:
            with pytest.raises(WebhookHttpError) as exc_info:
                await client.send(lambda m: m.content("x"))

        error = exc_info.value
        assert error.status_code == 400
        assert error.api_error is not None
        assert error.api_error.error_code == 50035
        assert "embeds" in error.api_error.errors
        assert "Invalid Form Body" in str(error)

    @pytest.mark.asyncio
    async def test_http_error_without_json_body(self, webhook_url: str) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502, text="<html>Bad Gateway</html>")

        async with _client(webhook_url, handler) as client:
            with pytest.raises(WebhookHttpError) as exc_info:
                await client.send(lambda m: m.content("x"))
        assert exc_info.value.status_code == 502
        assert exc_info.value.api_error is None

    @pytest.mark.asyncio
    async def test_no_retry_on_server_error(self, webhook_url: str) -> None:
        calls: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(500, json={"code": 0, "message": "500: Internal Server Error"})

        async with _client(webhook_url, handler) as client:
            with pytest.raises(WebhookHttpError):
                await client.send(lambda m: m.content("x"))
        assert len(calls) == 1

    @pytest.mark.asyncio
    async def test_connection_error(self, webhook_url: str) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with _client(webhook_url, handler) as client:
            with pytest.raises(WebhookTransportError, match="http_connection_error"):
                await client.send(lambda m: m.content("x"))

    @pytest.mark.asyncio
    async def test_timeout_error(self, webhook_url: str) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("slow", request=request)

        async with _client(webhook_url, handler) as client:
            with pytest.raises(WebhookTransportError, match="http_timeout") as exc_info:
                await client.send(lambda m: m.content("x"))
        assert isinstance(exc_info.value, HttpError)
        assert exc_info.value.status_code is None

    @pytest.mark.asyncio
    async def test_other_request_errors_wrapped(self, webhook_url: str) -> None:
        """Qualquer httpx.RequestError vira WebhookTransportError."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.TooManyRedirects("redirect loop", request=request)

        async with _client(webhook_url, handler) as client:
            with pytest.raises(WebhookTransportError, match="http_request_error") as exc_info:
                await client.send(lambda m: m.content("x"))
        assert isinstance(exc_info.value.__cause__, httpx.TooManyRedirects)

    @pytest.mark.asyncio
    async def test_wait_with_invalid_json(self, webhook_url: str) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="not json")

        async with _client(webhook_url, handler) as client:
            with pytest.raises(HttpError, match="JSON"):
                await client.send(lambda m: m.content("x"), wait=True)


class TestLocalValidation:
    """Validação acontece antes de qualquer IO."""

    @pytest.mark.asyncio
    async def test_custom_id_reuse_blocked_before_request(self) -> None:
        async with _client("https://discord.com", _no_request) as client:
            with pytest.raises(ValidationError, match="twice"):
                await client.send(
                    lambda m: m.action_row(
                        lambda row: row.regular_button(
                            lambda b: b.custom_id("0").style(ButtonStyle.PRIMARY)
                        ).regular_button(lambda b: b.custom_id("0").style(ButtonStyle.PRIMARY))
                    )
                )

    @pytest.mark.asyncio
    async def test_too_many_embeds_blocked(self, webhook_url: str) -> None:
        def configure(m: MessageBuilder) -> None:
            for _ in range(11):
                m.embed(lambda e: e.title("x"))

        async with _client(webhook_url, _no_request) as client:
            with pytest.raises(ValidationError, match="embed count"):
                await client.send(configure)

    @pytest.mark.asyncio
    async def test_validation_can_be_disabled(self, webhook_url: str) -> None:
        """Sem validação local, o servidor decide."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(400, json={"code": 50006, "message": "Cannot send an empty message"})

        async with _client(webhook_url, handler, validate=False) as client:
            with pytest.raises(WebhookHttpError) as exc_info:
                await client.send(lambda m: m.username("bot"))
        assert exc_info.value.api_error.error_code == 50006


class TestGetInformation:
    @pytest.mark.asyncio
    async def test_get_information(self, webhook_url: str) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.method == "GET"
            return httpx.Response(
                200,
                json={
                    "id": "123456789",
                    "type": 1,
                    "guild_id": "1",
                    "channel_id": "2",
                    "name": "Deploys",
                    "avatar": None,
                    "token": "secret-token",
                    "application_id": None,
                    "source_guild": {"id": "ignorado"},
                },
            )

        async with _client(webhook_url, handler) as client:
            info = await client.get_information()
        assert info.id == "123456789"
        assert info.webhook_type == 1
        assert info.channel_id == "2"
        assert info.name == "Deploys"
        assert info.user is None
        assert "secret-token" not in repr(info)

    @pytest.mark.asyncio
    async def test_get_information_unknown_webhook(self, webhook_url: str) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, json={"code": 10015, "message": "Unknown Webhook"})

        async with _client(webhook_url, handler) as client:
            with pytest.raises(WebhookHttpError) as exc_info:
                await client.get_information()
        assert exc_info.value.api_error.error_code == 10015

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body",
        [
            [1, 2],
            {"type": 1, "name": "sem id"},
            {"id": "123", "type": "incoming"},
        ],
    )
    async def test_get_information_unexpected_shape(self, webhook_url: str, body: object) -> None:
        """JSON válido mas fora do formato do webhook vira HttpError."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=body)

        async with _client(webhook_url, handler) as client:
            with pytest.raises(HttpError, match="Response inválido") as exc_info:
                await client.get_information()
        assert exc_info.value.status_code == 200
        assert not isinstance(exc_info.value, WebhookHttpError)


class TestLoggingWithoutToken:
    @pytest.mark.asyncio
    async def test_logs_never_contain_token(
        self, webhook_url: str, caplog: pytest.LogCaptureFixture
    ) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(401, json={"code": 50027, "message": "Invalid Webhook Token"})

        caplog.set_level(logging.DEBUG, logger="hookpost")
        async with _client(webhook_url, handler) as client:
            with pytest.raises(WebhookHttpError):
                await client.send(lambda m: m.content("x"))

        assert caplog.records
        for record in caplog.records:
            assert "secret-token" not in str(record.__dict__)
        assert any(
            getattr(r, "endpoint", None) == "discord.com/webhooks/123456789" for r in caplog.records
        )


class TestCreateWebhookClient:
    def test_from_settings(self, webhook_url: str) -> None:
        settings = WebhookSettings(
            url=webhook_url,
            request_timeout_seconds=5.0,
            user_agent="ua-test",
            validate_before_send=False,
        )
        client = create_webhook_client(settings)
        assert client.url == webhook_url
        assert client.validate is False
        assert client._config.timeout_seconds == 5.0
        assert client._config.default_headers == {"User-Agent": "ua-test"}

    def test_invalid_settings_raise(self) -> None:
        with pytest.raises(ValueError, match="WEBHOOK_URL"):
            create_webhook_client(WebhookSettings(url=""))
