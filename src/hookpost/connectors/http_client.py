"""Cliente HTTP especializado para webhooks do Discord.

Estende HttpClient com comportamentos do Discord:
- Validação local da mensagem antes do envio
- JSON simples ou multipart (payload_json + files[n]) quando há anexos
- Tratamento de erros Discord (code, message)
- Logging estruturado sem o token do webhook
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

import pydantic

from hookpost.connectors.discord_errors import WebhookHttpError, parse_discord_error
from hookpost.connectors.discord_logging import log_discord_error, log_success
from hookpost.connectors.http_base import HttpClient, HttpClientConfig, HttpError
from hookpost.connectors.webhook_url import ensure_webhook_url, redact_webhook_url
from hookpost.models import WebhookInfo
from hookpost.payload_builders import MessageBuilder, build_payload, dumps_payload
from hookpost.validators import validate_message

if TYPE_CHECKING:
    from collections.abc import Callable

    import httpx

    from hookpost.config.settings import WebhookSettings
    from hookpost.models import Message

logger: logging.Logger = logging.getLogger(__name__)


class WebhookClient(HttpClient):
    """Cliente de um webhook do Discord.

    Exemplo:
        client = WebhookClient(url)
        await client.send(
            lambda m: m.content("deploy ok").embed(lambda e: e.title("main"))
        )
    """

    def __init__(
        self,
        url: str,
        config: HttpClientConfig | None = None,
        client: httpx.AsyncClient | None = None,
        validate: bool = True,
    ) -> None:
        """Inicializa cliente do webhook.

        Args:
            url: URL do webhook
            config: Configuração HTTP base
            client: AsyncClient compartilhado (opcional)
            validate: Se valida a mensagem antes do POST

        Raises:
            ValueError: Se URL vazia ou malformada
        """
        super().__init__(config, client)
        ensure_webhook_url(url)
        self.url = url.strip()
        self.validate = validate
        self._endpoint = redact_webhook_url(self.url)

    async def send(
        self,
        configure: Callable[[MessageBuilder], object],
        *,
        wait: bool = False,
        thread_id: str | None = None,
    ) -> dict[str, Any] | None:
        """Monta a mensagem via callable e envia.

        Raises:
            ValidationError: Se mensagem viola limites do Discord
            HttpError: Se erro HTTP ou de transporte
        """
        builder = MessageBuilder()
        configure(builder)
        return await self.send_message(builder.build(), wait=wait, thread_id=thread_id)

    async def send_message(
        self,
        message: Message,
        *,
        wait: bool = False,
        thread_id: str | None = None,
    ) -> dict[str, Any] | None:
        """Envia mensagem pronta com um único POST.

        Args:
            message: Mensagem montada
            wait: Pede ao Discord a mensagem criada (``?wait=true``)
            thread_id: Envia dentro de uma thread existente

        Returns:
            JSON da mensagem criada se ``wait``; None caso contrário

        Raises:
            ValidationError: Se mensagem viola limites do Discord
            WebhookHttpError: Se status não 2xx
            WebhookTransportError: Se falha de rede/timeout
        """
        if self.validate:
            validate_message(message)

        params = self._build_params(wait, thread_id)
        if message.attachments:
            response = await self.post(
                self.url,
                data={"payload_json": dumps_payload(message)},
                files=[
                    (f"files[{a.id}]", (a.filename, a.content)) for a in message.attachments
                ],
                params=params,
            )
        else:
            response = await self.post(
                self.url,
                json=build_payload(message),
                params=params,
            )

        self._raise_for_status(response, "POST")
        if not wait:
            return None
        return self._decode_json(response)

    async def get_information(self) -> WebhookInfo:
        """Consulta os dados do webhook (GET na própria URL).

        Raises:
            WebhookHttpError: Se status não 2xx
            HttpError: Se response não é JSON válido ou não tem o formato esperado
        """
        response = await self.get(self.url)
        self._raise_for_status(response, "GET")
        data = self._decode_json(response)
        try:
            return WebhookInfo.model_validate(data)
        except pydantic.ValidationError as e:
            logger.error("Response inválido", extra={"endpoint": self._endpoint})
            raise HttpError("Response inválido", status_code=response.status_code) from e

    @staticmethod
    def _build_params(wait: bool, thread_id: str | None) -> dict[str, str] | None:
        params: dict[str, str] = {}
        if wait:
            params["wait"] = "true"
        if thread_id:
            params["thread_id"] = thread_id
        return params or None

    def _raise_for_status(self, response: httpx.Response, method: str) -> None:
        """Lança WebhookHttpError para status fora de 2xx."""
        if response.is_success:
            log_success(method, self._endpoint, response.status_code)
            return

        try:
            api_error = parse_discord_error(response.json())
        except (json.JSONDecodeError, UnicodeDecodeError):
            api_error = None

        log_discord_error(api_error, method, self._endpoint, response.status_code)
        raise WebhookHttpError(response.status_code, api_error)

    def _decode_json(self, response: httpx.Response) -> dict[str, Any]:
        try:
            return response.json()
        except json.JSONDecodeError as e:
            logger.error("Response JSON inválido", extra={"endpoint": self._endpoint})
            raise HttpError("Response JSON inválido", status_code=response.status_code) from e


def create_webhook_client(
    settings: WebhookSettings | None = None,
    client: httpx.AsyncClient | None = None,
) -> WebhookClient:
    """Factory para criar cliente de webhook a partir das settings.

    Args:
        settings: WebhookSettings opcional. Se None, carrega do ambiente.
        client: AsyncClient compartilhado (opcional)

    Returns:
        Cliente configurado.

    Raises:
        ValueError: Se as settings forem inválidas
    """
    # Import local para evitar dependência circular
    from hookpost.config.settings import get_webhook_settings

    webhook = settings or get_webhook_settings()
    errors = webhook.validate()
    if errors:
        raise ValueError("; ".join(errors))

    config = HttpClientConfig(
        timeout_seconds=webhook.request_timeout_seconds,
        default_headers={"User-Agent": webhook.user_agent},
    )
    return WebhookClient(
        webhook.url,
        config=config,
        client=client,
        validate=webhook.validate_before_send,
    )
