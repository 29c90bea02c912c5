"""Conector de webhook do Discord - único ponto de IO da biblioteca.

Responsabilidades:
- HTTP client (POST da mensagem, GET das informações do webhook)
- Erros do Discord e de transporte
- Parsing/redação da URL do webhook
"""

from .discord_errors import DiscordApiError, WebhookHttpError, parse_discord_error
from .http_base import HttpClient, HttpClientConfig, HttpError, WebhookTransportError
from .http_client import WebhookClient, create_webhook_client
from .webhook_url import WebhookUrl, ensure_webhook_url, parse_webhook_url, redact_webhook_url

__all__ = [
    "DiscordApiError",
    "HttpClient",
    "HttpClientConfig",
    "HttpError",
    "WebhookClient",
    "WebhookHttpError",
    "WebhookTransportError",
    "WebhookUrl",
    "create_webhook_client",
    "ensure_webhook_url",
    "parse_discord_error",
    "parse_webhook_url",
    "redact_webhook_url",
]
