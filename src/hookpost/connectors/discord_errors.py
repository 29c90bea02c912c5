"""Erros e helpers de parsing para a API de webhooks do Discord."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from hookpost.connectors.http_base import HttpError


@dataclass(frozen=True)
class DiscordApiError:
    """Corpo de erro retornado pelo Discord.

    ``errors`` traz o detalhamento por campo em "Invalid Form Body" (50035).
    """

    error_code: int
    error_message: str
    errors: dict[str, Any] = field(default_factory=dict)


class WebhookHttpError(HttpError):
    """Resposta não 2xx do webhook."""

    def __init__(self, status_code: int, api_error: DiscordApiError | None = None) -> None:
        if api_error is not None:
            message = (
                f"Discord API error: {api_error.error_message} "
                f"(code {api_error.error_code}, status {status_code})"
            )
        else:
            message = f"Discord API error: status {status_code}"
        super().__init__(message, status_code=status_code)
        self.api_error = api_error


def parse_discord_error(response_data: Any) -> DiscordApiError | None:
    """Extrai informações de erro do response do Discord.

    Args:
        response_data: JSON decodificado do response

    Returns:
        DiscordApiError se o corpo tem formato de erro, None caso contrário
    """
    if not isinstance(response_data, dict) or "message" not in response_data:
        return None

    errors = response_data.get("errors")
    return DiscordApiError(
        error_code=int(response_data.get("code") or 0),
        error_message=str(response_data.get("message") or "Erro desconhecido"),
        errors=errors if isinstance(errors, dict) else {},
    )
