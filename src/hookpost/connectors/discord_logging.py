"""Helpers de logging para o webhook (sem token)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .discord_errors import DiscordApiError

logger = logging.getLogger(__name__)


def log_discord_error(
    api_error: DiscordApiError | None,
    method: str,
    endpoint: str,
    status_code: int,
) -> None:
    """Loga erro do Discord. ``endpoint`` deve vir redigido."""
    extra: dict[str, object] = {
        "method": method,
        "endpoint": endpoint,
        "status_code": status_code,
    }
    if api_error is not None:
        extra["error_code"] = api_error.error_code
        extra["error_message"] = api_error.error_message

    logger.warning("Erro da API de webhook do Discord", extra=extra)


def log_success(
    method: str,
    endpoint: str,
    status_code: int,
) -> None:
    logger.debug(
        "Envio de webhook bem-sucedido",
        extra={
            "method": method,
            "endpoint": endpoint,
            "status_code": status_code,
        },
    )
