"""Formatter JSON para os logs do cliente de webhook."""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos presentes em todo log estruturado (ordem de saída)
LOG_FIELDS: tuple[str, ...] = (
    "asctime",
    "levelname",
    "name",
    "message",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Campos passados em ``extra`` (endpoint, status_code, error_code...)
    são anexados ao objeto JSON.

    Exemplo de output:
        {
            "asctime": "2026-10-19 10:30:00,123",
            "level": "WARNING",
            "logger": "hookpost.connectors.discord_logging",
            "message": "Erro da API de webhook do Discord",
            "service": "hookpost",
            "endpoint": "discord.com/webhooks/123",
            "status_code": 400
        }
    """
    format_string = " ".join(f"%({field})s" for field in LOG_FIELDS)

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
    )
