"""Filter que injeta contexto fixo em cada log record."""

from __future__ import annotations

import logging


class ServiceContextFilter(logging.Filter):
    """Injeta ``service`` em cada record.

    Nunca adiciona payloads nem URLs de webhook (carregam o token).

    Args:
        service_name: Nome do serviço que usa a biblioteca.
    """

    def __init__(self, service_name: str) -> None:
        super().__init__()
        self._service_name = service_name

    def filter(self, record: logging.LogRecord) -> bool:
        record.service = self._service_name
        return True
