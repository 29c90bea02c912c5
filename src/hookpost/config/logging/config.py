"""Configuração de logging estruturado.

A biblioteca só emite logs via ``logging.getLogger(__name__)``.
``configure_logging`` é opcional, para aplicações e scripts que queiram
saída JSON.

Uso:
    from hookpost.config.logging import configure_logging, get_logger

    configure_logging(level="DEBUG", service_name="deploy-notifier")
    logger = get_logger(__name__)
"""

from __future__ import annotations

import logging

from hookpost.config.logging.filters import ServiceContextFilter
from hookpost.config.logging.formatters import create_json_formatter

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "hookpost"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    logger_name: str | None = None,
) -> logging.Logger:
    """Instala handler JSON em stderr.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        logger_name: Logger a configurar; None = logger raiz.

    Returns:
        Logger configurado.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(ServiceContextFilter(service_name))

    target = logging.getLogger(logger_name)
    target.setLevel(level_upper)
    # Substitui handlers existentes para evitar duplicação
    target.handlers = [handler]
    return target


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
