"""Configuração de logging estruturado (JSON).

Uso:
    from hookpost.config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="meu-servico")
    logger = get_logger(__name__)
    logger.info("Webhook enviado", extra={"status_code": 204})
"""

from hookpost.config.logging.config import (
    DEFAULT_SERVICE_NAME,
    VALID_LOG_LEVELS,
    configure_logging,
    get_logger,
)
from hookpost.config.logging.filters import ServiceContextFilter
from hookpost.config.logging.formatters import (
    FIELD_RENAME_MAP,
    LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "DEFAULT_SERVICE_NAME",
    "FIELD_RENAME_MAP",
    "LOG_FIELDS",
    "VALID_LOG_LEVELS",
    "ServiceContextFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
