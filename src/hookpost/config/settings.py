"""Settings do cliente de webhook.

Carregadas de variáveis de ambiente (um ``.env`` pode ser exportado
pela aplicação antes do primeiro uso).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from hookpost._version import __version__

DEFAULT_USER_AGENT: str = f"hookpost (https://github.com/hookpost/hookpost, {__version__})"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class WebhookSettings:
    """Configurações do cliente de webhook.

    Attributes:
        url: URL do webhook (contém o token; não logar)
        request_timeout_seconds: Timeout para requisições HTTP
        user_agent: Header User-Agent enviado ao Discord
        validate_before_send: Se valida a mensagem localmente antes do POST
    """

    url: str = ""
    request_timeout_seconds: float = 15.0
    user_agent: str = DEFAULT_USER_AGENT
    validate_before_send: bool = True

    def validate(self) -> list[str]:
        """Valida configurações mínimas.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.url:
            errors.append("WEBHOOK_URL não configurado")
        elif not self.url.startswith(("http://", "https://")):
            errors.append("WEBHOOK_URL deve começar com http:// ou https://")

        if self.request_timeout_seconds <= 0:
            errors.append("WEBHOOK_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if not self.user_agent:
            errors.append("WEBHOOK_USER_AGENT não pode ser vazio")

        return errors


def _load_from_env() -> WebhookSettings:
    """Carrega WebhookSettings de variáveis de ambiente."""
    return WebhookSettings(
        url=os.getenv("WEBHOOK_URL", ""),
        request_timeout_seconds=float(os.getenv("WEBHOOK_REQUEST_TIMEOUT_SECONDS", "15")),
        user_agent=os.getenv("WEBHOOK_USER_AGENT", DEFAULT_USER_AGENT),
        validate_before_send=(
            os.getenv("WEBHOOK_VALIDATE_BEFORE_SEND", "true").lower() in _TRUE_VALUES
        ),
    )


@lru_cache(maxsize=1)
def get_webhook_settings() -> WebhookSettings:
    """Retorna instância cacheada de WebhookSettings."""
    return _load_from_env()
