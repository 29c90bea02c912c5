"""Settings e logging do hookpost."""

from hookpost.config.settings import (
    DEFAULT_USER_AGENT,
    WebhookSettings,
    get_webhook_settings,
)

__all__ = [
    "DEFAULT_USER_AGENT",
    "WebhookSettings",
    "get_webhook_settings",
]
