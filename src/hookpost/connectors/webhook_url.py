"""Parsing e redação de URLs de webhook.

URLs de webhook carregam o token no path
(``https://discord.com/api/webhooks/{id}/{token}``); nada que vá para
log pode conter a URL crua.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

import httpx

_WEBHOOK_PATH_RE = re.compile(r"/api(?:/v\d+)?/webhooks/(?P<id>\d+)/(?P<token>[^/?#]+)")


@dataclass(frozen=True)
class WebhookUrl:
    """Partes relevantes de uma URL de webhook do Discord."""

    webhook_id: str
    token: str


def ensure_webhook_url(url: str) -> httpx.URL:
    """Valida que a URL é http(s) absoluta.

    Raises:
        ValueError: Se URL vazia, relativa ou com esquema diferente de http/https
    """
    if not url or not url.strip():
        raise ValueError("URL do webhook é obrigatória")

    try:
        parsed = httpx.URL(url.strip())
    except httpx.InvalidURL as exc:
        raise ValueError("URL do webhook malformada") from exc

    if parsed.scheme not in {"http", "https"} or not parsed.host:
        raise ValueError("URL do webhook deve ser http(s) absoluta")
    return parsed


def parse_webhook_url(url: str) -> WebhookUrl | None:
    """Extrai id e token; None se a URL não segue o formato do Discord."""
    match = _WEBHOOK_PATH_RE.search(url or "")
    if not match:
        return None
    return WebhookUrl(webhook_id=match.group("id"), token=match.group("token"))


def redact_webhook_url(url: str) -> str:
    """Versão segura para log: host + id do webhook, sem token."""
    parts = parse_webhook_url(url)
    try:
        host = httpx.URL(url).host or "unknown"
    except httpx.InvalidURL:
        host = "unknown"

    if parts is None:
        return host
    return f"{host}/webhooks/{parts.webhook_id}"
