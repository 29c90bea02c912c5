"""Base dos builders e serialização do payload."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from hookpost.models import Message


def build_payload(message: Message) -> dict[str, Any]:
    """Constrói o corpo JSON do webhook a partir da mensagem.

    Campos ``None`` ficam ausentes do corpo. Enums viram seus valores
    e aliases (``type``) são aplicados.

    Args:
        message: Mensagem montada

    Returns:
        Dict pronto para ``json=`` do httpx
    """
    return message.model_dump(mode="json", by_alias=True, exclude_none=True)


def dumps_payload(message: Message) -> str:
    """Serializa a mensagem para JSON compacto (usado no multipart)."""
    return message.model_dump_json(by_alias=True, exclude_none=True)
