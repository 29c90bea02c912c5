"""Validador da mensagem completa."""

from __future__ import annotations

from typing import TYPE_CHECKING

from hookpost.constants import MAX_EMBEDS_PER_MESSAGE
from hookpost.validators.components import validate_components
from hookpost.validators.errors import ValidationError

if TYPE_CHECKING:
    from hookpost.models import Message


def validate_message(message: Message) -> None:
    """Valida a mensagem contra os limites conhecidos do Discord.

    Args:
        message: Mensagem montada

    Raises:
        ValidationError: Se mensagem vazia ou algum limite excedido
    """
    if not (message.content or message.embeds or message.components or message.attachments):
        raise ValidationError(
            "message must have content, embeds, components or attachments"
        )

    if message.embeds and len(message.embeds) > MAX_EMBEDS_PER_MESSAGE:
        raise ValidationError(
            f"embed count exceeds maximum of {MAX_EMBEDS_PER_MESSAGE}"
        )

    if message.components:
        validate_components(message.components)
