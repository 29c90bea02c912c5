"""hookpost - builder de mensagens e cliente para webhooks do Discord.

Uso:
    from hookpost import WebhookClient

    client = WebhookClient("https://discord.com/api/webhooks/<id>/<token>")
    await client.send(
        lambda m: m.content("Olá")
        .username("Bot")
        .embed(lambda e: e.title("Status").description("Tudo certo"))
    )
"""

import logging

from hookpost._version import __version__
from hookpost.connectors import (
    DiscordApiError,
    HttpError,
    WebhookClient,
    WebhookHttpError,
    WebhookTransportError,
    create_webhook_client,
)
from hookpost.constants import AllowedMentionType, ButtonStyle, EmbedType
from hookpost.models import (
    ActionRow,
    Attachment,
    Button,
    Embed,
    EmbedAuthor,
    EmbedField,
    EmbedFooter,
    EmbedImage,
    EmbedThumbnail,
    EmbedVideo,
    Message,
    WebhookInfo,
)
from hookpost.payload_builders import (
    ActionRowBuilder,
    ButtonBuilder,
    EmbedBuilder,
    MessageBuilder,
    build_payload,
    dumps_payload,
)
from hookpost.validators import ValidationError, validate_message

# Sem configuração da aplicação, a biblioteca não escreve nada
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ActionRow",
    "ActionRowBuilder",
    "AllowedMentionType",
    "Attachment",
    "Button",
    "ButtonBuilder",
    "ButtonStyle",
    "DiscordApiError",
    "Embed",
    "EmbedAuthor",
    "EmbedBuilder",
    "EmbedField",
    "EmbedFooter",
    "EmbedImage",
    "EmbedThumbnail",
    "EmbedType",
    "EmbedVideo",
    "HttpError",
    "Message",
    "MessageBuilder",
    "ValidationError",
    "WebhookClient",
    "WebhookHttpError",
    "WebhookInfo",
    "WebhookTransportError",
    "__version__",
    "build_payload",
    "create_webhook_client",
    "dumps_payload",
    "validate_message",
]
