"""Builders de payload para webhooks do Discord.

Estrutura:
- message: MessageBuilder (content, username, avatar, embeds, anexos)
- embed: EmbedBuilder (title, description, fields, mídias, author, footer)
- components: ActionRowBuilder/ButtonBuilder
- base: serialização do payload (build_payload, dumps_payload)
"""

from hookpost.payload_builders.base import build_payload, dumps_payload
from hookpost.payload_builders.components import ActionRowBuilder, ButtonBuilder
from hookpost.payload_builders.embed import EmbedBuilder, parse_color
from hookpost.payload_builders.message import MessageBuilder

__all__ = [
    "ActionRowBuilder",
    "ButtonBuilder",
    "EmbedBuilder",
    "MessageBuilder",
    "build_payload",
    "dumps_payload",
    "parse_color",
]
