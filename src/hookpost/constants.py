"""Enums e limites da API de webhooks do Discord."""

from __future__ import annotations

from enum import IntEnum, StrEnum

# Limites documentados em https://discord.com/developers/docs/resources/webhook
MAX_EMBEDS_PER_MESSAGE = 10
MAX_ACTION_ROWS_PER_MESSAGE = 5
MAX_BUTTONS_PER_ROW = 5
MAX_BUTTON_LABEL_LENGTH = 80
MAX_CUSTOM_ID_LENGTH = 100

# Bit de MessageFlags que suprime as embeds de links
SUPPRESS_EMBEDS_FLAG = 1 << 2


class EmbedType(StrEnum):
    """Tipos de embed aceitos pelo Discord."""

    RICH = "rich"
    IMAGE = "image"
    VIDEO = "video"
    GIFV = "gifv"
    ARTICLE = "article"
    LINK = "link"


class ComponentType(IntEnum):
    """Tipos de componente usados em mensagens de webhook."""

    ACTION_ROW = 1
    BUTTON = 2


class ButtonStyle(IntEnum):
    """Estilos de botão.

    LINK é o único estilo que exige url; os demais exigem custom_id.
    """

    PRIMARY = 1
    SECONDARY = 2
    SUCCESS = 3
    DANGER = 4
    LINK = 5


class AllowedMentionType(StrEnum):
    """Categorias de menção que podem ser liberadas em allowed_mentions."""

    ROLES = "roles"
    USERS = "users"
    EVERYONE = "everyone"
