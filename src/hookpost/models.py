"""Modelos de payload do webhook do Discord.

Registros de valor sem identidade: são montados pelos builders de
``hookpost.payload_builders``, serializados uma vez e descartados.
Campos ``None`` nunca chegam ao corpo JSON (ver ``build_payload``).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from hookpost.constants import ButtonStyle, ComponentType


class EmbedField(BaseModel):
    """Par nome/valor exibido dentro de uma embed."""

    name: str
    value: str
    inline: bool = False


class EmbedFooter(BaseModel):
    text: str
    icon_url: str | None = None
    proxy_icon_url: str | None = None


class EmbedImage(BaseModel):
    url: str
    proxy_url: str | None = None
    height: int | None = None
    width: int | None = None


class EmbedThumbnail(BaseModel):
    url: str
    proxy_url: str | None = None
    height: int | None = None
    width: int | None = None


class EmbedVideo(BaseModel):
    url: str
    height: int | None = None
    width: int | None = None


class EmbedAuthor(BaseModel):
    name: str
    url: str | None = None
    icon_url: str | None = None
    proxy_icon_url: str | None = None


class Embed(BaseModel):
    """Bloco de conteúdo rico de uma mensagem.

    ``color`` é o inteiro RGB (ex: 0x32A852). ``timestamp`` segue ISO8601.
    """

    model_config = ConfigDict(populate_by_name=True)

    title: str | None = None
    embed_type: str | None = Field(default=None, alias="type")
    description: str | None = None
    url: str | None = None
    timestamp: str | None = None
    color: int | None = None
    fields: list[EmbedField] | None = None
    footer: EmbedFooter | None = None
    image: EmbedImage | None = None
    thumbnail: EmbedThumbnail | None = None
    video: EmbedVideo | None = None
    author: EmbedAuthor | None = None


class ButtonEmoji(BaseModel):
    """Emoji parcial exibido ao lado do label do botão."""

    id: str | None = None
    name: str | None = None
    animated: bool | None = None


class Button(BaseModel):
    """Botão de uma action row.

    Botões regulares exigem ``custom_id``; botões LINK exigem ``url``.
    A checagem fica em ``hookpost.validators``.
    """

    model_config = ConfigDict(populate_by_name=True)

    component_type: ComponentType = Field(default=ComponentType.BUTTON, alias="type")
    style: ButtonStyle | None = None
    label: str | None = None
    emoji: ButtonEmoji | None = None
    custom_id: str | None = None
    url: str | None = None
    disabled: bool | None = None
    # Marcado por ActionRowBuilder.regular_button; não vai para o corpo
    regular: bool = Field(default=False, exclude=True, repr=False)


class ActionRow(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    component_type: ComponentType = Field(default=ComponentType.ACTION_ROW, alias="type")
    components: list[Button] = Field(default_factory=list)


class Attachment(BaseModel):
    """Arquivo anexado à mensagem.

    ``content`` não vai para o JSON: segue como parte ``files[id]`` do
    corpo multipart.
    """

    id: int
    filename: str
    description: str | None = None
    content: bytes = Field(default=b"", exclude=True, repr=False)


class AllowedMentions(BaseModel):
    """Controle de quais menções do content geram notificação."""

    parse: list[str] = Field(default_factory=list)
    roles: list[str] | None = None
    users: list[str] | None = None


class Message(BaseModel):
    """Mensagem completa enviada ao webhook."""

    content: str | None = None
    username: str | None = None
    avatar_url: str | None = None
    tts: bool | None = None
    embeds: list[Embed] | None = None
    components: list[ActionRow] | None = None
    attachments: list[Attachment] | None = None
    allowed_mentions: AllowedMentions | None = None
    flags: int | None = None
    thread_name: str | None = None


class WebhookUser(BaseModel):
    """Usuário que criou o webhook (presente só com autenticação de bot)."""

    model_config = ConfigDict(extra="ignore")

    id: str
    username: str
    discriminator: str | None = None
    avatar: str | None = None


class WebhookInfo(BaseModel):
    """Resposta do GET na URL do webhook."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str
    webhook_type: int = Field(alias="type")
    channel_id: str | None = None
    guild_id: str | None = None
    name: str | None = None
    avatar: str | None = None
    token: str | None = Field(default=None, repr=False)
    application_id: str | None = None
    user: WebhookUser | None = None
