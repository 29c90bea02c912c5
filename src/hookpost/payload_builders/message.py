"""Builder da mensagem completa do webhook."""

from __future__ import annotations

from typing import TYPE_CHECKING

from hookpost.constants import SUPPRESS_EMBEDS_FLAG, AllowedMentionType
from hookpost.models import ActionRow, AllowedMentions, Attachment, Embed, Message
from hookpost.payload_builders.components import ActionRowBuilder
from hookpost.payload_builders.embed import EmbedBuilder

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable


class MessageBuilder:
    """Monta uma ``Message`` com métodos encadeáveis.

    Embeds e action rows podem ser passadas prontas ou configuradas
    por callable, que recebe o builder correspondente:

        message = (
            MessageBuilder()
            .content("Build concluído")
            .username("CI")
            .embed(lambda e: e.title("main").color(0x32A852))
            .build()
        )

    Limites (10 embeds, 5 rows etc.) não são impostos aqui; ver
    ``hookpost.validators.validate_message``.
    """

    def __init__(self) -> None:
        self._content: str | None = None
        self._username: str | None = None
        self._avatar_url: str | None = None
        self._tts: bool | None = None
        self._embeds: list[Embed] = []
        self._components: list[ActionRow] = []
        self._attachments: list[Attachment] = []
        self._allowed_mentions: AllowedMentions | None = None
        self._flags: int | None = None
        self._thread_name: str | None = None

    def content(self, content: str) -> MessageBuilder:
        self._content = content
        return self

    def username(self, username: str) -> MessageBuilder:
        self._username = username
        return self

    def avatar_url(self, avatar_url: str) -> MessageBuilder:
        self._avatar_url = avatar_url
        return self

    def tts(self, tts: bool = True) -> MessageBuilder:
        self._tts = tts
        return self

    def embed(self, embed: Embed | Callable[[EmbedBuilder], object]) -> MessageBuilder:
        """Acrescenta uma embed pronta ou configurada via callable."""
        if isinstance(embed, Embed):
            self._embeds.append(embed)
            return self

        builder = EmbedBuilder()
        embed(builder)
        self._embeds.append(builder.build())
        return self

    def action_row(
        self, row: ActionRow | Callable[[ActionRowBuilder], object]
    ) -> MessageBuilder:
        """Acrescenta uma linha de botões pronta ou configurada via callable."""
        if isinstance(row, ActionRow):
            self._components.append(row)
            return self

        builder = ActionRowBuilder()
        row(builder)
        self._components.append(builder.build())
        return self

    def file(
        self,
        filename: str,
        content: bytes,
        description: str | None = None,
    ) -> MessageBuilder:
        """Anexa um arquivo; o id é a posição do anexo na mensagem."""
        self._attachments.append(
            Attachment(
                id=len(self._attachments),
                filename=filename,
                description=description,
                content=content,
            )
        )
        return self

    def allowed_mentions(
        self,
        parse: Iterable[AllowedMentionType | str] = (),
        roles: Iterable[str] | None = None,
        users: Iterable[str] | None = None,
    ) -> MessageBuilder:
        """Restringe menções; sem argumentos, nenhuma menção notifica."""
        self._allowed_mentions = AllowedMentions(
            parse=[str(AllowedMentionType(p)) for p in parse],
            roles=list(roles) if roles is not None else None,
            users=list(users) if users is not None else None,
        )
        return self

    def suppress_embeds(self, enabled: bool = True) -> MessageBuilder:
        flags = self._flags or 0
        flags = flags | SUPPRESS_EMBEDS_FLAG if enabled else flags & ~SUPPRESS_EMBEDS_FLAG
        self._flags = flags or None
        return self

    def thread_name(self, name: str) -> MessageBuilder:
        """Cria um post com esse nome (só em canais de fórum)."""
        self._thread_name = name
        return self

    def build(self) -> Message:
        return Message(
            content=self._content,
            username=self._username,
            avatar_url=self._avatar_url,
            tts=self._tts,
            embeds=list(self._embeds) or None,
            components=list(self._components) or None,
            attachments=list(self._attachments) or None,
            allowed_mentions=self._allowed_mentions,
            flags=self._flags,
            thread_name=self._thread_name,
        )
