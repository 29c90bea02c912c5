"""Builder de embeds."""

from __future__ import annotations

import re
from datetime import datetime
from typing import TYPE_CHECKING

from hookpost.models import (
    Embed,
    EmbedAuthor,
    EmbedField,
    EmbedFooter,
    EmbedImage,
    EmbedThumbnail,
    EmbedVideo,
)

if TYPE_CHECKING:
    from hookpost.constants import EmbedType

_HEX_COLOR_RE = re.compile(r"^(?:#|0x)?([0-9a-fA-F]{6})$")


def parse_color(color: int | str) -> int:
    """Normaliza cor para o inteiro RGB esperado pelo Discord.

    Aceita inteiro ou string hex ("#32a852", "0x32a852", "32a852").

    Raises:
        ValueError: Se string não for hex de 6 dígitos ou inteiro fora de 0..0xFFFFFF
    """
    if isinstance(color, str):
        match = _HEX_COLOR_RE.match(color.strip())
        if not match:
            raise ValueError(f"Cor inválida: {color!r}")
        return int(match.group(1), 16)

    if not 0 <= color <= 0xFFFFFF:
        raise ValueError(f"Cor fora do intervalo RGB: {color}")
    return color


class EmbedBuilder:
    """Monta uma ``Embed`` com métodos encadeáveis.

    Exemplo:
        embed = (
            EmbedBuilder()
            .title("Deploy")
            .color(0x32A852)
            .field("Versão", "1.4.0", inline=True)
            .build()
        )
    """

    def __init__(self) -> None:
        self._title: str | None = None
        self._type: str | None = None
        self._description: str | None = None
        self._url: str | None = None
        self._timestamp: str | None = None
        self._color: int | None = None
        self._fields: list[EmbedField] = []
        self._footer: EmbedFooter | None = None
        self._image: EmbedImage | None = None
        self._thumbnail: EmbedThumbnail | None = None
        self._video: EmbedVideo | None = None
        self._author: EmbedAuthor | None = None

    def title(self, title: str) -> EmbedBuilder:
        self._title = title
        return self

    def type_(self, embed_type: EmbedType | str) -> EmbedBuilder:
        self._type = str(embed_type)
        return self

    def description(self, description: str) -> EmbedBuilder:
        self._description = description
        return self

    def url(self, url: str) -> EmbedBuilder:
        self._url = url
        return self

    def timestamp(self, timestamp: str | datetime) -> EmbedBuilder:
        """Define o timestamp (datetime é convertido para ISO8601)."""
        if isinstance(timestamp, datetime):
            timestamp = timestamp.isoformat()
        self._timestamp = timestamp
        return self

    def color(self, color: int | str) -> EmbedBuilder:
        self._color = parse_color(color)
        return self

    def field(self, name: str, value: str, inline: bool = False) -> EmbedBuilder:
        """Acrescenta um field; a ordem de chamada é a ordem de exibição."""
        self._fields.append(EmbedField(name=name, value=value, inline=inline))
        return self

    def footer(
        self,
        text: str,
        icon_url: str | None = None,
        proxy_icon_url: str | None = None,
    ) -> EmbedBuilder:
        self._footer = EmbedFooter(text=text, icon_url=icon_url, proxy_icon_url=proxy_icon_url)
        return self

    def image(
        self,
        url: str,
        proxy_url: str | None = None,
        height: int | None = None,
        width: int | None = None,
    ) -> EmbedBuilder:
        self._image = EmbedImage(url=url, proxy_url=proxy_url, height=height, width=width)
        return self

    def thumbnail(
        self,
        url: str,
        proxy_url: str | None = None,
        height: int | None = None,
        width: int | None = None,
    ) -> EmbedBuilder:
        self._thumbnail = EmbedThumbnail(
            url=url, proxy_url=proxy_url, height=height, width=width
        )
        return self

    def video(
        self,
        url: str,
        height: int | None = None,
        width: int | None = None,
    ) -> EmbedBuilder:
        self._video = EmbedVideo(url=url, height=height, width=width)
        return self

    def author(
        self,
        name: str,
        url: str | None = None,
        icon_url: str | None = None,
        proxy_icon_url: str | None = None,
    ) -> EmbedBuilder:
        self._author = EmbedAuthor(
            name=name, url=url, icon_url=icon_url, proxy_icon_url=proxy_icon_url
        )
        return self

    def build(self) -> Embed:
        """Retorna a ``Embed``; lista de fields vazia vira ausência do campo."""
        return Embed(
            title=self._title,
            embed_type=self._type,
            description=self._description,
            url=self._url,
            timestamp=self._timestamp,
            color=self._color,
            fields=list(self._fields) or None,
            footer=self._footer,
            image=self._image,
            thumbnail=self._thumbnail,
            video=self._video,
            author=self._author,
        )
