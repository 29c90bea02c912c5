"""Builders de componentes interativos (action rows e botões)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from hookpost.constants import ButtonStyle
from hookpost.models import ActionRow, Button, ButtonEmoji

if TYPE_CHECKING:
    from collections.abc import Callable


class ButtonBuilder:
    """Monta um ``Button``.

    Nada é exigido aqui: style/custom_id/url são conferidos por
    ``validate_message`` antes do envio.
    """

    def __init__(self, style: ButtonStyle | None = None, regular: bool = False) -> None:
        self._style = style
        self._regular = regular
        self._label: str | None = None
        self._custom_id: str | None = None
        self._url: str | None = None
        self._disabled: bool | None = None
        self._emoji: ButtonEmoji | None = None

    def style(self, style: ButtonStyle) -> ButtonBuilder:
        self._style = ButtonStyle(style)
        return self

    def label(self, label: str) -> ButtonBuilder:
        self._label = label
        return self

    def custom_id(self, custom_id: str) -> ButtonBuilder:
        self._custom_id = custom_id
        return self

    def url(self, url: str) -> ButtonBuilder:
        self._url = url
        return self

    def disabled(self, disabled: bool = True) -> ButtonBuilder:
        self._disabled = disabled
        return self

    def emoji(
        self,
        name: str | None = None,
        emoji_id: str | None = None,
        animated: bool | None = None,
    ) -> ButtonBuilder:
        self._emoji = ButtonEmoji(id=emoji_id, name=name, animated=animated)
        return self

    def build(self) -> Button:
        return Button(
            style=self._style,
            label=self._label,
            emoji=self._emoji,
            custom_id=self._custom_id,
            url=self._url,
            disabled=self._disabled,
            regular=self._regular,
        )


class ActionRowBuilder:
    """Monta uma ``ActionRow`` com botões na ordem de inserção."""

    def __init__(self) -> None:
        self._buttons: list[Button] = []

    def regular_button(self, configure: Callable[[ButtonBuilder], object]) -> ActionRowBuilder:
        """Acrescenta botão de interação (exige style e custom_id)."""
        builder = ButtonBuilder(regular=True)
        configure(builder)
        self._buttons.append(builder.build())
        return self

    def link_button(self, configure: Callable[[ButtonBuilder], object]) -> ActionRowBuilder:
        """Acrescenta botão de link (style LINK, exige url)."""
        builder = ButtonBuilder(style=ButtonStyle.LINK)
        configure(builder)
        self._buttons.append(builder.build())
        return self

    def build(self) -> ActionRow:
        return ActionRow(components=list(self._buttons))
