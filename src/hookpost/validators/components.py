"""Validadores para action rows e botões."""

from __future__ import annotations

from typing import TYPE_CHECKING

from hookpost.constants import (
    MAX_ACTION_ROWS_PER_MESSAGE,
    MAX_BUTTON_LABEL_LENGTH,
    MAX_BUTTONS_PER_ROW,
    MAX_CUSTOM_ID_LENGTH,
    ButtonStyle,
)
from hookpost.validators.errors import ValidationError

if TYPE_CHECKING:
    from hookpost.models import ActionRow, Button


def validate_components(rows: list[ActionRow]) -> None:
    """Valida as action rows de uma mensagem.

    Custom ids são únicos na mensagem inteira, não só na row.

    Raises:
        ValidationError: Na primeira violação encontrada
    """
    if len(rows) > MAX_ACTION_ROWS_PER_MESSAGE:
        raise ValidationError(
            f"action row count exceeds maximum of {MAX_ACTION_ROWS_PER_MESSAGE}"
        )

    seen_custom_ids: set[str] = set()
    for row in rows:
        if len(row.components) > MAX_BUTTONS_PER_ROW:
            raise ValidationError(
                f"button count in action row exceeds maximum of {MAX_BUTTONS_PER_ROW}"
            )
        for button in row.components:
            validate_button(button)
            if button.custom_id is None:
                continue
            if button.custom_id in seen_custom_ids:
                raise ValidationError(
                    f"custom id {button.custom_id!r} used twice in the same message"
                )
            seen_custom_ids.add(button.custom_id)


def validate_button(button: Button) -> None:
    """Valida um botão isolado.

    Raises:
        ValidationError: Se style/custom_id/url/label inconsistentes
    """
    if button.label is not None and len(button.label) > MAX_BUTTON_LABEL_LENGTH:
        raise ValidationError(
            f"button label exceeds maximum length of {MAX_BUTTON_LABEL_LENGTH} characters"
        )

    if button.regular and button.style == ButtonStyle.LINK:
        raise ValidationError("link style is not allowed for regular buttons")

    if button.style == ButtonStyle.LINK:
        _validate_link_button(button)
        return

    if button.style is None:
        raise ValidationError("button style is required for regular buttons")

    if not button.custom_id:
        raise ValidationError("custom id is required for regular buttons")

    if len(button.custom_id) > MAX_CUSTOM_ID_LENGTH:
        raise ValidationError(
            f"custom id exceeds maximum length of {MAX_CUSTOM_ID_LENGTH} characters"
        )

    if button.url is not None:
        raise ValidationError("url is only allowed on link buttons")


def _validate_link_button(button: Button) -> None:
    if not button.url:
        raise ValidationError("url is required for link buttons")

    if button.custom_id is not None:
        raise ValidationError("custom id is not allowed on link buttons")
