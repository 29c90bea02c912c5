"""Validadores locais para mensagens de webhook.

Uso:
    from hookpost.validators import ValidationError, validate_message

    validate_message(message)
"""

from hookpost.validators.components import validate_button, validate_components
from hookpost.validators.errors import ValidationError
from hookpost.validators.message import validate_message

__all__ = [
    "ValidationError",
    "validate_button",
    "validate_components",
    "validate_message",
]
