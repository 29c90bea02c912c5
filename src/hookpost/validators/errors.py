"""Erro de validação local de mensagens."""

from __future__ import annotations


class ValidationError(ValueError):
    """Mensagem viola um limite conhecido da API do Discord.

    Levantado antes de qualquer IO; nenhuma requisição é feita.
    """
