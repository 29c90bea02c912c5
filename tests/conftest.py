"""Configuração do pytest para o hookpost."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para rodar sem instalação
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

WEBHOOK_URL = "https://discord.com/api/webhooks/123456789/secret-token"


@pytest.fixture
def webhook_url() -> str:
    return WEBHOOK_URL
