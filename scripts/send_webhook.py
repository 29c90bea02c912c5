#!/usr/bin/env python3
"""Envia uma mensagem de teste para um webhook do Discord.

Uso:
    python scripts/send_webhook.py --url https://discord.com/api/webhooks/<id>/<token>
    WEBHOOK_URL=... python scripts/send_webhook.py --content "Olá" --info

Sem --url, usa WEBHOOK_URL do ambiente.
"""

from __future__ import annotations

import argparse
import asyncio
import dataclasses

from hookpost.config import get_webhook_settings
from hookpost.config.logging import configure_logging
from hookpost.connectors import create_webhook_client


async def run(args: argparse.Namespace) -> None:
    settings = get_webhook_settings()
    if args.url:
        settings = dataclasses.replace(settings, url=args.url)

    client = create_webhook_client(settings)

    if args.info:
        info = await client.get_information()
        print(f"webhook id={info.id} name={info.name} channel_id={info.channel_id}")

    await client.send(
        lambda m: m.content(args.content)
        .username(args.username)
        .embed(
            lambda e: e.title("hookpost")
            .description("Mensagem de teste")
            .color(0x32A852)
            .field("Campo 1", "Valor 1")
            .field("Campo 2", "Valor 2", inline=True)
            .footer("Rodapé")
        )
    )
    print("mensagem enviada")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--url", default=None, help="URL do webhook (padrão: WEBHOOK_URL).")
    parser.add_argument("--content", default="Teste", help="Texto da mensagem.")
    parser.add_argument("--username", default="hookpost", help="Nome exibido.")
    parser.add_argument(
        "--info",
        action="store_true",
        help="Consulta e imprime os dados do webhook antes de enviar.",
    )
    parser.add_argument("--log-level", default="WARNING", help="Nível de log.")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    configure_logging(level=args.log_level, service_name="send_webhook")
    asyncio.run(run(args))


if __name__ == "__main__":
    main()
