"""Interface de linha de comando para gerar o ranking de vídeos de um canal."""

import asyncio
import argparse
import logging
import sys
from typing import List, Optional

from .config import (
    API_KEY_ENV, DEFAULT_OUTPUT_PATH, DEFAULT_MAX_RETRIES, MAX_PLAYLIST_PAGES,
    TIMEOUT_SECS, Settings,
)
from .errors import ChannelRankError, ConfigurationError, MissingCredentialError
from .pipeline import run

logger = logging.getLogger(__name__)

API_KEY_HELP = f"""\
Error: {API_KEY_ENV} environment variable is required

To get an API key:
1. Go to https://console.cloud.google.com/apis/credentials
2. Create a new project or select existing one
3. Enable 'YouTube Data API v3'
4. Create an API key

Usage: {API_KEY_ENV}=your_key yt-rank --handle @channel"""


def build_parser() -> argparse.ArgumentParser:
    """Monta o parser de argumentos da CLI."""
    p = argparse.ArgumentParser(
        prog="yt-rank",
        description="Lista todos os vídeos de um canal do YouTube ordenados por views")
    p.add_argument("--handle", default=None,
                   help="Handle do canal, com ou sem @ (ou env YOUTUBE_CHANNEL_HANDLE)")
    p.add_argument("--api-key", default=None,
                   help=f"YouTube Data API v3 Key (ou env {API_KEY_ENV})")
    p.add_argument("--output", default=DEFAULT_OUTPUT_PATH,
                   help="Arquivo JSON de saída")
    p.add_argument("--timeout", type=float, default=TIMEOUT_SECS,
                   help="Timeout total por requisição (s)")
    p.add_argument("--max-retries", type=int, default=DEFAULT_MAX_RETRIES,
                   help="Tentativas extras em 429/5xx (default: 0)")
    p.add_argument("--max-pages", type=int, default=MAX_PLAYLIST_PAGES,
                   help="Limite defensivo de páginas da playlist")
    p.add_argument("-v", "--verbose", action="store_true")
    return p


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        stream=sys.stderr,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Ponto de entrada da CLI. Retorna 0 em sucesso; encerra com 1 em erro."""
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    try:
        settings = Settings.from_env(
            api_key=args.api_key,
            channel_handle=args.handle,
            output_path=args.output,
            timeout_secs=args.timeout,
            max_retries=args.max_retries,
            max_pages=args.max_pages,
        )
    except MissingCredentialError:
        print(API_KEY_HELP, file=sys.stderr)
        raise SystemExit(1)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1)

    try:
        asyncio.run(run(settings))
    except ChannelRankError as exc:
        logger.error("Falha ao gerar ranking de @%s: %s", settings.handle, exc)
        raise SystemExit(1) from exc
    return 0


if __name__ == "__main__":
    main()
