"""Constantes de configuração e objeto `Settings` do ranking de vídeos."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import ConfigurationError, MissingCredentialError

YOUTUBE_API_URL = "https://www.googleapis.com/youtube/v3"
YOUTUBE_WATCH_URL = "https://www.youtube.com/watch?v="
TIMEOUT_SECS = 30
DEFAULT_MAX_RETRIES = 0          # sem retry por padrão
BATCH_SIZE_IDS = 50              # videos.list aceita até 50
PAGE_SIZE = 50                   # playlistItems.list aceita até 50
# teto defensivo de páginas (50 * 2000 = 100 mil vídeos)
MAX_PLAYLIST_PAGES = 2000
DEFAULT_CHANNEL_HANDLE = "@aidotengineer"
DEFAULT_OUTPUT_PATH = "youtube-videos.json"

API_KEY_ENV = "YOUTUBE_API_KEY"
CHANNEL_HANDLE_ENV = "YOUTUBE_CHANNEL_HANDLE"


def normalize_handle(handle: str) -> str:
    """Remove espaços e o `@` inicial do handle."""
    handle = handle.strip()
    if handle.startswith("@"):
        handle = handle[1:]
    return handle


@dataclass(frozen=True)
class Settings:
    """Configuração de uma execução, passada explicitamente a cada etapa."""

    api_key: str
    channel_handle: str = DEFAULT_CHANNEL_HANDLE
    output_path: str = DEFAULT_OUTPUT_PATH
    timeout_secs: float = TIMEOUT_SECS
    max_retries: int = DEFAULT_MAX_RETRIES
    max_pages: int = MAX_PLAYLIST_PAGES

    def __post_init__(self):
        if not self.api_key or not self.api_key.strip():
            raise MissingCredentialError(f"{API_KEY_ENV} não configurada.")
        if not normalize_handle(self.channel_handle or ""):
            raise ConfigurationError("Handle do canal vazio.")
        if self.timeout_secs <= 0:
            raise ConfigurationError("timeout_secs deve ser > 0.")
        if self.max_retries < 0:
            raise ConfigurationError("max_retries deve ser >= 0.")
        if self.max_pages < 1:
            raise ConfigurationError("max_pages deve ser >= 1.")

    @property
    def handle(self) -> str:
        """Handle normalizado (sem `@`)."""
        return normalize_handle(self.channel_handle)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "Settings":
        """Monta `Settings` a partir do ambiente; `overrides` têm prioridade (None é ignorado)."""
        env = os.environ if environ is None else environ
        values = {
            "api_key": env.get(API_KEY_ENV, ""),
            "channel_handle": env.get(CHANNEL_HANDLE_ENV) or DEFAULT_CHANNEL_HANDLE,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
