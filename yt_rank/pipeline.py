# -*- coding: utf-8 -*-
from __future__ import annotations

import logging
import sys
from typing import List, Optional, TextIO

import aiohttp

from .config import Settings
from .io_json import write_json
from .models import Video
from .report import rank_videos, render_table, to_records
from .youtube_api import (
    fetch_video_details,
    get_uploads_playlist_id,
    list_playlist_video_ids,
    resolve_channel_id,
)

logger = logging.getLogger(__name__)


async def fetch_channel_videos(session: aiohttp.ClientSession, settings: Settings) -> List[Video]:
    """Fluxo: channels.list (handle) → channels.list (uploads) → playlistItems.list → videos.list."""
    logger.info("Buscando vídeos de @%s...", settings.handle)

    # 1) handle -> channelId
    channel_id = await resolve_channel_id(session, settings)
    logger.info("Channel ID: %s", channel_id)

    # 2) channelId -> playlist de uploads
    uploads_id = await get_uploads_playlist_id(session, settings, channel_id)
    logger.info("Uploads Playlist ID: %s", uploads_id)

    # 3) IDs (paginado)
    video_ids = await list_playlist_video_ids(session, settings, uploads_id)
    logger.info("Total de vídeos encontrados: %d", len(video_ids))

    # 4) detalhes em lotes
    return await fetch_video_details(session, settings, video_ids)


async def run(
    settings: Settings,
    *,
    session: Optional[aiohttp.ClientSession] = None,
    out: Optional[TextIO] = None,
) -> List[dict]:
    """Executa o pipeline completo: imprime a tabela e grava o JSON ranqueado.

    Nada é gravado se qualquer etapa falhar.
    """
    out = out or sys.stdout
    if session is None:
        timeout = aiohttp.ClientTimeout(total=settings.timeout_secs)
        async with aiohttp.ClientSession(timeout=timeout) as own_session:
            videos = await fetch_channel_videos(own_session, settings)
    else:
        videos = await fetch_channel_videos(session, settings)

    ranked = rank_videos(videos)
    print(render_table(ranked, settings.handle), file=out)

    records = to_records(ranked)
    write_json(settings.output_path, records)
    logger.info("JSON salvo em %s (%d vídeos)", settings.output_path, len(records))
    return records
