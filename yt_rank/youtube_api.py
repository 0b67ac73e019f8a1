"""Wrappers assíncronos para endpoints da YouTube Data API v3."""

import logging
from typing import Any, Dict, List, Optional

import aiohttp

from .config import YOUTUBE_API_URL, BATCH_SIZE_IDS, PAGE_SIZE, Settings, normalize_handle
from .errors import MalformedResponseError, NotFoundError
from .http_client import http_get_json
from .models import Video

logger = logging.getLogger(__name__)


async def _get(session: aiohttp.ClientSession, settings: Settings,
               endpoint: str, params: Dict[str, Any]) -> Dict[str, Any]:
    url = f"{YOUTUBE_API_URL}/{endpoint}"
    params = {**params, "key": settings.api_key}
    return await http_get_json(session, url, params, max_retries=settings.max_retries)


async def resolve_channel_id(
    session: aiohttp.ClientSession,
    settings: Settings,
    handle: Optional[str] = None,
) -> str:
    """Resolve o handle (com ou sem `@`) para o channelId via `channels.list?forHandle`."""
    handle = normalize_handle(handle if handle is not None else settings.channel_handle)
    data = await _get(session, settings, "channels", {"part": "id", "forHandle": handle})
    items = data.get("items") or []
    if not items:
        raise NotFoundError(f"Canal não encontrado: @{handle}")
    try:
        return items[0]["id"]
    except KeyError as exc:
        raise MalformedResponseError(f"Canal @{handle} sem `id` na resposta") from exc


async def get_uploads_playlist_id(
    session: aiohttp.ClientSession,
    settings: Settings,
    channel_id: str,
) -> str:
    """Busca o id da playlist de uploads (`contentDetails.relatedPlaylists.uploads`)."""
    data = await _get(session, settings, "channels", {"part": "contentDetails", "id": channel_id})
    try:
        return data["items"][0]["contentDetails"]["relatedPlaylists"]["uploads"]
    except (KeyError, IndexError, TypeError) as exc:
        raise MalformedResponseError(
            f"Canal {channel_id} sem playlist de uploads na resposta") from exc


async def list_playlist_video_ids(
    session: aiohttp.ClientSession,
    settings: Settings,
    playlist_id: str,
) -> List[str]:
    """Lista todos os IDs de vídeos da playlist via `playlistItems.list`, página a página."""
    video_ids: List[str] = []
    page_token: Optional[str] = None
    seen_tokens = set()
    pages = 0

    while True:
        if pages >= settings.max_pages:
            raise MalformedResponseError(
                f"Playlist {playlist_id} excedeu {settings.max_pages} páginas")
        params: Dict[str, Any] = {
            "part": "contentDetails",
            "playlistId": playlist_id,
            "maxResults": PAGE_SIZE,
        }
        if page_token:
            params["pageToken"] = page_token

        data = await _get(session, settings, "playlistItems", params)
        pages += 1
        for it in data.get("items", []):
            vid = it.get("contentDetails", {}).get("videoId")
            if not vid:
                raise MalformedResponseError(
                    f"Item da playlist {playlist_id} sem contentDetails.videoId")
            video_ids.append(vid)
        logger.info("Coletados %d IDs de vídeos...", len(video_ids))

        page_token = data.get("nextPageToken")
        if not page_token:
            break
        if page_token in seen_tokens:
            raise MalformedResponseError(
                f"Cursor repetido na playlist {playlist_id}: {page_token}")
        seen_tokens.add(page_token)

    return video_ids


async def fetch_video_details(
    session: aiohttp.ClientSession,
    settings: Settings,
    video_ids: List[str],
) -> List[Video]:
    """Busca detalhes de vídeos em lotes via endpoint `videos.list`.

    IDs sem item correspondente (removidos/privados) são omitidos.
    """
    if not video_ids:
        return []

    out: List[Video] = []
    for i in range(0, len(video_ids), BATCH_SIZE_IDS):
        chunk = video_ids[i : i + BATCH_SIZE_IDS]
        params = {"part": "snippet,statistics,contentDetails", "id": ",".join(chunk)}
        data = await _get(session, settings, "videos", params)
        items = data.get("items", [])
        out.extend(Video.from_api_item(it) for it in items)

        returned = {it.get("id") for it in items}
        missing = [vid for vid in chunk if vid not in returned]
        if missing:
            logger.debug("%d vídeo(s) sem detalhes no lote: %s", len(missing), ",".join(missing))
        logger.info("Detalhes de %d/%d vídeos...", len(out), len(video_ids))
    return out
