# -*- coding: utf-8 -*-
from typing import Any, Callable, Dict, List, Tuple
from unittest import mock

import aiohttp
import pytest

from yt_rank.config import Settings


class FakeResponse:
    def __init__(self, payload: Any, status: int = 200):
        self.payload = payload
        self.status = status

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        return False

    def raise_for_status(self):
        if self.status >= 400:
            raise aiohttp.ClientResponseError(
                request_info=mock.Mock(real_url="http://fake"),
                history=(), status=self.status, message="fake error")

    async def json(self):
        return self.payload


class FakeSession:
    """Imita `aiohttp.ClientSession.get` roteando pelo último segmento da URL.

    Cada rota é uma função `params -> payload`; pode devolver `FakeResponse`
    ou levantar exceção para simular falhas.
    """

    def __init__(self, routes: Dict[str, Callable[[Dict[str, Any]], Any]]):
        self.routes = routes
        self.calls: List[Tuple[str, Dict[str, Any]]] = []

    def get(self, url, params=None, **kwargs):
        endpoint = url.rsplit("/", 1)[-1]
        params = dict(params or {})
        self.calls.append((endpoint, params))
        result = self.routes[endpoint](params)
        if isinstance(result, FakeResponse):
            return result
        return FakeResponse(result)

    def calls_to(self, endpoint: str) -> List[Dict[str, Any]]:
        return [p for e, p in self.calls if e == endpoint]


def video_item(vid: str, views: Any = "0", title: str = None, duration: str = "PT1M",
               likes: Any = "0", comments: Any = "0") -> Dict[str, Any]:
    stats = {}
    if views is not None:
        stats["viewCount"] = str(views)
    if likes is not None:
        stats["likeCount"] = str(likes)
    if comments is not None:
        stats["commentCount"] = str(comments)
    return {
        "id": vid,
        "snippet": {"title": title or f"Video {vid}", "publishedAt": "2024-01-01T00:00:00Z"},
        "statistics": stats,
        "contentDetails": {"duration": duration},
    }


def playlist_pages(ids: List[str], page_size: int = 50):
    """Rota de playlistItems que serve `ids` em páginas com cursor `p<N>`."""
    def route(params):
        token = params.get("pageToken")
        start = int(token[1:]) if token else 0
        chunk = ids[start:start + page_size]
        data = {"items": [{"contentDetails": {"videoId": v}} for v in chunk]}
        if start + page_size < len(ids):
            data["nextPageToken"] = f"p{start + page_size}"
        return data
    return route


def videos_route(items_by_id: Dict[str, Dict[str, Any]]):
    def route(params):
        return {"items": [items_by_id[v] for v in params["id"].split(",") if v in items_by_id]}
    return route


@pytest.fixture
def settings(tmp_path):
    return Settings(api_key="test-key", channel_handle="@somechannel",
                    output_path=str(tmp_path / "youtube-videos.json"))


@pytest.fixture
def no_sleep(monkeypatch):
    slept = []

    async def fake_sleep(secs):
        slept.append(secs)

    monkeypatch.setattr("yt_rank.http_client.asyncio.sleep", fake_sleep)
    return slept
