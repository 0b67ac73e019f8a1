# -*- coding: utf-8 -*-
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from .config import YOUTUBE_WATCH_URL
from .errors import MalformedResponseError


def _count(stats: Dict[str, Any], key: str) -> int:
    # statistics vêm como string ("1234"); ausente -> 0
    return int(stats.get(key) or 0)


@dataclass(frozen=True)
class Video:
    id: str
    title: str
    published_at: str
    view_count: int
    like_count: int
    comment_count: int
    duration: str

    @property
    def url(self) -> str:
        return f"{YOUTUBE_WATCH_URL}{self.id}"

    @classmethod
    def from_api_item(cls, item: Dict[str, Any]) -> "Video":
        """Converte um item de `videos.list` (snippet, statistics, contentDetails)."""
        try:
            snippet = item["snippet"]
            details = item["contentDetails"]
            return cls(
                id=item["id"],
                title=snippet["title"],
                published_at=snippet["publishedAt"],
                view_count=_count(item.get("statistics", {}), "viewCount"),
                like_count=_count(item.get("statistics", {}), "likeCount"),
                comment_count=_count(item.get("statistics", {}), "commentCount"),
                duration=details["duration"],
            )
        except KeyError as exc:
            raise MalformedResponseError(
                f"Item de vídeo sem o campo {exc} (id={item.get('id')!r})") from exc

    def to_record(self, *, rank: int, duration_formatted: str) -> Dict[str, Any]:
        """Registro completo para o JSON de saída (ordem de chaves fixa)."""
        return {
            "rank": rank,
            "id": self.id,
            "title": self.title,
            "publishedAt": self.published_at,
            "viewCount": self.view_count,
            "likeCount": self.like_count,
            "commentCount": self.comment_count,
            "duration": self.duration,
            "url": self.url,
            "durationFormatted": duration_formatted,
        }
