# -*- coding: utf-8 -*-
"""Ordenação, ranking e saídas (tabela markdown e registros JSON)."""

from __future__ import annotations

from typing import Any, Dict, List, Sequence, Tuple

from .formatting import format_duration, format_number, truncate_title
from .models import Video

Ranked = List[Tuple[int, Video]]

TABLE_HEADER = "| Rank | Views | Likes | Duration | Title | URL |"
TABLE_RULE = "|------|-------|-------|----------|-------|-----|"


def sort_by_views(videos: Sequence[Video]) -> List[Video]:
    # sort estável: empates mantêm a ordem de coleta
    return sorted(videos, key=lambda v: v.view_count, reverse=True)


def rank_videos(videos: Sequence[Video]) -> Ranked:
    """Ordena por views (desc) e atribui rank 1..N pela posição final."""
    return [(i, v) for i, v in enumerate(sort_by_views(videos), start=1)]


def render_table(ranked: Ranked, handle: str) -> str:
    lines = [
        "",
        f"# All Videos from @{handle} sorted by popularity",
        "",
        f"Total: {len(ranked)} videos",
        "",
        TABLE_HEADER,
        TABLE_RULE,
    ]
    for rank, v in ranked:
        lines.append(
            f"| {rank} | {format_number(v.view_count)} | {format_number(v.like_count)} "
            f"| {format_duration(v.duration)} | {truncate_title(v.title, escape_pipes=True)} | {v.url} |"
        )
    return "\n".join(lines)


def to_records(ranked: Ranked) -> List[Dict[str, Any]]:
    return [v.to_record(rank=rank, duration_formatted=format_duration(v.duration))
            for rank, v in ranked]
