# -*- coding: utf-8 -*-
"""Formatação para exibição: duração, números abreviados e títulos."""

import re
from decimal import Decimal, ROUND_HALF_UP

_DURATION_RE = re.compile(r"PT(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)S)?")
_ONE_DECIMAL = Decimal("0.1")

TITLE_MAX = 60
TITLE_KEEP = 57
ELLIPSIS = "..."


def format_duration(iso_duration: str) -> str:
    """ISO-8601 (`PT1H2M10S`) -> relógio (`1:02:10`). Sem match, devolve a entrada."""
    m = _DURATION_RE.search(iso_duration or "")
    if not m:
        return iso_duration
    hours, minutes, seconds = m.groups()
    seconds = seconds.zfill(2) if seconds else "00"
    if hours:
        return f"{hours}:{(minutes or '0').zfill(2)}:{seconds}"
    return f"{minutes or '0'}:{seconds}"


def _one_decimal(num: int, unit: int) -> str:
    # meio arredonda para cima (1250 -> 1.3K)
    return str((Decimal(num) / unit).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))


def format_number(num: int) -> str:
    if num >= 1_000_000:
        return f"{_one_decimal(num, 1_000_000)}M"
    if num >= 1_000:
        return f"{_one_decimal(num, 1_000)}K"
    return str(num)


def truncate_title(title: str, escape_pipes: bool = False) -> str:
    """Corta em TITLE_KEEP + `...` se passar de TITLE_MAX.

    Com `escape_pipes`, `|` vira `\\|` e o escape conta no limite.
    """
    if not escape_pipes:
        if len(title) > TITLE_MAX:
            return title[:TITLE_KEEP] + ELLIPSIS
        return title

    escaped = title.replace("|", "\\|")
    if len(escaped) <= TITLE_MAX:
        return escaped
    out = ""
    for ch in title:
        piece = "\\|" if ch == "|" else ch
        if len(out) + len(piece) > TITLE_KEEP:
            break
        out += piece
    return out + ELLIPSIS
