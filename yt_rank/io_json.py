# -*- coding: utf-8 -*-
import json
from typing import Any, Dict, List

from .utils import atomic_write_bytes


def write_json(path: str, records: List[Dict[str, Any]]) -> int:
    """Grava `records` como array JSON indentado (escrita atômica). Retorna o nº de bytes."""
    data = (json.dumps(records, ensure_ascii=False, indent=2) + "\n").encode("utf-8")
    atomic_write_bytes(path, data)
    return len(data)
