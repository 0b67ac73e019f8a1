# -*- coding: utf-8 -*-
import os


def ensure_dir(path: str):
    if path:
        os.makedirs(path, exist_ok=True)


def atomic_write_bytes(path_final: str, data: bytes):
    ensure_dir(os.path.dirname(path_final))
    tmp = f"{path_final}.tmp"
    with open(tmp, "wb") as f:
        f.write(data)
        f.flush()
        os.fsync(f.fileno())
    os.replace(tmp, path_final)
