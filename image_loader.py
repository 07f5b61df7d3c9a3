# =========  image_loader.py  =========
"""
Background PNG decoder.

Public API
----------
fetch(path)  → concurrent.futures.Future resolving to a pygame.Surface
               (or raising if the file cannot be decoded)
close()      → stop accepting work; in-flight decodes are not cancelled
"""
from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor

import pygame

import config


def _decode(path: str) -> pygame.Surface:
    return pygame.image.load(path)


class ImageLoader:
    def __init__(self, workers: int | None = None):
        self._pool = ThreadPoolExecutor(
            max_workers=workers or config.LOADER_WORKERS,
            thread_name_prefix="frames",
        )

    def fetch(self, path: str) -> Future:
        return self._pool.submit(_decode, path)

    def close(self) -> None:
        self._pool.shutdown(wait=False)
