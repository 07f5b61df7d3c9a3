from __future__ import annotations

import os
from concurrent.futures import Future

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from manifest import packs_from_config


def make_pack_dict(name: str, counts=(3, 3, 3), pad: int = 4) -> dict:
    rec = {"name": name, "base": f"assets/{name}/"}
    for seg, n in zip(("in", "inter", "out"), counts):
        rec[seg] = {"dir": f"{seg}/", "prefix": f"{seg}_", "pad": pad, "count": n}
    return rec


class FakeFetcher:
    """Hands out Futures the test resolves by hand."""

    def __init__(self, auto: bool = False, fail: set[str] | None = None):
        self.auto = auto
        self.fail = fail or set()
        self.calls: list[str] = []
        self.pending: dict[str, Future] = {}

    def __call__(self, path: str) -> Future:
        self.calls.append(path)
        fut: Future = Future()
        if self.auto:
            self._finish(path, fut)
        else:
            self.pending[path] = fut
        return fut

    def _finish(self, path: str, fut: Future) -> None:
        if path in self.fail:
            fut.set_exception(FileNotFoundError(path))
        else:
            fut.set_result(f"img:{path}")

    def resolve_all(self) -> None:
        for path, fut in list(self.pending.items()):
            self._finish(path, fut)
        self.pending.clear()

    def resolve_matching(self, needle: str) -> None:
        for path in [p for p in self.pending if needle in p]:
            self._finish(path, self.pending.pop(path))


@pytest.fixture
def three_packs():
    return packs_from_config([make_pack_dict(n) for n in ("star", "flower", "diamond")])


@pytest.fixture
def fetcher():
    return FakeFetcher()
