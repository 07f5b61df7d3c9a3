"""
asset_cache.py

Per-pack, per-segment frame cache with readiness tracking.

* ``ensure_loaded()`` allocates a segment's slots once and issues one fetch
  per frame; calling it again for the same segment is a no-op.
* Fetch completions arrive on loader threads.  They are queued and only
  written into slots by ``pump()``, which the tick thread calls, so nothing
  else ever mutates the cache concurrently.
* A failed frame leaves a permanent ``None`` hole.  Readiness requires every
  declared frame to have decoded, so one hole blocks its segment for good.
  There is no retry.
"""

from __future__ import annotations

import queue
from concurrent.futures import Future
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

from manifest import SEGMENTS, Pack, frame_path

Fetch = Callable[[str], Future]

_UNRESOLVED = object()


# ── Data structures ─────────────────────────────────────────────────────────
class FrameSlot:
    """One frame position; resolves exactly once to an image or ``None``."""

    __slots__ = ("path", "future", "_value")

    def __init__(self, path: str, future: Optional[Future] = None):
        self.path = path
        self.future = future
        self._value: Any = _UNRESOLVED

    @property
    def resolved(self) -> bool:
        return self._value is not _UNRESOLVED

    @property
    def image(self) -> Any:
        """Decoded image, or ``None`` while unresolved or after a failure."""
        return None if self._value is _UNRESOLVED else self._value

    def resolve(self, image: Any) -> None:
        if self._value is not _UNRESOLVED:
            raise RuntimeError(f"frame slot already resolved: {self.path}")
        self._value = image


class SegmentEntry:
    """Fixed-length slot sequence for one (pack, segment) pair."""

    def __init__(self, slots: List[FrameSlot]):
        self.slots = slots

    def __len__(self) -> int:
        return len(self.slots)

    def __getitem__(self, i: int) -> Any:
        return self.slots[i].image

    def loaded_ok(self) -> int:
        return sum(1 for s in self.slots if s.image is not None)

    def first(self) -> Any:
        return next((s.image for s in self.slots if s.image is not None), None)


@dataclass
class ReadinessCounter:
    expected: int = 0
    loaded: int = 0

    @property
    def percent(self) -> int:
        return (100 * self.loaded) // self.expected if self.expected else 0


# ── Cache ───────────────────────────────────────────────────────────────────
class AssetCache:
    def __init__(self, packs: List[Pack], fetch: Fetch):
        self.packs = packs
        self._fetch = fetch
        self._entries: List[Dict[str, SegmentEntry]] = [{} for _ in packs]
        self._done: "queue.Queue[FrameSlot]" = queue.Queue()
        self.counter = ReadinessCounter()

    # ---------------------------------------------------------------- loading
    def ensure_loaded(self, pack_index: int, segment_name: str) -> None:
        cache = self._entries[pack_index]
        if segment_name in cache:
            return

        pack = self.packs[pack_index]
        count = pack.segment(segment_name).count
        slots = [FrameSlot(frame_path(pack, segment_name, i))
                 for i in range(1, count + 1)]
        cache[segment_name] = SegmentEntry(slots)
        self.counter.expected += count

        for slot in slots:
            slot.future = self._fetch(slot.path)
            slot.future.add_done_callback(
                lambda _f, s=slot: self._done.put(s))

    def ensure_pack_all(self, pack_index: int) -> None:
        for seg in SEGMENTS:
            self.ensure_loaded(pack_index, seg)

    def pump(self) -> int:
        """Apply finished fetches to their slots; returns how many landed."""
        n = 0
        while True:
            try:
                slot = self._done.get_nowait()
            except queue.Empty:
                break
            self._settle(slot)
            n += 1
        return n

    def _settle(self, slot: FrameSlot) -> None:
        fut = slot.future
        if fut.cancelled():
            image = None
        else:
            exc = fut.exception()
            image = None if exc is not None else fut.result()
            if exc is not None:
                print(f"[assets] failed to load {slot.path}: {exc}")
        slot.resolve(image)
        self.counter.loaded += 1

    # -------------------------------------------------------------- readiness
    def frames(self, pack_index: int, segment_name: str) -> Optional[SegmentEntry]:
        return self._entries[pack_index].get(segment_name)

    def is_segment_ready(self, pack_index: int, segment_name: str) -> bool:
        entry = self.frames(pack_index, segment_name)
        if entry is None:
            return False
        need = self.packs[pack_index].segment(segment_name).count
        return entry.loaded_ok() == need

    def is_pack_ready(self, pack_index: int) -> bool:
        return all(self.is_segment_ready(pack_index, s) for s in SEGMENTS)

    def first_frame(self, pack_index: int, segment_name: str) -> Any:
        entry = self.frames(pack_index, segment_name)
        return entry.first() if entry is not None else None

    def progress(self) -> Tuple[int, int]:
        return self.counter.loaded, self.counter.expected
