from __future__ import annotations

import pytest

from asset_cache import AssetCache, FrameSlot
from conftest import FakeFetcher


def test_ensure_loaded_requests_every_frame(three_packs, fetcher):
    cache = AssetCache(three_packs, fetcher)
    cache.ensure_loaded(0, "in")
    assert fetcher.calls == [
        "assets/star/in/in_0001.png",
        "assets/star/in/in_0002.png",
        "assets/star/in/in_0003.png",
    ]
    assert cache.progress() == (0, 3)


def test_ensure_loaded_is_idempotent_while_loading(three_packs, fetcher):
    cache = AssetCache(three_packs, fetcher)
    cache.ensure_loaded(1, "inter")
    cache.ensure_loaded(1, "inter")
    assert len(fetcher.calls) == 3
    assert cache.counter.expected == 3


def test_absent_versus_loading(three_packs, fetcher):
    cache = AssetCache(three_packs, fetcher)
    assert cache.frames(0, "out") is None
    cache.ensure_loaded(0, "out")
    entry = cache.frames(0, "out")
    assert entry is not None and len(entry) == 3
    assert entry[0] is None
    assert not cache.is_segment_ready(0, "out")


def test_segment_ready_after_all_frames_decode(three_packs, fetcher):
    cache = AssetCache(three_packs, fetcher)
    cache.ensure_loaded(0, "in")
    fetcher.resolve_all()
    assert not cache.is_segment_ready(0, "in")  # nothing pumped yet
    assert cache.pump() == 3
    assert cache.is_segment_ready(0, "in")
    assert cache.progress() == (3, 3)


def test_one_failed_frame_blocks_segment(three_packs):
    fetcher = FakeFetcher(auto=True, fail={"assets/star/out/out_0002.png"})
    cache = AssetCache(three_packs, fetcher)
    cache.ensure_loaded(0, "out")
    cache.pump()
    assert cache.progress() == (3, 3)  # failures count as loaded
    assert not cache.is_segment_ready(0, "out")
    assert cache.frames(0, "out")[1] is None
    # never retried
    cache.ensure_loaded(0, "out")
    assert len(fetcher.calls) == 3
    assert cache.pump() == 0
    assert not cache.is_segment_ready(0, "out")


def test_pack_ready_needs_all_three_segments(three_packs):
    cache = AssetCache(three_packs, FakeFetcher(auto=True))
    cache.ensure_loaded(2, "in")
    cache.ensure_loaded(2, "inter")
    cache.pump()
    assert not cache.is_pack_ready(2)
    cache.ensure_pack_all(2)
    cache.pump()
    assert cache.is_pack_ready(2)
    assert cache.counter.expected == 9


def test_first_frame_skips_holes(three_packs):
    fetcher = FakeFetcher(auto=True, fail={"assets/star/in/in_0001.png"})
    cache = AssetCache(three_packs, fetcher)
    assert cache.first_frame(0, "in") is None
    cache.ensure_loaded(0, "in")
    cache.pump()
    assert cache.first_frame(0, "in") == "img:assets/star/in/in_0002.png"


def test_first_frame_while_partially_loaded(three_packs, fetcher):
    cache = AssetCache(three_packs, fetcher)
    cache.ensure_loaded(0, "in")
    assert cache.first_frame(0, "in") is None
    fetcher.pending["assets/star/in/in_0003.png"].set_result("last")
    cache.pump()
    assert cache.first_frame(0, "in") == "last"
    assert cache.progress() == (1, 3)


def test_frame_slot_is_write_once():
    slot = FrameSlot("a.png")
    assert not slot.resolved
    slot.resolve(None)
    assert slot.resolved and slot.image is None
    with pytest.raises(RuntimeError):
        slot.resolve("again")
