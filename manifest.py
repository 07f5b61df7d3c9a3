"""
manifest.py

Static pack descriptors for the flipbook player.

A pack is three frame segments (``in``, ``inter``, ``out``).  Each segment
names a directory, a filename prefix, a zero-padding width and a frame count;
frame *i* (1-based) lives at ``base + dir + prefix + zfill(i, pad) + ".png"``.

Packs come either from the literal ``config.PACKS`` list or from the JSON
cache written by ``pack_builder.py``.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from typing import Iterable, List, Optional

import config

SEGMENTS = ("in", "inter", "out")

_SEGMENT_KEYS = ("dir", "prefix", "pad", "count")


class ManifestError(ValueError):
    """Raised for a malformed pack manifest."""


# ── Data structures ─────────────────────────────────────────────────────────
@dataclass(frozen=True)
class SegmentSpec:
    dir: str
    prefix: str
    pad: int
    count: int


@dataclass(frozen=True)
class Pack:
    name: str
    base: str
    in_: SegmentSpec
    inter: SegmentSpec
    out: SegmentSpec

    def segment(self, name: str) -> SegmentSpec:
        if name == "in":
            return self.in_
        if name == "inter":
            return self.inter
        if name == "out":
            return self.out
        raise KeyError(name)

    def to_dict(self) -> dict:
        rec = {"name": self.name, "base": self.base}
        for seg in SEGMENTS:
            s = self.segment(seg)
            rec[seg] = {"dir": s.dir, "prefix": s.prefix,
                        "pad": s.pad, "count": s.count}
        return rec


def frame_path(pack: Pack, segment_name: str, index: int) -> str:
    """Path of frame *index* (1-based) of one segment."""
    seg = pack.segment(segment_name)
    return f"{pack.base}{seg.dir}{seg.prefix}{str(index).zfill(seg.pad)}.png"


# ── Parsing ─────────────────────────────────────────────────────────────────
def _segment_from_dict(pack_name: str, seg_name: str, d) -> SegmentSpec:
    if not isinstance(d, dict):
        raise ManifestError(f"pack {pack_name!r}: segment {seg_name!r} missing")
    missing = [k for k in _SEGMENT_KEYS if k not in d]
    if missing:
        raise ManifestError(
            f"pack {pack_name!r}: segment {seg_name!r} lacks {', '.join(missing)}"
        )
    pad, count = int(d["pad"]), int(d["count"])
    if count <= 0:
        raise ManifestError(f"pack {pack_name!r}: {seg_name!r} has no frames")
    if pad < 0:
        raise ManifestError(f"pack {pack_name!r}: {seg_name!r} pad < 0")
    return SegmentSpec(dir=str(d["dir"]), prefix=str(d["prefix"]),
                       pad=pad, count=count)


def pack_from_dict(d: dict) -> Pack:
    name = d.get("name")
    if not name:
        raise ManifestError("pack without a name")
    if "base" not in d:
        raise ManifestError(f"pack {name!r} has no base path")
    segs = [_segment_from_dict(name, s, d.get(s)) for s in SEGMENTS]
    return Pack(name=str(name), base=str(d["base"]),
                in_=segs[0], inter=segs[1], out=segs[2])


def packs_from_config(records: Iterable[dict]) -> List[Pack]:
    packs = [pack_from_dict(r) for r in records]
    if not packs:
        raise ManifestError("manifest defines no packs")
    return packs


def load_packs(manifest_path: Optional[str] = None) -> List[Pack]:
    """
    Packs from the JSON manifest if it exists, else from ``config.PACKS``.
    """
    path = manifest_path if manifest_path is not None else config.PACK_MANIFEST
    if path and os.path.isfile(path):
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ManifestError(f"{path}: expected an object with a \"packs\" list")
        print(f"[manifest] using {path}")
        return packs_from_config(data.get("packs", []))
    return packs_from_config(config.PACKS)
