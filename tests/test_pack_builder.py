from __future__ import annotations

import json

from manifest import load_packs
from pack_builder import _nat_key, build_manifest


def _touch_frames(root, pack, counts=(3, 3, 3), numbers=None):
    for seg, n in zip(("in", "inter", "out"), counts):
        d = root / pack / seg
        d.mkdir(parents=True)
        for i in numbers or range(1, n + 1):
            (d / f"{seg}_{i:04d}.png").write_bytes(b"")


def test_natural_sort():
    names = ["f_10.png", "f_2.png", "f_1.png"]
    assert sorted(names, key=_nat_key) == ["f_1.png", "f_2.png", "f_10.png"]


def test_build_manifest_infers_segments(tmp_path):
    _touch_frames(tmp_path, "star", counts=(2, 4, 3))
    out = tmp_path / "packs.json"
    data = build_manifest(str(tmp_path), str(out))

    assert [p["name"] for p in data["packs"]] == ["star"]
    star = data["packs"][0]
    assert star["base"].endswith("/star/")
    assert star["in"] == {"dir": "in/", "prefix": "in_", "pad": 4, "count": 2}
    assert star["inter"]["count"] == 4
    assert json.loads(out.read_text())["packs"] == data["packs"]


def test_incomplete_and_gapped_packs_skipped(tmp_path):
    _touch_frames(tmp_path, "good")
    (tmp_path / "broken" / "in").mkdir(parents=True)
    (tmp_path / "broken" / "in" / "in_0001.png").write_bytes(b"")
    _touch_frames(tmp_path, "gappy", numbers=[1, 3])
    (tmp_path / "sfx").mkdir()

    data = build_manifest(str(tmp_path))
    assert [p["name"] for p in data["packs"]] == ["good"]
    assert (tmp_path / "packs.json").is_file()


def test_unpadded_frames(tmp_path):
    for seg in ("in", "inter", "out"):
        d = tmp_path / "moon" / seg
        d.mkdir(parents=True)
        for i in range(1, 12):
            (d / f"f{i}.png").write_bytes(b"")
    data = build_manifest(str(tmp_path))
    assert data["packs"][0]["out"] == {"dir": "out/", "prefix": "f",
                                       "pad": 0, "count": 11}


def test_manifest_feeds_load_packs(tmp_path):
    _touch_frames(tmp_path, "star")
    out = tmp_path / "packs.json"
    build_manifest(str(tmp_path), str(out))
    packs = load_packs(str(out))
    assert packs[0].name == "star"
    assert packs[0].out.count == 3
