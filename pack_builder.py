"""
pack_builder.py  – one-shot pack manifest creator

Scans <root>/<pack>/{in,inter,out}/ for numbered PNG frames and writes the
manifest that manifest.load_packs() reads instead of config.PACKS.
"""
from __future__ import annotations
import os, re, json, time, typing as _t, pathlib

from manifest import SEGMENTS

_FRAME_RE = re.compile(r"^(.*?)(\d+)\.png$", re.IGNORECASE)

# ---------- natural sort --------------------------------------------------
def _nat_key(s: str) -> list[_t.Union[int, str]]:
    return [int(t) if t.isdigit() else t.lower()
            for t in re.split(r"(\d+)", s)]

# ---------- probe ---------------------------------------------------------
def _probe_segment(seg_dir: str) -> dict | None:
    """
    Return {"prefix", "pad", "count"} for the numbered frames in *seg_dir*,
    or None if the folder has no usable 1..N sequence.
    """
    if not os.path.isdir(seg_dir):
        return None
    names = sorted((f for f in os.listdir(seg_dir) if _FRAME_RE.match(f)),
                   key=_nat_key)
    if not names:
        return None

    m = _FRAME_RE.match(names[0])
    prefix, digits = m.group(1), m.group(2)
    pad = len(digits) if digits.startswith("0") else 0

    numbers = sorted(int(mm.group(2)) for f in names
                     if (mm := _FRAME_RE.match(f)) and mm.group(1) == prefix)
    if numbers != list(range(1, len(numbers) + 1)):
        print(f"  ! gap in frame numbering: {seg_dir}")
        return None
    return {"prefix": prefix, "pad": pad, "count": len(numbers)}

# ---------- builder -------------------------------------------------------
def build_manifest(assets_path: str, manifest_path: str | None = None) -> dict:
    if manifest_path is None:
        manifest_path = os.path.join(assets_path, "packs.json")

    print("[pack_builder] scanning pack folders …")
    packs: list[dict] = []

    for name in sorted(os.listdir(assets_path), key=_nat_key):
        pack_dir = os.path.join(assets_path, name)
        if not os.path.isdir(pack_dir):
            continue

        base = pack_dir.replace(os.sep, "/") + "/"
        rec: dict = {"name": name, "base": base}
        for seg in SEGMENTS:
            probed = _probe_segment(os.path.join(pack_dir, seg))
            if probed is None:
                break
            rec[seg] = {"dir": f"{seg}/", **probed}
        else:
            packs.append(rec)
            continue
        print(f"  ! skipping incomplete pack: {name}")

    data = {"generated": time.time(), "packs": packs}
    pathlib.Path(manifest_path).write_text(json.dumps(data, indent=2))
    print(f"[pack_builder] {len(packs)} packs written → {manifest_path}")
    return data


# -------------------------------------------------------------------------
if __name__ == "__main__":
    import argparse
    ap = argparse.ArgumentParser(description="Rebuild pack manifest")
    ap.add_argument("root", nargs="?", default="assets",
                    help="root assets folder (default: ./assets)")
    ap.add_argument("-o", "--output", default=None,
                    help="manifest path (default: <root>/packs.json)")
    args = ap.parse_args()

    build_manifest(args.root, args.output)
