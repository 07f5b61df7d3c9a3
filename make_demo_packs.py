#!/usr/bin/env python3
"""
make_demo_packs.py

Generates placeholder frame packs so the player runs without real art:
  • one pack per shape (star, flower, diamond)
  • in    – shape grows out of the blank background
  • inter – shape spins and darkens while the user holds
  • out   – shape bursts outward and fades back to blank
Frames are drawn with numpy and written as PNG through pygame, using the
same folder/prefix/pad layout as config.PACKS.
"""

import os
import sys

import numpy as np
import pygame

import config

SHAPES = {
    "star":    (255, 190, 30),
    "flower":  (230, 80, 150),
    "diamond": (60, 160, 230),
}


def shape_mask(kind, w, h, size, spin=0.0):
    """Boolean (w, h) mask of *kind* centred in the frame, radius *size* px."""
    x = np.arange(w)[:, None] - w / 2
    y = np.arange(h)[None, :] - h / 2
    r = np.hypot(x, y)
    th = np.arctan2(y, x) + spin

    if kind == "star":
        edge = size * (0.6 + 0.4 * np.cos(5 * th))
    elif kind == "flower":
        edge = size * (0.7 + 0.3 * np.abs(np.cos(3 * th)))
    elif kind == "diamond":
        rx = x * np.cos(spin) - y * np.sin(spin)
        ry = x * np.sin(spin) + y * np.cos(spin)
        return np.abs(rx) + np.abs(ry) <= size
    else:
        edge = np.full_like(r, size)
    return r <= edge


def render(mask, colour, fade=0.0):
    """Colour the mask over a white background; *fade* 1.0 = all white."""
    w, h = mask.shape
    img = np.full((w, h, 3), config.BACKGROUND, dtype=np.float32)
    c = np.array(colour, dtype=np.float32)
    c = c + (np.array(config.BACKGROUND, dtype=np.float32) - c) * fade
    img[mask] = c
    return np.clip(img, 0, 255).astype(np.uint8)


def segment_frames(kind, seg, count, w, h):
    colour = SHAPES.get(kind, (120, 120, 120))
    full = min(w, h) * 0.4
    for i in range(count):
        t = i / max(1, count - 1)
        if seg == "in":
            yield render(shape_mask(kind, w, h, full * t), colour)
        elif seg == "inter":
            dark = tuple(int(v * (1.0 - 0.4 * t)) for v in colour)
            yield render(shape_mask(kind, w, h, full, spin=t * np.pi), dark)
        else:
            yield render(shape_mask(kind, w, h, full * (1 + 1.5 * t)), colour, fade=t)


def write_pack(root, kind, count, size):
    w, h = size
    for seg in ("in", "inter", "out"):
        seg_dir = os.path.join(root, kind, seg)
        os.makedirs(seg_dir, exist_ok=True)
        for i, arr in enumerate(segment_frames(kind, seg, count, w, h), 1):
            surf = pygame.surfarray.make_surface(arr)
            pygame.image.save(surf, os.path.join(seg_dir, f"{seg}_{i:04d}.png"))
    print(f"  {kind}: {3 * count} frames")


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    root = argv[0] if argv else config.ASSETS_PATH
    print("=== Demo pack generator ===\n")
    for kind in SHAPES:
        write_pack(root, kind, config.DEMO_FRAME_COUNT, config.DEMO_FRAME_SIZE)
    print(f"\n✔️  Done! Packs written under {root}")


if __name__ == "__main__":
    main()
