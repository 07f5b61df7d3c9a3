"""
overlays.py

Pygame HUD renderer for the flipbook player.
"""

from __future__ import annotations

import pygame

import config

# ── colours ────────────────────────────────────────────────────────────────
WHITE = (255, 255, 255)
BG    = (0, 0, 0, 120)

pygame.font.init()


# ── helpers ────────────────────────────────────────────────────────────────
def hud_text(pack_name: str, state_name: str, frame: int) -> str:
    return f"{pack_name} • {state_name} • frame ~{frame}"


# ── main entry point ───────────────────────────────────────────────────────
def draw_hud(surface: pygame.Surface, pack_name: str, state_name: str,
             frame: int) -> None:
    """Translucent bottom bar: pack, state and rounded cursor."""
    sw, sh = surface.get_width(), surface.get_height()
    bar_h  = config.HUD_HEIGHT

    bar = pygame.Surface((sw, bar_h), pygame.SRCALPHA)
    bar.fill(BG)

    font = pygame.font.SysFont("monospace", 14)
    txt  = font.render(hud_text(pack_name, state_name, frame), True, WHITE)
    bar.blit(txt, ((sw - txt.get_width()) // 2, (bar_h - txt.get_height()) // 2))
    surface.blit(bar, (0, sh - bar_h))
