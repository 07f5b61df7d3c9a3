#!/usr/bin/env python3
"""
events.py  – central hub

• Translates raw Pygame events to high-level action dicts.
• Exposes a thread-safe queue so *any* external source can inject
  the same actions (GPIO buttons, test harnesses, etc.).

Press/release is edge-triggered here; the app folds the edges into a single
"is pressed" flag that the state machine samples once per tick.
"""

from __future__ import annotations
import queue
from pygame.locals import *

Action = dict      # alias for readability


class EventManager:
    _fifo: "queue.Queue[Action]" = queue.Queue()      # global, thread-safe

    # ── SDL path ───────────────────────────────────────────────────────
    @classmethod
    def handle(cls, event) -> None:
        """Translate one Pygame event → action and enqueue it."""
        act = cls._translate_pygame(event)
        if act:
            cls._fifo.put(act)

    # ── external / programmatic path ───────────────────────────────────
    @classmethod
    def post(cls, action: Action) -> None:
        """
        Any thread may call this to inject an already-formed action dict, e.g.:
            EventManager.post({"type":"press"})
        """
        cls._fifo.put(action)

    # ── main-loop consumer ─────────────────────────────────────────────
    @classmethod
    def poll(cls) -> Action | None:
        """Return next queued action or None (non-blocking)."""
        try:
            return cls._fifo.get_nowait()
        except queue.Empty:
            return None

    @classmethod
    def clear(cls) -> None:
        while cls.poll():
            pass

    # ── internal translator ───────────────────────────────────────────
    @staticmethod
    def _translate_pygame(event) -> Action | None:
        if event.type == QUIT:
            return {"type": "quit"}

        # SDL mirrors touches as mouse events; keep only the finger ones
        if event.type in (MOUSEBUTTONDOWN, MOUSEBUTTONUP):
            if getattr(event, "touch", False):
                return None
            if event.type == MOUSEBUTTONDOWN:
                return {"type": "press"}
            return {"type": "release"}
        if event.type == FINGERDOWN:
            return {"type": "press"}
        if event.type == FINGERUP:
            return {"type": "release"}

        if event.type == VIDEORESIZE:
            return {"type": "resize", "size": (event.w, event.h)}
        if event.type == WINDOWSIZECHANGED:
            return {"type": "resize", "size": (event.x, event.y)}

        if event.type == KEYDOWN:
            if event.key in (K_ESCAPE, K_q):
                return {"type": "quit"}
            if event.key == K_SPACE:
                return {"type": "press"}
            if event.key == K_h:
                return {"type": "toggle_hud"}
            if event.key == K_f:
                return {"type": "toggle_fullscreen"}
        if event.type == KEYUP and event.key == K_SPACE:
            return {"type": "release"}

        return None
