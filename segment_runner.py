"""
segment_runner.py

Float frame cursor motion for the two playback modes.

one_shot()     +1.0 per tick, fires its completion callback once at the end.
interactive()  forward while pressed, backward while released.

Frames are picked at the half-up rounded cursor.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, NamedTuple, Optional

import config


def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


@dataclass
class Cursor:
    position: float = 0.0
    finished: bool = False      # one-shot run already completed

    def reset(self) -> None:
        self.position = 0.0
        self.finished = False

    @property
    def frame(self) -> int:
        return round_half_up(self.position)


class Advance(NamedTuple):
    frame: int          # slot index to display
    at_end: bool        # rounded cursor reached length - 1


class SegmentRunner:
    def __init__(self,
                 fwd_speed: float | None = None,
                 bwd_speed: float | None = None,
                 prefetch_window: int | None = None):
        self.fwd_speed = config.FWD_SPEED if fwd_speed is None else fwd_speed
        self.bwd_speed = config.BWD_SPEED if bwd_speed is None else bwd_speed
        self.prefetch_window = (config.OUT_PREFETCH_WINDOW
                                if prefetch_window is None else prefetch_window)

    def one_shot(self, cursor: Cursor, length: int,
                 on_done: Optional[Callable[[], None]] = None) -> Advance:
        last = length - 1
        cursor.position = min(cursor.position + 1.0, last)
        frame = cursor.frame
        at_end = frame >= last
        if at_end and not cursor.finished:
            cursor.finished = True
            if on_done:
                on_done()
        return Advance(frame, at_end)

    def interactive(self, cursor: Cursor, length: int, pressed: bool) -> Advance:
        last = length - 1
        if pressed:
            cursor.position = min(cursor.position + self.fwd_speed, last)
        else:
            cursor.position = max(cursor.position - self.bwd_speed, 0.0)
        frame = cursor.frame
        return Advance(frame, frame >= last)

    def wants_out_prefetch(self, cursor: Cursor, length: int, pressed: bool) -> bool:
        """True once a held cursor enters the trailing window of the segment."""
        return pressed and cursor.position >= length - self.prefetch_window
