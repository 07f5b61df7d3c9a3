"""
playback.py

Pack-cycling state machine.

    HOLD_IN_INIT ─┐
                  ├─▶ IN ─▶ INTER ─▶ OUT ─▶ HOLD_IN_SWITCH ─▶ IN …

Every transition that needs asynchronously loaded frames is gated on the
asset cache's readiness predicates, never on a timer.  When data is missing
the machine holds on a placeholder frame (or the loading text) instead of
showing a blank or partial segment.

Both hold states wait for the current *and* the next pack to be fully ready,
so once IN starts the current pack never stalls on its own in/inter frames.
OUT may still stall; it shows the last interactive frame meanwhile.

``PlaybackMachine.step()`` is the only entry point; the app calls it once
per rendered frame with the sampled input and draws the returned ``Tick``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, NamedTuple, Optional, Union

import config
from asset_cache import AssetCache
from pack_selector import PackSelector
from segment_runner import Cursor, SegmentRunner


class State(Enum):
    HOLD_IN_INIT   = "HOLD_IN_INIT"
    IN             = "IN"
    INTER          = "INTER"
    OUT            = "OUT"
    HOLD_IN_SWITCH = "HOLD_IN_SWITCH"


HOLD_STATES = (State.HOLD_IN_INIT, State.HOLD_IN_SWITCH)

# audio cue names carried on a Tick
CUE_ENTER   = "enter"
CUE_EXPLODE = "explode"


# ── render commands ────────────────────────────────────────────────────────
class ShowFrame(NamedTuple):
    image: Any


class ShowLoading(NamedTuple):
    loaded: int
    expected: int


RenderCommand = Union[ShowFrame, ShowLoading]


class Hud(NamedTuple):
    pack_name: str
    state_name: str
    frame: int


class TickInput(NamedTuple):
    pressed: bool = False
    unlocked: bool = True       # first gesture has happened


@dataclass
class Tick:
    state: State
    render: RenderCommand
    hud: Hud
    cues: List[str] = field(default_factory=list)
    loop_allowed: bool = False  # press loop may sound this tick


@dataclass
class PlaybackContext:
    cur_index: int
    next_index: int
    cursor: Cursor = field(default_factory=Cursor)


# ── state machine ──────────────────────────────────────────────────────────
class PlaybackMachine:
    def __init__(self,
                 cache: AssetCache,
                 selector: PackSelector,
                 runner: Optional[SegmentRunner] = None,
                 gate_on_unlock: Optional[bool] = None):
        self.cache    = cache
        self.selector = selector
        self.runner   = runner or SegmentRunner()
        self.gate_on_unlock = (config.GATE_ON_AUDIO_UNLOCK
                               if gate_on_unlock is None else gate_on_unlock)

        self.state = State.HOLD_IN_INIT
        self.ctx   = PlaybackContext(cur_index=0,
                                     next_index=selector.pick_next_index(0))

        # A and B load straight away
        cache.ensure_pack_all(self.ctx.cur_index)
        cache.ensure_pack_all(self.ctx.next_index)

    # ── public ------------------------------------------------------------
    @property
    def current_pack(self):
        return self.cache.packs[self.ctx.cur_index]

    def step(self, inp: TickInput) -> Tick:
        self.cache.pump()
        tick = Tick(self.state, self._loading(), self._hud())

        if self.state in HOLD_STATES:
            self._hold(inp, tick)
        elif self.state is State.IN:
            self._intro(tick)
        elif self.state is State.INTER:
            self._interactive(inp, tick)
        elif self.state is State.OUT:
            self._outro(tick)
        else:
            raise AssertionError(f"unhandled state {self.state!r}")

        tick.hud = self._hud()
        return tick

    # ── helpers -----------------------------------------------------------
    def _goto(self, state: State, tick: Tick) -> None:
        self.state = state
        self.ctx.cursor.reset()
        tick.state = state

    def _loading(self) -> ShowLoading:
        return ShowLoading(*self.cache.progress())

    def _hud(self) -> Hud:
        return Hud(self.current_pack.name, self.state.value,
                   self.ctx.cursor.frame)

    def _show(self, image: Any, tick: Tick) -> None:
        tick.render = ShowFrame(image) if image is not None else self._loading()

    # ── per-state handlers ------------------------------------------------
    def _hold(self, inp: TickInput, tick: Tick) -> None:
        ctx = self.ctx
        self._show(self.cache.first_frame(ctx.cur_index, "in"), tick)

        if self.gate_on_unlock and not inp.unlocked:
            return
        if self.cache.is_pack_ready(ctx.cur_index) and \
           self.cache.is_pack_ready(ctx.next_index):
            tick.cues.append(CUE_ENTER)
            self._goto(State.IN, tick)

    def _intro(self, tick: Tick) -> None:
        ctx = self.ctx
        if not self.cache.is_segment_ready(ctx.cur_index, "in"):
            return      # loading text already set

        frames = self.cache.frames(ctx.cur_index, "in")
        adv = self.runner.one_shot(ctx.cursor, len(frames),
                                   lambda: self._goto(State.INTER, tick))
        self._show(frames[adv.frame], tick)

    def _interactive(self, inp: TickInput, tick: Tick) -> None:
        ctx = self.ctx
        frames = self.cache.frames(ctx.cur_index, "inter")
        if frames is None:
            return

        adv = self.runner.interactive(ctx.cursor, len(frames), inp.pressed)
        if self.runner.wants_out_prefetch(ctx.cursor, len(frames), inp.pressed):
            self.cache.ensure_loaded(ctx.cur_index, "out")

        self._show(frames[adv.frame], tick)

        if not adv.at_end:
            tick.loop_allowed = inp.pressed
            return
        # pinned on the last frame until the outro can play
        if self.cache.is_segment_ready(ctx.cur_index, "out"):
            tick.cues.append(CUE_EXPLODE)
            self._goto(State.OUT, tick)

    def _outro(self, tick: Tick) -> None:
        ctx = self.ctx
        if not self.cache.is_segment_ready(ctx.cur_index, "out"):
            inter = self.cache.frames(ctx.cur_index, "inter")
            self._show(inter[len(inter) - 1] if inter else None, tick)
            return

        frames = self.cache.frames(ctx.cur_index, "out")
        adv = self.runner.one_shot(ctx.cursor, len(frames),
                                   lambda: self._switch_pack(tick))
        self._show(frames[adv.frame], tick)

    def _switch_pack(self, tick: Tick) -> None:
        ctx = self.ctx
        ctx.cur_index  = ctx.next_index
        ctx.next_index = self.selector.pick_next_index(ctx.cur_index)
        self.cache.ensure_pack_all(ctx.cur_index)
        self.cache.ensure_pack_all(ctx.next_index)
        self._goto(State.HOLD_IN_SWITCH, tick)
