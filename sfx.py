"""
sfx.py – audio cues for the flipbook player (pygame.mixer)

enter    one-shot when a pack starts its intro (not restarted while playing)
explode  one-shot when the interactive segment hands over to the outro
loop     looped only while INTER is pressed

Nothing plays until ``unlock()`` has been called from the first press.
A missing mixer or unreadable file leaves that cue silent.
"""
from __future__ import annotations

from typing import Optional

import pygame

import config


def _load(path: str, volume: float) -> Optional[pygame.mixer.Sound]:
    try:
        snd = pygame.mixer.Sound(path)
    except (pygame.error, FileNotFoundError) as exc:
        print(f"[sfx] {path} unavailable: {exc}")
        return None
    snd.set_volume(volume)
    print(f"[sfx] loaded {path} ({snd.get_length():.2f}s)")
    return snd


class AudioCues:
    def __init__(self):
        self.unlocked = False
        self._enter = self._explode = self._loop = None
        self._loop_chan: Optional[pygame.mixer.Channel] = None

        if not pygame.mixer.get_init():
            try:
                pygame.mixer.init()
            except pygame.error as exc:
                print(f"[sfx] mixer unavailable, running silent: {exc}")
                return

        self._enter   = _load(config.SFX_IN, config.SFX_IN_VOLUME)
        self._explode = _load(config.SFX_EXPLODE, config.SFX_EXPLODE_VOLUME)
        self._loop    = _load(config.SFX_PRESS_LOOP, config.SFX_PRESS_LOOP_VOLUME)

    def unlock(self) -> None:
        if not self.unlocked:
            self.unlocked = True
            print("[sfx] audio unlocked")

    # ── cues ---------------------------------------------------------------
    def play(self, cue: str) -> None:
        if cue == "enter":
            self.play_enter()
        elif cue == "explode":
            self.play_explode()

    def play_enter(self) -> None:
        if not (self.unlocked and self._enter):
            return
        if self._enter.get_num_channels():
            return      # still sounding
        self._enter.play()

    def play_explode(self) -> None:
        self.sync_loop(False)
        if not (self.unlocked and self._explode):
            return
        self._explode.stop()
        self._explode.play()

    def sync_loop(self, active: bool) -> None:
        """Start or stop the press loop to match *active*."""
        playing = bool(self._loop_chan and self._loop_chan.get_busy())
        if active and not playing and self.unlocked and self._loop:
            self._loop_chan = self._loop.play(loops=-1)
        elif not active and playing:
            self._loop.stop()
            self._loop_chan = None

    def stop_all(self) -> None:
        if pygame.mixer.get_init():
            pygame.mixer.stop()
