#!/usr/bin/env python3
"""
app.py – flipbook player main loop

Cycles through themed frame packs (intro → interactive → outro).  Frames
decode on a background pool; the PlaybackMachine decides each tick what to
show.  Input is dispatched by events.py.
"""
from __future__ import annotations

import pygame

import config
from asset_cache   import AssetCache
from events        import EventManager
from image_loader  import ImageLoader
from manifest      import load_packs
from overlays      import draw_hud
from pack_selector import PackSelector
from playback      import PlaybackMachine, ShowFrame, TickInput
from renderer      import render_frame, render_loading
from sfx           import AudioCues


def _display_flags() -> int:
    return pygame.FULLSCREEN if config.FULLSCREEN else pygame.RESIZABLE


# ── main application ───────────────────────────────────────────────────────
class FlipbookApp:
    def __init__(self, packs=None):
        # window ----------------------------------------------------------
        pygame.init()
        self.screen = pygame.display.set_mode(
            (0, 0) if config.FULLSCREEN else config.WINDOWED_SIZE,
            _display_flags(),
        )
        pygame.display.set_caption("flipbook")
        self.clock = pygame.time.Clock()

        # core state ------------------------------------------------------
        self.packs    = packs or load_packs()
        self.loader   = ImageLoader()
        self.cache    = AssetCache(self.packs, self.loader.fetch)
        self.machine  = PlaybackMachine(
            self.cache,
            PackSelector(len(self.packs), config.RANDOM_ORDER),
        )
        self.sfx      = AudioCues()
        self.pressed  = False
        self.show_hud = config.SHOW_HUD

    # ── input -------------------------------------------------------------
    def _apply(self, act: dict) -> bool:
        """Apply one action; False means quit."""
        t = act["type"]
        if t == "quit":
            return False
        if t == "press":
            self.sfx.unlock()
            self.pressed = True
        elif t == "release":
            self.pressed = False
            self.sfx.sync_loop(False)
        elif t == "toggle_hud":
            self.show_hud ^= True
        elif t == "toggle_fullscreen":
            config.FULLSCREEN ^= True
            self.screen = pygame.display.set_mode(
                (0, 0) if config.FULLSCREEN else config.WINDOWED_SIZE,
                _display_flags())
        elif t == "resize" and not config.FULLSCREEN:
            self.screen = pygame.display.set_mode(act["size"], _display_flags())
        return True

    # ── main loop ---------------------------------------------------------
    def run(self):
        running = True
        while running:
            for e in pygame.event.get():
                EventManager.handle(e)

            while (act := EventManager.poll()):
                if not self._apply(act):
                    running = False

            tick = self.machine.step(TickInput(self.pressed, self.sfx.unlocked))

            # audio
            for cue in tick.cues:
                self.sfx.play(cue)
            self.sfx.sync_loop(tick.loop_allowed)

            # draw
            if isinstance(tick.render, ShowFrame):
                render_frame(self.screen, tick.render.image)
            else:
                render_loading(self.screen, *tick.render)

            if self.show_hud:
                draw_hud(self.screen, *tick.hud)

            pygame.display.flip()
            self.clock.tick(config.FPS)

        self.sfx.stop_all()
        self.loader.close()
        pygame.quit()


if __name__ == "__main__":
    FlipbookApp().run()
