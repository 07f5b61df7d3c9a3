# config.py
"""
Configuration settings for the flipbook player.
"""
FPS   = 60

# ── Basic Application Settings ──────────────────────────────────────────────

SHOW_HUD = True

# Display settings
FULLSCREEN = False
WINDOWED_SIZE = (800, 600)
BACKGROUND = (255, 255, 255)

# Fraction of the window an image may fill (leaves a ~8% margin)
FIT_MARGIN = 0.92
HUD_HEIGHT = 64

# True = random pack order, False = sequential loop
RANDOM_ORDER = True

# ── Playback speeds (frames per tick) ──────────────────────────────────────

FWD_SPEED = 0.5     # while pressed
BWD_SPEED = 0.8     # while released

# Start loading the outro once the pressed cursor is this close to the end
OUT_PREFETCH_WINDOW = 15

# Hold states only start a pack after the first press unlocked audio
GATE_ON_AUDIO_UNLOCK = True

# ── Asset loading ──────────────────────────────────────────────────────────

LOADER_WORKERS = 8

# Root directory holding <pack>/{in,inter,out}/ frame folders
ASSETS_PATH = "assets"

# JSON manifest written by pack_builder.py; PACKS below is used when missing
PACK_MANIFEST = "assets/packs.json"
RUN_PACK_BUILDER = False

PACKS = [
    {
        "name": "star",
        "base": "assets/star/",
        "in":    {"dir": "in/",    "prefix": "in_",    "pad": 4, "count": 20},
        "inter": {"dir": "inter/", "prefix": "inter_", "pad": 4, "count": 20},
        "out":   {"dir": "out/",   "prefix": "out_",   "pad": 4, "count": 20},
    },
    {
        "name": "flower",
        "base": "assets/flower/",
        "in":    {"dir": "in/",    "prefix": "in_",    "pad": 4, "count": 20},
        "inter": {"dir": "inter/", "prefix": "inter_", "pad": 4, "count": 20},
        "out":   {"dir": "out/",   "prefix": "out_",   "pad": 4, "count": 20},
    },
    {
        "name": "diamond",
        "base": "assets/diamond/",
        "in":    {"dir": "in/",    "prefix": "in_",    "pad": 4, "count": 20},
        "inter": {"dir": "inter/", "prefix": "inter_", "pad": 4, "count": 20},
        "out":   {"dir": "out/",   "prefix": "out_",   "pad": 4, "count": 20},
    },
]

# ── Audio cues ─────────────────────────────────────────────────────────────

SFX_IN          = "assets/sfx/in.mp3"
SFX_EXPLODE     = "assets/sfx/explode.mp3"
SFX_PRESS_LOOP  = "assets/sfx/press_loop.mp3"

SFX_IN_VOLUME          = 0.6
SFX_EXPLODE_VOLUME     = 0.7
SFX_PRESS_LOOP_VOLUME  = 0.35

# ── Demo pack generator defaults ───────────────────────────────────────────

DEMO_FRAME_SIZE = (512, 512)
DEMO_FRAME_COUNT = 20
