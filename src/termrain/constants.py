import logging

# --- Configuration Constants ---
# Glyph ramp, has to be sorted far away/slow -> close up/fast
GLYPHS = ("'", "!", "|")
DENSITY = 0.05  # Particles per terminal cell
SPAWN_PROBABILITY = 0.05  # Chance a particle starts alive
ALIVE_PROBABILITY = 0.95  # Chance a particle is alive on any tick
TICK_INTERVAL = 0.05  # seconds between frames

# Audio settings
AUDIO_ASSET = "light-rain.flac"
AUDIO_POLL_INTERVAL = 1.0  # seconds between stop flag checks
AUDIO_BLOCKSIZE = 1024

# Logging
LOG_LEVEL = logging.WARNING  # Progress messages are logged at debug
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

# ANSI escape sequences
CSI = "\x1b["
CLEAR_SCREEN = CSI + "3J" + CSI + "2J"  # Scrollback, then visible screen
HIDE_CURSOR = CSI + "?25l"
SHOW_CURSOR = CSI + "?25h"
ENTER_ALT_SCREEN = CSI + "?1049h"
LEAVE_ALT_SCREEN = CSI + "?1049l"
RESET_STYLE = CSI + "0m"
