#!/usr/bin/env python3
"""
Terminal Rain
=============

Ambient rain for the terminal: falling glyphs drawn in shades of grey while a
soft rain clip loops in the background.

Features:
- Glyph-dependent fall speed and brightness (far drops are slow and dim).
- Drops blink in and out at random, respawning wherever they reappear.
- Rebuilds the rain whenever the terminal is resized.
- Ctrl-C stops cleanly and restores the terminal.

Usage:
    python -m termrain
    termrain
"""

import logging
import sys

from termrain.app import RainApp
from termrain.audio_loop import AudioLoopError
from termrain.constants import LOG_FORMAT, LOG_LEVEL
from termrain.run_control import RunController
from termrain.terminal import TerminalError

logger = logging.getLogger(__name__)


def main():
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

    controller = RunController()
    controller.install_signal_handlers()

    app = RainApp(controller=controller)
    try:
        app.run()
    except (AudioLoopError, TerminalError, OSError) as e:
        logger.error(f"[!] {e}")
        sys.exit(f"[!] {e}")

    logger.debug(f"[+] Rain stopped after {app.frames} frames")
    return 0


if __name__ == "__main__":
    sys.exit(main())
