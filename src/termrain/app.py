import logging
import sys
import time

import numpy as np

from termrain.audio_loop import AudioLoop
from termrain.color_map import create_color_map
from termrain.config import RainConfig
from termrain.particle import ParticleField
from termrain.renderer import RainRenderer
from termrain.run_control import RunController
from termrain.terminal import TerminalGuard, query_terminal_size

logger = logging.getLogger(__name__)


class RainApp:
    """
    Wires the particle field, renderer and audio loop together.

    Collaborators are injected so the whole run can be driven with a fake
    terminal size, an in-memory output and no audio device.
    """

    def __init__(
        self,
        config=None,
        controller=None,
        out=None,
        rng=None,
        size_query=query_terminal_size,
        audio=None,
    ):
        self.config = (config or RainConfig()).validate()
        self.controller = controller or RunController()
        self.out = out if out is not None else sys.stdout
        self.rng = rng if rng is not None else np.random.default_rng()
        self.size_query = size_query
        self.audio = audio if audio is not None else AudioLoop(self.config, self.controller)

        self.color_map = create_color_map(self.config.glyph_count)
        self.renderer = RainRenderer(self.out, self.config.glyphs, self.color_map)
        self.field = None
        self.frames = 0

    def run(self):
        """Play audio and animate until the controller stops."""
        with TerminalGuard(self.out):
            self.audio.start()
            try:
                self.render_loop()
            finally:
                self.controller.stop()
                self.audio.stop()
                self.audio.join(self.config.audio_poll_interval)

    def render_loop(self):
        width, height = self.size_query()
        self.field = ParticleField.create(self.config, width, height, self.rng)
        self.renderer.begin()

        while self.controller.is_running():
            # Rebuild from scratch on resize
            width, height = self.size_query()
            if not self.field.matches(width, height):
                logger.debug(f"[i] Terminal resized to {width}x{height}")
                self.field = ParticleField.create(self.config, width, height, self.rng)

            self.field.tick()
            self.renderer.render(self.field)
            self.frames += 1
            time.sleep(self.config.tick_interval)
