from dataclasses import dataclass
from typing import Optional, Tuple

from termrain.constants import (
    ALIVE_PROBABILITY,
    AUDIO_ASSET,
    AUDIO_BLOCKSIZE,
    AUDIO_POLL_INTERVAL,
    DENSITY,
    GLYPHS,
    SPAWN_PROBABILITY,
    TICK_INTERVAL,
)


@dataclass(frozen=True)
class RainConfig:
    """
    Tunable settings for one run of the visualiser.

    glyphs:              rain characters, ordered far/slow -> near/fast
    density:             particles per terminal cell
    particle_count:      fixed particle count, overrides density when set
    spawn_probability:   chance a particle starts alive
    alive_probability:   chance a particle is alive after any tick
    tick_interval:       seconds slept between frames
    audio_asset:         packaged clip name under termrain/assets
    audio_poll_interval: seconds between stop flag checks in the audio thread
    audio_blocksize:     frames per audio callback
    """

    glyphs: Tuple[str, ...] = GLYPHS
    density: float = DENSITY
    particle_count: Optional[int] = None
    spawn_probability: float = SPAWN_PROBABILITY
    alive_probability: float = ALIVE_PROBABILITY
    tick_interval: float = TICK_INTERVAL
    audio_asset: str = AUDIO_ASSET
    audio_poll_interval: float = AUDIO_POLL_INTERVAL
    audio_blocksize: int = AUDIO_BLOCKSIZE

    @property
    def glyph_count(self):
        return len(self.glyphs)

    def count_for(self, width, height):
        """Number of particles for a grid of the given size."""
        if self.particle_count is not None:
            return self.particle_count
        return int(width * height * self.density)

    def validate(self):
        """Raise ValueError if any setting is out of range."""
        if not self.glyphs:
            raise ValueError("glyph ramp must not be empty")
        if self.density < 0:
            raise ValueError(f"density must be >= 0, got {self.density}")
        if self.particle_count is not None and self.particle_count < 0:
            raise ValueError(f"particle_count must be >= 0, got {self.particle_count}")
        for name in ("spawn_probability", "alive_probability"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be within [0, 1], got {value}")
        for name in ("tick_interval", "audio_poll_interval"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be >= 0, got {value}")
        if self.audio_blocksize < 0:
            raise ValueError(f"audio_blocksize must be >= 0, got {self.audio_blocksize}")
        return self
