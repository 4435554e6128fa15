import numpy as np


def create_color_map(glyph_count):
    """
    Build a grayscale ramp with one RGB color per glyph.

    The unit interval is split into glyph_count + 1 steps so the farthest
    glyph is dim but never black and the nearest is bright but never pure
    white.
    """
    steps = (np.arange(glyph_count) + 1) / (glyph_count + 1)
    shades = (np.clip(steps, 0.0, 1.0) * 255).astype(np.uint8)
    return [(int(shade), int(shade), int(shade)) for shade in shades]
