from termrain.constants import CLEAR_SCREEN, ENTER_ALT_SCREEN, HIDE_CURSOR
from termrain.terminal import move, styled


class RainRenderer:
    """
    Handles the drawing logic using ANSI escape sequences.
    Every frame is a full redraw: clear, draw the living drops, park the cursor.
    """

    def __init__(self, out, glyphs, color_map):
        self.out = out
        self.glyphs = glyphs
        self.color_map = color_map

    def begin(self):
        """Switch to the alternate screen and hide the cursor."""
        self.out.write(ENTER_ALT_SCREEN + HIDE_CURSOR)
        self.out.flush()

    def clear(self):
        self.out.write(CLEAR_SCREEN)
        self.out.flush()

    def render(self, field):
        """Draw one frame of the given particle field."""
        # 1. Wipe screen and scrollback
        self.clear()

        # 2. Draw living drops, colored by distance
        frame = []
        for particle in field.alive_particles():
            column, row = particle.cell()
            index = particle.glyph_index
            frame.append(move(column + 1, row + 1))
            frame.append(styled(self.glyphs[index], self.color_map[index]))

        # 3. Park the cursor in the bottom right corner
        frame.append(move(field.width, field.height))

        self.out.write("".join(frame))
        self.out.flush()
