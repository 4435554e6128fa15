import logging
import shutil
import sys

from termrain.constants import (
    CSI,
    LEAVE_ALT_SCREEN,
    RESET_STYLE,
    SHOW_CURSOR,
)

logger = logging.getLogger(__name__)


class TerminalError(RuntimeError):
    """Raised when the terminal cannot host the animation."""


def move(x, y):
    """Cursor move to 1-based column x and row y."""
    return f"{CSI}{y};{x}H"


def rgb(r, g, b):
    # 38;2 selects a truecolor foreground
    return f"{CSI}38;2;{r};{g};{b}m"


def styled(char, color):
    return f"{rgb(*color)}{char}{RESET_STYLE}"


def query_terminal_size():
    """Return (columns, rows) of the controlling terminal."""
    columns, rows = shutil.get_terminal_size()
    if columns < 1 or rows < 1:
        raise TerminalError(f"Unusable terminal size {columns}x{rows}")
    return columns, rows


class TerminalGuard:
    """
    Restores the terminal to its normal state when the block exits.

    The restore runs on every exit path, errors included, and is harmless
    if nothing changed the terminal in the first place.
    """

    def __init__(self, out=None):
        self.out = out if out is not None else sys.stdout

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.restore()
        return False

    def restore(self):
        logger.debug("[+] Restoring terminal state")
        self.out.write(RESET_STYLE + SHOW_CURSOR + LEAVE_ALT_SCREEN)
        self.out.flush()
