# src/termsnake/config.py
from dataclasses import dataclass
from typing import Optional

from .errors import ConfigError

# ----- Playfield (a 60x25 bordered panel leaves 58x23 cells) -----
GRID_W, GRID_H = 58, 23

# ----- Timing -----
TICK_INTERVAL_MS = 150
POLL_TIMEOUT_MS = 50

# ----- Window frontend -----
CELL_SIZE = 20
BG    = (20, 20, 24)
GREEN = (80, 200, 80)
LIME  = (120, 240, 120)
RED   = (200, 70, 70)
TEXT  = (220, 220, 230)

# ----- Terminal frontend glyphs -----
GLYPH_HEAD = "●"
GLYPH_BODY = "○"
GLYPH_FOOD = "■"
GLYPH_EMPTY = " "


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


# ----- Tunables -----
@dataclass(frozen=True)
class Config:
    width: int = GRID_W
    height: int = GRID_H
    tick_interval_ms: int = TICK_INTERVAL_MS
    initial_length: int = 3
    poll_timeout_ms: int = POLL_TIMEOUT_MS
    seed: Optional[int] = None

    def __post_init__(self):
        for name in ("width", "height", "tick_interval_ms", "poll_timeout_ms"):
            value = getattr(self, name)
            if not _is_int(value) or value <= 0:
                raise ConfigError(f"{name} must be a positive integer, got {value!r}")
        if not _is_int(self.initial_length) or self.initial_length < 1:
            raise ConfigError(f"initial_length must be >= 1, got {self.initial_length!r}")

        # One free cell is needed for the first food, and a body that already
        # meets the win threshold would start the game finished.
        if self.initial_length >= self.cells - 1:
            raise ConfigError(
                f"a {self.width}x{self.height} grid is too small for "
                f"initial_length {self.initial_length}"
            )

    @property
    def cells(self) -> int:
        return self.width * self.height

    @property
    def start(self):
        """Cell the head starts on."""
        return (self.width // 2, self.height // 2)

    @property
    def win_length(self) -> int:
        """Desired length at which the board counts as filled."""
        return self.cells - 1
