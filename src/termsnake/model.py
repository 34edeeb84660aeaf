# src/termsnake/model.py
"""
Value types shared by the game core and the frontends.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import NamedTuple, Optional, Tuple

import numpy as np  # type: ignore


class Cell(NamedTuple):
    """A grid position. Equal to the plain ``(x, y)`` tuple."""

    x: int
    y: int

    def shifted(self, heading: "Heading") -> "Cell":
        dx, dy = heading.delta
        return Cell(self.x + dx, self.y + dy)

    def within(self, width: int, height: int) -> bool:
        return 0 <= self.x < width and 0 <= self.y < height


class Heading(enum.Enum):
    """Direction of motion as a unit step (dx, dy); y grows downward."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value

    @property
    def opposite(self) -> "Heading":
        dx, dy = self.value
        return Heading((-dx, -dy))


class Phase(enum.Enum):
    RUNNING = "running"
    WON = "won"
    LOST = "lost"

    @property
    def is_terminal(self) -> bool:
        return self is not Phase.RUNNING


class DeathReason(str, enum.Enum):
    WALL = "wall"
    SELF = "self"


class InputEvent(enum.Enum):
    """Discrete intents produced by an input source."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    QUIT = "quit"

    @property
    def heading(self) -> Optional[Heading]:
        if self is InputEvent.QUIT:
            return None
        return Heading[self.name]


# -----------------------------------------------------------------------------
# Read-only view for render sinks
# -----------------------------------------------------------------------------
EMPTY, BODY, HEAD, FOOD = 0, 1, 2, 3


@dataclass(frozen=True)
class Snapshot:
    """
    Everything a renderer needs to draw one frame.

    snake: cells from head (index 0) to tail
    food:  current food cell
    ticks: number of ticks executed so far
    """
    width: int
    height: int
    snake: Tuple[Cell, ...]
    food: Cell
    score: int
    phase: Phase
    heading: Heading
    desired_length: int
    ticks: int = 0
    death_reason: Optional[DeathReason] = None

    @property
    def head(self) -> Cell:
        return self.snake[0]

    def to_grid(self) -> np.ndarray:
        """
        Rasterise the board into a (height, width) int8 array of
        EMPTY / BODY / HEAD / FOOD codes. Cells outside the board are skipped.
        """
        grid = np.zeros((self.height, self.width), dtype=np.int8)
        if self.food.within(self.width, self.height):
            grid[self.food.y, self.food.x] = FOOD
        for x, y in self.snake[1:]:
            if 0 <= x < self.width and 0 <= y < self.height:
                grid[y, x] = BODY
        if self.head.within(self.width, self.height):
            grid[self.head.y, self.head.x] = HEAD
        return grid
