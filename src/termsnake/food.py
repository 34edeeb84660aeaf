# src/termsnake/food.py
from __future__ import annotations

import logging
import random
from typing import Iterable, Optional, Protocol

import numpy as np  # type: ignore

from .errors import NoFreeCellError
from .model import Cell

logger = logging.getLogger(__name__)

# Blind draws tried before enumerating the free cells.
MAX_BLIND_DRAWS = 16


class FoodPlacer(Protocol):
    def place(self, snake: Iterable[Cell], width: int, height: int) -> Cell:
        ...


def free_cells(snake: Iterable[Cell], width: int, height: int) -> np.ndarray:
    """Flat indices (y * width + x) of every cell the snake does not cover."""
    occupied = np.zeros((height, width), dtype=bool)
    for x, y in snake:
        if 0 <= x < width and 0 <= y < height:
            occupied[y, x] = True
    return np.flatnonzero(~occupied)


class RandomFoodPlacer:
    """
    Picks a uniformly random cell not covered by the snake.

    A few blind draws over the whole board are tried first, which almost always
    succeed while the board is sparse. If they all hit the snake, the free cells
    are enumerated and one is drawn directly, so placement terminates however
    full the board gets. Both paths are uniform over the free cells.
    """

    def __init__(self, rng: Optional[random.Random] = None, max_blind_draws: int = MAX_BLIND_DRAWS):
        self.rng = rng if rng is not None else random.Random()
        self.max_blind_draws = max_blind_draws

    @classmethod
    def seeded(cls, seed: Optional[int]) -> "RandomFoodPlacer":
        return cls(random.Random(seed))

    def place(self, snake: Iterable[Cell], width: int, height: int) -> Cell:
        body = set(snake)
        if len(body) >= width * height:
            raise NoFreeCellError(f"no free cell on a {width}x{height} board")

        for _ in range(self.max_blind_draws):
            cell = Cell(self.rng.randrange(width), self.rng.randrange(height))
            if cell not in body:
                return cell

        free = free_cells(body, width, height)
        if free.size == 0:
            raise NoFreeCellError(f"no free cell on a {width}x{height} board")
        logger.debug("blind draws exhausted, choosing among %d free cells", free.size)
        y, x = divmod(int(free[self.rng.randrange(free.size)]), width)
        return Cell(x, y)
