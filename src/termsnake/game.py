# src/termsnake/game.py
from __future__ import annotations

import logging
from collections import deque
from typing import Deque, Iterable, Optional

from .config import Config
from .errors import InvalidTransition
from .food import FoodPlacer, RandomFoodPlacer
from .model import Cell, DeathReason, Heading, Phase, Snapshot
from .motion import MotionController

logger = logging.getLogger(__name__)


class GameState:
    """
    The whole simulation: board size, snake, heading, food, score and phase.

    Attributes:
        snake: deque of Cell from head (index 0) to tail
        food: the current food cell, never on the snake
        score: food eaten so far
        desired_length: length the snake is trimmed back to after each move
        phase: RUNNING until the snake dies (LOST) or fills the board (WON)
        death_reason: 'wall' or 'self' once LOST
        ticks: number of ticks executed

    Only ``tick()`` and ``set_heading()`` mutate it.
    """

    def __init__(
        self,
        width: int,
        height: int,
        snake: Iterable[Cell],
        food: Cell,
        placer: FoodPlacer,
        heading: Heading = Heading.UP,
        desired_length: Optional[int] = None,
        score: int = 0,
    ):
        self.width = width
        self.height = height
        self.snake: Deque[Cell] = deque(Cell(*c) for c in snake)
        if not self.snake:
            raise ValueError("snake needs at least one cell")
        self.food = Cell(*food)
        self.placer = placer
        self.motion = MotionController(heading)
        self.desired_length = len(self.snake) if desired_length is None else desired_length
        self.score = score
        self.phase = Phase.RUNNING
        self.death_reason: Optional[DeathReason] = None
        self.ticks = 0

    # ---------- Accessors ----------
    @property
    def head(self) -> Cell:
        return self.snake[0]

    @property
    def heading(self) -> Heading:
        return self.motion.heading

    @property
    def win_length(self) -> int:
        return self.width * self.height - 1

    def set_heading(self, requested: Heading) -> None:
        self.motion.set_heading(requested)

    def snapshot(self) -> Snapshot:
        return Snapshot(
            width=self.width,
            height=self.height,
            snake=tuple(self.snake),
            food=self.food,
            score=self.score,
            phase=self.phase,
            heading=self.heading,
            desired_length=self.desired_length,
            ticks=self.ticks,
            death_reason=self.death_reason,
        )

    # ---------- Simulation ----------
    def tick(self) -> Phase:
        """
        Advance exactly one step and return the resulting phase.

        1) collision pre-check on the candidate head (walls, then body; the
           tail only counts if it stays put this tick)
        2) move the head
        3) eat: score, grow, new food, win check
        4) trim the tail back to desired_length

        Raises InvalidTransition once the game is over.
        """
        if self.phase is not Phase.RUNNING:
            raise InvalidTransition(f"tick() on a finished game (phase={self.phase.value})")

        candidate = self.head.shifted(self.motion.heading)
        self.ticks += 1

        # 1) Collision pre-check
        if not candidate.within(self.width, self.height):
            return self._lose(DeathReason.WALL, candidate)

        eats = candidate == self.food
        target_length = self.desired_length + (1 if eats else 0)
        tail_vacates = len(self.snake) >= target_length
        body = list(self.snake)
        if tail_vacates:
            body = body[:-1]
        if candidate in body:
            return self._lose(DeathReason.SELF, candidate)

        # 2) Move
        self.snake.appendleft(candidate)

        # 3) Food
        if eats:
            self.score += 1
            self.desired_length = target_length
            self.food = self.placer.place(self.snake, self.width, self.height)
            logger.debug(
                "food eaten at %s, score=%d, length=%d, next food at %s",
                candidate, self.score, self.desired_length, self.food,
            )
            if self.desired_length >= self.win_length:
                self.phase = Phase.WON
                logger.info("board filled, game won with score %d after %d ticks", self.score, self.ticks)
                return self.phase

        # 4) Trim
        while len(self.snake) > self.desired_length:
            self.snake.pop()

        return self.phase

    def _lose(self, reason: DeathReason, at: Cell) -> Phase:
        self.phase = Phase.LOST
        self.death_reason = reason
        logger.info("snake died (%s) moving into %s, score %d after %d ticks",
                    reason.value, at, self.score, self.ticks)
        return self.phase

    def __repr__(self):
        return (
            f"<GameState {self.width}x{self.height} phase={self.phase.value} "
            f"head={tuple(self.head)} length={len(self.snake)} score={self.score}>"
        )


# ---------- Factory ----------
def new_game_state(config: Optional[Config] = None, placer: Optional[FoodPlacer] = None) -> GameState:
    """
    Fresh session: head on the centre cell heading Up, the rest of the body
    hanging straight below it, and a first food cell from ``placer``. A body
    longer than the column below the head starts short and grows out to
    ``initial_length``.
    """
    config = config or Config()
    if placer is None:
        placer = RandomFoodPlacer.seeded(config.seed)

    hx, hy = config.start
    # Whatever does not fit below the head grows out over the first ticks.
    fits = min(config.initial_length, config.height - hy)
    snake = [Cell(hx, hy + i) for i in range(fits)]
    food = placer.place(snake, config.width, config.height)
    state = GameState(
        width=config.width,
        height=config.height,
        snake=snake,
        food=food,
        placer=placer,
        heading=Heading.UP,
        desired_length=config.initial_length,
    )
    logger.info("new %dx%d game, head at %s, food at %s", config.width, config.height, state.head, food)
    return state
