# src/termsnake/loop.py
from __future__ import annotations

import logging
import time
from typing import Callable, Iterable, Optional, Protocol

from .config import Config
from .game import GameState
from .model import InputEvent, Snapshot

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Collaborator contracts
# -----------------------------------------------------------------------------
class InputSource(Protocol):
    def poll(self, timeout_ms: int) -> Iterable[InputEvent]:
        """Events that arrived within ``timeout_ms``; empty if none."""
        ...


class RenderSink(Protocol):
    def render(self, snapshot: Snapshot) -> None:
        ...


def monotonic_ms() -> float:
    return time.monotonic() * 1000.0


# -----------------------------------------------------------------------------
# Loop
# -----------------------------------------------------------------------------
class GameLoop:
    """
    Single-threaded driver: poll input, maybe tick, render. Repeat.

    Ticks are gated on accumulated wall-clock time, not on how often the loop
    spins, so the snake moves at a constant speed whatever the frame rate.
    Direction events go straight to the motion controller; when several arrive
    between two ticks, the last accepted one wins.
    """

    def __init__(
        self,
        state: GameState,
        source: InputSource,
        sink: RenderSink,
        config: Optional[Config] = None,
        clock: Callable[[], float] = monotonic_ms,
    ):
        config = config or Config()
        self.state = state
        self.source = source
        self.sink = sink
        self.tick_interval_ms = config.tick_interval_ms
        self.poll_timeout_ms = config.poll_timeout_ms
        self.clock = clock
        self.accumulated_ms = 0.0
        self.quit_requested = False
        self._last_ms: Optional[float] = None

    def handle_events(self, events: Iterable[InputEvent]) -> None:
        for event in events:
            if event is InputEvent.QUIT:
                self.quit_requested = True
                continue
            heading = event.heading
            if heading is not None and not self.state.phase.is_terminal:
                self.state.set_heading(heading)

    def advance(self, elapsed_ms: float) -> bool:
        """
        Add ``elapsed_ms`` to the accumulator and tick once if a full interval
        has built up. Returns True if a tick ran.

        At most one tick per call; after a stall the leftover is clamped below
        one interval so there is no burst of catch-up moves.
        """
        if self.state.phase.is_terminal:
            self.accumulated_ms = 0.0
            return False
        self.accumulated_ms += max(elapsed_ms, 0.0)
        if self.accumulated_ms < self.tick_interval_ms:
            return False
        self.accumulated_ms = min(self.accumulated_ms - self.tick_interval_ms, self.tick_interval_ms - 1)
        self.state.tick()
        return True

    def step(self) -> Snapshot:
        """One iteration: poll input, apply it, maybe tick, render."""
        # 1) input
        self.handle_events(self.source.poll(self.poll_timeout_ms))

        # 2) update
        now = self.clock()
        if self._last_ms is None:
            self._last_ms = now
        elapsed, self._last_ms = now - self._last_ms, now
        if not self.quit_requested:
            self.advance(elapsed)

        # 3) render
        snapshot = self.state.snapshot()
        self.sink.render(snapshot)
        return snapshot

    def run(self, stop_on_game_over: bool = False) -> Snapshot:
        """
        Loop until the input source asks to quit. Once the game is won or lost
        the loop keeps rendering (so the sink can show its end screen) unless
        ``stop_on_game_over`` is set. Returns the last snapshot.
        """
        logger.info("loop started, tick every %d ms", self.tick_interval_ms)
        snapshot = self.state.snapshot()
        while not self.quit_requested:
            snapshot = self.step()
            if stop_on_game_over and snapshot.phase.is_terminal:
                break
        logger.info("loop finished: phase=%s score=%d ticks=%d",
                    snapshot.phase.value, snapshot.score, snapshot.ticks)
        return snapshot
