# src/termsnake/frontends/window.py
"""pygame frontend: the same input/render contracts on a desktop window."""
from __future__ import annotations

from typing import List, Tuple

import pygame  # type: ignore

from ..config import BG, CELL_SIZE, GREEN, LIME, RED, TEXT, Config
from ..game import new_game_state
from ..loop import GameLoop
from ..model import InputEvent, Phase, Snapshot

KEYMAP = {
    pygame.K_UP: InputEvent.UP,
    pygame.K_DOWN: InputEvent.DOWN,
    pygame.K_LEFT: InputEvent.LEFT,
    pygame.K_RIGHT: InputEvent.RIGHT,
    pygame.K_q: InputEvent.QUIT,
    pygame.K_ESCAPE: InputEvent.QUIT,
}


# ---------- Helpers ----------
def draw_cell(screen: pygame.Surface, gx: int, gy: int, color: Tuple[int, int, int]) -> None:
    rect = pygame.Rect(gx * CELL_SIZE, gy * CELL_SIZE, CELL_SIZE, CELL_SIZE)
    pygame.draw.rect(screen, color, rect)


def translate(event) -> List[InputEvent]:
    """Map one pygame event to zero or one InputEvent."""
    if event.type == pygame.QUIT:
        return [InputEvent.QUIT]
    if event.type == pygame.KEYDOWN and event.key in KEYMAP:
        return [KEYMAP[event.key]]
    return []


# ---------- Input ----------
class PygameInput:
    def poll(self, timeout_ms: int) -> List[InputEvent]:
        events: List[InputEvent] = []
        first = pygame.event.wait(timeout_ms)
        if first.type != pygame.NOEVENT:
            events.extend(translate(first))
        for event in pygame.event.get():
            events.extend(translate(event))
        return events


# ---------- Draw ----------
class PygameRenderer:
    def __init__(self, screen: pygame.Surface, font: pygame.font.Font):
        self.screen = screen
        self.font = font

    def render(self, snapshot: Snapshot) -> None:
        self.draw_game(snapshot)
        if snapshot.phase.is_terminal:
            self.draw_game_over(snapshot)
        pygame.display.flip()

    def draw_game(self, snapshot: Snapshot) -> None:
        self.screen.fill(BG)
        draw_cell(self.screen, snapshot.food.x, snapshot.food.y, RED)
        for x, y in snapshot.snake[1:]:
            draw_cell(self.screen, x, y, GREEN)
        if snapshot.head.within(snapshot.width, snapshot.height):
            draw_cell(self.screen, snapshot.head.x, snapshot.head.y, LIME)
        txt = self.font.render(f"Score: {snapshot.score}", True, TEXT)
        self.screen.blit(txt, (8, 6))

    def draw_game_over(self, snapshot: Snapshot) -> None:
        width, height = self.screen.get_size()
        # Dim with translucent overlay
        overlay = pygame.Surface((width, height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 140))  # RGBA
        self.screen.blit(overlay, (0, 0))

        heading = "YOU WIN" if snapshot.phase is Phase.WON else "GAME OVER"
        title = self.font.render(heading, True, (240, 240, 250))
        sub   = self.font.render("Press Q to quit", True, TEXT)
        sco   = self.font.render(f"Score: {snapshot.score}", True, TEXT)

        self.screen.blit(title, title.get_rect(center=(width // 2, height // 2 - 16)))
        self.screen.blit(sub, sub.get_rect(center=(width // 2, height // 2 + 16)))
        self.screen.blit(sco, sco.get_rect(center=(width // 2, height // 2 + 44)))


def play(config: Config) -> Snapshot:
    """Run one session in a pygame window and return the final snapshot."""
    pygame.init()
    try:
        font = pygame.font.SysFont(None, 24)
        screen = pygame.display.set_mode((config.width * CELL_SIZE, config.height * CELL_SIZE))
        pygame.display.set_caption("Snake")
        state = new_game_state(config)
        loop = GameLoop(state, PygameInput(), PygameRenderer(screen, font), config,
                        clock=pygame.time.get_ticks)
        return loop.run()
    finally:
        pygame.quit()
