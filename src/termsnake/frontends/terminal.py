# src/termsnake/frontends/terminal.py
"""
curses frontend: keyboard input source and text render sink.

Only ``render_lines`` and ``decode_key`` know about glyphs and key codes; the
curses classes just move characters between them and the screen.
"""
from __future__ import annotations

import curses
from typing import List, Optional

from ..config import GLYPH_BODY, GLYPH_EMPTY, GLYPH_FOOD, GLYPH_HEAD, Config
from ..game import new_game_state
from ..loop import GameLoop
from ..model import BODY, EMPTY, FOOD, HEAD, InputEvent, Phase, Snapshot

GLYPHS = {EMPTY: GLYPH_EMPTY, BODY: GLYPH_BODY, HEAD: GLYPH_HEAD, FOOD: GLYPH_FOOD}

KEYMAP = {
    curses.KEY_UP: InputEvent.UP,
    curses.KEY_DOWN: InputEvent.DOWN,
    curses.KEY_LEFT: InputEvent.LEFT,
    curses.KEY_RIGHT: InputEvent.RIGHT,
    ord("w"): InputEvent.UP,
    ord("s"): InputEvent.DOWN,
    ord("a"): InputEvent.LEFT,
    ord("d"): InputEvent.RIGHT,
    ord("q"): InputEvent.QUIT,
    ord("Q"): InputEvent.QUIT,
    27: InputEvent.QUIT,  # Esc
}

HINT = " Move <Left> <Right> <Up> <Down> - Quit <Q> "


def decode_key(key: int) -> Optional[InputEvent]:
    return KEYMAP.get(key)


def _overlay(snapshot: Snapshot) -> List[str]:
    if snapshot.phase is Phase.WON:
        title = "YOU WIN"
    elif snapshot.death_reason is not None:
        title = f"GAME OVER ({snapshot.death_reason.value})"
    else:
        title = "GAME OVER"
    return [title, f"Score: {snapshot.score}", "Press Q to quit"]


def render_lines(snapshot: Snapshot) -> List[str]:
    """
    The framed board as text rows: a thick border titled with the score, the
    playfield, and the key hint along the bottom. Terminal phases get a
    centred message drawn over the board.
    """
    grid = snapshot.to_grid()
    rows = ["".join(GLYPHS[int(code)] for code in row) for row in grid]

    if snapshot.phase.is_terminal:
        messages = _overlay(snapshot)
        top = max((snapshot.height - len(messages)) // 2, 0)
        for i, msg in enumerate(messages):
            y = top + i
            if y >= len(rows):
                break
            msg = msg[: snapshot.width]
            x = (snapshot.width - len(msg)) // 2
            rows[y] = rows[y][:x] + msg + rows[y][x + len(msg):]

    inner = snapshot.width
    title = f" Snake - Score: {snapshot.score} "
    hint = HINT if len(HINT) <= inner else ""
    lines = ["┏" + title[:inner].center(inner, "━") + "┓"]
    lines.extend("┃" + row + "┃" for row in rows)
    lines.append("┗" + hint.center(inner, "━") + "┛")
    return lines


class CursesInput:
    """Non-blocking keyboard source; waits at most ``timeout_ms`` for the first key."""

    def __init__(self, stdscr):
        self.stdscr = stdscr
        self.stdscr.keypad(True)

    def poll(self, timeout_ms: int) -> List[InputEvent]:
        events: List[InputEvent] = []
        self.stdscr.timeout(timeout_ms)
        key = self.stdscr.getch()
        # drain whatever else is already queued without waiting again
        self.stdscr.timeout(0)
        while key != -1:
            event = decode_key(key)
            if event is not None:
                events.append(event)
            key = self.stdscr.getch()
        return events


class CursesRenderer:
    def __init__(self, stdscr):
        self.stdscr = stdscr

    def render(self, snapshot: Snapshot) -> None:
        lines = render_lines(snapshot)
        max_y, max_x = self.stdscr.getmaxyx()
        top = max((max_y - len(lines)) // 2, 0)
        left = max((max_x - len(lines[0])) // 2, 0)
        self.stdscr.erase()
        for i, line in enumerate(lines):
            if top + i >= max_y:
                break
            try:
                self.stdscr.addstr(top + i, left, line[: max(max_x - left, 0)])
            except curses.error:
                # writing into the bottom-right corner raises after the write
                pass
        self.stdscr.refresh()


def play(config: Config) -> Snapshot:
    """Run one session in the terminal and return the final snapshot."""

    def _session(stdscr) -> Snapshot:
        curses.curs_set(0)
        state = new_game_state(config)
        loop = GameLoop(state, CursesInput(stdscr), CursesRenderer(stdscr), config)
        return loop.run()

    return curses.wrapper(_session)
