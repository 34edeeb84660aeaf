"""Shared fixtures: deterministic placers and a scripted loop harness."""

import random

import pytest

from termsnake.food import RandomFoodPlacer
from termsnake.model import Cell


class ScriptedPlacer:
    """Hands out food cells from a list; records every call."""

    def __init__(self, cells):
        self.cells = [Cell(*c) for c in cells]
        self.calls = []

    def place(self, snake, width, height):
        snake = list(snake)
        self.calls.append(snake)
        for i, cell in enumerate(self.cells):
            if cell not in snake:
                return self.cells.pop(i)
        raise AssertionError("scripted placer ran out of free cells")


class ScriptedInput:
    """Returns one batch of events per poll, then nothing."""

    def __init__(self, batches):
        self.batches = list(batches)
        self.timeouts = []

    def poll(self, timeout_ms):
        self.timeouts.append(timeout_ms)
        if self.batches:
            return self.batches.pop(0)
        return []


class RecordingSink:
    def __init__(self):
        self.frames = []

    def render(self, snapshot):
        self.frames.append(snapshot)


class FakeClock:
    """Advances by ``step_ms`` every time it is read."""

    def __init__(self, step_ms=0.0, start=0.0):
        self.now = start
        self.step_ms = step_ms

    def __call__(self):
        value = self.now
        self.now += self.step_ms
        return value


@pytest.fixture
def seeded_placer():
    return RandomFoodPlacer(random.Random(1234))
