"""Tests for pygame event translation (no display needed)."""

import pygame

from termsnake.frontends.window import translate
from termsnake.model import InputEvent


def test_arrow_keys_and_quit():
    assert translate(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_UP)) == [InputEvent.UP]
    assert translate(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_q)) == [InputEvent.QUIT]
    assert translate(pygame.event.Event(pygame.QUIT)) == [InputEvent.QUIT]


def test_other_events_are_dropped():
    assert translate(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_x)) == []
    assert translate(pygame.event.Event(pygame.KEYUP, key=pygame.K_UP)) == []
