"""Tests for MotionController."""

import pytest

from termsnake.model import Heading
from termsnake.motion import MotionController

NON_REVERSING = [(c, r) for c in Heading for r in Heading if r is not c.opposite]


@pytest.mark.parametrize("heading", list(Heading))
def test_opposite_request_is_ignored(heading):
    """Asking for the exact opposite never changes the heading."""
    motion = MotionController(heading)
    motion.set_heading(heading.opposite)
    assert motion.heading is heading


@pytest.mark.parametrize("current,requested", NON_REVERSING)
def test_non_opposite_request_is_applied(current, requested):
    """Any other request, including the same heading, takes effect."""
    motion = MotionController(current)
    motion.set_heading(requested)
    assert motion.heading is requested


def test_default_heading_is_up():
    assert MotionController().heading is Heading.UP


def test_turn_then_perpendicular_turn_applies():
    """After Up -> Left, Down is perpendicular to the current heading and takes effect."""
    motion = MotionController(Heading.UP)
    motion.set_heading(Heading.LEFT)
    motion.set_heading(Heading.DOWN)
    assert motion.heading is Heading.DOWN


def test_reversal_is_judged_against_the_latest_heading():
    motion = MotionController(Heading.UP)
    motion.set_heading(Heading.LEFT)
    motion.set_heading(Heading.RIGHT)
    assert motion.heading is Heading.LEFT
    motion.set_heading(Heading.UP)
    assert motion.heading is Heading.UP
