# src/termsnake/motion.py
from .model import Heading


class MotionController:
    """
    Turns direction requests into the snake's heading, refusing 180° turns.

    ``heading`` is what the next tick will use. Between ticks the last accepted
    request wins.
    """

    def __init__(self, heading: Heading = Heading.UP):
        self.heading = heading

    def set_heading(self, requested: Heading) -> None:
        """Apply ``requested`` unless it is the exact opposite. Never raises."""
        if requested is self.heading.opposite:
            return
        self.heading = requested

    def __repr__(self):
        return f"<MotionController heading={self.heading.name}>"
