"""Terminal Snake: a tick-driven game core plus curses and pygame frontends."""

from .config import Config
from .errors import ConfigError, InvalidTransition, NoFreeCellError, SnakeError
from .food import FoodPlacer, RandomFoodPlacer
from .game import GameState, new_game_state
from .loop import GameLoop, InputSource, RenderSink
from .model import Cell, DeathReason, Heading, InputEvent, Phase, Snapshot
from .motion import MotionController

__all__ = [
    "Config",
    "ConfigError", "InvalidTransition", "NoFreeCellError", "SnakeError",
    "FoodPlacer", "RandomFoodPlacer",
    "GameState", "new_game_state",
    "GameLoop", "InputSource", "RenderSink",
    "Cell", "DeathReason", "Heading", "InputEvent", "Phase", "Snapshot",
    "MotionController",
]

__version__ = "0.1.0"
