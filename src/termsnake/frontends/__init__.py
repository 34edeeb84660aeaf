"""Input sources and render sinks that drive the game core."""

FRONTENDS = ("terminal", "window")


def get_player(name: str):
    """Return the ``play(config)`` entry point of a frontend, imported lazily."""
    if name == "terminal":
        from .terminal import play
    elif name == "window":
        from .window import play
    else:
        raise ValueError(f"Unknown frontend: {name}")
    return play
