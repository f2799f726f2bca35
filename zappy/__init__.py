"""Game-world core of a Zappy server: map, resources, eggs, arguments and the graphical protocol."""

__version__ = "1.0.0"

__all__ = [
    "broadcasts",
    "commands",
    "config",
    "context",
    "eggs",
    "elements",
    "graphical",
    "world",
]