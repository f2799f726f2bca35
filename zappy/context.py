"""Shared game state: server settings, connected players, teams and eggs."""

from __future__ import annotations

from dataclasses import dataclass, field

from .elements import ELEMENTS_QUANTITY
from .world import GameMap, Orientation, Position

EXIT_SUCCESS = 0
EXIT_ERROR = 84

GRAPHIC_TEAM = "GRAPHIC"
"""Team name under which graphical clients identify themselves."""

DEFAULT_FREQUENCY = 10000
"""Default server frequency, stored as the user-facing value times 100."""


@dataclass
class Egg:
    """An egg lying on the map, waiting to hatch into a player."""

    number: int
    pos: Position
    player_number: int = -1


@dataclass
class Team:
    """A team of players and the eggs its new members hatch from."""

    name: str
    max_clients: int = 0
    available_slots: int = 0
    eggs: list[Egg] = field(default_factory=list)
    seg: bool = False


@dataclass
class Player:
    """A connected client: an AI player or a graphical observer."""

    id: int = 0
    team: str | None = None
    pos: Position = field(default_factory=lambda: Position(0, 0))
    orientation: Orientation = Orientation.NORTH
    level: int = 1
    inventory: list[int] = field(default_factory=lambda: [0] * ELEMENTS_QUANTITY)
    buffer: str = ""
    outbox: list[str] = field(default_factory=list)

    @property
    def is_graphic(self) -> bool:
        """Whether this client is a graphical observer."""
        return self.team == GRAPHIC_TEAM

    def send(self, message: str) -> None:
        """Queue a message for delivery to this client."""
        self.outbox.append(message)


@dataclass
class Server:
    """Network settings and the list of connected clients."""

    port: int = 0
    frequency: int = DEFAULT_FREQUENCY
    clients: list[Player] = field(default_factory=list)


@dataclass
class Context:
    """Everything the server knows about the running game."""

    server: Server = field(default_factory=Server)
    game_map: GameMap = field(default_factory=lambda: GameMap(0, 0))
    teams: list[Team] = field(default_factory=list)
    max_clients_per_team: int = 0

    def find_team(self, name: str) -> Team | None:
        """Return the team with exactly this name, or None."""
        return next((team for team in self.teams if team.name == name), None)