"""Eggs: creating them, spreading them over the map and hatching them."""

from __future__ import annotations

import itertools
import random
from typing import Protocol

from .broadcasts import send_ebo
from .context import Context, Egg
from .world import Position, shuffled_positions

EGG_MAX = 256
"""Upper bound of the random walk length used to pick an egg to hatch."""

_WORD = 2**64
_ORIGIN = Position(0, 0)
_numbers = itertools.count()


class _RandRange(Protocol):
    def randrange(self, stop: int) -> int: ...


def create_egg(pos: Position, player_number: int) -> Egg:
    """Create an egg at ``pos`` with the next unique egg number."""
    return Egg(number=next(_numbers), pos=Position(pos.x, pos.y),
               player_number=player_number)


def add_egg(eggs: list[Egg] | None, pos: Position, player_number: int) -> Egg | None:
    """Create an egg and put it at the front of ``eggs``.

    Does nothing and returns None when ``eggs`` is None.
    """
    if eggs is None:
        return None
    egg = create_egg(pos, player_number)
    eggs.insert(0, egg)
    return egg


def eggs_per_team(ctxt: Context) -> int:
    """Number of eggs each team starts with.

    The map area is shared equally between the teams, capped by the
    maximum number of clients per team.
    """
    if not ctxt.teams:
        raise ValueError("cannot share the map between zero teams")
    return min(ctxt.game_map.size // len(ctxt.teams), ctxt.max_clients_per_team)


def spawn_eggs(ctxt: Context, rng: random.Random | None = None) -> None:
    """Lay each team's starting eggs on distinct, randomly chosen tiles."""
    count = eggs_per_team(ctxt)
    positions = iter(
        shuffled_positions(ctxt.game_map.width, ctxt.game_map.height, rng)
    )
    for team in ctxt.teams:
        team.available_slots = count
        for pos in itertools.islice(positions, count):
            add_egg(team.eggs, pos, -1)


def _walk_index(steps: int, length: int) -> int | None:
    """Index reached after ``steps`` steps of the egg walk, if any.

    The walk starts at the first egg, then cycles over the remaining eggs,
    never coming back to the first one.
    """
    if length == 0 or steps == 0:
        return None
    if steps == 1:
        return 0
    if length == 1:
        return None
    return 1 + (steps - 2) % (length - 1)


def hatch_egg(
    ctxt: Context, team_name: str, rng: _RandRange | None = None
) -> Position:
    """Hatch one of the team's eggs, picked at random, and return its tile.

    The hatched egg is removed and announced to graphical clients. When the
    team is unknown or no egg is picked, the origin is returned.
    """
    rng = rng if rng is not None else random
    team = ctxt.find_team(team_name)
    draw = rng.randrange(EGG_MAX)
    if team is None:
        return _ORIGIN
    steps = (draw - 1) % _WORD
    index = _walk_index(steps, len(team.eggs))
    if index is None:
        return _ORIGIN
    egg = team.eggs.pop(index)
    send_ebo(ctxt, egg)
    return egg.pos