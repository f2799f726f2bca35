"""Command-line parsing for the server."""

from __future__ import annotations

import re
from collections.abc import Sequence
from enum import IntEnum

from .context import DEFAULT_FREQUENCY, Context, Team
from .world import GameMap

_ULLONG_MAX = 2**64 - 1
SIZE_MAX = _ULLONG_MAX
SSIZE_MAX = 2**63 - 1
UINT16_MAX = 2**16 - 1
MIN_MAP_SIDE = 10

_NUMBER = re.compile(r"[ \t\n\x0b\f\r]*([+-]?)([0-9]+)")
_FLAG_NAMES = frozenset({"-p", "-x", "-y", "-n", "-c", "-f"})


class InvalidArgumentError(ValueError):
    """A command-line argument is missing, malformed or out of range."""


class Flag(IntEnum):
    """Command-line flags the server understands."""

    P = 0
    X = 1
    Y = 2
    N = 3
    C = 4
    F = 5


def _parse_unsigned(text: str | None, limit: int) -> int:
    if text is None:
        raise InvalidArgumentError("missing numeric value")
    match = _NUMBER.fullmatch(text)
    if match is None:
        raise InvalidArgumentError(f"not a number: {text!r}")
    sign, digits = match.groups()
    value = int(digits)
    if value > _ULLONG_MAX:
        raise InvalidArgumentError(f"number out of range: {text!r}")
    if sign == "-":
        value = -value % (_ULLONG_MAX + 1)
    if value > limit:
        raise InvalidArgumentError(f"number out of range: {text!r}")
    return value


def parse_size(text: str | None) -> int:
    """Parse an unsigned size value, rejecting trailing garbage."""
    return _parse_unsigned(text, SIZE_MAX)


def parse_port(text: str | None) -> int:
    """Parse a port number between 0 and 65535."""
    return _parse_unsigned(text, UINT16_MAX)


class _ArgParser:
    def __init__(self, args: Sequence[str]) -> None:
        self.args = list(args)
        self.ctxt = Context()
        self.ctxt.server.frequency = DEFAULT_FREQUENCY
        self.width = 0
        self.height = 0

    def value(self, index: int) -> str | None:
        return self.args[index + 1] if index + 1 < len(self.args) else None

    def flag_p(self, index: int) -> int:
        self.ctxt.server.port = parse_port(self.value(index))
        return index + 2

    def _side(self, index: int) -> int:
        side = parse_size(self.value(index))
        if side > SSIZE_MAX or side < MIN_MAP_SIDE:
            raise InvalidArgumentError(f"map side must be at least {MIN_MAP_SIDE}")
        return side

    def flag_x(self, index: int) -> int:
        self.width = self._side(index)
        return index + 2

    def flag_y(self, index: int) -> int:
        self.height = self._side(index)
        return index + 2

    def flag_n(self, index: int) -> int:
        count = 0
        while (name := self.value(index)) is not None and name not in _FLAG_NAMES:
            self.ctxt.teams.append(
                Team(name=name, max_clients=self.ctxt.max_clients_per_team)
            )
            index += 1
            count += 1
        if count < 2:
            raise InvalidArgumentError("at least two team names are required")
        return index + 1

    def flag_c(self, index: int) -> int:
        max_clients = parse_size(self.value(index))
        if max_clients == 0:
            raise InvalidArgumentError("client count must be positive")
        self.ctxt.max_clients_per_team = max_clients
        for team in self.ctxt.teams:
            team.max_clients = max_clients
        return index + 2

    def flag_f(self, index: int) -> int:
        frequency = parse_size(self.value(index))
        if frequency == 0:
            raise InvalidArgumentError("frequency must be positive")
        self.ctxt.server.frequency = frequency * 100
        return index + 2

    def run(self) -> Context:
        handlers = {
            "p": (Flag.P, self.flag_p),
            "x": (Flag.X, self.flag_x),
            "y": (Flag.Y, self.flag_y),
            "n": (Flag.N, self.flag_n),
            "c": (Flag.C, self.flag_c),
            "f": (Flag.F, self.flag_f),
        }
        seen: set[Flag] = set()
        index = 0
        while index < len(self.args):
            arg = self.args[index]
            if len(arg) != 2 or arg[0] != "-" or arg[1] not in handlers:
                raise InvalidArgumentError(f"unknown argument: {arg!r}")
            flag, handler = handlers[arg[1]]
            index = handler(index)
            seen.add(flag)
        missing = [flag for flag in Flag if flag is not Flag.F and flag not in seen]
        if missing:
            names = ", ".join(f"-{flag.name.lower()}" for flag in missing)
            raise InvalidArgumentError(f"missing required flags: {names}")
        self.ctxt.game_map = GameMap(self.width, self.height)
        return self.ctxt


def parse_args(argv: Sequence[str]) -> Context:
    """Build a game context from the arguments that follow the program name.

    Flags -p, -x, -y, -n and -c are required; -f is optional.
    """
    return _ArgParser(argv).run()