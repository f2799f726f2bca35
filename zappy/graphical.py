"""Reading and dispatching the requests of graphical clients."""

from __future__ import annotations

import re
from collections.abc import Callable

from .commands import (
    BAD_PARAMETER,
    GraphArgs,
    graph_bct,
    graph_mct,
    graph_msz,
    graph_pin,
    graph_plv,
    graph_ppo,
    graph_sgt,
    graph_sst,
    graph_tna,
)
from .context import Context, Player

UNKNOWN_COMMAND = "suc\n"
"""Reply sent when a request is not recognised."""

AUTHORIZED_STRINGS: tuple[str, ...] = (
    "msz",
    "bct ",
    "mct",
    "tna",
    "ppo ",
    "plv ",
    "pin ",
    "sgt",
    "sst ",
)
"""Recognised requests, in matching order; a trailing space means arguments."""

_Handler = Callable[[Context, Player, "GraphArgs | None"], None]

_HANDLERS: dict[str, _Handler] = {
    "msz": graph_msz,
    "bct ": graph_bct,
    "mct": graph_mct,
    "tna": graph_tna,
    "ppo ": graph_ppo,
    "plv ": graph_plv,
    "pin ": graph_pin,
    "sgt": graph_sgt,
    "sst ": graph_sst,
}

_LLONG_MIN = -(2**63)
_LLONG_MAX = 2**63 - 1
_ULLONG_MAX = 2**64 - 1
_NUMBER = re.compile(r"[ \t\n\x0b\f\r]*([+-]?)([0-9]+)")


class GraphArgsError(ValueError):
    """The arguments of a graphical request are malformed or out of range."""


def _strtoll(text: str, start: int) -> tuple[int, int, bool]:
    """Read a signed integer at ``start``: value, end index, overflow flag.

    When no digits follow, the end index is ``start`` itself.
    """
    match = _NUMBER.match(text, start)
    if match is None:
        return 0, start, False
    sign, digits = match.groups()
    value = -int(digits) if sign == "-" else int(digits)
    overflow = not _LLONG_MIN <= value <= _LLONG_MAX
    return value, match.end(), overflow


def _strtoull(text: str, start: int) -> tuple[int, int, bool]:
    """Read an unsigned integer at ``start``; a minus sign wraps around."""
    match = _NUMBER.match(text, start)
    if match is None:
        return 0, start, False
    sign, digits = match.groups()
    magnitude = int(digits)
    if magnitude > _ULLONG_MAX:
        return _ULLONG_MAX, match.end(), True
    value = -magnitude % (_ULLONG_MAX + 1) if sign == "-" else magnitude
    return value, match.end(), False


def _at_line_end(text: str, index: int) -> bool:
    return index >= len(text) or text[index] == "\n"


def _parse_bct(text: str) -> GraphArgs:
    parsed = GraphArgs(is_signed=True, nargs=2)
    first, end, overflow = _strtoll(text, 0)
    if overflow or end == 0 or end >= len(text) or text[end] != " " or first < 0:
        raise GraphArgsError(f"bad tile coordinates: {text!r}")
    parsed.ssize_a = first
    second, end, overflow = _strtoll(text, end + 1)
    if overflow or not _at_line_end(text, end):
        raise GraphArgsError(f"bad tile coordinates: {text!r}")
    parsed.ssize_b = second
    return parsed


def _parse_id(text: str) -> GraphArgs:
    parsed = GraphArgs(is_signed=True, nargs=1)
    if not text.startswith("#"):
        raise GraphArgsError(f"player id must start with '#': {text!r}")
    value, end, overflow = _strtoll(text, 1)
    if overflow or end == 1 or not _at_line_end(text, end):
        raise GraphArgsError(f"bad player id: {text!r}")
    parsed.ssize_a = value
    return parsed


def _parse_sst(text: str) -> GraphArgs:
    parsed = GraphArgs(is_signed=False, nargs=1)
    value, end, overflow = _strtoull(text, 0)
    if overflow or end == 0 or not _at_line_end(text, end):
        raise GraphArgsError(f"bad time unit: {text!r}")
    parsed.size_a = value
    return parsed


_PARSERS: dict[str, Callable[[str], GraphArgs]] = {
    "bct": _parse_bct,
    "ppo": _parse_id,
    "plv": _parse_id,
    "pin": _parse_id,
    "sst": _parse_sst,
}


def parse_graph_args(text: str, command: str) -> GraphArgs:
    """Parse the arguments ``text`` given to the request ``command``.

    Requests that take no arguments yield empty arguments. Raises
    GraphArgsError when the arguments are malformed.
    """
    parser = _PARSERS.get(command.strip().lower())
    if parser is None:
        return GraphArgs()
    return parser(text)


def match_command(line: str) -> tuple[str, str | None] | None:
    """Find the request a line names, ignoring case.

    Returns the matched request string and its argument text (None for
    requests without arguments), or None when nothing matches.
    """
    lowered = line.lower()
    for command in AUTHORIZED_STRINGS:
        if command.endswith(" "):
            if lowered.startswith(command) and len(line) > len(command):
                return command, line[len(command):]
        elif lowered == command:
            return command, None
    return None


def handle_line(ctxt: Context, client: Player, line: str) -> None:
    """Answer a single request line from a graphical client."""
    matched = match_command(line)
    if matched is None:
        client.send(UNKNOWN_COMMAND)
        return
    command, text = matched
    handler = _HANDLERS[command]
    if text is None:
        handler(ctxt, client, None)
        return
    try:
        args = parse_graph_args(text, command)
    except GraphArgsError:
        client.send(BAD_PARAMETER)
        return
    handler(ctxt, client, args)


def graphic_actions(ctxt: Context, client: Player) -> None:
    """Answer every request waiting in the client's buffer, then empty it."""
    buffer, client.buffer = client.buffer, ""
    for raw_line in buffer.split("\n"):
        line = raw_line.split("\0", 1)[0]
        if line:
            handle_line(ctxt, client, line)