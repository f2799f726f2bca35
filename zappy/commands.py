"""Requests a graphical client may send, and the replies they produce."""

from __future__ import annotations

from dataclasses import dataclass

from .broadcasts import graphical_broadcast
from .context import GRAPHIC_TEAM, Context, Player

BAD_PARAMETER = "sbp\n"
"""Reply sent when a request names something that does not exist."""


@dataclass
class GraphArgs:
    """Numeric arguments parsed from a graphical request."""

    is_signed: bool = False
    nargs: int = 0
    ssize_a: int = 0
    ssize_b: int = 0
    size_a: int = 0
    size_b: int = 0


def find_player_index(ctxt: Context, client: Player, player_id: int) -> int | None:
    """Return the index of the non-graphical client with ``player_id``.

    When no such client exists, ``client`` is told so and None is returned.
    """
    for index, candidate in enumerate(ctxt.server.clients):
        if candidate.team != GRAPHIC_TEAM and candidate.id == player_id:
            return index
    client.send(BAD_PARAMETER)
    return None


def graph_msz(ctxt: Context, client: Player, args: GraphArgs | None) -> None:
    """Send the map size."""
    client.send(f"msz {ctxt.game_map.width} {ctxt.game_map.height}\n")


def graph_bct(ctxt: Context, client: Player, args: GraphArgs) -> None:
    """Send the resource content of the tile named by the arguments."""
    x, y = args.ssize_a, args.ssize_b
    game_map = ctxt.game_map
    if not (0 <= x < game_map.width and 0 <= y < game_map.height):
        client.send(BAD_PARAMETER)
        return
    quantities = " ".join(str(count) for count in game_map.tile_counts(x, y))
    client.send(f"bct {x} {y} {quantities}\n")


def graph_mct(ctxt: Context, client: Player, args: GraphArgs | None) -> None:
    """Send the content of every tile, one bct reply per tile."""
    width = ctxt.game_map.width
    for x in range(width):
        for y in range(width):
            graph_bct(ctxt, client, GraphArgs(is_signed=True, nargs=2,
                                              ssize_a=x, ssize_b=y))


def graph_tna(ctxt: Context, client: Player, args: GraphArgs | None) -> None:
    """Send the name of every team, one per line."""
    for team in ctxt.teams:
        client.send(f"tna {team.name}\n")


def graph_ppo(ctxt: Context, client: Player, args: GraphArgs) -> None:
    """Send a player's position and orientation."""
    index = find_player_index(ctxt, client, args.ssize_a)
    if index is None:
        return
    player = ctxt.server.clients[index]
    client.send(
        f"ppo #{player.id} {player.pos.x} {player.pos.x} {int(player.orientation)}\n"
    )


def graph_plv(ctxt: Context, client: Player, args: GraphArgs) -> None:
    """Send a player's level."""
    index = find_player_index(ctxt, client, args.ssize_a)
    if index is None:
        return
    player = ctxt.server.clients[index]
    client.send(f"plv #{player.id} {player.level}\n")


def graph_pin(ctxt: Context, client: Player, args: GraphArgs) -> None:
    """Send a player's position and inventory."""
    index = find_player_index(ctxt, client, args.ssize_a)
    if index is None:
        return
    player = ctxt.server.clients[index]
    inventory = " ".join(str(quantity) for quantity in player.inventory)
    client.send(f"pin #{player.id} {player.pos.x} {player.pos.y} {inventory}\n")


def graph_sgt(ctxt: Context, client: Player, args: GraphArgs | None) -> None:
    """Send the current time unit."""
    client.send(f"sgt {ctxt.server.frequency // 100}\n")


def graph_sst(ctxt: Context, client: Player, args: GraphArgs) -> None:
    """Change the time unit and announce it to every graphical client."""
    if args.size_a == 0:
        client.send(BAD_PARAMETER)
        return
    ctxt.server.frequency = args.size_a * 100
    graphical_broadcast(ctxt, f"sst {args.size_a}\n")