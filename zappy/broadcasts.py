"""Event notifications pushed to every connected graphical client."""

from __future__ import annotations

from collections.abc import Sequence

from .context import GRAPHIC_TEAM, Context, Egg, Player, Team
from .elements import Element
from .world import Position

_NULL = "(null)"


def graphical_broadcast(ctxt: Context, message: str) -> None:
    """Send ``message`` to every client of the graphical team."""
    for client in ctxt.server.clients:
        if client.team == GRAPHIC_TEAM:
            client.send(message)


def send_smg(ctxt: Context, msg: str) -> None:
    """Broadcast a server message."""
    graphical_broadcast(ctxt, f"smg {msg}\n")


def send_bct(ctxt: Context, pos: Position) -> None:
    """Broadcast the resource content of the tile at ``pos``."""
    counts = ctxt.game_map.tile_counts(pos.x, pos.y)
    quantities = " ".join(str(count) for count in counts)
    graphical_broadcast(ctxt, f"bct {pos.x} {pos.y} {quantities}\n")


def send_ebo(ctxt: Context, egg: Egg) -> None:
    """Broadcast that a player connected through ``egg``."""
    graphical_broadcast(ctxt, f"ebo #{egg.number}\n")


def send_enw(ctxt: Context, egg: Egg) -> None:
    """Broadcast that ``egg`` was laid."""
    graphical_broadcast(
        ctxt, f"enw #{egg.number} #{egg.player_number} {egg.pos.x} {egg.pos.y}\n"
    )


def send_edi(ctxt: Context, egg: Egg) -> None:
    """Broadcast that ``egg`` died."""
    graphical_broadcast(ctxt, f"edi #{egg.number}\n")


def send_seg(ctxt: Context, team: Team | None) -> None:
    """Broadcast the end of the game, at most once per winning team."""
    if team is None:
        graphical_broadcast(ctxt, f"seg {_NULL}\n")
        return
    if team.seg:
        return
    team.seg = True
    graphical_broadcast(ctxt, f"seg {team.name}\n")


def send_plv(ctxt: Context, client: Player) -> None:
    """Broadcast a player's level."""
    graphical_broadcast(ctxt, f"plv #{client.id} {client.level}\n")


def send_ppo(ctxt: Context, client: Player) -> None:
    """Broadcast a player's position and orientation."""
    graphical_broadcast(
        ctxt,
        f"ppo #{client.id} {client.pos.x} {client.pos.y} {int(client.orientation)}\n",
    )


def send_pin(ctxt: Context, client: Player) -> None:
    """Broadcast a player's position and inventory."""
    inventory = " ".join(str(quantity) for quantity in client.inventory)
    graphical_broadcast(
        ctxt, f"pin #{client.id} {client.pos.x} {client.pos.y} {inventory}\n"
    )


def send_pfk(ctxt: Context, client: Player) -> None:
    """Broadcast that a player lays an egg."""
    graphical_broadcast(ctxt, f"pfk #{client.id}\n")


def send_pdi(ctxt: Context, client: Player) -> None:
    """Broadcast that a player died."""
    graphical_broadcast(ctxt, f"pdi #{client.id}\n")


def send_pnw(ctxt: Context, client: Player) -> None:
    """Broadcast the connection of a new player."""
    team = client.team if client.team is not None else _NULL
    graphical_broadcast(
        ctxt,
        f"pnw #{client.id} {client.pos.x} {client.pos.y} "
        f"{int(client.orientation)} {client.level} {team}\n",
    )


def send_pie(ctxt: Context, client: Player, worked: bool) -> None:
    """Broadcast the outcome of an incantation on the player's tile."""
    outcome = "ok" if worked else "ko"
    graphical_broadcast(ctxt, f"pie {client.pos.x} {client.pos.y} {outcome}\n")


def send_pbc(ctxt: Context, client: Player, msg: str) -> None:
    """Broadcast a message a player shouted."""
    graphical_broadcast(ctxt, f"pbc #{client.id} {msg}\n")


def send_pdr(ctxt: Context, client: Player, element: Element) -> None:
    """Broadcast that a player dropped a resource."""
    graphical_broadcast(ctxt, f"pdr #{client.id} {int(element)}\n")


def send_pgt(ctxt: Context, client: Player, element: Element) -> None:
    """Broadcast that a player picked up a resource."""
    graphical_broadcast(ctxt, f"pgt #{client.id} {int(element)}\n")


def send_pic(ctxt: Context, players: Sequence[Player]) -> None:
    """Broadcast the start of an incantation led by the first player.

    The message names the leader's tile, the level being reached and the
    ids of every participant.
    """
    if not players:
        raise ValueError("an incantation needs at least one player")
    leader = players[0]
    ids = "".join(f" {player.id}" for player in players)
    graphical_broadcast(
        ctxt, f"pic {leader.pos.x} {leader.pos.y} {leader.level + 1}{ids}\n"
    )