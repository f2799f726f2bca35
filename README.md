# zappy

The game-world core of a Zappy server, as a plain Python library with no
third-party dependencies.

Zappy is played on a toroidal map of tiles holding seven kinds of resources.
Teams of players are spawned from eggs, and graphical clients watch the game
through a short line-based text protocol. This package holds the parts of
the game that do not need a network socket:

| Module | What it does |
| --- | --- |
| `zappy.elements` | The seven resources (`Element`), their names, target densities, and lookup by name. |
| `zappy.world` | `Position`, `Orientation` and `GameMap`; wrap-around movement, resource density and map generation. |
| `zappy.context` | The game state: `Egg`, `Team`, `Player`, `Server` and `Context`. |
| `zappy.config` | Command-line parsing (`-p`, `-x`, `-y`, `-n`, `-c`, `-f`) into a `Context`. |
| `zappy.eggs` | Creating, spawning and hatching eggs. |
| `zappy.broadcasts` | Event messages sent to every graphical client (`pnw`, `ppo`, `bct`, `pic`, `seg`, ...). |
| `zappy.commands` | Answers to graphical-client requests (`msz`, `bct`, `mct`, `tna`, `ppo`, `plv`, `pin`, `sgt`, `sst`). |
| `zappy.graphical` | Splitting a client's buffered input into lines, matching and dispatching requests. |

## Resources

```python
from zappy.elements import Element, element_name, element_from_str

element_from_str("Linemate")        # Element.LINEMATE (case-insensitive)
element_name(Element.THYSTAME)      # "thystame"
```

An unrecognised name gives `Element.UNKNOWN`, whose name is `"unknown"`.

## Moving on the map

The map wraps around at every edge. Facing north lowers `x`, south raises it;
facing east raises `y`, west lowers it.

```python
from zappy.world import Position, Orientation, compute_next_position, compute_position

size = Position(10, 10)
compute_next_position(Position(0, 0), Orientation.NORTH, size)   # Position(9, 0)
compute_position(Position(2, 3), Orientation.EAST, size, 8)      # Position(2, 1)
```

`GameMap.tile(x, y)` gives the list of elements on a tile and
`GameMap.tile_counts(x, y)` how many of each resource lie there, in protocol
order.

## Setting up a game

`parse_args` takes the arguments that follow the program name and returns a
`Context`. The port (`-p`, 0 to 65535), width (`-x`, at least 10), height
(`-y`, at least 10), team names (`-n`, at least two) and clients per team
(`-c`, at least 1) are required; the frequency (`-f`, at least 1) is
optional and defaults to 100. The server keeps the frequency multiplied by
100 in `ctxt.server.frequency`. Any mistake raises `InvalidArgumentError`.

```python
import random

from zappy.config import parse_args
from zappy.world import generate_map
from zappy.eggs import spawn_eggs, hatch_egg

ctxt = parse_args(["-p", "4242", "-x", "10", "-y", "10",
                   "-n", "red", "blue", "-c", "3"])
rng = random.Random(0)
generate_map(ctxt.game_map, rng)
spawn_eggs(ctxt, rng)
pos = hatch_egg(ctxt, "red", rng)
```

`generate_map` tops the map up until each resource reaches its target
density, and `spawn_eggs` lays each team's eggs on distinct random tiles
(the map area shared between the teams, capped by the clients per team).
`hatch_egg` removes one of a team's eggs, announces it to graphical
clients with `ebo`, and returns its position, or `Position(0, 0)` when the
team is unknown or no egg is picked. Passing your own `random.Random` makes
a game reproducible.

## Talking to graphical clients

Each `Player` collects what is sent to it in its `outbox` list through
`Player.send`. Put a graphical client's received text into its `buffer` and
call `graphic_actions(ctxt, client)`: every non-empty line in the buffer is
answered and the buffer is emptied. Unknown requests are answered with
`suc`, bad parameters with `sbp`. The `send_*` functions in
`zappy.broadcasts` push game events to all clients of the `GRAPHIC` team.

## What this package does not do

There is no network server here: nothing opens sockets, accepts
connections or delivers the messages queued in `Player.outbox`. There is no
game loop or timing, no handling of AI-player commands, and no command-line
program; the package is a library to build those on.