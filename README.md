# peril

Game logic and messaging helpers for **Peril**, a multiplayer war game in
which players spawn armies on the continents, move them around, and fight
when their units meet. Players exchange messages through a RabbitMQ broker,
reached with `pika`.

## Installation

Install the package with pip. The `test` extra adds pytest for running the
test suite in `tests/`.

## Modules

### `peril.gamedata`

- `UnitRank`: `INFANTRY`, `CAVALRY`, `ARTILLERY` (a string enum whose
  `str()` is its value).
- `Unit(id, rank, location)`: a frozen dataclass.
- `Player(username, units)`: `units` maps unit IDs to `Unit`s;
  `Player.copy()` returns a player with an independent unit table.
- `ArmyMove(player, units, to_location)` and
  `RecognitionOfWar(attacker, defender)`.
- `all_ranks()` and `all_locations()` return frozensets. The locations are
  americas, europe, africa, asia, australia and antarctica.

### `peril.gamestate`

`GameState(username)` holds the local player's units and the paused flag
behind a lock, so it can be shared between threads.

- Player commands, each taking the words of a typed command:
  - `command_spawn(["spawn", location, rank])` creates a unit with the next
    ID (number of units + 1) and returns it.
  - `command_move(["move", location, id, ...])` moves the named units and
    returns an `ArmyMove` carrying a snapshot of the player. It is refused
    while the game is paused.
  - `command_status()` prints whether the game is paused and, if not, the
    player's units.
- Reactions to messages from others:
  - `handle_pause(PlayingState)` pauses or resumes the game.
  - `handle_move(ArmyMove)` returns a `MoveOutcome`: `SAME_PLAYER` for the
    player's own move, `MAKE_WAR` if the mover shares a location with the
    local player, otherwise `SAFE`.
  - `handle_war(RecognitionOfWar)` returns `(WarOutcome, winner, loser)`.
    Only the attacker's state fights the war; any other player gets
    `NOT_INVOLVED`, and `NO_UNITS` is returned when the two sides share no
    location. Otherwise the outcome is `YOU_WON`, `OPPONENT_WON` or `DRAW`;
    on a loss or a draw the local player's units at the contested location
    are removed.
- Accessors: `pause_game()`, `resume_game()`, `is_paused()`, `add_unit()`,
  `update_unit()`, `remove_units_in_location()`, `get_unit(id)` (returns
  `None` when absent), `units_snapshot()`, `player_snapshot()` and the
  `username` property.
- `overlapping_location(p1, p2)` and `units_to_power_level(units)`. Units are
  worth 1 (infantry), 5 (cavalry) or 10 (artillery).

Commands that cannot be carried out, such as a missing argument, an unknown
location or rank, a bad or unknown unit ID, or a move while paused, raise
`ValueError` with a message for the player. The commands and handlers also
print their progress to standard output.

### `peril.routing`

Exchange names (`EXCHANGE_PERIL_DIRECT`, `EXCHANGE_PERIL_TOPIC`), routing
keys and prefixes (`ARMY_MOVES_PREFIX`, `WAR_RECOGNITIONS_PREFIX`,
`PAUSE_KEY`, `GAME_LOG_SLUG`), and the message dataclasses `PlayingState`
and `GameLog`. Both have `to_dict()` and `from_dict()`; `GameLog` writes its
time as an RFC 3339 string and treats naive times as UTC.

### `peril.pubsub`

- `publish_json(channel, exchange, key, val)` serialises `val` as compact
  JSON (objects with `to_dict()`, dataclasses, enums and datetimes are
  handled) and publishes it with content type `application/json`.
- `declare_and_bind(conn, exchange, queue_name, key, queue_type)` opens a
  channel, declares the queue and binds it, returning `(channel, queue)`.
  `SimpleQueueType.DURABLE` queues are durable; `SimpleQueueType.TRANSIENT`
  queues are exclusive and auto-deleted.

### `peril.console`

`print_client_help()`, `print_server_help()` and `print_quit()` print their
text and return it. `get_input()` prompts with `> ` and returns the words of
one line from standard input (an empty list at end of input).
`client_welcome()` asks for a username, raising `ValueError` if none is
given. `get_malicious_log()` returns a random quote from `MALICIOUS_LOGS`.

### `peril.logs`

`write_log(gamelog)` waits one second, then appends
`<time> <username>: <message>` to `game.log` in the current directory,
raising `LogWriteError` if the file cannot be opened or written.

## Example

```python
from peril.gamestate import GameState

state = GameState("alice")
state.command_spawn(["spawn", "europe", "artillery"])
state.command_spawn(["spawn", "asia", "infantry"])
move = state.command_move(["move", "asia", "2"])
state.command_status()
```

## What the package does not do

It provides no client or server program and no command-line entry point:
there is no loop that reads commands, opens a broker connection, or
subscribes to queues and feeds messages to `GameState`. Those pieces are
left to the application built on top of these modules.