"""A player's view of the game: units, pausing, moves, spawns and wars."""

from __future__ import annotations

import dataclasses
import re
import threading
from collections.abc import Iterable, Sequence
from enum import IntEnum

from .gamedata import (
    ArmyMove,
    Location,
    Player,
    RecognitionOfWar,
    Unit,
    UnitRank,
    all_locations,
    all_ranks,
)
from .routing import PlayingState

_SEPARATOR = "------------------------"
_INTEGER = re.compile(r"[+-]?[0-9]+")

_RANK_POWER = {
    UnitRank.ARTILLERY: 10,
    UnitRank.CAVALRY: 5,
    UnitRank.INFANTRY: 1,
}


class MoveOutcome(IntEnum):
    SAME_PLAYER = 0
    SAFE = 1
    MAKE_WAR = 2


class WarOutcome(IntEnum):
    NOT_INVOLVED = 0
    NO_UNITS = 1
    YOU_WON = 2
    OPPONENT_WON = 3
    DRAW = 4


def overlapping_location(p1: Player, p2: Player) -> Location | None:
    """Return a location where both players have units, or None."""
    theirs = {unit.location for unit in p2.units.values()}
    return next((u.location for u in p1.units.values() if u.location in theirs), None)


def units_to_power_level(units: Iterable[Unit]) -> int:
    """Sum the fighting power of the given units."""
    return sum(_RANK_POWER.get(unit.rank, 0) for unit in units)


class GameState:
    """The local player's state, safe to share between threads."""

    def __init__(self, username: str) -> None:
        self.player = Player(username=username)
        self.paused = False
        self._lock = threading.RLock()

    def pause_game(self) -> None:
        with self._lock:
            self.paused = True

    def resume_game(self) -> None:
        with self._lock:
            self.paused = False

    def is_paused(self) -> bool:
        with self._lock:
            return self.paused

    def add_unit(self, unit: Unit) -> None:
        with self._lock:
            self.player.units[unit.id] = unit

    def remove_units_in_location(self, location: Location) -> None:
        with self._lock:
            self.player.units = {
                uid: unit for uid, unit in self.player.units.items() if unit.location != location
            }

    def update_unit(self, unit: Unit) -> None:
        with self._lock:
            self.player.units[unit.id] = unit

    @property
    def username(self) -> str:
        return self.player.username

    def units_snapshot(self) -> list[Unit]:
        with self._lock:
            return list(self.player.units.values())

    def get_unit(self, unit_id: int) -> Unit | None:
        with self._lock:
            return self.player.units.get(unit_id)

    def player_snapshot(self) -> Player:
        with self._lock:
            return self.player.copy()

    def command_status(self) -> None:
        """Print whether the game is paused and, if not, the player's units."""
        if self.is_paused():
            print("The game is paused.")
            return
        print("The game is not paused.")
        player = self.player_snapshot()
        print(f"You are {player.username}, and you have {len(player.units)} units.")
        for unit in player.units.values():
            print(f"* {unit.id}: {unit.location}, {unit.rank}")

    def handle_pause(self, state: PlayingState) -> None:
        try:
            print()
            if state.is_paused:
                print("==== Pause Detected ====")
                self.pause_game()
            else:
                print("==== Resume Detected ====")
                self.resume_game()
        finally:
            print(_SEPARATOR)

    def command_spawn(self, words: Sequence[str]) -> Unit:
        """Spawn a unit from a ``spawn <location> <rank>`` command and return it."""
        if len(words) < 3:
            raise ValueError("usage: spawn <location> <rank>")
        location_name, rank = words[1], words[2]
        if location_name not in all_locations():
            raise ValueError(f"error: {location_name} is not a valid location")
        if rank not in {r.value for r in all_ranks()}:
            raise ValueError(f"error: {rank} is not a valid unit")

        with self._lock:
            unit = Unit(id=len(self.player.units) + 1, rank=UnitRank(rank), location=location_name)
            self.player.units[unit.id] = unit
        print(f"Spawned a(n) {rank} in {location_name} with id {unit.id}")
        return unit

    def command_move(self, words: Sequence[str]) -> ArmyMove:
        """Move units from a ``move <location> <unitID>...`` command."""
        if self.is_paused():
            raise ValueError("the game is paused, you can not move units")
        if len(words) < 3:
            raise ValueError("usage: move <location> <unitID> <unitID> <unitID> etc")
        new_location = words[1]
        if new_location not in all_locations():
            raise ValueError(f"error: {new_location} is not a valid location")

        unit_ids = []
        for word in words[2:]:
            if not _INTEGER.fullmatch(word):
                raise ValueError(f"error: {word} is not a valid unit ID")
            unit_ids.append(int(word))

        new_units = []
        for unit_id in unit_ids:
            unit = self.get_unit(unit_id)
            if unit is None:
                raise ValueError(f"error: unit with ID {unit_id} not found")
            moved = dataclasses.replace(unit, location=new_location)
            self.update_unit(moved)
            new_units.append(moved)

        move = ArmyMove(
            player=self.player_snapshot(), units=new_units, to_location=new_location
        )
        print(f"Moved {len(move.units)} units to {move.to_location}")
        return move

    def handle_move(self, move: ArmyMove) -> MoveOutcome:
        """Report another player's move and decide whether it means war."""
        try:
            player = self.player_snapshot()
            print()
            print("==== Move Detected ====")
            print(
                f"{move.player.username} is moving {len(move.units)} unit(s) "
                f"to {move.to_location}"
            )
            for unit in move.units:
                print(f"* {unit.rank}")

            if player.username == move.player.username:
                return MoveOutcome.SAME_PLAYER

            overlap = overlapping_location(player, move.player)
            if overlap is not None:
                print(
                    f"You have units in {overlap}! You are at war with "
                    f"{move.player.username}!"
                )
                return MoveOutcome.MAKE_WAR
            print(f"You are safe from {move.player.username}'s units.")
            return MoveOutcome.SAFE
        finally:
            print(_SEPARATOR)

    def handle_war(
        self, recognition: RecognitionOfWar
    ) -> tuple[WarOutcome, str | None, str | None]:
        """Fight a declared war; return the outcome, the winner and the loser."""
        try:
            return self._fight(recognition)
        finally:
            print(_SEPARATOR)

    def _fight(
        self, rw: RecognitionOfWar
    ) -> tuple[WarOutcome, str | None, str | None]:
        attacker, defender = rw.attacker, rw.defender
        print()
        print("==== War Declared ====")
        print(f"{attacker.username} has declared war on {defender.username}!")

        player = self.player_snapshot()
        if player.username == defender.username:
            print(f"{player.username}, you published the war.")
            return WarOutcome.NOT_INVOLVED, None, None
        if player.username != attacker.username:
            print(f"{player.username}, you are not involved in this war.")
            return WarOutcome.NOT_INVOLVED, None, None

        overlap = overlapping_location(attacker, defender)
        if overlap is None:
            print("Error! No units are in the same location. No war will be fought.")
            return WarOutcome.NO_UNITS, None, None

        attacker_units = [u for u in attacker.units.values() if u.location == overlap]
        defender_units = [u for u in defender.units.values() if u.location == overlap]

        for name, units in ((attacker.username, attacker_units), (defender.username, defender_units)):
            print(f"{name}'s units:")
            for unit in units:
                print(f"  * {unit.rank}")

        attacker_power = units_to_power_level(attacker_units)
        defender_power = units_to_power_level(defender_units)
        print(f"Attacker has a power level of {attacker_power}")
        print(f"Defender has a power level of {defender_power}")

        if attacker_power > defender_power:
            print(f"{attacker.username} has won the war!")
            if player.username == defender.username:
                self._lose(overlap)
                return WarOutcome.OPPONENT_WON, attacker.username, defender.username
            return WarOutcome.YOU_WON, attacker.username, defender.username
        if defender_power > attacker_power:
            print(f"{defender.username} has won the war!")
            if player.username == attacker.username:
                self._lose(overlap)
                return WarOutcome.OPPONENT_WON, defender.username, attacker.username
            return WarOutcome.YOU_WON, defender.username, attacker.username

        print("The war ended in a draw!")
        print(f"Your units in {overlap} have been killed.")
        self.remove_units_in_location(overlap)
        return WarOutcome.DRAW, attacker.username, defender.username

    def _lose(self, location: Location) -> None:
        print("You have lost the war!")
        self.remove_units_in_location(location)
        print(f"Your units in {location} have been killed.")