"""Players, units, moves and wars."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

Location = str

_LOCATIONS = frozenset({"americas", "europe", "africa", "asia", "australia", "antarctica"})


class UnitRank(str, Enum):
    INFANTRY = "infantry"
    CAVALRY = "cavalry"
    ARTILLERY = "artillery"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Unit:
    id: int
    rank: UnitRank
    location: Location


@dataclass
class Player:
    username: str
    units: dict[int, Unit] = field(default_factory=dict)

    def copy(self) -> Player:
        """Return a player whose unit table is independent of this one."""
        return Player(username=self.username, units=dict(self.units))


@dataclass
class ArmyMove:
    player: Player
    units: list[Unit]
    to_location: Location


@dataclass
class RecognitionOfWar:
    attacker: Player
    defender: Player


def all_ranks() -> frozenset[UnitRank]:
    return frozenset(UnitRank)


def all_locations() -> frozenset[Location]:
    return _LOCATIONS