import dataclasses

import pytest

from peril.gamedata import Player, Unit, UnitRank, all_locations, all_ranks


def test_all_ranks_are_the_enum_members():
    assert all_ranks() == {UnitRank.INFANTRY, UnitRank.CAVALRY, UnitRank.ARTILLERY}


def test_all_locations():
    assert all_locations() == {"americas", "europe", "africa", "asia", "australia", "antarctica"}


def test_rank_from_name():
    assert UnitRank("cavalry") is UnitRank.CAVALRY
    assert str(UnitRank.ARTILLERY) == "artillery"


def test_unknown_rank_rejected():
    with pytest.raises(ValueError):
        UnitRank("dragon")


def test_unit_is_immutable():
    unit = Unit(id=1, rank=UnitRank.INFANTRY, location="asia")
    with pytest.raises(dataclasses.FrozenInstanceError):
        unit.location = "europe"
    moved = dataclasses.replace(unit, location="europe")
    assert moved.location == "europe"
    assert unit.location == "asia"


def test_player_copy_is_independent():
    player = Player("alice", {1: Unit(1, UnitRank.INFANTRY, "asia")})
    snapshot = player.copy()
    snapshot.units[2] = Unit(2, UnitRank.CAVALRY, "europe")
    assert list(player.units) == [1]
    assert snapshot.username == player.username
    assert snapshot.units[1] == player.units[1]


def test_player_default_units_not_shared():
    first, second = Player("a"), Player("b")
    first.units[1] = Unit(1, UnitRank.INFANTRY, "africa")
    assert second.units == {}