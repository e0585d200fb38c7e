import types

import pytest

from halite_fleet_bot.state import State

SIZE = 21


def pos(row, col):
    return (row % SIZE) * SIZE + (col % SIZE)


def halite_map(cells=None, default=0.0):
    # flat halite list with {position: halite} overrides
    halite = [default] * SIZE ** 2
    for cell, amount in (cells or {}).items():
        halite[cell] = amount
    return halite


@pytest.fixture
def config():
    return types.SimpleNamespace(size=SIZE, episodeSteps=400,
                                 convertCost=4000, spawnCost=1000)


@pytest.fixture
def make_obs():
    def make(step=0, halite=None, bank=0, yards=None, ships=None,
             opp_ships=None, opp_yards=None):
        if halite is None:
            halite = halite_map()
        return types.SimpleNamespace(
            step=step,
            halite=list(halite),
            player=0,
            players=[
                [bank, dict(yards or {}), dict(ships or {})],
                [0, dict(opp_yards or {}), dict(opp_ships or {})],
            ],
        )
    return make


@pytest.fixture
def make_state(config, make_obs):
    def make(**kwargs):
        return State(make_obs(**kwargs), config)
    return make
