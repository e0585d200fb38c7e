from conftest import pos

from halite_fleet_bot.grids import Grids
from halite_fleet_bot.main import Actions
from halite_fleet_bot.spawns import Spawns

BASE = pos(10, 10)


def setup(make_state, bank=2000, step=0, ships=None, yards=None):
    if yards is None:
        yards = {"base": BASE}
    state = make_state(step=step, bank=bank, yards=yards, ships=ships or {})
    return state, Grids(state), Actions(state)


def test_fleet_cap_has_a_floor(make_state):
    state, grids, actions = setup(make_state)
    assert Spawns(state).max_ships == 10


def test_spawn_from_main_base(make_state):
    state, grids, actions = setup(make_state, ships={"s": [pos(2, 2), 0]})

    assert Spawns(state).spawn(state, grids, actions)
    assert actions.decided == {"base": "SPAWN"}
    assert grids.reserved[BASE]
    assert state.my_halite == 1000
    assert len(state.my_ships) == 2


def test_spawn_uses_the_first_yard(make_state):
    yards = {"base": BASE, "drop": pos(0, 0)}
    state, grids, actions = setup(make_state, yards=yards)
    assert Spawns(state).spawn(state, grids, actions)
    assert actions.decided == {"base": "SPAWN"}


def test_no_spawn_late_in_the_game(make_state):
    state, grids, actions = setup(make_state, step=260)
    assert not Spawns(state).spawn(state, grids, actions)
    assert actions.decided == {}


def test_no_spawn_without_reserve(make_state):
    state, grids, actions = setup(make_state, bank=1999)
    assert not Spawns(state).spawn(state, grids, actions)
    assert state.my_halite == 1999


def test_no_spawn_with_a_full_fleet(make_state):
    ships = {f"s{i}": [pos(0, 2 * i), 0] for i in range(10)}
    state, grids, actions = setup(make_state, ships=ships)
    assert not Spawns(state).spawn(state, grids, actions)


def test_no_spawn_when_base_is_crowded(make_state):
    ships = {"a": [pos(9, 10), 0], "b": [pos(10, 12), 0],
             "c": [pos(11, 11), 0]}
    state, grids, actions = setup(make_state, ships=ships)
    assert Spawns(state).congestion(state) == 3
    assert not Spawns(state).spawn(state, grids, actions)


def test_no_spawn_onto_a_reserved_base(make_state):
    state, grids, actions = setup(make_state)
    grids.reserve(BASE)
    assert not Spawns(state).spawn(state, grids, actions)


def test_no_spawn_without_a_base(make_state):
    state, grids, actions = setup(make_state, yards={})
    assert not Spawns(state).spawn(state, grids, actions)
