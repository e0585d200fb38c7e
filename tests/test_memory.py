from halite_fleet_bot.memory import Memory, Status


def test_new_ship_starts_mining_at_its_position():
    memory = Memory()
    memory.ensure_initialized("1-1", 42)
    assert memory.status["1-1"] is Status.MINING
    assert memory.target["1-1"] == 42


def test_ensure_initialized_does_not_overwrite():
    memory = Memory()
    memory.ensure_initialized("1-1", 42)
    memory.status["1-1"] = Status.RETURNING
    memory.target["1-1"] = 7

    memory.ensure_initialized("1-1", 99)

    assert memory.status["1-1"] is Status.RETURNING
    assert memory.target["1-1"] == 7


def test_prune_forgets_missing_ships_only():
    memory = Memory()
    memory.ensure_initialized("1-1", 1)
    memory.ensure_initialized("2-1", 2)

    memory.prune({"2-1": [2, 0]})

    assert set(memory.status) == {"2-1"}
    assert set(memory.target) == {"2-1"}


def test_prune_of_unknown_ships_is_harmless():
    memory = Memory()
    memory.prune({"9-1": [0, 0]})
    assert memory.status == {}
    assert memory.target == {}
