import logging
import time

from .convert import found_base, try_build_dropoff
from .grids import Grids
from .memory import Memory, Status
from .move import (apply_move_cost_safety, decide_returning_direction,
                   finalize_and_reserve, update_ship_state)
from .spawns import Spawns
from .state import State
from .targets import decide_mining_direction

logger = logging.getLogger(__name__)


# holds the ships / yards still waiting for a decision, and the actions
# decided so far in the order they were decided
class Actions:
    def __init__(self, state):
        self.decided = {}
        self.ships = list(state.my_ships)
        self.yards = list(state.my_yards)
        return

    def commands(self):
        # every decision including the ships that stay (None)
        return list(self.decided.items())

    def asdict(self):
        return {k: v for k, v in self.decided.items() if v is not None}


# status and mining target of every ship, kept between turns
ship_memory = Memory()


def decide_ship(state, grids, memory, actions, ship):
    pos, hal = state.my_ships[ship]

    # building a dropoff takes the whole turn
    if try_build_dropoff(state, grids, actions, ship):
        return

    # the ship's own cell is free while it decides
    grids.release(pos)

    status = update_ship_state(state, memory, ship)
    if status is Status.RETURNING:
        direction = decide_returning_direction(state, grids, ship)
    else:
        direction = decide_mining_direction(state, grids, memory, ship)

    direction = apply_move_cost_safety(state, ship, direction)
    direction = finalize_and_reserve(state, grids, ship, direction)

    actions.decided[ship] = direction
    state.update(ship, direction)
    return


def play_turn(state, memory):
    started = time.perf_counter()

    actions = Actions(state)

    # drop memory of ships that were destroyed or converted
    memory.prune(state.my_ships)
    for ship, (pos, hal) in state.my_ships.items():
        memory.ensure_initialized(ship, pos)

    grids = Grids(state)

    # without a yard there is nowhere to deliver, so found one first
    found_base(state, grids, actions)

    # ships are decided one by one in snapshot order, each one sees the
    # cells reserved by the ships before it
    for ship in actions.ships:
        decide_ship(state, grids, memory, actions, ship)
    actions.ships.clear()

    Spawns(state).spawn(state, grids, actions)

    logger.debug("step %d: %d commands in %.1f ms", state.step,
                 len(actions.decided), 1000 * (time.perf_counter() - started))
    return actions


def agent(obs, config):
    # read (obs, config) into the internal game state
    state = State(obs, config)
    actions = play_turn(state, ship_memory)
    return actions.asdict()
