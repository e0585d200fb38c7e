import logging

import numpy as np

from .settings import (CONGESTION_LIMIT, CONGESTION_RADIUS, HALITE_RESERVE,
                       MIN_SHIPS, SHIP_AREA_RATIO, STOP_SPAWN_TURNS)

logger = logging.getLogger(__name__)


class Spawns:
    def __init__(self, state):
        # fleet cap grows with the map area so small maps do not jam
        self.max_ships = max(MIN_SHIPS, state.map_size ** 2 // SHIP_AREA_RATIO)
        self.yard, self.yard_pos = state.main_base()
        return

    def congestion(self, state):
        # our ships close to the main base
        if self.yard_pos is None:
            return 0
        dists = state.dist_from(self.yard_pos)[state.my_ship_pos]
        return int(np.sum(dists <= CONGESTION_RADIUS))

    def should_spawn(self, state, grids):
        if self.yard_pos is None:
            return False
        # spawned ships would not pay back late in the game
        if state.turns_remaining <= STOP_SPAWN_TURNS:
            return False
        if len(state.my_ships) >= self.max_ships:
            return False
        if state.my_halite < state.spawn_cost + HALITE_RESERVE:
            return False
        if self.congestion(state) >= CONGESTION_LIMIT:
            return False
        # a ship will be on the base next turn
        return not grids.reserved[self.yard_pos]

    def spawn(self, state, grids, actions):
        if not self.should_spawn(state, grids):
            return False

        logger.info("step %d: spawning at %d (%d ships, bank %d)",
                    state.step, self.yard_pos, len(state.my_ships),
                    state.my_halite)
        actions.decided[self.yard] = "SPAWN"
        state.update(self.yard, "SPAWN")
        grids.reserve(self.yard_pos)
        actions.yards.clear()
        return True
