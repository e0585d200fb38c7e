import logging

import numpy as np
from scipy.ndimage import convolve

from .settings import (DROPOFF_AREA_RADIUS, DROPOFF_MIN_SHIPS,
                       DROPOFF_MIN_TURNS, DROPOFF_ROI_TURNS,
                       DROPOFF_SHIPS_RADIUS, LOCAL_MAX_TOLERANCE, MAX_DROPOFFS,
                       MIN_DIST_DROPOFF, REQUIRED_AREA_HALITE)

logger = logging.getLogger(__name__)


# total halite in the square of the given radius around every site
def area_halite(state, radius=DROPOFF_AREA_RADIUS):
    grid = state.halite_map.reshape(state.map_size, state.map_size)
    kernel = np.ones((2 * radius + 1, 2 * radius + 1))
    return np.ravel(convolve(grid, kernel, mode="wrap"))


def allied_ships_near(state, pos, radius):
    return int(np.sum(state.dist_from(pos)[state.my_ship_pos] <= radius))


# the larger the map, the longer a dropoff needs to pay for itself
def min_turns_for_dropoff(state):
    return max(DROPOFF_MIN_TURNS, 2 * state.map_size + DROPOFF_ROI_TURNS)


# minimum distance between two deposits, bounded by what the map can fit
def dropoff_spacing(state):
    return min(MIN_DIST_DROPOFF, state.map_size // 2)


def try_build_dropoff(state, grids, actions, ship):
    pos, hal = state.my_ships[ship]
    deposits = state.deposits()

    # dropoffs extend a main base, they do not replace it
    if len(deposits) == 0:
        return False

    # keep enough in the bank that a ship can still be spawned afterwards
    if state.my_halite < state.convert_cost + state.spawn_cost:
        return False

    if state.turns_remaining <= min_turns_for_dropoff(state):
        return False

    if len(deposits) - 1 >= MAX_DROPOFFS:
        return False

    spacing = dropoff_spacing(state)
    if any(state.distance(pos, deposit) < spacing for deposit in deposits):
        return False

    if state.structures[pos]:
        return False

    areas = area_halite(state)
    if areas[pos] < REQUIRED_AREA_HALITE:
        return False

    # the dropoff is only useful if ships are around to use it
    if allied_ships_near(state, pos, DROPOFF_SHIPS_RADIUS) < DROPOFF_MIN_SHIPS:
        return False

    # only build in the middle of the rich area, not on its edge
    for neighbours in (state.north, state.south, state.east, state.west):
        if areas[neighbours[pos]] > areas[pos] + LOCAL_MAX_TOLERANCE:
            return False

    logger.info("step %d: ship %s builds a dropoff at %d (area halite %.0f)",
                state.step, ship, pos, areas[pos])
    actions.decided[ship] = "CONVERT"
    state.update(ship, "CONVERT")
    grids.reserve(pos)
    return True


# bank plus cargo must pay for the yard, and a lone ship also has to leave
# enough behind to spawn its replacement
def legal(ship, state):
    pos, hal = state.my_ships[ship]
    minhal = state.convert_cost - hal
    if len(state.my_ships) == 1:
        minhal += state.spawn_cost
    return (state.my_halite >= minhal) and not state.structures[pos]


def found_base(state, grids, actions):
    # without any yard we convert the ship with the most cargo right away
    if len(state.my_yards) > 0 or len(actions.ships) == 0:
        return False

    ship = max(actions.ships, key=lambda ship: state.my_ships[ship][1])
    if not legal(ship, state):
        return False

    pos, hal = state.my_ships[ship]
    logger.info("step %d: ship %s founds the main base at %d",
                state.step, ship, pos)
    actions.decided[ship] = "CONVERT"
    state.update(ship, "CONVERT")
    # the founder's cargo pays its share, only the rest comes off the bank
    state.my_halite += min(hal, state.convert_cost)
    actions.ships.remove(ship)
    grids.reserve(pos)
    return True
