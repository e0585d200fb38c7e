import numpy as np
from scipy.ndimage import convolve

from .settings import (INSPIRATION_COUNT_CAP, INSPIRATION_RADIUS,
                       INSPIRATION_SHIPS_REQUIRED, INSPIRED_MULTIPLIER)


def diamond(radius):
    # kernel covering every offset within manhattan distance radius
    offsets = np.abs(np.arange(-radius, radius + 1))
    return (offsets[:, np.newaxis] + offsets[np.newaxis, :] <= radius).astype(int)


# per-turn overlays over the map, one flat boolean array per concern
#   reserved - cell will be occupied next turn (enemy, committed ally or
#              ally that has not been decided yet)
#   danger   - cell is within one step of an enemy ship, advisory only
#   inspired - enough enemy ships nearby for the inspiration bonus
#   claimed  - mining target already taken by another ship this turn
class Grids:
    def __init__(self, state, count_cap=INSPIRATION_COUNT_CAP):
        nsites = state.map_size ** 2
        self.reserved = np.full(nsites, False, dtype=bool)
        self.danger = np.full(nsites, False, dtype=bool)
        self.claimed = np.full(nsites, False, dtype=bool)

        # enemy ships keep their cell and may step on any neighbour. we
        # cannot know their intent, so the neighbours are only dangerous
        self.reserved[state.opp_ship_pos] = True
        self.danger[state.opp_ship_pos] = True
        for neighbours in (state.north, state.south, state.east, state.west):
            self.danger[neighbours[state.opp_ship_pos]] = True

        # count enemy ships within INSPIRATION_RADIUS of every cell
        presence = np.zeros(nsites, dtype=int)
        np.add.at(presence, state.opp_ship_pos, 1)
        presence = presence.reshape(state.map_size, state.map_size)
        counts = convolve(presence, diamond(INSPIRATION_RADIUS), mode="wrap")
        self.enemy_count = np.minimum(np.ravel(counts), count_cap)
        self.inspired = self.enemy_count >= INSPIRATION_SHIPS_REQUIRED

        # halite a ship would effectively mine, used for every threshold and
        # score so that raw and inspired values are never compared
        self.effective_halite = np.where(
            self.inspired, state.halite_map * INSPIRED_MULTIPLIER,
            state.halite_map)

        # our own ships hold their cell until they are decided
        self.reserved[state.my_ship_pos] = True
        return

    def reserve(self, pos):
        self.reserved[pos] = True

    # only for the ship that is being decided: its own cell is free while it
    # thinks and is reserved again by finalization if it stays
    def release(self, pos):
        self.reserved[pos] = False

    def claim(self, pos):
        self.claimed[pos] = True
