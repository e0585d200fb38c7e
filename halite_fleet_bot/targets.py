import numpy as np

from .move import smart_navigate
from .settings import (CLAIM_SCORE_RATIO, MIN_TARGET_HALITE, POOR_CELL_PENALTY,
                       SEARCH_RADIUS, STAY_MINE_THRESHOLD)


def search_square(state, pos, radius=SEARCH_RADIUS):
    # sites of the square around pos, row by row from the north-west corner
    offsets = np.arange(-radius, radius + 1)
    rows = (state.rows[pos] + offsets[:, np.newaxis]) % state.map_size
    cols = (state.cols[pos] + offsets[np.newaxis, :]) % state.map_size
    return np.ravel(rows * state.map_size + cols)


def pick_mining_target(state, grids, pos):
    candidates = search_square(state, pos)

    # halite per step it takes to get there, poor cells are discouraged but
    # still allowed
    halite = grids.effective_halite[candidates]
    dists = state.dist_from(pos)[candidates]
    scores = halite / (dists + 1)
    scores[halite < MIN_TARGET_HALITE] *= POOR_CELL_PENALTY

    # argmax keeps the first cell found on ties
    best = scores.argmax()

    # do not pile onto a cell another ship is already heading for if there
    # is an unclaimed cell that is almost as good
    if grids.claimed[candidates[best]]:
        free = np.flatnonzero(~grids.claimed[candidates])
        if free.size > 0:
            alternative = free[scores[free].argmax()]
            if scores[alternative] >= CLAIM_SCORE_RATIO * scores[best]:
                best = alternative

    return int(candidates[best])


def decide_mining_direction(state, grids, memory, ship):
    pos, hal = state.my_ships[ship]

    # current cell is rich enough, stay and mine
    if grids.effective_halite[pos] >= STAY_MINE_THRESHOLD:
        grids.claim(pos)
        return None

    # pick a new target if we got there, it ran dry, or someone else
    # took it this turn
    target = memory.target[ship]
    if ((pos == target)
            or (grids.effective_halite[target] < MIN_TARGET_HALITE)
            or grids.claimed[target]):
        target = pick_mining_target(state, grids, pos)
        memory.target[ship] = target

    grids.claim(target)
    return smart_navigate(state, grids, pos, target)
