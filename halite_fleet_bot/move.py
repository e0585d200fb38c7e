import numpy as np

from .memory import Status
from .settings import ALLOW_DETOUR, FULL_CARGO_RATIO, RETURN_SAFETY_MARGIN
from .state import DIRECTIONS


def nearest_deposit(state, pos):
    # ties keep the first deposit found, the main base comes first
    best_pos = None
    best_dist = None
    for deposit in state.deposits():
        dist = state.distance(pos, deposit)
        if best_dist is None or dist < best_dist:
            best_dist = dist
            best_pos = deposit
    return best_pos


def update_ship_state(state, memory, ship):
    # endgame recall first, then arrival or empty cargo for returning
    # ships, then full cargo for mining ships
    pos, hal = state.my_ships[ship]
    deposit = nearest_deposit(state, pos)

    # nowhere to return to yet
    if deposit is None:
        return memory.status[ship]

    # endgame recall: head home while there is still time to get there
    if state.turns_remaining < state.distance(pos, deposit) + RETURN_SAFETY_MARGIN:
        memory.status[ship] = Status.RETURNING

    if memory.status[ship] is Status.RETURNING:
        # home, or nothing to deliver
        if pos == deposit or hal == 0:
            memory.status[ship] = Status.MINING
    elif hal >= FULL_CARGO_RATIO * state.ship_capacity:
        memory.status[ship] = Status.RETURNING

    return memory.status[ship]


def direct_moves(state, pos, target):
    # the one or two moves that shorten the wrapped distance to target,
    # along the longer axis first
    size = state.map_size
    east = (state.cols[target] - state.cols[pos]) % size
    south = (state.rows[target] - state.rows[pos]) % size

    moves = []
    if east != 0:
        if east <= size - east:
            moves.append((east, "EAST"))
        else:
            moves.append((size - east, "WEST"))
    if south != 0:
        if south <= size - south:
            moves.append((south, "SOUTH"))
        else:
            moves.append((size - south, "NORTH"))

    if len(moves) == 2 and moves[1][0] > moves[0][0]:
        moves.reverse()
    return [move for dist, move in moves]


def smart_navigate(state, grids, pos, target, allow_detour=ALLOW_DETOUR):
    if pos == target:
        return None

    for move in direct_moves(state, pos, target):
        if not grids.reserved[state.move_to_pos(pos, move)]:
            return move

    if not allow_detour:
        return None

    # both direct moves are blocked. take the free neighbour closest to the
    # target, even if it is further away than where we stand
    best_move = None
    best_key = None
    for move in DIRECTIONS:
        npos = state.move_to_pos(pos, move)
        if grids.reserved[npos]:
            continue
        key = (state.distance(npos, target), bool(grids.danger[npos]))
        if best_key is None or key < best_key:
            best_key = key
            best_move = move
    return best_move


def decide_returning_direction(state, grids, ship):
    pos, hal = state.my_ships[ship]
    deposit = nearest_deposit(state, pos)

    if deposit is None:
        return None

    if pos != deposit:
        return smart_navigate(state, grids, pos, deposit)

    # standing on the deposit - step off to let the next ship land, onto
    # the free neighbour that is cheapest to leave again
    best_move = None
    best_key = None
    for move in DIRECTIONS:
        npos = state.move_to_pos(pos, move)
        if grids.reserved[npos]:
            continue
        key = (state.halite_map[npos], bool(grids.danger[npos]))
        if best_key is None or key < best_key:
            best_key = key
            best_move = move
    return best_move


def move_cost(state, pos):
    return int(np.ceil(state.halite_map[pos] / state.move_cost_ratio))


def apply_move_cost_safety(state, ship, direction):
    # never issue a move the ship cannot pay for
    if direction is None:
        return None
    pos, hal = state.my_ships[ship]
    if hal < move_cost(state, pos):
        return None
    return direction


def finalize_and_reserve(state, grids, ship, direction):
    pos, hal = state.my_ships[ship]
    final = state.move_to_pos(pos, direction)

    # a ship decided earlier this turn took the cell, stay instead
    if direction is not None and grids.reserved[final]:
        direction = None
        final = pos

    grids.reserve(final)
    return direction
