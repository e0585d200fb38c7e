import numpy as np

from .settings import DROPOFF_COST, MOVE_COST_RATIO, SHIP_CAPACITY, SHIP_COST

DIRECTIONS = ["NORTH", "SOUTH", "EAST", "WEST"]


class State:
    def __init__(self, obs, config):
        # read the game configuration, falling back to halite iii rules for
        # anything the kaggle config does not define
        self.map_size = config.size
        self.total_steps = config.episodeSteps
        self.convert_cost = getattr(config, "convertCost", DROPOFF_COST)
        self.spawn_cost = getattr(config, "spawnCost", SHIP_COST)
        self.ship_capacity = getattr(config, "shipCapacity", SHIP_CAPACITY)
        self.move_cost_ratio = getattr(config, "moveCostRatio",
                                       MOVE_COST_RATIO)

        # step, countdown and halite map
        self.step = obs.step
        self.turns_remaining = self.total_steps - self.step
        self.halite_map = np.array(obs.halite, dtype=float)

        # our halite, yards and ships. copies, since update() changes them
        # while the turn is being decided
        self.my_id = obs.player
        halite, yards, ships = obs.players[self.my_id]
        self.my_halite = halite
        self.my_yards = dict(yards)
        self.my_ships = {ship: list(val) for ship, val in ships.items()}

        self.set_opp_data(obs)

        self.sites = np.arange(self.map_size ** 2)
        self.cols = self.sites % self.map_size
        self.rows = self.sites // self.map_size

        # lookup tables for the effect of moves
        # north[x] is the position north of x, etc.
        self.north = (self.sites - self.map_size) % (self.map_size ** 2)
        self.south = (self.sites + self.map_size) % (self.map_size ** 2)
        self.east = self.sites + 1
        self.east[(self.map_size - 1)::self.map_size] -= self.map_size
        self.west = self.sites - 1
        self.west[0::self.map_size] += self.map_size

        # cells holding a structure of any player
        self.structures = np.full(self.map_size ** 2, False, dtype=bool)
        self.structures[self.opp_yard_pos] = True

        self.set_derived()
        return

    def set_opp_data(self, obs):
        self.opp_ids = list(range(0, len(obs.players)))
        self.opp_ids.remove(self.my_id)

        # joint ships and yards of all opponents, only positions matter
        opp_ships = {}
        opp_yards = {}
        for opp in self.opp_ids:
            opp_yards.update(obs.players[opp][1])
            opp_ships.update(obs.players[opp][2])

        self.opp_ship_pos = np.array([val[0] for val in opp_ships.values()],
                                     dtype=int)
        self.opp_yard_pos = np.array(list(opp_yards.values()), dtype=int)
        return

    # arrays derived from my_ships / my_yards. set by init() and refreshed
    # by update()
    def set_derived(self):
        self.my_ship_pos = np.array([val[0] for val in self.my_ships.values()],
                                    dtype=int)
        self.my_ship_hal = np.array([val[1] for val in self.my_ships.values()],
                                    dtype=float)
        self.my_yard_pos = np.array(list(self.my_yards.values()), dtype=int)
        self.structures[self.my_yard_pos] = True
        return

    def main_base(self):
        # the first yard we own is the one that produces ships
        for yard, pos in self.my_yards.items():
            return yard, pos
        return None, None

    def deposits(self):
        # main base first, then the dropoffs in the order they were built
        return list(self.my_yards.values())

    def distance(self, a, b):
        dx = abs(a % self.map_size - b % self.map_size)
        dy = abs(a // self.map_size - b // self.map_size)
        return min(dx, self.map_size - dx) + min(dy, self.map_size - dy)

    def dist_from(self, pos):
        # l1 distance on the torus from pos to every site
        coldist = np.abs(self.cols - self.cols[pos])
        rowdist = np.abs(self.rows - self.rows[pos])
        coldist = np.fmin(coldist, self.map_size - coldist)
        rowdist = np.fmin(rowdist, self.map_size - rowdist)
        return coldist + rowdist

    def move_to_pos(self, initial, move):
        if move == "NORTH":
            return self.north[initial]
        elif move == "SOUTH":
            return self.south[initial]
        elif move == "EAST":
            return self.east[initial]
        elif move == "WEST":
            return self.west[initial]
        else:
            return initial

    def update(self, actor, action):
        # for a yard only a spawn changes the state
        if (actor in self.my_yards) and (action == "SPAWN"):
            newid = f"spawn[{actor}]"
            pos = self.my_yards[actor]
            self.my_ships[newid] = [pos, 0]
            self.my_halite -= self.spawn_cost

        elif actor in self.my_ships:
            pos, hal = self.my_ships[actor]

            if action == "CONVERT":
                # new yard at the ship's position, the ship is gone. the
                # full cost comes off the bank so that no other ship can
                # spend the same halite this turn
                self.my_yards[actor] = pos
                del self.my_ships[actor]
                self.my_halite -= self.convert_cost
                self.halite_map[pos] = 0
            else:
                self.my_ships[actor] = [int(self.move_to_pos(pos, action)), hal]

        self.set_derived()
        return
