from enum import Enum


class Status(Enum):
    MINING = "MINING"
    RETURNING = "RETURNING"


# what we remember about our ships between turns. lives as long as the
# process, entries live as long as the ship
class Memory:
    def __init__(self):
        self.status = {}
        self.target = {}
        return

    def prune(self, ships):
        # forget ships that are no longer in the snapshot
        for ship in [ship for ship in self.status if ship not in ships]:
            del self.status[ship]
        for ship in [ship for ship in self.target if ship not in ships]:
            del self.target[ship]
        return

    def ensure_initialized(self, ship, pos):
        # a ship we have never seen starts mining where it stands
        self.status.setdefault(ship, Status.MINING)
        self.target.setdefault(ship, pos)
        return
