# game rules that the kaggle config may not carry (halite iii values)
SHIP_CAPACITY = 1000
MOVE_COST_RATIO = 10
DROPOFF_COST = 4000
SHIP_COST = 1000

# returning home
FULL_CARGO_RATIO = 0.95
RETURN_SAFETY_MARGIN = 10

# when both direct moves are blocked, step to the free neighbour closest to
# the target even if that takes the ship further away
ALLOW_DETOUR = True

# mining targets
SEARCH_RADIUS = 8
MIN_TARGET_HALITE = 120
STAY_MINE_THRESHOLD = 100
POOR_CELL_PENALTY = 0.25
CLAIM_SCORE_RATIO = 0.75

# inspiration (>= 2 enemy ships within manhattan distance 4)
INSPIRATION_RADIUS = 4
INSPIRATION_SHIPS_REQUIRED = 2
INSPIRATION_COUNT_CAP = 255
INSPIRED_MULTIPLIER = 3

# dropoffs
MAX_DROPOFFS = 3
MIN_DIST_DROPOFF = 15
DROPOFF_MIN_TURNS = 100
DROPOFF_ROI_TURNS = 20
DROPOFF_AREA_RADIUS = 4
REQUIRED_AREA_HALITE = 10000
DROPOFF_SHIPS_RADIUS = 5
DROPOFF_MIN_SHIPS = 2
LOCAL_MAX_TOLERANCE = 500

# spawning
MIN_SHIPS = 10
SHIP_AREA_RATIO = 170
STOP_SPAWN_TURNS = 140
HALITE_RESERVE = 1000
CONGESTION_RADIUS = 2
CONGESTION_LIMIT = 3
