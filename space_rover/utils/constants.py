"""Game configuration constants."""

# Board dimensions (offset tiles)
GRID_COLUMNS = 16
GRID_ROWS = 12

# Ships
FUEL_CAPACITY = 20  # Burns per full tank
FUEL_PER_BURN = 1

# Scenario limits
MIN_PLAYERS = 1
MAX_PLAYERS = 6

# Map generation
NUM_RANDOM_PLANETS = 4
MIN_PLANET_SPACING = 4  # Hex distance between planet centres
START_ROWS = (0, 1)  # Rows ships may start on

# Testing
RNG_SEED_DEFAULT = 42  # Default seed for testing
