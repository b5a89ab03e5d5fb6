"""Constants for the poker league scoring engine."""

# Finishing positions that are eligible for points
POINTS_ELIGIBLE_POSITIONS = 10

# Best finish at or inside this position counts as a final table
FINAL_TABLE_SIZE = 8

# Positions counted as a podium finish
TOP_THREE = 3

# Value of a single bounty when no value is configured
DEFAULT_BOUNTY_POINT_VALUE = 1

# Built-in strategy registry keys
WEIGHTED = 'weighted'
FIXED = 'fixed'
PERCENTAGE = 'percentage'
WINNER_TAKES_ALL = 'winner-takes-all'

BUILTIN_STRATEGIES = [WEIGHTED, FIXED, PERCENTAGE, WINNER_TAKES_ALL]

# Weighted scoring: positions paid out by default
DEFAULT_MAX_POINT_POSITIONS = 10

# Fixed scoring: points per finishing position
DEFAULT_FIXED_POINTS_TABLE = {
    1: 100,
    2: 80,
    3: 60,
    4: 50,
    5: 40,
    6: 30,
    7: 25,
    8: 20,
    9: 15,
    10: 10,
}

# Percentage scoring defaults
DEFAULT_MAX_POINTS = 100
DEFAULT_MIN_POINTS_POSITION = 10

# Winner-takes-all default prize
DEFAULT_WINNER_POINTS = 100

# Consolation bracket payouts for ranks 1-3
CONSOLATION_POINTS = (100, 50, 25)
