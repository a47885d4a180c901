# constants.py

MONTHS_PER_YEAR: int = 12

DEFAULT_RETIREMENT_AGE: int = 67
DEFAULT_MAX_AGE: int = 95
DEFAULT_YEARS_IN_RETIREMENT: int = 30

DEFAULT_SECONDARY_MONTHLY_CONTRIBUTION: float = 200.0
DEFAULT_ANNUAL_RETURN_RATE_PERCENT: float = 7.0
DEFAULT_WITHDRAWAL_RATE_PERCENT: float = 4.0

SOLVER_SEARCH_LOW: float = -1_000_000.0
SOLVER_SEARCH_HIGH: float = 1_000_000.0
SOLVER_ITERATIONS: int = 40

DECAY_EXPONENT: float = 1.5
DECAY_DAMPING: float = 0.8

DECAY_CURVE_NAMES = ("power", "linear", "flat")
