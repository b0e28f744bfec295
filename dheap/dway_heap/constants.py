MIN_BRANCHING_FACTOR = 2
DEFAULT_BRANCHING_FACTOR = 2
MAX_BRANCHING_FACTOR = 10
