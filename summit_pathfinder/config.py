# config.py
START_MARKER = "S"
GOAL_MARKER = "E"

# 'a' -> 0 ... 'z' -> 25; S sits at the bottom, E at the top
MIN_ELEVATION = 0
MAX_ELEVATION = 25

# A single step may climb at most this many levels; descending is unbounded
MAX_CLIMB = 1

# Marker for cells a search never reached in a distance field
UNREACHED = -1

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
DEFAULT_LOG_LEVEL = "WARNING"
