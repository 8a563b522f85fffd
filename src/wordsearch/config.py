TOP_K: int = 10

# Fuzzy completion budget, chosen from the query length when the caller
# does not pass an explicit max_distance.
MIN_FUZZY_CHARS: int = 2      # shorter queries get no fuzzy results
SHORT_QUERY_CHARS: int = 3    # up to this many chars -> SHORT_MAX_DIST
SHORT_MAX_DIST: int = 1
LONG_MAX_DIST: int = 2

# Input reading
ENCODING: str = "utf-8"
DEFAULT_FILE: str = "t8.shakespeare.txt"

# /* ~~~ progress logging while indexing (WORDSEARCH_VERBOSE=1) ~~~ */
PROGRESS_EVERY_RECORDS: int = 1000
