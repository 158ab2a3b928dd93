"""Context window thresholds and display constants."""

# Claude Code compacts the conversation at 80% of the context window,
# so usage is reported against that limit rather than the full window.
AUTO_COMPACT_PERCENT = 80

# Percentage bands: green below YELLOW_THRESHOLD, red from RED_THRESHOLD
YELLOW_THRESHOLD = 70
RED_THRESHOLD = 90

# ANSI colour codes
GREEN = "\033[32m"
YELLOW = "\033[33m"
RED = "\033[31m"
RESET = "\033[0m"

DEFAULT_MODEL_NAME = "Unknown"
DEFAULT_DIRECTORY = "."

# Token counters are unsigned 64-bit values in the payload
MAX_TOKEN_COUNT = 2**64 - 1
