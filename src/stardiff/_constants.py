"""Internal constants shared across the library."""

U32_MAX = 2**32 - 1

FORK_LABEL = ":gitfork:"
STAR_LABEL = ":star2:"

# Separator between the fork and star lines of a combined text notification.
TEXT_LINE_SEPARATOR = " \n"

ENV_PREFIX = "STARDIFF_"

# Truncation applied to raw payloads before they reach logs or exceptions.
MAX_LOGGED_PAYLOAD = 256
