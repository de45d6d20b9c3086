"""API and sampling configuration constants."""

import os

# Upstream API
API_BASE_URL = os.getenv("RICK_AND_MORTY_API_URL", "https://rickandmortyapi.com/api").rstrip("/")
CHARACTER_ENDPOINT = f"{API_BASE_URL}/character/"

# Total seconds allowed for a single request
REQUEST_TIMEOUT_SECONDS = 15

# Sampling defaults
DEFAULT_CHARACTER_COUNT = 12
DEFAULT_STATUS = ""

# Attempt budget is target_count * MAX_ATTEMPTS_PER_CHARACTER
MAX_ATTEMPTS_PER_CHARACTER = 10

# Status values the API knows about (the filter itself is case-insensitive)
STATUS_ALIVE = "Alive"
STATUS_DEAD = "Dead"
STATUS_UNKNOWN = "unknown"
KNOWN_STATUSES = (STATUS_ALIVE, STATUS_DEAD, STATUS_UNKNOWN)
