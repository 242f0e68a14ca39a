"""Default limits for the LRU cache."""

import math

DEFAULT_MAX_SIZE = 100
DEFAULT_MAX_AGE_SECONDS = math.inf  # Entries never expire unless configured.
ENV_PREFIX = "LRU_CACHE_"
