"""Library configuration constants."""

from __future__ import annotations
import os

# Random integers
RANDOM_INT_DEFAULT_HIGH = 2  # random_int() draws from [0, 2)

# random_interval defaults
RANDOM_INTERVAL_AVERAGE = 0.5
RANDOM_INTERVAL_SPREAD = 0.5

# Box-Muller rescale: z / NORMAL_SPREAD_DIVISOR + 0.5
NORMAL_SPREAD_DIVISOR = 10.0
NORMAL_MAX_RETRIES = 1000

# Shared random source (None = seed from OS entropy)
DEFAULT_SEED = None

# Host environment
MOBILE_UA_PATTERN = r"Android|webOS|iPhone|iPad|iPod|BlackBerry|IEMobile|Opera Mini"
USER_AGENT_ENV = "SKETCHMATH_USER_AGENT"

# Hex formatting
HEX_PREFIX = "0x"

# Diagnostics
LOG_ENV = "SKETCHMATH_LOG"
LOG_ENABLED = os.environ.get(LOG_ENV, "").strip().lower() in ("1", "true", "yes")
