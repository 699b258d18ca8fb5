"""Fleet builder configuration constants."""

# Persisted document
STATE_VERSION = 1
STATE_FILENAME = "vfbuilder.json"

# Environment variables
ENV_STATE_PATH = "VFBUILDER_STATE"
ENV_LOG_LEVEL = "VFBUILDER_LOG_LEVEL"

# Squadron-wide upgrade caps (ships per catalog key)
UNCOMMON_SHIP_LIMIT = 3
RARE_SHIP_LIMIT = 1

# Catalog key that unlocks rear-facing guns
TAILGUNNER_KEY = "tailgunner"
