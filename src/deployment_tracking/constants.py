"""Configuration constants for deployment-tracking library."""

# Project subdirectory holding tool state, relative to the project root
PROJECT_DIRECTORY = ".deployment-tracking"

# Tracking database file inside PROJECT_DIRECTORY
TRACKING_FILE = "tracking.json"

# Environment variable overriding the project root
PROJECT_ENV = "DEPLOYMENT_TRACKING_PROJECT"

# Environment variable holding the JSON-RPC endpoint used for chain lookups
DEFAULT_RPC_ENV = "ETH_RPC_URL"

# Separator between chain key and contract key in store paths
PATH_SEPARATOR = "."
