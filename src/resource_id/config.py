# Shared constants for resource identifiers

# 8 bytes (64 bits) fits a database BIGINT column. Use 15-16 bytes where
# global uniqueness matters.
DEFAULT_SIZE_IN_BYTES = 8

PATH_SEPARATOR = "/"

# --- Environment ---
# Read by setup_logging() and by the CLI option defaults.
LOG_LEVEL_ENV = "RESOURCE_ID_LOG_LEVEL"
SIZE_ENV = "RESOURCE_ID_SIZE"
DEFAULT_LOG_LEVEL = "WARNING"
